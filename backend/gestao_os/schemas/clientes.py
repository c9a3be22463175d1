"""Schemas for Cliente entities."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, ValidatorFunctionWrapHandler, field_validator

from gestao_os.schemas import _validators as check


class Endereco(BaseModel):
    rua: str
    numero: str
    complemento: Optional[str] = None
    bairro: str
    cidade: str
    estado: str
    cep: str

    @field_validator("rua")
    @classmethod
    def rua_required(cls, value: str) -> str:
        return check.min_length(value, 1, "Rua é obrigatória")

    @field_validator("numero")
    @classmethod
    def numero_required(cls, value: str) -> str:
        return check.min_length(value, 1, "Número é obrigatório")

    @field_validator("bairro")
    @classmethod
    def bairro_required(cls, value: str) -> str:
        return check.min_length(value, 1, "Bairro é obrigatório")

    @field_validator("cidade")
    @classmethod
    def cidade_required(cls, value: str) -> str:
        return check.min_length(value, 1, "Cidade é obrigatória")

    @field_validator("estado")
    @classmethod
    def estado_required(cls, value: str) -> str:
        return check.min_length(value, 2, "Estado é obrigatório")

    @field_validator("cep")
    @classmethod
    def cep_valid(cls, value: str) -> str:
        return check.min_length(value, 8, "CEP inválido")


class ClienteBase(BaseModel):
    nome: str
    cpfCnpj: str
    telefone: str
    email: EmailStr
    endereco: Endereco

    @field_validator("nome")
    @classmethod
    def nome_required(cls, value: str) -> str:
        return check.min_length(value, 1, "Nome é obrigatório")

    @field_validator("cpfCnpj")
    @classmethod
    def cpf_cnpj_valid(cls, value: str) -> str:
        return check.min_length(value, 11, "CPF/CNPJ inválido")

    @field_validator("telefone")
    @classmethod
    def telefone_valid(cls, value: str) -> str:
        return check.min_length(value, 10, "Telefone inválido")

    @field_validator("email", mode="wrap")
    @classmethod
    def email_valid(cls, value: object, handler: ValidatorFunctionWrapHandler) -> str:
        return check.email(value, handler)


class ClienteCreate(ClienteBase):
    pass


class ClienteSnapshot(BaseModel):
    """Copy of the client embedded in an order; never refreshed afterwards."""

    id: Optional[int] = None
    nome: str
    cpfCnpj: str
    telefone: str
    email: str
    endereco: Endereco


class ClienteOut(ClienteBase):
    id: int
    createdAt: datetime
    updatedAt: datetime

    model_config = ConfigDict(from_attributes=True)
