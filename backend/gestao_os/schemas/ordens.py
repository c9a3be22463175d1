"""Schemas for OrdemServico entities."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from gestao_os.schemas import _validators as check
from gestao_os.schemas.clientes import ClienteSnapshot

StatusPagamento = Literal["PENDENTE", "PAGO"]
StatusProducao = Literal["AGUARDANDO", "EM_PRODUCAO", "CONCLUIDO"]


class ServicoBase(BaseModel):
    descricao: str
    quantidade: int = 1
    valorUnitario: Decimal = Decimal("0.00")
    statusPagamento: StatusPagamento = "PENDENTE"
    statusProducao: StatusProducao = "AGUARDANDO"


class ServicoIn(ServicoBase):
    # Sent by the form; always recomputed from quantidade and valorUnitario.
    valorTotal: Optional[Decimal] = None

    @field_validator("descricao")
    @classmethod
    def descricao_required(cls, value: str) -> str:
        return check.min_length(value, 1, "Descrição é obrigatória")

    @field_validator("quantidade")
    @classmethod
    def quantidade_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Quantidade deve ser maior que 0")
        return value

    @field_validator("valorUnitario")
    @classmethod
    def valor_unitario_valid(cls, value: Decimal) -> Decimal:
        return check.money(value, "Valor unitário deve ser maior ou igual a 0", Decimal("0"))


class ServicoOut(ServicoBase):
    valorTotal: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrdemBase(BaseModel):
    referencia: str
    clienteId: int
    dataEntrega: date
    servicos: List[ServicoIn]

    @field_validator("referencia")
    @classmethod
    def referencia_required(cls, value: str) -> str:
        return check.min_length(value, 1, "Referência é obrigatória")

    @field_validator("servicos")
    @classmethod
    def servicos_not_empty(cls, value: List[ServicoIn]) -> List[ServicoIn]:
        if not value:
            raise ValueError("Adicione pelo menos um serviço")
        return value


class OrdemCreate(OrdemBase):
    dataEmissao: Optional[datetime] = None


class OrdemUpdate(OrdemBase):
    numero: Optional[str] = None

    @field_validator("numero")
    @classmethod
    def numero_digits(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = check.min_length(value, 1, "Número da OS é obrigatório")
        if not value.isdigit():
            raise ValueError("Número da OS deve conter apenas dígitos")
        return value.zfill(5)


class OrdemOut(BaseModel):
    id: int
    numero: str
    referencia: str
    cliente: ClienteSnapshot
    dataEmissao: datetime
    dataEntrega: date
    servicos: List[ServicoOut]
    valorTotal: Decimal
    createdAt: datetime
    updatedAt: datetime

    model_config = ConfigDict(from_attributes=True)


class OrdemFinanceiroOut(BaseModel):
    ordemId: int
    numero: str
    valorTotal: Decimal
    valorPendente: Decimal
    valorRecebido: Decimal
    saldo: Decimal
    emAtraso: bool


class ProximoNumeroOut(BaseModel):
    numero: str
