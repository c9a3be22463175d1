"""Schemas for RecebimentoParcial entities."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from gestao_os.schemas import _validators as check


class RecebimentoBase(BaseModel):
    ordemId: int
    valor: Decimal
    data: date
    observacao: Optional[str] = None

    @field_validator("valor")
    @classmethod
    def valor_positive(cls, value: Decimal) -> Decimal:
        return check.money(value, "Valor deve ser maior que zero", Decimal("0"), strict=True)


class RecebimentoCreate(RecebimentoBase):
    pass


class RecebimentoUpdate(RecebimentoBase):
    pass


class RecebimentoOut(RecebimentoBase):
    id: int
    createdAt: datetime
    updatedAt: datetime

    model_config = ConfigDict(from_attributes=True)


class RecebimentoLinha(RecebimentoOut):
    ordemNumero: str
    ordemReferencia: str
    clienteNome: str


class OrdemAReceber(BaseModel):
    """Entry of the order picker on the receipts screen."""

    id: int
    numero: str
    referencia: str
    clienteNome: str
    saldo: Decimal
