"""Schemas para respostas de relatórios."""

from datetime import date, datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel


class ContaReceberLinha(BaseModel):
    ordemId: int
    numero: str
    cliente: str
    referencia: str
    dataEntrega: date
    valorPendente: Decimal
    valorRecebido: Decimal
    saldo: Decimal


class RelatorioContasReceber(BaseModel):
    geradoEm: datetime
    linhas: List[ContaReceberLinha]
    totalReceber: Decimal
