"""Schemas for the dashboard."""

from decimal import Decimal
from typing import List

from pydantic import BaseModel


class DashboardResumo(BaseModel):
    totalClientes: int
    totalOrdens: int
    ordensEmAtraso: int
    valorTotalOS: Decimal
    valorTotalPendente: Decimal
    valorTotalReceber: Decimal


class GraficoOut(BaseModel):
    periodo: str
    labels: List[str]
    valores: List[Decimal]
