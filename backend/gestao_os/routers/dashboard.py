"""Dashboard figures and the revenue chart."""

from datetime import date, datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from gestao_os.core.clock import get_now, get_today
from gestao_os.core.database import get_db
from gestao_os.core.security import get_current_user
from gestao_os.models import Cliente, RecebimentoParcial
from gestao_os.routers.ordens import list_ordens_query
from gestao_os.schemas import DashboardResumo, GraficoOut
from gestao_os.services import financeiro
from gestao_os.services.colecoes import load_collection
from gestao_os.services.series import Periodo, revenue_series

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"], dependencies=[Depends(get_current_user)])


@router.get("/resumo", response_model=DashboardResumo)
def resumo(db: Session = Depends(get_db), today: date = Depends(get_today)) -> DashboardResumo:
    # Each collection fails independently: a broken one just counts as empty.
    clientes = load_collection(db, db.query(Cliente.id), "clientes")
    ordens = load_collection(db, list_ordens_query(db), "ordens")
    recebimentos = load_collection(db, db.query(RecebimentoParcial), "recebimentos")

    return DashboardResumo(
        totalClientes=len(clientes),
        totalOrdens=len(ordens),
        ordensEmAtraso=financeiro.count_overdue(ordens, today),
        valorTotalOS=financeiro.total_value(ordens),
        valorTotalPendente=financeiro.total_pending(ordens),
        valorTotalReceber=financeiro.total_outstanding(ordens, recebimentos),
    )


@router.get("/grafico", response_model=GraficoOut)
def grafico(
    periodo: Periodo = Query("diario"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> GraficoOut:
    ordens = load_collection(db, list_ordens_query(db), "ordens")
    serie = revenue_series(ordens, periodo, now)
    return GraficoOut(periodo=serie.periodo, labels=serie.labels, valores=serie.valores)
