"""Relatório de ordens de serviço a receber."""

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gestao_os.core.clock import get_now
from gestao_os.core.database import get_db
from gestao_os.core.security import get_current_user
from gestao_os.models import RecebimentoParcial
from gestao_os.routers.ordens import list_ordens_query
from gestao_os.schemas import ContaReceberLinha, RelatorioContasReceber
from gestao_os.services import financeiro
from gestao_os.services.colecoes import load_collection

router = APIRouter(prefix="/api/relatorios", tags=["Relatórios"], dependencies=[Depends(get_current_user)])


@router.get("/contas-receber", response_model=RelatorioContasReceber)
def relatorio_contas_receber(
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> RelatorioContasReceber:
    ordens = load_collection(db, list_ordens_query(db), "ordens")
    recebimentos = load_collection(db, db.query(RecebimentoParcial), "recebimentos")

    linhas: List[ContaReceberLinha] = []
    for ordem in ordens:
        pendente = financeiro.pending_value(ordem)
        recebido = financeiro.received_total(ordem.id, recebimentos)
        saldo = pendente - recebido
        if saldo <= 0:
            continue
        linhas.append(
            ContaReceberLinha(
                ordemId=ordem.id,
                numero=ordem.numero,
                cliente=(ordem.cliente or {}).get("nome", ""),
                referencia=ordem.referencia,
                dataEntrega=ordem.data_entrega,
                valorPendente=pendente,
                valorRecebido=recebido,
                saldo=saldo,
            )
        )

    return RelatorioContasReceber(
        geradoEm=now,
        linhas=linhas,
        totalReceber=financeiro.total_outstanding(ordens, recebimentos),
    )
