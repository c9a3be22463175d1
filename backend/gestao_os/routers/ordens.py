"""Rotas para CRUD de ordens de serviço."""

import logging
from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from gestao_os.core.clock import get_now, get_today
from gestao_os.core.database import get_db
from gestao_os.core.security import get_current_user
from gestao_os.models import Cliente, OrdemServico, RecebimentoParcial, Servico
from gestao_os.routers.clientes import snapshot_cliente
from gestao_os.schemas import (
    OrdemCreate,
    OrdemFinanceiroOut,
    OrdemOut,
    OrdemUpdate,
    ProximoNumeroOut,
    ServicoIn,
    ServicoOut,
)
from gestao_os.services import financeiro
from gestao_os.services.colecoes import load_collection, search
from gestao_os.services.numeracao import assign_order_number

logger = logging.getLogger("gestao_os.ordens")

router = APIRouter(prefix="/api/ordens", tags=["Ordens de Serviço"], dependencies=[Depends(get_current_user)])


# Helpers --------------------------------------------------------------------

def _local_naive(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def _build_servicos(servicos: List[ServicoIn]) -> List[Servico]:
    itens = []
    for posicao, servico in enumerate(servicos):
        item = Servico(
            posicao=posicao,
            descricao=servico.descricao,
            quantidade=servico.quantidade,
            valor_unitario=servico.valorUnitario,
            status_pagamento=servico.statusPagamento,
            status_producao=servico.statusProducao,
        )
        item.valor_total = financeiro.item_total(item)
        itens.append(item)
    return itens


def _get_cliente(cliente_id: int, db: Session) -> Cliente:
    cliente = db.get(Cliente, cliente_id)
    if not cliente:
        raise HTTPException(status_code=400, detail="Cliente não encontrado.")
    return cliente


def _get_ordem(ordem_id: int, db: Session) -> OrdemServico:
    ordem = (
        db.query(OrdemServico)
        .options(selectinload(OrdemServico.servicos))
        .filter(OrdemServico.id == ordem_id)
        .first()
    )
    if not ordem:
        raise HTTPException(status_code=404, detail="Ordem de serviço não encontrada.")
    return ordem


def _commit(db: Session, ordem: OrdemServico, acao: str) -> None:
    try:
        db.commit()
        db.refresh(ordem)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Erro ao %s OS", acao)
        raise HTTPException(status_code=500, detail=f"Erro ao {acao} OS.") from exc


def serialize_ordem(ordem: OrdemServico) -> OrdemOut:
    return OrdemOut(
        id=ordem.id,
        numero=ordem.numero,
        referencia=ordem.referencia,
        cliente=ordem.cliente,
        dataEmissao=ordem.data_emissao,
        dataEntrega=ordem.data_entrega,
        servicos=[
            ServicoOut(
                descricao=servico.descricao,
                quantidade=servico.quantidade,
                valorUnitario=servico.valor_unitario,
                valorTotal=servico.valor_total,
                statusPagamento=servico.status_pagamento,
                statusProducao=servico.status_producao,
            )
            for servico in ordem.servicos
        ],
        valorTotal=ordem.valor_total,
        createdAt=ordem.created_at,
        updatedAt=ordem.updated_at,
    )


def list_ordens_query(db: Session):
    return (
        db.query(OrdemServico)
        .options(selectinload(OrdemServico.servicos))
        .order_by(OrdemServico.data_emissao.desc(), OrdemServico.id.desc())
    )


# Routes ---------------------------------------------------------------------


@router.get("", response_model=List[OrdemOut])
def list_ordens(busca: Optional[str] = Query(None), db: Session = Depends(get_db)) -> List[OrdemOut]:
    ordens = load_collection(db, list_ordens_query(db), "ordens")
    ordens = search(
        ordens,
        busca,
        lambda ordem: ordem.numero,
        lambda ordem: (ordem.cliente or {}).get("nome"),
        lambda ordem: ordem.referencia,
    )
    return [serialize_ordem(ordem) for ordem in ordens]


@router.get("/proximo-numero", response_model=ProximoNumeroOut)
def proximo_numero(db: Session = Depends(get_db)) -> ProximoNumeroOut:
    return ProximoNumeroOut(numero=assign_order_number(db))


@router.post("", response_model=OrdemOut, status_code=status.HTTP_201_CREATED)
def create_ordem(
    payload: OrdemCreate,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> OrdemOut:
    # Snapshot before numbering: its fallback rolls back and expires loaded rows.
    snapshot = snapshot_cliente(_get_cliente(payload.clienteId, db))
    numero = assign_order_number(db)

    ordem = OrdemServico(
        numero=numero,
        referencia=payload.referencia,
        cliente=snapshot,
        data_emissao=_local_naive(payload.dataEmissao or now),
        data_entrega=payload.dataEntrega,
        servicos=_build_servicos(payload.servicos),
    )
    ordem.valor_total = financeiro.order_total(ordem.servicos)

    db.add(ordem)
    _commit(db, ordem, "salvar")
    logger.info("OS %s criada para %s", ordem.numero, snapshot["nome"])
    return serialize_ordem(ordem)


@router.get("/{ordem_id}", response_model=OrdemOut)
def get_ordem(ordem_id: int, db: Session = Depends(get_db)) -> OrdemOut:
    return serialize_ordem(_get_ordem(ordem_id, db))


@router.get("/{ordem_id}/financeiro", response_model=OrdemFinanceiroOut)
def get_ordem_financeiro(
    ordem_id: int,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
) -> OrdemFinanceiroOut:
    ordem = _get_ordem(ordem_id, db)
    recebimentos = load_collection(
        db,
        db.query(RecebimentoParcial).filter(RecebimentoParcial.ordem_id == ordem.id),
        "recebimentos",
    )
    resumo = financeiro.financial_summary(ordem, recebimentos, today)
    return OrdemFinanceiroOut(
        ordemId=ordem.id,
        numero=ordem.numero,
        valorTotal=resumo.valor_total,
        valorPendente=resumo.valor_pendente,
        valorRecebido=resumo.valor_recebido,
        saldo=resumo.saldo,
        emAtraso=resumo.em_atraso,
    )


@router.put("/{ordem_id}", response_model=OrdemOut)
def update_ordem(ordem_id: int, payload: OrdemUpdate, db: Session = Depends(get_db)) -> OrdemOut:
    ordem = _get_ordem(ordem_id, db)

    # The snapshot is only replaced when the order moves to another client.
    if (ordem.cliente or {}).get("id") != payload.clienteId:
        ordem.cliente = snapshot_cliente(_get_cliente(payload.clienteId, db))

    if payload.numero is not None:
        ordem.numero = payload.numero
    ordem.referencia = payload.referencia
    ordem.data_entrega = payload.dataEntrega
    ordem.servicos = _build_servicos(payload.servicos)
    ordem.valor_total = financeiro.order_total(ordem.servicos)

    db.add(ordem)
    _commit(db, ordem, "atualizar")
    return serialize_ordem(ordem)


@router.delete("/{ordem_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ordem(
    ordem_id: int,
    confirmar: bool = Query(False, description="Confirmação explícita da exclusão"),
    db: Session = Depends(get_db),
) -> Response:
    if not confirmar:
        raise HTTPException(status_code=400, detail="Confirme a exclusão da OS.")
    ordem = _get_ordem(ordem_id, db)
    db.delete(ordem)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Erro ao deletar OS")
        raise HTTPException(status_code=500, detail="Erro ao deletar OS.") from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
