"""Recebimentos parciais API routes."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gestao_os.core.database import get_db
from gestao_os.core.security import get_current_user
from gestao_os.models import OrdemServico, RecebimentoParcial
from gestao_os.routers.ordens import list_ordens_query
from gestao_os.schemas import (
    OrdemAReceber,
    RecebimentoCreate,
    RecebimentoLinha,
    RecebimentoOut,
    RecebimentoUpdate,
)
from gestao_os.services import financeiro
from gestao_os.services.colecoes import load_collection

logger = logging.getLogger("gestao_os.recebimentos")

router = APIRouter(
    prefix="/api/recebimentos",
    tags=["Recebimentos Parciais"],
    dependencies=[Depends(get_current_user)],
)


def serialize_recebimento(recebimento: RecebimentoParcial) -> RecebimentoOut:
    return RecebimentoOut(
        id=recebimento.id,
        ordemId=recebimento.ordem_id,
        valor=recebimento.valor,
        data=recebimento.data,
        observacao=recebimento.observacao,
        createdAt=recebimento.created_at,
        updatedAt=recebimento.updated_at,
    )


def ensure_ordem_exists(ordem_id: int, db: Session) -> None:
    exists = db.query(OrdemServico.id).filter(OrdemServico.id == ordem_id).first()
    if not exists:
        raise HTTPException(status_code=400, detail="Ordem de serviço não encontrada.")


def _save(db: Session, recebimento: RecebimentoParcial) -> RecebimentoOut:
    db.add(recebimento)
    try:
        db.commit()
        db.refresh(recebimento)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Erro ao salvar recebimento")
        raise HTTPException(status_code=500, detail="Erro ao salvar recebimento.") from exc
    return serialize_recebimento(recebimento)


@router.get("", response_model=List[RecebimentoLinha])
def list_recebimentos(db: Session = Depends(get_db)) -> List[RecebimentoLinha]:
    recebimentos = load_collection(
        db,
        db.query(RecebimentoParcial).order_by(RecebimentoParcial.data.desc(), RecebimentoParcial.id.desc()),
        "recebimentos",
    )
    ordens = load_collection(db, list_ordens_query(db), "ordens")

    linhas: List[RecebimentoLinha] = []
    for recebimento, ordem in financeiro.receipts_with_orders(recebimentos, ordens):
        linhas.append(
            RecebimentoLinha(
                **serialize_recebimento(recebimento).model_dump(),
                ordemNumero=ordem.numero,
                ordemReferencia=ordem.referencia,
                clienteNome=(ordem.cliente or {}).get("nome", ""),
            )
        )
    return linhas


@router.get("/ordens", response_model=List[OrdemAReceber])
def list_ordens_a_receber(db: Session = Depends(get_db)) -> List[OrdemAReceber]:
    ordens = load_collection(db, list_ordens_query(db), "ordens")
    recebimentos = load_collection(db, db.query(RecebimentoParcial), "recebimentos")
    return [
        OrdemAReceber(
            id=ordem.id,
            numero=ordem.numero,
            referencia=ordem.referencia,
            clienteNome=(ordem.cliente or {}).get("nome", ""),
            saldo=financeiro.outstanding_balance(ordem, recebimentos),
        )
        for ordem in ordens
    ]


@router.post("", response_model=RecebimentoOut, status_code=status.HTTP_201_CREATED)
def create_recebimento(payload: RecebimentoCreate, db: Session = Depends(get_db)) -> RecebimentoOut:
    ensure_ordem_exists(payload.ordemId, db)
    recebimento = RecebimentoParcial(
        ordem_id=payload.ordemId,
        valor=payload.valor,
        data=payload.data,
        observacao=payload.observacao or None,
    )
    return _save(db, recebimento)


@router.put("/{recebimento_id}", response_model=RecebimentoOut)
def update_recebimento(
    recebimento_id: int, payload: RecebimentoUpdate, db: Session = Depends(get_db)
) -> RecebimentoOut:
    recebimento = db.get(RecebimentoParcial, recebimento_id)
    if not recebimento:
        raise HTTPException(status_code=404, detail="Recebimento não encontrado.")
    ensure_ordem_exists(payload.ordemId, db)

    recebimento.ordem_id = payload.ordemId
    recebimento.valor = payload.valor
    recebimento.data = payload.data
    recebimento.observacao = payload.observacao or None
    return _save(db, recebimento)


@router.delete("/{recebimento_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recebimento(
    recebimento_id: int,
    confirmar: bool = Query(False, description="Confirmação explícita da exclusão"),
    db: Session = Depends(get_db),
) -> Response:
    if not confirmar:
        raise HTTPException(status_code=400, detail="Confirme a exclusão do recebimento.")
    recebimento = db.get(RecebimentoParcial, recebimento_id)
    if not recebimento:
        raise HTTPException(status_code=404, detail="Recebimento não encontrado.")
    db.delete(recebimento)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Erro ao deletar recebimento")
        raise HTTPException(status_code=500, detail="Erro ao deletar recebimento.") from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
