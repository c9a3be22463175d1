"""Clientes API routes."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gestao_os.core.database import get_db
from gestao_os.core.security import get_current_user
from gestao_os.models import Cliente
from gestao_os.schemas import ClienteCreate, ClienteOut, ClienteSnapshot, Endereco
from gestao_os.services.colecoes import load_collection, search

logger = logging.getLogger("gestao_os.clientes")

router = APIRouter(prefix="/api/clientes", tags=["Clientes"], dependencies=[Depends(get_current_user)])


def _endereco(cliente: Cliente) -> Endereco:
    return Endereco(
        rua=cliente.rua,
        numero=cliente.numero,
        complemento=cliente.complemento,
        bairro=cliente.bairro,
        cidade=cliente.cidade,
        estado=cliente.estado,
        cep=cliente.cep,
    )


def serialize_cliente(cliente: Cliente) -> ClienteOut:
    return ClienteOut(
        id=cliente.id,
        nome=cliente.nome,
        cpfCnpj=cliente.cpf_cnpj,
        telefone=cliente.telefone,
        email=cliente.email,
        endereco=_endereco(cliente),
        createdAt=cliente.created_at,
        updatedAt=cliente.updated_at,
    )


def snapshot_cliente(cliente: Cliente) -> Dict[str, Any]:
    """Value copy of the client, stored inside an order."""
    snapshot = ClienteSnapshot(
        id=cliente.id,
        nome=cliente.nome,
        cpfCnpj=cliente.cpf_cnpj,
        telefone=cliente.telefone,
        email=cliente.email,
        endereco=_endereco(cliente),
    )
    return snapshot.model_dump(mode="json")


@router.get("", response_model=List[ClienteOut])
def list_clientes(busca: Optional[str] = Query(None), db: Session = Depends(get_db)) -> List[ClienteOut]:
    clientes = load_collection(db, db.query(Cliente).order_by(Cliente.nome), "clientes")
    clientes = search(clientes, busca, lambda cliente: cliente.nome)
    return [serialize_cliente(cliente) for cliente in clientes]


@router.get("/{cliente_id}", response_model=ClienteOut)
def get_cliente(cliente_id: int, db: Session = Depends(get_db)) -> ClienteOut:
    cliente = db.get(Cliente, cliente_id)
    if not cliente:
        raise HTTPException(status_code=404, detail="Cliente não encontrado.")
    return serialize_cliente(cliente)


@router.post("", response_model=ClienteOut, status_code=status.HTTP_201_CREATED)
def create_cliente(payload: ClienteCreate, db: Session = Depends(get_db)) -> ClienteOut:
    endereco = payload.endereco
    cliente = Cliente(
        nome=payload.nome,
        cpf_cnpj=payload.cpfCnpj,
        telefone=payload.telefone,
        email=payload.email,
        rua=endereco.rua,
        numero=endereco.numero,
        complemento=endereco.complemento or None,
        bairro=endereco.bairro,
        cidade=endereco.cidade,
        estado=endereco.estado,
        cep=endereco.cep,
    )
    db.add(cliente)
    try:
        db.commit()
        db.refresh(cliente)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Erro ao salvar cliente")
        raise HTTPException(status_code=500, detail="Erro ao salvar cliente.") from exc
    return serialize_cliente(cliente)
