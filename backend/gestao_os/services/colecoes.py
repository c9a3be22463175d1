"""Bulk collection loading and in-memory search."""

import logging
from typing import Any, Callable, List, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

logger = logging.getLogger("gestao_os.colecoes")

T = TypeVar("T")


def load_collection(db: Session, query: Query, nome: str) -> List[Any]:
    """Fetch a whole collection; on store failure log it and return nothing."""
    try:
        return query.all()
    except SQLAlchemyError:
        logger.exception("Erro ao carregar %s", nome)
        db.rollback()
        return []


def _normalize(value: Optional[str]) -> str:
    return (value or "").lower()


def search(items: List[T], termo: Optional[str], *campos: Callable[[T], Optional[str]]) -> List[T]:
    """Case-insensitive substring filter over already loaded items."""
    termo_normalizado = _normalize(termo)
    if not termo_normalizado:
        return list(items)
    return [
        item
        for item in items
        if any(termo_normalizado in (campo(item) or "").lower() for campo in campos)
    ]
