"""Sequential numbering of service orders."""

import logging
from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gestao_os.models import OrdemServico

logger = logging.getLogger("gestao_os.numeracao")

NUMERO_DIGITOS = 5
PRIMEIRO_NUMERO = "00001"


def next_order_number(numeros: Iterable[str]) -> str:
    """Return max(existing) + 1, zero padded. Gaps are never filled."""
    valores = [int(numero) for numero in numeros if numero and numero.isdigit()]
    if not valores:
        return PRIMEIRO_NUMERO
    return str(max(valores) + 1).zfill(NUMERO_DIGITOS)


def assign_order_number(db: Session) -> str:
    # Two concurrent creations can read the same maximum and share a number.
    try:
        numeros = [numero for (numero,) in db.query(OrdemServico.numero).all()]
    except SQLAlchemyError:
        logger.exception("Erro ao gerar número da OS")
        db.rollback()
        return PRIMEIRO_NUMERO
    return next_order_number(numeros)
