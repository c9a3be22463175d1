"""Shared field checks with Portuguese messages."""

from decimal import Decimal
from typing import Optional

from pydantic import ValidationError, ValidatorFunctionWrapHandler

CENTAVOS = Decimal("0.01")


def min_length(value: Optional[str], size: int, message: str) -> str:
    value = (value or "").strip()
    if len(value) < size:
        raise ValueError(message)
    return value


def email(value: object, handler: ValidatorFunctionWrapHandler, message: str = "Email inválido") -> str:
    """Run the ``EmailStr`` validation, replacing its error with ``message``."""
    try:
        return handler(value)
    except ValidationError as exc:
        raise ValueError(message) from exc


def money(value: Decimal, message: str, minimum: Decimal, strict: bool = False) -> Decimal:
    if value.is_nan() or value < minimum or (strict and value == minimum):
        raise ValueError(message)
    if value != value.quantize(CENTAVOS):
        raise ValueError("Valores monetários devem ter no máximo 2 casas decimais.")
    return value.quantize(CENTAVOS)
