"""SQLAlchemy models package."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import models so metadata.create_all can discover them
from .clientes import Cliente  # noqa: E402,F401
from .ordens import OrdemServico, Servico  # noqa: E402,F401
from .recebimentos import RecebimentoParcial  # noqa: E402,F401
from .usuarios import TokenRevogado, Usuario  # noqa: E402,F401

__all__ = [
    "Base",
    "Cliente",
    "OrdemServico",
    "Servico",
    "RecebimentoParcial",
    "TokenRevogado",
    "Usuario",
]
