"""API routers for domain resources."""

from .auth import router as auth_router
from .clientes import router as clientes_router
from .dashboard import router as dashboard_router
from .ordens import router as ordens_router
from .recebimentos import router as recebimentos_router
from .relatorios import router as relatorios_router

__all__ = [
    "auth_router",
    "clientes_router",
    "dashboard_router",
    "ordens_router",
    "recebimentos_router",
    "relatorios_router",
]
