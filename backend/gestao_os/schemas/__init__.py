"""Pydantic schemas for API payloads."""

from .clientes import ClienteBase, ClienteCreate, ClienteOut, ClienteSnapshot, Endereco
from .dashboard import DashboardResumo, GraficoOut
from .ordens import (
    OrdemCreate,
    OrdemFinanceiroOut,
    OrdemOut,
    OrdemUpdate,
    ProximoNumeroOut,
    ServicoIn,
    ServicoOut,
)
from .recebimentos import (
    OrdemAReceber,
    RecebimentoCreate,
    RecebimentoLinha,
    RecebimentoOut,
    RecebimentoUpdate,
)
from .relatorios import ContaReceberLinha, RelatorioContasReceber
from .usuarios import (
    MessageOut,
    PasswordResetConfirm,
    PasswordResetRequest,
    TokenResponse,
    UsuarioAuthOut,
    UsuarioLogin,
)

__all__ = [
    "Endereco",
    "ClienteBase",
    "ClienteCreate",
    "ClienteOut",
    "ClienteSnapshot",
    "ServicoIn",
    "ServicoOut",
    "OrdemCreate",
    "OrdemUpdate",
    "OrdemOut",
    "OrdemFinanceiroOut",
    "ProximoNumeroOut",
    "RecebimentoCreate",
    "RecebimentoUpdate",
    "RecebimentoOut",
    "RecebimentoLinha",
    "OrdemAReceber",
    "DashboardResumo",
    "GraficoOut",
    "ContaReceberLinha",
    "RelatorioContasReceber",
    "UsuarioLogin",
    "UsuarioAuthOut",
    "TokenResponse",
    "PasswordResetRequest",
    "PasswordResetConfirm",
    "MessageOut",
]
