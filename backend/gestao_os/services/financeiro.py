"""Derived money figures for service orders.

Nothing computed here is stored: pending values, receipts and balances are
always rebuilt from the orders and the partial receipts fetched for a screen.
The functions only read attributes, so they accept ORM instances or any
object shaped the same way:

* orders expose ``id``, ``valor_total``, ``data_entrega`` and ``servicos``;
* line items expose ``quantidade``, ``valor_unitario``, ``valor_total``,
  ``status_pagamento`` and ``status_producao``;
* receipts expose ``ordem_id`` and ``valor``.

All sums are ``Decimal`` so repeated aggregation does not drift.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from gestao_os.models.ordens import PAGAMENTO_PENDENTE, PRODUCAO_CONCLUIDO

ZERO = Decimal("0.00")


def _money(value: Any) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def item_total(servico: Any) -> Decimal:
    return int(servico.quantidade) * _money(servico.valor_unitario)


def order_total(servicos: Iterable[Any]) -> Decimal:
    return sum((_money(servico.valor_total) for servico in servicos), ZERO)


def pending_value(ordem: Any) -> Decimal:
    """Sum of the line items still waiting for payment."""
    return sum(
        (
            _money(servico.valor_total)
            for servico in ordem.servicos
            if servico.status_pagamento == PAGAMENTO_PENDENTE
        ),
        ZERO,
    )


def received_total(ordem_id: Any, recebimentos: Iterable[Any]) -> Decimal:
    return sum(
        (_money(recebimento.valor) for recebimento in recebimentos if recebimento.ordem_id == ordem_id),
        ZERO,
    )


def outstanding_balance(ordem: Any, recebimentos: Iterable[Any]) -> Decimal:
    """Pending value minus what was already received.

    Negative results mean the receipts exceed the pending items and are
    returned unchanged.
    """
    return pending_value(ordem) - received_total(ordem.id, recebimentos)


def is_overdue(ordem: Any, today: date) -> bool:
    if not ordem.data_entrega < today:
        return False
    return any(servico.status_producao != PRODUCAO_CONCLUIDO for servico in ordem.servicos)


def total_value(ordens: Iterable[Any]) -> Decimal:
    return sum((_money(ordem.valor_total) for ordem in ordens), ZERO)


def total_pending(ordens: Iterable[Any]) -> Decimal:
    return sum((pending_value(ordem) for ordem in ordens), ZERO)


def total_outstanding(ordens: Iterable[Any], recebimentos: Sequence[Any]) -> Decimal:
    """Amount still owed across orders; overpaid orders count as zero."""
    return sum(
        (max(outstanding_balance(ordem, recebimentos), ZERO) for ordem in ordens),
        ZERO,
    )


def count_overdue(ordens: Iterable[Any], today: date) -> int:
    return sum(1 for ordem in ordens if is_overdue(ordem, today))


@dataclass(frozen=True)
class ResumoFinanceiro:
    valor_total: Decimal
    valor_pendente: Decimal
    valor_recebido: Decimal
    saldo: Decimal
    em_atraso: bool


def financial_summary(ordem: Any, recebimentos: Sequence[Any], today: date) -> ResumoFinanceiro:
    pendente = pending_value(ordem)
    recebido = received_total(ordem.id, recebimentos)
    return ResumoFinanceiro(
        valor_total=_money(ordem.valor_total),
        valor_pendente=pendente,
        valor_recebido=recebido,
        saldo=pendente - recebido,
        em_atraso=is_overdue(ordem, today),
    )


def receipts_with_orders(
    recebimentos: Iterable[Any], ordens: Iterable[Any]
) -> List[Tuple[Any, Any]]:
    """Pair each receipt with its order, dropping receipts whose order is gone."""
    por_id: Dict[Any, Any] = {ordem.id: ordem for ordem in ordens}
    pares: List[Tuple[Any, Any]] = []
    for recebimento in recebimentos:
        ordem: Optional[Any] = por_id.get(recebimento.ordem_id)
        if ordem is None:
            continue
        pares.append((recebimento, ordem))
    return pares
