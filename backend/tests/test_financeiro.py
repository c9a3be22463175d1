from datetime import date
from decimal import Decimal

from gestao_os.models import OrdemServico, RecebimentoParcial, Servico
from gestao_os.services import financeiro


def _servico(quantidade=1, valor_unitario="10.00", pagamento="PENDENTE", producao="AGUARDANDO"):
    servico = Servico(
        descricao="Camiseta",
        quantidade=quantidade,
        valor_unitario=Decimal(valor_unitario),
        status_pagamento=pagamento,
        status_producao=producao,
    )
    servico.valor_total = financeiro.item_total(servico)
    return servico


def _ordem(ordem_id=1, servicos=None, entrega=date(2024, 2, 1)):
    ordem = OrdemServico(id=ordem_id, numero=f"{ordem_id:05d}", data_entrega=entrega, servicos=servicos or [])
    ordem.valor_total = financeiro.order_total(ordem.servicos)
    return ordem


def _recebimento(ordem_id, valor):
    return RecebimentoParcial(ordem_id=ordem_id, valor=Decimal(valor), data=date(2024, 1, 10))


def test_item_and_order_totals_are_exact():
    ordem = _ordem(servicos=[_servico(3, "0.10"), _servico(7, "19.99")])
    assert ordem.servicos[0].valor_total == Decimal("0.30")
    assert ordem.servicos[1].valor_total == Decimal("139.93")
    assert ordem.valor_total == Decimal("140.23")
    assert ordem.valor_total == sum(servico.valor_total for servico in ordem.servicos)


def test_pending_value_ignores_paid_items():
    ordem = _ordem(servicos=[_servico(2, "50.00"), _servico(1, "30.00", pagamento="PAGO")])
    assert financeiro.pending_value(ordem) == Decimal("100.00")


def test_pending_value_never_increases_when_items_get_paid():
    servicos = [_servico(1, "10.00"), _servico(2, "15.00"), _servico(1, "5.50")]
    ordem = _ordem(servicos=servicos)
    anterior = financeiro.pending_value(ordem)
    for servico in servicos:
        servico.status_pagamento = "PAGO"
        atual = financeiro.pending_value(ordem)
        assert atual <= anterior
        anterior = atual
    assert anterior == Decimal("0.00")


def test_received_total_is_zero_without_receipts():
    assert financeiro.received_total(1, []) == Decimal("0")
    assert financeiro.received_total(1, [_recebimento(2, "10.00")]) == Decimal("0")


def test_received_total_sums_only_matching_order():
    recebimentos = [_recebimento(1, "10.00"), _recebimento(1, "15.50"), _recebimento(2, "99.00")]
    assert financeiro.received_total(1, recebimentos) == Decimal("25.50")


def test_outstanding_balance_equals_pending_without_receipts():
    ordem = _ordem(servicos=[_servico(2, "50.00")])
    assert financeiro.outstanding_balance(ordem, []) == financeiro.pending_value(ordem)


def test_outstanding_balance_is_not_clamped():
    ordem = _ordem(servicos=[_servico(2, "50.00", pagamento="PAGO")])
    assert financeiro.outstanding_balance(ordem, [_recebimento(1, "40.00")]) == Decimal("-40.00")


def test_total_outstanding_clamps_each_order_at_zero():
    devedora = _ordem(1, [_servico(1, "100.00")])
    paga_a_mais = _ordem(2, [_servico(1, "20.00", pagamento="PAGO")])
    recebimentos = [_recebimento(1, "30.00"), _recebimento(2, "500.00")]

    assert financeiro.outstanding_balance(paga_a_mais, recebimentos) == Decimal("-500.00")
    assert financeiro.total_outstanding([devedora, paga_a_mais], recebimentos) == Decimal("70.00")


def test_total_outstanding_ignores_orphan_receipts():
    ordem = _ordem(1, [_servico(1, "80.00")])
    recebimentos = [_recebimento(1, "20.00"), _recebimento(42, "1000.00")]
    assert financeiro.total_outstanding([ordem], recebimentos) == Decimal("60.00")


def test_is_overdue_requires_past_delivery_and_unfinished_item():
    today = date(2024, 1, 15)
    atrasada = _ordem(servicos=[_servico(producao="CONCLUIDO"), _servico(producao="EM_PRODUCAO")], entrega=date(2024, 1, 14))
    concluida = _ordem(servicos=[_servico(producao="CONCLUIDO")], entrega=date(2024, 1, 1))
    vence_hoje = _ordem(servicos=[_servico()], entrega=today)

    assert financeiro.is_overdue(atrasada, today) is True
    assert financeiro.is_overdue(concluida, today) is False
    assert financeiro.is_overdue(vence_hoje, today) is False


def test_is_overdue_false_for_future_delivery_regardless_of_status():
    today = date(2024, 1, 15)
    for producao in ("AGUARDANDO", "EM_PRODUCAO", "CONCLUIDO"):
        ordem = _ordem(servicos=[_servico(producao=producao)], entrega=date(2024, 3, 1))
        assert financeiro.is_overdue(ordem, today) is False


def test_portfolio_totals():
    today = date(2024, 1, 15)
    ordens = [
        _ordem(1, [_servico(2, "50.00"), _servico(1, "25.00", pagamento="PAGO")], entrega=date(2024, 1, 10)),
        _ordem(2, [_servico(1, "40.00")], entrega=date(2024, 2, 10)),
    ]
    assert financeiro.total_value(ordens) == Decimal("165.00")
    assert financeiro.total_pending(ordens) == Decimal("140.00")
    assert financeiro.count_overdue(ordens, today) == 1


def test_financial_summary():
    ordem = _ordem(1, [_servico(2, "50.00")], entrega=date(2024, 1, 1))
    resumo = financeiro.financial_summary(ordem, [_recebimento(1, "40.00")], date(2024, 1, 15))
    assert resumo.valor_total == Decimal("100.00")
    assert resumo.valor_pendente == Decimal("100.00")
    assert resumo.valor_recebido == Decimal("40.00")
    assert resumo.saldo == Decimal("60.00")
    assert resumo.em_atraso is True


def test_receipts_with_orders_skips_missing_orders():
    ordem = _ordem(1, [_servico()])
    valido = _recebimento(1, "10.00")
    orfao = _recebimento(7, "10.00")
    assert financeiro.receipts_with_orders([orfao, valido], [ordem]) == [(valido, ordem)]
