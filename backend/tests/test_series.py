from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest

from gestao_os.services.series import revenue_series


def _ordem(emissao, valor):
    return SimpleNamespace(data_emissao=emissao, valor_total=Decimal(valor))


def test_daily_series_sums_orders_of_the_same_day():
    ordens = [
        _ordem(datetime(2024, 1, 10, 9, 0), "100.00"),
        _ordem(datetime(2024, 1, 10, 18, 45), "50.00"),
    ]
    serie = revenue_series(ordens, "diario", datetime(2024, 1, 15, 12, 0))

    assert len(serie.labels) == 31
    assert len(serie.valores) == 31
    assert serie.labels[0] == "16/12"
    assert serie.labels[-1] == "15/01"
    assert serie.valores[serie.labels.index("10/01")] == Decimal("150.00")
    assert sum(serie.valores) == Decimal("150.00")
    assert serie.valores[serie.labels.index("11/01")] == Decimal("0")


def test_daily_series_excludes_orders_outside_window():
    ordens = [
        _ordem(datetime(2023, 12, 15, 23, 59), "10.00"),
        _ordem(datetime(2023, 12, 16, 0, 0), "20.00"),
        _ordem(datetime(2024, 1, 16, 0, 0), "30.00"),
    ]
    serie = revenue_series(ordens, "diario", date(2024, 1, 15))
    assert serie.valores[0] == Decimal("20.00")
    assert sum(serie.valores) == Decimal("20.00")


def test_monthly_series_uses_last_twelve_months():
    ordens = [
        _ordem(datetime(2023, 1, 31, 23, 0), "999.00"),
        _ordem(datetime(2023, 2, 1, 0, 0), "10.00"),
        _ordem(datetime(2023, 2, 28, 23, 59), "5.00"),
        _ordem(datetime(2024, 1, 3, 8, 0), "7.50"),
    ]
    serie = revenue_series(ordens, "mensal", datetime(2024, 1, 15))

    assert len(serie.labels) == 12
    assert serie.labels[0] == "fev/23"
    assert serie.labels[-1] == "jan/24"
    assert serie.valores[0] == Decimal("15.00")
    assert serie.valores[-1] == Decimal("7.50")
    assert sum(serie.valores) == Decimal("22.50")


def test_yearly_series_uses_last_five_years():
    ordens = [
        _ordem(datetime(2019, 12, 31, 23, 59), "1.00"),
        _ordem(datetime(2020, 1, 1, 0, 0), "2.00"),
        _ordem(datetime(2024, 12, 31, 10, 0), "3.00"),
    ]
    serie = revenue_series(ordens, "anual", datetime(2024, 6, 1))

    assert serie.labels == ["2020", "2021", "2022", "2023", "2024"]
    assert serie.valores == [Decimal("2.00"), Decimal("0"), Decimal("0"), Decimal("0"), Decimal("3.00")]


def test_series_accepts_timezone_aware_issue_dates():
    emissao = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
    serie = revenue_series([_ordem(emissao, "10.00")], "anual", datetime(2024, 1, 15))
    assert serie.valores[-1] == Decimal("10.00")


def test_series_is_deterministic_for_fixed_now():
    ordens = [_ordem(datetime(2024, 1, 5), "12.00")]
    now = datetime(2024, 1, 15)
    assert revenue_series(ordens, "mensal", now) == revenue_series(ordens, "mensal", now)


def test_unknown_period_is_rejected():
    with pytest.raises(ValueError):
        revenue_series([], "semanal", datetime(2024, 1, 15))
