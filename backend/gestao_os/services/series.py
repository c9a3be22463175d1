"""Revenue series for the dashboard chart."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, Callable, Iterable, List, Literal, Tuple

from dateutil.relativedelta import relativedelta

Periodo = Literal["diario", "mensal", "anual"]

DIAS_DIARIO = 30
MESES_MENSAL = 12
ANOS_ANUAL = 5

MESES_PT = ("jan", "fev", "mar", "abr", "mai", "jun", "jul", "ago", "set", "out", "nov", "dez")


@dataclass
class RevenueSeries:
    periodo: str
    labels: List[str] = field(default_factory=list)
    valores: List[Decimal] = field(default_factory=list)


def _issue_date(value: Any) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def _daily_buckets(today: date) -> List[Tuple[date, date, str]]:
    inicio = today - timedelta(days=DIAS_DIARIO)
    buckets = []
    for offset in range(DIAS_DIARIO + 1):
        dia = inicio + timedelta(days=offset)
        buckets.append((dia, dia + timedelta(days=1), dia.strftime("%d/%m")))
    return buckets


def _monthly_buckets(today: date) -> List[Tuple[date, date, str]]:
    inicio = today.replace(day=1) - relativedelta(months=MESES_MENSAL - 1)
    buckets = []
    for offset in range(MESES_MENSAL):
        mes = inicio + relativedelta(months=offset)
        label = f"{MESES_PT[mes.month - 1]}/{mes.strftime('%y')}"
        buckets.append((mes, mes + relativedelta(months=1), label))
    return buckets


def _yearly_buckets(today: date) -> List[Tuple[date, date, str]]:
    buckets = []
    for ano in range(today.year - ANOS_ANUAL + 1, today.year + 1):
        buckets.append((date(ano, 1, 1), date(ano + 1, 1, 1), str(ano)))
    return buckets


BUCKETERS: dict[str, Callable[[date], List[Tuple[date, date, str]]]] = {
    "diario": _daily_buckets,
    "mensal": _monthly_buckets,
    "anual": _yearly_buckets,
}


def revenue_series(ordens: Iterable[Any], periodo: str, now: datetime | date) -> RevenueSeries:
    """Sum ``valor_total`` of the orders issued in each period bucket.

    ``diario`` covers today and the 30 days before it, ``mensal`` the last 12
    months and ``anual`` the last 5 years, always including the current one.
    Buckets are half-open ``[start, end)`` on the local issue date.
    """
    try:
        bucketer = BUCKETERS[periodo]
    except KeyError as exc:
        raise ValueError(f"Período inválido: {periodo!r}") from exc

    today = _issue_date(now)
    buckets = bucketer(today)
    emitidas = [(_issue_date(ordem.data_emissao), Decimal(str(ordem.valor_total))) for ordem in ordens]

    serie = RevenueSeries(periodo=periodo)
    for inicio, fim, label in buckets:
        total = Decimal("0.00")
        for emissao, valor in emitidas:
            if inicio <= emissao < fim:
                total += valor
        serie.labels.append(label)
        serie.valores.append(total)
    return serie
