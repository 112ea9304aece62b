# financas/core/reports.py
import calendar
import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from financas.core.models import CategoryTotal, Transaction, EXPENSE, UNCATEGORIZED


def month_bounds(month: str) -> Tuple[datetime.date, datetime.date]:
    """'2025-07' -> (2025-07-01, 2025-07-31). Levanta ValueError para formato inválido."""
    year_month = datetime.datetime.strptime(month, "%Y-%m")
    last_day = calendar.monthrange(year_month.year, year_month.month)[1]
    return (datetime.date(year_month.year, year_month.month, 1),
            datetime.date(year_month.year, year_month.month, last_day))


def current_month(today: datetime.date) -> str:
    return today.strftime("%Y-%m")


def filter_month(transactions: Iterable[Transaction],
                 month_start: datetime.date,
                 month_end: datetime.date) -> List[Transaction]:
    """Despesas entre as duas datas, inclusive nas pontas."""
    selected = []
    for t in transactions:
        day = t.day
        if t.type != EXPENSE or day is None:
            continue
        if month_start <= day <= month_end:
            selected.append(t)
    return selected


def group_by_category(transactions: Iterable[Transaction],
                      month_start: datetime.date,
                      month_end: datetime.date) -> Dict[str, Decimal]:
    """Soma as despesas do período por nome de categoria.

    Transação sem categoria entra em "Sem Categoria" em vez de ser descartada.
    """
    grouped: Dict[str, Decimal] = {}
    for t in filter_month(transactions, month_start, month_end):
        name = t.category_name or UNCATEGORIZED
        grouped[name] = grouped.get(name, Decimal("0.00")) + t.amount
    return grouped


def to_chart_data(grouped: Dict[str, Decimal]) -> List[CategoryTotal]:
    """Lista {name, value} para o gráfico de pizza, sem ordenação."""
    return [CategoryTotal(name=name, value=value) for name, value in grouped.items()]


def sorted_summary(grouped: Dict[str, Decimal]) -> List[CategoryTotal]:
    """Mesma agregação, do maior para o menor valor (resumo em texto)."""
    return sorted(to_chart_data(grouped), key=lambda item: item.value, reverse=True)


def report_total(transactions: Iterable[Transaction]) -> Decimal:
    return sum((t.amount for t in transactions), Decimal("0.00"))


def report_filename(month: str) -> str:
    return f"relatorio_{month}.pdf"
