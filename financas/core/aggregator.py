# financas/core/aggregator.py
import datetime
from decimal import Decimal
from typing import Dict, Iterable, List

from financas.core.models import Balance, DailyPoint, Transaction, INCOME, EXPENSE, parse_iso_date

DAILY_SERIES_MAX_POINTS = 7


def compute_balance(transactions: Iterable[Transaction]) -> Balance:
    """Soma receitas e despesas. O saldo é sempre receitas - despesas."""
    income = Decimal("0.00")
    expense = Decimal("0.00")
    for t in transactions:
        if t.type == INCOME:
            income += t.amount
        elif t.type == EXPENSE:
            expense += t.amount
    return Balance(income=income, expense=expense, total=income - expense)


def _date_sort_key(date_str: str) -> datetime.datetime:
    # fromisoformat só aceita o sufixo Z a partir do Python 3.11
    if date_str.endswith("Z"):
        date_str = date_str[:-1] + "+00:00"
    try:
        parsed = datetime.datetime.fromisoformat(date_str)
    except ValueError:
        day = parse_iso_date(date_str)
        if day is None:
            return datetime.datetime.max
        return datetime.datetime.combine(day, datetime.time.min)
    # comparar datas com e sem fuso no mesmo eixo
    return parsed.replace(tzinfo=None)


def compute_daily_series(transactions: Iterable[Transaction]) -> List[DailyPoint]:
    """Agrupa por data (texto exato), soma por tipo e devolve os últimos 7 dias com movimento.

    Dias sem transação não geram ponto, então o resultado cobre os 7 dias
    *ativos* mais recentes, não a última semana do calendário.
    """
    grouped: Dict[str, DailyPoint] = {}
    for t in transactions:
        point = grouped.get(t.date)
        if point is None:
            point = DailyPoint(date=t.date, income=Decimal("0.00"), expense=Decimal("0.00"))
            grouped[t.date] = point
        if t.type == INCOME:
            point.income += t.amount
        else:
            point.expense += t.amount

    ordered = sorted(grouped.values(), key=lambda p: _date_sort_key(p.date))
    return ordered[-DAILY_SERIES_MAX_POINTS:]


def recent_transactions(transactions: List[Transaction], limit: int = 5) -> List[Transaction]:
    """Primeiras `limit` transações da lista já ordenada por data decrescente."""
    return list(transactions[:limit])
