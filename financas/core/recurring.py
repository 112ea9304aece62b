# financas/core/recurring.py
import datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from financas.core.errors import InvalidRecurringError
from financas.core.models import (
    Notification, RecurringExpense, EXPENSE, URGENT, WARNING, RECURRING_PREFIX,
)
from financas.core.money import format_brl

DEFAULT_WINDOW_DAYS = 3


def evaluate_due(items: Iterable[RecurringExpense],
                 today: datetime.date,
                 window_days: int = DEFAULT_WINDOW_DAYS) -> List[Notification]:
    """Gera os avisos de contas fixas que vencem hoje ou nos próximos `window_days` dias.

    A regra compara apenas o dia do mês, sem virar o mês: no dia 30, uma conta
    do dia 2 não gera aviso. A ordem de saída é a mesma da entrada.
    """
    notifications = []
    for item in items:
        if not item.active:
            continue
        day = item.day_of_month
        if day == today.day:
            notifications.append(Notification(
                id=f"{item.id}-hoje",
                title="Conta vence hoje!",
                message=f"{item.title} ({format_brl(item.amount)}) vence hoje.",
                severity=URGENT,
            ))
        elif today.day < day <= today.day + window_days:
            notifications.append(Notification(
                id=f"{item.id}-breve",
                title="Conta próxima do vencimento",
                message=f"{item.title} ({format_brl(item.amount)}) vence em breve, no dia {day}.",
                severity=WARNING,
            ))
    return notifications


def validate_recurring(title: str,
                       amount: Decimal,
                       day_of_month: Any,
                       category_id: Optional[str] = None,
                       recurring_id: Optional[str] = None,
                       user_id: Optional[str] = None) -> RecurringExpense:
    title = (title or "").strip()
    if not title:
        raise InvalidRecurringError("Informe o nome da conta.")
    if amount is None or amount < 0:
        raise InvalidRecurringError("O valor não pode ser negativo.")
    try:
        day = int(day_of_month)
    except (TypeError, ValueError):
        raise InvalidRecurringError("Dia do vencimento inválido.")
    if not 1 <= day <= 31:
        raise InvalidRecurringError("O dia do vencimento deve estar entre 1 e 31.")
    return RecurringExpense(
        id=recurring_id,
        title=title,
        amount=amount,
        day_of_month=day,
        category_id=category_id or None,
        active=True,
        user_id=user_id,
    )


def build_launch_payload(item: RecurringExpense, user_id: str, today: datetime.date) -> Dict[str, Any]:
    """Transação que o botão "Lançar" cria: despesa com a data de hoje."""
    return {
        "user_id": user_id,
        "amount": float(item.amount),
        "type": EXPENSE,
        "category_id": item.category_id,
        "description": f"{RECURRING_PREFIX} {item.title}",
        "date": today.isoformat(),
    }
