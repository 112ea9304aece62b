# financas/web/forms.py
import datetime
from typing import Mapping, Optional

from financas.core.goals import validate_goal
from financas.core.models import Goal, RecurringExpense, Transaction, parse_iso_date, EXPENSE
from financas.core.money import parse_minor_units
from financas.core.recurring import validate_recurring
from financas.core.transactions import validate_transaction

# Os campos de valor chegam como texto em centavos ("2500" = R$ 25,00),
# do mesmo jeito que o usuário digita. parse_minor_units ignora pontuação.


def parse_transaction_form(form: Mapping[str, str], user_id: str) -> Transaction:
    return validate_transaction(
        type_=form.get("type", EXPENSE),
        amount=parse_minor_units(form.get("amount")),
        category_id=form.get("category_id") or None,
        date=parse_iso_date(form.get("date")),
        description=form.get("description"),
        user_id=user_id,
    )


def parse_goal_form(form: Mapping[str, str], user_id: str, goal_id: Optional[str] = None) -> Goal:
    return validate_goal(
        title=form.get("title", ""),
        target_amount=parse_minor_units(form.get("target_amount")),
        current_amount=parse_minor_units(form.get("current_amount")),
        deadline=parse_iso_date(form.get("deadline")),
        color=form.get("color") or None,
        goal_id=goal_id,
        user_id=user_id,
    )


def parse_recurring_form(form: Mapping[str, str], user_id: str,
                         recurring_id: Optional[str] = None) -> RecurringExpense:
    return validate_recurring(
        title=form.get("title", ""),
        amount=parse_minor_units(form.get("amount")),
        day_of_month=form.get("day_of_month", "5"),
        category_id=form.get("category_id") or None,
        recurring_id=recurring_id,
        user_id=user_id,
    )


def default_date(today: datetime.date) -> str:
    return today.isoformat()
