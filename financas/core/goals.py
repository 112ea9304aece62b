# financas/core/goals.py
import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from financas.core.errors import InvalidGoalError
from financas.core.models import Goal, GOAL_COLORS, DEFAULT_GOAL_COLOR


def progress(goal: Goal) -> int:
    """Percentual concluído da meta, limitado a 0..100.

    Meta com alvo zero ou negativo não deveria existir (validate_goal rejeita),
    mas se chegar do banco assim o progresso é 0%.
    """
    if goal.target_amount <= 0:
        return 0
    pct = (goal.current_amount / goal.target_amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return max(0, min(int(pct), 100))


def remaining(goal: Goal) -> Decimal:
    """Quanto falta para a meta, nunca negativo."""
    return max(Decimal("0.00"), goal.target_amount - goal.current_amount)


def is_achieved(goal: Goal) -> bool:
    return progress(goal) >= 100


def validate_goal(title: str,
                  target_amount: Decimal,
                  current_amount: Decimal,
                  deadline: Optional[datetime.date] = None,
                  color: Optional[str] = None,
                  goal_id: Optional[str] = None,
                  user_id: Optional[str] = None) -> Goal:
    """Monta uma Goal validada. Levanta InvalidGoalError se algum campo for inválido."""
    title = (title or "").strip()
    if not title:
        raise InvalidGoalError("Informe o nome da meta.")
    if target_amount is None or target_amount <= 0:
        raise InvalidGoalError("O valor da meta deve ser maior que zero.")
    if current_amount is None or current_amount < 0:
        raise InvalidGoalError("O valor guardado não pode ser negativo.")
    color = color or DEFAULT_GOAL_COLOR
    if color not in GOAL_COLORS.values():
        raise InvalidGoalError(f"Cor inválida: {color}")
    return Goal(
        id=goal_id,
        title=title,
        target_amount=target_amount,
        current_amount=current_amount,
        deadline=deadline,
        color=color,
        user_id=user_id,
    )
