# financas/core/models.py
import datetime
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

from financas.core.money import to_decimal

# Os dados vêm do Supabase como dicionários; estes dataclasses fecham o formato
# esperado e são construídos com from_row() na fronteira com o banco.

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)

URGENT = "urgent"
WARNING = "warning"

UNCATEGORIZED = "Sem Categoria"
RECURRING_PREFIX = "[Conta Fixa]"
RECURRING_CATEGORY = "Contas Fixas"

DEFAULT_CATEGORIES = {
    EXPENSE: ["Alimentação", "Transporte", "Moradia", "Lazer"],
    INCOME: ["Salário", "Freelance", "Investimentos"],
}

# Paleta dos cards de metas (nome exibido -> cor)
GOAL_COLORS = {
    "Roxo": "#8b5cf6",
    "Azul": "#3b82f6",
    "Verde": "#22c55e",
    "Laranja": "#f97316",
    "Rosa": "#ec4899",
    "Vermelho": "#ef4444",
}
DEFAULT_GOAL_COLOR = GOAL_COLORS["Roxo"]


def parse_iso_date(value: Any) -> Optional[datetime.date]:
    """Lê 'YYYY-MM-DD' (ignorando horário, se houver). Retorna None para vazio ou inválido."""
    if not value:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value).split("T")[0][:10])
    except ValueError:
        return None


def _joined_name(row: Dict[str, Any]) -> Optional[str]:
    # select('*, categories(name)') ou select('*, category:categories(name)')
    for key in ("categories", "category"):
        joined = row.get(key)
        if isinstance(joined, dict) and joined.get("name"):
            return joined["name"]
    return None


@dataclass
class Category:
    id: str
    name: str
    type: str                       # 'income' | 'expense'
    user_id: Optional[str] = None   # None = categoria compartilhada

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Category":
        return cls(
            id=row["id"],
            name=row["name"],
            type=row.get("type", EXPENSE),
            user_id=row.get("user_id"),
        )


@dataclass
class Transaction:
    id: str
    amount: Decimal
    type: str                       # 'income' | 'expense'
    date: str                       # como veio do banco, 'YYYY-MM-DD'
    category_id: Optional[str] = None
    description: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[str] = None
    category_name: Optional[str] = None

    @property
    def day(self) -> Optional[datetime.date]:
        return parse_iso_date(self.date)

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Transaction":
        return cls(
            id=row.get("id"),
            amount=to_decimal(row.get("amount")),
            type=row.get("type", EXPENSE),
            date=str(row.get("date") or ""),
            category_id=row.get("category_id"),
            description=row.get("description"),
            user_id=row.get("user_id"),
            created_at=row.get("created_at"),
            category_name=_joined_name(row),
        )


@dataclass
class Goal:
    id: Optional[str]
    title: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0.00")
    deadline: Optional[datetime.date] = None
    color: str = DEFAULT_GOAL_COLOR
    user_id: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Goal":
        return cls(
            id=row.get("id"),
            title=row.get("title") or "",
            target_amount=to_decimal(row.get("target_amount")),
            current_amount=to_decimal(row.get("current_amount")),
            deadline=parse_iso_date(row.get("deadline")),
            color=row.get("color") or DEFAULT_GOAL_COLOR,
            user_id=row.get("user_id"),
        )


@dataclass
class RecurringExpense:
    id: Optional[str]
    title: str
    amount: Decimal
    day_of_month: int               # 1..31
    category_id: Optional[str] = None
    active: bool = True
    user_id: Optional[str] = None
    category_name: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "RecurringExpense":
        return cls(
            id=row.get("id"),
            title=row.get("title") or "",
            amount=to_decimal(row.get("amount")),
            day_of_month=int(row.get("day_of_month") or 1),
            category_id=row.get("category_id"),
            active=bool(row.get("active", True)),
            user_id=row.get("user_id"),
            category_name=_joined_name(row),
        )


@dataclass
class Notification:
    id: str
    title: str
    message: str
    severity: str                   # 'urgent' | 'warning'


@dataclass
class Balance:
    income: Decimal
    expense: Decimal
    total: Decimal


@dataclass
class DailyPoint:
    date: str
    income: Decimal
    expense: Decimal


@dataclass
class CategoryTotal:
    name: str
    value: Decimal
