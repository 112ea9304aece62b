# financas/core/transactions.py
import datetime
from decimal import Decimal
from typing import Optional

from financas.core.errors import InvalidTransactionError
from financas.core.models import Transaction, TRANSACTION_TYPES


def validate_transaction(type_: str,
                         amount: Decimal,
                         category_id: Optional[str],
                         date: Optional[datetime.date],
                         description: Optional[str] = None,
                         user_id: Optional[str] = None) -> Transaction:
    """Monta uma Transaction nova a partir do formulário, já validada."""
    if type_ not in TRANSACTION_TYPES:
        raise InvalidTransactionError(f"Tipo de transação inválido: {type_}")
    if amount is None or amount <= 0:
        raise InvalidTransactionError("Informe um valor maior que zero.")
    if not category_id:
        raise InvalidTransactionError("Selecione uma categoria.")
    if date is None:
        raise InvalidTransactionError("Informe uma data válida.")
    return Transaction(
        id=None,
        amount=amount,
        type=type_,
        date=date.isoformat(),
        category_id=category_id,
        description=(description or "").strip() or None,
        user_id=user_id,
    )
