# financas/core/db.py
import datetime
import logging
from typing import Any, Dict, List, Optional

from supabase import create_client, Client

from financas.config import SUPABASE_URL, SUPABASE_KEY, CATEGORY_SEED_MAX_ATTEMPTS
from financas.core.errors import BackendError, CategorySeedError, DeleteError
from financas.core.models import (
    Category, Goal, RecurringExpense, Transaction,
    DEFAULT_CATEGORIES, EXPENSE, RECURRING_CATEGORY,
)
from financas.core.recurring import build_launch_payload
from financas.core.results import Result
from financas.utils.text_utils import same_name

logger = logging.getLogger(__name__)


def get_supabase_client() -> Client:
    """Retorna uma instância do cliente Supabase."""
    return create_client(SUPABASE_URL, SUPABASE_KEY)


def _error_message(e: Exception) -> str:
    # APIError do postgrest traz a mensagem do backend em .message
    return getattr(e, "message", None) or str(e)


# --- Funções para Transações ---
def get_transactions(supabase_client: Client) -> List[Transaction]:
    """Obtém as transações do usuário (RLS), da mais recente para a mais antiga."""
    try:
        response = (supabase_client.table('transactions')
                    .select('*, categories(name)')
                    .order('date', desc=True)
                    .order('created_at', desc=True)
                    .execute())
        return [Transaction.from_row(row) for row in response.data]
    except Exception as e:
        logger.error(f"Erro ao obter transações do Supabase: {e}")
        return []


def get_month_expenses(supabase_client: Client, user_id: str,
                       start_date: datetime.date, end_date: datetime.date) -> List[Transaction]:
    """Obtém as despesas de um período (inclusive nas pontas) para o relatório."""
    try:
        response = (supabase_client.table('transactions')
                    .select('*, categories(name)')
                    .eq('user_id', user_id)
                    .eq('type', EXPENSE)
                    .gte('date', start_date.isoformat())
                    .lte('date', end_date.isoformat())
                    .execute())
        return [Transaction.from_row(row) for row in response.data]
    except Exception as e:
        logger.error(f"Erro ao obter despesas de {start_date} a {end_date}: {e}")
        return []


def add_transaction(supabase_client: Client, transaction: Transaction) -> None:
    """Insere uma nova transação. Levanta BackendError em caso de falha."""
    try:
        supabase_client.table('transactions').insert({
            "user_id": transaction.user_id,
            "amount": float(transaction.amount),
            "type": transaction.type,
            "category_id": transaction.category_id,
            "description": transaction.description,
            "date": transaction.date,
        }).execute()
    except Exception as e:
        logger.error(f"Erro ao adicionar transação ao Supabase: {e}")
        raise BackendError(_error_message(e)) from e


def _delete(supabase_client: Client, table: str, row_id: str) -> Result:
    try:
        supabase_client.table(table).delete().eq('id', row_id).execute()
        return Result.success()
    except Exception as e:
        logger.error(f"Erro ao excluir {row_id} de {table}: {e}")
        return Result.failure(DeleteError(_error_message(e)))


def delete_transaction(supabase_client: Client, transaction_id: str) -> Result:
    return _delete(supabase_client, 'transactions', transaction_id)


# --- Funções para Categorias ---
def _fetch_categories(supabase_client: Client, user_id: str, type_: str) -> List[Category]:
    try:
        response = (supabase_client.table('categories')
                    .select('*')
                    .eq('type', type_)
                    .or_(f"user_id.is.null,user_id.eq.{user_id}")
                    .order('name')
                    .execute())
    except Exception as e:
        logger.error(f"Erro ao obter categorias ({type_}) do Supabase: {e}")
        raise BackendError(_error_message(e)) from e
    return [Category.from_row(row) for row in response.data]


def get_categories(supabase_client: Client, user_id: str, type_: str) -> List[Category]:
    """Categorias do tipo pedido: as compartilhadas (user_id nulo) e as do usuário."""
    try:
        return _fetch_categories(supabase_client, user_id, type_)
    except BackendError:
        return []


def _insert_categories(supabase_client: Client, user_id: str, type_: str, names: List[str]) -> None:
    rows = [{"user_id": user_id, "name": name, "type": type_} for name in names]
    try:
        supabase_client.table('categories').insert(rows).execute()
    except Exception as e:
        # A próxima leitura decide se houve efeito; o número de tentativas é limitado.
        logger.error(f"Erro ao inserir categorias {names}: {e}")


def ensure_default_categories(supabase_client: Client, user_id: str, type_: str,
                              max_attempts: int = CATEGORY_SEED_MAX_ATTEMPTS) -> List[Category]:
    """Garante que o usuário tenha ao menos uma categoria do tipo, criando as padrão.

    Idempotente: se já existem categorias nada é inserido. Cada tentativa
    insere e relê; depois de `max_attempts` tentativas sem resultado levanta
    CategorySeedError.
    """
    categories = _fetch_categories(supabase_client, user_id, type_)
    attempts = 0
    while not categories:
        if attempts >= max_attempts:
            raise CategorySeedError(
                f"Não foi possível criar as categorias padrão de {type_} após {max_attempts} tentativas."
            )
        attempts += 1
        logger.info(f"Criando categorias padrão de {type_} para o usuário {user_id} (tentativa {attempts})")
        _insert_categories(supabase_client, user_id, type_, DEFAULT_CATEGORIES[type_])
        categories = _fetch_categories(supabase_client, user_id, type_)
    return categories


def ensure_category(supabase_client: Client, user_id: str, name: str, type_: str,
                    max_attempts: int = CATEGORY_SEED_MAX_ATTEMPTS) -> Category:
    """Retorna a categoria com esse nome, criando-a se não existir."""
    for attempt in range(max_attempts + 1):
        for cat in _fetch_categories(supabase_client, user_id, type_):
            if same_name(cat.name, name):
                return cat
        if attempt < max_attempts:
            _insert_categories(supabase_client, user_id, type_, [name])
    raise CategorySeedError(f"Não foi possível criar a categoria '{name}' após {max_attempts} tentativas.")


# --- Funções para Metas ---
def get_goals(supabase_client: Client) -> List[Goal]:
    try:
        response = supabase_client.table('goals').select('*').order('created_at', desc=True).execute()
        return [Goal.from_row(row) for row in response.data]
    except Exception as e:
        logger.error(f"Erro ao obter metas do Supabase: {e}")
        return []


def get_goal(supabase_client: Client, goal_id: str) -> Optional[Goal]:
    try:
        response = supabase_client.table('goals').select('*').eq('id', goal_id).execute()
    except Exception as e:
        logger.error(f"Erro ao obter a meta {goal_id}: {e}")
        return None
    return Goal.from_row(response.data[0]) if response.data else None


def _goal_payload(goal: Goal) -> Dict[str, Any]:
    return {
        "user_id": goal.user_id,
        "title": goal.title,
        "target_amount": float(goal.target_amount),
        "current_amount": float(goal.current_amount),
        "deadline": goal.deadline.isoformat() if goal.deadline else None,
        "color": goal.color,
    }


def save_goal(supabase_client: Client, goal: Goal) -> None:
    """Cria a meta, ou atualiza se ela já tiver id."""
    try:
        if goal.id:
            supabase_client.table('goals').update(_goal_payload(goal)).eq('id', goal.id).execute()
        else:
            supabase_client.table('goals').insert(_goal_payload(goal)).execute()
    except Exception as e:
        logger.error(f"Erro ao salvar meta no Supabase: {e}")
        raise BackendError(_error_message(e)) from e


def delete_goal(supabase_client: Client, goal_id: str) -> Result:
    return _delete(supabase_client, 'goals', goal_id)


# --- Funções para Contas Fixas ---
def get_recurring_expenses(supabase_client: Client, only_active: bool = False) -> List[RecurringExpense]:
    """Contas fixas ordenadas pelo dia de vencimento."""
    try:
        query = supabase_client.table('recurring_expenses').select('*, categories(name, type)')
        if only_active:
            query = query.eq('active', True)
        response = query.order('day_of_month').execute()
        return [RecurringExpense.from_row(row) for row in response.data]
    except Exception as e:
        logger.error(f"Erro ao buscar contas fixas: {e}")
        return []


def get_recurring_expense(supabase_client: Client, recurring_id: str) -> Optional[RecurringExpense]:
    try:
        response = (supabase_client.table('recurring_expenses')
                    .select('*, categories(name, type)')
                    .eq('id', recurring_id)
                    .execute())
    except Exception as e:
        logger.error(f"Erro ao obter a conta fixa {recurring_id}: {e}")
        return None
    return RecurringExpense.from_row(response.data[0]) if response.data else None


def save_recurring(supabase_client: Client, item: RecurringExpense) -> None:
    payload = {
        "user_id": item.user_id,
        "title": item.title,
        "amount": float(item.amount),
        "category_id": item.category_id,
        "day_of_month": item.day_of_month,
        "active": item.active,
    }
    try:
        if item.id:
            supabase_client.table('recurring_expenses').update(payload).eq('id', item.id).execute()
        else:
            supabase_client.table('recurring_expenses').insert(payload).execute()
    except Exception as e:
        logger.error(f"Erro ao salvar conta recorrente: {e}")
        raise BackendError(_error_message(e)) from e


def delete_recurring(supabase_client: Client, recurring_id: str) -> Result:
    return _delete(supabase_client, 'recurring_expenses', recurring_id)


def launch_recurring(supabase_client: Client, item: RecurringExpense, user_id: str,
                     today: datetime.date) -> Result:
    """Lança a conta fixa como despesa de hoje. Conta sem categoria vai para "Contas Fixas"."""
    try:
        if not item.category_id:
            item.category_id = ensure_category(supabase_client, user_id, RECURRING_CATEGORY, EXPENSE).id
        supabase_client.table('transactions').insert(build_launch_payload(item, user_id, today)).execute()
        return Result.success()
    except BackendError as e:
        return Result.failure(e)
    except Exception as e:
        logger.error(f"Erro ao lançar a conta fixa {item.id}: {e}")
        return Result.failure(BackendError(_error_message(e)))
