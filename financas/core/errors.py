# financas/core/errors.py


class FinancasError(Exception):
    """Base de todos os erros da aplicação."""


class ValidationError(FinancasError):
    """Dados de formulário inválidos."""


class InvalidGoalError(ValidationError):
    pass


class InvalidTransactionError(ValidationError):
    pass


class InvalidRecurringError(ValidationError):
    pass


class BackendError(FinancasError):
    """Falha devolvida pelo Supabase. A mensagem é a mensagem crua do backend."""


class DeleteError(BackendError):
    pass


class CategorySeedError(BackendError):
    pass


class AuthError(FinancasError):
    pass
