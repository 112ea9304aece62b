# financas/core/results.py
from dataclasses import dataclass
from typing import Optional

from financas.core.errors import FinancasError


@dataclass
class Result:
    """Resultado de um comando (excluir, lançar...). A camada web decide como exibir o erro."""
    ok: bool
    error: Optional[FinancasError] = None

    @classmethod
    def success(cls) -> "Result":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: FinancasError) -> "Result":
        return cls(ok=False, error=error)

    @property
    def message(self) -> str:
        return str(self.error) if self.error else ""
