# financas/utils/text_utils.py
import re
import datetime
from typing import Union


def digits_only(s: Union[str, None]) -> str:
    """Remove tudo o que não for dígito.
    Ex: "R$ 1.234,56" -> "123456"
    Ex: "abc" -> ""
    """
    if not s:
        return ""
    return re.sub(r"\D", "", str(s))


def format_date_br(value: Union[str, datetime.date, None]) -> str:
    """Converte uma data ISO (com ou sem horário) para DD/MM/AAAA.
    Ex: "2025-07-10" -> "10/07/2025"
    Ex: "2025-07-10T08:30:00" -> "10/07/2025"
    """
    if not value:
        return ""
    if isinstance(value, datetime.date):
        return value.strftime("%d/%m/%Y")
    return "/".join(reversed(str(value).split("T")[0].split("-")))


def same_name(a: Union[str, None], b: Union[str, None]) -> bool:
    """Compara nomes de categoria ignorando maiúsculas e espaços nas pontas."""
    return (a or "").strip().lower() == (b or "").strip().lower()
