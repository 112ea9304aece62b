# financas/core/money.py
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Union

from financas.utils.text_utils import digits_only

CENTS = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """Converte um valor numérico vindo do Supabase (float, int ou str) em Decimal com 2 casas."""
    if value is None or value == "":
        return Decimal("0.00")
    try:
        return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return Decimal("0.00")


def parse_minor_units(raw_digits: Union[str, None]) -> Decimal:
    """Converte o texto digitado (centavos) no valor decimal armazenado.

    Qualquer caractere que não seja dígito é ignorado, então um valor colado
    como "R$ 25,00" vira "2500" antes da conversão. Texto vazio vale 0.
    Ex: "2500" -> Decimal("25.00")
    """
    digits = digits_only(raw_digits)
    if not digits:
        return Decimal("0.00")
    return (Decimal(digits) / 100).quantize(CENTS)


def to_minor_units(amount: Any) -> str:
    """Caminho inverso de parse_minor_units, usado para preencher formulários de edição.
    Ex: Decimal("25.00") -> "2500"
    """
    value = to_decimal(amount)
    if value <= 0:
        return ""
    return str(int(value * 100))


def _pt_br(value: Decimal) -> str:
    # 1,234.56 -> 1.234,56
    return f"{value:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def format_for_display(stored_minor_units: Union[str, None]) -> str:
    """Exibe o texto em centavos no formato pt-BR, com exatamente 2 casas.

    Valor vazio ou só com zeros ("0", "00") é o estado "nenhum valor
    digitado" e vira string vazia, mostrando o placeholder do campo.
    Ex: "2500" -> "25,00"
    """
    digits = digits_only(stored_minor_units)
    if not digits or int(digits) == 0:
        return ""
    return _pt_br(parse_minor_units(digits))


def format_brl(amount: Any) -> str:
    """Formata um valor armazenado como moeda brasileira. Ex: 1234.5 -> "R$ 1.234,50"."""
    value = to_decimal(amount)
    if value < 0:
        return f"-R$ {_pt_br(-value)}"
    return f"R$ {_pt_br(value)}"
