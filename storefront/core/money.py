"""Vietnamese-locale display formatting for amounts and dates"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CURRENCY_SYMBOL = "₫"
THOUSANDS_SEPARATOR = "."
NBSP = "\u00a0"


def format_currency(amount: Union[int, float, Decimal]) -> str:
    """
    Format an amount as VND text, e.g. 230000 -> "230.000 ₫".

    Whole dong only: fractions are rounded half-up.
    """
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    grouped = f"{abs(int(value)):,}".replace(",", THOUSANDS_SEPARATOR)
    return f"{sign}{grouped}{NBSP}{CURRENCY_SYMBOL}"


def format_datetime(value: Union[str, datetime]) -> str:
    """Format a timestamp as dd/mm/yyyy HH:MM"""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value.strftime("%d/%m/%Y %H:%M")
