"""Helper utility functions for parsing and formatting freight data."""

import re
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import Iterable, Optional

import pandas as pd

from config import CURRENCY_PREFIX

_WHITESPACE = re.compile(r"\s+")

MONTHS_EN = [
    "JANUARY", "FEBRUARY", "MARCH", "APRIL", "MAY", "JUNE",
    "JULY", "AUGUST", "SEPTEMBER", "OCTOBER", "NOVEMBER", "DECEMBER",
]


def is_blank(val) -> bool:
    """
    Check if value is considered empty.

    Returns True if value is:
    - NaN / None
    - Empty string ""
    - String containing only whitespace
    - String "nan" (case-insensitive)

    Args:
        val: Value to check (any type)

    Returns:
        True if value is considered empty, False otherwise
    """
    if val is None:
        return True
    if isinstance(val, str):
        stripped = val.strip()
        return stripped == "" or stripped.lower() == "nan"
    try:
        return bool(pd.isna(val))
    except (TypeError, ValueError):
        return False


def cell_text(val) -> str:
    """Cell value as trimmed text ('' for blank cells)."""
    if is_blank(val):
        return ""
    if isinstance(val, float) and val.is_integer():
        # Workbooks hand back BL numbers like 12 as 12.0
        return str(int(val))
    return str(val).strip()


def normalize_name(val) -> str:
    """Trim, collapse inner whitespace and uppercase a shipper/broker name."""
    return _WHITESPACE.sub(" ", cell_text(val)).upper()


def parse_decimal(token) -> Decimal:
    """
    Parse a free-form quantity into an exact Decimal.

    Accepts Brazilian ("1.234,56") and US ("1,234.56") notations: when both
    separators appear, the one appearing later is the decimal separator.
    A lone comma is a decimal separator.

    Never raises: blank, unparsable, non-finite or negative input yields 0.

    Examples:
        >>> parse_decimal("1.234,567")
        Decimal('1234.567')
        >>> parse_decimal("1,234.567")
        Decimal('1234.567')
        >>> parse_decimal("abc")
        Decimal('0')
    """
    if is_blank(token) or isinstance(token, bool):
        return Decimal(0)

    if isinstance(token, (int, float)):
        text = str(token)
    else:
        text = _WHITESPACE.sub("", str(token))
        if "." in text and "," in text:
            if text.rfind(",") > text.rfind("."):
                text = text.replace(".", "").replace(",", ".")
            else:
                text = text.replace(",", "")
        elif "," in text:
            text = text.replace(",", ".")

    try:
        value = Decimal(text)
    except InvalidOperation:
        return Decimal(0)

    if not value.is_finite() or value < 0:
        return Decimal(0)
    return value


def parse_quantity(token) -> float:
    """
    Parse a free-form quantity (metric tons) into a float.

    Same rules as parse_decimal(); malformed cells degrade to 0.0.

    Examples:
        >>> parse_quantity("1.234,567")
        1234.567
        >>> parse_quantity("")
        0.0
    """
    return float(parse_decimal(token))


def format_brl(value: float) -> str:
    """
    Format a billing amount: fixed-point, comma decimal, currency prefix.

    Examples:
        >>> format_brl(700)
        'R$ 700,00'
    """
    return f"{CURRENCY_PREFIX} {float(value):.2f}".replace(".", ",")


def format_currency(value: Optional[float]) -> str:
    """
    Format a document amount with 2 decimals and thousands separator.

    Examples:
        >>> format_currency(1234.5)
        '1,234.50'
    """
    return f"{float(value or 0):,.2f}"


def format_weight(weight: Optional[float]) -> str:
    """
    Format a weight in metric tons with 3 decimals.

    Examples:
        >>> format_weight(25000.1)
        '25,000.100'
    """
    return f"{float(weight or 0):,.3f}"


def truncate_mt(quantity) -> Decimal:
    """Truncate a quantity to 3 decimal places (no rounding up)."""
    return Decimal(str(quantity)).quantize(Decimal("0.001"), rounding=ROUND_DOWN)


def format_quantity_mt(quantity) -> str:
    """
    Format a receipt quantity, truncated to 3 decimals, with the MT suffix.

    Examples:
        >>> format_quantity_mt(Decimal("150.750"))
        '150.750 MT'
    """
    return f"{truncate_mt(quantity):,.3f} MT"


def day_suffix(day: int) -> str:
    if 11 <= day <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_ordinal_date(value: date) -> str:
    """
    Format a date the way it is printed on the BL.

    Examples:
        >>> format_ordinal_date(date(2025, 1, 1))
        'JANUARY 1ST, 2025'
        >>> format_ordinal_date(date(2025, 3, 12))
        'MARCH 12TH, 2025'
    """
    return f"{MONTHS_EN[value.month - 1]} {value.day}{day_suffix(value.day).upper()}, {value.year}"


def format_bl_numbers(numbers: Iterable[str]) -> str:
    """
    Join BL numbers for a receipt line: "1", "1 E 2", "1, 3 E 9".
    """
    numbers = list(numbers)
    if not numbers:
        return ""
    if len(numbers) == 1:
        return numbers[0]
    return f"{', '.join(numbers[:-1])} E {numbers[-1]}"
