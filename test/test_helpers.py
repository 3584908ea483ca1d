# test/test_helpers.py
from datetime import date
from decimal import Decimal

import pytest

from utils.helpers import (
    cell_text,
    format_bl_numbers,
    format_brl,
    format_currency,
    format_ordinal_date,
    format_quantity_mt,
    format_weight,
    is_blank,
    normalize_name,
    parse_decimal,
    parse_quantity,
)


# ---------- number parser ----------
@pytest.mark.parametrize("token, expected", [
    ("1.234,567", Decimal("1234.567")),
    ("1,234.567", Decimal("1234.567")),
    ("12,5", Decimal("12.5")),
    ("100,500", Decimal("100.500")),
    ("1 234,5", Decimal("1234.5")),
    ("  42 ", Decimal("42")),
    (12.5, Decimal("12.5")),
    (7, Decimal("7")),
])
def test_parse_decimal_locales(token, expected):
    assert parse_decimal(token) == expected


@pytest.mark.parametrize("token", ["", "   ", None, "abc", "nan", "-5", "inf", "1,2,3.4.5x"])
def test_parse_decimal_degrades_to_zero(token):
    assert parse_decimal(token) == 0


def test_parse_quantity_returns_float():
    assert parse_quantity("1.234,567") == pytest.approx(1234.567)
    assert parse_quantity("") == 0.0


# ---------- text cells ----------
def test_blank_and_cell_text():
    assert is_blank(float("nan"))
    assert is_blank(" NaN ")
    assert not is_blank(0)
    assert cell_text(12.0) == "12"
    assert cell_text(" BL1 ") == "BL1"
    assert cell_text(None) == ""


def test_normalize_name_collapses_whitespace():
    assert normalize_name("  soyco   trading ") == "SOYCO TRADING"


# ---------- formatters ----------
def test_format_brl():
    assert format_brl(700) == "R$ 700,00"
    assert format_brl(1234.5) == "R$ 1234,50"
    assert format_brl(0) == "R$ 0,00"


def test_document_number_formats():
    assert format_currency(1234.5) == "1,234.50"
    assert format_currency(None) == "0.00"
    assert format_weight(25000.1) == "25,000.100"


def test_quantity_mt_truncates():
    assert format_quantity_mt(Decimal("150.750")) == "150.750 MT"
    assert format_quantity_mt(Decimal("1234.5678")) == "1,234.567 MT"
    assert format_quantity_mt(Decimal(0)) == "0.000 MT"


@pytest.mark.parametrize("day, expected", [
    (1, "JANUARY 1ST, 2025"),
    (2, "JANUARY 2ND, 2025"),
    (3, "JANUARY 3RD, 2025"),
    (4, "JANUARY 4TH, 2025"),
    (11, "JANUARY 11TH, 2025"),
    (12, "JANUARY 12TH, 2025"),
    (13, "JANUARY 13TH, 2025"),
    (21, "JANUARY 21ST, 2025"),
    (22, "JANUARY 22ND, 2025"),
    (23, "JANUARY 23RD, 2025"),
])
def test_ordinal_dates(day, expected):
    assert format_ordinal_date(date(2025, 1, day)) == expected


def test_format_bl_numbers():
    assert format_bl_numbers([]) == ""
    assert format_bl_numbers(["1"]) == "1"
    assert format_bl_numbers(["1", "2"]) == "1 E 2"
    assert format_bl_numbers(["1", "3", "9"]) == "1, 3 E 9"
