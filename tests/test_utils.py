# tests/test_utils.py
from decimal import Decimal

import pytest

from fincalc.errors import InvalidInputError
from fincalc.utils import decimal_from_str, parse_amount, to_decimal


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("550000", Decimal("550000")),
        ("550,000", Decimal("550000")),
        ("550k", Decimal("550000")),
        ("1.2m", Decimal("1200000")),
        (" 4K ", Decimal("4000")),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "k", "1.2.3"])
def test_parse_amount_rejects_garbage(raw):
    with pytest.raises(ValueError):
        parse_amount(raw)


def test_decimal_from_str_message_names_input():
    with pytest.raises(ValueError, match="nope"):
        decimal_from_str("nope")


def test_to_decimal_goes_through_str_for_floats():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(7) == Decimal("7")
    assert to_decimal("5.36") == Decimal("5.36")


def test_to_decimal_rejects_bool():
    with pytest.raises(ValueError):
        to_decimal(True)



@pytest.mark.parametrize("raw", ["inf", "-Infinity", "nan"])
def test_parse_amount_rejects_non_finite(raw):
    with pytest.raises(ValueError):
        parse_amount(raw)


@pytest.mark.parametrize("raw", [float("nan"), float("inf"), Decimal("sNaN"), "NaN"])
def test_to_decimal_rejects_non_finite(raw):
    with pytest.raises(InvalidInputError):
        to_decimal(raw)
