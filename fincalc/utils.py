"""Helpers for turning user input into ``Decimal`` values.

Amounts coming from the command line may use thousands separators and the
``k``/``m`` shorthand; programmatic callers may pass ints, floats or strings.
Everything ends up as ``Decimal`` so the engine works with a single numeric
type.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, getcontext
from typing import Union

from .config import settings
from .errors import InvalidInputError

getcontext().prec = settings.DECIMAL_PRECISION

Number = Union[Decimal, int, float, str]

HALF_CENT = Decimal("0.005")


def decimal_from_str(value: str) -> Decimal:
    """Convert a numeric string into a ``Decimal``.

    Commas are stripped, so ``"550,000"`` is accepted. Raises ``ValueError``
    if conversion fails and ``InvalidInputError`` for NaN or infinity.
    """
    try:
        cleaned = value.replace(",", "").strip()
        number = Decimal(cleaned)
    except (InvalidOperation, AttributeError) as exc:
        raise ValueError(f"Invalid numeric value: {value}") from exc
    return _require_finite(number, value)


def _require_finite(number: Decimal, raw: object) -> Decimal:
    if not number.is_finite():
        raise InvalidInputError(f"Invalid numeric value: {raw!r} is not finite")
    return number


def to_decimal(value: Number) -> Decimal:
    """Coerce ``value`` to ``Decimal``.

    Floats go through ``str`` first so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion. NaN and infinity raise
    ``InvalidInputError``.
    """
    if isinstance(value, Decimal):
        return _require_finite(value, value)
    if isinstance(value, bool):
        raise ValueError(f"Invalid numeric value: {value!r}")
    if isinstance(value, (int, float)):
        return _require_finite(Decimal(str(value)), value)
    return decimal_from_str(value)


def parse_amount(value: str) -> Decimal:
    """Parse a currency amount with an optional ``k``/``m`` suffix.

    ``"500k"`` is 500 000, ``"1.2m"`` is 1 200 000.
    """
    cleaned = value.strip().lower().replace(",", "")
    factor = Decimal(1)
    if cleaned.endswith("k"):
        factor = Decimal(1_000)
        cleaned = cleaned[:-1]
    elif cleaned.endswith("m"):
        factor = Decimal(1_000_000)
        cleaned = cleaned[:-1]
    return decimal_from_str(cleaned) * factor
