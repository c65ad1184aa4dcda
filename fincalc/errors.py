"""Exceptions raised by the calculators.

Invalid inputs fail fast before any computation starts. A loan that does not
amortize within its period is *not* an error: it is reported on the result
(see ``AmortizationResult.fully_repaid``).
"""

from __future__ import annotations

from typing import Optional


class FinCalcError(Exception):
    """Base class for calculator errors."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidInputError(FinCalcError, ValueError):
    """An input value is outside the range a calculator accepts."""


def require(condition: bool, message: str, field: Optional[str] = None) -> None:
    """Raise ``InvalidInputError`` with ``message`` unless ``condition`` holds."""
    if not condition:
        raise InvalidInputError(message, field)
