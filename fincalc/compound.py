"""Compound interest projections for regular contributions."""

from __future__ import annotations

from decimal import Decimal

from .data_models import CompoundRequest, CompoundResult, SavingsRequest, SavingsResult
from .errors import require
from .log import get_logger
from .utils import to_decimal

log = get_logger(__name__)


def project_compound(request: CompoundRequest) -> CompoundResult:
    """Project monthly contributions of ``request.value`` over ``request.years``.

    With monthly compounding each month's contribution is added and the
    running total grows by ``interest / 12``. With annual compounding twelve
    contributions are added at once and the total grows by ``interest``.
    """
    value = to_decimal(request.value)
    interest = to_decimal(request.interest)
    require(value >= 0, "Contribution must not be negative", "value")
    require(request.years >= 0, "Years must not be negative", "years")
    require(interest > -1, "Interest must be greater than -100%", "interest")

    periods_per_year = 12 if request.monthly else 1
    contribution = value * (1 if request.monthly else 12)
    growth = 1 + interest / periods_per_year

    total = Decimal("0")
    invested = Decimal("0")
    for _ in range(request.years * periods_per_year):
        total += contribution
        total *= growth
        invested += contribution

    log.debug("compound projection years=%s monthly=%s total=%.2f", request.years, request.monthly, total)
    return CompoundResult(total=total, invested=invested)


def project_savings(request: SavingsRequest) -> SavingsResult:
    """Grow a starting balance with a fixed deposit before each period's interest."""
    value = to_decimal(request.value)
    addition = to_decimal(request.addition)
    interest = to_decimal(request.interest)
    require(request.times >= 0, "Number of periods must not be negative", "times")
    require(interest > -1, "Interest must be greater than -100%", "interest")

    total = value
    added = Decimal("0")
    for _ in range(request.times):
        total += addition
        total *= 1 + interest
        added += addition

    log.debug("savings growth times=%s total=%.2f", request.times, total)
    return SavingsResult(total=total, added=added)
