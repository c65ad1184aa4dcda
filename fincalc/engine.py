"""Core calculation engine for loan amortization.

The engine computes the fixed (annuity) instalment for a loan and then walks
the loan month by month, applying a flat additional payment every month and
extra principal payments according to an ``ExtraPaymentPolicy``, until the
balance is repaid or the nominal period runs out.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from .data_models import (
    AmortizationResult,
    BaselineComparison,
    ExtraPaymentPolicy,
    LoanRequest,
    ScheduleEntry,
)
from .errors import require
from .log import get_logger
from .utils import HALF_CENT, Number, to_decimal

log = get_logger(__name__)

ZERO = Decimal("0")
# Lower bound of the principal when expressing interest as a percentage of it.
_MIN_PRINCIPAL = Decimal("0.01")


def calculate_payment(
    rate_per_period: Number,
    period: int,
    loan: Number,
    residual_value: Number = 0,
    due_at_start: bool = False,
) -> Decimal:
    """Return the fixed payment that amortizes ``loan`` over ``period`` periods.

    The formula is:

        payment = r * L * ((1 + r)^n + residual) / ((1 + r)^n - 1)

    where ``r`` is the rate per period, ``L`` the loan and ``n`` the number of
    periods. With a zero rate the payment simplifies to
    ``(L + residual) / n``. When ``due_at_start`` is set the payments fall at
    the beginning of each period and the result is discounted by one period.
    """
    r = to_decimal(rate_per_period)
    principal = to_decimal(loan)
    residual = to_decimal(residual_value)
    require(period > 0, f"Period must be positive; got {period}", "period")
    require(r >= 0, f"Interest rate must not be negative; got {r}", "rate_per_period")
    require(principal >= 0, f"Loan must not be negative; got {principal}", "loan")

    if r == 0:
        return (principal + residual) / Decimal(period)

    factor = (1 + r) ** period
    payment = r * principal * (factor + residual) / (factor - 1)
    if due_at_start:
        payment /= 1 + r
    return payment


def _validate_request(request: LoanRequest) -> None:
    policy = request.extra_payments
    require(request.principal >= 0, "Principal must not be negative", "principal")
    require(request.additional_costs >= 0, "Additional costs must not be negative", "additional_costs")
    require(
        request.annual_interest_rate >= 0,
        "Annual interest rate must not be negative",
        "annual_interest_rate",
    )
    require(request.period >= 1, "Period must be at least one month", "period")
    require(
        request.additional_monthly_payment >= 0,
        "Additional monthly payment must not be negative",
        "additional_monthly_payment",
    )
    require(policy.value >= 0, "Extra payment value must not be negative", "extra_payments.value")
    require(policy.limit >= 0, "Extra payment limit must not be negative", "extra_payments.limit")
    require(policy.frequency >= 1, "Extra payment frequency must be at least 1", "extra_payments.frequency")


def _normalize(request: LoanRequest) -> LoanRequest:
    """Coerce numeric fields to ``Decimal`` so callers may pass ints or floats."""
    policy = request.extra_payments
    return LoanRequest(
        principal=to_decimal(request.principal),
        annual_interest_rate=to_decimal(request.annual_interest_rate),
        period=int(request.period),
        additional_costs=to_decimal(request.additional_costs),
        additional_monthly_payment=to_decimal(request.additional_monthly_payment),
        extra_payments=ExtraPaymentPolicy(
            value=to_decimal(policy.value),
            limit=int(policy.limit),
            frequency=int(policy.frequency),
        ),
    )


def _is_extra_payment_month(policy: ExtraPaymentPolicy, paid: int, month: int) -> bool:
    if policy.value <= 0:
        return False
    # A limit of 0 means the policy never runs out.
    if policy.limit and paid >= policy.limit:
        return False
    return month % policy.frequency == 0


def compute_loan(request: LoanRequest) -> AmortizationResult:
    """Simulate the loan month by month and summarise the outcome.

    Parameters
    ----------
    request: LoanRequest
        The loan inputs. Invalid values raise ``InvalidInputError`` before
        anything is computed.

    Returns
    -------
    AmortizationResult
        Payments, totals, the number and value of extra payments applied and
        the month-by-month schedule. If the instalment cannot repay the loan
        within ``period`` months, ``fully_repaid`` is ``False`` and
        ``remaining_balance`` holds what is left.
    """
    request = _normalize(request)
    _validate_request(request)
    policy = request.extra_payments

    monthly_rate = request.annual_interest_rate / Decimal(100) / Decimal(12)
    base_payment = calculate_payment(monthly_rate, request.period, request.principal)
    actual_payment = base_payment + request.additional_monthly_payment

    balance = request.principal
    total_interest = ZERO
    extras_paid = 0
    extras_value = ZERO
    month = 0
    schedule: List[ScheduleEntry] = []

    while month < request.period and balance > 0:
        starting_balance = balance
        interest = balance * monthly_rate
        principal_payment = actual_payment - interest
        extra = ZERO

        if _is_extra_payment_month(policy, extras_paid, month):
            extras_paid += 1
            extras_value += policy.value
            extra = policy.value

        balance -= principal_payment + extra
        total_interest += interest
        month += 1

        # Drop sub-cent residue so rounding noise cannot add a phantom month.
        if balance.copy_abs() < HALF_CENT:
            balance = ZERO

        schedule.append(
            ScheduleEntry(
                month=month,
                starting_balance=starting_balance,
                payment=actual_payment,
                principal_payment=principal_payment,
                interest_payment=interest,
                extra_payment=extra,
                ending_balance=max(balance, ZERO),
            )
        )

    fully_repaid = balance <= 0
    if not fully_repaid:
        log.warning(
            "loan not repaid within %s months; remaining balance %.2f", request.period, balance
        )

    with_extra = actual_payment + policy.value if policy.value > 0 else actual_payment
    percentage_of_overpay = total_interest / max(_MIN_PRINCIPAL, request.principal) * 100

    log.debug(
        "computed loan principal=%s period=%s duration=%s extra_payments=%s",
        request.principal,
        request.period,
        month,
        extras_paid,
    )
    return AmortizationResult(
        base_monthly_payment=base_payment,
        actual_monthly_payment=actual_payment,
        actual_monthly_payment_with_extra=with_extra,
        total=request.principal + request.additional_costs + total_interest,
        total_interest=total_interest,
        percentage_of_overpay=percentage_of_overpay,
        duration_of_repay=month,
        number_of_paid_extra_payments=extras_paid,
        value_of_paid_extra_payments=extras_value,
        repay_duration_difference=request.period - month,
        remaining_balance=max(balance, ZERO),
        fully_repaid=fully_repaid,
        schedule=tuple(schedule),
    )


def compare_to_baseline(request: LoanRequest) -> BaselineComparison:
    """Compare a loan with the same loan paid without any extra payments."""
    scenario = compute_loan(request)
    baseline = compute_loan(request.without_extras())
    return BaselineComparison(
        scenario=scenario,
        baseline=baseline,
        interest_saved=baseline.total_interest - scenario.total_interest,
        total_cost_saved=baseline.total - scenario.total,
        months_saved=baseline.duration_of_repay - scenario.duration_of_repay,
    )
