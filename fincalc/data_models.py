"""Data models for the calculators.

Requests and results are frozen dataclasses: a request fully describes one
calculation, and a result is never modified after the engine returns it.
All money values are ``Decimal``.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class ExtraPaymentPolicy:
    """When and how much extra principal to pay on top of the instalment.

    Attributes
    ----------
    value: Decimal
        Amount of each extra payment. Zero disables the policy.
    limit: int
        Maximum number of extra payments. ``0`` means unlimited.
    frequency: int
        Month interval at which an extra payment is due. Months are counted
        from 0, so a frequency of 3 pays in months 0, 3, 6, ...
    """

    value: Decimal = Decimal("0")
    limit: int = 0
    frequency: int = 1


@dataclass(frozen=True)
class LoanRequest:
    """Inputs of a loan amortization.

    ``annual_interest_rate`` is a percentage (``Decimal("5.36")`` means
    5.36 %). ``additional_costs`` are one-time fees that count towards the
    total cost but are not amortized.
    """

    principal: Decimal
    annual_interest_rate: Decimal
    period: int  # months
    additional_costs: Decimal = Decimal("0")
    additional_monthly_payment: Decimal = Decimal("0")
    extra_payments: ExtraPaymentPolicy = field(default_factory=ExtraPaymentPolicy)

    def without_extras(self) -> "LoanRequest":
        """Return the same loan with no flat or policy extra payments."""
        return replace(
            self,
            additional_monthly_payment=Decimal("0"),
            extra_payments=ExtraPaymentPolicy(),
        )


@dataclass(frozen=True)
class ScheduleEntry:
    """One simulated month of the amortization.

    ``principal_payment`` is the part of the regular payment that reduced the
    balance; ``extra_payment`` is reported separately.
    """

    month: int
    starting_balance: Decimal
    payment: Decimal
    principal_payment: Decimal
    interest_payment: Decimal
    extra_payment: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class AmortizationResult:
    base_monthly_payment: Decimal
    actual_monthly_payment: Decimal
    # Informational: extra payments are not applied every month.
    actual_monthly_payment_with_extra: Decimal
    total: Decimal
    total_interest: Decimal
    percentage_of_overpay: Decimal
    duration_of_repay: int
    number_of_paid_extra_payments: int
    value_of_paid_extra_payments: Decimal
    repay_duration_difference: int
    remaining_balance: Decimal
    fully_repaid: bool
    schedule: Tuple[ScheduleEntry, ...] = ()

    def summary(self) -> dict:
        """Return the scalar fields as a JSON-serialisable dictionary."""
        return {
            "base_monthly_payment": float(self.base_monthly_payment),
            "actual_monthly_payment": float(self.actual_monthly_payment),
            "actual_monthly_payment_with_extra": float(self.actual_monthly_payment_with_extra),
            "total": float(self.total),
            "total_interest": float(self.total_interest),
            "percentage_of_overpay": float(self.percentage_of_overpay),
            "duration_of_repay": self.duration_of_repay,
            "number_of_paid_extra_payments": self.number_of_paid_extra_payments,
            "value_of_paid_extra_payments": float(self.value_of_paid_extra_payments),
            "repay_duration_difference": self.repay_duration_difference,
            "remaining_balance": float(self.remaining_balance),
            "fully_repaid": self.fully_repaid,
        }


@dataclass(frozen=True)
class BaselineComparison:
    """A loan scenario next to the same loan without any extra payments."""

    scenario: AmortizationResult
    baseline: AmortizationResult
    interest_saved: Decimal
    total_cost_saved: Decimal
    months_saved: int


@dataclass(frozen=True)
class CompoundRequest:
    """Regular monthly contributions growing at an annual rate.

    ``interest`` is an annual fraction (``0.073`` is 7.3 %). With
    ``monthly=False`` a year's worth of contributions is added and
    compounded once per year.
    """

    value: Decimal
    interest: Decimal
    years: int
    monthly: bool = False


@dataclass(frozen=True)
class CompoundResult:
    total: Decimal
    invested: Decimal


@dataclass(frozen=True)
class SavingsRequest:
    # Starting balance, a deposit per period and the rate per period.
    value: Decimal
    addition: Decimal
    interest: Decimal
    times: int


@dataclass(frozen=True)
class SavingsResult:
    total: Decimal
    added: Decimal
