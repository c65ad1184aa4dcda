"""Output helpers for the calculators.

Simple functions that render results as plain text tables using built-in
printing and string formatting.
"""

from __future__ import annotations

from typing import Iterable

from .data_models import (
    AmortizationResult,
    BaselineComparison,
    CompoundResult,
    SavingsResult,
    ScheduleEntry,
)


def print_loan_summary(result: AmortizationResult) -> None:
    """Print the summary metrics of an amortization in a human-readable format."""
    print("Summary")
    print("-" * 72)
    print(f"Base monthly payment   : {result.base_monthly_payment:.2f}")
    if result.actual_monthly_payment != result.base_monthly_payment:
        print(f"Actual monthly payment : {result.actual_monthly_payment:.2f}")
    if result.number_of_paid_extra_payments:
        print(f"Payment with extra     : {result.actual_monthly_payment_with_extra:.2f}")
    print(f"Total interest         : {result.total_interest:.2f}")
    print(f"Total cost             : {result.total:.2f}")
    print(f"Overpay                : {result.percentage_of_overpay:.2f}%")
    print(f"Duration of repayment  : {result.duration_of_repay} months")
    if result.number_of_paid_extra_payments:
        print(f"Extra payments made    : {result.number_of_paid_extra_payments}")
        print(f"Extra payments value   : {result.value_of_paid_extra_payments:.2f}")
    if result.repay_duration_difference:
        print(f"Months saved           : {result.repay_duration_difference}")
    if not result.fully_repaid:
        # The instalment did not cover the loan within the period.
        print(f"Remaining balance      : {result.remaining_balance:.2f} (not fully repaid)")
    print("-" * 72)


def print_schedule(schedule: Iterable[ScheduleEntry]) -> None:
    """Print the amortization schedule as a tab separated table."""
    headers = ["Month", "StartBal", "Payment", "Principal", "Interest", "Extra", "EndBal"]
    print("\t".join(headers))
    for entry in schedule:
        row = [
            str(entry.month),
            f"{entry.starting_balance:.2f}",
            f"{entry.payment:.2f}",
            f"{entry.principal_payment:.2f}",
            f"{entry.interest_payment:.2f}",
            f"{entry.extra_payment:.2f}",
            f"{entry.ending_balance:.2f}",
        ]
        print("\t".join(row))


def print_comparison(comparison: BaselineComparison) -> None:
    """Print a loan next to its no-extra-payments baseline.

    The difference column is baseline minus scenario, so a positive value is
    a saving.
    """
    scenario, baseline = comparison.scenario, comparison.baseline
    print("Comparison with baseline (no extra payments)")
    print("=" * 72)
    print(f"{'Metric':20s} {'Baseline':>15s} {'Scenario':>15s} {'Saved':>15s}")
    rows = [
        ("total", baseline.total, scenario.total, comparison.total_cost_saved),
        ("total_interest", baseline.total_interest, scenario.total_interest, comparison.interest_saved),
        ("duration_of_repay", baseline.duration_of_repay, scenario.duration_of_repay, comparison.months_saved),
    ]
    for key, v1, v2, diff in rows:
        print(f"{key:20s} {v1:15.2f} {v2:15.2f} {diff:15.2f}")
    print("=" * 72)


def print_compound(result: CompoundResult) -> None:
    print(f"Total    : {result.total:.2f}")
    print(f"Invested : {result.invested:.2f}")
    print(f"Interest : {result.total - result.invested:.2f}")


def print_savings(result: SavingsResult) -> None:
    print(f"Total : {result.total:.2f}")
    print(f"Added : {result.added:.2f}")
