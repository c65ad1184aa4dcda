"""Command-line interface for the calculators.

This module uses the ``click`` library to implement a multi-command
interface: loan amortization with extra payments, compound projections of
monthly contributions and savings growth. Loan results can be printed to the
terminal or exported to JSON/CSV files.
"""

from __future__ import annotations

import csv
import json
from decimal import Decimal
from pathlib import Path
from typing import Optional

import click

from .compound import project_compound, project_savings
from .config import settings
from .data_models import (
    AmortizationResult,
    CompoundRequest,
    ExtraPaymentPolicy,
    LoanRequest,
    SavingsRequest,
)
from .engine import compare_to_baseline, compute_loan
from .errors import InvalidInputError
from .formatter import (
    print_comparison,
    print_compound,
    print_loan_summary,
    print_savings,
    print_schedule,
)
from .utils import decimal_from_str, parse_amount


def _amount(value: Optional[str], name: str) -> Decimal:
    if not value:
        return Decimal("0")
    try:
        return parse_amount(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint=name)


def _rate(value: str, name: str) -> Decimal:
    try:
        return decimal_from_str(value.rstrip("%"))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint=name)


def build_loan_request(
    principal: str,
    rate: str,
    term: int,
    additional_costs: Optional[str] = None,
    monthly_payment: Optional[str] = None,
    extra_payment: Optional[str] = None,
    extra_limit: int = 0,
    extra_frequency: int = 1,
) -> LoanRequest:
    """Turn raw option strings into a ``LoanRequest``."""
    return LoanRequest(
        principal=_amount(principal, "--principal"),
        annual_interest_rate=_rate(rate, "--rate"),
        period=term,
        additional_costs=_amount(additional_costs, "--additional-costs"),
        additional_monthly_payment=_amount(monthly_payment, "--monthly-payment"),
        extra_payments=ExtraPaymentPolicy(
            value=_amount(extra_payment, "--extra-payment"),
            limit=extra_limit,
            frequency=extra_frequency,
        ),
    )


def _serialize_schedule(result: AmortizationResult) -> list:
    return [
        {
            "month": e.month,
            "starting_balance": float(e.starting_balance),
            "payment": float(e.payment),
            "principal": float(e.principal_payment),
            "interest": float(e.interest_payment),
            "extra_payment": float(e.extra_payment),
            "ending_balance": float(e.ending_balance),
        }
        for e in result.schedule
    ]


def export_to_json(path: Path, result: AmortizationResult) -> None:
    """Export summary and schedule to a JSON file."""
    data = {"summary": result.summary(), "schedule": _serialize_schedule(result)}
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_to_csv(path: Path, result: AmortizationResult) -> None:
    """Export the schedule to a CSV file."""
    header = [
        "Month",
        "Starting_Balance",
        "Payment",
        "Principal",
        "Interest",
        "Extra_Payment",
        "Ending_Balance",
    ]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for e in result.schedule:
            writer.writerow(
                [
                    e.month,
                    float(e.starting_balance),
                    float(e.payment),
                    float(e.principal_payment),
                    float(e.interest_payment),
                    float(e.extra_payment),
                    float(e.ending_balance),
                ]
            )


def _echo_loan(result: AmortizationResult, show_schedule: bool) -> None:
    print_loan_summary(result)
    if not show_schedule:
        return
    max_rows = settings.MAX_ROWS
    if len(result.schedule) > max_rows:
        click.echo(f"Schedule has {len(result.schedule)} rows; showing first {max_rows} rows.")
        print_schedule(result.schedule[:max_rows])
    else:
        print_schedule(result.schedule)


@click.group()
def cli() -> None:
    """Loan amortization and compound interest calculators."""
    pass


@cli.command()
@click.option("--principal", "-p", "principal", required=True, help="Loan amount")
@click.option("--rate", "-r", "rate", required=True, help="Annual interest rate (percent)")
@click.option("--term", "-t", "term", required=True, type=int, help="Repayment period in months")
@click.option("--additional-costs", "additional_costs", help="One-time costs added to the total")
@click.option("--monthly-payment", "monthly_payment", help="Flat amount added to every monthly payment")
@click.option("--extra-payment", "extra_payment", help="Value of each extra principal payment")
@click.option("--extra-limit", "extra_limit", type=int, default=0, show_default=True, help="Maximum number of extra payments (0 = unlimited)")
@click.option("--extra-frequency", "extra_frequency", type=int, default=1, show_default=True, help="Pay extra every N months, starting with the first")
@click.option("--schedule", "show_schedule", is_flag=True, help="Print the month-by-month schedule")
@click.option("--compare", "compare", is_flag=True, help="Compare against the loan without extra payments")
@click.option("--output", "output", type=str, help="Output file path (.json or .csv)")
def loan(
    principal: str,
    rate: str,
    term: int,
    additional_costs: Optional[str],
    monthly_payment: Optional[str],
    extra_payment: Optional[str],
    extra_limit: int,
    extra_frequency: int,
    show_schedule: bool,
    compare: bool,
    output: Optional[str],
) -> None:
    """Compute the monthly payment and amortization of a loan."""
    request = build_loan_request(
        principal,
        rate,
        term,
        additional_costs,
        monthly_payment,
        extra_payment,
        extra_limit,
        extra_frequency,
    )
    try:
        if compare:
            comparison = compare_to_baseline(request)
            result = comparison.scenario
        else:
            comparison = None
            result = compute_loan(request)
    except InvalidInputError as exc:
        raise click.BadParameter(exc.message, param_hint=exc.field)

    if output:
        path = Path(output)
        if path.suffix.lower() == ".json":
            export_to_json(path, result)
        elif path.suffix.lower() == ".csv":
            export_to_csv(path, result)
        else:
            raise click.BadParameter("Unsupported output format; use .json or .csv", param_hint="--output")
        click.echo(f"Schedule exported to {path}")
        return

    _echo_loan(result, show_schedule)
    if comparison is not None:
        print_comparison(comparison)


@cli.command()
@click.option("--value", "value", required=True, help="Contribution per month")
@click.option("--interest", "interest", required=True, help="Annual interest as a fraction, e.g. 0.073")
@click.option("--years", "years", required=True, type=int, help="Number of years")
@click.option("--monthly", "monthly", is_flag=True, help="Compound monthly instead of once a year")
def compound(value: str, interest: str, years: int, monthly: bool) -> None:
    """Project regular monthly contributions with compound interest."""
    request = CompoundRequest(
        value=_amount(value, "--value"),
        interest=_rate(interest, "--interest"),
        years=years,
        monthly=monthly,
    )
    try:
        result = project_compound(request)
    except InvalidInputError as exc:
        raise click.BadParameter(exc.message, param_hint=exc.field)
    print_compound(result)


@cli.command()
@click.option("--value", "value", default="0", show_default=True, help="Starting balance")
@click.option("--addition", "addition", required=True, help="Deposit added each period")
@click.option("--interest", "interest", required=True, help="Interest per period as a fraction, e.g. 0.015")
@click.option("--times", "times", required=True, type=int, help="Number of periods")
def savings(value: str, addition: str, interest: str, times: int) -> None:
    """Grow a starting balance with a fixed deposit every period."""
    request = SavingsRequest(
        value=_amount(value, "--value"),
        addition=_amount(addition, "--addition"),
        interest=_rate(interest, "--interest"),
        times=times,
    )
    try:
        result = project_savings(request)
    except InvalidInputError as exc:
        raise click.BadParameter(exc.message, param_hint=exc.field)
    print_savings(result)


@cli.command()
def demo() -> None:
    """Run every calculator on a fixed example."""
    click.echo("Loan: 550000 at 5.36% over 76 months, 4000 extra every month")
    request = LoanRequest(
        principal=Decimal("550000"),
        annual_interest_rate=Decimal("5.36"),
        period=76,
        additional_costs=Decimal("500"),
        extra_payments=ExtraPaymentPolicy(value=Decimal("4000"), limit=0, frequency=1),
    )
    print_loan_summary(compute_loan(request))

    for monthly in (False, True):
        label = "monthly" if monthly else "annual"
        click.echo(f"Compound: 500 per month at 7.3% for 30 years, {label} compounding")
        print_compound(
            project_compound(
                CompoundRequest(value=Decimal("500"), interest=Decimal("0.073"), years=30, monthly=monthly)
            )
        )

    click.echo("Savings: 1000 start, 500 per period at 1.5% for 240 periods")
    print_savings(
        project_savings(
            SavingsRequest(value=Decimal("1000"), addition=Decimal("500"), interest=Decimal("0.015"), times=240)
        )
    )


if __name__ == "__main__":
    cli()
