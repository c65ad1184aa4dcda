# tests/test_compound.py
from decimal import Decimal

import pytest

from fincalc.compound import project_compound, project_savings
from fincalc.data_models import CompoundRequest, SavingsRequest
from fincalc.errors import InvalidInputError


def test_annual_compounding_example():
    result = project_compound(CompoundRequest(value=Decimal("500"), interest=Decimal("0.073"), years=30))
    assert result.invested == Decimal("180000")
    # 6000 added and compounded once a year, 30 times.
    g = 1.073
    expected = 6000 * g * (g**30 - 1) / 0.073
    assert float(result.total) == pytest.approx(expected, rel=1e-9)


def test_monthly_compounding_example():
    result = project_compound(
        CompoundRequest(value=Decimal("500"), interest=Decimal("0.073"), years=30, monthly=True)
    )
    assert result.invested == Decimal("180000")
    i = 0.073 / 12
    expected = 500 * (1 + i) * ((1 + i) ** 360 - 1) / i
    assert float(result.total) == pytest.approx(expected, rel=1e-9)


def test_interest_grows_both_modes_above_invested():
    annual = project_compound(CompoundRequest(value=Decimal("500"), interest=Decimal("0.073"), years=30))
    monthly = project_compound(
        CompoundRequest(value=Decimal("500"), interest=Decimal("0.073"), years=30, monthly=True)
    )
    assert annual.total > annual.invested
    assert monthly.total > monthly.invested
    assert annual.invested == monthly.invested


def test_zero_interest_total_equals_invested():
    result = project_compound(CompoundRequest(value=Decimal("250"), interest=Decimal("0"), years=2, monthly=True))
    assert result.total == result.invested == Decimal("6000")


def test_zero_years():
    result = project_compound(CompoundRequest(value=Decimal("500"), interest=Decimal("0.05"), years=0))
    assert result.total == 0
    assert result.invested == 0


@pytest.mark.parametrize(
    "request_",
    [
        CompoundRequest(value=Decimal("-1"), interest=Decimal("0.05"), years=1),
        CompoundRequest(value=Decimal("1"), interest=Decimal("0.05"), years=-1),
        CompoundRequest(value=Decimal("1"), interest=Decimal("-1"), years=1),
    ],
)
def test_compound_rejects_invalid_input(request_):
    with pytest.raises(InvalidInputError):
        project_compound(request_)


def test_savings_growth_example():
    result = project_savings(
        SavingsRequest(value=Decimal("1000"), addition=Decimal("500"), interest=Decimal("0.015"), times=240)
    )
    assert result.added == Decimal("120000")
    g = 1.015
    expected = 1000 * g**240 + 500 * g * (g**240 - 1) / 0.015
    assert float(result.total) == pytest.approx(expected, rel=1e-9)


def test_savings_without_periods_keeps_starting_value():
    result = project_savings(SavingsRequest(value=Decimal("1000"), addition=Decimal("500"), interest=Decimal("0.01"), times=0))
    assert result.total == Decimal("1000")
    assert result.added == 0


def test_savings_without_interest_is_linear():
    result = project_savings(SavingsRequest(value=100, addition=50, interest=0, times=10))
    assert result.total == Decimal("600")


def test_savings_rejects_negative_periods():
    with pytest.raises(InvalidInputError):
        project_savings(SavingsRequest(value=Decimal("0"), addition=Decimal("1"), interest=Decimal("0"), times=-1))


@pytest.mark.parametrize("field", ["value", "interest"])
@pytest.mark.parametrize("bad", [Decimal("NaN"), float("inf")])
def test_compound_rejects_non_finite(field, bad):
    fields = {"value": Decimal("500"), "interest": Decimal("0.073"), "years": 1, field: bad}
    with pytest.raises(InvalidInputError):
        project_compound(CompoundRequest(**fields))


@pytest.mark.parametrize("field", ["value", "addition", "interest"])
@pytest.mark.parametrize("bad", [Decimal("NaN"), float("-inf")])
def test_savings_rejects_non_finite(field, bad):
    fields = {"value": Decimal("1000"), "addition": Decimal("500"), "interest": Decimal("0.01"), "times": 3, field: bad}
    with pytest.raises(InvalidInputError):
        project_savings(SavingsRequest(**fields))
