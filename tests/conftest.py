# tests/conftest.py
from __future__ import annotations

from decimal import Decimal

import pytest

from fincalc.data_models import ExtraPaymentPolicy, LoanRequest


@pytest.fixture
def loan_request():
    """Factory for the reference loan (550k at 5.36 % over 76 months).

    Pass keyword overrides to change any field, e.g.
    ``loan_request(extra_payments=ExtraPaymentPolicy(value=Decimal("4000")))``.
    """

    def _factory(**overrides):
        fields = dict(
            principal=Decimal("550000"),
            annual_interest_rate=Decimal("5.36"),
            period=76,
            additional_costs=Decimal("500"),
            additional_monthly_payment=Decimal("0"),
            extra_payments=ExtraPaymentPolicy(),
        )
        fields.update(overrides)
        return LoanRequest(**fields)

    return _factory


@pytest.fixture
def extra_policy():
    def _factory(value="4000", limit=0, frequency=1):
        return ExtraPaymentPolicy(value=Decimal(value), limit=limit, frequency=frequency)

    return _factory
