"""
Tests for loan summary KPIs.
"""

import math

import pytest
from amortlab.core.params import LoanParameters
from amortlab.core.schedule import compute
from amortlab.kpi import (
    interest_efficiency,
    interest_ratio,
    loan_summary,
    total_cost,
    total_interest,
)


class TestLoanSummary:
    @pytest.fixture
    def params(self):
        return LoanParameters(250_000.0, 4.5, 30, 2010)

    def test_reference_values(self, params):
        summary = loan_summary(params)

        assert summary.monthly_payment == pytest.approx(1266.71, abs=0.01)
        assert summary.total_interest == pytest.approx(206_016, rel=1e-4)
        assert summary.total_cost == pytest.approx(summary.total_interest + 250_000)
        assert summary.interest_ratio_pct == pytest.approx(82.41, abs=0.01)
        assert summary.efficiency == pytest.approx(250_000 / summary.total_interest)
        assert summary.interest_exceeds_principal is False

    def test_standalone_functions_agree(self, params):
        summary = loan_summary(params)

        assert total_cost(params) == pytest.approx(summary.total_cost)
        assert total_interest(params) == pytest.approx(summary.total_interest)
        assert interest_ratio(params) == pytest.approx(summary.interest_ratio_pct)

    def test_matches_schedule_totals(self, params):
        summary = loan_summary(params)
        result = compute(params)

        assert result.total_interest_paid == pytest.approx(summary.total_interest, abs=0.01)

    def test_expensive_loan_flags_interest(self):
        summary = loan_summary(LoanParameters(100_000.0, 12.0, 40, 2000))

        assert summary.total_interest > 100_000
        assert summary.interest_exceeds_principal is True
        assert summary.efficiency < 1

    def test_zero_rate(self):
        summary = loan_summary(LoanParameters(120_000.0, 0.0, 10, 2000))

        assert summary.monthly_payment == 1000.0
        assert summary.total_interest == 0.0
        assert summary.total_cost == 120_000.0
        assert math.isinf(summary.efficiency)
        assert summary.interest_exceeds_principal is False


class TestInterestEfficiency:
    def test_ratio(self):
        assert interest_efficiency(200.0, 100.0) == 2.0

    def test_no_interest(self):
        assert math.isinf(interest_efficiency(200.0, 0.0))
