"""
Summary KPIs for a fixed-rate loan.

These mirror the summary panel of the simulator: monthly payment, total
interest, total cost, the interest-to-principal ratio and the "efficiency"
ratio principal / total interest. All values derive from the closed-form
annuity payment, not from the rolled-up schedule.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from amortlab.core.params import LoanParameters
from amortlab.core.schedule import annuity_payment


@dataclass(frozen=True)
class LoanSummary:
    """
    Headline figures for one set of loan parameters.

    Attributes:
        monthly_payment: Fixed monthly payment
        total_interest: Interest paid over the whole term
        total_cost: Sum of all payments (principal + interest)
        interest_ratio_pct: Total interest as a percentage of principal
        efficiency: Principal per unit of interest (inf when interest is zero)
    """

    monthly_payment: float
    total_interest: float
    total_cost: float
    interest_ratio_pct: float
    efficiency: float

    @property
    def interest_exceeds_principal(self) -> bool:
        return self.efficiency < 1.0


def total_cost(params: LoanParameters) -> float:
    """Sum of all scheduled payments."""
    payment = annuity_payment(params.principal, params.annual_rate_pct, params.term_years)
    return payment * params.total_months


def total_interest(params: LoanParameters) -> float:
    """Total cost minus the amount borrowed."""
    return total_cost(params) - params.principal


def interest_ratio(params: LoanParameters) -> float:
    """Total interest as a percentage of principal."""
    return total_interest(params) / params.principal * 100


def interest_efficiency(principal: float, interest: float) -> float:
    """
    Principal repaid per unit of interest.

    Args:
        principal: Amount borrowed
        interest: Total interest over the term

    Returns:
        principal / interest, or ``np.inf`` when no interest is paid
    """
    if interest <= 0:
        return np.inf
    return principal / interest


def loan_summary(params: LoanParameters) -> LoanSummary:
    payment = annuity_payment(params.principal, params.annual_rate_pct, params.term_years)
    cost = payment * params.total_months
    interest = cost - params.principal
    return LoanSummary(
        monthly_payment=payment,
        total_interest=interest,
        total_cost=cost,
        interest_ratio_pct=interest / params.principal * 100,
        efficiency=interest_efficiency(params.principal, interest),
    )
