"""
Fixed-rate annuity amortization schedule.

Computes the yearly principal/interest split of a fully amortizing loan
together with two milestones: the first month whose principal portion
exceeds its interest portion, and the first year in which the remaining
balance is at most half of the original principal.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass

import pandas as pd

from .currency import round_half_up
from .params import LoanParameters

logger = logging.getLogger(__name__)

# Rates below this are treated as zero (linear amortization)
ZERO_RATE_EPS = 1e-12


@dataclass(frozen=True)
class YearlyRecord:
    """One row of the yearly schedule. Year index 0 is the state before any payment."""

    year: int
    remaining_balance: float
    principal_paid: float
    interest_paid: float
    principal_pct: float
    interest_pct: float
    cumulative_principal: float
    cumulative_interest: float

    @property
    def total_paid(self) -> float:
        return self.principal_paid + self.interest_paid


@dataclass(frozen=True)
class CrossoverInfo:
    """
    First payment in which principal exceeds interest.

    Attributes:
        month_number: Absolute 1-based payment number, None if it never happens
        year_fraction: month_number / 12 rounded half-up to one decimal
        percentage_of_term: Share of the term elapsed, in percent, rounded
            half-up to two decimals
        calendar_year: Fractional calendar year of the crossover payment
    """

    month_number: int | None = None
    year_fraction: float | None = None
    percentage_of_term: float | None = None
    calendar_year: float | None = None

    @property
    def found(self) -> bool:
        return self.month_number is not None

    @classmethod
    def at_month(
        cls, month_number: int, total_months: int, start_year: int
    ) -> CrossoverInfo:
        # Payments of schedule year k are reported under calendar year start + k
        year_index, month = divmod(month_number - 1, 12)
        return cls(
            month_number=month_number,
            year_fraction=round_half_up(month_number / 12, 1),
            percentage_of_term=round_half_up(month_number / total_months * 100, 2),
            calendar_year=start_year + year_index + 1 + (month + 1) / 12,
        )


@dataclass(frozen=True)
class AmortizationResult:
    """Output of :func:`compute`."""

    params: LoanParameters
    monthly_payment: float
    total_months: int
    schedule: tuple[YearlyRecord, ...]
    crossover: CrossoverInfo
    equity_year: int | None

    def as_tuple(self) -> tuple[tuple[YearlyRecord, ...], CrossoverInfo, int | None]:
        return self.schedule, self.crossover, self.equity_year

    def __iter__(self):
        return iter(self.as_tuple())

    @property
    def final_balance(self) -> float:
        return self.schedule[-1].remaining_balance

    @property
    def total_interest_paid(self) -> float:
        return self.schedule[-1].cumulative_interest

    def to_frame(self) -> pd.DataFrame:
        """
        Return the schedule as a DataFrame, one row per record.

        Columns follow :class:`YearlyRecord` field names.
        """
        return pd.DataFrame([asdict(r) for r in self.schedule])


def annuity_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """
    Fixed monthly payment that repays ``principal`` over ``term_years``.

    Uses P * r * (1+r)^n / ((1+r)^n - 1) with r the monthly rate. When the
    rate is zero the formula degenerates and the limit P / n is returned.
    """
    n = int(term_years) * 12
    if n <= 0:
        raise ValueError("term_years must be >= 1")
    r = annual_rate_pct / 100.0 / 12.0
    if abs(r) < ZERO_RATE_EPS:
        return principal / n
    growth = (1 + r) ** n
    return principal * r * growth / (growth - 1)


def _split(principal: float, interest: float) -> tuple[float, float]:
    total = principal + interest
    if total > 0:
        return principal / total * 100, interest / total * 100
    return 0.0, 0.0


def find_equity_crossover_year(
    schedule: Sequence[YearlyRecord], principal: float
) -> int | None:
    """Calendar year of the first record whose balance is at most half the principal."""
    half = principal / 2
    for record in schedule:
        if record.remaining_balance <= half:
            return record.year
    return None


def compute(params: LoanParameters) -> AmortizationResult:
    """
    Compute the yearly amortization schedule for ``params``.

    The monthly payment is constant for the life of the loan. Each month
    interest accrues on the opening balance and the rest of the payment
    reduces the balance, which is clamped at zero to absorb floating-point
    overshoot on the last payment.

    Args:
        params: Loan parameters (expected to be within bounds already)

    Returns:
        AmortizationResult with ``term_years + 1`` yearly records

    Raises:
        ValueError: If the term is shorter than one year or the principal is
            not positive
    """
    if params.term_years < 1:
        raise ValueError(f"term_years must be >= 1, got {params.term_years}")
    if params.principal <= 0:
        raise ValueError(f"principal must be positive, got {params.principal}")

    r = params.monthly_rate
    total_months = params.total_months
    payment = annuity_payment(params.principal, params.annual_rate_pct, params.term_years)

    balance = float(params.principal)
    cum_principal = 0.0
    cum_interest = 0.0
    crossover_month: int | None = None

    schedule = [
        YearlyRecord(
            year=params.start_year,
            remaining_balance=balance,
            principal_paid=0.0,
            interest_paid=0.0,
            principal_pct=0.0,
            interest_pct=100.0,
            cumulative_principal=0.0,
            cumulative_interest=0.0,
        )
    ]

    for year_index in range(1, params.term_years + 1):
        year_principal = 0.0
        year_interest = 0.0

        for month in range(1, 13):
            month_number = (year_index - 1) * 12 + month
            interest = balance * r
            principal_part = payment - interest

            year_principal += principal_part
            year_interest += interest
            cum_principal += principal_part
            cum_interest += interest

            if crossover_month is None and principal_part > interest:
                crossover_month = month_number

            balance -= principal_part
            if balance < 0:
                balance = 0.0

        principal_pct, interest_pct = _split(year_principal, year_interest)
        schedule.append(
            YearlyRecord(
                year=params.start_year + year_index,
                remaining_balance=balance,
                principal_paid=year_principal,
                interest_paid=year_interest,
                principal_pct=principal_pct,
                interest_pct=interest_pct,
                cumulative_principal=cum_principal,
                cumulative_interest=cum_interest,
            )
        )

    if crossover_month is None:
        crossover = CrossoverInfo()
    else:
        crossover = CrossoverInfo.at_month(
            crossover_month, total_months, params.start_year
        )

    equity_year = find_equity_crossover_year(schedule, params.principal)

    logger.debug(
        "Computed schedule: payment=%.2f crossover_month=%s equity_year=%s",
        payment,
        crossover_month,
        equity_year,
    )

    return AmortizationResult(
        params=params,
        monthly_payment=payment,
        total_months=total_months,
        schedule=tuple(schedule),
        crossover=crossover,
        equity_year=equity_year,
    )
