"""
Loan parameter definitions, bounds and clamping for AmortLab.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

PRINCIPAL_MIN = 1000.0
RATE_MIN = 0.1  # annual percent
RATE_MAX = 20.0
TERM_MIN = 1  # years
TERM_MAX = 50
START_YEAR_MIN = 1900


@dataclass(frozen=True)
class LoanParameters:
    """
    Inputs for a fixed-rate, fully amortizing loan.

    Attributes:
        principal: Amount borrowed
        annual_rate_pct: Nominal annual interest rate in percent (4.5 for 4.5%)
        term_years: Number of years until the loan is repaid
        start_year: Calendar year of the initial (year-0) record

    The constructor stores values as given. Use :meth:`from_inputs` or
    :func:`clamp_parameters` for raw user input.
    """

    principal: float
    annual_rate_pct: float
    term_years: int
    start_year: int

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_pct / 100.0 / 12.0

    @property
    def total_months(self) -> int:
        return self.term_years * 12

    @classmethod
    def from_inputs(
        cls,
        principal: float,
        annual_rate_pct: float,
        term_years: float,
        start_year: float,
    ) -> LoanParameters:
        """Build parameters from raw input values, clamping each to its bounds."""
        return clamp_parameters(
            cls(
                principal=principal,
                annual_rate_pct=annual_rate_pct,
                term_years=term_years,
                start_year=start_year,
            )
        )

    def with_changes(self, **changes) -> LoanParameters:
        """Return a clamped copy with the given fields replaced."""
        return clamp_parameters(replace(self, **changes))

    def to_dict(self) -> dict:
        return {
            "principal": self.principal,
            "annual_rate_pct": self.annual_rate_pct,
            "term_years": self.term_years,
            "start_year": self.start_year,
        }


DEFAULT_PARAMETERS = LoanParameters(
    principal=250_000.0,
    annual_rate_pct=4.5,
    term_years=30,
    start_year=2010,
)


def _clamp(value: float, low: float, high: float | None = None) -> float:
    value = float(value)
    if math.isnan(value):
        return low
    if high is not None:
        value = min(high, value)
    return max(low, value)


def clamp_principal(value: float) -> float:
    value = _clamp(value, PRINCIPAL_MIN)
    if math.isinf(value):
        return PRINCIPAL_MIN
    return value


def clamp_rate(value: float) -> float:
    return _clamp(value, RATE_MIN, RATE_MAX)


def clamp_term(value: float) -> int:
    return int(round(_clamp(value, TERM_MIN, TERM_MAX)))


def clamp_start_year(value: float) -> int:
    value = _clamp(value, START_YEAR_MIN)
    if math.isinf(value):
        return START_YEAR_MIN
    return int(round(value))


def clamp_parameters(params: LoanParameters) -> LoanParameters:
    """
    Clamp every field of ``params`` to the nearest valid value.

    Out-of-range input is never rejected. Non-numeric NaN falls back to the
    lower bound of its field, as does an infinite principal or start year.

    Args:
        params: Parameters as entered by the user

    Returns:
        Parameters within bounds (principal >= 1000, rate in [0.1, 20],
        term in [1, 50], start year >= 1900)
    """
    clamped = LoanParameters(
        principal=clamp_principal(params.principal),
        annual_rate_pct=clamp_rate(params.annual_rate_pct),
        term_years=clamp_term(params.term_years),
        start_year=clamp_start_year(params.start_year),
    )
    if clamped != params:
        logger.debug("Clamped loan parameters %s -> %s", params, clamped)
    return clamped
