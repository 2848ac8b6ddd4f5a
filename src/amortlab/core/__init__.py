"""
Core components of AmortLab.
"""

from .currency import (
    USD,
    Currency,
    format_currency,
    format_percentage,
    format_ratio,
    round_half_up,
)
from .errors import ScenarioError, ScenarioNameError, ScenarioNotFoundError
from .params import (
    DEFAULT_PARAMETERS,
    PRINCIPAL_MIN,
    RATE_MAX,
    RATE_MIN,
    START_YEAR_MIN,
    TERM_MAX,
    TERM_MIN,
    LoanParameters,
    clamp_parameters,
)
from .scenario import Scenario, ScenarioStore
from .schedule import (
    AmortizationResult,
    CrossoverInfo,
    YearlyRecord,
    annuity_payment,
    compute,
    find_equity_crossover_year,
)
from .state import AppState, initial_state

__all__ = [
    "AmortizationResult",
    "AppState",
    "CrossoverInfo",
    "Currency",
    "DEFAULT_PARAMETERS",
    "LoanParameters",
    "PRINCIPAL_MIN",
    "RATE_MAX",
    "RATE_MIN",
    "START_YEAR_MIN",
    "Scenario",
    "ScenarioError",
    "ScenarioNameError",
    "ScenarioNotFoundError",
    "ScenarioStore",
    "TERM_MAX",
    "TERM_MIN",
    "USD",
    "YearlyRecord",
    "annuity_payment",
    "clamp_parameters",
    "compute",
    "find_equity_crossover_year",
    "format_currency",
    "round_half_up",
    "format_percentage",
    "format_ratio",
    "initial_state",
]
