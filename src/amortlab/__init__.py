"""
AmortLab - Loan Amortization Schedule Simulator

AmortLab computes the amortization schedule of a fixed-rate loan and the
milestones that matter to a borrower: when each payment starts repaying more
principal than interest, and when half of the loan has been repaid. Named
parameter sets can be saved as scenarios and compared side by side.

Key Features:
- **Pure calculator**: ``compute()`` maps loan parameters to a yearly schedule
- **Milestones**: principal/interest crossover month and 50% equity year
- **Summary KPIs**: monthly payment, total interest, total cost, ratios
- **Scenarios**: in-memory snapshots for side-by-side comparison
- **Charts**: Plotly figures for payments, composition and cumulative totals
- **Interfaces**: ``amortlab`` command line tool and a Streamlit page

Quick Start:
    ```python
    from amortlab import LoanParameters, compute, loan_summary

    params = LoanParameters.from_inputs(250_000, 4.5, 30, 2010)
    result = compute(params)
    schedule, crossover, equity_year = result

    print(round(result.monthly_payment, 2))  # 1266.71
    print(crossover.month_number, equity_year)
    print(loan_summary(params).total_interest)
    ```

Input bounds (values outside are clamped, never rejected):
    - principal >= 1000
    - annual rate in [0.1, 20] percent
    - term in [1, 50] years
    - start year >= 1900
"""

# Version information
__version__ = "0.1.0"
__author__ = "AmortLab Team"
__description__ = "Loan amortization schedule simulator"

from .charts import (
    composition_percentages,
    cumulative_totals,
    payment_breakdown,
    scenario_comparison,
)
from .core import (
    DEFAULT_PARAMETERS,
    AmortizationResult,
    AppState,
    CrossoverInfo,
    LoanParameters,
    Scenario,
    ScenarioError,
    ScenarioNameError,
    ScenarioNotFoundError,
    ScenarioStore,
    YearlyRecord,
    annuity_payment,
    clamp_parameters,
    compute,
    find_equity_crossover_year,
    format_currency,
    format_percentage,
    initial_state,
)
from .kpi import (
    LoanSummary,
    interest_efficiency,
    interest_ratio,
    loan_summary,
    total_cost,
    total_interest,
)
from .report import key_insights, schedule_table

# Define what gets imported with "from amortlab import *"
__all__ = [
    # Calculator
    "LoanParameters",
    "DEFAULT_PARAMETERS",
    "clamp_parameters",
    "compute",
    "annuity_payment",
    "find_equity_crossover_year",
    "AmortizationResult",
    "YearlyRecord",
    "CrossoverInfo",
    # KPI utilities
    "LoanSummary",
    "loan_summary",
    "total_cost",
    "total_interest",
    "interest_ratio",
    "interest_efficiency",
    # Scenarios and state
    "Scenario",
    "ScenarioStore",
    "ScenarioError",
    "ScenarioNameError",
    "ScenarioNotFoundError",
    "AppState",
    "initial_state",
    # Presentation
    "format_currency",
    "format_percentage",
    "schedule_table",
    "key_insights",
    "payment_breakdown",
    "composition_percentages",
    "cumulative_totals",
    "scenario_comparison",
]
