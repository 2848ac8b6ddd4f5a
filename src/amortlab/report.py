"""
Text and table views of a computed schedule.

Formatting lives here so that the calculator stays numeric; the CLI and the
Streamlit app both render from these helpers.
"""

from __future__ import annotations

import pandas as pd

from amortlab.core.currency import format_currency, format_percentage, format_ratio
from amortlab.core.schedule import AmortizationResult
from amortlab.kpi import LoanSummary

TABLE_COLUMNS = {
    "year": "Year",
    "principal_paid": "Principal Paid",
    "interest_paid": "Interest Paid",
    "principal_pct": "Principal %",
    "interest_pct": "Interest %",
    "remaining_balance": "Remaining Balance",
}


def schedule_table(result: AmortizationResult, formatted: bool = True) -> pd.DataFrame:
    """
    Yearly schedule with display column names.

    Args:
        result: Output of :func:`amortlab.compute`
        formatted: Render amounts and percentages as strings

    Returns:
        DataFrame with the columns of ``TABLE_COLUMNS`` in order
    """
    df = result.to_frame()[list(TABLE_COLUMNS)].rename(columns=TABLE_COLUMNS)
    if not formatted:
        return df

    for col in ("Principal Paid", "Interest Paid", "Remaining Balance"):
        df[col] = df[col].map(format_currency)
    for col in ("Principal %", "Interest %"):
        df[col] = df[col].map(format_percentage)
    return df


def summary_rows(summary: LoanSummary) -> list[tuple[str, str]]:
    """Label/value pairs of the summary panel."""
    return [
        ("Monthly Payment", format_currency(summary.monthly_payment)),
        ("Total Interest", format_currency(summary.total_interest)),
        ("Total Cost", format_currency(summary.total_cost)),
        ("Interest to Principal Ratio", format_percentage(summary.interest_ratio_pct)),
        ("Interest Efficiency", format_ratio(summary.efficiency)),
    ]


def key_insights(result: AmortizationResult, summary: LoanSummary) -> list[str]:
    crossover = result.crossover
    if crossover.found:
        crossover_text = (
            f"Principal exceeds interest at: Year {crossover.year_fraction:.1f} "
            f"({crossover.percentage_of_term:.2f}% of loan term)"
        )
    else:
        crossover_text = "Principal exceeds interest at: Year N/A"

    if result.equity_year is not None:
        equity_text = f"50% equity reached: Year {result.equity_year}"
    else:
        equity_text = "50% equity reached: Not within loan term"

    return [
        crossover_text,
        equity_text,
        f"Interest-to-principal ratio: {format_percentage(summary.interest_ratio_pct)}",
    ]


def comparison_table(comparison: pd.DataFrame) -> pd.DataFrame:
    """Format ScenarioStore.compare() output for display."""
    df = pd.DataFrame(
        {
            "Scenario": comparison["name"],
            "Loan Amount": comparison["principal"].map(format_currency),
            "Interest Rate": comparison["annual_rate_pct"].map(lambda v: f"{v:g}%"),
            "Term (years)": comparison["term_years"],
            "Start Year": comparison["start_year"],
            "Monthly Payment": comparison["monthly_payment"].map(format_currency),
            "Total Interest": comparison["total_interest"].map(format_currency),
            "Interest Ratio": comparison["interest_ratio_pct"].map(format_percentage),
        }
    )
    return df
