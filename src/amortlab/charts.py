"""
Chart functions for visualizing an amortization schedule.

This module provides the charts of the simulator:
- Payment breakdown: yearly principal/interest bars with the remaining balance
- Composition: yearly principal/interest percentages with the crossover marked
- Cumulative totals: cumulative principal/interest with the 50% equity year marked
- Scenario comparison: headline figures of saved scenarios side by side

All chart functions return (figure, tidy_dataframe_used) for consistency.
"""

from __future__ import annotations

import math

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from amortlab.core.currency import format_currency
from amortlab.core.schedule import AmortizationResult

PRINCIPAL_COLOR = "#82ca9d"
INTEREST_COLOR = "#8884d8"
BALANCE_COLOR = "#ff7e6b"
CROSSOVER_COLOR = "#ef4444"
EQUITY_COLOR = "#22c55e"


def payment_breakdown(result: AmortizationResult) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot yearly principal and interest as stacked bars with the balance as a line.

    Bars use the left axis; the remaining balance uses a secondary right axis
    because it is an order of magnitude larger than yearly flows.

    Args:
        result: Output of :func:`amortlab.compute`

    Returns:
        Tuple of (plotly_figure, schedule_dataframe_used)
    """
    df = result.to_frame()

    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(
        go.Bar(
            x=df["year"],
            y=df["principal_paid"],
            name="Principal",
            marker_color=PRINCIPAL_COLOR,
        ),
        secondary_y=False,
    )
    fig.add_trace(
        go.Bar(
            x=df["year"],
            y=df["interest_paid"],
            name="Interest",
            marker_color=INTEREST_COLOR,
        ),
        secondary_y=False,
    )
    fig.add_trace(
        go.Scatter(
            x=df["year"],
            y=df["remaining_balance"],
            name="Remaining Balance",
            mode="lines+markers",
            line={"color": BALANCE_COLOR, "width": 3},
            marker={"color": "white", "line": {"color": BALANCE_COLOR, "width": 2}},
        ),
        secondary_y=True,
    )

    fig.update_layout(
        title="Yearly Principal vs Interest",
        barmode="stack",
        hovermode="x unified",
        xaxis_title="Year",
    )
    fig.update_yaxes(title_text="Yearly Payment ($)", secondary_y=False)
    fig.update_yaxes(title_text="Remaining Balance ($)", secondary_y=True)

    return fig, df


def composition_percentages(
    result: AmortizationResult,
) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot the yearly share of principal and interest as stacked percentage bars.

    When principal overtakes interest during the term, a dashed vertical line
    marks the calendar year of the first such payment.

    Args:
        result: Output of :func:`amortlab.compute`

    Returns:
        Tuple of (plotly_figure, schedule_dataframe_used)
    """
    df = result.to_frame()

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=df["year"],
            y=df["principal_pct"],
            name="Principal %",
            marker_color=PRINCIPAL_COLOR,
        )
    )
    fig.add_trace(
        go.Bar(
            x=df["year"],
            y=df["interest_pct"],
            name="Interest %",
            marker_color=INTEREST_COLOR,
        )
    )

    fig.update_layout(
        title="Interest vs Principal Ratio",
        barmode="stack",
        xaxis_title="Year",
        yaxis={"title": "Percentage (%)", "range": [0, 100]},
    )

    crossover = result.crossover
    if crossover.found:
        fig.add_vline(
            x=math.floor(crossover.calendar_year),
            line_dash="dash",
            line_color=CROSSOVER_COLOR,
            annotation_text="Principal > Interest",
            annotation_position="top",
        )

    return fig, df


def cumulative_totals(result: AmortizationResult) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot cumulative principal and interest paid over the term.

    The year in which the remaining balance first drops to half of the
    principal is marked with a dashed "50% Equity" line.

    Args:
        result: Output of :func:`amortlab.compute`

    Returns:
        Tuple of (plotly_figure, schedule_dataframe_used)
    """
    df = result.to_frame()

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=df["year"],
            y=df["cumulative_principal"],
            name="Cumulative Principal",
            mode="lines",
            line={"color": PRINCIPAL_COLOR, "width": 2},
        )
    )
    fig.add_trace(
        go.Scatter(
            x=df["year"],
            y=df["cumulative_interest"],
            name="Cumulative Interest",
            mode="lines",
            line={"color": INTEREST_COLOR, "width": 2},
        )
    )

    fig.update_layout(
        title="Cumulative Principal vs Interest",
        hovermode="x unified",
        xaxis_title="Year",
        yaxis_title="Amount ($)",
    )

    if result.equity_year is not None:
        fig.add_vline(
            x=result.equity_year,
            line_dash="dash",
            line_color=EQUITY_COLOR,
            annotation_text="50% Equity",
            annotation_position="top",
            annotation_font_color=EQUITY_COLOR,
        )

    return fig, df


def scenario_comparison(comparison: pd.DataFrame) -> tuple[go.Figure, pd.DataFrame]:
    """
    Compare saved scenarios by monthly payment and total interest.

    Args:
        comparison: DataFrame from ScenarioStore.compare()

    Returns:
        Tuple of (plotly_figure, tidy_dataframe_used)
    """
    tidy = comparison.melt(
        id_vars=["scenario_id", "name"],
        value_vars=["monthly_payment", "total_interest"],
        var_name="metric",
        value_name="value",
    )
    tidy["label"] = tidy["value"].map(format_currency)

    fig = make_subplots(
        rows=1,
        cols=2,
        subplot_titles=("Monthly Payment", "Total Interest"),
    )
    for col, metric in enumerate(["monthly_payment", "total_interest"], start=1):
        part = tidy[tidy["metric"] == metric]
        fig.add_trace(
            go.Bar(
                x=part["name"],
                y=part["value"],
                text=part["label"],
                name=metric.replace("_", " ").title(),
                marker_color=INTEREST_COLOR if metric == "total_interest" else PRINCIPAL_COLOR,
            ),
            row=1,
            col=col,
        )

    fig.update_layout(title="Scenario Comparison", showlegend=False)

    if comparison.empty:
        fig.add_annotation(
            text="No saved scenarios",
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            showarrow=False,
        )

    return fig, tidy
