"""
Streamlit page for the amortization simulator.

Run with ``amortlab ui`` or ``streamlit run src/amortlab/app.py``.
"""

from __future__ import annotations

import streamlit as st

from amortlab.charts import (
    composition_percentages,
    cumulative_totals,
    payment_breakdown,
    scenario_comparison,
)
from amortlab.core import state as app_state
from amortlab.core.currency import format_currency, format_percentage, format_ratio
from amortlab.core.params import (
    PRINCIPAL_MIN,
    RATE_MAX,
    RATE_MIN,
    START_YEAR_MIN,
    TERM_MAX,
    TERM_MIN,
)
from amortlab.kpi import loan_summary
from amortlab.report import comparison_table, key_insights, schedule_table

STATE_KEY = "amortlab_state"

st.set_page_config(page_title="Loan Amortization Simulator", page_icon="🏠", layout="wide")


def _get_state() -> app_state.AppState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = app_state.initial_state()
    return st.session_state[STATE_KEY]


def _set_state(new_state: app_state.AppState) -> None:
    st.session_state[STATE_KEY] = new_state


def _render_inputs(state: app_state.AppState) -> app_state.AppState:
    params = state.params
    col1, col2 = st.columns(2)
    with col1:
        principal = st.number_input(
            "Loan Amount ($)",
            min_value=PRINCIPAL_MIN,
            value=float(params.principal),
            step=1000.0,
        )
        rate = st.number_input(
            "Interest Rate (%)",
            min_value=RATE_MIN,
            max_value=RATE_MAX,
            value=float(params.annual_rate_pct),
            step=0.1,
        )
    with col2:
        term = st.number_input(
            "Loan Term (Years)",
            min_value=TERM_MIN,
            max_value=TERM_MAX,
            value=int(params.term_years),
            step=1,
        )
        start_year = st.number_input(
            "Start Year",
            min_value=START_YEAR_MIN,
            value=int(params.start_year),
            step=1,
        )

    return app_state.set_params(
        state,
        principal=principal,
        annual_rate_pct=rate,
        term_years=term,
        start_year=start_year,
    )


def _render_summary(state: app_state.AppState) -> None:
    summary = loan_summary(state.params)
    st.subheader("Loan Summary")
    cols = st.columns(5)
    cols[0].metric("Monthly Payment", format_currency(summary.monthly_payment))
    cols[1].metric("Total Interest", format_currency(summary.total_interest))
    cols[2].metric("Total Cost", format_currency(summary.total_cost))
    cols[3].metric(
        "Interest to Principal Ratio", format_percentage(summary.interest_ratio_pct)
    )
    color = "red" if summary.interest_exceeds_principal else "green"
    with cols[4]:
        st.caption("Interest Efficiency")
        st.markdown(f"### :{color}[{format_ratio(summary.efficiency)}]")


def _render_controls(state: app_state.AppState) -> app_state.AppState:
    col1, col2, col3, col4 = st.columns([1, 2, 1, 1])
    with col1:
        if st.button("Hide Chart" if state.chart_visible else "Show Chart"):
            state = app_state.toggle_chart(state)
    with col2:
        name = st.text_input(
            "Scenario name",
            value=state.scenario_name,
            placeholder="Scenario name",
            label_visibility="collapsed",
        )
        state = app_state.set_scenario_name(state, name)
    with col3:
        if st.button("Save Scenario", disabled=not name.strip()):
            state = app_state.save_current_scenario(state)
    with col4:
        label = "Hide Comparisons" if state.scenarios_visible else "Show Comparisons"
        if st.button(label):
            state = app_state.toggle_scenarios(state)
    return state


def _render_scenarios(state: app_state.AppState) -> app_state.AppState:
    if not state.scenarios_visible or len(state.scenarios) == 0:
        return state

    st.subheader("Scenario Comparison")
    comparison = state.scenarios.compare()
    st.dataframe(comparison_table(comparison), hide_index=True, use_container_width=True)

    for scenario in state.scenarios:
        col1, col2, col3 = st.columns([4, 1, 1])
        col1.write(scenario.name)
        if col2.button("Load", key=f"load_{scenario.id}"):
            state = app_state.load_scenario(state, scenario.id)
        if col3.button("Delete", key=f"delete_{scenario.id}"):
            state = app_state.delete_scenario(state, scenario.id)

    fig, _ = scenario_comparison(comparison)
    st.plotly_chart(fig, use_container_width=True)
    return state


def _render_charts(state: app_state.AppState) -> None:
    if not state.chart_visible:
        return

    result = state.result
    fig, _ = payment_breakdown(result)
    st.plotly_chart(fig, use_container_width=True)

    col1, col2 = st.columns(2)
    with col1:
        fig, _ = composition_percentages(result)
        st.plotly_chart(fig, use_container_width=True)
        st.markdown("**Key Insights:**")
        for line in key_insights(result, loan_summary(state.params)):
            st.markdown(f"- {line}")
    with col2:
        fig, _ = cumulative_totals(result)
        st.plotly_chart(fig, use_container_width=True)


def main() -> None:
    st.title("Loan Amortization Schedule Simulator")

    state = _get_state()
    state = _render_inputs(state)
    _render_summary(state)
    state = _render_controls(state)
    before = state
    state = _render_scenarios(state)
    _set_state(state)
    if state is not before:
        # Loaded parameters must reach the input widgets
        st.rerun()

    _render_charts(state)

    st.subheader("Yearly Schedule")
    st.dataframe(schedule_table(state.result), hide_index=True, use_container_width=True)


main()
