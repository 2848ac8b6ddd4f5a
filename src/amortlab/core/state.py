"""
Application state for the interactive simulator.

``AppState`` bundles the current parameters, their computed schedule, the
saved scenarios and the view toggles. Every update function returns a new
state; the schedule is recomputed whenever the parameters change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from .params import DEFAULT_PARAMETERS, LoanParameters, clamp_parameters
from .scenario import ScenarioStore
from .schedule import AmortizationResult, compute

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppState:
    params: LoanParameters
    result: AmortizationResult
    scenarios: ScenarioStore = field(default_factory=ScenarioStore)
    chart_visible: bool = True
    scenarios_visible: bool = False
    scenario_name: str = ""


def initial_state(params: LoanParameters | None = None) -> AppState:
    params = clamp_parameters(params or DEFAULT_PARAMETERS)
    return AppState(params=params, result=compute(params))


def _with_params(state: AppState, params: LoanParameters) -> AppState:
    if params == state.params:
        return state
    logger.debug("Recomputing schedule for %s", params)
    return replace(state, params=params, result=compute(params))


def set_params(state: AppState, **changes) -> AppState:
    """
    Apply field changes to the current parameters.

    Values are clamped to their bounds before the schedule is recomputed.
    """
    return _with_params(state, state.params.with_changes(**changes))


def toggle_chart(state: AppState) -> AppState:
    return replace(state, chart_visible=not state.chart_visible)


def toggle_scenarios(state: AppState) -> AppState:
    return replace(state, scenarios_visible=not state.scenarios_visible)


def set_scenario_name(state: AppState, name: str) -> AppState:
    return replace(state, scenario_name=name)


def save_current_scenario(state: AppState) -> AppState:
    """
    Save the current parameters under the draft scenario name.

    A blank draft name leaves the state unchanged. On success the draft
    name is cleared.
    """
    if not state.scenario_name.strip():
        return state
    store = state.scenarios.copy()
    store.save(state.scenario_name, state.params)
    return replace(state, scenarios=store, scenario_name="")


def delete_scenario(state: AppState, scenario_id: str) -> AppState:
    store = state.scenarios.copy()
    if not store.remove(scenario_id):
        return state
    return replace(state, scenarios=store)


def load_scenario(state: AppState, scenario_id: str) -> AppState:
    """
    Replace the current parameters with those of a saved scenario.

    Raises:
        ScenarioNotFoundError: If ``scenario_id`` is not in the store
    """
    return _with_params(state, state.scenarios.load(scenario_id))
