"""
Tests for the application state update functions.
"""

import pytest
from amortlab.core import state as app_state
from amortlab.core.errors import ScenarioNotFoundError
from amortlab.core.params import DEFAULT_PARAMETERS, LoanParameters


@pytest.fixture
def state():
    return app_state.initial_state()


class TestInitialState:
    def test_defaults(self, state):
        assert state.params == DEFAULT_PARAMETERS
        assert state.result.params == DEFAULT_PARAMETERS
        assert state.chart_visible is True
        assert state.scenarios_visible is False
        assert state.scenario_name == ""
        assert len(state.scenarios) == 0

    def test_custom_params_are_clamped(self):
        state = app_state.initial_state(LoanParameters(10.0, 99.0, 0, 1000))

        assert state.params == LoanParameters(1000.0, 20.0, 1, 1900)
        assert len(state.result.schedule) == 2


class TestParameterUpdates:
    def test_set_params_recomputes(self, state):
        new = app_state.set_params(state, annual_rate_pct=6.0)

        assert new.params.annual_rate_pct == 6.0
        assert new.result.params == new.params
        assert new.result.monthly_payment > state.result.monthly_payment
        # Original state untouched
        assert state.params.annual_rate_pct == 4.5

    def test_set_params_clamps(self, state):
        new = app_state.set_params(state, term_years=0, principal=10.0)

        assert new.params.term_years == 1
        assert new.params.principal == 1000.0
        assert len(new.result.schedule) == 2

    def test_unchanged_params_keep_state(self, state):
        assert app_state.set_params(state, principal=DEFAULT_PARAMETERS.principal) is state


class TestToggles:
    def test_toggle_chart(self, state):
        hidden = app_state.toggle_chart(state)

        assert hidden.chart_visible is False
        assert app_state.toggle_chart(hidden).chart_visible is True

    def test_toggle_scenarios(self, state):
        assert app_state.toggle_scenarios(state).scenarios_visible is True


class TestScenarioActions:
    def test_save_uses_draft_name_and_clears_it(self, state):
        state = app_state.set_scenario_name(state, "Baseline")
        saved = app_state.save_current_scenario(state)

        assert saved.scenario_name == ""
        assert [s.name for s in saved.scenarios] == ["Baseline"]
        assert len(state.scenarios) == 0

    def test_save_with_blank_name_is_noop(self, state):
        state = app_state.set_scenario_name(state, "   ")
        assert app_state.save_current_scenario(state) is state

    def test_load_restores_saved_parameters(self, state):
        state = app_state.set_params(
            state, principal=300_000, annual_rate_pct=5.25, term_years=20, start_year=2015
        )
        saved_params = state.params
        state = app_state.save_current_scenario(
            app_state.set_scenario_name(state, "Plan A")
        )
        scenario_id = state.scenarios.ids()[0]

        state = app_state.set_params(state, principal=100_000, term_years=10)
        assert state.params != saved_params

        loaded = app_state.load_scenario(state, scenario_id)
        assert loaded.params == saved_params
        assert loaded.result.params == saved_params

    def test_load_unknown_raises(self, state):
        with pytest.raises(ScenarioNotFoundError):
            app_state.load_scenario(state, "missing")

    def test_delete(self, state):
        state = app_state.save_current_scenario(app_state.set_scenario_name(state, "A"))
        state = app_state.save_current_scenario(app_state.set_scenario_name(state, "B"))
        first_id = state.scenarios.ids()[0]

        after = app_state.delete_scenario(state, first_id)

        assert [s.name for s in after.scenarios] == ["B"]
        assert len(state.scenarios) == 2

    def test_delete_unknown_keeps_state(self, state):
        assert app_state.delete_scenario(state, "missing") is state
