"""
Tests for the Streamlit page, driven through Streamlit's AppTest harness.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[1] / "src" / "amortlab" / "app.py"
STATE_KEY = "amortlab_state"


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def _state(at):
    return at.session_state[STATE_KEY]


@pytest.fixture
def app():
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    assert not at.exception
    return at


@pytest.fixture
def app_with_scenario(app):
    """Page with one saved scenario at the default parameters."""
    app.text_input[0].input("Baseline").run()
    _button(app, "Save Scenario").click().run()
    assert len(_state(app).scenarios) == 1
    return app


class TestControls:
    def test_save_disabled_without_name(self, app):
        assert _button(app, "Save Scenario").disabled

    def test_save_enabled_with_name(self, app):
        app.text_input[0].input("Baseline").run()

        assert not _button(app, "Save Scenario").disabled

    def test_save_clears_name(self, app_with_scenario):
        state = _state(app_with_scenario)

        assert state.scenario_name == ""
        assert next(iter(state.scenarios)).name == "Baseline"


class TestScenarioActions:
    def test_load_restores_inputs(self, app_with_scenario):
        at = app_with_scenario
        at.number_input[0].set_value(300_000.0).run()
        assert _state(at).params.principal == 300_000.0

        _button(at, "Show Comparisons").click().run()
        _button(at, "Load").click().run()

        assert not at.exception
        assert _state(at).params.principal == 250_000.0
        assert at.number_input[0].value == 250_000.0

    def test_delete_removes_scenario(self, app_with_scenario):
        at = app_with_scenario
        _button(at, "Show Comparisons").click().run()
        _button(at, "Delete").click().run()

        assert not at.exception
        assert len(_state(at).scenarios) == 0
        assert not [b for b in at.button if b.label == "Load"]
