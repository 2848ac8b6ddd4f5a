"""
Tests for scenario snapshots and the in-memory store.
"""

from datetime import datetime

import pytest
from amortlab.core.errors import (
    ScenarioError,
    ScenarioNameError,
    ScenarioNotFoundError,
)
from amortlab.core.params import LoanParameters
from amortlab.core.scenario import (
    COMPARISON_COLUMNS,
    Scenario,
    ScenarioStore,
    generate_scenario_id,
)


@pytest.fixture
def params_a():
    return LoanParameters(250_000.0, 4.5, 30, 2010)


@pytest.fixture
def params_b():
    return LoanParameters(180_000.0, 3.2, 15, 2024)


class TestScenarioSnapshot:
    """Test Scenario.snapshot()."""

    def test_summary_fields(self, params_a):
        scenario = Scenario.snapshot("Baseline", params_a)

        assert scenario.name == "Baseline"
        assert scenario.params == params_a
        assert scenario.monthly_payment == pytest.approx(1266.71, abs=0.01)
        assert scenario.total_interest == pytest.approx(206_016, rel=1e-4)
        assert scenario.interest_ratio_pct == pytest.approx(
            scenario.total_interest / 250_000 * 100
        )

    def test_immutable(self, params_a):
        scenario = Scenario.snapshot("Baseline", params_a)
        with pytest.raises(AttributeError):
            scenario.name = "Other"

    def test_id_depends_on_sequence(self, params_a):
        ts = datetime(2026, 1, 1, 12, 0, 0)

        first = generate_scenario_id("x", params_a, ts, sequence=1)
        again = generate_scenario_id("x", params_a, ts, sequence=1)
        second = generate_scenario_id("x", params_a, ts, sequence=2)

        assert first == again
        assert first != second
        assert len(first) == 16


class TestScenarioStore:
    """Test save/load/remove on ScenarioStore."""

    def test_save_then_load_restores_parameters(self, params_a):
        store = ScenarioStore()
        scenario = store.save("Baseline", params_a)

        assert store.load(scenario.id) == params_a
        assert store.load(scenario.id) is params_a

    def test_save_appends_in_order(self, params_a, params_b):
        store = ScenarioStore()
        a = store.save("A", params_a)
        b = store.save("B", params_b)

        assert len(store) == 2
        assert store.ids() == [a.id, b.id]
        assert [s.name for s in store] == ["A", "B"]

    def test_ids_unique_for_identical_saves(self, params_a):
        store = ScenarioStore()
        first = store.save("Same", params_a)
        second = store.save("Same", params_a)

        assert first.id != second.id

    def test_name_is_stripped(self, params_a):
        store = ScenarioStore()
        assert store.save("  Baseline  ", params_a).name == "Baseline"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, params_a, name):
        store = ScenarioStore()

        with pytest.raises(ScenarioNameError):
            store.save(name, params_a)
        assert len(store) == 0

    def test_name_error_is_value_error(self, params_a):
        with pytest.raises(ValueError):
            ScenarioStore().save("", params_a)

    def test_remove(self, params_a, params_b):
        store = ScenarioStore()
        a = store.save("A", params_a)
        b = store.save("B", params_b)

        assert store.remove(a.id) is True
        assert store.ids() == [b.id]
        assert a.id not in store
        assert b.id in store

    def test_remove_unknown_is_noop(self, params_a):
        store = ScenarioStore()
        store.save("A", params_a)

        assert store.remove("missing") is False
        assert len(store) == 1

    def test_load_unknown_raises(self):
        store = ScenarioStore()

        with pytest.raises(ScenarioNotFoundError, match=r"\[Scenario missing\]"):
            store.load("missing")

    def test_not_found_is_key_error(self):
        with pytest.raises(KeyError):
            ScenarioStore().get("missing")

    def test_errors_share_base(self):
        assert issubclass(ScenarioNameError, ScenarioError)
        assert issubclass(ScenarioNotFoundError, ScenarioError)

    def test_copy_is_independent(self, params_a, params_b):
        store = ScenarioStore()
        store.save("A", params_a)
        clone = store.copy()
        clone.save("B", params_b)

        assert len(store) == 1
        assert len(clone) == 2
        assert store.ids()[0] == clone.ids()[0]


class TestScenarioComparison:
    """Test ScenarioStore.compare()."""

    def test_one_row_per_scenario(self, params_a, params_b):
        store = ScenarioStore()
        store.save("A", params_a)
        store.save("B", params_b)

        df = store.compare()

        assert list(df.columns) == COMPARISON_COLUMNS
        assert list(df["name"]) == ["A", "B"]
        assert list(df["term_years"]) == [30, 15]
        assert df.loc[0, "monthly_payment"] == pytest.approx(1266.71, abs=0.01)
        # Shorter term at a lower rate pays less interest
        assert df.loc[1, "total_interest"] < df.loc[0, "total_interest"]

    def test_empty_store(self):
        df = ScenarioStore().compare()

        assert df.empty
        assert list(df.columns) == COMPARISON_COLUMNS
