"""
Error classes for AmortLab.

Loan parameters are never rejected (they are clamped at the input
boundary), so the only errors raised by the library concern the scenario
store.
"""

from __future__ import annotations


class ScenarioError(Exception):
    """
    Base class for scenario store errors.

    Attributes:
        scenario_id: Identifier of the scenario involved, if any
    """

    def __init__(self, message: str, scenario_id: str | None = None):
        self.scenario_id = scenario_id
        super().__init__(self._fmt(message))

    def _fmt(self, msg: str) -> str:
        if self.scenario_id is None:
            return msg
        return f"[Scenario {self.scenario_id}] {msg}"


class ScenarioNameError(ScenarioError, ValueError):
    """Raised when a scenario is saved without a usable name."""


class ScenarioNotFoundError(ScenarioError, KeyError):
    """Raised when a scenario identifier is not in the store."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
