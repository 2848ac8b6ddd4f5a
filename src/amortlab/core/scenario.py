"""
Named loan scenarios and the in-memory store used to compare them.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime

import pandas as pd

from amortlab.kpi import loan_summary

from .errors import ScenarioNameError, ScenarioNotFoundError
from .params import LoanParameters

logger = logging.getLogger(__name__)

COMPARISON_COLUMNS = [
    "scenario_id",
    "name",
    "principal",
    "annual_rate_pct",
    "term_years",
    "start_year",
    "monthly_payment",
    "total_interest",
    "interest_ratio_pct",
]


def generate_scenario_id(
    name: str, params: LoanParameters, created_at: datetime, sequence: int = 0
) -> str:
    """
    Generate a scenario identifier.

    Args:
        name: Scenario name
        params: Saved parameters
        created_at: Creation timestamp
        sequence: Position in the store, for tie-breaking

    Returns:
        16-character hex identifier
    """
    payload = json.dumps(
        {
            "name": name,
            "params": params.to_dict(),
            "created_at": created_at.isoformat(),
            "sequence": sequence,
        },
        sort_keys=True,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]


@dataclass(frozen=True)
class Scenario:
    """
    Immutable snapshot of a parameter set with its headline figures.

    Attributes:
        id: Unique identifier within the store
        name: User-given name
        params: Loan parameters active at save time
        monthly_payment: Fixed monthly payment
        total_interest: Interest over the whole term
        interest_ratio_pct: Total interest as a percentage of principal
        created_at: When the snapshot was taken
    """

    id: str
    name: str
    params: LoanParameters
    monthly_payment: float
    total_interest: float
    interest_ratio_pct: float
    created_at: datetime = field(default_factory=datetime.now, compare=False)

    @classmethod
    def snapshot(
        cls,
        name: str,
        params: LoanParameters,
        *,
        created_at: datetime | None = None,
        sequence: int = 0,
    ) -> Scenario:
        created_at = created_at or datetime.now()
        summary = loan_summary(params)
        return cls(
            id=generate_scenario_id(name, params, created_at, sequence),
            name=name,
            params=params,
            monthly_payment=summary.monthly_payment,
            total_interest=summary.total_interest,
            interest_ratio_pct=summary.interest_ratio_pct,
            created_at=created_at,
        )

    def to_row(self) -> dict:
        return {
            "scenario_id": self.id,
            "name": self.name,
            **self.params.to_dict(),
            "monthly_payment": self.monthly_payment,
            "total_interest": self.total_interest,
            "interest_ratio_pct": self.interest_ratio_pct,
        }


class ScenarioStore:
    """
    Ordered, in-memory list of saved scenarios.

    Scenarios are appended on save and removed by identifier. Nothing is
    persisted.
    """

    def __init__(self, scenarios: list[Scenario] | None = None):
        self._scenarios: list[Scenario] = list(scenarios or [])
        self._sequence = len(self._scenarios)

    def __len__(self) -> int:
        return len(self._scenarios)

    def __iter__(self) -> Iterator[Scenario]:
        return iter(list(self._scenarios))

    def __contains__(self, scenario_id: object) -> bool:
        return any(s.id == scenario_id for s in self._scenarios)

    def __repr__(self) -> str:
        return f"ScenarioStore({[s.name for s in self._scenarios]!r})"

    def ids(self) -> list[str]:
        return [s.id for s in self._scenarios]

    def copy(self) -> ScenarioStore:
        clone = ScenarioStore(self._scenarios)
        clone._sequence = self._sequence
        return clone

    def save(self, name: str, params: LoanParameters) -> Scenario:
        """
        Append a snapshot of ``params`` under ``name``.

        Args:
            name: Scenario name; surrounding whitespace is stripped
            params: Parameters to snapshot

        Returns:
            The new Scenario

        Raises:
            ScenarioNameError: If the name is empty or only whitespace
        """
        clean = (name or "").strip()
        if not clean:
            raise ScenarioNameError("Scenario name must not be blank")

        self._sequence += 1
        scenario = Scenario.snapshot(clean, params, sequence=self._sequence)
        self._scenarios.append(scenario)
        logger.debug("Saved scenario %s (%s)", scenario.id, scenario.name)
        return scenario

    def get(self, scenario_id: str) -> Scenario:
        for scenario in self._scenarios:
            if scenario.id == scenario_id:
                return scenario
        raise ScenarioNotFoundError("Unknown scenario", scenario_id=scenario_id)

    def load(self, scenario_id: str) -> LoanParameters:
        """Return the parameters that were active when the scenario was saved."""
        return self.get(scenario_id).params

    def remove(self, scenario_id: str) -> bool:
        """
        Remove a scenario by identifier.

        Returns:
            True if a scenario was removed, False if the id was unknown
        """
        before = len(self._scenarios)
        self._scenarios = [s for s in self._scenarios if s.id != scenario_id]
        removed = len(self._scenarios) < before
        if removed:
            logger.debug("Removed scenario %s", scenario_id)
        return removed

    def compare(self) -> pd.DataFrame:
        """
        Side-by-side comparison of all saved scenarios.

        Returns:
            DataFrame with one row per scenario in save order and the
            columns listed in ``COMPARISON_COLUMNS``
        """
        return pd.DataFrame(
            [s.to_row() for s in self._scenarios], columns=COMPARISON_COLUMNS
        )
