"""
Collection Definitions

One strategy object per persisted collection. The record store is
generic; everything that differs between Portfolio, Goals, Challenges
and Simulations lives here:
- the storage slot key
- the record model
- how raw input is validated
- which fields are derived, and from what
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Mapping

from golden_tiger.catalog import (
    FALLBACK_RANDOM,
    get_scenario,
    select_scenario_for_sector,
)
from golden_tiger.models.records import (
    CHALLENGES_KEY,
    GOALS_KEY,
    PORTFOLIO_KEY,
    SIMULATIONS_KEY,
    ChallengeRecord,
    GoalRecord,
    PortfolioRecord,
    RecordModel,
    SimulationRecord,
)
from golden_tiger.models.results import ValidationResult
from golden_tiger.projection import one_period_return, project
from golden_tiger.validation import (
    projection_out_of_range,
    validate_challenge_input,
    validate_goal_input,
    validate_portfolio_input,
    validate_simulation_input,
)


@dataclass
class DerivationContext:
    """Sources of nondeterminism, injectable for tests."""

    rng: random.Random = field(default_factory=random.Random)
    clock: Callable[[], datetime] = datetime.now
    scenario_fallback: str = FALLBACK_RANDOM


class CollectionDefinition(ABC):
    """
    Strategy for one collection.

    Subclasses set key and record_model, and implement validate.
    derive defaults to "nothing derived".
    """

    key: str
    record_model: type[RecordModel]

    # Field blamed when a derived projection overflows
    projection_field: str = "amount"

    @abstractmethod
    def validate(self, raw: Mapping[str, Any]) -> ValidationResult:
        """Validate and normalize raw form input."""
        pass

    def derive(self, fields: dict[str, Any], context: DerivationContext) -> dict[str, Any]:
        """
        Return fields plus any computed values. Called on create and on edit.

        Raises:
            ProjectionRangeError: if a derived value is not finite
        """
        return dict(fields)

    def projection_rejected(self) -> ValidationResult:
        return projection_out_of_range(self.key, self.projection_field)

    def build(self, record_id: str, fields: dict[str, Any]) -> RecordModel:
        return self.record_model(id=record_id, **fields)


class PortfolioCollection(CollectionDefinition):
    key = PORTFOLIO_KEY
    record_model = PortfolioRecord

    def validate(self, raw: Mapping[str, Any]) -> ValidationResult:
        return validate_portfolio_input(raw)


class GoalsCollection(CollectionDefinition):
    # Progress is computed on read by GoalRecord, nothing stored
    key = GOALS_KEY
    record_model = GoalRecord

    def validate(self, raw: Mapping[str, Any]) -> ValidationResult:
        return validate_goal_input(raw)


class ChallengesCollection(CollectionDefinition):
    key = CHALLENGES_KEY
    record_model = ChallengeRecord

    def validate(self, raw: Mapping[str, Any]) -> ValidationResult:
        return validate_challenge_input(raw)

    def derive(self, fields: dict[str, Any], context: DerivationContext) -> dict[str, Any]:
        scenario = select_scenario_for_sector(
            fields["sector"],
            rng=context.rng,
            fallback=context.scenario_fallback,
        )
        return {
            **fields,
            "scenario_name": scenario.name,
            "simulated_return": one_period_return(fields["amount"], scenario.historical_return),
        }


class SimulationsCollection(CollectionDefinition):
    key = SIMULATIONS_KEY
    record_model = SimulationRecord
    projection_field = "years"

    def validate(self, raw: Mapping[str, Any]) -> ValidationResult:
        return validate_simulation_input(raw)

    def derive(self, fields: dict[str, Any], context: DerivationContext) -> dict[str, Any]:
        # validate() already rejected ids missing from the catalog
        scenario = get_scenario(fields["scenario_id"])
        return {
            **fields,
            "scenario_name": scenario.name,
            "projected_return": project(
                fields["amount"],
                scenario.historical_return,
                fields["years"],
            ),
            "date": context.clock().isoformat(timespec="seconds"),
        }


def default_collections() -> dict[str, CollectionDefinition]:
    """The four app collections keyed by slot key."""
    definitions = (
        PortfolioCollection(),
        GoalsCollection(),
        ChallengesCollection(),
        SimulationsCollection(),
    )
    return {definition.key: definition for definition in definitions}
