"""
Record Models for Golden Tiger

These models define the strict schemas for the four persisted collections.
They are designed to:
1. Enforce type safety when records are read back from storage
2. Serialize to the camelCase shape stored in each slot
3. Keep derived values (projected returns) alongside the inputs they came from

DESIGN DECISION: Python code uses snake_case field names, storage uses
camelCase aliases. populate_by_name lets both spellings construct a record.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from golden_tiger.projection import goal_progress_percent


# =============================================================================
# COLLECTION KEYS - one storage slot per collection
# =============================================================================

PORTFOLIO_KEY = "portfolio"
GOALS_KEY = "goals"
CHALLENGES_KEY = "challenges"
SIMULATIONS_KEY = "simulations"

COLLECTION_KEYS = (PORTFOLIO_KEY, GOALS_KEY, CHALLENGES_KEY, SIMULATIONS_KEY)

# Text limits, shared with the input validators
NAME_MAX_LENGTH = 200
NOTES_MAX_LENGTH = 1000


class RecordModel(BaseModel):
    """
    Base for every persisted record.

    All records carry a string id that is unique within their collection.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    id: str = Field(
        ...,
        min_length=1,
        description="Unique record ID within the collection"
    )

    def to_storage(self) -> dict:
        """Dump to the JSON-ready dict written into a storage slot."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PortfolioRecord(RecordModel):
    """A real (or planned) investment the user is tracking."""

    type: str = Field(
        ...,
        min_length=1,
        description="Investment type, e.g. Stock or Real Estate"
    )
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    amount: float = Field(
        ...,
        gt=0,
        description="Amount invested"
    )
    date: str = Field(
        ...,
        min_length=1,
        description="Investment date as entered by the user"
    )
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)


class GoalRecord(RecordModel):
    """
    A savings goal.

    Progress is NOT stored. It is recomputed from the two amounts
    every time it is displayed.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    target_amount: float = Field(..., gt=0)
    current_amount: float = Field(..., ge=0)
    target_date: str = Field(..., min_length=1)
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)

    @property
    def progress_percent(self) -> int:
        """Progress towards the target, rounded and clamped to [0, 100]."""
        return goal_progress_percent(self.current_amount, self.target_amount)


class ChallengeRecord(RecordModel):
    """
    A sector challenge: "what if I put this amount into this sector".

    simulated_return is derived once at create/edit time from the
    scenario matched to the sector.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    sector: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    start_date: str = Field(..., min_length=1)
    scenario_name: str = Field(..., min_length=1)
    simulated_return: float = Field(
        ...,
        description="Amount after one year at the scenario's historical return"
    )


class SimulationRecord(RecordModel):
    """
    A saved compound-growth simulation against a catalog scenario.

    projected_return is derived once at create/edit time.
    """

    scenario_id: str = Field(..., min_length=1)
    scenario_name: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    years: int = Field(..., gt=0)
    projected_return: float
    date: str = Field(
        ...,
        description="When the simulation was last run (ISO-8601)"
    )
