"""
Read-Side Summaries

DESIGN DECISION: Summaries are computed from the records as stored.
Nothing here writes, estimates, or fills in missing data; a portfolio
with no dated investments simply has no dated points.
"""

from datetime import date
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from golden_tiger.models.records import GoalRecord, PortfolioRecord, SimulationRecord


class ValuePoint(BaseModel):
    """One point of the cumulative portfolio value series."""

    label: str
    date: str
    cumulative_value: float


class PortfolioSummary(BaseModel):
    total_value: float = Field(ge=0)
    investment_count: int = Field(ge=0)
    series: list[ValuePoint] = Field(default_factory=list)


class GoalProgress(BaseModel):
    goal_id: str
    name: str
    current_amount: float
    target_amount: float
    percent: int = Field(ge=0, le=100)

    @property
    def is_reached(self) -> bool:
        return self.percent >= 100


def _parse_date(text: str) -> Optional[date]:
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def _label(text: str) -> str:
    # "2024-03-15" -> "03-15"
    return text[5:] if len(text) > 5 else text


def summarize_portfolio(records: Sequence[PortfolioRecord]) -> PortfolioSummary:
    """
    Total value plus a cumulative value series in date order.

    Investments whose date does not parse are added after the dated
    ones, in list order.
    """
    dated = []
    undated = []
    for position, record in enumerate(records):
        parsed = _parse_date(record.date)
        if parsed is None:
            undated.append(record)
        else:
            dated.append((parsed, position, record))
    dated.sort(key=lambda item: (item[0], item[1]))

    ordered = [record for _, _, record in dated] + undated

    series = []
    cumulative = 0.0
    for record in ordered:
        cumulative += record.amount
        series.append(ValuePoint(
            label=_label(record.date),
            date=record.date,
            cumulative_value=cumulative,
        ))

    return PortfolioSummary(
        total_value=sum(record.amount for record in records),
        investment_count=len(records),
        series=series,
    )


def goal_progress(records: Sequence[GoalRecord]) -> list[GoalProgress]:
    """Progress of each goal, in list order."""
    return [
        GoalProgress(
            goal_id=goal.id,
            name=goal.name,
            current_amount=goal.current_amount,
            target_amount=goal.target_amount,
            percent=goal.progress_percent,
        )
        for goal in records
    ]


def recent_simulations(
    records: Sequence[SimulationRecord],
    limit: int = 5,
) -> list[SimulationRecord]:
    """The most recent simulations. Lists are kept newest-first."""
    if limit < 0:
        raise ValueError("limit cannot be negative")
    return list(records[:limit])
