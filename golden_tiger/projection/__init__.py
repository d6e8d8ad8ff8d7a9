"""Projection calculator package."""

from golden_tiger.projection.calculator import (
    ProjectionRangeError,
    goal_progress_percent,
    one_period_return,
    project,
)

__all__ = [
    "ProjectionRangeError",
    "goal_progress_percent",
    "one_period_return",
    "project",
]
