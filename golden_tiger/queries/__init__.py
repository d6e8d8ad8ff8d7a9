"""Read-side summaries package."""

from golden_tiger.queries.summaries import (
    GoalProgress,
    PortfolioSummary,
    ValuePoint,
    goal_progress,
    recent_simulations,
    summarize_portfolio,
)

__all__ = [
    "GoalProgress",
    "PortfolioSummary",
    "ValuePoint",
    "goal_progress",
    "recent_simulations",
    "summarize_portfolio",
]
