"""Tests for the read-side summaries."""

import pytest

from golden_tiger.models.records import GoalRecord, PortfolioRecord, SimulationRecord
from golden_tiger.queries import goal_progress, recent_simulations, summarize_portfolio


def _investment(record_id, amount, date):
    return PortfolioRecord(id=record_id, type="Stock", name=record_id, amount=amount, date=date)


def _simulation(record_id):
    return SimulationRecord(
        id=record_id,
        scenario_id="bond1",
        scenario_name="Government Bonds",
        amount=100,
        years=1,
        projected_return=103,
        date="2024-01-01T00:00:00",
    )


class TestPortfolioSummary:
    """Tests for summarize_portfolio."""

    def test_empty_portfolio(self):
        summary = summarize_portfolio([])
        assert summary.total_value == 0
        assert summary.investment_count == 0
        assert summary.series == []

    def test_series_is_cumulative_in_date_order(self):
        """Test newest-first storage order is re-sorted by date."""
        records = [
            _investment("c", 300, "2024-03-01"),
            _investment("a", 100, "2024-01-15"),
            _investment("b", 200, "2024-02-10"),
        ]
        summary = summarize_portfolio(records)

        assert summary.total_value == 600
        assert summary.investment_count == 3
        assert [p.cumulative_value for p in summary.series] == [100, 300, 600]
        assert [p.label for p in summary.series] == ["01-15", "02-10", "03-01"]

    def test_same_day_keeps_list_order(self):
        records = [_investment("x", 1, "2024-05-05"), _investment("y", 2, "2024-05-05")]
        summary = summarize_portfolio(records)
        assert [p.cumulative_value for p in summary.series] == [1, 3]

    def test_undated_investments_go_last(self):
        """Test free-text dates are kept but placed after dated points."""
        records = [_investment("x", 50, "last spring"), _investment("y", 10, "2024-01-01")]
        summary = summarize_portfolio(records)

        assert [p.date for p in summary.series] == ["2024-01-01", "last spring"]
        assert summary.series[-1].cumulative_value == 60


class TestGoalProgress:
    """Tests for goal_progress."""

    def test_progress_per_goal(self):
        goals = [
            GoalRecord(id="g1", name="Car", target_amount=200, current_amount=50, target_date="2026"),
            GoalRecord(id="g2", name="Trip", target_amount=100, current_amount=150, target_date="2025"),
        ]
        progress = goal_progress(goals)

        assert [p.goal_id for p in progress] == ["g1", "g2"]
        assert progress[0].percent == 25
        assert progress[0].is_reached is False
        assert progress[1].percent == 100
        assert progress[1].is_reached is True


class TestRecentSimulations:
    """Tests for recent_simulations."""

    def test_keeps_newest_first(self):
        records = [_simulation(str(i)) for i in range(8)]
        assert [s.id for s in recent_simulations(records, limit=3)] == ["0", "1", "2"]

    def test_default_limit(self):
        records = [_simulation(str(i)) for i in range(8)]
        assert len(recent_simulations(records)) == 5

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            recent_simulations([], limit=-1)
