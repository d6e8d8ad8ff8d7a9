"""Tests for the projection calculator and the scenario catalog."""

import random

import pytest

from golden_tiger.catalog import (
    CHALLENGE_SECTORS,
    INVESTMENT_SCENARIOS,
    LEARNING_CONTENT,
    find_scenario_by_name,
    get_scenario,
    learning_items,
    select_scenario_for_sector,
)
from golden_tiger.models.reference import LearningContentType, RiskLevel
from golden_tiger.projection import (
    ProjectionRangeError,
    goal_progress_percent,
    one_period_return,
    project,
)


class TestProject:
    """Tests for compound growth."""

    def test_one_period(self):
        assert project(1000, 8, 1) == pytest.approx(1080)

    def test_ten_periods(self):
        assert project(1000, 8, 10) == pytest.approx(2158.92, abs=0.01)

    def test_zero_periods_returns_principal(self):
        assert project(5000, 3, 0) == 5000

    def test_one_period_return(self):
        assert one_period_return(1000, 12) == pytest.approx(1120)

    def test_negative_periods_rejected(self):
        with pytest.raises(ValueError):
            project(1000, 8, -1)

    def test_fractional_periods_rejected(self):
        with pytest.raises(ValueError):
            project(1000, 8, 2.5)


class TestGoalProgress:
    """Tests for the goal progress clamp."""

    def test_overshoot_clamped_to_100(self):
        assert goal_progress_percent(150, 100) == 100

    def test_rounds_half_up(self):
        assert goal_progress_percent(1, 8) == 13  # 12.5%

    def test_zero_progress(self):
        assert goal_progress_percent(0, 100) == 0

    def test_non_positive_target(self):
        assert goal_progress_percent(50, 0) == 0


class TestScenarioCatalog:
    """Tests for catalog lookups."""

    def test_catalog_order_and_size(self):
        assert [s.id for s in INVESTMENT_SCENARIOS] == [
            "stock1", "stock2", "realestate1", "bond1", "mutual1",
        ]

    def test_get_scenario(self):
        scenario = get_scenario("bond1")
        assert scenario.name == "Government Bonds"
        assert scenario.historical_return == 3
        assert scenario.risk_level == RiskLevel.LOW

    def test_get_scenario_miss(self):
        assert get_scenario("gone") is None

    def test_scenarios_are_immutable(self):
        with pytest.raises(Exception):
            INVESTMENT_SCENARIOS[0].historical_return = 99

    def test_find_by_name_ignores_case(self):
        assert find_scenario_by_name("tech").id == "stock2"

    def test_sector_match_is_deterministic(self):
        """Test 'Tech' always picks Tech Growth Stocks."""
        rng = random.Random(1)
        picks = {select_scenario_for_sector("Tech", rng=rng).id for _ in range(20)}
        assert picks == {"stock2"}

    @pytest.mark.parametrize("sector,expected", [
        ("Real Estate", "realestate1"),
        ("Bonds", "bond1"),
        ("Index Fund", "mutual1"),
    ])
    def test_builtin_sectors_match(self, sector, expected):
        assert sector in CHALLENGE_SECTORS
        assert select_scenario_for_sector(sector).id == expected

    def test_no_match_picks_catalog_member(self):
        """Test the random fallback returns some catalog scenario."""
        scenario = select_scenario_for_sector("Zzz", rng=random.Random())
        assert scenario in INVESTMENT_SCENARIOS

    def test_no_match_first_fallback(self):
        scenario = select_scenario_for_sector("Other", fallback="first")
        assert scenario.id == "stock1"

    def test_unknown_fallback_rejected(self):
        with pytest.raises(ValueError):
            select_scenario_for_sector("Zzz", fallback="cheapest")


class TestLearningContent:
    """Tests for Learning Hub content."""

    def test_all_items(self):
        assert len(learning_items()) == len(LEARNING_CONTENT) == 6

    def test_filter_by_type(self):
        quick_facts = learning_items(LearningContentType.QUICK_FACT)
        assert [item.id for item in quick_facts] == ["q1", "q2"]


class TestProjectionRange:
    """Tests for projections too large to represent."""

    def test_many_periods_overflow(self):
        with pytest.raises(ProjectionRangeError):
            project(1000, 12, 100000)

    def test_huge_principal_overflow(self):
        """Test a finite principal whose one-year return is infinite."""
        with pytest.raises(ProjectionRangeError):
            one_period_return(1.7e308, 12)

    def test_large_but_finite_projection(self):
        assert project(1000, 8, 1000) > 1e30

    def test_goal_progress_ratio_overflow_is_clamped(self):
        assert goal_progress_percent(1e308, 1e-300) == 100
