"""Tests for the per-collection input validators."""

import pytest

from golden_tiger.validation import (
    validate_challenge_input,
    validate_goal_input,
    validate_portfolio_input,
    validate_simulation_input,
)


def _portfolio(**overrides):
    raw = {"type": "Stock", "name": "ACME", "amount": "250", "date": "2024-03-15", "notes": ""}
    raw.update(overrides)
    return raw


def _goal(**overrides):
    raw = {"name": "Car", "target_amount": "1000", "current_amount": "0", "target_date": "2026-01-01"}
    raw.update(overrides)
    return raw


def _challenge(**overrides):
    raw = {"name": "Tech bet", "sector": "Tech", "amount": "500", "start_date": "2024-01-01"}
    raw.update(overrides)
    return raw


def _simulation(**overrides):
    raw = {"scenario_id": "stock1", "amount": "1000", "years": "5"}
    raw.update(overrides)
    return raw


class TestPortfolioValidation:
    """Tests for validate_portfolio_input."""

    def test_valid_input_is_normalized(self):
        """Test parsed amount and dropped empty notes."""
        result = validate_portfolio_input(_portfolio(name="  ACME "))
        assert result.is_valid
        assert result.fields == {
            "type": "Stock",
            "name": "ACME",
            "amount": 250.0,
            "date": "2024-03-15",
            "notes": None,
        }

    def test_missing_required_fields(self):
        """Test blank name is rejected with the shared message."""
        result = validate_portfolio_input(_portfolio(name="   "))
        assert not result.is_valid
        assert result.message == "Name, amount, and date are required."
        assert result.fields == {}

    def test_missing_type(self):
        """Test missing investment type."""
        result = validate_portfolio_input(_portfolio(type=None))
        assert result.message == "Investment type is required."

    def test_zero_amount_rejected(self):
        """Test amount = 0 is rejected."""
        result = validate_portfolio_input(_portfolio(amount="0"))
        assert not result.is_valid
        assert result.message == "Amount must be a positive number."

    @pytest.mark.parametrize("amount", ["abc", "12abc", "nan", "inf", True])
    def test_non_numeric_amount_rejected(self, amount):
        """Test garbage, NaN, infinity and bools are not amounts."""
        result = validate_portfolio_input(_portfolio(amount=amount))
        assert not result.is_valid
        assert result.message == "Amount must be a positive number."

    def test_numeric_amount_accepted(self):
        """Test numbers are accepted as well as strings."""
        result = validate_portfolio_input(_portfolio(amount=99.5))
        assert result.fields["amount"] == 99.5


class TestGoalValidation:
    """Tests for validate_goal_input."""

    def test_zero_current_amount_accepted(self):
        """Test current amount = 0 is a valid starting point."""
        result = validate_goal_input(_goal(current_amount="0"))
        assert result.is_valid
        assert result.fields["current_amount"] == 0.0

    def test_zero_target_rejected(self):
        """Test target amount = 0 is rejected."""
        result = validate_goal_input(_goal(target_amount="0"))
        assert result.message == "Target amount must be a positive number."

    def test_negative_current_rejected(self):
        """Test negative current amount."""
        result = validate_goal_input(_goal(current_amount="-1"))
        assert result.message == "Current amount must be zero or positive."

    def test_non_numeric_current_rejected(self):
        """Test non-numeric current amount."""
        result = validate_goal_input(_goal(current_amount="lots"))
        assert not result.is_valid
        assert result.issues[0].issue_type == "invalid_format"

    def test_missing_target_date(self):
        """Test all fields but notes are required."""
        result = validate_goal_input(_goal(target_date=""))
        assert result.message == "All fields except notes are required."

    def test_current_above_target_allowed(self):
        """Test overshooting a goal is not a validation error."""
        result = validate_goal_input(_goal(target_amount="100", current_amount="150"))
        assert result.is_valid


class TestChallengeValidation:
    """Tests for validate_challenge_input."""

    def test_valid_challenge(self):
        result = validate_challenge_input(_challenge())
        assert result.is_valid
        assert result.fields["amount"] == 500.0

    def test_zero_amount_rejected(self):
        """Test amount = 0 is rejected."""
        result = validate_challenge_input(_challenge(amount=0))
        assert result.message == "Amount must be a positive number."

    def test_missing_sector(self):
        result = validate_challenge_input(_challenge(sector=""))
        assert result.message == "All fields are required."


class TestSimulationValidation:
    """Tests for validate_simulation_input."""

    def test_valid_simulation(self):
        result = validate_simulation_input(_simulation())
        assert result.is_valid
        assert result.fields == {"scenario_id": "stock1", "amount": 1000.0, "years": 5}

    def test_scenario_required(self):
        result = validate_simulation_input(_simulation(scenario_id=None))
        assert result.message == "Please select an investment scenario."

    def test_unknown_scenario(self):
        """Test a scenario id missing from the catalog."""
        result = validate_simulation_input(_simulation(scenario_id="crypto9"))
        assert result.message == "The selected scenario is no longer available."

    def test_amount_and_years_required(self):
        result = validate_simulation_input(_simulation(years=""))
        assert result.message == "Please enter both amount and years."

    @pytest.mark.parametrize("years", ["0", "-3", "2.5", "ten"])
    def test_years_must_be_positive_integer(self, years):
        result = validate_simulation_input(_simulation(years=years))
        assert result.message == "Years must be a positive integer."

    def test_integral_float_years_accepted(self):
        result = validate_simulation_input(_simulation(years=10.0))
        assert result.fields["years"] == 10

    def test_non_numeric_amount_rejected(self):
        result = validate_simulation_input(_simulation(amount="a lot"))
        assert result.message == "Amount must be a positive number."


class TestTextLimits:
    """Tests for name and notes length limits."""

    def test_name_at_limit_accepted(self):
        result = validate_portfolio_input(_portfolio(name="x" * 200))
        assert result.is_valid

    def test_overlong_portfolio_name_rejected(self):
        """Test a 201-character name fails validation instead of reaching the model."""
        result = validate_portfolio_input(_portfolio(name="x" * 201))
        assert not result.is_valid
        assert result.message == "Name must be 200 characters or fewer."
        assert result.issues[0].issue_type == "too_long"

    def test_overlong_notes_rejected(self):
        result = validate_portfolio_input(_portfolio(notes="n" * 1001))
        assert result.message == "Notes must be 1000 characters or fewer."

    def test_overlong_goal_fields_rejected(self):
        result = validate_goal_input(_goal(name="x" * 201, notes="n" * 1001))
        assert [issue.field for issue in result.issues] == ["name", "notes"]

    def test_overlong_challenge_name_rejected(self):
        result = validate_challenge_input(_challenge(name="x" * 201))
        assert result.message == "Name must be 200 characters or fewer."
