"""Input validation package."""

from golden_tiger.validation.validator import (
    projection_out_of_range,
    validate_challenge_input,
    validate_goal_input,
    validate_portfolio_input,
    validate_simulation_input,
)

__all__ = [
    "projection_out_of_range",
    "validate_challenge_input",
    "validate_goal_input",
    "validate_portfolio_input",
    "validate_simulation_input",
]
