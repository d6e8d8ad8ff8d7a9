"""Static reference data: investment scenarios and learning content."""

from golden_tiger.catalog.scenarios import (
    CHALLENGE_SECTORS,
    DEFAULT_CHALLENGE_SECTOR,
    DEFAULT_INVESTMENT_TYPE,
    FALLBACK_FIRST,
    FALLBACK_RANDOM,
    INVESTMENT_SCENARIOS,
    PORTFOLIO_INVESTMENT_TYPES,
    find_scenario_by_name,
    get_scenario,
    select_scenario_for_sector,
)
from golden_tiger.catalog.learning import LEARNING_CONTENT, learning_items

__all__ = [
    "CHALLENGE_SECTORS",
    "DEFAULT_CHALLENGE_SECTOR",
    "DEFAULT_INVESTMENT_TYPE",
    "FALLBACK_FIRST",
    "FALLBACK_RANDOM",
    "INVESTMENT_SCENARIOS",
    "LEARNING_CONTENT",
    "PORTFOLIO_INVESTMENT_TYPES",
    "find_scenario_by_name",
    "get_scenario",
    "learning_items",
    "select_scenario_for_sector",
]
