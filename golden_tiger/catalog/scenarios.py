"""
Scenario Catalog

Hardcoded, read-only investment scenarios. Declaration order matters:
sector matching walks the catalog in this order and the first hit wins.
"""

import random
from typing import Optional, Sequence

from golden_tiger.models.reference import (
    InvestmentScenario,
    RiskLevel,
    ScenarioType,
)


INVESTMENT_SCENARIOS: tuple[InvestmentScenario, ...] = (
    InvestmentScenario(
        id="stock1",
        type=ScenarioType.STOCK,
        name="Blue Chip Stocks",
        description="Large, established companies with a history of reliable performance.",
        historical_return=8,
        risk_level=RiskLevel.MEDIUM,
    ),
    InvestmentScenario(
        id="stock2",
        type=ScenarioType.STOCK,
        name="Tech Growth Stocks",
        description="Technology companies with high growth potential but higher volatility.",
        historical_return=12,
        risk_level=RiskLevel.HIGH,
    ),
    InvestmentScenario(
        id="realestate1",
        type=ScenarioType.REAL_ESTATE,
        name="Residential Real Estate",
        description="Investing in homes and apartments for rental income and appreciation.",
        historical_return=6,
        risk_level=RiskLevel.MEDIUM,
    ),
    InvestmentScenario(
        id="bond1",
        type=ScenarioType.BOND,
        name="Government Bonds",
        description="Low-risk bonds issued by the government.",
        historical_return=3,
        risk_level=RiskLevel.LOW,
    ),
    InvestmentScenario(
        id="mutual1",
        type=ScenarioType.MUTUAL_FUND,
        name="Index Fund",
        description="A fund that tracks a market index, offering broad diversification.",
        historical_return=7,
        risk_level=RiskLevel.MEDIUM,
    ),
)

# Form options shown by the record screens
PORTFOLIO_INVESTMENT_TYPES = (
    "Stock",
    "Real Estate",
    "Bond",
    "Mutual Fund",
    "Crypto",
    "Other",
)
DEFAULT_INVESTMENT_TYPE = "Stock"

CHALLENGE_SECTORS = ("Tech", "Real Estate", "Bonds", "Index Fund", "Other")
DEFAULT_CHALLENGE_SECTOR = "Tech"

FALLBACK_RANDOM = "random"
FALLBACK_FIRST = "first"


def get_scenario(
    scenario_id: str,
    catalog: Sequence[InvestmentScenario] = INVESTMENT_SCENARIOS,
) -> Optional[InvestmentScenario]:
    """Exact lookup by id. Returns None when the id is not in the catalog."""
    for scenario in catalog:
        if scenario.id == scenario_id:
            return scenario
    return None


def find_scenario_by_name(
    fragment: str,
    catalog: Sequence[InvestmentScenario] = INVESTMENT_SCENARIOS,
) -> Optional[InvestmentScenario]:
    """First scenario whose name contains the fragment, ignoring case."""
    needle = fragment.lower()
    for scenario in catalog:
        if needle in scenario.name.lower():
            return scenario
    return None


def select_scenario_for_sector(
    sector: str,
    rng: Optional[random.Random] = None,
    fallback: str = FALLBACK_RANDOM,
    catalog: Sequence[InvestmentScenario] = INVESTMENT_SCENARIOS,
) -> InvestmentScenario:
    """
    Pick the scenario a challenge is simulated against.

    A name match is deterministic. Without one, the fallback policy
    decides: "random" draws uniformly from the catalog using rng,
    "first" always takes the first catalog entry.
    """
    if not catalog:
        raise ValueError("Scenario catalog is empty")

    match = find_scenario_by_name(sector, catalog)
    if match is not None:
        return match

    if fallback == FALLBACK_FIRST:
        return catalog[0]
    if fallback != FALLBACK_RANDOM:
        raise ValueError(f"Unknown scenario fallback: {fallback!r}")

    return (rng or random).choice(list(catalog))
