"""
Static Reference Data Models

Scenarios and learning content are read-only. Models are frozen so
catalog entries cannot be mutated by accident.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ScenarioType(str, Enum):
    """Asset class of an investment scenario."""
    STOCK = "stock"
    REAL_ESTATE = "real_estate"
    BOND = "bond"
    MUTUAL_FUND = "mutual_fund"


class RiskLevel(str, Enum):
    """Qualitative risk level."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InvestmentScenario(BaseModel):
    """An investment profile used as simulation input."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    type: ScenarioType
    name: str = Field(..., min_length=1)
    description: str
    historical_return: float = Field(
        ...,
        description="Average annual return in percent"
    )
    risk_level: RiskLevel


class LearningContentType(str, Enum):
    """Kinds of Learning Hub content."""
    ARTICLE = "Article"
    VIDEO = "Video"
    INFOGRAPHIC = "Infographic"
    QUICK_FACT = "Quick Fact"


class LearningItem(BaseModel):
    """A single Learning Hub entry."""
    model_config = ConfigDict(frozen=True)

    id: str
    content_type: LearningContentType
    title: str
    description: str
