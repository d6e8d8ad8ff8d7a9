"""
Data Models Package

This package contains all Pydantic models used in Golden Tiger.
All data read from or written to storage must conform to these schemas.
"""

from golden_tiger.models.records import (
    CHALLENGES_KEY,
    COLLECTION_KEYS,
    NAME_MAX_LENGTH,
    NOTES_MAX_LENGTH,
    GOALS_KEY,
    PORTFOLIO_KEY,
    SIMULATIONS_KEY,
    ChallengeRecord,
    GoalRecord,
    PortfolioRecord,
    RecordModel,
    SimulationRecord,
)
from golden_tiger.models.reference import (
    InvestmentScenario,
    LearningContentType,
    LearningItem,
    RiskLevel,
    ScenarioType,
)
from golden_tiger.models.results import (
    MutationResult,
    ValidationIssue,
    ValidationResult,
)
from golden_tiger.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Collection keys
    "CHALLENGES_KEY",
    "COLLECTION_KEYS",
    "NAME_MAX_LENGTH",
    "NOTES_MAX_LENGTH",
    "GOALS_KEY",
    "PORTFOLIO_KEY",
    "SIMULATIONS_KEY",
    # Record models
    "ChallengeRecord",
    "GoalRecord",
    "PortfolioRecord",
    "RecordModel",
    "SimulationRecord",
    # Reference data
    "InvestmentScenario",
    "LearningContentType",
    "LearningItem",
    "RiskLevel",
    "ScenarioType",
    # Results
    "MutationResult",
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
