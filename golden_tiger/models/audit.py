"""
Audit Models for Golden Tiger

Every mutation and every swallowed storage failure produces an audit event.
Events go to the structured diagnostic log; they are how a silent
"shown but not saved" state can be reconstructed afterwards.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Record lifecycle
    RECORD_CREATED = "record_created"
    RECORD_UPDATED = "record_updated"
    RECORD_DELETED = "record_deleted"
    RECORD_NOT_FOUND = "record_not_found"
    VALIDATION_FAILED = "validation_failed"

    # Persistence
    COLLECTION_LOADED = "collection_loaded"
    LOAD_FAILED = "load_failed"
    PERSIST_FAILED = "persist_failed"

    # App state
    STORE_CLEARED = "store_cleared"
    RESET_FAILED = "reset_failed"
    ONBOARDING_COMPLETED = "onboarding_completed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """A single audit event."""

    event_id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    # Which collection / record this is about
    collection: Optional[str] = None
    record_id: Optional[str] = None

    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "collection": self.collection,
            "record_id": self.record_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.record_created("goals", goal.id)
        event = AuditEventBuilder.persist_failed("goals", "disk full")
    """

    @staticmethod
    def record_created(collection: str, record_id: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_CREATED,
            collection=collection,
            record_id=record_id,
            description=f"Record created in {collection}",
        )

    @staticmethod
    def record_updated(collection: str, record_id: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_UPDATED,
            collection=collection,
            record_id=record_id,
            description=f"Record updated in {collection}",
        )

    @staticmethod
    def record_deleted(collection: str, record_id: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_DELETED,
            collection=collection,
            record_id=record_id,
            description=f"Record deleted from {collection}",
        )

    @staticmethod
    def record_not_found(
        collection: str,
        record_id: str,
        operation: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_NOT_FOUND,
            severity=AuditSeverity.DEBUG,
            collection=collection,
            record_id=record_id,
            description=f"No record to {operation} in {collection}",
            details={"operation": operation},
        )

    @staticmethod
    def validation_failed(
        collection: str,
        issues: list[dict],
        record_id: Optional[str] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VALIDATION_FAILED,
            severity=AuditSeverity.WARNING,
            collection=collection,
            record_id=record_id,
            description=f"Input for {collection} rejected with {len(issues)} issues",
            details={"issues": issues},
        )

    @staticmethod
    def collection_loaded(collection: str, count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.COLLECTION_LOADED,
            severity=AuditSeverity.DEBUG,
            collection=collection,
            description=f"Loaded {count} records from {collection}",
            details={"count": count},
        )

    @staticmethod
    def load_failed(collection: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            collection=collection,
            description=f"Could not load {collection}, using an empty list",
            error_message=error_message,
        )

    @staticmethod
    def persist_failed(
        collection: str,
        error_message: str,
        record_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PERSIST_FAILED,
            severity=AuditSeverity.ERROR,
            collection=collection,
            description=f"Could not save {collection}; memory and storage differ",
            error_message=error_message,
            details={"record_count": record_count},
        )

    @staticmethod
    def store_cleared() -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_CLEARED,
            severity=AuditSeverity.WARNING,
            description="All app data deleted",
        )

    @staticmethod
    def reset_failed(error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RESET_FAILED,
            severity=AuditSeverity.ERROR,
            description="Could not delete app data",
            error_message=error_message,
        )

    @staticmethod
    def onboarding_completed() -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ONBOARDING_COMPLETED,
            description="Onboarding completed",
        )
