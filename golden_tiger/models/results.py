"""
Result Models

Validation and mutation outcomes are values, not exceptions.
A screen gets back something it can display; nothing here raises
for bad user input.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_format', 'out_of_range')"
    )
    message: str = Field(
        ...,
        description="Human-readable message shown to the user"
    )
    severity: str = Field(
        default="error",
        pattern="^(error|warning)$",
    )


class ValidationResult(BaseModel):
    """
    Result of the two-phase validation.

    Phase 1: presence and parsing (normalizes raw input)
    Phase 2: range checks on the parsed values
    """

    collection: str
    is_valid: bool

    # Normalized values, ready to become a record (empty when invalid)
    fields: dict[str, Any] = Field(default_factory=dict)

    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def message(self) -> Optional[str]:
        """The display string for the first error, if any."""
        for issue in self.issues:
            if issue.severity == "error":
                return issue.message
        return None


class MutationResult(BaseModel):
    """
    Outcome of a create/update/delete on a collection.

    applied   - the in-memory list changed
    persisted - the full list was written to storage

    applied=True with persisted=False means the screen shows a change
    that storage does not have. Callers decide whether to retry or warn.
    """

    collection: str
    operation: str = Field(..., pattern="^(create|update|delete)$")
    records: list[Any] = Field(default_factory=list)
    record: Optional[Any] = None
    applied: bool
    persisted: bool = False
    validation: Optional[ValidationResult] = None
    error_message: Optional[str] = None

    @property
    def is_durable(self) -> bool:
        return self.applied and self.persisted

    @property
    def message(self) -> Optional[str]:
        """Display string for the screen, or None when nothing needs saying."""
        if self.validation is not None and not self.validation.is_valid:
            return self.validation.message
        if self.applied and not self.persisted:
            return "Your change is shown but could not be saved on this device."
        return None
