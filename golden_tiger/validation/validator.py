"""
Two-Phase Input Validation

DESIGN DECISION: Each collection validates raw form input in two phases:

PHASE 1 - PARSE AND NORMALIZE:
- Required text present (after stripping)
- Numeric text parses to a finite number
- This catches empty fields and typos

PHASE 2 - RANGE CHECKS:
- Amounts strictly positive (goal current amount may be zero)
- Years a positive whole number
- Name and notes within the stored length limits
- Scenario still present in the catalog

Derived projections are range-checked by the record store after
derivation; projection_out_of_range builds that rejection.

Phase 2 only runs when phase 1 passes. Validation NEVER raises for
bad input and NEVER partially applies anything; it returns a
ValidationResult whose message is ready to show the user.
"""

import math
from typing import Any, Mapping, Optional

from golden_tiger.catalog import get_scenario
from golden_tiger.models.records import (
    CHALLENGES_KEY,
    GOALS_KEY,
    NAME_MAX_LENGTH,
    NOTES_MAX_LENGTH,
    PORTFOLIO_KEY,
    SIMULATIONS_KEY,
)
from golden_tiger.models.results import ValidationIssue, ValidationResult


AMOUNT_MESSAGE = "Amount must be a positive number."
NAME_LENGTH_MESSAGE = f"Name must be {NAME_MAX_LENGTH} characters or fewer."
NOTES_LENGTH_MESSAGE = f"Notes must be {NOTES_MAX_LENGTH} characters or fewer."
PROJECTION_MESSAGE = "The projected value is too large. Try a smaller amount or fewer years."


# =============================================================================
# PARSING HELPERS
# =============================================================================

def _clean_text(value: Any) -> Optional[str]:
    """Stripped text, or None when empty or missing."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _is_blank(value: Any) -> bool:
    return _clean_text(value) is None


def _parse_number(value: Any) -> Optional[float]:
    """
    Strictly parse a finite number.

    Accepts ints, floats and numeric strings. Rejects bools, trailing
    garbage ("12abc"), NaN and infinities.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def _parse_whole_number(value: Any) -> Optional[int]:
    """Parse a whole number; "5" and 5.0 pass, "2.5" does not."""
    number = _parse_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _result(
    collection: str,
    issues: list[ValidationIssue],
    fields: Optional[dict] = None,
) -> ValidationResult:
    is_valid = not any(issue.severity == "error" for issue in issues)
    return ValidationResult(
        collection=collection,
        is_valid=is_valid,
        fields=(fields or {}) if is_valid else {},
        issues=issues,
    )


def _missing(fields: list[str], raw: Mapping[str, Any], message: str) -> list[ValidationIssue]:
    return [
        ValidationIssue(field=name, issue_type="missing", message=message)
        for name in fields
        if _is_blank(raw.get(name))
    ]


def _too_long(raw: Mapping[str, Any], with_notes: bool = True) -> list[ValidationIssue]:
    issues = []
    name = _clean_text(raw.get("name"))
    if name is not None and len(name) > NAME_MAX_LENGTH:
        issues.append(ValidationIssue(
            field="name", issue_type="too_long", message=NAME_LENGTH_MESSAGE,
        ))
    notes = _clean_text(raw.get("notes")) if with_notes else None
    if notes is not None and len(notes) > NOTES_MAX_LENGTH:
        issues.append(ValidationIssue(
            field="notes", issue_type="too_long", message=NOTES_LENGTH_MESSAGE,
        ))
    return issues


def projection_out_of_range(
    collection: str,
    field: str,
    message: str = PROJECTION_MESSAGE,
) -> ValidationResult:
    """Rejection for input whose derived projection overflows."""
    return _result(collection, [ValidationIssue(
        field=field, issue_type="out_of_range", message=message,
    )])


# =============================================================================
# PER-COLLECTION VALIDATORS
# =============================================================================

def validate_portfolio_input(raw: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a portfolio investment.

    Expects: type, name, amount, date, notes (optional).
    """
    # Phase 1
    issues = _missing(["name", "amount", "date"], raw, "Name, amount, and date are required.")
    if _is_blank(raw.get("type")):
        issues.append(ValidationIssue(
            field="type",
            issue_type="missing",
            message="Investment type is required.",
        ))
    if issues:
        return _result(PORTFOLIO_KEY, issues)

    amount = _parse_number(raw.get("amount"))
    if amount is None:
        return _result(PORTFOLIO_KEY, [ValidationIssue(
            field="amount", issue_type="invalid_format", message=AMOUNT_MESSAGE,
        )])

    # Phase 2
    if amount <= 0:
        return _result(PORTFOLIO_KEY, [ValidationIssue(
            field="amount", issue_type="out_of_range", message=AMOUNT_MESSAGE,
        )])
    issues = _too_long(raw)
    if issues:
        return _result(PORTFOLIO_KEY, issues)

    return _result(PORTFOLIO_KEY, [], {
        "type": _clean_text(raw.get("type")),
        "name": _clean_text(raw.get("name")),
        "amount": amount,
        "date": _clean_text(raw.get("date")),
        "notes": _clean_text(raw.get("notes")),
    })


def validate_goal_input(raw: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a savings goal.

    Expects: name, target_amount, current_amount, target_date, notes (optional).
    A current amount of zero is a valid starting point.
    """
    issues = _missing(
        ["name", "target_amount", "current_amount", "target_date"],
        raw,
        "All fields except notes are required.",
    )
    if issues:
        return _result(GOALS_KEY, issues)

    target = _parse_number(raw.get("target_amount"))
    current = _parse_number(raw.get("current_amount"))

    if target is None or target <= 0:
        issues.append(ValidationIssue(
            field="target_amount",
            issue_type="invalid_format" if target is None else "out_of_range",
            message="Target amount must be a positive number.",
        ))
    if current is None or current < 0:
        issues.append(ValidationIssue(
            field="current_amount",
            issue_type="invalid_format" if current is None else "out_of_range",
            message="Current amount must be zero or positive.",
        ))
    issues.extend(_too_long(raw))
    if issues:
        return _result(GOALS_KEY, issues)

    return _result(GOALS_KEY, [], {
        "name": _clean_text(raw.get("name")),
        "target_amount": target,
        "current_amount": current,
        "target_date": _clean_text(raw.get("target_date")),
        "notes": _clean_text(raw.get("notes")),
    })


def validate_challenge_input(raw: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a sector challenge.

    Expects: name, sector, amount, start_date.
    """
    issues = _missing(["name", "sector", "amount", "start_date"], raw, "All fields are required.")
    if issues:
        return _result(CHALLENGES_KEY, issues)

    amount = _parse_number(raw.get("amount"))
    if amount is None or amount <= 0:
        return _result(CHALLENGES_KEY, [ValidationIssue(
            field="amount",
            issue_type="invalid_format" if amount is None else "out_of_range",
            message=AMOUNT_MESSAGE,
        )])
    issues = _too_long(raw, with_notes=False)
    if issues:
        return _result(CHALLENGES_KEY, issues)

    return _result(CHALLENGES_KEY, [], {
        "name": _clean_text(raw.get("name")),
        "sector": _clean_text(raw.get("sector")),
        "amount": amount,
        "start_date": _clean_text(raw.get("start_date")),
    })


def validate_simulation_input(raw: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a simulation run.

    Expects: scenario_id, amount, years.
    The scenario must still exist in the catalog.
    """
    scenario_id = _clean_text(raw.get("scenario_id"))
    if scenario_id is None:
        return _result(SIMULATIONS_KEY, [ValidationIssue(
            field="scenario_id",
            issue_type="missing",
            message="Please select an investment scenario.",
        )])

    issues = _missing(["amount", "years"], raw, "Please enter both amount and years.")
    if issues:
        return _result(SIMULATIONS_KEY, issues)

    amount = _parse_number(raw.get("amount"))
    if amount is None or amount <= 0:
        return _result(SIMULATIONS_KEY, [ValidationIssue(
            field="amount",
            issue_type="invalid_format" if amount is None else "out_of_range",
            message=AMOUNT_MESSAGE,
        )])

    years = _parse_whole_number(raw.get("years"))
    if years is None or years <= 0:
        return _result(SIMULATIONS_KEY, [ValidationIssue(
            field="years",
            issue_type="invalid_format" if years is None else "out_of_range",
            message="Years must be a positive integer.",
        )])

    if get_scenario(scenario_id) is None:
        return _result(SIMULATIONS_KEY, [ValidationIssue(
            field="scenario_id",
            issue_type="not_found",
            message="The selected scenario is no longer available.",
        )])

    return _result(SIMULATIONS_KEY, [], {
        "scenario_id": scenario_id,
        "amount": amount,
        "years": years,
    })
