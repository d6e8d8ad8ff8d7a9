"""
Projection Calculator

Pure functions, no I/O. Rates are annual percentages and compound
once per whole-year period.
"""

import math


class ProjectionRangeError(ValueError):
    """The projected value is too large to represent as a float."""
    pass


def project(principal: float, annual_rate_percent: float, periods: int) -> float:
    """
    Compound growth: principal * (1 + rate/100) ** periods.

    Raises:
        ValueError: if periods is negative or not a whole number
        ProjectionRangeError: if the result is not a finite number
    """
    if isinstance(periods, bool) or int(periods) != periods:
        raise ValueError(f"Periods must be a whole number of years, got {periods!r}")
    if periods < 0:
        raise ValueError(f"Periods cannot be negative, got {periods}")

    try:
        value = principal * (1 + annual_rate_percent / 100) ** int(periods)
    except OverflowError:
        raise ProjectionRangeError(
            f"{principal} at {annual_rate_percent}% over {periods} periods overflows"
        )
    if not math.isfinite(value):
        raise ProjectionRangeError(
            f"{principal} at {annual_rate_percent}% over {periods} periods is not finite"
        )
    return value


def one_period_return(principal: float, annual_rate_percent: float) -> float:
    """Value after a single year, used for sector challenges."""
    return project(principal, annual_rate_percent, 1)


def goal_progress_percent(current_amount: float, target_amount: float) -> int:
    """
    Percentage of a goal reached.

    Rounded half-up to a whole percent and clamped to [0, 100].
    A non-positive target counts as no progress.
    """
    if target_amount <= 0:
        return 0
    ratio = current_amount / target_amount * 100
    if not math.isfinite(ratio):
        return 100 if ratio > 0 else 0
    percent = math.floor(ratio + 0.5)
    return max(0, min(100, percent))
