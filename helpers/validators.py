"""Input validators - raise ValidationError on bad arguments."""

import re
from datetime import date, datetime

from app.errors import ValidationError

_DAY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_day(value: str) -> str:
    """Require a real calendar day written as YYYY-MM-DD."""
    if not isinstance(value, str) or not _DAY_RE.match(value):
        raise ValidationError(f"Invalid date: {value!r}. Expected YYYY-MM-DD")
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError as e:
        raise ValidationError(f"Invalid date: {value!r}. {e}") from e
    return value


def validate_count(name: str, value: int) -> int:
    """Require a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name} must be >= 0, got {value}")
    return value


def validate_window(window_days: int) -> int:
    """Require a positive integer window size."""
    if isinstance(window_days, bool) or not isinstance(window_days, int) or window_days < 1:
        raise ValidationError(f"Invalid window: {window_days!r}. Must be a positive number of days")
    return window_days


def day_string(day: date) -> str:
    """ISO calendar day string used as the date key in storage."""
    return day.isoformat()
