"""API errors and validation helpers."""

from app.errors import NotFoundError, ValidationError
from helpers.validators import validate_window
from settings import DEFAULT_WINDOW_DAYS

__all__ = [
    "NotFoundError",
    "ValidationError",
    "validate_id",
    "validate_window_days",
]


def validate_id(name: str, value: str) -> str:
    """Validate an entity id is a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Invalid {name}: {value!r}")
    return value


def validate_window_days(days: int | None) -> int:
    """Resolve an optional window size; None or 0 means the default window."""
    if days is None or days == 0:
        return DEFAULT_WINDOW_DAYS
    return validate_window(days)
