"""Input validation utilities for saved-filter values."""

from datetime import datetime
from typing import Any, Optional


def parse_iso8601(date_string: Any) -> Optional[datetime]:
    """Parse an ISO 8601 date or datetime string.

    Args:
        date_string: Date string to parse

    Returns:
        The parsed datetime, or None if the value is not a valid ISO 8601 string
    """
    if not isinstance(date_string, str) or not date_string.strip():
        return None

    try:
        # Handle both with and without 'Z' suffix
        if date_string.endswith("Z"):
            return datetime.fromisoformat(date_string[:-1] + "+00:00")
        return datetime.fromisoformat(date_string)
    except (ValueError, TypeError):
        return None


def validate_iso8601_date(date_string: Any) -> bool:
    """Validate ISO 8601 date format.

    Args:
        date_string: Date string to validate

    Returns:
        True if date format is valid
    """
    return parse_iso8601(date_string) is not None


def validate_numeric(value: Any) -> bool:
    """Validate that a value is a number (booleans are not numbers).

    Args:
        value: The value to validate

    Returns:
        True if value is an int or float
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_boolean(value: Any) -> bool:
    """Validate that a value is exactly True or False."""
    return value is True or value is False


def validate_string_length(value: Any, min_length: int = 1, max_length: int = 255) -> bool:
    """Validate a string length within range.

    Args:
        value: The string to validate
        min_length: Minimum allowed length
        max_length: Maximum allowed length

    Returns:
        True if value is a string of valid length
    """
    return isinstance(value, str) and min_length <= len(value) <= max_length
