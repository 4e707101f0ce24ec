"""Utility modules for saved-filter operations."""

from .decorators import store_command
from .validators import (
    parse_iso8601,
    validate_boolean,
    validate_iso8601_date,
    validate_numeric,
    validate_string_length,
)

__all__ = [
    "parse_iso8601",
    "store_command",
    "validate_boolean",
    "validate_iso8601_date",
    "validate_numeric",
    "validate_string_length",
]
