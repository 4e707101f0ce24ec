"""
JSON codec for filter configurations edited in advanced (raw JSON) mode.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from .types import FilterCondition, FilterConfig, condition_to_dict

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Result of parsing a JSON filter configuration."""

    success: bool
    data: Optional[FilterConfig] = None
    error: Optional[str] = None


def format_filter_json(config: Mapping[str, Union[FilterCondition, Mapping[str, Any]]]) -> str:
    """Format a filter configuration as pretty-printed JSON.

    Keys keep the mapping's insertion order and typed condition variants are
    written in their raw ``{"operator", "value"}`` form.
    """
    raw = {field_name: condition_to_dict(condition) for field_name, condition in config.items()}
    return json.dumps(raw, indent=2, ensure_ascii=False)


def parse_filter_json(json_string: str) -> ParseResult:
    """Parse a filter configuration from a JSON string.

    The conditions are not validated here; callers run
    ``validate_filter_config`` on the returned data before saving.

    Args:
        json_string: JSON text typed by the user

    Returns:
        ParseResult with the parsed mapping, or the reason it was rejected
    """
    try:
        parsed = json.loads(json_string)
    except json.JSONDecodeError as e:
        logger.debug(f"Filter JSON rejected: {e}")
        return ParseResult(success=False, error=str(e))
    except TypeError:
        return ParseResult(success=False, error="Error al parsear JSON")

    if not isinstance(parsed, dict):
        return ParseResult(success=False, error="El JSON debe ser un objeto")

    return ParseResult(success=True, data=parsed)
