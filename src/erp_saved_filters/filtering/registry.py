"""
Field registry for managing filterable field definitions.
"""

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, Optional, Union

from ..constants import DESCRIPTION_CONFIG, OPERATORS_BY_TYPE
from ..exceptions import FieldConfigError
from .types import FieldConfig, FieldType, Operator

logger = logging.getLogger(__name__)


def get_allowed_operators_for_type(field_type: Union[FieldType, str]) -> list[Operator]:
    """Get the operators that are legal for a field type."""
    return [Operator(op) for op in OPERATORS_BY_TYPE.get(str(field_type), [])]


def validate_field_config(field: FieldConfig) -> tuple[bool, list[str]]:
    """Validate a field definition against the operator-by-type table.

    Args:
        field: The field definition to validate

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if not field.name or not field.name.strip():
        errors.append("Field name cannot be empty")

    allowed = get_allowed_operators_for_type(field.type)
    if not allowed:
        errors.append(f"Field '{field.name}': unknown type '{field.type}'")

    if not field.operators:
        errors.append(f"Field '{field.name}': at least one operator is required")

    for operator in field.operators:
        if allowed and operator not in allowed:
            errors.append(f"Field '{field.name}': operator '{operator}' is not valid for type '{field.type}'")

    if field.type == FieldType.SELECT and not field.options:
        errors.append(f"Field '{field.name}': select fields require options")

    return len(errors) == 0, errors


def index_fields(fields: Iterable[FieldConfig]) -> dict[str, FieldConfig]:
    """Map field names to definitions; the first definition of a name wins."""
    if isinstance(fields, FieldRegistry):
        return {field.name: field for field in fields}

    indexed: dict[str, FieldConfig] = {}
    for field in fields:
        indexed.setdefault(field.name, field)
    return indexed


class FieldRegistry:
    """Ordered catalog of the filterable fields of one module."""

    def __init__(self, fields: Iterable[FieldConfig] = ()):
        self._fields: dict[str, FieldConfig] = {}
        errors: list[str] = []

        for field in fields:
            is_valid, field_errors = validate_field_config(field)
            errors.extend(field_errors)
            if field.name in self._fields:
                errors.append(f"Duplicate field name '{field.name}'")
            if is_valid:
                self._fields[field.name] = field

        if errors:
            raise FieldConfigError(f"Invalid field registry: {'; '.join(errors)}", errors)

        logger.debug(f"Field registry loaded with {len(self._fields)} fields")

    @classmethod
    def from_dicts(cls, items: Iterable[dict[str, Any]]) -> "FieldRegistry":
        """Create a registry from JSON-style field definitions."""
        fields = []
        for idx, item in enumerate(items):
            try:
                fields.append(FieldConfig.from_dict(item))
            except (KeyError, ValueError) as e:
                raise FieldConfigError(f"Item {idx}: invalid field definition: {e}") from e
        return cls(fields)

    @classmethod
    def from_json(cls, file_path: Union[str, Path]) -> "FieldRegistry":
        """Load a registry from a JSON file holding a list of field definitions."""
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, dict):
            data = data.get("fields", [])
        return cls.from_dicts(data)

    def get(self, name: str) -> Optional[FieldConfig]:
        return self._fields.get(name)

    def label_for(self, name: str) -> str:
        field = self._fields.get(name)
        return field.label if field else name

    def operators_for(self, name: str) -> list[Operator]:
        field = self._fields.get(name)
        return list(field.operators) if field else []

    def by_category(self) -> dict[str, list[FieldConfig]]:
        """Group fields by category, keeping registry order."""
        grouped: dict[str, list[FieldConfig]] = {}
        for field in self._fields.values():
            category = field.category or DESCRIPTION_CONFIG["DEFAULT_CATEGORY"]
            grouped.setdefault(category, []).append(field)
        return grouped

    @property
    def fields(self) -> list[FieldConfig]:
        return list(self._fields.values())

    def __iter__(self) -> Iterator[FieldConfig]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields
