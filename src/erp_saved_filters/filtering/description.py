"""
Human-readable descriptions of filter configurations.
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from ..constants import DESCRIPTION_CONFIG, OPERATOR_LABELS
from .registry import index_fields
from .types import CONDITION_TYPES, FieldConfig, FilterCondition, Operator, condition_to_dict


def _format_value(value: Any) -> str:
    """Render a value the way the editor shows it inline."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _format_list(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(_format_value(item) for item in value)
    return _format_value(value)


def _describe_condition(label: str, operator: Optional[str], value: Any) -> str:
    if operator is None:
        return label
    if operator == "eq":
        return f"{label} es igual a '{_format_value(value)}'"
    if operator == "ne":
        return f"{label} no es igual a '{_format_value(value)}'"
    if operator in ("gt", "gte", "lt", "lte"):
        return f"{label} {OPERATOR_LABELS[operator]} {_format_value(value)}"
    if operator == "in":
        return f"{label} está en [{_format_list(value)}]"
    if operator == "not_in":
        return f"{label} no está en [{_format_list(value)}]"
    if operator == "between":
        if isinstance(value, Mapping) and "min" in value and "max" in value:
            return f"{label} está entre {_format_value(value['min'])} y {_format_value(value['max'])}"
        return label
    if operator in ("contains", "starts_with", "ends_with"):
        return f"{label} {OPERATOR_LABELS[operator]} '{_format_value(value)}'"
    if operator in ("is_null", "is_not_null"):
        return f"{label} {OPERATOR_LABELS[operator]}"
    return f"{label} {operator} {_format_value(value)}"


def describe_filter(
    config: Mapping[str, Union[FilterCondition, Mapping[str, Any]]],
    fields: Iterable[FieldConfig],
) -> str:
    """Build a human-readable description of a filter configuration.

    Conditions are rendered in the mapping's iteration order and joined with
    the conjunction token, so the same input always yields the same text.

    Args:
        config: Mapping of field name to condition
        fields: Field registry or list of field definitions

    Returns:
        The description, or the fixed "no conditions" sentence for an empty config
    """
    indexed = index_fields(fields)
    conditions = []

    for field_name, condition in config.items():
        # Values typed in the JSON editor are not validated and may not be condition objects
        raw = condition_to_dict(condition) if isinstance(condition, (Mapping, *CONDITION_TYPES)) else {}
        operator = raw.get("operator")
        if isinstance(operator, Operator):
            operator = operator.value

        field = indexed.get(field_name)
        if field is None:
            conditions.append(field_name if operator is None else f"{field_name}: {operator}")
            continue

        conditions.append(_describe_condition(field.label, operator, raw.get("value")))

    if not conditions:
        return DESCRIPTION_CONFIG["NO_CONDITIONS"]

    return f" {DESCRIPTION_CONFIG['CONJUNCTION']} ".join(conditions)


def get_operator_label(operator: Union[Operator, str]) -> str:
    """Get the Spanish label of an operator."""
    key = operator.value if isinstance(operator, Operator) else operator
    return OPERATOR_LABELS.get(key, key)


def get_field_label(field_name: str, fields: Iterable[FieldConfig]) -> str:
    """Get a field label by name, falling back to the name itself."""
    field = index_fields(fields).get(field_name)
    return field.label if field and field.label else field_name
