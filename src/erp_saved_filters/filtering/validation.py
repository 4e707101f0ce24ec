"""
Condition validation for saved filters.

Validation failures are returned as data and never raised, so editors can show
the message next to the offending condition and refuse to save.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..exceptions import ConditionShapeError
from ..utils.validators import validate_boolean, validate_iso8601_date, validate_numeric
from .registry import index_fields
from .types import (
    FieldConfig,
    FieldType,
    FilterCondition,
    ListCondition,
    NullaryCondition,
    Operator,
    RangeCondition,
    ScalarCondition,
    condition_from_dict,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one condition."""

    valid: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(valid=False, error=error)


def _operator_value(condition: Union[FilterCondition, Mapping[str, Any]]) -> Any:
    raw = condition.get("operator") if isinstance(condition, Mapping) else condition.operator
    return raw.value if isinstance(raw, Operator) else raw


def _check_value_type(condition: FilterCondition, field: FieldConfig) -> Optional[str]:
    """Return an error message when the value does not match the field type."""
    if field.type == FieldType.NUMBER:
        if isinstance(condition, ScalarCondition) and not validate_numeric(condition.value):
            return f"El campo '{field.label}' requiere un valor numérico"
        return None

    if field.type == FieldType.BOOLEAN:
        if not isinstance(condition, ScalarCondition) or not validate_boolean(condition.value):
            return f"El campo '{field.label}' requiere un valor booleano (true/false)"
        return None

    if field.type in (FieldType.DATE, FieldType.DATETIME):
        if isinstance(condition, RangeCondition):
            if not (validate_iso8601_date(condition.min) and validate_iso8601_date(condition.max)):
                return f"El campo '{field.label}' requiere fechas válidas para 'between'"
        elif isinstance(condition, ScalarCondition) and not validate_iso8601_date(condition.value):
            return f"El campo '{field.label}' requiere una fecha válida"
        return None

    # string, email and select accept any value once the operator is legal
    return None


def validate_condition(
    condition: Union[FilterCondition, Mapping[str, Any]],
    field: FieldConfig,
) -> ValidationResult:
    """Validate a single filter condition against its field definition.

    Args:
        condition: Typed condition variant or raw ``{"operator", "value"}`` mapping
        field: Definition of the field the condition applies to

    Returns:
        ValidationResult with ``valid`` and, on failure, a Spanish error message
    """
    operator = _operator_value(condition)
    allowed = [op.value for op in field.operators]
    if operator not in allowed:
        return ValidationResult.fail(f"Operador '{operator}' no permitido para el campo '{field.label}'")

    if isinstance(condition, Mapping):
        try:
            typed = condition_from_dict(condition)
        except ConditionShapeError as e:
            return ValidationResult.fail(str(e))
    else:
        typed = condition

    if isinstance(typed, NullaryCondition):
        return ValidationResult.ok()

    if isinstance(typed, ListCondition) and len(typed.values) == 0:
        return ValidationResult.fail(f"El operador '{operator}' requiere al menos un valor")

    error = _check_value_type(typed, field)
    if error:
        return ValidationResult.fail(error)

    return ValidationResult.ok()


def validate_filter_config(
    config: Any,
    fields: Iterable[FieldConfig],
) -> tuple[bool, list[str]]:
    """Validate every condition of a filter configuration.

    Args:
        config: Mapping of field name to raw condition
        fields: Field registry or list of field definitions

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    if not isinstance(config, Mapping):
        return False, ["El filtro debe ser un objeto"]

    indexed = index_fields(fields)
    errors = []

    for field_name, condition in config.items():
        field = indexed.get(field_name)
        if field is None:
            errors.append(f"Campo desconocido '{field_name}'")
            continue

        if not isinstance(condition, Mapping) or "operator" not in condition:
            errors.append(f"La condición del campo '{field.label}' debe ser un objeto con 'operator'")
            continue

        result = validate_condition(condition, field)
        if not result.valid and result.error:
            errors.append(result.error)

    if errors:
        logger.debug(f"Filter configuration rejected with {len(errors)} errors")

    return len(errors) == 0, errors
