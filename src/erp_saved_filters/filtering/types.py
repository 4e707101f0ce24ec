"""
Field and condition data models for the saved-filter engine.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from ..constants import LIST_OPERATORS, NULLARY_OPERATORS, RANGE_OPERATORS, SCALAR_OPERATORS
from ..exceptions import ConditionShapeError


class Operator(str, Enum):
    """Filter operators understood by the backend filter parser."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    IN = "in"
    NOT_IN = "not_in"
    BETWEEN = "between"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"

    def __str__(self) -> str:
        return self.value


class FieldType(str, Enum):
    """Semantic type of a filterable field."""

    STRING = "string"
    EMAIL = "email"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    SELECT = "select"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FieldOption:
    """A selectable value for select fields."""

    value: Union[str, int, float]
    label: str


@dataclass
class FieldConfig:
    """Definition of a filterable field."""

    name: str
    label: str
    type: FieldType
    operators: list[Operator]
    options: list[FieldOption] = field(default_factory=list)
    category: Optional[str] = None
    placeholder: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FieldConfig":
        """Create FieldConfig from a JSON-style definition."""
        return cls(
            name=data["name"],
            label=data.get("label") or data["name"],
            type=FieldType(data["type"]),
            operators=[Operator(op) for op in data.get("operators", [])],
            options=[FieldOption(value=opt["value"], label=opt["label"]) for opt in data.get("options", [])],
            category=data.get("category"),
            placeholder=data.get("placeholder"),
            description=data.get("description"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "type": self.type.value,
            "operators": [op.value for op in self.operators],
        }
        if self.options:
            data["options"] = [{"value": opt.value, "label": opt.label} for opt in self.options]
        if self.category is not None:
            data["category"] = self.category
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        if self.description is not None:
            data["description"] = self.description
        return data


# ---------------------------------------------------------------------------
# Condition variants
# ---------------------------------------------------------------------------


def _bind_operator(condition: Any, family: tuple[str, ...]) -> None:
    """Coerce the condition's operator and reject operators of another variant."""
    operator = parse_operator(condition.operator)
    if operator.value not in family:
        raise ConditionShapeError(
            f"El operador '{operator}' no corresponde a {type(condition).__name__}", operator.value
        )
    object.__setattr__(condition, "operator", operator)


@dataclass(frozen=True)
class NullaryCondition:
    """is_null / is_not_null: the value is never inspected."""

    operator: Operator

    def __post_init__(self) -> None:
        _bind_operator(self, NULLARY_OPERATORS)

    def to_dict(self) -> dict[str, Any]:
        return {"operator": self.operator.value, "value": None}


@dataclass(frozen=True)
class ListCondition:
    """in / not_in over a non-empty ordered list of values."""

    operator: Operator
    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        _bind_operator(self, LIST_OPERATORS)
        object.__setattr__(self, "values", tuple(self.values))

    def to_dict(self) -> dict[str, Any]:
        return {"operator": self.operator.value, "value": list(self.values)}


@dataclass(frozen=True)
class RangeCondition:
    """between with inclusive min/max endpoints."""

    operator: Operator
    min: Any
    max: Any

    def __post_init__(self) -> None:
        _bind_operator(self, RANGE_OPERATORS)

    def to_dict(self) -> dict[str, Any]:
        return {"operator": self.operator.value, "value": {"min": self.min, "max": self.max}}


@dataclass(frozen=True)
class ScalarCondition:
    """Comparison against a single value."""

    operator: Operator
    value: Any

    def __post_init__(self) -> None:
        _bind_operator(self, SCALAR_OPERATORS)

    def to_dict(self) -> dict[str, Any]:
        return {"operator": self.operator.value, "value": self.value}


FilterCondition = Union[NullaryCondition, ListCondition, RangeCondition, ScalarCondition]
CONDITION_TYPES = (NullaryCondition, ListCondition, RangeCondition, ScalarCondition)

# Field name -> raw condition mapping, exactly as persisted and exchanged as JSON
FilterConfig = dict[str, dict[str, Any]]


def parse_operator(raw: Any) -> Operator:
    """Return the Operator for a raw value or raise ConditionShapeError."""
    if isinstance(raw, Operator):
        return raw
    try:
        return Operator(raw)
    except ValueError:
        raise ConditionShapeError(f"Operador desconocido '{raw}'") from None


def condition_from_dict(data: Any) -> FilterCondition:
    """Build the condition variant that matches the operator of a raw condition.

    Args:
        data: Mapping with an ``operator`` key and, depending on the operator,
            a ``value`` key

    Returns:
        The typed condition variant

    Raises:
        ConditionShapeError: When the operator is unknown or the value does not
            have the shape the operator requires
    """
    if not isinstance(data, Mapping) or "operator" not in data:
        raise ConditionShapeError("La condición debe ser un objeto con 'operator'")

    operator = parse_operator(data["operator"])
    value = data.get("value")

    if operator.value in NULLARY_OPERATORS:
        return NullaryCondition(operator)

    if operator.value in LIST_OPERATORS:
        if not isinstance(value, (list, tuple)):
            raise ConditionShapeError(f"El operador '{operator}' requiere un array de valores", operator.value)
        if len(value) == 0:
            raise ConditionShapeError(f"El operador '{operator}' requiere al menos un valor", operator.value)
        return ListCondition(operator, tuple(value))

    if operator.value in RANGE_OPERATORS:
        if not isinstance(value, Mapping) or "min" not in value or "max" not in value:
            raise ConditionShapeError(
                f"El operador '{operator}' requiere un objeto con 'min' y 'max'", operator.value
            )
        return RangeCondition(operator, value["min"], value["max"])

    return ScalarCondition(operator, value)


def condition_to_dict(condition: Union[FilterCondition, Mapping[str, Any]]) -> dict[str, Any]:
    """Return the raw mapping form of a condition variant (mappings pass through)."""
    if isinstance(condition, Mapping):
        return dict(condition)
    return condition.to_dict()
