"""
Saved-filter condition engine

This module provides the typed condition language behind saved filters:
field registries, condition validation, human-readable descriptions and the
JSON codec used by the advanced editor.

Key Components:
- FieldRegistry: Catalog of filterable fields per module
- validate_condition / validate_filter_config: Structural and type checks
- describe_filter: Deterministic Spanish description of a filter
- format_filter_json / parse_filter_json: Raw JSON editing support

Usage:
    from erp_saved_filters.filtering import describe_filter, load_user_fields

    fields = load_user_fields()
    describe_filter({"is_active": {"operator": "eq", "value": True}}, fields)
"""

from .codec import ParseResult, format_filter_json, parse_filter_json
from .description import describe_filter, get_field_label, get_operator_label
from .registry import FieldRegistry, get_allowed_operators_for_type, validate_field_config
from .saved_filter import (
    UNSET,
    FilterPage,
    PaginationMeta,
    SavedFilter,
    SavedFilterCreate,
    SavedFiltersListParams,
    SavedFilterUpdate,
)
from .seed_data import load_user_fields
from .types import (
    FieldConfig,
    FieldOption,
    FieldType,
    FilterCondition,
    FilterConfig,
    ListCondition,
    NullaryCondition,
    Operator,
    RangeCondition,
    ScalarCondition,
    condition_from_dict,
    condition_to_dict,
)
from .validation import ValidationResult, validate_condition, validate_filter_config

__all__ = [
    "UNSET",
    "FieldConfig",
    "FieldOption",
    "FieldRegistry",
    "FieldType",
    "FilterCondition",
    "FilterConfig",
    "FilterPage",
    "ListCondition",
    "NullaryCondition",
    "Operator",
    "PaginationMeta",
    "ParseResult",
    "RangeCondition",
    "SavedFilter",
    "SavedFilterCreate",
    "SavedFilterUpdate",
    "SavedFiltersListParams",
    "ScalarCondition",
    "ValidationResult",
    "condition_from_dict",
    "condition_to_dict",
    "describe_filter",
    "format_filter_json",
    "get_allowed_operators_for_type",
    "get_field_label",
    "get_operator_label",
    "load_user_fields",
    "parse_filter_json",
    "validate_condition",
    "validate_field_config",
    "validate_filter_config",
]
