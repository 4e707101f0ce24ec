"""Constants for the saved-filter engine."""

# Operators understood by the backend filter parser
OPERATORS = (
    "eq",
    "ne",
    "gt",
    "gte",
    "lt",
    "lte",
    "in",
    "not_in",
    "between",
    "contains",
    "starts_with",
    "ends_with",
    "is_null",
    "is_not_null",
)

NULLARY_OPERATORS = ("is_null", "is_not_null")
LIST_OPERATORS = ("in", "not_in")
RANGE_OPERATORS = ("between",)
SCALAR_OPERATORS = tuple(op for op in OPERATORS if op not in NULLARY_OPERATORS + LIST_OPERATORS + RANGE_OPERATORS)

# Legal operators per field type
OPERATORS_BY_TYPE = {
    "string": ["eq", "ne", "contains", "starts_with", "ends_with", "is_null", "is_not_null"],
    "email": ["eq", "ne", "contains", "starts_with", "ends_with", "is_null", "is_not_null"],
    "number": ["eq", "ne", "gt", "gte", "lt", "lte", "in", "not_in", "between", "is_null", "is_not_null"],
    "boolean": ["eq", "ne"],
    "date": ["eq", "ne", "gt", "gte", "lt", "lte", "between", "is_null", "is_not_null"],
    "datetime": ["eq", "ne", "gt", "gte", "lt", "lte", "between", "is_null", "is_not_null"],
    "select": ["eq", "ne", "in", "not_in", "is_null", "is_not_null"],
}

# Spanish labels shown next to each operator in the editor
OPERATOR_LABELS = {
    "eq": "es igual a",
    "ne": "no es igual a",
    "gt": "es mayor que",
    "gte": "es mayor o igual que",
    "lt": "es menor que",
    "lte": "es menor o igual que",
    "in": "está en",
    "not_in": "no está en",
    "between": "está entre",
    "contains": "contiene",
    "starts_with": "comienza con",
    "ends_with": "termina con",
    "is_null": "es nulo",
    "is_not_null": "no es nulo",
}

DESCRIPTION_CONFIG = {
    "NO_CONDITIONS": "Sin condiciones",
    "CONJUNCTION": "Y",
    "DEFAULT_CATEGORY": "Otros",
}

# Schema limits enforced by the backend for SavedFilterCreate/Update
SAVED_FILTER_LIMITS = {
    "NAME_MAX_LENGTH": 255,
    "MODULE_MAX_LENGTH": 50,
}

# Roles allowed to delete any saved filter regardless of ownership
FILTER_ADMIN_ROLES = ("owner", "super_user", "admin")

# Module-scoped permission suffixes that also grant deletion
FILTER_ADMIN_PERMISSION_SUFFIXES = ("manage", "admin")

VIEWS_PERMISSIONS = {
    "VIEW": "views.view",
    "MANAGE": "views.manage",
    "SHARE": "views.share",
}

API_CONFIG = {
    "DEFAULT_BASE_URL": "http://localhost:8000/api/v1",
    "DEFAULT_TIMEOUT": 30,
    "FILTERS_PATH": "/views/filters",
    "USER_AGENT": "ErpSavedFilters/1.0 (Language=Python)",
}

# Query parameter mirroring the active saved filter in the URL
SAVED_FILTER_PARAM = "saved_filter_id"
