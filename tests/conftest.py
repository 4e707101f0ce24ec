"""Shared fixtures for saved-filter tests."""

import pytest

from erp_saved_filters.filtering import (
    FieldConfig,
    FieldOption,
    FieldRegistry,
    FieldType,
    Operator,
    SavedFilter,
    load_user_fields,
)


@pytest.fixture
def user_fields():
    """Field registry of the Users module."""
    return load_user_fields()


@pytest.fixture
def sample_fields():
    """Small registry with one field per type."""
    return FieldRegistry(
        [
            FieldConfig("email", "Email", FieldType.EMAIL, [Operator.EQ, Operator.CONTAINS, Operator.IS_NULL]),
            FieldConfig("age", "Edad", FieldType.NUMBER, [Operator.EQ, Operator.GT, Operator.IN, Operator.BETWEEN]),
            FieldConfig("is_active", "Estado", FieldType.BOOLEAN, [Operator.EQ, Operator.NE]),
            FieldConfig(
                "created_at",
                "Fecha de Creación",
                FieldType.DATETIME,
                [Operator.EQ, Operator.GT, Operator.BETWEEN, Operator.IS_NOT_NULL],
            ),
            FieldConfig(
                "gender",
                "Género",
                FieldType.SELECT,
                [Operator.EQ, Operator.IN, Operator.NOT_IN],
                options=[FieldOption("male", "Masculino"), FieldOption("female", "Femenino")],
            ),
        ]
    )


@pytest.fixture
def make_saved_filter():
    """Factory for SavedFilter entities."""

    def _make(filter_id="f1", **overrides):
        data = {
            "id": filter_id,
            "tenant_id": "tenant-1",
            "name": f"Filter {filter_id}",
            "description": None,
            "module": "users",
            "filters": {"email": {"operator": "contains", "value": "test"}},
            "is_default": False,
            "is_shared": False,
            "created_by": "u1",
            "created_at": "2025-01-01T00:00:00Z",
            "updated_at": "2025-01-01T00:00:00Z",
        }
        data.update(overrides)
        return SavedFilter.from_dict(data)

    return _make
