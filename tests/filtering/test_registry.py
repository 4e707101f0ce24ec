"""Unit tests for the field registry."""

import json

import pytest

from erp_saved_filters.exceptions import FieldConfigError
from erp_saved_filters.filtering import (
    FieldConfig,
    FieldRegistry,
    FieldType,
    Operator,
    get_allowed_operators_for_type,
    validate_field_config,
)


class TestAllowedOperators:
    """Test the operator-by-type table."""

    def test_boolean_only_equality(self):
        assert get_allowed_operators_for_type(FieldType.BOOLEAN) == [Operator.EQ, Operator.NE]

    def test_select_has_list_operators(self):
        allowed = get_allowed_operators_for_type("select")
        assert Operator.IN in allowed
        assert Operator.CONTAINS not in allowed

    def test_unknown_type_has_no_operators(self):
        assert get_allowed_operators_for_type("geo") == []


class TestValidateFieldConfig:
    """Test field definition validation."""

    def test_valid_field(self):
        field = FieldConfig("age", "Edad", FieldType.NUMBER, [Operator.EQ, Operator.BETWEEN])
        assert validate_field_config(field) == (True, [])

    def test_operator_not_legal_for_type(self):
        field = FieldConfig("name", "Nombre", FieldType.STRING, [Operator.EQ, Operator.IN])

        is_valid, errors = validate_field_config(field)

        assert is_valid is False
        assert len(errors) == 1
        assert "'in'" in errors[0]

    def test_select_requires_options(self):
        field = FieldConfig("status", "Estado", FieldType.SELECT, [Operator.EQ])

        is_valid, errors = validate_field_config(field)

        assert is_valid is False
        assert "options" in errors[0]


class TestFieldRegistry:
    """Test FieldRegistry lookups and loading."""

    def test_user_fields_seed_loads(self, user_fields):
        """Test that the shipped Users registry conforms to the type table."""
        assert len(user_fields) > 10
        assert "email" in user_fields
        assert user_fields.get("is_active").type == FieldType.BOOLEAN
        assert user_fields.operators_for("is_active") == [Operator.EQ, Operator.NE]

    def test_label_falls_back_to_name(self, user_fields):
        assert user_fields.label_for("email") == "Email"
        assert user_fields.label_for("missing") == "missing"

    def test_by_category_keeps_order(self, sample_fields):
        """Test grouping of uncategorised fields."""
        grouped = sample_fields.by_category()

        assert list(grouped) == ["Otros"]
        assert [f.name for f in grouped["Otros"]] == ["email", "age", "is_active", "created_at", "gender"]

    def test_user_fields_grouped_by_category(self, user_fields):
        grouped = user_fields.by_category()

        assert list(grouped)[0] == "Autenticación"
        assert "Fechas" in grouped

    def test_duplicate_names_rejected(self):
        field = FieldConfig("age", "Edad", FieldType.NUMBER, [Operator.EQ])

        with pytest.raises(FieldConfigError) as exc_info:
            FieldRegistry([field, field])

        assert "Duplicate" in str(exc_info.value)

    def test_invalid_definition_rejected(self):
        with pytest.raises(FieldConfigError) as exc_info:
            FieldRegistry([FieldConfig("flag", "Flag", FieldType.BOOLEAN, [Operator.GT])])

        assert exc_info.value.errors

    def test_from_dicts_rejects_unknown_type(self):
        with pytest.raises(FieldConfigError):
            FieldRegistry.from_dicts([{"name": "x", "label": "X", "type": "geo", "operators": ["eq"]}])

    def test_from_json(self, tmp_path):
        """Test loading a registry from a JSON file."""
        path = tmp_path / "fields.json"
        path.write_text(
            json.dumps(
                {
                    "fields": [
                        {"name": "code", "label": "Código", "type": "string", "operators": ["eq", "starts_with"]},
                        {
                            "name": "status",
                            "label": "Estado",
                            "type": "select",
                            "operators": ["eq", "in"],
                            "options": [{"value": "open", "label": "Abierto"}],
                        },
                    ]
                }
            ),
            encoding="utf-8",
        )

        registry = FieldRegistry.from_json(path)

        assert [f.name for f in registry] == ["code", "status"]
        assert registry.get("status").options[0].label == "Abierto"
        assert registry.get("code").to_dict()["operators"] == ["eq", "starts_with"]
