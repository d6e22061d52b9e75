"""
Tests para el registro de tipos de campo (core/registry.py).
"""

import pytest

from formulario.core.registry import (
    EMAIL_PATTERN,
    FIELD_TYPE_REGISTRY,
    create_default_field,
    get_default_config,
    get_type_label,
    list_field_types,
    resolve_field_type,
)
from formulario.errors import UnsupportedFieldType
from formulario.models import FieldType


class TestRegistryCoverage:
    """El registro cubre exactamente los tipos de FieldType."""

    def test_covers_every_type(self):
        assert set(FIELD_TYPE_REGISTRY) == set(FieldType)

    def test_list_field_types(self):
        listed = list_field_types()
        assert len(listed) == len(FieldType)
        assert (FieldType.TEXT, "Texto") in listed


class TestResolveFieldType:
    """Tests para resolve_field_type."""

    def test_accepts_enum_and_string(self):
        assert resolve_field_type(FieldType.EMAIL) == FieldType.EMAIL
        assert resolve_field_type("radio") == FieldType.RADIO

    def test_unknown_type_raises(self):
        """Un tipo desconocido falla, no se convierte a text."""
        with pytest.raises(UnsupportedFieldType) as exc_info:
            resolve_field_type("color")
        assert exc_info.value.field_type == "color"

    def test_unsupported_is_value_error(self):
        with pytest.raises(ValueError):
            get_default_config("signature")


class TestDefaultConfig:
    """Tests para get_default_config."""

    def test_text_defaults(self):
        config = get_default_config(FieldType.TEXT)
        assert config["label"] == "Campo de texto"
        assert config["validation"] == {"max_length": 255}

    def test_number_defaults(self):
        assert get_default_config("number")["validation"] == {"min": 0}

    def test_email_defaults(self):
        assert get_default_config("email")["validation"] == {"pattern": EMAIL_PATTERN}

    def test_textarea_defaults(self):
        assert get_default_config("textarea")["validation"] == {"max_length": 1000}

    def test_choice_defaults(self):
        """select y radio traen dos opciones iniciales."""
        select = get_default_config("select")
        radio = get_default_config("radio")

        assert [o["value"] for o in select["options"]] == ["option1", "option2"]
        assert [o["value"] for o in radio["options"]] == ["choice1", "choice2"]

    def test_checkbox_defaults(self):
        config = get_default_config("checkbox")
        assert config["default_value"] is False
        assert "validation" not in config

    def test_file_defaults(self):
        assert get_default_config("file")["validation"] == {"max_length": 1}

    def test_returns_independent_copies(self):
        """Modificar una configuración no afecta al registro."""
        config = get_default_config("select")
        config["options"].append({"id": "3", "label": "X", "value": "x"})
        config["options"][0]["label"] = "Cambiada"

        fresh = get_default_config("select")
        assert len(fresh["options"]) == 2
        assert fresh["options"][0]["label"] == "Opción 1"


class TestTypeLabel:
    """Tests para get_type_label."""

    @pytest.mark.parametrize("field_type,label", [
        ("text", "Texto"),
        ("number", "Número"),
        ("select", "Desplegable"),
        ("checkbox", "Casilla"),
        ("email", "Correo"),
        ("textarea", "Texto largo"),
        ("radio", "Opción única"),
        ("file", "Archivo"),
    ])
    def test_labels(self, field_type, label):
        assert get_type_label(field_type) == label


class TestCreateDefaultField:
    """Tests para create_default_field."""

    def test_creates_text_field(self):
        fld = create_default_field("text", order=3)

        assert fld.type == FieldType.TEXT
        assert fld.order == 3
        assert fld.required is False
        assert fld.placeholder == "Escribe un texto..."
        assert fld.validation.max_length == 255

    def test_creates_select_with_options(self):
        fld = create_default_field(FieldType.SELECT)
        assert len(fld.options) == 2
        assert fld.options[0].label == "Opción 1"

    def test_uses_given_id(self):
        assert create_default_field("checkbox", field_id="terms").id == "terms"

    def test_fresh_ids(self):
        assert create_default_field("text").id != create_default_field("text").id

    def test_unknown_type_raises(self):
        with pytest.raises(UnsupportedFieldType):
            create_default_field("color")
