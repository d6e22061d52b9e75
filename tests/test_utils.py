"""
Tests para utilidades de esquemas (core/utils.py).
"""

from formulario.core import generate_validator
from formulario.core.utils import (
    check_schema,
    create_sample_schema,
    duplicate_field,
    generate_sample_data,
)
from formulario.models import (
    FieldDefinition,
    FieldType,
    FormContent,
    FormSchema,
    ValidationRules,
)


class TestCheckSchema:
    """Tests para check_schema."""

    def test_consistent_schemas(self, sample_schema, signup_schema):
        assert check_schema(sample_schema) == []
        assert check_schema(signup_schema) == []

    def test_empty_form(self):
        """Sin campos sólo es un problema en modo estricto."""
        schema = FormSchema(title="Vacío")
        assert check_schema(schema) == []
        assert check_schema(schema, strict=True) == ["El formulario no tiene campos"]

    def test_missing_title(self):
        assert check_schema(FormSchema(title="  ")) == ["El formulario requiere un título"]

    def test_duplicate_ids(self):
        schema = FormContent(
            title="X",
            fields=[
                FieldDefinition(id="a", type=FieldType.TEXT, label="A", order=0),
                FieldDefinition(id="a", type=FieldType.TEXT, label="B", order=1),
            ],
        )
        assert check_schema(schema) == ["IDs de campo repetidos: a"]

    def test_order_gap(self):
        schema = FormContent(
            title="X",
            fields=[
                FieldDefinition(id="a", type=FieldType.TEXT, label="A", order=0),
                FieldDefinition(id="b", type=FieldType.TEXT, label="B", order=2),
            ],
        )
        problems = check_schema(schema)
        assert len(problems) == 1
        assert "[0, 2]" in problems[0]

    def test_field_problems(self):
        """Etiqueta vacía y reglas contradictorias se reportan por campo."""
        schema = FormContent(
            title="X",
            fields=[
                FieldDefinition(id="a", type=FieldType.TEXT, label="", order=0),
                FieldDefinition(
                    id="b",
                    type=FieldType.NUMBER,
                    label="B",
                    validation=ValidationRules(min=10, max=1),
                    order=1,
                ),
                FieldDefinition(
                    id="c",
                    type=FieldType.TEXT,
                    label="C",
                    validation=ValidationRules(min_length=5, max_length=2, pattern="[a-"),
                    order=2,
                ),
            ],
        )
        problems = check_schema(schema)

        assert "Campo 1 (a): falta la etiqueta" in problems
        assert "Campo 2 (b): el mínimo no puede ser mayor que el máximo" in problems
        assert "Campo 3 (c): la longitud mínima no puede ser mayor que la máxima" in problems
        assert any(p.startswith("Campo 3 (c): expresión regular inválida") for p in problems)


class TestDuplicateField:
    """Tests para duplicate_field."""

    def test_copy(self, signup_schema):
        original = signup_schema.get_field("plan")
        copy = duplicate_field(original)

        assert copy.id != original.id
        assert copy.label == "Plan (copia)"
        assert copy.options == original.options

        copy.options[0].label = "Cambiada"
        assert original.options[0].label == "Básico"


class TestSampleData:
    """Tests para generate_sample_data y create_sample_schema."""

    def test_sample_schema_shape(self, sample_schema):
        assert sample_schema.field_ids == ["name", "email", "age", "country", "newsletter", "message"]
        assert sample_schema.settings.allow_multiple_submissions is False
        assert create_sample_schema().id != sample_schema.id

    def test_values_per_type(self, sample_schema):
        data = generate_sample_data(sample_schema)

        assert data["name"] == "Ingresa tu nombre completo"
        assert data["email"] == "usuario@ejemplo.com"
        assert data["age"] == 1
        assert data["country"] == "uy"
        assert data["newsletter"] is False

    def test_sample_data_is_valid(self, signup_schema):
        """Los datos de ejemplo pasan el validador del formulario."""
        data = generate_sample_data(signup_schema)
        assert generate_validator(signup_schema.fields).validate(data).success
