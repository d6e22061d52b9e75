"""
Tests para exportación e importación de esquemas (core/serialization.py).
"""

import json

import pytest

from formulario.config import SCHEMA_VERSION
from formulario.core.serialization import (
    default_export_filename,
    dump_schema_json,
    export_form_schema,
    import_form_schema,
    load_schema_json,
)
from formulario.errors import InvalidSchemaExport
from formulario.models import FormSchema, SchemaExport


class TestExport:
    """Tests para export_form_schema."""

    def test_export_format(self, sample_schema):
        exported = export_form_schema(sample_schema)

        assert isinstance(exported, SchemaExport)
        assert exported.version == SCHEMA_VERSION
        assert exported.form.id == sample_schema.id
        assert exported.exported_at

    def test_json_keys(self, sample_schema):
        data = export_form_schema(sample_schema).to_json_dict()

        assert data["schema"]["settings"]["submitButtonText"] == "Enviar mensaje"
        assert data["schema"]["fields"][0]["validation"] == {"minLength": 2, "maxLength": 100}
        assert "createdAt" not in data["schema"]


class TestImport:
    """Tests para import_form_schema."""

    def test_round_trip(self, sample_schema):
        """Importar reproduce campos, orden y reglas."""
        imported = import_form_schema(export_form_schema(sample_schema))

        assert imported.id == sample_schema.id
        assert imported.title == sample_schema.title
        assert imported.fields == sample_schema.fields
        assert imported.settings == sample_schema.settings

    def test_from_json_dict(self, signup_schema):
        data = json.loads(json.dumps(export_form_schema(signup_schema).to_json_dict()))
        imported = import_form_schema(data)

        assert isinstance(imported, FormSchema)
        assert imported.field_ids == ["name", "email", "age", "plan"]
        assert imported.get_field("plan").option_values == ["basic", "pro"]

    def test_fields_sorted_by_order(self, signup_schema):
        """Los campos quedan ordenados por order."""
        data = export_form_schema(signup_schema).to_json_dict()
        data["schema"]["fields"].reverse()

        imported = import_form_schema(data)
        assert imported.field_ids == ["name", "email", "age", "plan"]

    def test_timestamps_regenerated(self, signup_schema):
        signup_schema.created_at = "2000-01-01T00:00:00"
        imported = import_form_schema(export_form_schema(signup_schema))

        assert imported.created_at != "2000-01-01T00:00:00"
        assert imported.created_at == imported.updated_at

    def test_unsupported_version(self, signup_schema):
        data = export_form_schema(signup_schema).to_json_dict()
        data["version"] = "2.0.0"

        with pytest.raises(InvalidSchemaExport) as exc_info:
            import_form_schema(data)
        assert "2.0.0" in str(exc_info.value)

    def test_missing_schema(self):
        with pytest.raises(InvalidSchemaExport) as exc_info:
            import_form_schema({"version": SCHEMA_VERSION})
        assert exc_info.value.problems

    def test_unknown_field_type(self, signup_schema):
        data = export_form_schema(signup_schema).to_json_dict()
        data["schema"]["fields"][0]["type"] = "color"

        with pytest.raises(InvalidSchemaExport):
            import_form_schema(data)

    def test_not_a_mapping(self):
        with pytest.raises(InvalidSchemaExport):
            import_form_schema(["no", "es", "un", "objeto"])

    def test_inconsistent_schema(self, signup_schema):
        """IDs repetidos y huecos en order se reportan juntos."""
        data = export_form_schema(signup_schema).to_json_dict()
        data["schema"]["fields"][1]["id"] = "name"
        data["schema"]["fields"][3]["order"] = 9

        with pytest.raises(InvalidSchemaExport) as exc_info:
            import_form_schema(data)

        problems = exc_info.value.problems
        assert any("repetidos" in p for p in problems)
        assert any("order" in p for p in problems)


class TestJsonFiles:
    """Tests para archivos de exportación."""

    def test_dump_and_load(self, tmp_path, sample_schema):
        path = dump_schema_json(sample_schema, tmp_path / "contacto.json")

        assert path.exists()
        assert "País" in path.read_text(encoding="utf-8")

        loaded = load_schema_json(path)
        assert loaded.fields == sample_schema.fields

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema_json(tmp_path / "nope.json")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "roto.json"
        path.write_text("{no es json", encoding="utf-8")

        with pytest.raises(InvalidSchemaExport) as exc_info:
            load_schema_json(path)
        assert "JSON" in exc_info.value.problems[0]

    @pytest.mark.parametrize("title,expected", [
        ("Contacto", "contacto-schema.json"),
        ("Encuesta 2024", "encuesta-2024-schema.json"),
        ("Inscripción", "inscripci-n-schema.json"),
    ])
    def test_default_filename(self, title, expected):
        assert default_export_filename(title) == expected
