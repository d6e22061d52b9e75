"""
Tests para el almacén de formularios y respuestas (storage.py).
"""

import asyncio
import json

import pytest

from formulario.core import FormPreview, create_sample_schema
from formulario.storage import DUPLICATE_SUBMISSION_MESSAGE, FormStore


class TestForms:
    """Guardado, carga y listado de formularios."""

    def test_creates_directories(self, tmp_path):
        store = FormStore(data_dir=tmp_path / "nuevo")
        assert store.forms_dir.is_dir()
        assert store.submissions_dir.is_dir()

    def test_create_and_load(self, store):
        schema = store.create("Encuesta", "Anual")
        loaded = store.load(schema.id)

        assert loaded.title == "Encuesta"
        assert loaded.description == "Anual"
        assert loaded.fields == []

    def test_saved_json_uses_camel_case(self, store, sample_schema):
        path = store.save(sample_schema)
        data = json.loads(path.read_text(encoding="utf-8"))

        assert "createdAt" in data
        assert data["settings"]["allowMultipleSubmissions"] is False

    def test_round_trip(self, store, sample_schema):
        store.save(sample_schema)
        loaded = store.load(sample_schema.id)

        assert loaded.fields == sample_schema.fields
        assert loaded.settings == sample_schema.settings

    def test_load_missing(self, store):
        with pytest.raises(FileNotFoundError):
            store.load("nope")

    def test_get_form_by_prefix(self, store, signup_schema):
        store.save(signup_schema)

        assert store.get_form("signup01").id == "signup01"
        assert store.get_form("sign").id == "signup01"
        assert store.get_form("zzz") is None

    def test_list_forms(self, store, signup_schema, sample_schema):
        """Más recientes primero, con conteo de campos y respuestas."""
        signup_schema.updated_at = "2000-01-01T00:00:00"
        store.save(signup_schema)
        store.save(sample_schema)

        forms = store.list_forms()

        assert [f["id"] for f in forms] == [sample_schema.id, "signup01"]
        assert forms[1]["n_fields"] == 4
        assert forms[1]["n_submissions"] == 0

    def test_delete(self, store, signup_schema):
        store.save(signup_schema)
        store.add_submission(signup_schema, {"name": "Ana"})

        assert store.delete("signup01") is True
        assert store.get_form("signup01") is None
        assert store.list_submissions("signup01") == []
        assert store.delete("signup01") is False


class TestSubmissions:
    """Registro de envíos."""

    def test_add_submission(self, store, signup_schema):
        submission = store.add_submission(signup_schema, {"name": "Ana", "age": "30"})

        assert submission.form_id == "signup01"
        assert submission.values["age"] == 30.0

        stored = store.list_submissions("signup01")
        assert [s.id for s in stored] == [submission.id]

    def test_submissions_in_order(self, store, signup_schema):
        first = store.add_submission(signup_schema, {"name": "Ana"})
        second = store.add_submission(signup_schema, {"name": "Luis"})

        stored = store.list_submissions("signup01")
        assert [s.id for s in stored] == [first.id, second.id]


class TestSubmitHandler:
    """Callback on_submit para FormPreview."""

    def test_accepts_submission(self, store, signup_schema):
        on_submit = store.make_submit_handler(signup_schema)
        result = on_submit({"name": "Ana", "email": "ana@correo.com"})

        assert result.success is True
        assert result.data["name"] == "Ana"
        assert result.data["submission_id"]
        assert len(store.list_submissions("signup01")) == 1

    def test_single_submission_form(self, store):
        """Un formulario de un solo envío rechaza el segundo."""
        schema = create_sample_schema()
        on_submit = store.make_submit_handler(schema)
        values = {"name": "Ana", "email": "ana@correo.com", "country": "uy"}

        assert on_submit(values).success is True
        second = on_submit(values)

        assert second.success is False
        assert second.errors == {"_form": DUPLICATE_SUBMISSION_MESSAGE}
        assert len(store.list_submissions(schema.id)) == 1

    def test_with_preview(self, store, signup_schema):
        """Flujo completo: vista previa, validación y registro."""
        preview = FormPreview(signup_schema)
        preview.set_value("name", "Ana")
        preview.set_value("email", "ana@correo.com")
        preview.set_value("plan", "pro")

        result = asyncio.run(preview.submit_form(store.make_submit_handler(signup_schema)))

        assert result.success is True
        stored = store.list_submissions("signup01")
        assert stored[0].values["plan"] == "pro"
