"""Configuración de pytest para tests de formulario."""

import pytest

from formulario.core import FormBuilder, create_sample_schema
from formulario.models import (
    FieldDefinition,
    FieldOption,
    FieldType,
    FormSchema,
    ValidationRules,
)
from formulario.storage import FormStore


@pytest.fixture
def sample_schema():
    """Formulario de contacto de muestra."""
    return create_sample_schema()


@pytest.fixture
def signup_schema():
    """Formulario chico con nombre, email, edad y plan."""
    return FormSchema(
        id="signup01",
        title="Inscripción",
        fields=[
            FieldDefinition(
                id="name",
                type=FieldType.TEXT,
                label="Nombre",
                required=True,
                validation=ValidationRules(min_length=2, max_length=40),
                order=0,
            ),
            FieldDefinition(
                id="email",
                type=FieldType.EMAIL,
                label="Correo",
                required=True,
                order=1,
            ),
            FieldDefinition(
                id="age",
                type=FieldType.NUMBER,
                label="Edad",
                validation=ValidationRules(min=1, max=120),
                order=2,
            ),
            FieldDefinition(
                id="plan",
                type=FieldType.RADIO,
                label="Plan",
                options=[
                    FieldOption(id="1", label="Básico", value="basic"),
                    FieldOption(id="2", label="Pro", value="pro"),
                ],
                order=3,
            ),
        ],
    )


@pytest.fixture
def builder():
    """Constructor con esquema vacío."""
    return FormBuilder()


@pytest.fixture
def filled_builder():
    """Constructor con tres campos (text, email, number)."""
    b = FormBuilder()
    b.add_field(FieldType.TEXT)
    b.add_field(FieldType.EMAIL)
    b.add_field(FieldType.NUMBER)
    return b


@pytest.fixture
def store(tmp_path):
    """FormStore con directorio temporal."""
    return FormStore(data_dir=tmp_path / "data")


@pytest.fixture
def mock_store(store):
    """Parchea get_form_store para usar el almacén temporal."""
    import formulario.cli.form.base as base_module
    original = base_module._form_store
    base_module._form_store = store
    yield store
    base_module._form_store = original
