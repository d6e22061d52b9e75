"""
Motor de formularios: registro de tipos, validadores, constructor y
vista previa.
"""

from formulario.core.registry import (
    FIELD_TYPE_REGISTRY,
    create_default_field,
    get_default_config,
    get_type_label,
    list_field_types,
)
from formulario.core.validator import (
    FieldValidationResult,
    FormValidator,
    ValidationResult,
    generate_validator,
)
from formulario.core.serialization import (
    dump_schema_json,
    export_form_schema,
    import_form_schema,
    load_schema_json,
)
from formulario.core.utils import (
    check_schema,
    create_sample_schema,
    generate_sample_data,
)
from formulario.core.builder import FormBuilder, create_empty_schema
from formulario.core.preview import FormPreview

__all__ = [
    # Registro
    "FIELD_TYPE_REGISTRY",
    "create_default_field",
    "get_default_config",
    "get_type_label",
    "list_field_types",
    # Validación
    "FieldValidationResult",
    "FormValidator",
    "ValidationResult",
    "generate_validator",
    # Serialización
    "dump_schema_json",
    "export_form_schema",
    "import_form_schema",
    "load_schema_json",
    # Utilidades
    "check_schema",
    "create_sample_schema",
    "generate_sample_data",
    # Máquinas de estado
    "FormBuilder",
    "FormPreview",
    "create_empty_schema",
]
