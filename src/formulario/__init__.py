"""
Formulario - Motor de formularios dinámicos.

Permite diseñar formularios (campos, reglas de validación, ajustes),
generar validadores en tiempo de ejecución a partir del esquema y
simular el llenado y envío de un formulario.

Uso:
    from formulario import FormBuilder, FormPreview, FieldType

    builder = FormBuilder()
    field_id = builder.add_field(FieldType.EMAIL)
    preview = FormPreview(builder.schema)
"""

__version__ = "0.1.0"

from formulario.errors import (
    FormularioError,
    UnsupportedFieldType,
    FieldNotFound,
    IndexOutOfRange,
    InvalidValidationRule,
    InvalidSchemaExport,
)
from formulario.models import (
    FieldType,
    FieldOption,
    ValidationRules,
    FieldDefinition,
    FormSettings,
    FormSchema,
    SchemaExport,
    SubmissionResult,
)
from formulario.core import (
    FormBuilder,
    FormPreview,
    FormValidator,
    generate_validator,
    export_form_schema,
    import_form_schema,
)

__all__ = [
    "__version__",
    # Errores
    "FormularioError",
    "UnsupportedFieldType",
    "FieldNotFound",
    "IndexOutOfRange",
    "InvalidValidationRule",
    "InvalidSchemaExport",
    # Modelos
    "FieldType",
    "FieldOption",
    "ValidationRules",
    "FieldDefinition",
    "FormSettings",
    "FormSchema",
    "SchemaExport",
    "SubmissionResult",
    # Motor
    "FormBuilder",
    "FormPreview",
    "FormValidator",
    "generate_validator",
    "export_form_schema",
    "import_form_schema",
]
