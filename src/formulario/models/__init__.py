"""
Modelos de datos de Formulario.

Este módulo contiene todos los modelos Pydantic utilizados por el motor.
"""

from formulario.models.base import (
    CamelModel,
    TimestampedModel,
    generate_id,
    generate_timestamp,
)
from formulario.models.field import (
    FieldType,
    FieldOption,
    ValidationRules,
    FieldDefinition,
    CHOICE_TYPES,
)
from formulario.models.form import (
    FormSettings,
    FormContent,
    FormDefinition,
    FormSchema,
)
from formulario.models.state import (
    BuilderState,
    PreviewPhase,
    PreviewState,
    SchemaExport,
    SubmissionResult,
)

__all__ = [
    # Clases base
    "CamelModel",
    "TimestampedModel",
    "generate_id",
    "generate_timestamp",
    # Campos
    "FieldType",
    "FieldOption",
    "ValidationRules",
    "FieldDefinition",
    "CHOICE_TYPES",
    # Esquema
    "FormSettings",
    "FormContent",
    "FormDefinition",
    "FormSchema",
    # Estados y formatos de frontera
    "BuilderState",
    "PreviewPhase",
    "PreviewState",
    "SchemaExport",
    "SubmissionResult",
]
