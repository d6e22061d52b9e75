"""
Modelos de estado del constructor y de la vista previa.

También define los formatos que cruzan la frontera con la aplicación
que embebe el motor: la exportación de esquema y el resultado de envío.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from formulario.models.base import CamelModel, generate_timestamp
from formulario.models.form import FormDefinition, FormSchema


class BuilderState(CamelModel):
    """
    Estado de edición de un formulario.

    selected_field_id, si no es None, referencia un campo existente.
    """
    form: FormSchema = Field(alias="schema")
    selected_field_id: Optional[str] = None
    is_preview_mode: bool = False
    is_dirty: bool = False


class SubmissionResult(CamelModel):
    """Resultado estructurado que retorna el callback de envío."""
    success: bool
    data: Optional[dict[str, Any]] = None
    errors: Optional[dict[str, str]] = None
    message: Optional[str] = None


class PreviewPhase(str, Enum):
    """Fase del llenado de un formulario."""
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class PreviewState(CamelModel):
    """Estado del llenado de un formulario."""
    values: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)
    is_submitting: bool = False
    touched_fields: set[str] = Field(default_factory=set)
    phase: PreviewPhase = PreviewPhase.IDLE
    last_result: Optional[SubmissionResult] = None

    @property
    def is_valid(self) -> bool:
        """Válido si y sólo si no hay errores."""
        return not self.errors


class SchemaExport(CamelModel):
    """
    Instantánea serializable de un esquema.

    Formato JSON: {"version": ..., "schema": {...}, "exportedAt": ...}
    """
    version: str
    form: FormDefinition = Field(alias="schema")
    exported_at: str = Field(default_factory=generate_timestamp)
