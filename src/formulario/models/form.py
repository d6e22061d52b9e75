"""
Modelo de esquema de formulario.

Un esquema agrupa los campos de un formulario con su título, descripción
y ajustes. El orden de presentación lo define FieldDefinition.order, que
los mutadores mantienen consistente con la posición en la lista.
"""

from typing import Optional

from pydantic import Field

from formulario.config import DEFAULT_SUBMIT_TEXT
from formulario.models.base import CamelModel, TimestampedModel, generate_id
from formulario.models.field import FieldDefinition


class FormSettings(CamelModel):
    """Ajustes a nivel de formulario."""
    allow_multiple_submissions: bool = True
    require_login: bool = False
    show_progress_bar: bool = False
    submit_button_text: str = DEFAULT_SUBMIT_TEXT


class FormContent(CamelModel):
    """Contenido de un formulario (sin ID ni timestamps)."""
    title: str
    description: Optional[str] = None
    cover_image: Optional[str] = None
    fields: list[FieldDefinition] = Field(default_factory=list)
    settings: Optional[FormSettings] = None

    def get_field(self, field_id: str) -> Optional[FieldDefinition]:
        """Obtiene un campo por ID."""
        for fld in self.fields:
            if fld.id == field_id:
                return fld
        return None

    def index_of(self, field_id: str) -> int:
        """Posición del campo en la lista (-1 si no existe)."""
        for i, fld in enumerate(self.fields):
            if fld.id == field_id:
                return i
        return -1

    def sorted_fields(self) -> list[FieldDefinition]:
        """Campos ordenados por order."""
        return sorted(self.fields, key=lambda f: f.order)

    @property
    def field_ids(self) -> list[str]:
        return [f.id for f in self.fields]

    @property
    def n_fields(self) -> int:
        """Número de campos del formulario."""
        return len(self.fields)


class FormDefinition(FormContent):
    """Esquema sin timestamps, tal como viaja en una exportación."""
    id: str = Field(default_factory=generate_id)


class FormSchema(TimestampedModel, FormContent):
    """
    Esquema completo de un formulario.

    Se crea vacío o desde una exportación importada, y se modifica sólo a
    través de FormBuilder (que llama a touch() en cada mutación).
    """

    def definition(self) -> FormDefinition:
        """Copia profunda del esquema sin timestamps."""
        data = self.model_dump(exclude={"created_at", "updated_at"})
        return FormDefinition.model_validate(data)
