"""
Modelos de campos de formulario.

Un campo (FieldDefinition) es una casilla de entrada con tipo, etiqueta,
reglas de validación y, para listas de opciones, sus opciones.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import Field, model_validator

from formulario.models.base import CamelModel, generate_id


class FieldType(str, Enum):
    """Tipos de campo disponibles."""
    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    CHECKBOX = "checkbox"
    EMAIL = "email"
    TEXTAREA = "textarea"
    RADIO = "radio"
    FILE = "file"


# Tipos que requieren lista de opciones
CHOICE_TYPES = frozenset({FieldType.SELECT, FieldType.RADIO})


class FieldOption(CamelModel):
    """Opción de un campo select/radio."""
    id: str = Field(default_factory=generate_id)
    label: str
    value: str


class ValidationRules(CamelModel):
    """
    Restricciones opcionales de un campo.

    La ausencia de un atributo significa "sin restricción de ese tipo".
    """
    required: Optional[bool] = None
    min_length: Optional[int] = Field(default=None, ge=0)
    max_length: Optional[int] = Field(default=None, ge=0)
    min: Optional[Union[int, float]] = None  # Cota inferior (inclusiva)
    max: Optional[Union[int, float]] = None  # Cota superior (inclusiva)
    pattern: Optional[str] = None  # Expresión regular como texto
    custom_message: Optional[str] = None


class FieldDefinition(CamelModel):
    """Definición de un campo del formulario."""
    id: str = Field(default_factory=generate_id)
    type: FieldType
    label: str
    placeholder: Optional[str] = None
    description: Optional[str] = None
    required: bool = False
    validation: Optional[ValidationRules] = None
    options: Optional[list[FieldOption]] = None  # Solo select/radio
    default_value: Any = None
    cover_image: Optional[str] = None
    order: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_options(self) -> "FieldDefinition":
        if self.type in CHOICE_TYPES and not self.options:
            raise ValueError(f"El campo '{self.id}' ({self.type.value}) requiere opciones")
        if self.options:
            ids = [opt.id for opt in self.options]
            if len(ids) != len(set(ids)):
                raise ValueError(f"IDs de opción repetidos en el campo '{self.id}'")
        return self

    @property
    def is_required(self) -> bool:
        """
        Obligatoriedad efectiva del campo.

        validation.required, si está definido, tiene prioridad sobre required.
        """
        if self.validation is not None and self.validation.required is not None:
            return self.validation.required
        return self.required

    @property
    def option_values(self) -> list[str]:
        """Valores de las opciones (vacío si no tiene)."""
        return [opt.value for opt in self.options or []]

    def get_option_label(self, value: Any) -> Optional[str]:
        """Retorna la etiqueta de la opción con ese valor."""
        for opt in self.options or []:
            if opt.value == value:
                return opt.label
        return None
