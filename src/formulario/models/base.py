"""
Clases base para modelos Pydantic.

Proporciona generación de IDs y timestamps, y el modelo base con alias
camelCase usado por el formato de exportación JSON.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def generate_id() -> str:
    """Genera un ID corto único (8 caracteres)."""
    return str(uuid.uuid4())[:8]


def generate_timestamp() -> str:
    """Genera timestamp ISO actual."""
    return datetime.now().isoformat()


class CamelModel(BaseModel):
    """
    Modelo base con alias camelCase.

    Los atributos Python son snake_case; el JSON exportado usa camelCase
    (coverImage, defaultValue, minLength...). Se aceptan ambas formas al
    construir.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict:
        """Serializa a dict JSON con alias camelCase, omitiendo vacíos."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TimestampedModel(CamelModel):
    """
    Modelo con ID corto y marcas de creación y modificación.

    En JSON los timestamps viajan como createdAt y updatedAt.
    """

    id: str = Field(default_factory=generate_id)
    created_at: str = Field(default_factory=generate_timestamp)
    updated_at: str = Field(default_factory=generate_timestamp)

    def touch(self) -> None:
        """Marca el registro como modificado ahora."""
        self.updated_at = generate_timestamp()
