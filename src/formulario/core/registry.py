"""
Registro de tipos de campo.

Define, para cada tipo de campo, la configuración inicial con la que se
crea un campo nuevo y la etiqueta que se muestra en la interfaz. El
registro es estático y cubre exactamente los tipos de FieldType.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from formulario.errors import UnsupportedFieldType
from formulario.models import (
    FieldDefinition,
    FieldOption,
    FieldType,
    ValidationRules,
)


# Patrón de correo usado como validación inicial de campos email
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


@dataclass(frozen=True)
class FieldTypeSpec:
    """Entrada del registro para un tipo de campo."""
    type_label: str                 # Nombre del tipo en la interfaz
    label: str                      # Etiqueta inicial del campo
    placeholder: Optional[str] = None
    validation: Optional[dict] = None
    options: list[dict] = field(default_factory=list)
    default_value: Any = None


FIELD_TYPE_REGISTRY: dict[FieldType, FieldTypeSpec] = {
    FieldType.TEXT: FieldTypeSpec(
        type_label="Texto",
        label="Campo de texto",
        placeholder="Escribe un texto...",
        validation={"max_length": 255},
    ),
    FieldType.NUMBER: FieldTypeSpec(
        type_label="Número",
        label="Campo numérico",
        placeholder="Ingresa un número...",
        validation={"min": 0},
    ),
    FieldType.EMAIL: FieldTypeSpec(
        type_label="Correo",
        label="Correo electrónico",
        placeholder="Ingresa tu correo...",
        validation={"pattern": EMAIL_PATTERN},
    ),
    FieldType.TEXTAREA: FieldTypeSpec(
        type_label="Texto largo",
        label="Texto largo",
        placeholder="Escribe un texto detallado...",
        validation={"max_length": 1000},
    ),
    FieldType.SELECT: FieldTypeSpec(
        type_label="Desplegable",
        label="Desplegable",
        options=[
            {"id": "1", "label": "Opción 1", "value": "option1"},
            {"id": "2", "label": "Opción 2", "value": "option2"},
        ],
    ),
    FieldType.RADIO: FieldTypeSpec(
        type_label="Opción única",
        label="Opción única",
        options=[
            {"id": "1", "label": "Alternativa 1", "value": "choice1"},
            {"id": "2", "label": "Alternativa 2", "value": "choice2"},
        ],
    ),
    FieldType.CHECKBOX: FieldTypeSpec(
        type_label="Casilla",
        label="Casilla de verificación",
        default_value=False,
    ),
    FieldType.FILE: FieldTypeSpec(
        type_label="Archivo",
        label="Subir archivo",
        validation={"max_length": 1},
    ),
}


def resolve_field_type(field_type: Union[FieldType, str]) -> FieldType:
    """
    Convierte un tipo (enum o texto) a FieldType.

    Raises:
        UnsupportedFieldType: Si el tipo no está en el registro
    """
    if isinstance(field_type, FieldType):
        resolved = field_type
    else:
        try:
            resolved = FieldType(field_type)
        except ValueError:
            raise UnsupportedFieldType(field_type) from None

    if resolved not in FIELD_TYPE_REGISTRY:
        raise UnsupportedFieldType(field_type)
    return resolved


def get_type_spec(field_type: Union[FieldType, str]) -> FieldTypeSpec:
    """Obtiene la entrada del registro para un tipo."""
    return FIELD_TYPE_REGISTRY[resolve_field_type(field_type)]


def get_type_label(field_type: Union[FieldType, str]) -> str:
    """Nombre legible del tipo de campo."""
    return get_type_spec(field_type).type_label


def get_default_config(field_type: Union[FieldType, str]) -> dict:
    """
    Configuración parcial inicial para un campo del tipo dado.

    Retorna un dict nuevo en cada llamada (las listas y dicts internos
    también son copias), apto para mezclar con otros atributos.
    """
    spec = get_type_spec(field_type)
    config: dict = {"label": spec.label}
    if spec.placeholder is not None:
        config["placeholder"] = spec.placeholder
    if spec.validation is not None:
        config["validation"] = copy.deepcopy(spec.validation)
    if spec.options:
        config["options"] = copy.deepcopy(spec.options)
    if spec.default_value is not None:
        config["default_value"] = spec.default_value
    return config


def create_default_field(
    field_type: Union[FieldType, str],
    order: int = 0,
    field_id: Optional[str] = None,
) -> FieldDefinition:
    """Crea un campo nuevo con la configuración inicial de su tipo."""
    resolved = resolve_field_type(field_type)
    config = get_default_config(resolved)

    validation = config.pop("validation", None)
    options = config.pop("options", None)

    data = {
        "type": resolved,
        "required": False,
        "order": order,
        **config,
    }
    if field_id is not None:
        data["id"] = field_id
    if validation is not None:
        data["validation"] = ValidationRules(**validation)
    if options is not None:
        data["options"] = [FieldOption(**opt) for opt in options]

    return FieldDefinition(**data)


def list_field_types() -> list[tuple[FieldType, str]]:
    """Lista (tipo, etiqueta) en el orden del registro."""
    return [(ftype, spec.type_label) for ftype, spec in FIELD_TYPE_REGISTRY.items()]
