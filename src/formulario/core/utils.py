"""
Utilidades para trabajar con esquemas de formulario.

Incluye el chequeo estructural de un esquema, la duplicación de campos,
datos de ejemplo y un formulario de muestra.
"""

import re
from typing import Any

from formulario.models import (
    CHOICE_TYPES,
    FieldDefinition,
    FieldOption,
    FieldType,
    FormContent,
    FormSchema,
    FormSettings,
    ValidationRules,
    generate_id,
)


def check_schema(schema: FormContent, strict: bool = False) -> list[str]:
    """
    Chequea la consistencia estructural de un esquema.

    Args:
        schema: Esquema a revisar (con o sin timestamps)
        strict: Si True, también reporta un formulario sin campos

    Returns:
        Lista de problemas encontrados (vacía si el esquema es consistente)
    """
    problems = []

    if not schema.title or not schema.title.strip():
        problems.append("El formulario requiere un título")

    if strict and not schema.fields:
        problems.append("El formulario no tiene campos")

    # IDs repetidos
    seen: set[str] = set()
    duplicated: list[str] = []
    for fld in schema.fields:
        if fld.id in seen and fld.id not in duplicated:
            duplicated.append(fld.id)
        seen.add(fld.id)
    if duplicated:
        problems.append(f"IDs de campo repetidos: {', '.join(duplicated)}")

    # order debe ser 0..n-1 sin repetidos ni huecos
    orders = sorted(f.order for f in schema.fields)
    if orders != list(range(len(orders))):
        problems.append(f"Valores de order no consecutivos: {orders}")

    for idx, fld in enumerate(schema.fields):
        name = f"Campo {idx + 1} ({fld.id})"
        if not fld.label or not fld.label.strip():
            problems.append(f"{name}: falta la etiqueta")
        if fld.type in CHOICE_TYPES and not fld.options:
            problems.append(f"{name}: requiere opciones para tipo {fld.type.value}")
        problems.extend(f"{name}: {p}" for p in _check_rules(fld.validation))

    return problems


def _check_rules(rules: ValidationRules | None) -> list[str]:
    if rules is None:
        return []
    problems = []
    if rules.min is not None and rules.max is not None and rules.min > rules.max:
        problems.append("el mínimo no puede ser mayor que el máximo")
    if (rules.min_length is not None and rules.max_length is not None
            and rules.min_length > rules.max_length):
        problems.append("la longitud mínima no puede ser mayor que la máxima")
    if rules.pattern:
        try:
            re.compile(rules.pattern)
        except re.error as e:
            problems.append(f"expresión regular inválida ({e})")
    return problems


def duplicate_field(fld: FieldDefinition) -> FieldDefinition:
    """Copia de un campo con ID nuevo y etiqueta marcada como copia."""
    return fld.model_copy(
        update={"id": generate_id(), "label": f"{fld.label} (copia)"},
        deep=True,
    )


def generate_sample_data(schema: FormContent) -> dict[str, Any]:
    """Genera valores de ejemplo plausibles para cada campo."""
    sample: dict[str, Any] = {}
    for fld in schema.sorted_fields():
        rules = fld.validation
        if fld.type in (FieldType.TEXT, FieldType.TEXTAREA):
            sample[fld.id] = fld.placeholder or "Texto de ejemplo"
        elif fld.type == FieldType.EMAIL:
            sample[fld.id] = "usuario@ejemplo.com"
        elif fld.type == FieldType.NUMBER:
            sample[fld.id] = rules.min if rules and rules.min is not None else 0
        elif fld.type == FieldType.CHECKBOX:
            sample[fld.id] = bool(fld.default_value)
        elif fld.type in CHOICE_TYPES:
            if fld.options:
                sample[fld.id] = fld.options[0].value
        else:
            sample[fld.id] = ""
    return sample


def create_sample_schema() -> FormSchema:
    """Formulario de contacto de muestra."""
    return FormSchema(
        title="Formulario de contacto",
        description="Completa este formulario para ponerte en contacto con nosotros.",
        fields=[
            FieldDefinition(
                id="name",
                type=FieldType.TEXT,
                label="Nombre completo",
                placeholder="Ingresa tu nombre completo",
                required=True,
                validation=ValidationRules(min_length=2, max_length=100),
                order=0,
            ),
            FieldDefinition(
                id="email",
                type=FieldType.EMAIL,
                label="Correo electrónico",
                placeholder="Ingresa tu correo",
                required=True,
                order=1,
            ),
            FieldDefinition(
                id="age",
                type=FieldType.NUMBER,
                label="Edad",
                placeholder="Ingresa tu edad",
                validation=ValidationRules(min=1, max=120),
                order=2,
            ),
            FieldDefinition(
                id="country",
                type=FieldType.SELECT,
                label="País",
                required=True,
                options=[
                    FieldOption(id="uy", label="Uruguay", value="uy"),
                    FieldOption(id="ar", label="Argentina", value="ar"),
                    FieldOption(id="br", label="Brasil", value="br"),
                    FieldOption(id="cl", label="Chile", value="cl"),
                ],
                order=3,
            ),
            FieldDefinition(
                id="newsletter",
                type=FieldType.CHECKBOX,
                label="Suscribirme al boletín",
                description="Recibe novedades sobre nuestros cursos",
                default_value=False,
                order=4,
            ),
            FieldDefinition(
                id="message",
                type=FieldType.TEXTAREA,
                label="Mensaje",
                placeholder="Escribe tu mensaje...",
                required=True,
                validation=ValidationRules(min_length=10, max_length=500),
                order=5,
            ),
        ],
        settings=FormSettings(
            allow_multiple_submissions=False,
            show_progress_bar=True,
            submit_button_text="Enviar mensaje",
        ),
    )
