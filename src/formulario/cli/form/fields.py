"""
Comandos de edición de campos: add-field, update-field, remove-field,
move-field, duplicate-field.

Cada comando carga el formulario, aplica la operación con FormBuilder y
guarda el resultado.
"""

import re
from contextlib import contextmanager
from typing import Annotated, Iterator, Optional

import typer

from formulario.cli.form.base import exit_with_error, get_form_store, load_form_or_exit
from formulario.cli.theme import print_field, print_success
from formulario.core.builder import FormBuilder
from formulario.core.registry import get_type_label
from formulario.errors import FormularioError


@contextmanager
def editing(form_id: str) -> Iterator[FormBuilder]:
    """
    Sesión de edición de un formulario guardado.

    Si la operación falla, el error se imprime y no se guarda nada.
    """
    builder = FormBuilder(load_form_or_exit(form_id))
    try:
        yield builder
    except (FormularioError, ValueError) as e:
        exit_with_error(str(e))

    if builder.is_dirty:
        get_form_store().save(builder.schema)
        builder.mark_saved()


def parse_options(text: str) -> list[dict]:
    """
    Convierte "Etiqueta=valor, Otra" en opciones.

    Sin "=", el valor es la etiqueta en minúsculas con espacios como "_".
    """
    options = []
    for i, item in enumerate(part.strip() for part in text.split(",")):
        if not item:
            continue
        if "=" in item:
            label, value = (s.strip() for s in item.split("=", 1))
        else:
            label = item
            value = re.sub(r"\s+", "_", item.lower())
        options.append({"id": str(i + 1), "label": label, "value": value})
    return options


def form_add_field(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
    field_type: Annotated[str, typer.Argument(help="Tipo: text, number, email, textarea, select, radio, checkbox, file")],
    position: Annotated[Optional[int], typer.Option("--position", "-p", help="Posición (0 = primero)")] = None,
    label: Annotated[Optional[str], typer.Option("--label", "-l", help="Etiqueta")] = None,
    required: Annotated[bool, typer.Option("--required", "-r", help="Campo obligatorio")] = False,
    placeholder: Annotated[Optional[str], typer.Option("--placeholder", help="Texto de ayuda")] = None,
    options: Annotated[Optional[str], typer.Option("--options", "-o", help="Opciones: 'Sí=si, No=no'")] = None,
):
    """
    Agrega un campo con la configuración inicial de su tipo.

    Ejemplo:
        formulario form add-field abc123 select -l "País" -o "Uruguay=uy, Chile=cl" -r
    """
    with editing(form_id) as builder:
        field_id = builder.add_field(field_type, position)

        updates = {}
        if label is not None:
            updates["label"] = label
        if required:
            updates["required"] = True
        if placeholder is not None:
            updates["placeholder"] = placeholder
        if options is not None:
            updates["options"] = parse_options(options)
        if updates:
            builder.update_field(field_id, updates)

    fld = builder.get_field(field_id)
    print_success(f"Campo agregado: {fld.label}")
    print_field("ID", fld.id)
    print_field("Tipo", get_type_label(fld.type))
    print_field("Posición", fld.order)


def form_update_field(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
    field_id: Annotated[str, typer.Argument(help="ID del campo")],
    label: Annotated[Optional[str], typer.Option("--label", "-l", help="Etiqueta")] = None,
    required: Annotated[Optional[bool], typer.Option("--required/--optional", help="Obligatoriedad")] = None,
    placeholder: Annotated[Optional[str], typer.Option("--placeholder", help="Texto de ayuda")] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d", help="Descripción")] = None,
    field_type: Annotated[Optional[str], typer.Option("--type", "-t", help="Nuevo tipo")] = None,
    options: Annotated[Optional[str], typer.Option("--options", "-o", help="Opciones: 'Sí=si, No=no'")] = None,
    min_length: Annotated[Optional[int], typer.Option("--min-length", help="Longitud mínima")] = None,
    max_length: Annotated[Optional[int], typer.Option("--max-length", help="Longitud máxima")] = None,
    min_value: Annotated[Optional[float], typer.Option("--min", help="Valor mínimo")] = None,
    max_value: Annotated[Optional[float], typer.Option("--max", help="Valor máximo")] = None,
    pattern: Annotated[Optional[str], typer.Option("--pattern", help="Expresión regular")] = None,
    message: Annotated[Optional[str], typer.Option("--message", "-m", help="Mensaje de error propio")] = None,
):
    """
    Modifica un campo existente.

    Las reglas de validación indicadas se mezclan con las que ya tenía.

    Ejemplo:
        formulario form update-field abc123 f1a2b3c4 --min 1 --max 120 --required
    """
    updates = {}
    for key, value in (
        ("label", label),
        ("required", required),
        ("placeholder", placeholder),
        ("description", description),
        ("type", field_type),
    ):
        if value is not None:
            updates[key] = value
    if options is not None:
        updates["options"] = parse_options(options)

    rules = {
        key: value
        for key, value in (
            ("min_length", min_length),
            ("max_length", max_length),
            ("min", min_value),
            ("max", max_value),
            ("pattern", pattern),
            ("custom_message", message),
        )
        if value is not None
    }

    if not updates and not rules:
        exit_with_error("No se indicó ningún cambio.")

    with editing(form_id) as builder:
        if rules:
            current = builder.get_field(field_id).validation
            merged = current.model_dump(exclude_none=True) if current is not None else {}
            merged.update(rules)
            updates["validation"] = merged
        fld = builder.update_field(field_id, updates)

    print_success(f"Campo actualizado: {fld.label}")


def form_remove_field(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
    field_id: Annotated[str, typer.Argument(help="ID del campo")],
):
    """Elimina un campo; el resto se re-numera."""
    with editing(form_id) as builder:
        builder.delete_field(field_id)

    print_success(f"Campo '{field_id}' eliminado.")


def form_move_field(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
    from_index: Annotated[int, typer.Argument(help="Posición actual")],
    to_index: Annotated[int, typer.Argument(help="Nueva posición")],
):
    """Mueve un campo a otra posición (posiciones desde 0)."""
    with editing(form_id) as builder:
        builder.reorder_fields(from_index, to_index)

    moved = builder.schema.sorted_fields()[to_index]
    print_success(f"Campo '{moved.label}' movido a la posición {to_index}.")


def form_duplicate_field(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
    field_id: Annotated[str, typer.Argument(help="ID del campo a duplicar")],
):
    """Duplica un campo a continuación del original."""
    with editing(form_id) as builder:
        copy_id = builder.duplicate_field(field_id)

    copy = builder.get_field(copy_id)
    print_success(f"Campo duplicado: {copy.label}")
    print_field("ID", copy.id)
