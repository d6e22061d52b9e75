"""
Llenado interactivo de un formulario.

Pregunta campo por campo con questionary, valida cada respuesta al salir
del campo (como lo haría un formulario web) y envía el resultado al
almacén a través de FormPreview.
"""

import asyncio
from typing import Annotated, Any

import questionary
import typer
from questionary import Style

from formulario.cli.form.base import exit_with_error, get_form_store, load_form_or_exit
from formulario.cli.theme import (
    get_palette,
    print_error,
    print_header,
    print_problems,
    print_progress,
    print_success,
    print_warning,
)
from formulario.config import DEFAULT_SUBMIT_TEXT, FORM_ERROR_KEY, SUBMISSION_REJECTED_MESSAGE
from formulario.core.preview import FormPreview
from formulario.core.utils import generate_sample_data
from formulario.errors import FormularioError
from formulario.models import CHOICE_TYPES, FieldDefinition, FieldType


NO_ANSWER = "(sin respuesta)"


def get_fill_style() -> Style:
    """Estilo de questionary basado en el tema actual."""
    p = get_palette()
    return Style([
        ("qmark", f"fg:{p.accent} bold"),
        ("question", "bold"),
        ("answer", f"fg:{p.success} bold"),
        ("pointer", f"fg:{p.accent} bold"),
        ("highlighted", f"fg:{p.primary} bold"),
        ("instruction", f"fg:{p.muted} italic"),
        ("text", ""),
    ])


def parse_number(text: str) -> Any:
    """Texto a número; se deja como texto si no es numérico."""
    text = text.strip()
    if text == "":
        return ""
    try:
        value = float(text.replace(",", "."))
    except ValueError:
        return text
    return int(value) if value.is_integer() else value


def ask_field(fld: FieldDefinition, current: Any) -> Any:
    """
    Pregunta el valor de un campo.

    Returns:
        Valor ingresado, o None si el usuario canceló (Ctrl+C)
    """
    style = get_fill_style()
    message = f"{fld.label}{' *' if fld.is_required else ''}"
    instruction = fld.description or fld.placeholder

    if fld.type == FieldType.CHECKBOX:
        return questionary.confirm(message, default=bool(current), style=style).ask()

    if fld.type in CHOICE_TYPES:
        choices = [questionary.Choice(title=opt.label, value=opt.value) for opt in fld.options or []]
        if not fld.is_required:
            choices.append(questionary.Choice(title=NO_ANSWER, value=""))
        return questionary.select(message, choices=choices, instruction=instruction, style=style).ask()

    default = "" if current is None else str(current)
    answer = questionary.text(
        message,
        default=default,
        instruction=instruction,
        multiline=fld.type == FieldType.TEXTAREA,
        style=style,
    ).ask()

    if answer is None or fld.type != FieldType.NUMBER:
        return answer
    return parse_number(answer)


def _fill_interactive(preview: FormPreview) -> None:
    settings = preview.schema.settings
    for fld in preview.schema.sorted_fields():
        while True:
            value = ask_field(fld, preview.get_field_value(fld.id))
            if value is None:
                print_warning("Llenado cancelado.")
                raise typer.Exit(1)

            preview.set_value(fld.id, value)
            result = preview.blur_field(fld.id)
            if result.is_valid:
                break
            print_error(f"{fld.label}: {result.error}")

        if settings is not None and settings.show_progress_bar:
            print_progress(preview.completion_percentage())


def _fill_sample(preview: FormPreview) -> None:
    for field_id, value in generate_sample_data(preview.schema).items():
        preview.set_value(field_id, value)
        preview.touch_field(field_id)


def form_fill(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
    sample: Annotated[bool, typer.Option("--sample", help="Responder con datos de ejemplo (sin preguntas)")] = False,
):
    """
    Responde un formulario y registra el envío.

    Ejemplo:
        formulario form fill abc123
    """
    store = get_form_store()
    schema = load_form_or_exit(form_id)

    try:
        preview = FormPreview(schema)
    except FormularioError as e:
        exit_with_error(str(e))

    if not schema.fields:
        exit_with_error("El formulario no tiene campos.")

    print_header(schema.title, schema.description or None)

    if sample:
        _fill_sample(preview)
    else:
        _fill_interactive(preview)

    result = asyncio.run(preview.submit_form(store.make_submit_handler(schema)))

    if result is None:
        print_problems([
            f"{schema.get_field(fid).label if schema.get_field(fid) else fid}: {msg}"
            for fid, msg in preview.state.errors.items()
        ], "RESPUESTAS INVÁLIDAS")
        raise typer.Exit(1)

    if not result.success:
        form_error = preview.get_field_error(FORM_ERROR_KEY)
        exit_with_error(form_error or result.message or SUBMISSION_REJECTED_MESSAGE)

    submit_text = schema.settings.submit_button_text if schema.settings else DEFAULT_SUBMIT_TEXT
    print_success(f"{submit_text}: {result.message or 'Respuesta registrada'}")
