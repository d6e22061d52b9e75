"""
Comandos básicos de formulario: create, list, show, delete, info.
"""

from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from formulario.cli.theme import (
    print_error,
    print_field,
    print_fields_table,
    print_forms_table,
    print_header,
    print_separator,
    print_subheader,
    print_success,
    print_summary_box,
)
from formulario.core.serialization import default_export_filename
from formulario.core.utils import check_schema
from formulario.models import FormSchema
from formulario.storage import FormStore

# Instancia global del almacén de formularios
_form_store: Optional[FormStore] = None


def configure_store(data_dir: Optional[Path] = None) -> FormStore:
    """Crea el almacén en el directorio indicado y lo deja activo."""
    global _form_store
    _form_store = FormStore(data_dir)
    return _form_store


def get_form_store() -> FormStore:
    """Obtiene o crea el almacén de formularios."""
    global _form_store
    if _form_store is None:
        _form_store = FormStore()
    return _form_store


def exit_with_error(message: str) -> NoReturn:
    """Imprime el error y termina con código 1."""
    print_error(message)
    raise typer.Exit(1)


def load_form_or_exit(form_id: str) -> FormSchema:
    """Carga un formulario por ID (parcial o completo) o termina con error."""
    schema = get_form_store().get_form(form_id)
    if schema is None:
        exit_with_error(f"Formulario '{form_id}' no encontrado.")
    return schema


def form_create(
    title: Annotated[str, typer.Argument(help="Título del formulario")],
    description: Annotated[Optional[str], typer.Option("--description", "-d", help="Descripción")] = None,
):
    """
    Crea un formulario vacío.

    Ejemplo:
        formulario form create "Encuesta de satisfacción" -d "Curso 2024"
    """
    store = get_form_store()
    schema = store.create(title, description)

    print_header("FORMULARIO CREADO")
    print_field("ID", schema.id)
    print_field("Título", schema.title)
    if schema.description:
        print_field("Descripción", schema.description)
    print_separator()
    typer.echo(f"\n  Usa 'form add-field {schema.id} <tipo>' para agregar campos")
    typer.echo("  Usa 'types' para ver los tipos disponibles\n")


def form_list():
    """Lista todos los formularios guardados."""
    forms = get_form_store().list_forms()

    if not forms:
        typer.echo("\nNo hay formularios guardados.")
        typer.echo("Usa 'form create' o 'form sample' para crear uno.\n")
        return

    print_forms_table(forms)


def form_show(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
):
    """Muestra el detalle de un formulario y sus campos."""
    schema = load_form_or_exit(form_id)

    print_header(f"FORMULARIO: {schema.title}", schema.description or None)
    print_field("ID", schema.id)
    print_field("Creado", schema.created_at[:19].replace("T", " "))
    print_field("Actualizado", schema.updated_at[:19].replace("T", " "))

    if schema.settings is not None:
        settings = schema.settings
        print_subheader("AJUSTES")
        print_field("Envíos múltiples", "si" if settings.allow_multiple_submissions else "no")
        print_field("Requiere login", "si" if settings.require_login else "no")
        print_field("Barra de progreso", "si" if settings.show_progress_bar else "no")
        print_field("Botón de envío", settings.submit_button_text)

    typer.echo("")
    print_fields_table(schema)


def form_delete(
    form_id: Annotated[str, typer.Argument(help="ID del formulario a eliminar")],
    force: Annotated[bool, typer.Option("--force", "-f", help="No pedir confirmación")] = False,
):
    """Elimina un formulario y sus respuestas."""
    store = get_form_store()

    if not force:
        confirm = typer.confirm(f"¿Eliminar formulario '{form_id}' y sus respuestas?")
        if not confirm:
            typer.echo("Cancelado.")
            raise typer.Exit(0)

    if store.delete(form_id):
        print_success(f"Formulario '{form_id}' eliminado.")
    else:
        exit_with_error(f"Formulario '{form_id}' no encontrado.")


def form_info(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
):
    """Resumen de un formulario: campos, respuestas y consistencia."""
    store = get_form_store()
    schema = load_form_or_exit(form_id)

    n_required = sum(1 for f in schema.fields if f.is_required)
    n_submissions = len(store.list_submissions(schema.id))
    problems = check_schema(schema)

    print_summary_box(schema.title, [
        ("ID", schema.id),
        ("Campos", schema.n_fields),
        ("Obligatorios", n_required),
        ("Respuestas", n_submissions),
        ("Problemas", len(problems)),
        ("Exportación", default_export_filename(schema.title)),
    ])
