"""
Exportación, importación y chequeo de esquemas; formulario de muestra.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from formulario.cli.form.base import exit_with_error, get_form_store, load_form_or_exit
from formulario.cli.theme import print_field, print_info, print_problems, print_success
from formulario.core.serialization import default_export_filename, dump_schema_json, load_schema_json
from formulario.core.utils import check_schema, create_sample_schema
from formulario.errors import InvalidSchemaExport
from formulario.models import generate_id


def form_export(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Archivo de salida")] = None,
):
    """
    Exporta el esquema a un archivo JSON portable.

    Ejemplo:
        formulario form export abc123 -o encuesta.json
    """
    schema = load_form_or_exit(form_id)

    if output is None:
        output = Path(default_export_filename(schema.title))

    path = dump_schema_json(schema, output)
    print_success(f"Exportado: {path.absolute()}")


def form_import(
    path: Annotated[Path, typer.Argument(help="Archivo JSON exportado")],
    new_id: Annotated[bool, typer.Option("--new-id", help="Importar como copia con ID nuevo")] = False,
    replace: Annotated[bool, typer.Option("--replace", help="Reemplazar si ya existe")] = False,
):
    """Importa un esquema exportado y lo guarda."""
    store = get_form_store()

    try:
        schema = load_schema_json(path)
    except FileNotFoundError as e:
        exit_with_error(str(e))
    except InvalidSchemaExport as e:
        print_problems(e.problems, "EXPORTACIÓN INVÁLIDA")
        raise typer.Exit(1)

    if new_id:
        schema.id = generate_id()
    elif store.get_form(schema.id) is not None and not replace:
        exit_with_error(f"Ya existe un formulario con ID '{schema.id}'. Usa --replace o --new-id.")

    store.save(schema)
    print_success(f"Formulario importado: {schema.title}")
    print_field("ID", schema.id)
    print_field("Campos", schema.n_fields)


def form_check(
    form_id: Annotated[Optional[str], typer.Argument(help="ID del formulario")] = None,
    file: Annotated[Optional[Path], typer.Option("--file", help="Chequear un archivo exportado")] = None,
    strict: Annotated[bool, typer.Option("--strict", help="Reportar también formularios sin campos")] = False,
):
    """Chequea la consistencia de un formulario guardado o de un archivo."""
    if file is not None:
        try:
            schema = load_schema_json(file)
        except FileNotFoundError as e:
            exit_with_error(str(e))
        except InvalidSchemaExport as e:
            print_problems(e.problems)
            raise typer.Exit(1)
    elif form_id is not None:
        schema = load_form_or_exit(form_id)
    else:
        exit_with_error("Indica un ID de formulario o --file.")

    problems = check_schema(schema, strict=strict)
    if problems:
        print_problems(problems)
        raise typer.Exit(1)

    print_success(f"Esquema consistente: {schema.title} ({schema.n_fields} campos)")


def form_sample():
    """Crea el formulario de contacto de muestra."""
    store = get_form_store()
    schema = create_sample_schema()
    store.save(schema)

    print_success(f"Formulario de muestra creado: {schema.title}")
    print_field("ID", schema.id)
    print_info(f"Usa 'form fill {schema.id}' para responderlo")
