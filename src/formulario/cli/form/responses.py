"""
Consulta y exportación de respuestas a tabla, Excel o CSV.
"""

from collections import Counter
from pathlib import Path
from typing import Annotated, Optional

import pandas as pd
import typer

from formulario.cli.form.base import exit_with_error, get_form_store, load_form_or_exit
from formulario.cli.theme import print_info, print_submissions_table, print_success
from formulario.core.registry import get_type_label
from formulario.models import CHOICE_TYPES, FieldDefinition, FormSchema
from formulario.storage import Submission


def response_columns(fields: list[FieldDefinition]) -> dict[str, str]:
    """
    Encabezado de columna por ID de campo.

    Si dos campos comparten etiqueta, se agrega el ID entre paréntesis
    para que ninguna respuesta pise a otra.
    """
    counts = Counter(fld.label for fld in fields)
    return {
        fld.id: fld.label if counts[fld.label] == 1 else f"{fld.label} ({fld.id})"
        for fld in fields
    }


def responses_dataframe(schema: FormSchema, submissions: list[Submission]) -> pd.DataFrame:
    """
    Genera DataFrame con una fila por envío y una columna por campo.

    Las respuestas de select/radio se muestran con la etiqueta de la
    opción elegida.
    """
    fields = schema.sorted_fields()
    headers = response_columns(fields)
    rows = []
    for sub in submissions:
        row = {
            "ID": sub.id,
            "Enviado": sub.submitted_at[:19].replace("T", " "),
        }
        for fld in fields:
            value = sub.values.get(fld.id)
            if fld.type in CHOICE_TYPES and value not in (None, ""):
                value = fld.get_option_label(value) or value
            row[headers[fld.id]] = value
        rows.append(row)

    columns = ["ID", "Enviado"] + list(headers.values())
    return pd.DataFrame(rows, columns=columns)


def fields_dataframe(schema: FormSchema) -> pd.DataFrame:
    """Genera DataFrame con la definición de los campos."""
    rows = []
    for fld in schema.sorted_fields():
        rules = fld.validation
        rows.append({
            "Orden": fld.order,
            "ID": fld.id,
            "Tipo": get_type_label(fld.type),
            "Etiqueta": fld.label,
            "Obligatorio": "Sí" if fld.is_required else "No",
            "Mín. caracteres": rules.min_length if rules else None,
            "Máx. caracteres": rules.max_length if rules else None,
            "Mínimo": rules.min if rules else None,
            "Máximo": rules.max if rules else None,
            "Opciones": ", ".join(o.label for o in fld.options) if fld.options else None,
        })
    return pd.DataFrame(rows)


def _export_to_excel(schema: FormSchema, submissions: list[Submission], output_path: Path) -> None:
    """Exporta respuestas a Excel con hoja de campos."""
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        responses_dataframe(schema, submissions).to_excel(writer, sheet_name="Respuestas", index=False)
        fields_dataframe(schema).to_excel(writer, sheet_name="Campos", index=False)


def _export_to_csv(schema: FormSchema, submissions: list[Submission], output_path: Path) -> None:
    """Exporta respuestas a CSV (sólo la tabla de respuestas)."""
    responses_dataframe(schema, submissions).to_csv(output_path, index=False)


def form_responses(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Archivo de salida")] = None,
    format: Annotated[str, typer.Option("--format", "-f", help="Formato: table, xlsx, csv")] = "table",
):
    """
    Muestra o exporta las respuestas de un formulario.

    Ejemplo:
        formulario form responses abc123 -f xlsx -o respuestas
    """
    store = get_form_store()
    schema = load_form_or_exit(form_id)
    submissions = store.list_submissions(schema.id)

    if format == "table":
        print_submissions_table(schema, submissions, title=f"RESPUESTAS - {schema.title}")
        return

    if format not in ("xlsx", "csv"):
        exit_with_error(f"Formato '{format}' no soportado. Use 'table', 'xlsx' o 'csv'.")

    if not submissions:
        print_info("El formulario no tiene respuestas para exportar.")
        raise typer.Exit(1)

    if output is None:
        output = f"{schema.title.lower().replace(' ', '_')}_respuestas"
    if not output.endswith(f".{format}"):
        output = f"{output}.{format}"

    output_path = Path(output)
    if format == "xlsx":
        _export_to_excel(schema, submissions, output_path)
    else:
        _export_to_csv(schema, submissions, output_path)

    print_success(f"Exportado: {output_path.absolute()}")
