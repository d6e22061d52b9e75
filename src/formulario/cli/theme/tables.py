"""
Funciones para crear e imprimir tablas Rich.
"""

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text
from rich import box

from formulario.cli.theme.palette import get_console, get_palette

if TYPE_CHECKING:
    from formulario.models import FormSchema
    from formulario.storage import Submission


def create_results_table(
    title: str = None,
    columns: list[tuple[str, str]] = None,  # [(nombre, justify), ...]
) -> Table:
    """Crea una tabla estilizada."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    if columns:
        for name, justify in columns:
            table.add_column(name, justify=justify)

    return table


def print_forms_table(forms: list[dict], title: str = "FORMULARIOS") -> None:
    """Imprime tabla de formularios guardados."""
    console = get_console()
    p = get_palette()

    if not forms:
        console.print("  No hay formularios.", style=p.muted)
        return

    table = create_results_table(title)
    table.add_column("ID", style=p.accent, justify="left")
    table.add_column("Título", justify="left")
    table.add_column("Campos", justify="right", style=p.number)
    table.add_column("Respuestas", justify="right", style=p.number)
    table.add_column("Actualizado", justify="left", style=p.muted)

    for form in forms:
        title_str = form["title"][:35] if len(form["title"]) > 35 else form["title"]
        table.add_row(
            form["id"],
            title_str,
            str(form.get("n_fields", 0)),
            str(form.get("n_submissions", 0)),
            form["updated_at"][:16].replace("T", " "),
        )

    console.print(table)


def print_fields_table(schema: "FormSchema", title: str = "CAMPOS") -> None:
    """Imprime los campos de un formulario en orden de presentación."""
    from formulario.core.registry import get_type_label

    console = get_console()
    p = get_palette()

    if not schema.fields:
        console.print("  El formulario no tiene campos.", style=p.muted)
        return

    table = create_results_table(title)
    table.add_column("#", justify="right", style=p.number)
    table.add_column("ID", style=p.accent)
    table.add_column("Tipo")
    table.add_column("Etiqueta")
    table.add_column("Oblig.", justify="center")
    table.add_column("Reglas", style=p.muted)

    for fld in schema.sorted_fields():
        rules = []
        if fld.validation is not None:
            data = fld.validation.to_json_dict()
            data.pop("required", None)
            rules = [f"{k}={v}" for k, v in data.items()]
        if fld.options:
            rules.append(f"opciones={len(fld.options)}")

        required = Text("si", style=p.success) if fld.is_required else Text("-", style=p.muted)
        table.add_row(
            str(fld.order),
            fld.id,
            get_type_label(fld.type),
            fld.label,
            required,
            ", ".join(rules) or "-",
        )

    console.print(table)


def print_types_table() -> None:
    """Imprime los tipos de campo disponibles."""
    from formulario.core.registry import FIELD_TYPE_REGISTRY

    console = get_console()
    p = get_palette()

    table = create_results_table("TIPOS DE CAMPO")
    table.add_column("Tipo", style=p.accent)
    table.add_column("Nombre")
    table.add_column("Etiqueta inicial", style=p.muted)

    for ftype, spec in FIELD_TYPE_REGISTRY.items():
        table.add_row(ftype.value, spec.type_label, spec.label)

    console.print(table)


def print_submissions_table(
    schema: "FormSchema",
    submissions: list["Submission"],
    title: str = "RESPUESTAS",
) -> None:
    """Imprime las respuestas de un formulario (una fila por envío)."""
    console = get_console()
    p = get_palette()

    if not submissions:
        console.print("  No hay respuestas.", style=p.muted)
        return

    fields = schema.sorted_fields()
    table = create_results_table(title)
    table.add_column("ID", style=p.accent)
    table.add_column("Enviado", style=p.muted)
    for fld in fields:
        table.add_column(fld.label[:20])

    for sub in submissions:
        row = [sub.id, sub.submitted_at[:16].replace("T", " ")]
        for fld in fields:
            value = sub.values.get(fld.id)
            row.append("-" if value is None or value == "" else str(value))
        table.add_row(*row)

    console.print(table)
