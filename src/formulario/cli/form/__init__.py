"""
Comandos CLI para gestión de formularios.

Un formulario se edita campo por campo con FormBuilder, se exporta e
importa como JSON y se responde con FormPreview.
"""

import typer

from formulario.cli.form.base import (
    configure_store,
    get_form_store,
    form_create,
    form_list,
    form_show,
    form_delete,
    form_info,
)
from formulario.cli.form.fields import (
    form_add_field,
    form_update_field,
    form_remove_field,
    form_move_field,
    form_duplicate_field,
)
from formulario.cli.form.transfer import (
    form_export,
    form_import,
    form_check,
    form_sample,
)
from formulario.cli.form.fill import form_fill
from formulario.cli.form.responses import form_responses

# Crear sub-aplicación
form_app = typer.Typer(help="Gestión de formularios", no_args_is_help=True)

# Comandos de formulario
form_app.command("create")(form_create)
form_app.command("list")(form_list)
form_app.command("show")(form_show)
form_app.command("delete")(form_delete)
form_app.command("info")(form_info)

# Comandos de campos
form_app.command("add-field")(form_add_field)
form_app.command("update-field")(form_update_field)
form_app.command("remove-field")(form_remove_field)
form_app.command("move-field")(form_move_field)
form_app.command("duplicate-field")(form_duplicate_field)

# Exportación e importación
form_app.command("export")(form_export)
form_app.command("import")(form_import)
form_app.command("check")(form_check)
form_app.command("sample")(form_sample)

# Llenado y respuestas
form_app.command("fill")(form_fill)
form_app.command("responses")(form_responses)

__all__ = ["form_app", "configure_store", "get_form_store"]
