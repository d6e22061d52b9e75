"""
CLI de Formulario - Constructor y llenado de formularios dinámicos.

Este módulo organiza los comandos CLI:
- form: Gestión de formularios, campos, exportación y respuestas
- types: Tipos de campo disponibles
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from formulario.cli.form import configure_store, form_app
from formulario.cli.theme import CLITheme, get_console, print_types_table
from formulario.config import AppConfig, ThemeName

# Crear aplicación principal
app = typer.Typer(
    name="formulario",
    help="Constructor de formularios dinámicos con validación y registro de respuestas.",
    no_args_is_help=True,
)

app.add_typer(form_app, name="form")


def setup_logging(verbose: bool) -> None:
    """Envía los logs del paquete a la consola Rich."""
    logger = logging.getLogger("formulario")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=get_console(), show_path=False, markup=False)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    data_dir: Annotated[Optional[Path], typer.Option("--data-dir", help="Directorio de datos (default: ~/.formulario)")] = None,
    theme: Annotated[ThemeName, typer.Option("--theme", help="Tema de colores")] = ThemeName.DEFAULT,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Mostrar logs de depuración")] = False,
):
    """
    Formulario - Formularios dinámicos desde la terminal.

    Los formularios y sus respuestas se guardan como JSON en el
    directorio de datos.
    """
    options = {"theme": theme, "verbose": verbose}
    if data_dir is not None:
        options["data_dir"] = data_dir
    config = AppConfig(**options)

    CLITheme.set_theme(config.theme)
    setup_logging(config.verbose)
    configure_store(config.data_dir)


@app.command()
def types():
    """Muestra los tipos de campo disponibles."""
    print_types_table()


__all__ = [
    "app",
    "setup_logging",
]
