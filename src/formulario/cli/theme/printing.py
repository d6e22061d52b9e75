"""
Funciones que imprimen directamente a la consola.
"""

from typing import Any, Optional

from rich import box
from rich.panel import Panel
from rich.text import Text

from formulario.cli.theme.palette import get_console, get_palette
from formulario.cli.theme.styled import styled_header, styled_label, styled_problems, styled_status


def print_separator(width: int = 60) -> None:
    get_console().print("-" * width, style=get_palette().border)


def print_header(title: str, subtitle: Optional[str] = None) -> None:
    """Encabezado de sección o de formulario."""
    get_console().print(styled_header(title, subtitle))


def print_field(label: str, value: Any, indent: int = 2) -> None:
    """Imprime 'Etiqueta: valor' con sangría."""
    get_console().print(" " * indent, styled_label(label, value))


def print_success(text: str) -> None:
    get_console().print(styled_status("success", text))


def print_warning(text: str) -> None:
    get_console().print(styled_status("warning", text))


def print_error(text: str) -> None:
    get_console().print(styled_status("error", text))


def print_info(text: str) -> None:
    get_console().print(styled_status("info", text))


def print_subheader(title: str, width: int = 45) -> None:
    """Título de subsección subrayado."""
    console = get_console()
    p = get_palette()
    console.print(f"\n  {title}", style=f"bold {p.secondary}")
    console.print(f"  {'-' * width}", style=p.border)


def print_summary_box(title: str, items: list[tuple[str, Any]]) -> None:
    """
    Imprime un cuadro de resumen.

    Args:
        title: Título del cuadro
        items: Pares (etiqueta, valor)
    """
    p = get_palette()
    content = Text("\n").join(styled_label(label, value) for label, value in items)
    get_console().print(Panel(
        content,
        title=title,
        title_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 1),
    ))


def print_progress(percentage: int, width: int = 30) -> None:
    """Barra de avance del llenado (campos obligatorios completos)."""
    p = get_palette()
    done = int(percentage / 100 * width)
    bar = Text("  ")
    bar.append("█" * done, style=p.primary)
    bar.append("░" * (width - done), style=p.muted)
    bar.append(f"  {percentage}%", style=p.muted)
    get_console().print(bar)


def print_problems(problems: list[str], title: str = "PROBLEMAS") -> None:
    """Imprime los problemas de un esquema o de unas respuestas."""
    console = get_console()
    console.print(f"\n  {title}", style=f"bold {get_palette().error}")
    console.print(styled_problems(problems))
