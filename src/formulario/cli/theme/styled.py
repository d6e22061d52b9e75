"""
Objetos Rich estilizados (no imprimen directamente).
"""

from typing import Any, Optional

from rich import box
from rich.panel import Panel
from rich.text import Text

from formulario.cli.theme.palette import get_palette


# Marca y color (atributo de la paleta) de cada tipo de mensaje
STATUS_MARKS = {
    "success": ("[+]", "success"),
    "warning": ("[!]", "warning"),
    "error": ("[x]", "error"),
    "info": ("[i]", "info"),
}


def styled_status(kind: str, text: str) -> Text:
    """Mensaje de estado con su marca: success, warning, error o info."""
    mark, color = STATUS_MARKS[kind]
    return Text(f"{mark} {text}", style=getattr(get_palette(), color))


def styled_header(title: str, subtitle: Optional[str] = None) -> Panel:
    """Panel con el título de un formulario y su descripción."""
    p = get_palette()
    content = Text(title, style=f"bold {p.primary}")
    if subtitle:
        content.append("\n")
        content.append(subtitle, style=p.muted)
    return Panel(content, border_style=p.border, box=box.ROUNDED, padding=(0, 2))


def styled_label(label: str, value: Any) -> Text:
    """'Etiqueta: valor' con el valor resaltado."""
    p = get_palette()
    text = Text(f"{label}: ", style=p.label)
    text.append("-" if value is None or value == "" else str(value), style=f"bold {p.number}")
    return text


def styled_problems(problems: list[str]) -> Text:
    """Lista de problemas, uno por línea."""
    p = get_palette()
    return Text("\n").join(Text(f"    - {problem}", style=p.error) for problem in problems)
