"""
Paletas de colores y consola Rich del tema activo.
"""

from dataclasses import asdict, dataclass
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from formulario.config import ThemeName


@dataclass(frozen=True)
class ColorPalette:
    """Colores de un tema."""
    primary: str      # Títulos de formulario
    secondary: str    # Subtítulos y encabezados de tabla
    accent: str       # IDs de formularios y campos

    success: str
    warning: str
    error: str        # Errores de validación y problemas
    info: str
    muted: str        # Descripciones, fechas, reglas

    number: str       # Valores resaltados
    label: str        # Etiquetas 'Etiqueta: valor'
    border: str


THEMES: dict[ThemeName, ColorPalette] = {
    # Pasteles
    ThemeName.DEFAULT: ColorPalette(
        primary="#5f87af",
        secondary="#87afaf",
        accent="#af87af",
        success="#87af87",
        warning="#d7af5f",
        error="#d75f5f",
        info="#5f87af",
        muted="#808080",
        number="#d7af5f",
        label="#afafaf",
        border="#5f5f5f",
    ),
    # Nord, colores fríos
    ThemeName.NORD: ColorPalette(
        primary="#88c0d0",
        secondary="#81a1c1",
        accent="#b48ead",
        success="#a3be8c",
        warning="#ebcb8b",
        error="#bf616a",
        info="#5e81ac",
        muted="#4c566a",
        number="#d08770",
        label="#d8dee9",
        border="#3b4252",
    ),
    # Grises con un único acento
    ThemeName.MINIMAL: ColorPalette(
        primary="#ffffff",
        secondary="#b0b0b0",
        accent="#5fafff",
        success="#87d787",
        warning="#ffd787",
        error="#ff8787",
        info="#5fafff",
        muted="#606060",
        number="#ffffff",
        label="#909090",
        border="#404040",
    ),
}


class CLITheme:
    """Tema activo de la CLI (se elige con --theme)."""

    _palette: ColorPalette = THEMES[ThemeName.DEFAULT]
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        cls._palette = THEMES[ThemeName(theme)]
        cls._console = None  # Se recrea con el nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Consola Rich con los colores del tema como estilos con nombre."""
        if cls._console is None:
            cls._console = Console(theme=Theme(asdict(cls._palette)))
        return cls._console


def get_console() -> Console:
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Paleta del tema activo."""
    return CLITheme.get_palette()
