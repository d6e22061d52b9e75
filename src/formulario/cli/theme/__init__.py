"""
Sistema de temas para la interfaz CLI de Formulario.

- palette: paletas de colores y consola Rich del tema activo
- styled: objetos Text/Panel estilizados
- printing: funciones que imprimen a la consola
- tables: tablas de formularios, campos, tipos y respuestas
"""

from formulario.cli.theme.palette import (
    ColorPalette,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from formulario.cli.theme.styled import (
    STATUS_MARKS,
    styled_header,
    styled_label,
    styled_problems,
    styled_status,
)

from formulario.cli.theme.printing import (
    print_separator,
    print_header,
    print_field,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_subheader,
    print_summary_box,
    print_progress,
    print_problems,
)

from formulario.cli.theme.tables import (
    create_results_table,
    print_forms_table,
    print_fields_table,
    print_types_table,
    print_submissions_table,
)

__all__ = [
    # palette
    "ColorPalette",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # styled
    "STATUS_MARKS",
    "styled_header",
    "styled_label",
    "styled_problems",
    "styled_status",
    # printing
    "print_separator",
    "print_header",
    "print_field",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_subheader",
    "print_summary_box",
    "print_progress",
    "print_problems",
    # tables
    "create_results_table",
    "print_forms_table",
    "print_fields_table",
    "print_types_table",
    "print_submissions_table",
]
