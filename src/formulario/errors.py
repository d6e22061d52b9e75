"""
Errores del motor de formularios.

Todos son fallas locales y deterministas: se lanzan en la operación que
las detecta y dejan el estado en el último valor válido.
"""

from typing import Iterable


class FormularioError(Exception):
    """Error base de formulario."""


class UnsupportedFieldType(FormularioError, ValueError):
    """Tipo de campo fuera del registro."""

    def __init__(self, field_type):
        self.field_type = field_type
        super().__init__(f"Tipo de campo no soportado: {field_type!r}")


class FieldNotFound(FormularioError, LookupError):
    """El campo no existe en el esquema."""

    def __init__(self, field_id: str):
        self.field_id = field_id
        super().__init__(f"Campo no encontrado: {field_id}")


class IndexOutOfRange(FormularioError, IndexError):
    """Posición fuera del rango de campos."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Índice fuera de rango: {index} (campos: {size})")


class InvalidValidationRule(FormularioError, ValueError):
    """Regla de validación mal configurada (ej: regex inválida)."""

    def __init__(self, field_id: str, reason: str):
        self.field_id = field_id
        self.reason = reason
        super().__init__(f"Regla inválida en campo '{field_id}': {reason}")


class InvalidSchemaExport(FormularioError, ValueError):
    """Exportación de esquema rechazada al importar."""

    def __init__(self, problems: Iterable[str]):
        self.problems = list(problems)
        detail = "; ".join(self.problems) if self.problems else "formato desconocido"
        super().__init__(f"Exportación de esquema inválida: {detail}")
