"""Constantes y modelos Pydantic de configuración."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


# ============================================================================
# Versionado del formato de exportación
# ============================================================================

SCHEMA_VERSION = "1.0.0"

# Versiones que import_form_schema acepta
SUPPORTED_SCHEMA_VERSIONS = frozenset({SCHEMA_VERSION})


# ============================================================================
# Valores por defecto de formularios
# ============================================================================

DEFAULT_FORM_TITLE = "Formulario sin título"
DEFAULT_SUBMIT_TEXT = "Enviar"

# Clave de errores a nivel de formulario (no asociados a un campo)
FORM_ERROR_KEY = "_form"

SUBMISSION_FAILED_MESSAGE = "El envío falló. Inténtalo de nuevo."
SUBMISSION_REJECTED_MESSAGE = "El envío fue rechazado."


# ============================================================================
# Configuración de la aplicación
# ============================================================================

class ThemeName(str, Enum):
    """Temas disponibles para la CLI."""
    DEFAULT = "default"
    NORD = "nord"
    MINIMAL = "minimal"


def default_data_dir() -> Path:
    """Directorio de datos por defecto (~/.formulario)."""
    return Path.home() / ".formulario"


class AppConfig(BaseModel):
    """Configuración de la aplicación de línea de comandos."""
    data_dir: Path = Field(default_factory=default_data_dir)
    theme: ThemeName = ThemeName.DEFAULT
    verbose: bool = False

    @property
    def forms_dir(self) -> Path:
        return self.data_dir / "forms"

    @property
    def submissions_dir(self) -> Path:
        return self.data_dir / "submissions"
