"""
Exportación e importación de esquemas de formulario.

Formato de exportación (JSON):

    {
        "version": "1.0.0",
        "schema": {... esquema sin createdAt/updatedAt ...},
        "exportedAt": "2024-05-01T10:00:00"
    }

Importar una exportación reconstruye un esquema equivalente (mismos
campos, orden y reglas); sólo los timestamps se regeneran.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import ValidationError

from formulario.config import SCHEMA_VERSION, SUPPORTED_SCHEMA_VERSIONS
from formulario.core.utils import check_schema
from formulario.errors import InvalidSchemaExport
from formulario.models import FormSchema, SchemaExport, generate_timestamp


logger = logging.getLogger(__name__)


def export_form_schema(schema: FormSchema) -> SchemaExport:
    """
    Exporta un esquema a su formato portable.

    La exportación es una copia profunda: cambios posteriores al esquema
    no la afectan.
    """
    return SchemaExport(version=SCHEMA_VERSION, form=schema.definition())


def _format_errors(exc: ValidationError) -> list[str]:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return problems


def import_form_schema(data: Union[SchemaExport, Mapping[str, Any]]) -> FormSchema:
    """
    Valida una exportación y reconstruye el esquema.

    Args:
        data: SchemaExport o dict con el mismo formato (JSON parseado)

    Returns:
        FormSchema con campos ordenados por order y timestamps nuevos

    Raises:
        InvalidSchemaExport: Si la versión no es soportada o el esquema
            no es consistente (IDs repetidos, order con huecos, etc.)
    """
    if isinstance(data, SchemaExport):
        exported = data
    elif isinstance(data, Mapping):
        try:
            exported = SchemaExport.model_validate(data)
        except ValidationError as e:
            logger.info("Exportación rechazada: %s", e)
            raise InvalidSchemaExport(_format_errors(e)) from e
    else:
        raise InvalidSchemaExport([f"se esperaba un objeto, no {type(data).__name__}"])

    if exported.version not in SUPPORTED_SCHEMA_VERSIONS:
        logger.info("Versión de exportación no soportada: %s", exported.version)
        raise InvalidSchemaExport([f"versión no soportada: {exported.version}"])

    problems = check_schema(exported.form)
    if problems:
        logger.info("Esquema importado inconsistente: %s", problems)
        raise InvalidSchemaExport(problems)

    content = exported.form.model_dump()
    content["fields"] = sorted(content["fields"], key=lambda f: f["order"])
    now = generate_timestamp()
    return FormSchema.model_validate({**content, "created_at": now, "updated_at": now})


# ============================================================================
# Archivos JSON
# ============================================================================

def default_export_filename(title: str) -> str:
    """Nombre de archivo para exportar un formulario (ej: contacto-schema.json)."""
    slug = re.sub(r"[^a-z0-9]", "-", title, flags=re.IGNORECASE).lower()
    return f"{slug}-schema.json"


def dump_schema_json(schema: FormSchema, path: Path) -> Path:
    """Guarda la exportación del esquema como JSON."""
    path = Path(path)
    exported = export_form_schema(schema)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(exported.to_json_dict(), f, indent=2, ensure_ascii=False)
    return path


def load_schema_json(path: Path) -> FormSchema:
    """
    Carga un esquema desde un archivo de exportación JSON.

    Raises:
        FileNotFoundError: Si el archivo no existe
        InvalidSchemaExport: Si el contenido no es JSON o no es válido
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Archivo no encontrado: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidSchemaExport([f"JSON inválido: {e}"]) from e

    return import_form_schema(data)
