"""
Almacenamiento de formularios y respuestas en archivos JSON.

Estructura del directorio de datos:

    <data_dir>/forms/<id>.json         esquema del formulario
    <data_dir>/submissions/<id>.json   lista de envíos del formulario

FormStore es la aplicación de referencia que embebe el motor: provee el
callback on_submit que FormPreview usa para persistir un envío.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import Field

from formulario.config import FORM_ERROR_KEY, default_data_dir
from formulario.core.builder import create_empty_schema
from formulario.core.preview import build_submission_payload
from formulario.models import CamelModel, FormSchema, SubmissionResult, generate_id


logger = logging.getLogger(__name__)


DUPLICATE_SUBMISSION_MESSAGE = "Este formulario ya fue respondido."


class Submission(CamelModel):
    """Un envío registrado de un formulario."""
    id: str = Field(default_factory=generate_id)
    form_id: str
    form_title: str
    submitted_at: str
    values: dict[str, Any] = Field(default_factory=dict)


class FormStore:
    """Gestiona formularios y sus respuestas en disco."""

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Inicializa el almacén.

        Args:
            data_dir: Directorio de datos. Default: ~/.formulario/
        """
        if data_dir is None:
            data_dir = default_data_dir()

        self.data_dir = Path(data_dir)
        self.forms_dir = self.data_dir / "forms"
        self.submissions_dir = self.data_dir / "submissions"
        self.forms_dir.mkdir(parents=True, exist_ok=True)
        self.submissions_dir.mkdir(parents=True, exist_ok=True)

    def _form_path(self, form_id: str) -> Path:
        return self.forms_dir / f"{form_id}.json"

    def _submissions_path(self, form_id: str) -> Path:
        return self.submissions_dir / f"{form_id}.json"

    # ------------------------------------------------------------------
    # Formularios
    # ------------------------------------------------------------------

    def create(self, title: str, description: Optional[str] = None) -> FormSchema:
        """Crea y guarda un formulario vacío."""
        schema = create_empty_schema()
        schema.title = title
        if description is not None:
            schema.description = description
        self.save(schema)
        return schema

    def save(self, schema: FormSchema) -> Path:
        """Guarda un formulario a disco."""
        path = self._form_path(schema.id)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(schema.to_json_dict(), f, indent=2, ensure_ascii=False)
        logger.debug("Formulario %s guardado en %s", schema.id, path)
        return path

    def load(self, form_id: str) -> FormSchema:
        """
        Carga un formulario por ID exacto.

        Raises:
            FileNotFoundError: Si el formulario no existe
        """
        path = self._form_path(form_id)
        if not path.exists():
            raise FileNotFoundError(f"Formulario no encontrado: {form_id}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return FormSchema.model_validate(data)

    def get_form(self, form_id: str) -> Optional[FormSchema]:
        """
        Obtiene un formulario por ID (parcial o completo).

        Returns:
            FormSchema o None si no existe
        """
        if self._form_path(form_id).exists():
            return self.load(form_id)

        for path in sorted(self.forms_dir.glob("*.json")):
            if path.stem.startswith(form_id):
                return self.load(path.stem)

        return None

    def list_forms(self) -> list[dict]:
        """Lista los formularios guardados (más recientes primero)."""
        forms = []
        for path in self.forms_dir.glob("*.json"):
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            forms.append({
                "id": data["id"],
                "title": data["title"],
                "created_at": data["createdAt"],
                "updated_at": data["updatedAt"],
                "n_fields": len(data.get("fields", [])),
                "n_submissions": len(self.list_submissions(data["id"])),
            })
        return sorted(forms, key=lambda x: x["updated_at"], reverse=True)

    def delete(self, form_id: str) -> bool:
        """Elimina un formulario y sus respuestas."""
        path = self._form_path(form_id)
        if not path.exists():
            return False
        path.unlink()

        submissions = self._submissions_path(form_id)
        if submissions.exists():
            submissions.unlink()
        return True

    # ------------------------------------------------------------------
    # Respuestas
    # ------------------------------------------------------------------

    def list_submissions(self, form_id: str) -> list[Submission]:
        """Envíos registrados de un formulario, en orden de llegada."""
        path = self._submissions_path(form_id)
        if not path.exists():
            return []

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return [Submission.model_validate(item) for item in data]

    def add_submission(self, schema: FormSchema, values: dict[str, Any]) -> Submission:
        """Registra un envío con los valores transformados."""
        submission = Submission(**build_submission_payload(schema, values))
        submissions = self.list_submissions(schema.id)
        submissions.append(submission)

        with open(self._submissions_path(schema.id), "w", encoding="utf-8") as f:
            json.dump([s.to_json_dict() for s in submissions], f, indent=2, ensure_ascii=False)

        logger.debug("Envío %s registrado para %s", submission.id, schema.id)
        return submission

    def make_submit_handler(
        self,
        schema: FormSchema,
    ) -> Callable[[dict[str, Any]], SubmissionResult]:
        """
        Crea el callback on_submit de FormPreview para este formulario.

        Si el formulario no admite envíos múltiples y ya tiene uno, el
        callback rechaza el envío con un error a nivel de formulario.
        """
        settings = schema.settings

        def on_submit(values: dict[str, Any]) -> SubmissionResult:
            if settings is not None and not settings.allow_multiple_submissions:
                if self.list_submissions(schema.id):
                    return SubmissionResult(
                        success=False,
                        errors={FORM_ERROR_KEY: DUPLICATE_SUBMISSION_MESSAGE},
                        message=DUPLICATE_SUBMISSION_MESSAGE,
                    )

            submission = self.add_submission(schema, values)
            return SubmissionResult(
                success=True,
                data={"submission_id": submission.id, **submission.values},
                message="Respuesta registrada",
            )

        return on_submit
