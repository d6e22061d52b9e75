"""
Vista previa y envío de formularios.

FormPreview conduce el llenado de un formulario: valores por campo,
errores por campo, campos tocados, validación al salir de un campo y el
flujo de envío (validar y luego llamar al callback de la aplicación).

Fases: idle -> editing -> submitting -> resolved | rejected. reset_form
vuelve a idle.

El esquema se recibe por referencia y nunca se modifica. El único punto
de contacto con la persistencia es el callback on_submit.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from formulario.config import (
    FORM_ERROR_KEY,
    SUBMISSION_FAILED_MESSAGE,
    SUBMISSION_REJECTED_MESSAGE,
)
from formulario.core.validator import FieldValidationResult, FormValidator, generate_validator
from formulario.models import (
    FieldType,
    FormSchema,
    PreviewPhase,
    PreviewState,
    SubmissionResult,
    generate_timestamp,
)


logger = logging.getLogger(__name__)


SubmitReturn = Union[SubmissionResult, Mapping[str, Any]]
SubmitHandler = Callable[[dict[str, Any]], Union[SubmitReturn, Awaitable[SubmitReturn]]]


def _is_filled(value: Any) -> bool:
    return value is not None and value != ""


def initial_values(schema: FormSchema) -> dict[str, Any]:
    """Valores iniciales: defaultValue, o False para casillas y "" para el resto."""
    values: dict[str, Any] = {}
    for fld in schema.fields:
        if fld.default_value is not None:
            values[fld.id] = fld.default_value
        elif fld.type == FieldType.CHECKBOX:
            values[fld.id] = False
        else:
            values[fld.id] = ""
    return values


def transform_values(schema: FormSchema, values: Mapping[str, Any]) -> dict[str, Any]:
    """
    Valores listos para enviar.

    Los números escritos como texto se convierten (0 si no son
    numéricos) y las casillas se fuerzan a booleano.
    """
    transformed: dict[str, Any] = {}
    for fld in schema.fields:
        value = values.get(fld.id)
        if fld.type == FieldType.NUMBER and isinstance(value, str):
            try:
                transformed[fld.id] = float(value)
            except ValueError:
                transformed[fld.id] = 0
        elif fld.type == FieldType.CHECKBOX:
            transformed[fld.id] = bool(value)
        else:
            transformed[fld.id] = value
    return transformed


def build_submission_payload(schema: FormSchema, values: Mapping[str, Any]) -> dict:
    """Datos de envío: formulario, fecha y valores transformados."""
    return {
        "form_id": schema.id,
        "form_title": schema.title,
        "submitted_at": generate_timestamp(),
        "values": transform_values(schema, values),
    }


class FormPreview:
    """
    Llenado de un formulario a partir de su esquema.

    Args:
        schema: Esquema a llenar (no se modifica)

    Raises:
        InvalidValidationRule: Si alguna regla del esquema está mal configurada
    """

    def __init__(self, schema: FormSchema):
        self.schema = schema
        self.build_validator()
        self.state = PreviewState(values=initial_values(schema))

    def build_validator(self) -> FormValidator:
        """Genera el validador a partir del estado actual del esquema."""
        return generate_validator(self.schema.fields)

    # ------------------------------------------------------------------
    # Acciones
    # ------------------------------------------------------------------

    def set_value(self, field_id: str, value: Any) -> None:
        """Guarda el valor y limpia el error del campo."""
        self.state.values[field_id] = value
        self.state.errors.pop(field_id, None)
        self.state.phase = PreviewPhase.EDITING

    def validate_field(self, field_id: str, value: Any) -> FieldValidationResult:
        """
        Valida un único campo y actualiza su error.

        Raises:
            FieldNotFound: Si el campo no pertenece al esquema
        """
        result = self.build_validator().validate_field(field_id, value)
        if result.is_valid:
            self.state.errors.pop(field_id, None)
        else:
            self.state.errors[field_id] = result.error
        return result

    def validate_form(self) -> bool:
        """Valida todos los valores; reemplaza el mapa de errores completo."""
        result = self.build_validator().validate(self.state.values)
        self.state.errors = dict(result.errors)
        return result.success

    def touch_field(self, field_id: str) -> None:
        """Marca el campo como tocado."""
        self.state.touched_fields.add(field_id)
        if self.state.phase == PreviewPhase.IDLE:
            self.state.phase = PreviewPhase.EDITING

    def blur_field(self, field_id: str) -> FieldValidationResult:
        """Salida de un campo: lo marca como tocado y valida su valor actual."""
        self.touch_field(field_id)
        return self.validate_field(field_id, self.get_field_value(field_id))

    async def submit_form(self, on_submit: SubmitHandler) -> Optional[SubmissionResult]:
        """
        Valida y envía los valores.

        Args:
            on_submit: Callback de la aplicación. Recibe los valores y retorna
                un SubmissionResult (o un dict equivalente); puede ser una
                función normal o una corrutina.

        Returns:
            Resultado consumido, o None si la validación local bloqueó el envío

        Nota:
            Una excepción del callback no se propaga: se registra y queda como
            error a nivel de formulario.
        """
        self.state.is_submitting = True
        self.state.phase = PreviewPhase.SUBMITTING

        if not self.validate_form():
            self.state.is_submitting = False
            self.state.phase = PreviewPhase.EDITING
            return None

        try:
            returned = on_submit(dict(self.state.values))
            if inspect.isawaitable(returned):
                returned = await returned
            result = SubmissionResult.model_validate(returned)
        except Exception:
            logger.warning("Falló el envío del formulario %s", self.schema.id, exc_info=True)
            result = SubmissionResult(
                success=False,
                errors={FORM_ERROR_KEY: SUBMISSION_FAILED_MESSAGE},
                message=SUBMISSION_FAILED_MESSAGE,
            )

        if result.success:
            self.state.errors = {}
            self.state.phase = PreviewPhase.RESOLVED
        else:
            self.state.errors = dict(result.errors or {
                FORM_ERROR_KEY: result.message or SUBMISSION_REJECTED_MESSAGE,
            })
            self.state.phase = PreviewPhase.REJECTED

        self.state.is_submitting = False
        self.state.last_result = result
        return result

    def reset_form(self) -> None:
        """Limpia valores, errores, campos tocados y el estado de envío."""
        self.state = PreviewState()

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        return self.state.is_valid

    def get_field_value(self, field_id: str) -> Any:
        return self.state.values.get(field_id)

    def get_field_error(self, field_id: str) -> Optional[str]:
        return self.state.errors.get(field_id)

    def is_field_touched(self, field_id: str) -> bool:
        return field_id in self.state.touched_fields

    def transform_values(self) -> dict[str, Any]:
        return transform_values(self.schema, self.state.values)

    def completion_percentage(self) -> int:
        """Porcentaje de campos obligatorios completos (100 si no hay)."""
        required = [f for f in self.schema.fields if f.is_required]
        if not required:
            return 100
        completed = sum(1 for f in required if _is_filled(self.state.values.get(f.id)))
        return int(completed * 100 / len(required) + 0.5)

    def validation_summary(self) -> dict:
        """Resumen de campos válidos e inválidos con sus mensajes."""
        total = self.schema.n_fields
        invalid = len(self.state.errors)
        return {
            "total_fields": total,
            "invalid_fields": invalid,
            "valid_fields": total - invalid,
            "error_messages": list(self.state.errors.values()),
        }

    def is_submittable(self) -> bool:
        """Sin errores y con todos los campos obligatorios completos."""
        if self.state.errors:
            return False
        return all(
            _is_filled(self.state.values.get(f.id))
            for f in self.schema.fields
            if f.is_required
        )

    def build_submission_payload(self) -> dict:
        return build_submission_payload(self.schema, self.state.values)
