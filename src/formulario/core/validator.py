"""
Generador de validadores a partir de definiciones de campo.

Cada campo se traduce a un tipo anotado de Pydantic (TypeAdapter) según
su tipo y reglas:

- text/textarea: texto, minLength/maxLength, pattern (coincidencia completa)
- email: texto con formato de correo, minLength/maxLength
- number: número (no bool ni texto), min/max inclusivos
- checkbox: booleano
- select/radio: uno de los valores de las opciones (texto libre si no hay)
- file: sin validación estructural

Los campos no obligatorios aceptan valor ausente o vacío; las reglas del
tipo se aplican sólo cuando hay valor. Las reglas mal configuradas se
detectan al construir el validador, no al validar.
"""

import re
from dataclasses import dataclass, field
from typing import Annotated, Any, Callable, Literal, Mapping, Optional, Sequence

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    BeforeValidator,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

from formulario.errors import FieldNotFound, InvalidValidationRule, UnsupportedFieldType
from formulario.models import FieldDefinition, FieldType, ValidationRules


REQUIRED_MESSAGE = "Campo requerido"
INVALID_MESSAGE = "Valor inválido"
NUMBER_MESSAGE = "Debe ser un número"


# ============================================================================
# Resultados
# ============================================================================

@dataclass
class ValidationResult:
    """Resultado de validar un conjunto de valores."""
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.errors


@dataclass
class FieldValidationResult:
    """Resultado de validar un único campo."""
    is_valid: bool
    error: Optional[str] = None


# ============================================================================
# Chequeos de valor
# ============================================================================

def _is_empty(value: Any) -> bool:
    """Valor ausente: None o texto vacío."""
    return value is None or (isinstance(value, str) and value == "")


def _require_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("number_type", NUMBER_MESSAGE)
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            raise PydanticCustomError("number_type", NUMBER_MESSAGE) from None
    return value


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email_format", "Correo electrónico inválido") from None
    return value


def _full_match(compiled: re.Pattern) -> Callable[[str], str]:
    def check(value: str) -> str:
        if compiled.fullmatch(value) is None:
            raise PydanticCustomError("pattern_mismatch", "Formato inválido")
        return value
    return check


# Mensajes para los errores nativos de Pydantic, según las reglas del campo
_ERROR_MESSAGES: dict[str, Callable[[ValidationRules], str]] = {
    "string_type": lambda r: "Debe ser texto",
    "string_too_short": lambda r: f"Mínimo {r.min_length} caracteres",
    "string_too_long": lambda r: f"Máximo {r.max_length} caracteres",
    "greater_than_equal": lambda r: f"Valor mínimo: {r.min}",
    "less_than_equal": lambda r: f"Valor máximo: {r.max}",
    "finite_number": lambda r: NUMBER_MESSAGE,
    "float_type": lambda r: NUMBER_MESSAGE,
    "float_parsing": lambda r: NUMBER_MESSAGE,
    "bool_type": lambda r: "Debe ser verdadero o falso",
    "literal_error": lambda r: "Opción no válida",
}


def _describe_error(error: dict, rules: ValidationRules) -> str:
    """Traduce un error de Pydantic a un mensaje legible."""
    formatter = _ERROR_MESSAGES.get(error.get("type", ""))
    if formatter is not None:
        return formatter(rules)
    return error.get("msg") or INVALID_MESSAGE


# ============================================================================
# Construcción de tipos por campo
# ============================================================================

def _compile_pattern(fld: FieldDefinition) -> Optional[re.Pattern]:
    rules = fld.validation
    if rules is None or not rules.pattern:
        return None
    try:
        return re.compile(rules.pattern)
    except re.error as e:
        raise InvalidValidationRule(fld.id, f"expresión regular inválida ({e})") from e


def _check_rule_bounds(fld: FieldDefinition) -> None:
    rules = fld.validation
    if rules is None:
        return
    if (rules.min_length is not None and rules.max_length is not None
            and rules.min_length > rules.max_length):
        raise InvalidValidationRule(fld.id, "minLength mayor que maxLength")
    if rules.min is not None and rules.max is not None and rules.min > rules.max:
        raise InvalidValidationRule(fld.id, "min mayor que max")


def _text_type(fld: FieldDefinition, pattern: Optional[re.Pattern]) -> Any:
    rules = fld.validation or ValidationRules()
    length = Field(min_length=rules.min_length, max_length=rules.max_length)
    if pattern is None:
        return Annotated[StrictStr, length]
    return Annotated[StrictStr, length, AfterValidator(_full_match(pattern))]


def _email_type(fld: FieldDefinition, pattern: Optional[re.Pattern]) -> Any:
    rules = fld.validation or ValidationRules()
    return Annotated[
        StrictStr,
        Field(min_length=rules.min_length, max_length=rules.max_length),
        AfterValidator(_check_email),
    ]


def _number_type(fld: FieldDefinition, pattern: Optional[re.Pattern]) -> Any:
    rules = fld.validation or ValidationRules()
    return Annotated[float, Field(ge=rules.min, le=rules.max, allow_inf_nan=False), BeforeValidator(_require_number)]


def _checkbox_type(fld: FieldDefinition, pattern: Optional[re.Pattern]) -> Any:
    return StrictBool


def _choice_type(fld: FieldDefinition, pattern: Optional[re.Pattern]) -> Any:
    values = fld.option_values
    if not values:
        return StrictStr
    return Literal[tuple(values)]


def _file_type(fld: FieldDefinition, pattern: Optional[re.Pattern]) -> Any:
    # Tamaño y tipo de archivo quedan a cargo de la aplicación
    return None


_TYPE_BUILDERS: dict[FieldType, Callable[[FieldDefinition, Optional[re.Pattern]], Any]] = {
    FieldType.TEXT: _text_type,
    FieldType.TEXTAREA: _text_type,
    FieldType.EMAIL: _email_type,
    FieldType.NUMBER: _number_type,
    FieldType.CHECKBOX: _checkbox_type,
    FieldType.SELECT: _choice_type,
    FieldType.RADIO: _choice_type,
    FieldType.FILE: _file_type,
}


@dataclass
class FieldRule:
    """Validador compilado de un campo."""
    field_id: str
    required: bool
    rules: ValidationRules
    adapter: Optional[TypeAdapter] = None

    def check(self, value: Any) -> Optional[str]:
        """Retorna el mensaje de error o None si el valor es válido."""
        if _is_empty(value):
            return self._message(REQUIRED_MESSAGE) if self.required else None
        if self.adapter is None:
            return None
        try:
            self.adapter.validate_python(value)
        except ValidationError as e:
            return self._message(_describe_error(e.errors()[0], self.rules))
        return None

    def _message(self, default: str) -> str:
        return self.rules.custom_message or default


def build_field_rule(fld: FieldDefinition) -> FieldRule:
    """
    Compila el validador de un campo.

    Raises:
        UnsupportedFieldType: Si el tipo no tiene constructor
        InvalidValidationRule: Si las reglas están mal configuradas
    """
    builder = _TYPE_BUILDERS.get(fld.type)
    if builder is None:
        raise UnsupportedFieldType(fld.type)

    _check_rule_bounds(fld)
    pattern = _compile_pattern(fld)
    annotated = builder(fld, pattern)

    return FieldRule(
        field_id=fld.id,
        required=fld.is_required,
        rules=fld.validation or ValidationRules(),
        adapter=TypeAdapter(annotated) if annotated is not None else None,
    )


# ============================================================================
# Validador compuesto
# ============================================================================

class FormValidator:
    """
    Validador de un formulario completo.

    Cada campo se valida de forma independiente; el resultado incluye un
    error por cada campo que falla.
    """

    def __init__(self, fields: Sequence[FieldDefinition]):
        self._rules: dict[str, FieldRule] = {}
        for fld in sorted(fields, key=lambda f: f.order):
            self._rules[fld.id] = build_field_rule(fld)

    @property
    def field_ids(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, field_id: str) -> bool:
        return field_id in self._rules

    def __call__(self, values: Mapping[str, Any]) -> ValidationResult:
        return self.validate(values)

    def validate(self, values: Mapping[str, Any]) -> ValidationResult:
        """Valida todos los campos contra los valores dados."""
        result = ValidationResult()
        for field_id, rule in self._rules.items():
            error = rule.check(values.get(field_id))
            if error is not None:
                result.errors[field_id] = error
        return result

    def validate_field(self, field_id: str, value: Any) -> FieldValidationResult:
        """
        Valida un único campo.

        Raises:
            FieldNotFound: Si el campo no pertenece al validador
        """
        rule = self._rules.get(field_id)
        if rule is None:
            raise FieldNotFound(field_id)
        error = rule.check(value)
        return FieldValidationResult(is_valid=error is None, error=error)


def generate_validator(fields: Sequence[FieldDefinition]) -> FormValidator:
    """Genera el validador compuesto para una secuencia de campos."""
    return FormValidator(fields)
