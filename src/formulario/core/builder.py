"""
Constructor de formularios.

FormBuilder es la única superficie de mutación de un esquema: agrega,
modifica, elimina y reordena campos, gestiona la selección y el modo de
vista previa, e importa/exporta instantáneas del esquema.

Cada operación valida primero y muta después: si falla, el estado queda
exactamente como estaba. Ninguna operación realiza E/S.
"""

import logging
from typing import Any, Mapping, Optional, Type, Union

from pydantic import BaseModel

from formulario.config import DEFAULT_FORM_TITLE
from formulario.core.registry import create_default_field, resolve_field_type
from formulario.core.serialization import export_form_schema, import_form_schema
from formulario.core.utils import duplicate_field as copy_field
from formulario.core.validator import FormValidator, generate_validator
from formulario.errors import FieldNotFound, IndexOutOfRange
from formulario.models import (
    BuilderState,
    FieldDefinition,
    FieldType,
    FormSchema,
    FormSettings,
    SchemaExport,
    generate_id,
)


logger = logging.getLogger(__name__)


# Atributos del formulario que update_form_info acepta
FORM_INFO_KEYS = ("title", "description", "cover_image", "settings")

# Atributos de campo que update_field nunca modifica
PROTECTED_FIELD_KEYS = ("id", "order")


def create_empty_schema() -> FormSchema:
    """Esquema vacío con los valores por defecto."""
    return FormSchema(
        title=DEFAULT_FORM_TITLE,
        description="",
        fields=[],
        settings=FormSettings(),
    )


def _normalize_keys(model: Type[BaseModel], updates: Mapping[str, Any]) -> dict:
    """
    Convierte claves camelCase o snake_case a nombres de atributo.

    Raises:
        ValueError: Si alguna clave no es un atributo del modelo
    """
    names = {}
    for name, info in model.model_fields.items():
        names[name] = name
        if info.alias:
            names[info.alias] = name

    normalized = {}
    for key, value in updates.items():
        if key not in names:
            raise ValueError(f"Atributo desconocido para {model.__name__}: {key}")
        normalized[names[key]] = value
    return normalized


class FormBuilder:
    """
    Sesión de edición de un formulario.

    Args:
        schema: Esquema inicial (default: esquema vacío)
    """

    def __init__(self, schema: Optional[FormSchema] = None):
        self.state = BuilderState(form=schema if schema is not None else create_empty_schema())

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    @property
    def schema(self) -> FormSchema:
        return self.state.form

    @property
    def selected_field(self) -> Optional[FieldDefinition]:
        if self.state.selected_field_id is None:
            return None
        return self.schema.get_field(self.state.selected_field_id)

    @property
    def is_dirty(self) -> bool:
        return self.state.is_dirty

    def get_field(self, field_id: str) -> FieldDefinition:
        """
        Obtiene un campo por ID.

        Raises:
            FieldNotFound: Si el campo no existe
        """
        fld = self.schema.get_field(field_id)
        if fld is None:
            raise FieldNotFound(field_id)
        return fld

    def build_validator(self) -> FormValidator:
        """Genera el validador para el esquema actual."""
        return generate_validator(self.schema.fields)

    # ------------------------------------------------------------------
    # Helpers internos
    # ------------------------------------------------------------------

    def _index(self, field_id: str) -> int:
        index = self.schema.index_of(field_id)
        if index < 0:
            raise FieldNotFound(field_id)
        return index

    def _new_field_id(self) -> str:
        existing = set(self.schema.field_ids)
        field_id = generate_id()
        while field_id in existing:
            field_id = generate_id()
        return field_id

    def _set_fields(self, fields: list[FieldDefinition]) -> None:
        """Reemplaza la lista de campos re-secuenciando order."""
        for i, fld in enumerate(fields):
            fld.order = i
        self.schema.fields = fields

    def _commit(self) -> None:
        self.schema.touch()
        self.state.is_dirty = True

    # ------------------------------------------------------------------
    # Formulario
    # ------------------------------------------------------------------

    def update_form_info(self, **updates: Any) -> None:
        """
        Actualiza título, descripción, imagen de portada o ajustes.

        Los ajustes se mezclan con los existentes: sólo cambian las claves
        indicadas.

        Raises:
            ValueError: Si se indica un atributo distinto de los anteriores
        """
        changes = _normalize_keys(FormSchema, updates)
        unknown = [k for k in changes if k not in FORM_INFO_KEYS]
        if unknown:
            raise ValueError(f"Atributos no editables: {', '.join(unknown)}")

        if "settings" in changes:
            new_settings = changes["settings"]
            if isinstance(new_settings, FormSettings):
                new_settings = new_settings.model_dump(exclude_unset=True)
            base = self.schema.settings or FormSettings()
            merged = base.model_dump()
            merged.update(_normalize_keys(FormSettings, new_settings or {}))
            changes["settings"] = FormSettings.model_validate(merged)

        data = self.schema.model_dump()
        data.update(changes)
        # Valida el resultado antes de tocar el estado
        validated = FormSchema.model_validate(data)

        for key in changes:
            setattr(self.schema, key, getattr(validated, key))
        self._commit()

    # ------------------------------------------------------------------
    # Campos
    # ------------------------------------------------------------------

    def add_field(
        self,
        field_type: Union[FieldType, str],
        position: Optional[int] = None,
    ) -> str:
        """
        Agrega un campo con la configuración inicial de su tipo.

        Args:
            field_type: Tipo del campo
            position: Posición en el orden de presentación (default: al final)

        Returns:
            ID del campo nuevo, que queda seleccionado

        Raises:
            UnsupportedFieldType: Si el tipo no está en el registro
            IndexOutOfRange: Si position no está entre 0 y el número de campos
        """
        resolved = resolve_field_type(field_type)
        fields = self.schema.sorted_fields()
        size = len(fields)

        if position is None:
            position = size
        elif not 0 <= position <= size:
            raise IndexOutOfRange(position, size)

        new_field = create_default_field(resolved, order=position, field_id=self._new_field_id())
        fields.insert(position, new_field)

        self._set_fields(fields)
        self.state.selected_field_id = new_field.id
        self._commit()
        logger.debug("Campo %s (%s) agregado en posición %d", new_field.id, resolved.value, position)
        return new_field.id

    def update_field(self, field_id: str, updates: Mapping[str, Any]) -> FieldDefinition:
        """
        Mezcla cambios en un campo.

        Las claves id y order se ignoran: el ID no cambia nunca y el orden
        sólo cambia con reorder_fields.

        Raises:
            FieldNotFound: Si el campo no existe
            UnsupportedFieldType: Si se cambia a un tipo fuera del registro
        """
        index = self._index(field_id)
        current = self.schema.fields[index]

        changes = _normalize_keys(FieldDefinition, updates)
        for key in PROTECTED_FIELD_KEYS:
            changes.pop(key, None)
        if "type" in changes:
            changes["type"] = resolve_field_type(changes["type"])

        data = current.model_dump()
        data.update(changes)
        updated = FieldDefinition.model_validate(data)

        self.schema.fields[index] = updated
        self._commit()
        return updated

    def delete_field(self, field_id: str) -> None:
        """
        Elimina un campo y re-secuencia el orden del resto.

        Raises:
            FieldNotFound: Si el campo no existe
        """
        self._index(field_id)
        remaining = [f for f in self.schema.sorted_fields() if f.id != field_id]

        self._set_fields(remaining)
        if self.state.selected_field_id == field_id:
            self.state.selected_field_id = None
        self._commit()

    def reorder_fields(self, from_index: int, to_index: int) -> None:
        """
        Mueve el campo en from_index a to_index (orden de presentación).

        Raises:
            IndexOutOfRange: Si algún índice está fuera de rango
        """
        fields = self.schema.sorted_fields()
        size = len(fields)
        for index in (from_index, to_index):
            if not 0 <= index < size:
                raise IndexOutOfRange(index, size)

        moved = fields.pop(from_index)
        fields.insert(to_index, moved)

        self._set_fields(fields)
        self._commit()

    def duplicate_field(self, field_id: str) -> str:
        """
        Duplica un campo insertando la copia a continuación del original.

        Returns:
            ID de la copia, que queda seleccionada

        Raises:
            FieldNotFound: Si el campo no existe
        """
        original = self.get_field(field_id)
        copy = copy_field(original)
        copy.id = self._new_field_id()

        fields = self.schema.sorted_fields()
        position = next(i for i, f in enumerate(fields) if f.id == field_id) + 1
        fields.insert(position, copy)

        self._set_fields(fields)
        self.state.selected_field_id = copy.id
        self._commit()
        return copy.id

    # ------------------------------------------------------------------
    # Selección y modo
    # ------------------------------------------------------------------

    def select_field(self, field_id: Optional[str]) -> None:
        """
        Selecciona un campo (None para quitar la selección).

        Raises:
            FieldNotFound: Si se indica un ID que no existe
        """
        if field_id is not None:
            self._index(field_id)
        self.state.selected_field_id = field_id

    def set_preview_mode(self, enabled: bool) -> None:
        """Activa o desactiva la vista previa (al activarla se quita la selección)."""
        self.state.is_preview_mode = enabled
        if enabled:
            self.state.selected_field_id = None

    def mark_saved(self) -> None:
        """Marca el esquema como guardado."""
        self.state.is_dirty = False

    # ------------------------------------------------------------------
    # Exportación e importación
    # ------------------------------------------------------------------

    def export_schema(self) -> SchemaExport:
        """Instantánea independiente del esquema actual."""
        return export_form_schema(self.schema)

    def import_schema(self, data: Union[SchemaExport, Mapping[str, Any]]) -> None:
        """
        Reemplaza el esquema por uno importado.

        Raises:
            InvalidSchemaExport: Si la exportación no es válida (el estado
                no cambia)
        """
        schema = import_form_schema(data)
        self.state.form = schema
        self.state.selected_field_id = None
        self.state.is_dirty = True
        logger.debug("Esquema %s importado (%d campos)", schema.id, schema.n_fields)

    def reset_form(self) -> None:
        """Vuelve a un esquema vacío, sin selección ni vista previa."""
        self.state = BuilderState(form=create_empty_schema())
