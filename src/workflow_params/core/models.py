"""
Workflow parameter data models.

These models describe the in-memory state behind the parameter editor:
- ParameterDefinition: One user-defined workflow parameter
- ParameterPatch: The editable fields submitted by an update
- ParameterUpdateEvent: An update command addressed to one parameter id
- ValidationErrorSet: Per-field findings for one parameter
- ParameterStoreState: Definitions, findings and the dirty flag
- UndoRedoSnapshot: Application snapshot delivered on undo/redo

All models are frozen. State transitions build new instances instead of
mutating existing ones, and accept the camelCase keys used by editor payloads
(defaultValue, isEditable, newDefinition, useLegacy, ...).
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from workflow_params.core.types import ParameterField, ParameterType

FieldKey = Union[ParameterField, str]

SECRET_MASK = "***"
_SECRET_KEYS = ("value", "defaultValue", "default_value")


def _is_secure_tag(tag: Any) -> bool:
    if isinstance(tag, ParameterType):
        return tag.is_secure
    if isinstance(tag, str):
        try:
            return ParameterType(tag).is_secure
        except ValueError:
            return False
    return False


def redact_secrets(payload: Any) -> Any:
    """
    Copy a raw editor payload with the values of secure parameters masked.

    Mappings tagged with a SecureString or SecureObject type have their value
    and default value replaced by SECRET_MASK. Nested mappings and sequences
    are walked; models are returned as they are since their repr masks itself.
    """
    if isinstance(payload, Mapping):
        secure = _is_secure_tag(payload.get("type"))
        return {
            key: SECRET_MASK if secure and key in _SECRET_KEYS and item is not None else redact_secrets(item)
            for key, item in payload.items()
        }
    if isinstance(payload, (list, tuple)):
        return type(payload)(redact_secrets(item) for item in payload)
    return payload


class _MasksSecrets:
    """Repr mixin hiding value and default_value of secure parameters."""

    def __repr_args__(self) -> Iterator[Tuple[Optional[str], Any]]:
        secure = _is_secure_tag(getattr(self, "type", None))
        for name, item in super().__repr_args__():  # type: ignore[misc]
            if secure and name in _SECRET_KEYS and item is not None:
                yield name, SECRET_MASK
            else:
                yield name, item


class ParameterDefinition(_MasksSecrets, BaseModel):
    """A single workflow parameter owned by the store under its id."""

    name: str = ""
    type: Optional[ParameterType] = None
    value: Optional[str] = None
    default_value: Optional[str] = Field(default=None, alias="defaultValue")
    is_editable: bool = Field(default=False, alias="isEditable")

    model_config = {"frozen": True, "populate_by_name": True, "hide_input_in_errors": True}


class ParameterPatch(_MasksSecrets, BaseModel):
    """Fields submitted by the editor for a parameter update."""

    name: Optional[str] = None
    type: Optional[ParameterType] = None
    value: Optional[str] = None
    default_value: Optional[str] = Field(default=None, alias="defaultValue")

    model_config = {"frozen": True, "populate_by_name": True, "hide_input_in_errors": True}


class ParameterUpdateEvent(BaseModel):
    id: str
    new_definition: ParameterPatch = Field(default_factory=ParameterPatch, alias="newDefinition")
    use_legacy: bool = Field(default=False, alias="useLegacy")

    model_config = {"frozen": True, "populate_by_name": True, "hide_input_in_errors": True}


class ValidationErrorSet(BaseModel):
    """
    Validation findings for one parameter, one optional message per field.

    A field only carries a message while it has an error: empty strings are
    normalized to None so absence is the single representation of "no error".
    """

    name: Optional[str] = None
    value: Optional[str] = None
    default_value: Optional[str] = Field(default=None, alias="defaultValue")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("name", "value", "default_value")
    @classmethod
    def _prune_empty(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    def get(self, field: FieldKey) -> Optional[str]:
        return getattr(self, ParameterField(field).attribute)

    def fields(self) -> List[ParameterField]:
        """Fields that currently carry an error, in declaration order."""
        return [field for field in ParameterField if self.get(field)]

    @property
    def is_empty(self) -> bool:
        return not self.fields()

    def as_dict(self) -> Dict[str, str]:
        """Present findings keyed by editor field key (name, value, defaultValue)."""
        return {field.value: self.get(field) for field in self.fields()}  # type: ignore[misc]

    def merged(self, findings: Mapping[FieldKey, Optional[str]]) -> "ValidationErrorSet":
        """
        Overlay fresh findings on this set.

        Only the fields present in ``findings`` are overwritten; a None or empty
        finding clears that field. Fields absent from ``findings`` keep their
        previous message.

        Args:
            findings: Mapping of evaluated field to its message (or None)

        Returns:
            New ValidationErrorSet with pruned fields
        """
        data: Dict[str, Optional[str]] = {field.attribute: self.get(field) for field in ParameterField}
        for field, message in findings.items():
            data[ParameterField(field).attribute] = message
        return ValidationErrorSet(**data)


class ParameterStoreState(BaseModel):
    definitions: Dict[str, ParameterDefinition] = Field(default_factory=dict)
    validation_errors: Dict[str, ValidationErrorSet] = Field(default_factory=dict, alias="validationErrors")
    is_dirty: bool = Field(default=False, alias="isDirty")

    model_config = {"frozen": True, "populate_by_name": True, "hide_input_in_errors": True}

    def errors_for(self, parameter_id: str) -> Optional[ValidationErrorSet]:
        return self.validation_errors.get(parameter_id)

    @property
    def has_errors(self) -> bool:
        return any(not errors.is_empty for errors in self.validation_errors.values())


class UndoRedoSnapshot(BaseModel):
    """Slice of an application snapshot restored on undo/redo."""

    workflow_parameters: ParameterStoreState = Field(
        default_factory=ParameterStoreState, alias="workflowParameters"
    )

    model_config = {"frozen": True, "populate_by_name": True, "hide_input_in_errors": True}


__all__ = [
    "SECRET_MASK",
    "redact_secrets",
    "ParameterDefinition",
    "ParameterPatch",
    "ParameterUpdateEvent",
    "ValidationErrorSet",
    "ParameterStoreState",
    "UndoRedoSnapshot",
]
