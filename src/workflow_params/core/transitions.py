"""
State transitions for the parameter store.

Each function takes the current ParameterStoreState and a command payload and
returns a new state. Nothing is mutated in place, so the store can apply a
command by swapping a single reference.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from workflow_params.core.messages import MessageProvider, default_messages
from workflow_params.core.models import (
    ParameterDefinition,
    ParameterStoreState,
    ParameterUpdateEvent,
    ValidationErrorSet,
)
from workflow_params.core.types import ParameterType, ValueValidator
from workflow_params.core.validation.rules import compute_findings
from workflow_params.core.validation.swagger import validate_value_with_type

DefinitionInput = Union[ParameterDefinition, Mapping[str, Any]]


def _coerce_definition(definition: DefinitionInput) -> ParameterDefinition:
    if isinstance(definition, ParameterDefinition):
        return definition
    return ParameterDefinition.model_validate(definition)


def initialize_parameters(
    state: ParameterStoreState, definitions: Mapping[str, DefinitionInput]
) -> ParameterStoreState:
    """Replace all definitions; findings and the dirty flag are left as they are."""
    coerced = {parameter_id: _coerce_definition(d) for parameter_id, d in definitions.items()}
    return state.model_copy(update={"definitions": coerced})


def add_parameter(state: ParameterStoreState, parameter_id: str) -> ParameterStoreState:
    """Insert a blank, editable Array parameter under ``parameter_id``."""
    definitions = dict(state.definitions)
    definitions[parameter_id] = ParameterDefinition(is_editable=True, type=ParameterType.ARRAY, name="")
    return state.model_copy(update={"definitions": definitions, "is_dirty": True})


def delete_parameter(state: ParameterStoreState, parameter_id: str) -> ParameterStoreState:
    definitions = {k: v for k, v in state.definitions.items() if k != parameter_id}
    errors = {k: v for k, v in state.validation_errors.items() if k != parameter_id}
    return state.model_copy(update={"definitions": definitions, "validation_errors": errors, "is_dirty": True})


def update_parameter(
    state: ParameterStoreState,
    event: ParameterUpdateEvent,
    *,
    value_validator: ValueValidator = validate_value_with_type,
    messages: MessageProvider = default_messages,
) -> ParameterStoreState:
    """
    Apply an edit to one parameter and reconcile its validation findings.

    1. Evaluate the fields relevant to the mode against the current definitions
    2. Merge the submitted fields over the stored definition (or a blank one)
    3. Overlay the findings on the previous error set and prune empty entries
    4. Mark the state dirty

    The default value is written and validated only in legacy mode. Outside
    legacy mode the stored default value and any earlier default value error
    are carried over unchanged.

    Args:
        state: Current store state
        event: Update command
        value_validator: Type-aware validator for non-empty values
        messages: Message lookup for findings

    Returns:
        New ParameterStoreState
    """
    parameter_id = event.id
    patch = event.new_definition
    use_legacy = event.use_legacy

    findings = compute_findings(
        parameter_id,
        patch,
        state.definitions,
        use_legacy,
        value_validator=value_validator,
        messages=messages,
    )

    base = state.definitions.get(parameter_id)
    if base is None:
        base = ParameterDefinition()
    changes: Dict[str, Any] = {
        "type": patch.type,
        "value": patch.value,
        "name": patch.name if patch.name is not None else "",
    }
    if use_legacy:
        changes["default_value"] = patch.default_value
    definitions = dict(state.definitions)
    definitions[parameter_id] = base.model_copy(update=changes)

    previous = state.validation_errors.get(parameter_id)
    if previous is None:
        previous = ValidationErrorSet()
    merged = previous.merged(findings)
    errors = {k: v for k, v in state.validation_errors.items() if k != parameter_id}
    if not merged.is_empty:
        errors[parameter_id] = merged

    return state.model_copy(
        update={"definitions": definitions, "validation_errors": errors, "is_dirty": True}
    )


def set_dirty(state: ParameterStoreState, is_dirty: bool) -> ParameterStoreState:
    return state.model_copy(update={"is_dirty": is_dirty})


__all__ = [
    "initialize_parameters",
    "add_parameter",
    "delete_parameter",
    "update_parameter",
    "set_dirty",
]
