"""Parameter Store: authoritative in-memory model of a workflow's parameters."""

from __future__ import annotations

import logging
import uuid
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from workflow_params.core import transitions
from workflow_params.core.events import WorkflowEvents
from workflow_params.core.messages import MessageProvider, default_messages
from workflow_params.core.models import (
    ParameterDefinition,
    ParameterStoreState,
    ParameterUpdateEvent,
    UndoRedoSnapshot,
    ValidationErrorSet,
    redact_secrets,
)
from workflow_params.core.types import IdFactory, ValueValidator
from workflow_params.core.validation.swagger import SwaggerValueValidator
from workflow_params.utils.logging import log_calls

logger = logging.getLogger(__name__)


def new_parameter_id() -> str:
    return str(uuid.uuid4())


class ParameterStore:
    """
    Holds parameter definitions, their validation findings and the dirty flag.

    Every command computes a complete new state and then replaces the current
    one, so observers never see a half-applied command.
    """

    def __init__(
        self,
        *,
        value_validator: Optional[ValueValidator] = None,
        id_factory: Optional[IdFactory] = None,
        messages: Optional[MessageProvider] = None,
        events: Optional[WorkflowEvents] = None,
    ):
        """
        Initialize an empty store.

        Args:
            value_validator: Type-aware value validator (defaults to the swagger type rules)
            id_factory: Source of unique parameter ids (defaults to uuid4)
            messages: Message lookup for validation findings
            events: Dispatcher delivering reset and restore triggers
        """
        self.messages: MessageProvider = messages or default_messages
        self.value_validator: ValueValidator = value_validator or SwaggerValueValidator(self.messages)
        self.id_factory: IdFactory = id_factory or new_parameter_id
        self._state = ParameterStoreState()
        self._events: Optional[WorkflowEvents] = None
        if events is not None:
            self.attach(events)

    # Observable state

    @property
    def state(self) -> ParameterStoreState:
        return self._state

    @property
    def definitions(self) -> Mapping[str, ParameterDefinition]:
        """Read-only view of the current definitions."""
        return MappingProxyType(self._state.definitions)

    @property
    def validation_errors(self) -> Mapping[str, ValidationErrorSet]:
        return MappingProxyType(self._state.validation_errors)

    @property
    def is_dirty(self) -> bool:
        return self._state.is_dirty

    @property
    def has_errors(self) -> bool:
        return self._state.has_errors

    def errors_for(self, parameter_id: str) -> Optional[ValidationErrorSet]:
        return self._state.errors_for(parameter_id)

    # Commands

    @log_calls(redact=redact_secrets)
    def initialize_parameters(self, definitions: Mapping[str, Union[ParameterDefinition, Mapping[str, Any]]]) -> None:
        self._state = transitions.initialize_parameters(self._state, definitions)
        logger.info("Initialized %d parameter(s)", len(self._state.definitions))

    @log_calls(redact=redact_secrets)
    def add_parameter(self) -> str:
        """Add a blank parameter and return its id."""
        parameter_id = self.id_factory()
        self._state = transitions.add_parameter(self._state, parameter_id)
        return parameter_id

    @log_calls(redact=redact_secrets)
    def delete_parameter(self, parameter_id: str) -> None:
        self._state = transitions.delete_parameter(self._state, parameter_id)

    @log_calls(redact=redact_secrets)
    def update_parameter(self, event: Union[ParameterUpdateEvent, Mapping[str, Any]]) -> None:
        """
        Apply an edit and re-derive the parameter's validation findings.

        Args:
            event: Update command, or a mapping in the editor payload shape
                ({"id": ..., "newDefinition": {...}, "useLegacy": ...})
        """
        if not isinstance(event, ParameterUpdateEvent):
            event = ParameterUpdateEvent.model_validate(event)
        self._state = transitions.update_parameter(
            self._state,
            event,
            value_validator=self.value_validator,
            messages=self.messages,
        )

    @log_calls(redact=redact_secrets)
    def set_is_workflow_parameters_dirty(self, is_dirty: bool) -> None:
        self._state = transitions.set_dirty(self._state, is_dirty)

    # External triggers

    def reset(self) -> None:
        logger.info("Resetting workflow parameters")
        self._state = ParameterStoreState()

    def restore(self, snapshot: Union[UndoRedoSnapshot, Mapping[str, Any]]) -> None:
        """Replace the whole state with the snapshot's parameters, without revalidation."""
        if not isinstance(snapshot, UndoRedoSnapshot):
            snapshot = UndoRedoSnapshot.model_validate(snapshot)
        logger.info("Restoring workflow parameters from snapshot")
        restored = snapshot.workflow_parameters
        # Own the containers so the caller's snapshot stays untouched
        self._state = restored.model_copy(
            update={
                "definitions": dict(restored.definitions),
                "validation_errors": dict(restored.validation_errors),
            }
        )

    def attach(self, events: WorkflowEvents) -> None:
        """Subscribe to reset and restore triggers."""
        self.detach()
        events.add_reset_callback(self.reset)
        events.add_restore_callback(self.restore)
        self._events = events

    def detach(self) -> None:
        if self._events is None:
            return
        self._events.remove_reset_callback(self.reset)
        self._events.remove_restore_callback(self.restore)
        self._events = None

    def __repr__(self) -> str:
        return (
            f"ParameterStore(definitions={len(self.definitions)}, "
            f"errors={len(self.validation_errors)}, is_dirty={self.is_dirty})"
        )


__all__ = ["ParameterStore", "new_parameter_id"]
