from .events import WorkflowEvents
from .messages import MessageCatalog, MessageKind
from .models import (
    ParameterDefinition,
    ParameterPatch,
    ParameterStoreState,
    ParameterUpdateEvent,
    UndoRedoSnapshot,
    ValidationErrorSet,
)
from .store import ParameterStore
from .types import ParameterField, ParameterType

__all__ = [
    "ParameterStore",
    "WorkflowEvents",
    "MessageCatalog",
    "MessageKind",
    "ParameterDefinition",
    "ParameterPatch",
    "ParameterStoreState",
    "ParameterUpdateEvent",
    "UndoRedoSnapshot",
    "ValidationErrorSet",
    "ParameterField",
    "ParameterType",
]
