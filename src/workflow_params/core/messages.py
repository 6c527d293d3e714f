"""Display messages for parameter validation findings."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from pydantic import BaseModel, Field


class MessageKind(str, Enum):
    """Situations that produce a user-facing validation message."""

    MISSING_NAME = "missing_name"
    DUPLICATE_NAME = "duplicate_name"
    MISSING_VALUE = "missing_value"
    # Type mismatches reported by the default value validator
    INVALID_ARRAY = "invalid_array"
    INVALID_BOOLEAN = "invalid_boolean"
    INVALID_FLOAT = "invalid_float"
    INVALID_INTEGER = "invalid_integer"
    INVALID_JSON = "invalid_json"


DEFAULT_MESSAGES: Dict[MessageKind, str] = {
    MessageKind.MISSING_NAME: "Must provide the parameter name.",
    MessageKind.DUPLICATE_NAME: "Parameter name already exists.",
    MessageKind.MISSING_VALUE: "Must provide value for parameter.",
    MessageKind.INVALID_ARRAY: "Enter a valid array.",
    MessageKind.INVALID_BOOLEAN: "Enter a valid boolean.",
    MessageKind.INVALID_FLOAT: "Enter a valid float.",
    MessageKind.INVALID_INTEGER: "Enter a valid integer.",
    MessageKind.INVALID_JSON: "Enter a valid JSON.",
}

MessageProvider = Callable[[MessageKind], str]


class MessageCatalog(BaseModel):
    """Message lookup with English fallbacks for kinds that are not overridden."""

    messages: Dict[MessageKind, str] = Field(default_factory=dict)

    def get(self, kind: MessageKind) -> str:
        message = self.messages.get(kind)
        return message if message else DEFAULT_MESSAGES[kind]

    def __call__(self, kind: MessageKind) -> str:
        return self.get(kind)


def default_messages(kind: MessageKind) -> str:
    return DEFAULT_MESSAGES[kind]


__all__ = ["MessageKind", "MessageCatalog", "MessageProvider", "DEFAULT_MESSAGES", "default_messages"]
