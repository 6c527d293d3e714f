"""Type-aware value validation for serialized workflow parameter types."""

from __future__ import annotations

import json
import re
from typing import Any, Optional

from workflow_params.core.messages import MessageKind, MessageProvider, default_messages
from workflow_params.core.types import ParameterType

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
# Decimal and exponent notation as a JavaScript Number reads it
_FLOAT_PATTERN = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$|^[+-]?Infinity$")


def _decode_json(value: str) -> Any:
    try:
        return json.loads(value)
    except (ValueError, RecursionError):
        return None


def _is_float(value: str) -> bool:
    return _FLOAT_PATTERN.match(value.strip()) is not None


def validate_value_with_type(
    type: Optional[ParameterType],
    value: str,
    required: bool,
    messages: MessageProvider = default_messages,
) -> Optional[str]:
    """
    Check that a string-encoded value is well formed for its declared type.

    Args:
        type: Declared parameter type (None is treated like String)
        value: String-encoded value
        required: Whether an empty value is an error
        messages: Message lookup for type mismatches

    Returns:
        Error message, or None when the value is acceptable
    """
    if value == "":
        return messages(MessageKind.MISSING_VALUE) if required else None

    if type == ParameterType.ARRAY:
        if not isinstance(_decode_json(value), list):
            return messages(MessageKind.INVALID_ARRAY)
    elif type in (ParameterType.OBJECT, ParameterType.SECURE_OBJECT):
        if not isinstance(_decode_json(value), dict):
            return messages(MessageKind.INVALID_JSON)
    elif type == ParameterType.BOOL:
        if value.strip().lower() not in ("true", "false"):
            return messages(MessageKind.INVALID_BOOLEAN)
    elif type == ParameterType.INT:
        if not _INTEGER_PATTERN.match(value.strip()):
            return messages(MessageKind.INVALID_INTEGER)
    elif type == ParameterType.FLOAT:
        if not _is_float(value):
            return messages(MessageKind.INVALID_FLOAT)
    return None


class SwaggerValueValidator:
    """Value validator bound to a message catalog."""

    def __init__(self, messages: MessageProvider = default_messages):
        self.messages = messages

    def __call__(self, type: Optional[ParameterType], value: str, required: bool) -> Optional[str]:
        return validate_value_with_type(type, value, required, self.messages)


__all__ = ["validate_value_with_type", "SwaggerValueValidator"]
