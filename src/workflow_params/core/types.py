"""Type definitions for workflow parameters."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional


class ParameterType(str, Enum):
    """Serialized workflow parameter types."""

    ARRAY = "Array"
    BOOL = "Bool"
    FLOAT = "Float"
    INT = "Int"
    OBJECT = "Object"
    SECURE_OBJECT = "SecureObject"
    SECURE_STRING = "SecureString"
    STRING = "String"

    @property
    def is_secure(self) -> bool:
        return self in (ParameterType.SECURE_OBJECT, ParameterType.SECURE_STRING)

    @classmethod
    def _missing_(cls, value: object) -> Optional["ParameterType"]:
        # Tags arrive in whatever casing the workflow author used
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value.lower() == lowered:
                    return member
        return None


class ParameterField(str, Enum):
    """Fields of a parameter that carry validation findings."""

    NAME = "name"
    VALUE = "value"
    DEFAULT_VALUE = "defaultValue"

    @property
    def attribute(self) -> str:
        """Model attribute name backing this field."""
        return "default_value" if self is ParameterField.DEFAULT_VALUE else self.value

    @classmethod
    def _missing_(cls, value: object) -> Optional["ParameterField"]:
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if lowered in (member.value.lower(), member.attribute):
                    return member
        return None


# validate(type, value, required) -> message or None
ValueValidator = Callable[[Optional[ParameterType], str, bool], Optional[str]]

IdFactory = Callable[[], str]


__all__ = ["ParameterType", "ParameterField", "ValueValidator", "IdFactory"]
