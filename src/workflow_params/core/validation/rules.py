"""
Validation rules for workflow parameters.

Rules are stateless: every function receives the definitions it compares
against and the collaborators it delegates to, and returns a display message
or None. Findings are data; nothing here raises for invalid user input.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Union

from workflow_params.core.messages import MessageKind, MessageProvider, default_messages
from workflow_params.core.models import ParameterDefinition, ParameterPatch
from workflow_params.core.types import ParameterField, ParameterType, ValueValidator
from workflow_params.core.validation.swagger import validate_value_with_type

Findings = Dict[ParameterField, Optional[str]]


def names_equal(left: Optional[str], right: Optional[str]) -> bool:
    """Case-insensitive name comparison."""
    if left is None or right is None:
        return left is right
    return left.lower() == right.lower()


def validate_name(
    parameter_id: str,
    name: Optional[str],
    definitions: Mapping[str, ParameterDefinition],
    messages: MessageProvider = default_messages,
) -> Optional[str]:
    """Require a name that no other parameter uses, ignoring case."""
    if not name:
        return messages(MessageKind.MISSING_NAME)

    for other_id, other in definitions.items():
        if other_id != parameter_id and names_equal(other.name, name):
            return messages(MessageKind.DUPLICATE_NAME)
    return None


def validate_value(
    value: Optional[str],
    type: Optional[ParameterType],
    required: bool,
    value_validator: ValueValidator = validate_value_with_type,
    messages: MessageProvider = default_messages,
) -> Optional[str]:
    """Require a value when ``required``, then delegate to the type-aware validator."""
    if value is None or value == "":
        if not required:
            return None
        return messages(MessageKind.MISSING_VALUE)
    return value_validator(type, value, required)


def validate_parameter(
    parameter_id: str,
    data: ParameterPatch,
    field: Union[ParameterField, str],
    definitions: Mapping[str, ParameterDefinition],
    required: bool = True,
    *,
    value_validator: ValueValidator = validate_value_with_type,
    messages: MessageProvider = default_messages,
) -> Optional[str]:
    """
    Validate one field of a parameter.

    Args:
        parameter_id: Id of the parameter being validated (excluded from duplicate checks)
        data: Submitted field values
        field: Field to validate, as enum or case-insensitive key
        definitions: All current definitions
        required: Whether an empty value or default value is an error

    Returns:
        Error message, or None when the field is valid or the key is unknown
    """
    try:
        key = ParameterField(field)
    except ValueError:
        return None

    if key is ParameterField.NAME:
        return validate_name(parameter_id, data.name, definitions, messages)

    candidate = data.value if key is ParameterField.VALUE else data.default_value
    return validate_value(candidate, data.type, required, value_validator, messages)


def compute_findings(
    parameter_id: str,
    patch: ParameterPatch,
    definitions: Mapping[str, ParameterDefinition],
    use_legacy: bool = False,
    *,
    value_validator: ValueValidator = validate_value_with_type,
    messages: MessageProvider = default_messages,
) -> Findings:
    """
    Evaluate the fields relevant to the editing mode.

    The name is always checked. The value is required outside legacy mode,
    since legacy parameters may fall back to their default value. The default
    value is only evaluated in legacy mode and is then required; outside legacy
    mode it is left out of the result entirely so earlier findings survive.

    Returns:
        Findings keyed by exactly the evaluated fields
    """
    options = {"value_validator": value_validator, "messages": messages}
    findings: Findings = {
        ParameterField.NAME: validate_parameter(parameter_id, patch, ParameterField.NAME, definitions, **options),
        ParameterField.VALUE: validate_parameter(
            parameter_id, patch, ParameterField.VALUE, definitions, not use_legacy, **options
        ),
    }
    if use_legacy:
        findings[ParameterField.DEFAULT_VALUE] = validate_parameter(
            parameter_id, patch, ParameterField.DEFAULT_VALUE, definitions, **options
        )
    return findings


__all__ = [
    "Findings",
    "names_equal",
    "validate_name",
    "validate_value",
    "validate_parameter",
    "compute_findings",
]
