from __future__ import annotations

import logging
import os
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from workflow_params.core.messages import MessageCatalog
from workflow_params.core.models import ParameterDefinition
from workflow_params.core.store import new_parameter_id
from workflow_params.core.types import IdFactory
from workflow_params.io.loaders.errors import LoaderError
from workflow_params.io.loaders.file_spec import MessagesFileSpec, ParameterEntrySpec, ParametersFileSpec

logger = logging.getLogger(__name__)


def _read_yaml_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    if not isinstance(data, dict):
        raise LoaderError(path, "Expected a mapping at the top level")
    return data


def load_parameters(path: str, id_factory: IdFactory = new_parameter_id) -> Dict[str, ParameterDefinition]:
    """Load workflow parameter definitions from a YAML file.

    Expected format:
    parameters:
      retries:
        type: Int
        value: 3
      endpoint:
        type: String
        defaultValue: https://example.invalid

    Returns:
        Definitions keyed by freshly generated ids, in file order
    """
    if not os.path.exists(path):
        raise LoaderError(path, "Parameter file not found")
    data = _read_yaml_file(path)
    try:
        spec = ParametersFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid workflow parameter file", cause=exc) from exc

    definitions: Dict[str, ParameterDefinition] = {}
    for name, raw in spec.parameters.items():
        try:
            entry = ParameterEntrySpec.model_validate(raw)
        except ValidationError as exc:
            raise LoaderError(path, "Invalid parameter entry", parameter=name, cause=exc) from exc
        definitions[id_factory()] = entry.build(name)
    logger.info("Loaded %d parameter(s) from %s", len(definitions), path)
    return definitions


def load_message_catalog(path: str) -> MessageCatalog:
    """Load message overrides.

    Expected format:
    messages:
      missing_name: Please name this parameter.
    """
    if not os.path.exists(path):
        raise LoaderError(path, "Message file not found")
    data = _read_yaml_file(path)
    try:
        spec = MessagesFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid message file", cause=exc) from exc
    return MessageCatalog(messages=spec.messages)


__all__ = ["load_parameters", "load_message_catalog"]
