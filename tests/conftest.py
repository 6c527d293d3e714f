"""
Shared fixtures for workflow parameter tests.
"""

import itertools

import pytest

from workflow_params.core.models import ParameterPatch, ParameterUpdateEvent
from workflow_params.core.store import ParameterStore


@pytest.fixture
def id_factory():
    """Deterministic ids: p1, p2, ..."""
    counter = itertools.count(1)
    return lambda: f"p{next(counter)}"


@pytest.fixture
def store(id_factory) -> ParameterStore:
    return ParameterStore(id_factory=id_factory)


def make_update(parameter_id: str, use_legacy: bool = False, **fields) -> ParameterUpdateEvent:
    """Build an update event from snake_case patch fields."""
    return ParameterUpdateEvent(
        id=parameter_id,
        new_definition=ParameterPatch(**fields),
        use_legacy=use_legacy,
    )
