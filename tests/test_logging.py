import logging

import pytest
from conftest import make_update
from pydantic import ValidationError

from workflow_params.core.models import SECRET_MASK, ParameterDefinition
from workflow_params.core.store import ParameterStore
from workflow_params.core.types import ParameterType
from workflow_params.utils.logging import log_calls


def test_store_commands_logged_without_instance(caplog):
    store = ParameterStore(id_factory=lambda: "p1")

    with caplog.at_level(logging.DEBUG, logger="workflow_params.core.store"):
        store.delete_parameter("gone")

    messages = [record.getMessage() for record in caplog.records]
    assert "ParameterStore.delete_parameter args=('gone',) kwargs={}" in messages


def test_failures_are_logged_and_reraised(caplog):
    @log_calls("workflow_params.tests")
    def explode():
        raise ValueError("nope")

    with caplog.at_level(logging.DEBUG, logger="workflow_params.tests"):
        with pytest.raises(ValueError):
            explode()

    assert any(record.levelno == logging.ERROR for record in caplog.records)


class TestSecretMasking:
    """Secure parameter values never reach the call log."""

    SECRET = "hunter2"

    def _logged(self, caplog) -> str:
        return "\n".join(record.getMessage() for record in caplog.records)

    def test_update_event_is_masked(self, caplog):
        store = ParameterStore()
        event = make_update("p", name="password", type=ParameterType.SECURE_STRING, value=self.SECRET)

        with caplog.at_level(logging.DEBUG, logger="workflow_params.core.store"):
            store.update_parameter(event)

        logged = self._logged(caplog)
        assert "ParameterStore.update_parameter" in logged
        assert SECRET_MASK in logged
        assert self.SECRET not in logged

    def test_editor_payload_is_masked(self, caplog):
        store = ParameterStore()
        payload = {
            "id": "p",
            "newDefinition": {"name": "token", "type": "secureobject", "value": '{"key": "%s"}' % self.SECRET},
            "useLegacy": True,
        }

        with caplog.at_level(logging.DEBUG, logger="workflow_params.core.store"):
            store.update_parameter(payload)

        assert self.SECRET not in self._logged(caplog)
        assert store.definitions["p"].value == '{"key": "%s"}' % self.SECRET

    def test_initialized_definitions_are_masked(self, caplog):
        store = ParameterStore()
        definitions = {
            "a": ParameterDefinition(name="a", type=ParameterType.SECURE_STRING, value=self.SECRET),
            "b": {"name": "b", "type": "SecureString", "defaultValue": self.SECRET},
            "c": {"name": "c", "type": "String", "value": "visible"},
        }

        with caplog.at_level(logging.DEBUG, logger="workflow_params.core.store"):
            store.initialize_parameters(definitions)

        logged = self._logged(caplog)
        assert self.SECRET not in logged
        assert "visible" in logged

    def test_invalid_payload_error_hides_secret(self, caplog):
        store = ParameterStore()
        payload = {"id": "p", "newDefinition": {"type": "SecureString", "value": [self.SECRET]}}

        with caplog.at_level(logging.DEBUG, logger="workflow_params.core.store"):
            with pytest.raises(ValidationError) as excinfo:
                store.update_parameter(payload)

        assert self.SECRET not in str(excinfo.value)
        assert self.SECRET not in caplog.text

    def test_model_repr_masks_secure_values(self):
        definition = ParameterDefinition(name="a", type=ParameterType.SECURE_OBJECT, value="{}", default_value="{}")
        plain = ParameterDefinition(name="b", type=ParameterType.STRING, value="shown")

        assert "value='***'" in repr(definition)
        assert "default_value='***'" in repr(definition)
        assert "value='shown'" in repr(plain)
