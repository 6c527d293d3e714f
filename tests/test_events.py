"""Tests for lifecycle triggers delivered through WorkflowEvents."""

import pytest
from conftest import make_update

from workflow_params.core.events import WorkflowEvents
from workflow_params.core.models import ParameterDefinition, ParameterStoreState, UndoRedoSnapshot
from workflow_params.core.store import ParameterStore
from workflow_params.core.types import ParameterType


class TestStoreSubscription:
    """A store constructed with events follows the application triggers."""

    def test_reset_all_clears_store(self, id_factory):
        events = WorkflowEvents()
        store = ParameterStore(id_factory=id_factory, events=events)
        store.add_parameter()
        store.update_parameter(make_update("p1", name="", type=ParameterType.ARRAY, value=""))

        events.reset_all()

        assert store.state == ParameterStoreState()

    def test_restore_snapshot_replaces_store(self):
        events = WorkflowEvents()
        store = ParameterStore(events=events)
        snapshot = UndoRedoSnapshot(
            workflow_parameters=ParameterStoreState(
                definitions={"a": ParameterDefinition(name="a", type=ParameterType.STRING, value="1")},
                is_dirty=True,
            )
        )

        events.restore_snapshot(snapshot)

        assert store.state == snapshot.workflow_parameters

    def test_every_store_is_notified(self):
        events = WorkflowEvents()
        stores = [ParameterStore(events=events) for _ in range(3)]
        for store in stores:
            store.add_parameter()

        events.reset_all()

        assert all(store.definitions == {} for store in stores)

    def test_detach_stops_notifications(self):
        events = WorkflowEvents()
        store = ParameterStore(events=events)
        store.add_parameter()

        store.detach()
        events.reset_all()

        assert len(store.definitions) == 1

    def test_attach_moves_subscription(self):
        first, second = WorkflowEvents(), WorkflowEvents()
        store = ParameterStore(events=first)
        store.add_parameter()

        store.attach(second)
        first.reset_all()
        assert len(store.definitions) == 1

        second.reset_all()
        assert store.definitions == {}


class TestDispatcher:
    """Tests for callback bookkeeping."""

    def test_callbacks_fire_in_registration_order(self):
        events = WorkflowEvents()
        order = []
        events.add_reset_callback(lambda: order.append("first"))
        events.add_reset_callback(lambda: order.append("second"))

        events.reset_all()

        assert order == ["first", "second"]

    def test_duplicate_registration_ignored(self):
        events = WorkflowEvents()
        received = []
        callback = received.append

        events.add_restore_callback(callback)
        events.add_restore_callback(callback)
        events.restore_snapshot(UndoRedoSnapshot())

        assert len(received) == 1

    def test_remove_unknown_callback_is_noop(self):
        events = WorkflowEvents()
        events.remove_reset_callback(lambda: None)
        events.remove_restore_callback(lambda snapshot: None)
        events.reset_all()

    def test_subscriber_errors_propagate(self):
        events = WorkflowEvents()

        def broken():
            raise RuntimeError("boom")

        events.add_reset_callback(broken)

        with pytest.raises(RuntimeError, match="boom"):
            events.reset_all()
