"""Application-level lifecycle triggers: whole-app reset and undo/redo restore."""

from __future__ import annotations

import logging
from typing import Callable, List

from workflow_params.core.models import UndoRedoSnapshot

logger = logging.getLogger(__name__)

ResetCallback = Callable[[], None]
RestoreCallback = Callable[[UndoRedoSnapshot], None]


class WorkflowEvents:
    """
    Dispatcher for lifecycle triggers shared across application state slices.

    Subscribers register callbacks and are notified in registration order.
    Not thread-safe; all triggers are expected on the application's main thread.
    """

    def __init__(self) -> None:
        self._on_reset_callbacks: List[ResetCallback] = []
        self._on_restore_callbacks: List[RestoreCallback] = []

    def add_reset_callback(self, callback: ResetCallback) -> None:
        """Subscribe to whole-app reset."""
        if callback not in self._on_reset_callbacks:
            self._on_reset_callbacks.append(callback)

    def remove_reset_callback(self, callback: ResetCallback) -> None:
        if callback in self._on_reset_callbacks:
            self._on_reset_callbacks.remove(callback)

    def add_restore_callback(self, callback: RestoreCallback) -> None:
        """Subscribe to undo/redo snapshot restore."""
        if callback not in self._on_restore_callbacks:
            self._on_restore_callbacks.append(callback)

    def remove_restore_callback(self, callback: RestoreCallback) -> None:
        if callback in self._on_restore_callbacks:
            self._on_restore_callbacks.remove(callback)

    def reset_all(self) -> None:
        logger.info("Resetting %d subscriber(s)", len(self._on_reset_callbacks))
        for callback in list(self._on_reset_callbacks):
            callback()

    def restore_snapshot(self, snapshot: UndoRedoSnapshot) -> None:
        logger.info("Restoring snapshot to %d subscriber(s)", len(self._on_restore_callbacks))
        for callback in list(self._on_restore_callbacks):
            callback(snapshot)


__all__ = ["WorkflowEvents", "ResetCallback", "RestoreCallback"]
