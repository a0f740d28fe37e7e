"""
Engine event recording mixin.

Provides module load and engine lifecycle hooks for the EventRecorder.
"""

from __future__ import annotations

from typing import Any

from bridgetrace.events.base import EventType


class EngineEventsMixin:
    """Mixin providing module and engine hooks."""

    def module_load_start(self, engine: Any, module_id: str) -> None:
        """Record a module load start. No correlation value is needed."""
        self._record(EventType.MODULE_LOAD_START, module_id, module_id=module_id)
        return None

    def module_load_end(self, engine: Any, module_id: str, start_value: Any) -> None:
        """Record a module load end."""
        self._record(EventType.MODULE_LOAD_END, module_id, module_id=module_id)

    def engine_created(self, engine: Any) -> None:
        self._record(EventType.ENGINE_CREATED)

    def engine_closed(self, engine: Any) -> None:
        self._record(EventType.ENGINE_CLOSED)
