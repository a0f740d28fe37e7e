"""
Service event recording mixin.

Provides the bind/take/call/leak hooks for the EventRecorder.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bridgetrace.events.base import EventType

if TYPE_CHECKING:
    from bridgetrace.events.services import Call, CallResult, Service


class ServiceEventsMixin:
    """Mixin providing service event hooks."""

    def bind_service(self, engine: Any, name: str, service: Service) -> None:
        """Record a service binding."""
        self._record(EventType.BIND_SERVICE, name, service=service, service_name=name)

    def take_service(self, engine: Any, name: str, service: Service) -> None:
        """Record a service take."""
        self._record(EventType.TAKE_SERVICE, name, service=service, service_name=name)

    def call_start(self, engine: Any, call: Call) -> int:
        """Record a call start and return its correlation id."""
        call_id = self._next_call_id
        self._next_call_id += 1
        self._record(
            EventType.CALL_START,
            call_id,
            call.service_name,
            call.function_name,
            list(call.args),
            service=call.service,
            service_name=call.service_name,
        )
        return call_id

    def call_end(self, engine: Any, call: Call, result: CallResult, start_value: Any) -> None:
        """Record a call end, echoing the id returned by call_start."""
        self._record(
            EventType.CALL_END,
            start_value,
            call.service_name,
            call.function_name,
            list(call.args),
            result,
            service=call.service,
            service_name=call.service_name,
        )

    def service_leaked(self, engine: Any, name: str) -> None:
        # Leaks only carry a name; the handle is already gone.
        self._record(EventType.SERVICE_LEAKED, name, service_name=name)
