"""
Lifecycle events for bridgetrace.

Quick Start:
    from bridgetrace.events import EventRecorder, EntryFilter

    recorder = EventRecorder()
    bridge = Bridge(event_listener=recorder)

    # ... exercise the bridge ...

    assert recorder.take() == "ziplineCreated"
    assert recorder.take_all(skip_module_events=True) == [...]
"""

# Base types
from bridgetrace.events.base import EntryFilter, EventType, LogEntry

# Hook surface
from bridgetrace.events.listener import EventListener

# Event recorder
from bridgetrace.events.recorder import EventRecorder

# Bridge payloads
from bridgetrace.events.services import (
    INTERNAL_SERVICE_PREFIX,
    Call,
    CallResult,
    CancelCallback,
    Service,
    SuspendCallback,
    is_internal,
)

__all__ = [
    # Base types
    "EntryFilter",
    "EventType",
    "LogEntry",
    # Hook surface
    "EventListener",
    # Event recorder
    "EventRecorder",
    # Bridge payloads
    "INTERNAL_SERVICE_PREFIX",
    "Call",
    "CallResult",
    "CancelCallback",
    "Service",
    "SuspendCallback",
    "is_internal",
]
