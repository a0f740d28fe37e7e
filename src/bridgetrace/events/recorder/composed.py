"""
Composed EventRecorder class.

Combines the hook mixins with the log infrastructure into the recorder
the bridge is handed as its EventListener.
"""

from __future__ import annotations

from bridgetrace.events.listener import EventListener
from bridgetrace.events.recorder.application_events import ApplicationEventsMixin
from bridgetrace.events.recorder.base import EventRecorderBase
from bridgetrace.events.recorder.engine_events import EngineEventsMixin
from bridgetrace.events.recorder.service_events import ServiceEventsMixin


class EventRecorder(
    ServiceEventsMixin,
    ApplicationEventsMixin,
    EngineEventsMixin,
    EventRecorderBase,
    EventListener,
):
    """
    Records every lifecycle event as an ordered, consumable log entry.

    Each hook appends exactly one entry before returning. Tests then
    consume the log from the head with take, take_exception and take_all.

    Example:
        recorder = EventRecorder()
        bridge = Bridge(event_listener=recorder)
        bridge.bind("greeter", Greeter())
        assert recorder.take() == "bindService greeter"
    """
