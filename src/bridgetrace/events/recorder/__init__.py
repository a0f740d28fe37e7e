"""
Event recorder.

Records every lifecycle event the bridge reports and serves destructive,
in-order consumption for test assertions.
"""

from bridgetrace.events.recorder.composed import EventRecorder

__all__ = [
    "EventRecorder",
]
