"""
pytest integration for bridgetrace.

Installed as a pytest plugin through the ``pytest11`` entry point, so any
test can request a fresh recorder:

    def test_greeting(event_recorder):
        bridge = Bridge(event_listener=event_recorder)
        bridge.bind("greeter", Greeter())
        assert event_recorder.take() == "bindService greeter"
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from bridgetrace.config import get_recorder_config
from bridgetrace.events.recorder import EventRecorder


@pytest.fixture
def event_recorder() -> Generator[EventRecorder, None, None]:
    """A recorder scoped to one test. Unconsumed entries are dropped at teardown."""
    recorder = EventRecorder(get_recorder_config())
    yield recorder
