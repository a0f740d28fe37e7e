"""Shared pytest fixtures and bridge doubles."""

from collections.abc import Generator
from typing import Any

import pytest

from bridgetrace.config import RecorderConfig, reset_recorder_config
from bridgetrace.events import CancelCallback, EventRecorder, Service, SuspendCallback
from bridgetrace.testing import event_recorder  # noqa: F401

ENV_VARS = (
    "BRIDGETRACE_INTERNAL_PREFIX",
    "BRIDGETRACE_SKIP_MODULE_EVENTS",
    "BRIDGETRACE_SKIP_SERVICE_EVENTS",
    "BRIDGETRACE_SKIP_APPLICATION_EVENTS",
    "BRIDGETRACE_SKIP_INTERNAL_SERVICES",
    "BRIDGETRACE_LOG_ENTRIES",
)


@pytest.fixture(autouse=True)
def clean_recorder_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate every test from ambient BRIDGETRACE_* settings."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_recorder_config()
    yield
    reset_recorder_config()


# =============================================================================
# Bridge doubles
# =============================================================================


class EchoService(Service):
    """A user service."""

    def echo(self, message: str) -> str:
        return message


class RecordingCancelCallback(CancelCallback):
    """Framework cancellation plumbing."""

    def __init__(self) -> None:
        self.canceled = False

    def cancel(self) -> None:
        self.canceled = True


class RecordingSuspendCallback(SuspendCallback):
    """Framework suspend plumbing."""

    def __init__(self) -> None:
        self.results: list[Any] = []

    def success(self, result: Any) -> None:
        self.results.append(result)

    def failure(self, exception: BaseException) -> None:
        self.results.append(exception)


ENGINE = object()


@pytest.fixture
def recorder() -> EventRecorder:
    """A recorder with default settings."""
    return EventRecorder(RecorderConfig())
