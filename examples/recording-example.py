#!/usr/bin/env python3
"""
Recording Example - Demonstrates asserting on bridge lifecycle events.

This example shows how to:
1. Hand an EventRecorder to a bridge as its event listener
2. Consume events in order with take()
3. Filter out module and internal plumbing events
4. Retrieve a captured failure with take_exception()

Requirements:
    structlog

Run with:
    python examples/recording-example.py
"""

import logging
from typing import Any

from bridgetrace import (
    Call,
    CallResult,
    CancelCallback,
    EventListener,
    EventRecorder,
    RecorderConfig,
    Service,
)
from bridgetrace.logging import configure_logging

configure_logging(level=logging.DEBUG)

# =============================================================================
# A toy bridge that reports its lifecycle to an EventListener
# =============================================================================


class Greeter(Service):
    def greet(self, name: str) -> str:
        return f"Hello, {name}"


class PendingCancel(CancelCallback):
    def cancel(self) -> None:
        pass


class ToyBridge:
    """Dispatches calls to bound services and reports every step."""

    def __init__(self, event_listener: EventListener) -> None:
        self.listener = event_listener
        self.services: dict[str, Service] = {}
        self.listener.engine_created(self)

    def load(self, application_name: str, modules: list[str]) -> None:
        start = self.listener.application_load_start(application_name, None)
        for module_id in modules:
            module_start = self.listener.module_load_start(self, module_id)
            self.listener.module_load_end(self, module_id, module_start)
        self.listener.application_load_success(application_name, None, self, start)

    def bind(self, name: str, service: Service) -> None:
        self.services[name] = service
        self.listener.bind_service(self, name, service)

    def call(self, name: str, function_name: str, *args: Any) -> Any:
        service = self.services[name]
        call = Call(name, function_name, list(args), service)
        start = self.listener.call_start(self, call)
        try:
            value = getattr(service, function_name)(*args)
        except Exception as e:
            self.listener.call_end(self, call, CallResult.of_failure(e), start)
            raise
        self.listener.call_end(self, call, CallResult.success(value), start)
        return value

    def download(self, application_name: str, url: str) -> None:
        start = self.listener.download_start(application_name, url)
        self.listener.download_failed(application_name, url, ConnectionError("unreachable"), start)

    def close(self) -> None:
        self.listener.engine_closed(self)


def main() -> None:
    recorder = EventRecorder(RecorderConfig(log_entries=True))
    bridge = ToyBridge(recorder)

    bridge.load("greeter-app", ["greeter.js", "runtime.js"])
    bridge.bind("greeter", Greeter())
    bridge.bind("zipline/cancel/1", PendingCancel())
    bridge.call("greeter", "greet", "Jesse")
    bridge.download("greeter-app", "https://example.com/greeter.js")
    bridge.close()

    assert recorder.take() == "ziplineCreated"
    assert recorder.take_all(skip_module_events=True, skip_application_events=True) == [
        "bindService greeter",
        "callStart 1 greeter greet [Jesse]",
        "callEnd 1 greeter greet [Jesse] Success(Hello, Jesse)",
        "ziplineClosed",
    ]

    bridge = ToyBridge(recorder)
    bridge.download("greeter-app", "https://example.com/greeter.js")
    failure = recorder.take_exception()
    print(f"captured failure: {failure!r}")


if __name__ == "__main__":
    main()
