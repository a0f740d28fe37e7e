"""
bridgetrace - deterministic lifecycle event recorder for bridge tests.

This package records every notification an instrumented call-interception
layer emits and lets tests assert on the exact sequence:
- Ordered, immutable log entries, one per hook call
- Call start/end correlation ids
- Internal-service classification for framework plumbing
- Destructive, filtered consumption (take, take_exception, take_all)
"""

__version__ = "0.1.0"

from bridgetrace.events import (
    INTERNAL_SERVICE_PREFIX,
    Call,
    CallResult,
    CancelCallback,
    EntryFilter,
    EventListener,
    EventRecorder,
    EventType,
    LogEntry,
    Service,
    SuspendCallback,
    is_internal,
)

from bridgetrace.config import RecorderConfig, get_recorder_config, reset_recorder_config
from bridgetrace.error_codes import ErrorCode, classify_error
from bridgetrace.errors import (
    BridgetraceBaseException,
    BridgetraceError,
    ConfigurationError,
    LogUnderflowError,
)

__all__ = [
    "__version__",
    # Events
    "EventRecorder",
    "EventListener",
    "EventType",
    "LogEntry",
    "EntryFilter",
    # Bridge payloads
    "Call",
    "CallResult",
    "Service",
    "CancelCallback",
    "SuspendCallback",
    "INTERNAL_SERVICE_PREFIX",
    "is_internal",
    # Configuration
    "RecorderConfig",
    "get_recorder_config",
    "reset_recorder_config",
    # Errors
    "BridgetraceBaseException",
    "BridgetraceError",
    "ConfigurationError",
    "LogUnderflowError",
    "ErrorCode",
    "classify_error",
]
