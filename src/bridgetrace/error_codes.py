"""
Structured error codes for bridgetrace.

Provides semantic classification for the few failures the recorder can
raise, so test helpers can branch on a code instead of a class name.

Usage:
    from bridgetrace.error_codes import ErrorCode, classify_error

    try:
        recorder.take()
    except Exception as e:
        if classify_error(e) == ErrorCode.LOG_UNDERFLOW:
            ...
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Semantic error codes for categorizing exceptions."""

    # General errors
    UNKNOWN = "UNKNOWN"
    SYSTEM_ERROR = "SYSTEM_ERROR"

    # Consumption errors
    LOG_UNDERFLOW = "LOG_UNDERFLOW"

    # Configuration errors
    CONFIGURATION_INVALID = "CONFIGURATION_INVALID"


def classify_error(error: BaseException) -> ErrorCode:
    """Return the semantic code for an error.

    bridgetrace exceptions carry their own code; anything else is UNKNOWN.
    """
    from bridgetrace.errors.base import BridgetraceBaseException

    if isinstance(error, BridgetraceBaseException):
        return error.error_code
    return ErrorCode.UNKNOWN
