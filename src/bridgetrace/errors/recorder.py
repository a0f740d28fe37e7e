"""Errors raised while consuming or configuring an event recorder."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bridgetrace.errors.base import BridgetraceError

if TYPE_CHECKING:
    from bridgetrace.error_codes import ErrorCode


class LogUnderflowError(BridgetraceError, AssertionError):
    """No matching entry was left in the event log.

    Raised by ``take`` and ``take_exception`` once the log runs out before
    a matching entry is found. This is an assertion failure in the calling
    test: the event that test expected never happened, or happened fewer
    times than expected.

    Attributes:
        discarded: Number of non-matching entries dropped during the scan.
    """

    code: int = 201

    def __init__(self, message: str, discarded: int = 0) -> None:
        super().__init__(message)
        self.discarded = discarded

    @property
    def error_code(self) -> ErrorCode:
        """Get the semantic error code for this exception."""
        if self._error_code is not None:
            return self._error_code
        from bridgetrace.error_codes import ErrorCode

        return ErrorCode.LOG_UNDERFLOW


class ConfigurationError(BridgetraceError):
    """Invalid configuration.

    Raised when recorder settings loaded from the environment cannot be
    parsed.
    """

    code: int = 104

    def __init__(self, message: str, variable: str | None = None) -> None:
        super().__init__(message)
        self.variable = variable

    @property
    def error_code(self) -> ErrorCode:
        """Get the semantic error code for this exception."""
        if self._error_code is not None:
            return self._error_code
        from bridgetrace.error_codes import ErrorCode

        return ErrorCode.CONFIGURATION_INVALID
