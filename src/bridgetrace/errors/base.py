"""Base exception hierarchy for bridgetrace.

Two-tier exception hierarchy:

1. BridgetraceBaseException - Base for all errors
2. BridgetraceError - Standard errors raised by the recorder and its config
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bridgetrace.error_codes import ErrorCode


class BridgetraceBaseException(Exception):  # noqa: N818 - intentional base exception name
    """Base exception for all bridgetrace errors.

    Attributes:
        code: Numeric error code for programmatic handling
        error_code: Semantic ErrorCode for categorization
        cause: Optional original exception that caused this error
    """

    code: int = 0
    _error_code: ErrorCode | None = None

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        cause: BaseException | None = None,
        error_code: ErrorCode | None = None,
    ) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code
        self.cause = cause
        if error_code is not None:
            self._error_code = error_code

    @property
    def error_code(self) -> ErrorCode:
        """Get the semantic error code for this exception."""
        if self._error_code is not None:
            return self._error_code
        from bridgetrace.error_codes import ErrorCode

        return ErrorCode.UNKNOWN

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.code:
            parts.append(f"(code={self.code})")
        if self.cause:
            parts.append(f"caused by: {self.cause}")
        return " ".join(parts)


class BridgetraceError(BridgetraceBaseException):
    """Standard bridgetrace error.

    All normal library errors inherit from this.
    """

    code: int = 100

    @property
    def error_code(self) -> ErrorCode:
        """Get the semantic error code for this exception."""
        if self._error_code is not None:
            return self._error_code
        from bridgetrace.error_codes import ErrorCode

        return ErrorCode.SYSTEM_ERROR
