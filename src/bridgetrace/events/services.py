"""
Bridge payload types.

The interception layer hands the recorder service handles, calls and call
results. Their identities are opaque; the recorder only needs to tell
framework plumbing apart from user services and render them as text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

# Reserved namespace for services the bridge binds for its own plumbing.
INTERNAL_SERVICE_PREFIX = "zipline/"


class Service:
    """Base class for objects bound across the bridge."""

    def close(self) -> None:
        """Release the service. The default does nothing."""


class CancelCallback(Service, ABC):
    """Marker for the service that carries cancellation of a suspended call."""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel the call this callback belongs to."""


class SuspendCallback(Service, ABC):
    """Marker for the service that resumes a suspended call with its result."""

    @abstractmethod
    def success(self, result: Any) -> None:
        """Resume the suspended call with a value."""

    @abstractmethod
    def failure(self, exception: BaseException) -> None:
        """Resume the suspended call with an error."""


_INTERNAL_MARKERS: tuple[type[Service], ...] = (CancelCallback, SuspendCallback)


def is_internal(
    service_name: str | None,
    service: object | None,
    prefix: str = INTERNAL_SERVICE_PREFIX,
) -> bool:
    """Tell whether a service is framework plumbing rather than user code.

    Args:
        service_name: Name the service is bound under, if known.
        service: The service handle, if the event carries one.
        prefix: Reserved namespace for internal service names.

    Returns:
        True if the handle implements one of the internal marker
        interfaces, or if the name starts with the reserved prefix.
    """
    if service is not None and isinstance(service, _INTERNAL_MARKERS):
        return True
    return service_name is not None and service_name.startswith(prefix)


def render_value(value: Any) -> str:
    """Render a payload value for a log message."""
    if value is None:
        return "null"
    if isinstance(value, BaseException):
        detail = str(value)
        return f"{type(value).__name__}: {detail}" if detail else type(value).__name__
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(render_value(item) for item in value) + "]"
    return str(value)


@dataclass(frozen=True)
class Call:
    """A single outbound call through the bridge.

    Attributes:
        service_name: Name the target service is bound under.
        function_name: Name of the function being invoked.
        args: Positional arguments, already decoded.
        service: The target service handle, when one is available.
    """

    service_name: str
    function_name: str
    args: Sequence[Any] = field(default_factory=tuple)
    service: Service | None = None


@dataclass(frozen=True)
class CallResult:
    """Outcome of a call: either a value or a failure."""

    value: Any = None
    failure: BaseException | None = None

    @classmethod
    def success(cls, value: Any) -> CallResult:
        return cls(value=value)

    @classmethod
    def of_failure(cls, failure: BaseException) -> CallResult:
        return cls(failure=failure)

    @property
    def is_success(self) -> bool:
        return self.failure is None

    def __str__(self) -> str:
        if self.failure is not None:
            return f"Failure({render_value(self.failure)})"
        return f"Success({render_value(self.value)})"
