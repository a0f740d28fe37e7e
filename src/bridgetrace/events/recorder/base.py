"""
EventRecorderBase — core log infrastructure.

Owns the ordered entry log, builds entries in _record, and serves the
destructive consumption calls (take, take_exception, take_all).
"""

from __future__ import annotations

import dataclasses
import itertools
from collections import deque
from typing import TYPE_CHECKING

from bridgetrace.errors import LogUnderflowError
from bridgetrace.events.base import EntryFilter, EventType, LogEntry
from bridgetrace.events.services import Service, is_internal, render_value
from bridgetrace.logging import recorder_logger

if TYPE_CHECKING:
    from bridgetrace.config import RecorderConfig

_recorder_ids = itertools.count(1)


class EventRecorderBase:
    """
    Base class for the event log.

    Entries are appended at the tail by the hook mixins and consumed from
    the head. Nothing is ever re-inserted, and skipped entries are gone.
    Not thread-safe: callers sharing one recorder across threads must
    serialize hooks and consumption themselves.
    """

    def __init__(self, config: RecorderConfig | None = None) -> None:
        """
        Initialize the recorder.

        Args:
            config: Recorder settings. Loaded from the environment if omitted.
        """
        if config is None:
            from bridgetrace.config import get_recorder_config

            config = get_recorder_config()
        self._config = config
        self._log: deque[LogEntry] = deque()
        self._next_call_id = 1
        self.recorder_id = f"recorder-{next(_recorder_ids)}"
        self._logger = recorder_logger(self.recorder_id)

    @property
    def config(self) -> RecorderConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._log)

    def pending(self) -> tuple[LogEntry, ...]:
        """Snapshot of unconsumed entries, for failure diagnostics. Does not consume."""
        return tuple(self._log)

    def _record(
        self,
        event_type: EventType,
        *fields: object,
        module_id: str | None = None,
        service: Service | None = None,
        service_name: str | None = None,
        application_name: str | None = None,
        failure: BaseException | None = None,
    ) -> LogEntry:
        """
        Render and append one entry.

        Args:
            event_type: Hook that produced the event.
            *fields: Payload rendered after the event type, in order.
            module_id: Module id for module load events.
            service: Service handle, when the event carries one.
            service_name: Service name for service events.
            application_name: Application name for application events.
            failure: Captured error, stored verbatim.

        Returns:
            The appended entry.
        """
        message = " ".join([event_type.value, *(render_value(f) for f in fields)])
        entry = LogEntry(
            event_type=event_type,
            message=message,
            module_id=module_id,
            service_name=service_name,
            application_name=application_name,
            is_internal_service=is_internal(
                service_name, service, self._config.internal_service_prefix
            ),
            failure=failure,
        )
        self._log.append(entry)
        if self._config.log_entries:
            self._logger.debug(
                "entry_recorded",
                event_type=event_type.value,
                message=message,
                internal=entry.is_internal_service,
            )
        return entry

    def _resolve_filter(self, entry_filter: EntryFilter | None, switches: dict[str, bool]) -> EntryFilter:
        if entry_filter is not None and not isinstance(entry_filter, EntryFilter):
            raise TypeError(f"entry_filter must be an EntryFilter, got {type(entry_filter).__name__}")
        resolved = entry_filter if entry_filter is not None else self._config.default_filter
        if switches:
            resolved = dataclasses.replace(resolved, **switches)
        return resolved

    def _underflow(self, wanted: str, discarded: int) -> LogUnderflowError:
        self._logger.debug("log_underflow", wanted=wanted, discarded=discarded)
        return LogUnderflowError(
            f"event log exhausted before {wanted} (discarded {discarded} entries)",
            discarded=discarded,
        )

    def take(self, entry_filter: EntryFilter | None = None, **switches: bool) -> str:
        """
        Consume entries up to and including the first match, returning its message.

        Args:
            entry_filter: Filter to apply. Defaults to the configured filter.
            **switches: EntryFilter fields overriding ``entry_filter``.

        Returns:
            Message of the first matching entry.

        Raises:
            LogUnderflowError: If the log runs out before a match.
        """
        resolved = self._resolve_filter(entry_filter, switches)
        discarded = 0
        while self._log:
            entry = self._log.popleft()
            if entry.matches(resolved):
                return entry.message
            discarded += 1
        raise self._underflow("a matching entry", discarded)

    def take_exception(self) -> BaseException:
        """
        Consume entries up to and including the first one that captured a failure.

        Returns:
            The captured failure object, unchanged.

        Raises:
            LogUnderflowError: If the log runs out before a failure entry.
        """
        discarded = 0
        while self._log:
            entry = self._log.popleft()
            if entry.failure is not None:
                return entry.failure
            discarded += 1
        raise self._underflow("a failure entry", discarded)

    def take_all(self, entry_filter: EntryFilter | None = None, **switches: bool) -> list[str]:
        """Drain the log, returning messages of matching entries in order."""
        resolved = self._resolve_filter(entry_filter, switches)
        result = []
        while self._log:
            entry = self._log.popleft()
            if entry.matches(resolved):
                result.append(entry.message)
        return result
