"""
Event log base types.

Every hook invocation becomes one immutable LogEntry. Entries carry the
identifiers the consumption filters look at (module, service, application),
the internal-service flag computed when the entry was appended, and an
optional captured failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EventType(Enum):
    """
    All lifecycle events the interception layer reports.

    The value is the word that opens the rendered message.
    """

    # Service lifecycle
    BIND_SERVICE = "bindService"
    TAKE_SERVICE = "takeService"
    CALL_START = "callStart"
    CALL_END = "callEnd"
    SERVICE_LEAKED = "serviceLeaked"

    # Application lifecycle
    APPLICATION_LOAD_START = "applicationLoadStart"
    APPLICATION_LOAD_SUCCESS = "applicationLoadSuccess"
    APPLICATION_LOAD_SKIPPED = "applicationLoadSkipped"
    APPLICATION_LOAD_FAILED = "applicationLoadFailed"
    DOWNLOAD_START = "downloadStart"
    DOWNLOAD_END = "downloadEnd"
    DOWNLOAD_FAILED = "downloadFailed"
    MANIFEST_PARSE_FAILED = "manifestParseFailed"

    # Engine lifecycle
    MODULE_LOAD_START = "moduleLoadStart"
    MODULE_LOAD_END = "moduleLoadEnd"
    ENGINE_CREATED = "ziplineCreated"
    ENGINE_CLOSED = "ziplineClosed"


@dataclass(frozen=True)
class EntryFilter:
    """
    Exclusion switches applied when consuming the log.

    An entry is skipped when ANY enabled switch matches it.

    Attributes:
        skip_module_events: Skip entries tied to a module load.
        skip_service_events: Skip entries tied to a named service
            (bind, take, call, leak).
        skip_application_events: Skip entries tied to an application
            (load, download, manifest).
        skip_internal_services: Skip entries for framework plumbing services.
    """

    skip_module_events: bool = False
    skip_service_events: bool = False
    skip_application_events: bool = False
    skip_internal_services: bool = True

    @classmethod
    def everything(cls) -> EntryFilter:
        """A filter that skips nothing."""
        return cls(skip_internal_services=False)


@dataclass(frozen=True)
class LogEntry:
    """
    Immutable record of one observed event.

    Attributes:
        event_type: Which hook produced this entry.
        message: Rendered description, starting with the event type value.
        module_id: Set only for module load events.
        service_name: Set for events tied to a named service.
        application_name: Set for application and download events.
        is_internal_service: Whether the service is framework plumbing.
        failure: Captured error for failure events, stored verbatim.
    """

    event_type: EventType
    message: str
    module_id: str | None = None
    service_name: str | None = None
    application_name: str | None = None
    is_internal_service: bool = False
    failure: BaseException | None = None

    def matches(self, entry_filter: EntryFilter) -> bool:
        """Return True unless an enabled switch of the filter excludes this entry."""
        skip = (
            (entry_filter.skip_module_events and self.module_id is not None)
            or (entry_filter.skip_service_events and self.service_name is not None)
            or (entry_filter.skip_application_events and self.application_name is not None)
            or (entry_filter.skip_internal_services and self.is_internal_service)
        )
        return not skip
