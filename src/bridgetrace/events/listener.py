"""
Hook surface of the interception layer.

The bridge calls exactly one hook per lifecycle event. Hooks that open a
span (call, application load, download, module load) return a start value;
the bridge passes it back unchanged to the matching end hook.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bridgetrace.events.services import Call, CallResult, Service


class EventListener:
    """Receives lifecycle notifications from the bridge. Every hook is a no-op here."""

    def bind_service(self, engine: Any, name: str, service: Service) -> None:
        """A service was bound under ``name`` for the other side to call."""

    def take_service(self, engine: Any, name: str, service: Service) -> None:
        """A service bound by the other side was taken under ``name``."""

    def call_start(self, engine: Any, call: Call) -> Any:
        """A call is about to be made. The return value is passed to call_end."""
        return None

    def call_end(self, engine: Any, call: Call, result: CallResult, start_value: Any) -> None:
        """A call returned or failed."""

    def service_leaked(self, engine: Any, name: str) -> None:
        """A service was garbage collected without being closed."""

    def application_load_start(self, application_name: str, manifest_url: str | None) -> Any:
        """An application load began. ``manifest_url`` is None for embedded loads."""
        return None

    def application_load_success(
        self,
        application_name: str,
        manifest_url: str | None,
        engine: Any,
        start_value: Any,
    ) -> None:
        """An application finished loading."""

    def application_load_skipped(
        self,
        application_name: str,
        manifest_url: str,
        start_value: Any,
    ) -> None:
        """An application load was skipped because the code is unchanged."""

    def application_load_failed(
        self,
        application_name: str,
        manifest_url: str | None,
        exception: BaseException,
        start_value: Any,
    ) -> None:
        """An application failed to load."""

    def download_start(self, application_name: str, url: str) -> Any:
        """A download began. The return value is passed to the end hooks."""
        return None

    def download_end(self, application_name: str, url: str, start_value: Any) -> None:
        """A download completed."""

    def download_failed(
        self,
        application_name: str,
        url: str,
        exception: BaseException,
        start_value: Any,
    ) -> None:
        """A download failed."""

    def manifest_parse_failed(
        self,
        application_name: str,
        url: str | None,
        exception: BaseException,
    ) -> None:
        """A downloaded manifest could not be parsed."""

    def module_load_start(self, engine: Any, module_id: str) -> Any:
        """A module started loading. The return value is passed to module_load_end."""
        return None

    def module_load_end(self, engine: Any, module_id: str, start_value: Any) -> None:
        """A module finished loading."""

    def engine_created(self, engine: Any) -> None:
        """An engine instance was created."""

    def engine_closed(self, engine: Any) -> None:
        """An engine instance was closed."""
