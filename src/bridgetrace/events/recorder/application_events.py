"""
Application event recording mixin.

Provides the application load, download and manifest hooks for the
EventRecorder. Failure hooks keep the captured exception on the entry so
take_exception can hand it back.
"""

from __future__ import annotations

from typing import Any

from bridgetrace.events.base import EventType


class ApplicationEventsMixin:
    """Mixin providing application event hooks."""

    def application_load_start(self, application_name: str, manifest_url: str | None) -> None:
        """Record an application load start."""
        self._record(
            EventType.APPLICATION_LOAD_START,
            application_name,
            manifest_url,
            application_name=application_name,
        )

    def application_load_success(
        self,
        application_name: str,
        manifest_url: str | None,
        engine: Any,
        start_value: Any,
    ) -> None:
        """Record a successful application load."""
        self._record(
            EventType.APPLICATION_LOAD_SUCCESS,
            application_name,
            manifest_url,
            application_name=application_name,
        )

    def application_load_skipped(
        self,
        application_name: str,
        manifest_url: str,
        start_value: Any,
    ) -> None:
        """Record a skipped application load."""
        self._record(
            EventType.APPLICATION_LOAD_SKIPPED,
            application_name,
            manifest_url,
            application_name=application_name,
        )

    def application_load_failed(
        self,
        application_name: str,
        manifest_url: str | None,
        exception: BaseException,
        start_value: Any,
    ) -> None:
        """Record a failed application load."""
        self._record(
            EventType.APPLICATION_LOAD_FAILED,
            application_name,
            exception,
            application_name=application_name,
            failure=exception,
        )

    def download_start(self, application_name: str, url: str) -> None:
        """Record a download start."""
        self._record(EventType.DOWNLOAD_START, application_name, url, application_name=application_name)

    def download_end(self, application_name: str, url: str, start_value: Any) -> None:
        """Record a download end."""
        self._record(EventType.DOWNLOAD_END, application_name, url, application_name=application_name)

    def download_failed(
        self,
        application_name: str,
        url: str,
        exception: BaseException,
        start_value: Any,
    ) -> None:
        """Record a failed download."""
        self._record(
            EventType.DOWNLOAD_FAILED,
            application_name,
            url,
            exception,
            application_name=application_name,
            failure=exception,
        )

    def manifest_parse_failed(
        self,
        application_name: str,
        url: str | None,
        exception: BaseException,
    ) -> None:
        """Record a manifest that could not be parsed."""
        self._record(
            EventType.MANIFEST_PARSE_FAILED,
            application_name,
            url,
            application_name=application_name,
            failure=exception,
        )
