"""Recorder configuration.

Settings control how services are classified and which entries the
consumption calls skip when a test does not pass its own filter.

Environment Variables:
    BRIDGETRACE_INTERNAL_PREFIX: Reserved namespace for internal services (default: zipline/)
    BRIDGETRACE_SKIP_MODULE_EVENTS: Skip module load entries by default (default: false)
    BRIDGETRACE_SKIP_SERVICE_EVENTS: Skip service entries by default (default: false)
    BRIDGETRACE_SKIP_APPLICATION_EVENTS: Skip application entries by default (default: false)
    BRIDGETRACE_SKIP_INTERNAL_SERVICES: Skip internal service entries by default (default: true)
    BRIDGETRACE_LOG_ENTRIES: Debug-log every recorded entry (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from bridgetrace.errors import ConfigurationError
from bridgetrace.events.base import EntryFilter
from bridgetrace.events.services import INTERNAL_SERVICE_PREFIX

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass
class RecorderConfig:
    """Configuration for an EventRecorder.

    Attributes:
        internal_service_prefix: Service names starting with this are internal.
        default_filter: Filter used by take/take_all when none is passed.
        log_entries: Emit a debug log line for every recorded entry.
    """

    internal_service_prefix: str = INTERNAL_SERVICE_PREFIX
    default_filter: EntryFilter = field(default_factory=EntryFilter)
    log_entries: bool = False

    @classmethod
    def from_env(cls) -> RecorderConfig:
        """Load configuration from environment variables.

        Returns:
            RecorderConfig with values from environment or defaults

        Raises:
            ConfigurationError: If a boolean variable holds an unrecognized value.
        """
        defaults = EntryFilter()
        return cls(
            internal_service_prefix=os.getenv("BRIDGETRACE_INTERNAL_PREFIX", INTERNAL_SERVICE_PREFIX),
            default_filter=EntryFilter(
                skip_module_events=_parse_bool_env(
                    "BRIDGETRACE_SKIP_MODULE_EVENTS", defaults.skip_module_events
                ),
                skip_service_events=_parse_bool_env(
                    "BRIDGETRACE_SKIP_SERVICE_EVENTS", defaults.skip_service_events
                ),
                skip_application_events=_parse_bool_env(
                    "BRIDGETRACE_SKIP_APPLICATION_EVENTS", defaults.skip_application_events
                ),
                skip_internal_services=_parse_bool_env(
                    "BRIDGETRACE_SKIP_INTERNAL_SERVICES", defaults.skip_internal_services
                ),
            ),
            log_entries=_parse_bool_env("BRIDGETRACE_LOG_ENTRIES", False),
        )


def _parse_bool_env(name: str, default: bool) -> bool:
    """Parse a boolean from an environment variable.

    Args:
        name: Environment variable name
        default: Value when the variable is unset or empty

    Returns:
        Parsed boolean
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}", variable=name)


_default_recorder_config: RecorderConfig | None = None


def get_recorder_config() -> RecorderConfig:
    """Get the default RecorderConfig, loading from environment on first call.

    Returns:
        The cached RecorderConfig instance
    """
    global _default_recorder_config
    if _default_recorder_config is None:
        _default_recorder_config = RecorderConfig.from_env()
    return _default_recorder_config


def reset_recorder_config() -> None:
    """Drop the cached config so the next call re-reads the environment (for testing)."""
    global _default_recorder_config
    _default_recorder_config = None
