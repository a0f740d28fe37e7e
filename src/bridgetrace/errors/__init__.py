"""bridgetrace error hierarchy.

All error classes are re-exported here. Import from ``bridgetrace.errors``.
"""

from bridgetrace.errors.base import BridgetraceBaseException, BridgetraceError
from bridgetrace.errors.recorder import ConfigurationError, LogUnderflowError

__all__ = [
    "BridgetraceBaseException",
    "BridgetraceError",
    "ConfigurationError",
    "LogUnderflowError",
]
