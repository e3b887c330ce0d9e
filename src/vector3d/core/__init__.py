"""Configuration and logging shared by vector3d modules."""

from vector3d.core.config import ConfigError, ConfigLoader
from vector3d.core.logging_system import (
    LoggingError,
    get_logger,
    initialize_logging,
    shutdown_logging,
)

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "LoggingError",
    "get_logger",
    "initialize_logging",
    "shutdown_logging",
]
