"""Logging setup for vector3d components.

The package never touches the root logger. ``initialize_logging`` attaches
handlers to the ``vector3d`` logger according to a YAML configuration, and
``get_logger`` hands out cached child loggers whose levels can be tuned per
module.

Configuration layout (the ``logging`` section of the YAML file):

    logging:
      level: INFO
      format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
      console:
        enabled: true
        level: WARNING
      file:
        enabled: true
        path: logs/vector3d.log
      modules:
        text_io:
          level: DEBUG

Typical usage example:
    from vector3d.core.logging_system import get_logger, initialize_logging

    initialize_logging("vector3d.yaml")
    log = get_logger("text_io")
    log.debug("Parsed %d components", 3)
"""

import logging
import time
from pathlib import Path
from typing import Any

from vector3d.core.config import ConfigError, ConfigLoader

PACKAGE_LOGGER = "vector3d"

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_installed_handlers: list[logging.Handler] = []
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Returns:
        Default logging configuration dictionary.
    """
    return {
        "level": "WARNING",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "propagate": True,
        "console": {
            "enabled": False,
            "level": "WARNING",
        },
        "file": {
            "enabled": False,
            "path": "vector3d.log",
            "mode": "a",
            "level": "DEBUG",
        },
        "modules": {},
    }


def _resolve_level(name: Any) -> int:
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


def initialize_logging(
    config_path: str | Path | None = None, config: ConfigLoader | None = None
) -> None:
    """Configure the package logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        config_path: YAML file whose ``logging`` section overrides defaults.
        config: Already loaded configuration, used when no path is given.

    Raises:
        LoggingError: If the configuration cannot be loaded or is invalid.
    """
    global _logging_config, _initialized

    if config_path is not None:
        try:
            config = ConfigLoader.load(config_path)
        except ConfigError as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

    merged = ConfigLoader(_get_default_config())
    if config is not None:
        try:
            merged.merge(ConfigLoader(config.section("logging")))
        except ConfigError as e:
            raise LoggingError(f"Invalid logging config: {e}") from e

    # Validate everything before the package logger is touched.
    _logging_config = _validated_config(merged)

    _configure_package_logger()

    for name, log in _loggers_cache.items():
        _apply_module_config(name, log)

    _initialized = True


def _validated_config(settings: ConfigLoader) -> dict[str, Any]:
    """Normalize blank sections to ``{}`` and check every level name.

    Raises:
        LoggingError: If a section is not a mapping or a level is unknown.
    """
    try:
        result = settings.to_dict()
        result["console"] = settings.section("console")
        result["file"] = settings.section("file")
        modules = settings.section("modules")
    except ConfigError as e:
        raise LoggingError(f"Invalid logging config: {e}") from e

    result["modules"] = {}
    for name, module_config in modules.items():
        if module_config is None:
            module_config = {}
        elif not isinstance(module_config, dict):
            raise LoggingError(f"Invalid logging config: module '{name}' must be a mapping")
        result["modules"][name] = module_config

    _resolve_level(result.get("level", "WARNING"))
    _resolve_level(result["console"].get("level", "WARNING"))
    _resolve_level(result["file"].get("level", "DEBUG"))
    for module_config in result["modules"].values():
        if "level" in module_config:
            _resolve_level(module_config["level"])

    return result


def _configure_package_logger() -> None:
    """Install handlers on the ``vector3d`` logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_installed_handlers(package_logger)

    package_logger.setLevel(_resolve_level(_logging_config.get("level", "WARNING")))
    package_logger.propagate = bool(_logging_config.get("propagate", True))

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", False):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_resolve_level(console_config.get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter())
        _install_handler(package_logger, console_handler)

    file_config = _logging_config.get("file", {})
    if file_config.get("enabled", False):
        log_file = Path(file_config.get("path", "vector3d.log"))
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(
                log_file,
                mode=file_config.get("mode", "a"),
                encoding="utf-8",
            )
        except OSError as e:
            raise LoggingError(f"Cannot open log file {log_file}: {e}") from e
        file_handler.setLevel(_resolve_level(file_config.get("level", "DEBUG")))
        file_handler.setFormatter(_get_formatter())
        _install_handler(package_logger, file_handler)


def _install_handler(package_logger: logging.Logger, handler: logging.Handler) -> None:
    package_logger.addHandler(handler)
    _installed_handlers.append(handler)


def _remove_installed_handlers(package_logger: logging.Logger) -> None:
    for handler in _installed_handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        """Format time with milliseconds using dot separator."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def _module_key(name: str) -> str:
    if name.startswith(PACKAGE_LOGGER + "."):
        return name[len(PACKAGE_LOGGER) + 1 :]
    return name


def _apply_module_config(name: str, log: logging.Logger) -> None:
    if name == PACKAGE_LOGGER:
        return
    module_config = _logging_config.get("modules", {}).get(_module_key(name), {})

    log.disabled = not module_config.get("enabled", True)
    if "level" in module_config:
        log.setLevel(_resolve_level(module_config["level"]))
    else:
        log.setLevel(logging.NOTSET)


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``vector3d`` namespace.

    Names not already under ``vector3d`` are prefixed, so ``get_logger("text_io")``
    and ``get_logger("vector3d.text_io")`` return the same logger. Per-module
    settings come from the ``modules`` section of the logging configuration.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        Cached logger instance.

    Examples:
        >>> log = get_logger(__name__)
        >>> log.debug("Read %d values", 3)
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"

    if name in _loggers_cache:
        return _loggers_cache[name]

    log = logging.getLogger(name)
    if _initialized:
        _apply_module_config(name, log)

    _loggers_cache[name] = log
    return log


def is_initialized() -> bool:
    """Whether ``initialize_logging`` has been called since the last shutdown."""
    return _initialized


def shutdown_logging() -> None:
    """Close the package handlers and reset cached loggers to defaults.

    Loggers handed out earlier keep working; they propagate to the
    application's handlers again and pick up the next configuration.
    """
    global _initialized, _logging_config

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_installed_handlers(package_logger)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    for log in _loggers_cache.values():
        log.disabled = False
        log.setLevel(logging.NOTSET)
    _logging_config = {}
    _initialized = False
