"""Settings files for vector3d.

A settings file is a YAML mapping of sections. The package reads one of
them, ``logging``, through ``vector3d.core.logging_system``; other top-level
keys are left for the application.

Typical usage example:
    from vector3d.core.config import ConfigLoader

    settings = ConfigLoader.load("vector3d.yaml")
    console = settings.section("logging.console")
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a settings file cannot be read or has the wrong shape."""


class ConfigLoader:
    """Nested settings addressed with dotted keys such as ``"logging.file.path"``."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data if data is not None else {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Read settings from a YAML file.

        An empty file gives empty settings.

        Raises:
            ConfigError: If the file is missing, is not valid YAML, or its
                top level is not a mapping.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.debug("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Value at a dotted key, or ``default`` when any part is missing."""
        value: Any = self._data
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def section(self, key: str) -> dict[str, Any]:
        """Mapping at a dotted key.

        A missing key or a key left blank in YAML (``console:`` with nothing
        under it) reads as an empty section.

        Raises:
            ConfigError: If the key holds a scalar or a list.
        """
        value = self.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ConfigError(f"'{key}' must be a mapping, got {type(value).__name__}")
        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Overlay ``other`` on these settings.

        Mappings merge key by key. A blank value never replaces a mapping, so
        an empty ``modules:`` keeps the defaults underneath.
        """
        self._data = _overlay(self._data, other._data)

    def to_dict(self) -> dict[str, Any]:
        return self._data.copy()


def _overlay(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict):
            if value is None:
                continue
            if isinstance(value, dict):
                merged[key] = _overlay(current, value)
                continue
        merged[key] = value
    return merged
