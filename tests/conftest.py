"""Pytest configuration and fixtures for all tests."""

import pytest

from vector3d.core.logging_system import shutdown_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging setup a test performed.

    Handlers installed by initialize_logging would otherwise leak into
    later tests and interfere with caplog.
    """
    yield
    shutdown_logging()


@pytest.fixture
def write_yaml(tmp_path):
    """Write a YAML document to a temporary file and return its path."""

    def _write(text: str, name: str = "vector3d.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
