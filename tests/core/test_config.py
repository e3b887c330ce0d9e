"""Tests for settings files."""

import pytest

from vector3d.core.config import ConfigError, ConfigLoader


class TestConfigLoading:
    """Tests for reading YAML settings files."""

    def test_load_nested_values(self, write_yaml) -> None:
        """Test dotted access to loaded values."""
        path = write_yaml("logging:\n  level: DEBUG\n  console:\n    enabled: true\n")
        settings = ConfigLoader.load(path)
        assert settings.get("logging.level") == "DEBUG"
        assert settings.get("logging.console.enabled") is True
        assert settings.get("logging.file.path", default="x.log") == "x.log"

    def test_load_empty_file(self, write_yaml) -> None:
        """Test an empty document gives empty settings."""
        assert ConfigLoader.load(write_yaml("")).to_dict() == {}

    def test_load_missing_file(self, tmp_path) -> None:
        """Test a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path / "missing.yaml")

    def test_load_invalid_yaml(self, write_yaml) -> None:
        """Test malformed YAML raises ConfigError."""
        with pytest.raises(ConfigError, match="Failed to load"):
            ConfigLoader.load(write_yaml("logging: [unclosed\n"))

    def test_load_non_mapping_root(self, write_yaml) -> None:
        """Test a list at top level is rejected."""
        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader.load(write_yaml("- a\n- b\n"))


class TestSections:
    """Tests for reading sections."""

    def test_blank_section_is_empty(self, write_yaml) -> None:
        """Test a key with nothing under it reads as an empty mapping."""
        settings = ConfigLoader.load(write_yaml("logging:\n  console:\n"))
        assert settings.section("logging.console") == {}
        assert settings.section("logging.file") == {}

    def test_scalar_section_rejected(self) -> None:
        """Test a scalar where a mapping belongs raises ConfigError."""
        settings = ConfigLoader({"logging": {"console": "yes"}})
        with pytest.raises(ConfigError, match="'logging.console' must be a mapping"):
            settings.section("logging.console")


class TestMerge:
    """Tests for overlaying settings."""

    def test_merge_overrides_recursively(self) -> None:
        """Test overlaid values win while sibling keys survive."""
        base = ConfigLoader({"level": "WARNING", "console": {"enabled": False, "level": "INFO"}})
        base.merge(ConfigLoader({"console": {"enabled": True}}))
        assert base.get("level") == "WARNING"
        assert base.section("console") == {"enabled": True, "level": "INFO"}

    def test_blank_value_keeps_mapping(self) -> None:
        """Test a blank overlay does not wipe a default section."""
        base = ConfigLoader({"modules": {"text_io": {"level": "DEBUG"}}})
        base.merge(ConfigLoader({"modules": None}))
        assert base.section("modules") == {"text_io": {"level": "DEBUG"}}

    def test_merge_does_not_mutate_operands(self) -> None:
        """Test merging leaves the overlay's data untouched."""
        overlay = ConfigLoader({"console": {"enabled": True}})
        base = ConfigLoader({"console": {"enabled": False}})
        base.merge(overlay)
        assert overlay.to_dict() == {"console": {"enabled": True}}
