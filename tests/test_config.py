"""
Tests for configuration management functions.
"""

import json

import pytest

from eighth_bar.config.settings import (
    CONFIG_VERSION,
    DEFAULT_CONFIG,
    load_config,
    migrate_config,
    parse_config_value,
    reset_config,
    save_config,
    validate_config,
)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_default_when_no_file(self, tmp_path):
        """Test returns default config when file doesn't exist."""
        result = load_config(config_file=tmp_path / "nonexistent.json")
        assert result == DEFAULT_CONFIG

    def test_loads_existing_config(self, tmp_config_file):
        """Test loading existing config file."""
        result = load_config(config_file=tmp_config_file, silent=True)
        assert result["color"] == "auto"
        assert result["format"] == "ansi"

    def test_merges_with_defaults(self, tmp_path):
        """Test that loaded config is merged with defaults."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"color": "cyan", "_config_version": 2}))

        result = load_config(config_file=config_file, silent=True)
        assert result["color"] == "cyan"
        assert result["width"] is None

    def test_invalid_json_returns_defaults(self, tmp_path):
        """Test that an unreadable file falls back to defaults."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        assert load_config(config_file=config_file) == DEFAULT_CONFIG

    def test_migrates_and_saves_old_config(self, tmp_path, config_v1, capsys):
        """Test that a v1 file is upgraded on load."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps(config_v1))

        result = load_config(config_file=config_file)

        assert result["format"] == "ansi"
        assert result["width"] == 30
        saved = json.loads(config_file.read_text())
        assert saved["_config_version"] == CONFIG_VERSION
        assert "Config migrated" in capsys.readouterr().err

    def test_warns_on_invalid_values(self, tmp_path, capsys):
        """Test that validation errors are printed to stderr."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"width": 1, "_config_version": 2}))

        load_config(config_file=config_file)

        err = capsys.readouterr().err
        assert "Config validation errors" in err
        assert "'width'" in err


class TestSaveConfig:
    """Tests for save_config and reset_config functions."""

    def test_creates_parent_directory(self, tmp_path):
        """Test that parent directory is created."""
        config_file = tmp_path / "subdir" / "config.json"

        save_config({"color": "red"}, config_file=config_file)

        assert json.loads(config_file.read_text()) == {"color": "red"}

    def test_reset_writes_defaults(self, tmp_config_file):
        """Test that reset restores the default values."""
        save_config({"color": "red", "width": 40}, config_file=tmp_config_file)

        reset_config(config_file=tmp_config_file)

        loaded = json.loads(tmp_config_file.read_text())
        assert loaded["color"] == DEFAULT_CONFIG["color"]
        assert loaded["width"] is None
        assert loaded["_config_version"] == CONFIG_VERSION


class TestValidateConfig:
    """Tests for validate_config function."""

    def test_defaults_are_valid(self, config_default):
        assert validate_config(config_default) == []

    def test_unknown_key(self):
        errors = validate_config({"theme": "dark"})
        assert errors == ["Unknown config key: 'theme'"]

    def test_width_must_leave_room_for_cells(self):
        assert validate_config({"width": 2})
        assert validate_config({"width": 3}) == []

    def test_width_type(self):
        errors = validate_config({"width": "wide"})
        assert "invalid type" in errors[0]

    def test_color_values(self):
        assert validate_config({"color": "#00ff00"}) == []
        assert validate_config({"color": "auto"}) == []
        assert validate_config({"color": "rainbow"})

    def test_format_values(self):
        assert validate_config({"format": "tmux"}) == []
        assert validate_config({"format": "html"})


class TestMigrateConfig:
    """Tests for migrate_config function."""

    def test_adds_format_to_v1(self, config_v1):
        migrated, was_migrated = migrate_config(config_v1)

        assert was_migrated is True
        assert migrated["format"] == "ansi"
        assert migrated["_config_version"] == CONFIG_VERSION

    def test_current_config_untouched(self, config_default):
        migrated, was_migrated = migrate_config(config_default)

        assert was_migrated is False
        assert migrated == config_default


class TestParseConfigValue:
    """Tests for parse_config_value function."""

    def test_width_is_integer(self):
        assert parse_config_value("width", "40") == 40

    def test_width_auto_is_none(self):
        assert parse_config_value("width", "auto") is None

    def test_color_is_string(self):
        assert parse_config_value("color", "cyan") == "cyan"

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            parse_config_value("theme", "dark")

    def test_non_numeric_width(self):
        with pytest.raises(ValueError):
            parse_config_value("width", "wide")
