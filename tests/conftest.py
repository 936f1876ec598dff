"""
Pytest fixtures for eighth-bar tests.

Test imports use the src/eighth_bar/ package via --import-mode=importlib (see pyproject.toml).
"""

import json
from pathlib import Path

import pytest

from eighth_bar.display.colors import PlainFormatter


# ═══════════════════════════════════════════════════════════════════════════════
# Path Constants
# ═══════════════════════════════════════════════════════════════════════════════

PROJECT_ROOT = Path(__file__).parent.parent
SRC_DIR = PROJECT_ROOT / "src"


# ═══════════════════════════════════════════════════════════════════════════════
# Rendering Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def plain():
    """Formatter that emits no color sequences."""
    return PlainFormatter()


# ═══════════════════════════════════════════════════════════════════════════════
# Config Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def config_default():
    """Default configuration as written by --config reset."""
    return {"width": None, "color": "auto", "format": "ansi", "_config_version": 2}


@pytest.fixture
def config_v1():
    """Version 1 configuration without the format key."""
    return {"width": 30, "color": "cyan"}


@pytest.fixture
def tmp_config_file(tmp_path, config_default):
    """Create temporary config file."""
    config_file = tmp_path / ".eighth_bar.json"
    config_file.write_text(json.dumps(config_default))
    return config_file


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the default config location at a temporary file."""
    config_file = tmp_path / ".eighth_bar.json"
    monkeypatch.setattr("eighth_bar.config.settings.CONFIG_FILE", config_file)
    return config_file
