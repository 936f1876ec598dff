"""Configuration management for eighth-bar.

Provides functions for loading, saving, validating, and migrating
configuration files.
"""

import json
import sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from eighth_bar.display.colors import AUTO_COLOR, FORMATTERS, is_valid_color

# File paths
CONFIG_FILE = Path.home() / ".eighth_bar.json"

# Default configuration values
DEFAULT_CONFIG = {
    "width": None,  # None means use the terminal width
    "color": AUTO_COLOR,
    "format": "ansi",  # ansi, tmux, plain
}

# Config version for migration tracking
CONFIG_VERSION = 2

# Migration history:
# v1: Original config (width, color)
# v2: Added format

# Config schema for validation
# Format: key -> (expected_types, required, validator_func or None)
# validator_func takes value and returns (is_valid, error_message)
ValidatorFunc = Callable[[Union[str, int, None]], Tuple[bool, str]]

CONFIG_SCHEMA: dict[str, tuple[tuple, bool, Optional[ValidatorFunc]]] = {
    "width": (
        (int, type(None)),
        False,
        lambda v: (True, "")
        if v is None or (not isinstance(v, bool) and v > 2)
        else (False, "must be an integer greater than 2 or null"),
    ),
    "color": (
        (str,),
        False,
        lambda v: (True, "")
        if v == AUTO_COLOR or is_valid_color(v)
        else (False, "must be 'auto', a color name, or '#rrggbb'"),
    ),
    "format": (
        (str,),
        False,
        lambda v: (True, "")
        if v in FORMATTERS
        else (False, f"must be one of: {', '.join(sorted(FORMATTERS))}"),
    ),
    "_config_version": ((int,), False, None),  # Internal version tracking for migrations
}


def validate_config(config: dict) -> List[str]:
    """Validate configuration against schema.

    Args:
        config: Configuration dictionary to validate.

    Returns:
        List of validation error messages. Empty list if valid.
    """
    errors = []

    for key in config:
        if key not in CONFIG_SCHEMA:
            errors.append(f"Unknown config key: '{key}'")

    for key, (expected_types, required, validator) in CONFIG_SCHEMA.items():
        if required and key not in config:
            errors.append(f"Missing required key: '{key}'")
            continue

        if key not in config:
            continue

        value = config[key]

        if not isinstance(value, expected_types):
            type_names = " or ".join(t.__name__ for t in expected_types)
            errors.append(
                f"'{key}' has invalid type: expected {type_names}, got {type(value).__name__}"
            )
            continue

        if validator and value is not None:
            is_valid, error_msg = validator(value)
            if not is_valid:
                errors.append(f"'{key}' {error_msg}")

    return errors


def migrate_config(config: dict) -> Tuple[dict, bool]:
    """Migrate old config formats to the current schema.

    Args:
        config: Configuration dictionary to migrate.

    Returns:
        Tuple of (migrated_config, was_migrated).
    """
    was_migrated = False
    migrated = config.copy()

    current_version = migrated.get("_config_version", 1)

    # Migration from v1 to v2: Add format
    if current_version < 2:
        if "format" not in migrated:
            migrated["format"] = DEFAULT_CONFIG["format"]
            was_migrated = True

    if was_migrated:
        migrated["_config_version"] = CONFIG_VERSION

    return migrated, was_migrated


def load_config(
    validate: bool = True,
    auto_migrate: bool = True,
    config_file: Optional[Path] = None,
    silent: bool = False,
) -> dict:
    """Load configuration from file.

    Args:
        validate: Whether to validate config and warn on errors. Default True.
        auto_migrate: Whether to automatically migrate old config formats. Default True.
        config_file: Optional path to config file. Defaults to CONFIG_FILE.
        silent: If True, suppress warning output. Default False.

    Returns:
        Configuration dictionary merged with defaults.
    """
    if config_file is None:
        config_file = CONFIG_FILE

    if not config_file.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(config_file) as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()

    if not isinstance(config, dict):
        return DEFAULT_CONFIG.copy()

    if auto_migrate:
        config, was_migrated = migrate_config(config)
        if was_migrated:
            save_config(config, config_file=config_file)
            if not silent:
                print(f"Config migrated to version {CONFIG_VERSION}", file=sys.stderr)

    if validate and not silent:
        errors = validate_config(config)
        if errors:
            print("Warning: Config validation errors:", file=sys.stderr)
            for error in errors:
                print(f"  - {error}", file=sys.stderr)

    return {**DEFAULT_CONFIG, **config}


def save_config(config: dict, config_file: Optional[Path] = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration dictionary to save.
        config_file: Optional path to config file. Defaults to CONFIG_FILE.
    """
    if config_file is None:
        config_file = CONFIG_FILE

    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, "w") as f:
        json.dump(config, f, indent=2)


def reset_config(config_file: Optional[Path] = None) -> None:
    """Reset configuration to default values."""
    save_config({**DEFAULT_CONFIG, "_config_version": CONFIG_VERSION}, config_file=config_file)


def parse_config_value(key: str, raw: str) -> Union[str, int, None]:
    """Convert a command-line string into the type stored under ``key``.

    Args:
        key: Configuration key.
        raw: Value as typed by the user.

    Returns:
        The converted value.

    Raises:
        ValueError: If the key is unknown or the value cannot be converted.
    """
    if key not in DEFAULT_CONFIG:
        raise ValueError(f"Unknown config key: '{key}'")

    if key == "width":
        if raw.lower() in ("none", "null", "auto"):
            return None
        return int(raw)
    return raw


__all__ = [
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "CONFIG_VERSION",
    "CONFIG_SCHEMA",
    "validate_config",
    "migrate_config",
    "load_config",
    "save_config",
    "reset_config",
    "parse_config_value",
]
