"""Configuration management.

Modules:
    settings: Config loading, saving, validation, and migration
"""

from eighth_bar.config.settings import (
    CONFIG_FILE,
    CONFIG_SCHEMA,
    CONFIG_VERSION,
    DEFAULT_CONFIG,
    load_config,
    migrate_config,
    parse_config_value,
    reset_config,
    save_config,
    validate_config,
)

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
