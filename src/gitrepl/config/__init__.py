"""Configuration management for gitrepl."""

from gitrepl.config.config import (
    DEFAULTS,
    GITREPL_DIR,
    Config,
    ConfigManager,
    get_config,
    get_config_manager,
    parse_value,
)

__all__ = [
    "DEFAULTS",
    "GITREPL_DIR",
    "Config",
    "ConfigManager",
    "get_config",
    "get_config_manager",
    "parse_value",
]
