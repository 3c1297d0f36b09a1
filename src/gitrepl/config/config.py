"""
Configuration management for gitrepl.

Provides a configuration file at ~/.gitrepl/config.json for default settings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Base directory for config, history and aliases
GITREPL_DIR = Path.home() / ".gitrepl"

# Default values - single source of truth
DEFAULTS = {
    "history_file": str(GITREPL_DIR / "history"),
    "alias_file": str(GITREPL_DIR / "aliases"),
    "history_size": 1000,
    "search_limit": 10,
    "history_display": 20,
    "simple": False,
    "git_executable": "git",
    "verbose": False,
}


class Config(BaseModel):
    """Configuration settings for gitrepl.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    # Storage
    history_file: Optional[str] = Field(
        default=None,
        description="Path of the command history file"
    )
    alias_file: Optional[str] = Field(
        default=None,
        description="Path of the alias file"
    )
    history_size: Optional[int] = Field(
        default=None,
        description="Maximum number of history entries kept"
    )

    # Display
    search_limit: Optional[int] = Field(
        default=None,
        description="Number of search results shown"
    )
    history_display: Optional[int] = Field(
        default=None,
        description="Number of entries shown by 'history'"
    )

    # REPL settings
    simple: Optional[bool] = Field(
        default=None,
        description="Use simple REPL (no prompt_toolkit)"
    )
    verbose: Optional[bool] = Field(
        default=None,
        description="Enable debug logging"
    )

    # Repository
    git_executable: Optional[str] = Field(
        default=None,
        description="git executable used for repository commands"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_DIR = GITREPL_DIR
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self):
        self._config: Optional[Config] = None

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    @property
    def config(self) -> Config:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self, create_if_missing: bool = True) -> Config:
        """Load configuration from file.

        Args:
            create_if_missing: If True, create default config file if it doesn't exist.

        Returns:
            Config object with loaded settings, or defaults if file doesn't exist.
        """
        if not self.CONFIG_FILE.exists():
            if create_if_missing:
                try:
                    self._create_default_config()
                except OSError as e:
                    logger.warning(f"Could not create config file {self.CONFIG_FILE}: {e}")
            return Config()

        try:
            data = json.loads(self.CONFIG_FILE.read_text())
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Invalid config file ({e}), using defaults")
            return Config()
        except OSError as e:
            logger.warning(f"Could not read config file {self.CONFIG_FILE}: {e}")
            return Config()

    def _create_default_config(self) -> None:
        """Create default config file with actual default values."""
        self._ensure_dir()
        default_config = {"_comment": "gitrepl configuration file", **DEFAULTS}
        self.CONFIG_FILE.write_text(json.dumps(default_config, indent=2) + "\n")

    def save(self, config: Optional[Config] = None) -> Path:
        """Save configuration to file, preserving existing structure.

        Args:
            config: Config to save. If None, saves current config.

        Returns:
            Path to saved config file.
        """
        self._ensure_dir()
        if config is not None:
            self._config = config

        if self._config is None:
            self._config = Config()

        existing_data = self._read_raw()

        # Update only non-None config values, preserving everything else
        for key, value in self._config.model_dump().items():
            if value is not None:
                existing_data[key] = value

        self.CONFIG_FILE.write_text(json.dumps(existing_data, indent=2) + "\n")
        return self.CONFIG_FILE

    def _read_raw(self) -> dict[str, Any]:
        if not self.CONFIG_FILE.exists():
            return {}
        try:
            data = json.loads(self.CONFIG_FILE.read_text())
        except json.JSONDecodeError:
            return {}
        return data if isinstance(data, dict) else {}

    def set(self, key: str, value: Any) -> None:
        """Set a config value and save.

        Raises:
            ValueError: If key is not a config field.
        """
        self._config = self.load(create_if_missing=True)

        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        setattr(self._config, key, value)
        self.save()

    def unset(self, key: str) -> None:
        """Remove a config value (reset to default)."""
        self._config = self.load(create_if_missing=True)

        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        setattr(self._config, key, None)

        existing_data = self._read_raw()
        if key in existing_data:
            existing_data[key] = None

        self._ensure_dir()
        self.CONFIG_FILE.write_text(json.dumps(existing_data, indent=2) + "\n")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback."""
        return self.config.get(key, default)

    def list_settings(self) -> dict[str, Any]:
        """List user-customized settings (values that differ from defaults)."""
        result = {}
        for k, v in self.config.model_dump().items():
            if v is None:
                continue
            if k not in DEFAULTS or v != DEFAULTS[k]:
                result[k] = v
        return result

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = Config()
        if self.CONFIG_FILE.exists():
            self.CONFIG_FILE.unlink()


def parse_value(key: str, value_str: str) -> Any:
    """Convert a string to the type of the config key's default."""
    current = DEFAULTS.get(key)
    if isinstance(current, bool) or value_str.lower() in ("true", "false"):
        return value_str.lower() == "true"
    if isinstance(current, int):
        return int(value_str)
    return value_str


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def get_config() -> Config:
    """Get the current configuration."""
    return get_config_manager().config
