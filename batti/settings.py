"""
Batti Settings Management
Loads and validates settings from settings.yml using Pydantic
"""
import logging
import os
import re
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from batti.errors import SettingsError

logger = logging.getLogger("BATTI.Settings")

_OBJECT_PATH_ELEMENT = re.compile(r"^[A-Za-z0-9_]+$")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_settings_path() -> Path:
    """Return $XDG_CONFIG_HOME/batti/settings.yml."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / "batti" / "settings.yml"


class Settings(BaseModel):
    """User settings"""
    battery: str = Field(
        default="BAT0",
        description="UPower battery name, as in /org/freedesktop/UPower/devices/battery_<name>"
    )
    strip_symbolic_icon: bool = Field(
        default=True,
        description="Show the full-colour icon instead of UPower's symbolic one"
    )
    terminal: str = Field(
        default="/usr/bin/x-terminal-emulator",
        description="Terminal emulator used to show upower output"
    )
    upower: str = Field(
        default="/usr/bin/upower",
        description="Path to the upower command line tool"
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name"
    )

    @field_validator('battery')
    @classmethod
    def validate_battery(cls, v: str) -> str:
        """Battery name becomes part of a D-Bus object path"""
        if not _OBJECT_PATH_ELEMENT.match(v):
            raise ValueError("battery may only contain letters, digits and underscores")
        return v

    @field_validator('terminal', 'upower')
    @classmethod
    def validate_command(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("command path cannot be empty")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to default_settings_path()
        """
        if config_path is None:
            config_path = default_settings_path()

        self.config_path = Path(config_path)
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.debug("Settings file not found at %s, using defaults", self.config_path)
            return Settings()

        try:
            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise SettingsError(f"Cannot read {self.config_path}: {e}") from e

        if config_data is None:
            logger.debug("Settings file is empty, using defaults")
            return Settings()
        if not isinstance(config_data, dict):
            raise SettingsError(f"{self.config_path} must contain a mapping")

        try:
            settings = Settings(**config_data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings in {self.config_path}: {e}") from e

        logger.info("Loaded settings from %s", self.config_path)
        return settings

    def update_settings(self, **kwargs) -> Settings:
        """
        Override settings in memory, e.g. from command line options

        Args:
            **kwargs: Field values; None values are skipped
        """
        values = {key: value for key, value in kwargs.items() if value is not None}
        if values:
            try:
                self.settings = Settings(**{**self.settings.model_dump(), **values})
            except ValidationError as e:
                raise SettingsError(f"Invalid settings: {e}") from e
        return self.settings
