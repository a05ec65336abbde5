"""Configuration constants and settings."""
from dataclasses import dataclass
from typing import Tuple

from batti.settings import Settings


@dataclass(frozen=True)
class ApplicationConfig:
    """Application configuration constants."""

    battery: str = "BAT0"
    strip_symbolic_icon: bool = True
    terminal: str = "/usr/bin/x-terminal-emulator"
    upower: str = "/usr/bin/upower"
    dbus_name: str = "org.freedesktop.UPower"
    dbus_interface: str = "org.freedesktop.UPower.Device"
    window_title: str = "upower"

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationConfig":
        return cls(
            battery=settings.battery,
            strip_symbolic_icon=settings.strip_symbolic_icon,
            terminal=settings.terminal,
            upower=settings.upower,
        )

    @property
    def dbus_object_path(self) -> str:
        """Get the UPower device path for the configured battery."""
        return f"/org/freedesktop/UPower/devices/battery_{self.battery}"

    @property
    def activate_command(self) -> Tuple[str, ...]:
        """Detailed device information, terminal kept open after upower exits."""
        return (
            self.terminal,
            "-title", self.window_title,
            "-hold",
            "-e", self.upower, "-i", self.dbus_object_path,
        )

    @property
    def popup_command(self) -> Tuple[str, ...]:
        """Live upower monitor."""
        return (
            self.terminal,
            "-title", self.window_title,
            "-e", self.upower, "--monitor-detail",
        )


# Default configuration instance
DEFAULT_CONFIG = ApplicationConfig()
