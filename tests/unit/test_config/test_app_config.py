"""Tests for the application configuration."""

import pytest


def test_default_config_paths():
    from batti.config import DEFAULT_CONFIG

    assert DEFAULT_CONFIG.dbus_name == "org.freedesktop.UPower"
    assert DEFAULT_CONFIG.dbus_interface == "org.freedesktop.UPower.Device"
    assert DEFAULT_CONFIG.dbus_object_path == "/org/freedesktop/UPower/devices/battery_BAT0"


def test_config_immutable():
    from batti.config import ApplicationConfig

    config = ApplicationConfig()

    with pytest.raises(AttributeError):
        config.battery = "BAT1"


def test_activate_command():
    from batti.config import ApplicationConfig

    config = ApplicationConfig(battery="BAT1")

    assert config.activate_command == (
        "/usr/bin/x-terminal-emulator", "-title", "upower", "-hold",
        "-e", "/usr/bin/upower", "-i", "/org/freedesktop/UPower/devices/battery_BAT1",
    )


def test_popup_command():
    from batti.config import ApplicationConfig

    config = ApplicationConfig(terminal="/usr/bin/xterm", upower="/opt/bin/upower")

    assert config.popup_command == (
        "/usr/bin/xterm", "-title", "upower", "-e", "/opt/bin/upower", "--monitor-detail",
    )


def test_from_settings():
    from batti.config import ApplicationConfig
    from batti.settings import Settings

    config = ApplicationConfig.from_settings(Settings(battery="CMB0", strip_symbolic_icon=False))

    assert config.battery == "CMB0"
    assert config.strip_symbolic_icon is False
    assert config.dbus_object_path.endswith("battery_CMB0")
