"""Tests for settings loading."""

from pathlib import Path

import pytest


def test_settings_defaults():
    from batti.settings import Settings

    settings = Settings()

    assert settings.battery == "BAT0"
    assert settings.strip_symbolic_icon is True
    assert settings.terminal == "/usr/bin/x-terminal-emulator"
    assert settings.upower == "/usr/bin/upower"
    assert settings.log_level == "WARNING"


def test_settings_rejects_bad_battery_name():
    from pydantic import ValidationError

    from batti.settings import Settings

    with pytest.raises(ValidationError):
        Settings(battery="BAT0/../x")


def test_settings_normalizes_log_level():
    from batti.settings import Settings

    assert Settings(log_level="debug").log_level == "DEBUG"


def test_settings_rejects_unknown_log_level():
    from pydantic import ValidationError

    from batti.settings import Settings

    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_manager_missing_file_uses_defaults(tmp_path: Path):
    from batti.settings import SettingsManager

    manager = SettingsManager(tmp_path / "missing.yml")

    assert manager.settings.battery == "BAT0"


def test_manager_empty_file_uses_defaults(temp_config_path: Path):
    from batti.settings import SettingsManager

    temp_config_path.write_text("")

    manager = SettingsManager(temp_config_path)

    assert manager.settings.battery == "BAT0"


def test_manager_loads_file(temp_config_path: Path):
    from batti.settings import SettingsManager

    temp_config_path.write_text(
        """
battery: BAT1
strip_symbolic_icon: false
terminal: /usr/bin/xterm
"""
    )

    manager = SettingsManager(temp_config_path)

    assert manager.settings.battery == "BAT1"
    assert manager.settings.strip_symbolic_icon is False
    assert manager.settings.terminal == "/usr/bin/xterm"
    assert manager.settings.upower == "/usr/bin/upower"


def test_manager_invalid_yaml(temp_config_path: Path):
    from batti.errors import SettingsError
    from batti.settings import SettingsManager

    temp_config_path.write_text("battery: [unclosed")

    with pytest.raises(SettingsError):
        SettingsManager(temp_config_path)


def test_manager_invalid_value(temp_config_path: Path):
    from batti.errors import SettingsError
    from batti.settings import SettingsManager

    temp_config_path.write_text("battery: 'bad name'\n")

    with pytest.raises(SettingsError):
        SettingsManager(temp_config_path)


def test_manager_non_mapping(temp_config_path: Path):
    from batti.errors import SettingsError
    from batti.settings import SettingsManager

    temp_config_path.write_text("- BAT0\n")

    with pytest.raises(SettingsError):
        SettingsManager(temp_config_path)


def test_update_settings_overrides_and_skips_none(tmp_path: Path):
    from batti.settings import SettingsManager

    manager = SettingsManager(tmp_path / "missing.yml")

    settings = manager.update_settings(battery="BAT2", log_level=None)

    assert settings.battery == "BAT2"
    assert settings.log_level == "WARNING"


def test_update_settings_validates(tmp_path: Path):
    from batti.errors import SettingsError
    from batti.settings import SettingsManager

    manager = SettingsManager(tmp_path / "missing.yml")

    with pytest.raises(SettingsError):
        manager.update_settings(battery="not/valid")


def test_default_settings_path_uses_xdg(monkeypatch, tmp_path: Path):
    from batti.settings import default_settings_path

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert default_settings_path() == tmp_path / "batti" / "settings.yml"


def test_manager_reads_file_once(temp_config_path: Path):
    from batti.settings import SettingsManager

    temp_config_path.write_text("battery: BAT1\n")
    manager = SettingsManager(temp_config_path)

    temp_config_path.write_text("battery: BAT2\n")

    assert manager.settings.battery == "BAT1"
    assert not hasattr(manager, "reload")
