#!/usr/bin/env python3
"""
Batti - Entry point.

Shows the charge and state of a UPower battery in the system tray.
Click for device details, right-click for a live upower monitor.
"""
import argparse
import logging
import signal
import sys
from pathlib import Path
from typing import List, Optional

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import GLib, Gtk  # noqa: E402

from batti.application.applet import BatteryApplet  # noqa: E402
from batti.config import ApplicationConfig  # noqa: E402
from batti.errors import BattiError  # noqa: E402
from batti.infrastructure.glib_spawner import GLibProcessSpawner  # noqa: E402
from batti.infrastructure.status_icon import StatusIconPresenter  # noqa: E402
from batti.infrastructure.upower_proxy import UPowerDeviceProxy  # noqa: E402
from batti.settings import SettingsManager  # noqa: E402

logger = logging.getLogger("BATTI")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="batti", description="Battery status tray applet")
    parser.add_argument("--config", type=Path, help="Path to settings.yml")
    parser.add_argument("--battery", help="UPower battery name, e.g. BAT0")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def create_app(config: ApplicationConfig) -> BatteryApplet:
    """
    Create the applet with all dependencies and seed it from UPower.

    Args:
        config: Application configuration

    Returns:
        Started BatteryApplet instance

    Raises:
        BattiError: If UPower or the battery is unavailable
    """
    device = UPowerDeviceProxy.connect(
        config.dbus_name,
        config.dbus_object_path,
        config.dbus_interface,
    )
    presenter = StatusIconPresenter()
    spawner = GLibProcessSpawner()

    app = BatteryApplet(config, device, presenter, spawner)
    app.start()
    return app


def _quit(*_args) -> bool:
    logger.info("Received signal, shutting down...")
    Gtk.main_quit()
    return GLib.SOURCE_REMOVE


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the application.

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        manager = SettingsManager(args.config)
        settings = manager.update_settings(
            battery=args.battery,
            log_level="DEBUG" if args.debug else None,
        )
    except BattiError as e:
        logger.error("%s", e)
        return 1

    logging.getLogger().setLevel(settings.log_level)
    config = ApplicationConfig.from_settings(settings)

    try:
        app = create_app(config)
    except BattiError as e:
        logger.error("Cannot monitor battery %s: %s", config.battery, e)
        return 1

    GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGINT, _quit)
    GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGTERM, _quit)

    logger.info("Monitoring %s", config.dbus_object_path)
    Gtk.main()
    app.device.disconnect()
    return 0


if __name__ == "__main__":
    sys.exit(main())
