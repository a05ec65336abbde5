"""Battery status tray applet backed by UPower."""

__version__ = "0.1.0"
