"""Exception hierarchy for the applet."""


class BattiError(Exception):
    """Base class for all applet errors."""


class BusConnectionError(BattiError):
    """The UPower device proxy could not be created."""


class PropertyDecodeError(BattiError):
    """A bus property value had an unexpected type."""


class SpawnError(BattiError):
    """An external command could not be started."""


class SettingsError(BattiError):
    """The settings file could not be loaded or validated."""
