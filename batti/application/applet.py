"""Ties the device proxy, state store, tray and helper commands together."""
import logging

from batti.application.change_subscriber import PropertiesChangedHandler
from batti.application.child_process import (
    ACTIVATE_SLOT,
    POPUP_SLOT,
    SubprocessSingletonManager,
)
from batti.application.state_store import StateStore
from batti.config import ApplicationConfig
from batti.domain.device import PROPERTY_ICON_NAME, PROPERTY_PERCENTAGE, PROPERTY_STATE
from batti.errors import PropertyDecodeError
from batti.interfaces.device_source import IDeviceProxy
from batti.interfaces.presenter import ITrayPresenter
from batti.interfaces.process_spawner import IProcessSpawner

logger = logging.getLogger("BATTI.Applet")


class BatteryApplet:
    """The applet with all of its collaborators."""

    def __init__(
        self,
        config: ApplicationConfig,
        device: IDeviceProxy,
        presenter: ITrayPresenter,
        spawner: IProcessSpawner,
    ):
        """
        Initialize the applet.

        Args:
            config: Application configuration
            device: Connected battery device
            presenter: Tray icon
            spawner: Process launcher for the helper commands
        """
        self.config = config
        self.device = device
        self.presenter = presenter
        self.store = StateStore(presenter, strip_symbolic_icon=config.strip_symbolic_icon)
        self.changes = PropertiesChangedHandler(self.store)
        self.processes = SubprocessSingletonManager(spawner)
        self.processes.add_slot(ACTIVATE_SLOT, config.activate_command)
        self.processes.add_slot(POPUP_SLOT, config.popup_command)

    def start(self) -> None:
        """
        Seed the state from the device, then subscribe to changes and clicks.

        Raises:
            PropertyDecodeError: If the device does not report a usable value
        """
        values = {}
        for name in (PROPERTY_ICON_NAME, PROPERTY_PERCENTAGE, PROPERTY_STATE):
            value = self.device.get_property(name)
            if value is None:
                raise PropertyDecodeError(f"{self.config.dbus_object_path} has no {name} property")
            values[name] = value

        self.store.seed(
            values[PROPERTY_ICON_NAME],
            values[PROPERTY_PERCENTAGE],
            values[PROPERTY_STATE],
        )
        self.changes.attach(self.device)
        self.presenter.connect_activate(self.on_activate)
        self.presenter.connect_popup(self.on_popup)

    def on_activate(self) -> None:
        self.processes.trigger(ACTIVATE_SLOT)

    def on_popup(self) -> None:
        self.processes.trigger(POPUP_SLOT)
