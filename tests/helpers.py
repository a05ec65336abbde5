"""Test helpers and utilities."""
from typing import Any, Dict, Optional

from batti.application.applet import BatteryApplet
from batti.config import ApplicationConfig
from tests.fakes.fake_device import FakeDeviceProxy
from tests.fakes.fake_presenter import FakeTrayPresenter
from tests.fakes.fake_spawner import FakeProcessSpawner

DISCHARGING_BATTERY = {
    "IconName": "battery-good-symbolic",
    "Percentage": 73.6,
    "State": 2,
}


class IntegrationTestContext:
    """Test context with the applet wired to fakes."""

    def __init__(
        self,
        properties: Optional[Dict[str, Any]] = None,
        config: Optional[ApplicationConfig] = None,
    ):
        """
        Initialize test context.

        Args:
            properties: Initial device properties, DISCHARGING_BATTERY by default
            config: Application configuration, defaults otherwise
        """
        self.config = config or ApplicationConfig()
        self.device = FakeDeviceProxy(DISCHARGING_BATTERY if properties is None else properties)
        self.presenter = FakeTrayPresenter()
        self.spawner = FakeProcessSpawner()
        self.applet = BatteryApplet(self.config, self.device, self.presenter, self.spawner)

    @property
    def store(self):
        return self.applet.store

    @property
    def processes(self):
        return self.applet.processes

    def given_applet_is_started(self) -> None:
        """Seed from the device and subscribe to changes."""
        self.applet.start()

    def when_properties_change(self, **changed: Any) -> None:
        """Simulate a PropertiesChanged notification from UPower."""
        self.device.emit_properties_changed(changed)

    def when_child_exits(self, pid: Optional[int] = None, status: int = 0) -> None:
        """Simulate a child exit, the most recent one by default."""
        self.spawner.exit_child(self.spawner.last_pid if pid is None else pid, status)
