"""UPower device proxy on the D-Bus system bus.

Uses Gio.DBusProxy, which caches the device properties and emits
g-properties-changed when UPower sends PropertiesChanged.
"""
import logging
from typing import Any, Optional

from gi.repository import Gio, GLib

from batti.domain.device import WATCHED_PROPERTIES
from batti.errors import BusConnectionError
from batti.interfaces.device_source import IDeviceProxy, PropertiesChangedCallback

logger = logging.getLogger("BATTI.UPower")


class UPowerDeviceProxy(IDeviceProxy):
    """IDeviceProxy backed by a Gio.DBusProxy."""

    def __init__(self, proxy: Gio.DBusProxy):
        self._proxy = proxy
        self._handler_ids = []

    @classmethod
    def connect(cls, service_name: str, object_path: str, interface_name: str) -> "UPowerDeviceProxy":
        """
        Create a proxy for a device object. Blocks until properties are loaded.

        Args:
            service_name: Well-known bus name, e.g. "org.freedesktop.UPower"
            object_path: Device object path
            interface_name: Device interface name

        Returns:
            Connected proxy

        Raises:
            BusConnectionError: If the bus, the service or the object is unavailable
        """
        try:
            proxy = Gio.DBusProxy.new_for_bus_sync(
                Gio.BusType.SYSTEM,
                Gio.DBusProxyFlags.NONE,
                None,
                service_name,
                object_path,
                interface_name,
                None,
            )
        except GLib.Error as e:
            raise BusConnectionError(f"Could not create proxy for {object_path}: {e.message}") from e

        if proxy is None:
            raise BusConnectionError(f"Could not create proxy for {object_path}")
        if proxy.get_name_owner() is None:
            raise BusConnectionError(f"{service_name} is not running on the system bus")

        cached = proxy.get_cached_property_names() or []
        if not any(name in cached for name in WATCHED_PROPERTIES):
            raise BusConnectionError(f"{object_path} does not expose {interface_name} properties")

        logger.info("Connected to %s %s", service_name, object_path)
        return cls(proxy)

    def get_property(self, name: str) -> Optional[Any]:
        value = self._proxy.get_cached_property(name)
        if value is None:
            return None
        return value.unpack()

    def connect_properties_changed(self, callback: PropertiesChangedCallback) -> None:
        def on_properties_changed(_proxy, changed_properties, invalidated_properties):
            callback(changed_properties.unpack(), list(invalidated_properties or []))

        handler_id = self._proxy.connect("g-properties-changed", on_properties_changed)
        self._handler_ids.append(handler_id)

    def disconnect(self) -> None:
        """Drop all change handlers registered through this proxy."""
        for handler_id in self._handler_ids:
            self._proxy.disconnect(handler_id)
        self._handler_ids = []
