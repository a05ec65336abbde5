"""Routes UPower PropertiesChanged batches into the state store."""
import logging
from typing import Any, Mapping, Sequence

from batti.application.state_store import StateStore
from batti.interfaces.device_source import IDeviceProxy

logger = logging.getLogger("BATTI.ChangeSubscriber")


class PropertiesChangedHandler:
    """Applies every changed property of a notification to the StateStore."""

    def __init__(self, store: StateStore):
        self._store = store

    def attach(self, proxy: IDeviceProxy) -> None:
        """Start receiving change notifications from proxy."""
        proxy.connect_properties_changed(self.on_properties_changed)

    def on_properties_changed(
        self,
        changed: Mapping[str, Any],
        invalidated: Sequence[str] = (),
    ) -> None:
        """
        Handle one PropertiesChanged notification.

        Keys are applied in the order the mapping yields them; UPower gives no
        ordering guarantee within a batch.

        Args:
            changed: Property name to new value
            invalidated: Invalidated property names (unused)
        """
        applied = [key for key, value in changed.items() if self._store.apply_change(key, value)]
        if applied:
            logger.debug("Applied %s -> %s", ", ".join(applied), self._store.tooltip)
