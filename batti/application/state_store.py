"""Holds the last known battery state and pushes display updates."""
import logging

from batti.domain.device import (
    PROPERTY_ICON_NAME,
    PROPERTY_PERCENTAGE,
    PROPERTY_STATE,
    DeviceState,
)
from batti.domain.properties import decode_icon_name, decode_percentage, decode_state
from batti.errors import PropertyDecodeError
from batti.interfaces.presenter import ITrayPresenter

logger = logging.getLogger("BATTI.StateStore")


class StateStore:
    """Owns the DeviceState and keeps the tray icon and tooltip in sync with it.

    Icon and tooltip are pushed independently: an IconName change only sets
    the icon, a Percentage or State change only sets the tooltip.
    """

    def __init__(self, presenter: ITrayPresenter, strip_symbolic_icon: bool = True):
        """
        Initialize the store.

        Args:
            presenter: Tray the derived values are pushed to
            strip_symbolic_icon: Remove the "-symbolic" suffix from icon names
        """
        self._presenter = presenter
        self._strip_symbolic_icon = strip_symbolic_icon
        self._state = DeviceState()
        self._handlers = {
            PROPERTY_ICON_NAME: self._apply_icon_name,
            PROPERTY_PERCENTAGE: self._apply_percentage,
            PROPERTY_STATE: self._apply_state,
        }

    @property
    def state(self) -> DeviceState:
        """Current state snapshot."""
        return self._state

    @property
    def tooltip(self) -> str:
        return self._state.tooltip

    def seed(self, icon_name, percentage, state) -> None:
        """
        Set all fields from raw property values and push icon and tooltip.

        Args:
            icon_name: Raw IconName value
            percentage: Raw Percentage value
            state: Raw State value

        Raises:
            PropertyDecodeError: If any value has the wrong type
        """
        self._state = DeviceState(
            percentage=decode_percentage(percentage),
            state=decode_state(state),
            icon_name=decode_icon_name(icon_name, self._strip_symbolic_icon),
        )
        logger.info("Seeded battery state: %s, icon %s", self._state.tooltip, self._state.icon_name)
        self._presenter.set_icon_name(self._state.icon_name)
        self._presenter.set_tooltip_text(self._state.tooltip)

    def apply_change(self, key: str, raw) -> bool:
        """
        Apply one changed property.

        Unknown keys are ignored. A value that fails to decode leaves the
        state as it was.

        Args:
            key: Property name
            raw: New raw value

        Returns:
            True if the state was updated
        """
        handler = self._handlers.get(key)
        if handler is None:
            return False
        try:
            handler(raw)
        except PropertyDecodeError as e:
            logger.debug("Ignoring %s change: %s", key, e)
            return False
        return True

    def _apply_icon_name(self, raw) -> None:
        self._state = self._state.with_icon_name(decode_icon_name(raw, self._strip_symbolic_icon))
        self._presenter.set_icon_name(self._state.icon_name)

    def _apply_percentage(self, raw) -> None:
        self._state = self._state.with_percentage(decode_percentage(raw))
        self._presenter.set_tooltip_text(self._state.tooltip)

    def _apply_state(self, raw) -> None:
        self._state = self._state.with_state(decode_state(raw))
        self._presenter.set_tooltip_text(self._state.tooltip)
