"""Battery device domain models."""
from dataclasses import dataclass, replace
from enum import IntEnum

PROPERTY_ICON_NAME = "IconName"
PROPERTY_PERCENTAGE = "Percentage"
PROPERTY_STATE = "State"

WATCHED_PROPERTIES = (PROPERTY_ICON_NAME, PROPERTY_PERCENTAGE, PROPERTY_STATE)


class BatteryState(IntEnum):
    """UPower device state codes."""

    UNKNOWN = 0
    CHARGING = 1
    DISCHARGING = 2
    EMPTY = 3
    FULLY_CHARGED = 4
    PENDING_CHARGE = 5
    PENDING_DISCHARGE = 6

    @property
    def label(self) -> str:
        """Human-readable label shown in the tooltip."""
        return _LABELS[self]

    @classmethod
    def from_code(cls, code: int) -> "BatteryState":
        """
        Map a UPower state code to a member.

        Args:
            code: Integer state code reported by UPower

        Returns:
            Matching member, UNKNOWN for unrecognized codes
        """
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


_LABELS = {
    BatteryState.UNKNOWN: "Unknown",
    BatteryState.CHARGING: "Charging",
    BatteryState.DISCHARGING: "Discharging",
    BatteryState.EMPTY: "Empty",
    BatteryState.FULLY_CHARGED: "Fully charged",
    BatteryState.PENDING_CHARGE: "Pending charge",
    BatteryState.PENDING_DISCHARGE: "Pending discharge",
}


def format_tooltip(percentage: int, state: BatteryState) -> str:
    """Return the tooltip text, e.g. "42% (Discharging)"."""
    return f"{percentage}% ({state.label})"


@dataclass(frozen=True)
class DeviceState:
    """Snapshot of the last known battery values."""

    percentage: int = 0
    state: BatteryState = BatteryState.UNKNOWN
    icon_name: str = ""

    @property
    def tooltip(self) -> str:
        return format_tooltip(self.percentage, self.state)

    def with_percentage(self, percentage: int) -> "DeviceState":
        return replace(self, percentage=percentage)

    def with_state(self, state: BatteryState) -> "DeviceState":
        return replace(self, state=state)

    def with_icon_name(self, icon_name: str) -> "DeviceState":
        return replace(self, icon_name=icon_name)
