"""Decoding of UPower device property values.

Values arrive already unpacked from their GLib.Variant wrappers, so the
decoders work on plain Python objects and reject anything of the wrong type
with PropertyDecodeError.
"""
from batti.domain.device import BatteryState
from batti.errors import PropertyDecodeError

# UPower reports "<name>-symbolic" icon names; the tray wants the full-colour one.
SYMBOLIC_SUFFIX = "-symbolic"


def decode_icon_name(raw, strip_symbolic: bool = True) -> str:
    """
    Decode the IconName property.

    The symbolic suffix is removed by trimming its length from the end of the
    name. The trailing characters are not compared, so "battery-full-simbolic"
    becomes "battery-full" as well.

    Args:
        raw: Icon name as reported by UPower
        strip_symbolic: Remove the symbolic suffix when True

    Returns:
        Icon name for the tray, "" when the name is not longer than the suffix
    """
    if not isinstance(raw, str):
        raise PropertyDecodeError(f"IconName must be a string, got {type(raw).__name__}")
    if not strip_symbolic:
        return raw
    keep = len(raw) - len(SYMBOLIC_SUFFIX)
    if keep <= 0:
        return ""
    return raw[:keep]


def decode_percentage(raw) -> int:
    """Truncate the Percentage property to an integer. Out-of-range values pass through."""
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise PropertyDecodeError(f"Percentage must be a number, got {type(raw).__name__}")
    try:
        return int(raw)
    except (ValueError, OverflowError) as e:
        raise PropertyDecodeError(f"Percentage is not finite: {raw!r}") from e


def decode_state(raw) -> BatteryState:
    """Map the State property code to a BatteryState."""
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise PropertyDecodeError(f"State must be an integer, got {type(raw).__name__}")
    return BatteryState.from_code(raw)
