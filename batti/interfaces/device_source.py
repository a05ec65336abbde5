"""Remote battery device interface."""
from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Optional, Sequence

PropertiesChangedCallback = Callable[[Mapping[str, Any], Sequence[str]], None]


class IDeviceProxy(ABC):
    """Abstract interface for reading and watching battery properties."""

    @abstractmethod
    def get_property(self, name: str) -> Optional[Any]:
        """
        Read the current value of a property.

        Args:
            name: Property name, e.g. "Percentage"

        Returns:
            Unpacked value, or None if the property is not available
        """
        pass

    @abstractmethod
    def connect_properties_changed(self, callback: PropertiesChangedCallback) -> None:
        """
        Register callback(changed, invalidated) for property change notifications.

        Args:
            callback: Receives a mapping of property name to new value and
                a list of invalidated property names
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Stop delivering change notifications to registered callbacks."""
        pass
