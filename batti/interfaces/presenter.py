"""Tray presentation interface."""
from abc import ABC, abstractmethod
from typing import Callable


class ITrayPresenter(ABC):
    """Abstract interface for the tray icon the applet drives."""

    @abstractmethod
    def set_icon_name(self, icon_name: str) -> None:
        """
        Show the named theme icon.

        Args:
            icon_name: Icon theme name, e.g. "battery-full"
        """
        pass

    @abstractmethod
    def set_tooltip_text(self, text: str) -> None:
        """
        Replace the tooltip text.

        Args:
            text: Tooltip text, e.g. "42% (Discharging)"
        """
        pass

    @abstractmethod
    def connect_activate(self, callback: Callable[[], None]) -> None:
        """Register a callback for the primary click."""
        pass

    @abstractmethod
    def connect_popup(self, callback: Callable[[], None]) -> None:
        """Register a callback for the context click."""
        pass
