"""Tray icon built on Gtk.StatusIcon.

GTK 4 has no status icon, so this module pins GTK 3.
"""
import warnings
from typing import Callable

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import Gtk  # noqa: E402

from batti.interfaces.presenter import ITrayPresenter  # noqa: E402

warnings.filterwarnings("ignore", category=DeprecationWarning, message=".*Gtk.StatusIcon.*")


class StatusIconPresenter(ITrayPresenter):
    """ITrayPresenter showing a themed icon in the notification area."""

    def __init__(self):
        self.status_icon = Gtk.StatusIcon()
        self.status_icon.set_title("batti")

    def set_icon_name(self, icon_name: str) -> None:
        self.status_icon.set_from_icon_name(icon_name)

    def set_tooltip_text(self, text: str) -> None:
        self.status_icon.set_tooltip_text(text)

    def connect_activate(self, callback: Callable[[], None]) -> None:
        self.status_icon.connect("activate", lambda _icon: callback())

    def connect_popup(self, callback: Callable[[], None]) -> None:
        self.status_icon.connect("popup-menu", lambda _icon, _button, _time: callback())
