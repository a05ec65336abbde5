"""Child processes started and reaped through the GLib main loop."""
import logging
from typing import Sequence

from gi.repository import GLib

from batti.errors import SpawnError
from batti.interfaces.process_spawner import ChildExitCallback, IProcessSpawner

logger = logging.getLogger("BATTI.Spawner")


class GLibProcessSpawner(IProcessSpawner):
    """Spawns with DO_NOT_REAP_CHILD and reaps via GLib.child_watch_add.

    Bare program names such as "xterm" are looked up in PATH.
    """

    def spawn(self, argv: Sequence[str]) -> int:
        try:
            pid, _stdin, _stdout, _stderr = GLib.spawn_async(
                list(argv),
                flags=GLib.SpawnFlags.DO_NOT_REAP_CHILD | GLib.SpawnFlags.SEARCH_PATH,
            )
        except GLib.Error as e:
            raise SpawnError(e.message) from e
        return int(pid)

    def watch(self, pid: int, callback: ChildExitCallback) -> None:
        def on_child_exit(child_pid, status):
            callback(int(child_pid), status)

        GLib.child_watch_add(GLib.PRIORITY_DEFAULT, pid, on_child_exit)

    def close(self, pid: int) -> None:
        GLib.spawn_close_pid(pid)
