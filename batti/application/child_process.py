"""Keeps at most one instance of each helper command running."""
import logging
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple, Union

from batti.errors import SpawnError
from batti.interfaces.process_spawner import IProcessSpawner

logger = logging.getLogger("BATTI.Subprocess")

ACTIVATE_SLOT = "activate"
POPUP_SLOT = "popup"


@dataclass(frozen=True)
class Idle:
    """No child is running for the slot."""


@dataclass(frozen=True)
class Running:
    """A child started from the slot has not exited yet."""

    pid: int


SlotStatus = Union[Idle, Running]


@dataclass
class ChildProcessSlot:
    """One launch point with its fixed command line."""

    name: str
    argv: Tuple[str, ...]
    status: SlotStatus = Idle()

    @property
    def is_running(self) -> bool:
        return isinstance(self.status, Running)


class SubprocessSingletonManager:
    """Launches slot commands, ignoring triggers while the slot's child is alive.

    Transitions per slot are Idle -> Running on a successful spawn and
    Running -> Idle when the child exits, whatever its exit status.
    """

    def __init__(self, spawner: IProcessSpawner):
        self._spawner = spawner
        self._slots: Dict[str, ChildProcessSlot] = {}

    def add_slot(self, name: str, argv: Sequence[str]) -> ChildProcessSlot:
        """
        Register a launch point.

        Args:
            name: Slot name, e.g. "activate"
            argv: Command line started by trigger()

        Returns:
            The new idle slot
        """
        if name in self._slots:
            raise ValueError(f"Slot {name!r} already exists")
        slot = ChildProcessSlot(name=name, argv=tuple(argv))
        self._slots[name] = slot
        return slot

    def slot(self, name: str) -> ChildProcessSlot:
        return self._slots[name]

    def is_running(self, name: str) -> bool:
        return self._slots[name].is_running

    def trigger(self, name: str) -> bool:
        """
        Start the slot's command unless it is already running.

        Args:
            name: Slot name

        Returns:
            True if a new process was started
        """
        slot = self._slots[name]
        if slot.is_running:
            logger.debug("%s: already running (pid %d), ignoring", name, slot.status.pid)
            return False

        try:
            pid = self._spawner.spawn(slot.argv)
        except SpawnError as e:
            logger.warning("%s: could not start %s: %s", name, slot.argv[0], e)
            return False

        slot.status = Running(pid)
        self._spawner.watch(pid, lambda child_pid, status: self.on_child_exited(name, child_pid, status))
        logger.info("%s: started %s (pid %d)", name, slot.argv[0], pid)
        return True

    def on_child_exited(self, name: str, pid: int, status: int) -> None:
        """
        Reap a finished child and return its slot to Idle.

        Args:
            name: Slot the child was started from
            pid: Process id of the child
            status: Wait status, not inspected
        """
        self._spawner.close(pid)
        self._slots[name].status = Idle()
        logger.debug("%s: pid %d exited with status %d", name, pid, status)
