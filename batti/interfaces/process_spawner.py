"""Child process spawning interface."""
from abc import ABC, abstractmethod
from typing import Callable, Sequence

ChildExitCallback = Callable[[int, int], None]


class IProcessSpawner(ABC):
    """Abstract interface for launching and reaping detached child processes."""

    @abstractmethod
    def spawn(self, argv: Sequence[str]) -> int:
        """
        Start a child process without waiting for it.

        Args:
            argv: Program path followed by its arguments

        Returns:
            Process id of the child

        Raises:
            SpawnError: If the process could not be started
        """
        pass

    @abstractmethod
    def watch(self, pid: int, callback: ChildExitCallback) -> None:
        """
        Call callback(pid, status) from the main loop once the child exits.

        Args:
            pid: Process id returned by spawn()
            callback: Exit handler
        """
        pass

    @abstractmethod
    def close(self, pid: int) -> None:
        """Release resources held for a finished child."""
        pass
