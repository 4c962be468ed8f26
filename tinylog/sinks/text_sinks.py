"""Text sink set"""

from typing import Any, Callable, List

from tinylog.core.errors import ContractViolation


class TextSinkSet:
    """
    Destinations receiving line-oriented text output.

    A destination is any object with a ``write(str)`` method. Disabling
    writes nothing: destinations are left as the last line left them.
    """

    def __init__(self):
        self._destinations: List[Any] = []
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def destinations(self) -> List[Any]:
        """Snapshot of the registered destinations."""
        return list(self._destinations)

    def enable(self, destination: Any) -> None:
        """Turn text output on and register a destination."""
        if destination is None:
            raise ContractViolation("Text destination cannot be None")
        self._enabled = True
        self._destinations.append(destination)

    def add(self, destination: Any) -> None:
        """
        Register another destination.

        Raises:
            ContractViolation: If text output is not enabled yet
        """
        if not self._enabled:
            raise ContractViolation("Text output must be enabled before adding destinations")
        if destination is None:
            raise ContractViolation("Text destination cannot be None")
        self._destinations.append(destination)

    def disable(self) -> None:
        """Forget every destination and turn text output off."""
        self._destinations.clear()
        self._enabled = False

    def emit(self, render: Callable[[], str]) -> None:
        """
        Write one rendered line to every destination.

        Args:
            render: Called once per destination so each gets a fresh timestamp
        """
        if not self._enabled:
            return
        if not self._destinations:
            raise ContractViolation("Text output is enabled without destinations")
        for destination in self._destinations:
            destination.write(render())

    def __len__(self) -> int:
        return len(self._destinations)

    def __repr__(self) -> str:
        """String representation."""
        return f"TextSinkSet(enabled={self._enabled}, destinations={len(self._destinations)})"
