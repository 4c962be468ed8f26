"""
JSON sink set

Streams records into destinations as the elements of one JSON array each.
"""

from typing import Any, Callable, List

from tinylog.core.errors import ContractViolation


class JsonSinkSet:
    """
    Destinations receiving an incrementally written JSON array.

    Every destination gets its own ``[`` when it joins and its own ``]``
    when the set is disabled. The output is only valid JSON once the set
    has been disabled.

    The emitted-record counter is shared by all destinations. A destination
    joining after records were already emitted therefore sees a ``,`` in
    front of its very first record.
    """

    ARRAY_OPEN = "["
    ARRAY_CLOSE = "]"
    SEPARATOR = ","

    def __init__(self):
        self._destinations: List[Any] = []
        self._enabled = False
        self._emitted = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def emitted_count(self) -> int:
        """Records emitted since JSON output was last enabled."""
        return self._emitted

    @property
    def destinations(self) -> List[Any]:
        """Snapshot of the registered destinations."""
        return list(self._destinations)

    def enable(self, destination: Any) -> None:
        """Turn JSON output on, reset the counter and open an array on destination."""
        if destination is None:
            raise ContractViolation("JSON destination cannot be None")
        self._enabled = True
        self._emitted = 0
        self._join(destination)

    def add(self, destination: Any) -> None:
        """
        Register another destination and open an array on it.

        Raises:
            ContractViolation: If JSON output is not enabled yet
        """
        if not self._enabled:
            raise ContractViolation("JSON output must be enabled before adding destinations")
        if destination is None:
            raise ContractViolation("JSON destination cannot be None")
        self._join(destination)

    def _join(self, destination: Any) -> None:
        self._destinations.append(destination)
        destination.write(self.ARRAY_OPEN)

    def disable(self) -> None:
        """Close the array on every destination, forget them and turn JSON output off."""
        for destination in self._destinations:
            destination.write(self.ARRAY_CLOSE)
        self._destinations.clear()
        self._enabled = False
        self._emitted = 0

    def emit(self, render: Callable[[], str]) -> None:
        """
        Write one record to every destination.

        Args:
            render: Called once per destination so each gets a fresh timestamp
        """
        if not self._enabled:
            return
        if not self._destinations:
            raise ContractViolation("JSON output is enabled without destinations")
        for destination in self._destinations:
            if self._emitted > 0:
                destination.write(self.SEPARATOR)
            destination.write(render())
        self._emitted += 1

    def __len__(self) -> int:
        return len(self._destinations)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"JsonSinkSet(enabled={self._enabled}, "
            f"destinations={len(self._destinations)}, emitted={self._emitted})"
        )
