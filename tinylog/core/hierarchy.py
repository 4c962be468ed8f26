"""
Logger hierarchy

Process-wide registry of logger instances used to resolve the effective
level threshold.
"""

from __future__ import annotations

import threading
import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, List, Optional

from tinylog.core.errors import ContractViolation
from tinylog.core.log_level import LogLevel

if TYPE_CHECKING:
    from tinylog.core.logger import Logger


class BaseHierarchy(ABC):
    """
    Abstract base class for level resolution policies.

    Callers only register instances and ask for the effective level, so a
    different policy (a parent-pointer tree, for instance) can be dropped
    in without touching the Logger.
    """

    @abstractmethod
    def register(self, instance: "Logger") -> None:
        """Record a newly constructed logger."""
        pass

    @abstractmethod
    def resolve(self, default: LogLevel) -> LogLevel:
        """
        Compute the effective level threshold.

        Args:
            default: Level returned when nothing in the hierarchy is concrete

        Returns:
            A concrete LogLevel
        """
        pass

    def reserve(self, capacity: int) -> None:
        """Pre-sizing hint. Policies without storage to size ignore it."""
        pass

    def clear(self) -> None:
        """Forget every registered instance."""
        pass


class ConstructionOrderHierarchy(BaseHierarchy):
    """
    Resolve levels by walking instances backward in construction order.

    The walk always starts at the most recently constructed logger,
    whichever instance asks, and stops at the first live instance whose
    configured level is not INHERIT. Nesting therefore follows construction
    order ("most recent wins"), not any logical parent/child relation.

    Entries are weak references and are never removed. A collected
    instance leaves a dead slot that the walk skips like an INHERIT entry.
    When the number of live instances drops to zero ``on_empty`` is called.
    Collection callbacks take ``lock``, so a shared lock serializes them
    with everything else guarded by it.
    """

    def __init__(
        self,
        on_empty: Optional[Callable[[], None]] = None,
        lock: Optional[threading.RLock] = None
    ):
        self._lock = lock or threading.RLock()
        self._refs: List[weakref.ref] = []
        self._live = 0
        self._generation = 0
        self._capacity = 0
        self.on_empty = on_empty

    def register(self, instance: "Logger") -> None:
        generation = self._generation

        def _collected(_ref: weakref.ref) -> None:
            self._release(generation)

        self._refs.append(weakref.ref(instance, _collected))
        self._live += 1

    def _release(self, generation: int) -> None:
        # References created before clear() belong to a forgotten registry
        with self._lock:
            if generation != self._generation:
                return
            self._live -= 1
            if self._live == 0 and self.on_empty is not None:
                self.on_empty()

    def resolve(self, default: LogLevel) -> LogLevel:
        index = len(self._refs) - 1
        if index < 0:
            raise ContractViolation("Cannot resolve a level: no logger was ever constructed")

        while True:
            instance = self._refs[index]()
            if instance is not None and instance.level is not LogLevel.INHERIT:
                return instance.level
            if index == 0:
                return default
            index -= 1

    def reserve(self, capacity: int) -> None:
        """
        Pre-sizing hint.

        Args:
            capacity: Expected number of instances

        Raises:
            ContractViolation: If capacity does not exceed the current size
        """
        if capacity <= len(self._refs):
            raise ContractViolation(
                f"Reserved capacity {capacity} must exceed current size {len(self._refs)}"
            )
        self._capacity = capacity

    def clear(self) -> None:
        self._refs.clear()
        self._live = 0
        self._capacity = 0
        self._generation += 1

    @property
    def capacity(self) -> int:
        """Largest of the reserved capacity and the current size."""
        return max(self._capacity, len(self._refs))

    @property
    def live_count(self) -> int:
        """Number of registered instances that are still alive."""
        return self._live

    def __len__(self) -> int:
        """Number of entries, dead slots included."""
        return len(self._refs)

    def __repr__(self) -> str:
        """String representation."""
        return f"ConstructionOrderHierarchy(entries={len(self._refs)}, live={self._live})"
