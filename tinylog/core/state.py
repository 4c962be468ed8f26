"""
Process-wide logging state

The hierarchy, both sink sets, the configuration and the formatters live
in one LoggingState guarded by a single re-entrant lock.
"""

from __future__ import annotations

import atexit
import logging
import threading
from typing import TYPE_CHECKING, Any, Optional

from tinylog.core.hierarchy import BaseHierarchy, ConstructionOrderHierarchy
from tinylog.core.log_entry import LogEntry
from tinylog.core.log_level import LogLevel
from tinylog.core.logger_config import LoggerConfig
from tinylog.core.timestamp import TimestampProvider
from tinylog.formatters.escaping import escape_entry
from tinylog.formatters.json_formatter import JSONFormatter
from tinylog.formatters.text_formatter import TextFormatter
from tinylog.sinks.json_sinks import JsonSinkSet
from tinylog.sinks.text_sinks import TextSinkSet

if TYPE_CHECKING:
    from tinylog.core.logger import Logger

_log = logging.getLogger(__name__)


class LoggingState:
    """
    Shared state behind every Logger.

    Thread Safety:
        Every public method takes the same RLock. Re-entrancy lets a
        garbage-collection callback (last logger collected) close the
        outputs even if it fires while this thread holds the lock.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        hierarchy: Optional[BaseHierarchy] = None,
        timestamp_provider: Optional[TimestampProvider] = None
    ):
        self._lock = threading.RLock()
        self.text_sinks = TextSinkSet()
        self.json_sinks = JsonSinkSet()
        self.hierarchy = hierarchy or ConstructionOrderHierarchy(
            on_empty=self._on_last_logger_collected, lock=self._lock
        )
        self.configure(config, timestamp_provider)

    def configure(
        self,
        config: Optional[LoggerConfig] = None,
        timestamp_provider: Optional[TimestampProvider] = None
    ) -> None:
        """
        Apply a configuration.

        Args:
            config: New configuration (default: LoggerConfig.default())
            timestamp_provider: Timestamp source (default: built from config)
        """
        with self._lock:
            self.config = config or LoggerConfig.default()
            self.timestamp_provider = timestamp_provider or TimestampProvider(
                self.config.timestamp_format
            )
            self.text_formatter = TextFormatter(
                self.config.extras_layout, self.timestamp_provider
            )
            self.json_formatter = JSONFormatter(self.timestamp_provider)
            _log.debug("Configured: %s", self.config)

    # Hierarchy

    def register(self, instance: "Logger") -> None:
        with self._lock:
            self.hierarchy.register(instance)

    def resolve_level(self) -> LogLevel:
        """Effective threshold for the next log call."""
        with self._lock:
            return self.hierarchy.resolve(self.config.default_level)

    def reserve_capacity(self, capacity: int) -> None:
        with self._lock:
            self.hierarchy.reserve(capacity)

    # Text output

    def enable_text_output(self, destination: Any) -> None:
        with self._lock:
            self.text_sinks.enable(destination)
            _log.debug("Text output enabled on %r", destination)

    def add_text_output(self, destination: Any) -> None:
        with self._lock:
            self.text_sinks.add(destination)
            _log.debug("Text output added on %r", destination)

    def disable_text_output(self) -> None:
        with self._lock:
            if self.text_sinks.enabled:
                _log.debug("Text output disabled (%d destinations)", len(self.text_sinks))
            self.text_sinks.disable()

    # JSON output

    def enable_json_output(self, destination: Any) -> None:
        with self._lock:
            self.json_sinks.enable(destination)
            _log.debug("JSON output enabled on %r", destination)

    def add_json_output(self, destination: Any) -> None:
        with self._lock:
            self.json_sinks.add(destination)
            _log.debug("JSON output added on %r", destination)

    def disable_json_output(self) -> None:
        with self._lock:
            if self.json_sinks.enabled:
                _log.debug("JSON output disabled (%d destinations)", len(self.json_sinks))
            self.json_sinks.disable()

    def close_all_outputs(self) -> None:
        """Disable text output and close every JSON array."""
        with self._lock:
            if self.text_sinks.enabled:
                self.disable_text_output()
            if self.json_sinks.enabled:
                self.disable_json_output()

    def _on_last_logger_collected(self) -> None:
        with self._lock:
            # A logger registered by another thread in the meantime keeps outputs open
            if self.hierarchy.live_count != 0:
                return
            _log.debug("Last live logger collected, closing outputs")
            self.close_all_outputs()

    # Dispatch

    def dispatch(self, entry: LogEntry) -> bool:
        """
        Filter an entry against the effective level and write it out.

        Args:
            entry: Entry to log

        Returns:
            True if the entry passed the level filter
        """
        with self._lock:
            if entry.level < self.resolve_level():
                return False

            if self.text_sinks.enabled:
                self.text_sinks.emit(lambda: self.text_formatter.format(entry))

            if self.json_sinks.enabled:
                escaped = escape_entry(entry)
                self.json_sinks.emit(lambda: self.json_formatter.format(escaped))

            return True

    def reset(self, config: Optional[LoggerConfig] = None) -> None:
        """
        Return to a freshly initialized state.

        Open JSON arrays are closed first. Loggers registered before the
        reset are forgotten by the hierarchy.
        """
        with self._lock:
            self.close_all_outputs()
            self.hierarchy.clear()
            self.configure(config)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"LoggingState(hierarchy={self.hierarchy!r}, "
            f"text={self.text_sinks!r}, json={self.json_sinks!r})"
        )


_state = LoggingState()
atexit.register(_state.close_all_outputs)


def get_state() -> LoggingState:
    """Return the process-wide logging state."""
    return _state
