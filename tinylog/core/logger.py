"""
Main Logger class - synchronous hierarchical logger
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from tinylog.core.errors import ContractViolation
from tinylog.core.log_entry import LogEntry, caller_location
from tinylog.core.log_level import LogLevel
from tinylog.core.state import get_state


class Logger:
    """
    Logger bound into the process-wide hierarchy.

    The configured level is either concrete or INHERIT. The level actually
    used for filtering is resolved on every call by walking back from the
    most recently constructed logger, so a newer logger configured at
    DEBUG lowers the threshold for every older INHERIT logger too.

    Outputs are process-wide. Closing any logger (``close()`` or leaving
    its ``with`` block) closes ALL outputs, and so does the collection of
    the last live logger.

    Example:
        enable_text_output(sys.stdout)
        with Logger(LogLevel.DEBUG) as log:
            log.debug("starting")
    """

    def __init__(self, level: Union[LogLevel, str] = LogLevel.INHERIT):
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        self._level = _as_level(level)
        self._closed = False
        get_state().register(self)

    @property
    def level(self) -> LogLevel:
        """Configured level, possibly INHERIT."""
        return self._level

    @level.setter
    def level(self, value: LogLevel) -> None:
        self._level = _as_level(value)

    def get_effective_level(self) -> LogLevel:
        """Level currently used to filter log calls."""
        return get_state().resolve_level()

    def is_enabled_for(self, level: LogLevel) -> bool:
        """True if a call at level would pass the current threshold."""
        return level >= self.get_effective_level()

    def log(
        self,
        level: LogLevel,
        message: str,
        extras: Sequence[str] = (),
        file_path: Optional[str] = None,
        line_number: Optional[int] = None,
        show_timestamp: bool = True
    ) -> None:
        """
        Log a message if level passes the effective threshold.

        Args:
            level: Event severity, never INHERIT
            message: Message text
            extras: Extra annotation strings (a single string counts as one)
            file_path: Source file to report
            line_number: Source line to report
            show_timestamp: Include the timestamp in text output (JSON
                output always carries one)
        """
        level = _as_level(level)
        if not level.is_concrete:
            raise ContractViolation("INHERIT is not a valid event severity")

        state = get_state()
        # Cheap early exit before any record is built
        if level < state.resolve_level():
            return

        entry = LogEntry(
            level=level,
            message=message,
            extras=[extras] if isinstance(extras, str) else list(extras),
            file_path=file_path,
            line_number=line_number,
            show_timestamp=show_timestamp,
        )
        state.dispatch(entry)

    def _log_from_caller(
        self,
        level: LogLevel,
        message: str,
        extras: Sequence[str],
        with_location: bool,
        show_timestamp: bool
    ) -> None:
        file_path = line_number = None
        if with_location:
            # 0: here, 1: debug()/info()/..., 2: their caller
            file_path, line_number = caller_location(2)
        self.log(level, message, extras, file_path, line_number, show_timestamp)

    def debug(self, message: str, extras: Sequence[str] = (),
              with_location: bool = False, show_timestamp: bool = True) -> None:
        """Log debug message."""
        self._log_from_caller(LogLevel.DEBUG, message, extras, with_location, show_timestamp)

    def info(self, message: str, extras: Sequence[str] = (),
             with_location: bool = False, show_timestamp: bool = True) -> None:
        """Log info message."""
        self._log_from_caller(LogLevel.INFO, message, extras, with_location, show_timestamp)

    def warn(self, message: str, extras: Sequence[str] = (),
             with_location: bool = False, show_timestamp: bool = True) -> None:
        """Log warning message."""
        self._log_from_caller(LogLevel.WARN, message, extras, with_location, show_timestamp)

    def error(self, message: str, extras: Sequence[str] = (),
              with_location: bool = False, show_timestamp: bool = True) -> None:
        """Log error message."""
        self._log_from_caller(LogLevel.ERROR, message, extras, with_location, show_timestamp)

    def fatal(self, message: str, extras: Sequence[str] = (),
              with_location: bool = False, show_timestamp: bool = True) -> None:
        """Log fatal message."""
        self._log_from_caller(LogLevel.FATAL, message, extras, with_location, show_timestamp)

    def close(self) -> None:
        """Close ALL process-wide outputs. Later calls on this logger do nothing more."""
        if self._closed:
            return
        self._closed = True
        get_state().close_all_outputs()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(level={self._level.name})"


def _as_level(value) -> LogLevel:
    try:
        return LogLevel(value)
    except ValueError:
        raise ContractViolation(f"Unknown log level value: {value!r}") from None
