"""
Log entry data structure

Built fresh for every log call that passes the level filter.
"""

import sys
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from tinylog.core.errors import ContractViolation
from tinylog.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains everything a formatter needs to render one event. Source
    location parts are independent: either, both or neither may be set.
    """

    level: LogLevel
    message: str
    extras: List[str] = field(default_factory=list)
    file_path: Optional[str] = None
    line_number: Optional[int] = None
    show_timestamp: bool = True

    def __post_init__(self):
        """Validate log entry after initialization."""
        try:
            self.level = LogLevel(self.level)
        except ValueError:
            raise ContractViolation(f"Unknown log level value: {self.level!r}") from None
        if not self.level.is_concrete:
            raise ContractViolation("INHERIT is not a valid event severity")
        if not isinstance(self.message, str):
            self.message = str(self.message)
        self.extras = [e if isinstance(e, str) else str(e) for e in self.extras]
        if self.file_path is not None:
            self.file_path = str(self.file_path)

    @property
    def has_location(self) -> bool:
        """True if a file path or a line number was given."""
        return self.file_path is not None or self.line_number is not None

    def with_text(self, message: str, extras: List[str]) -> "LogEntry":
        """Return a copy carrying different message and extras."""
        return replace(self, message=message, extras=list(extras))


def caller_location(depth: int = 1) -> Tuple[Optional[str], Optional[int]]:
    """
    Return (file path, line number) of a frame up the call stack.

    Args:
        depth: 0 is the caller of this function, 1 its caller, and so on

    Returns:
        Tuple of file path and line number, (None, None) if the stack is
        shallower than requested
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None, None
    return frame.f_code.co_filename, frame.f_lineno
