"""
Log level enumeration

Five ordered severities plus the INHERIT sentinel.
"""

from enum import IntEnum
from typing import Dict, Union

from tinylog.core.errors import ContractViolation


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Concrete levels are totally ordered: DEBUG < INFO < WARN < ERROR < FATAL.
    INHERIT is only ever a configured value meaning "defer to the hierarchy";
    it never takes part in filtering and is never the severity of an event.
    """

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    INHERIT = -1

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def is_concrete(self) -> bool:
        """True for the five filtering levels, False for INHERIT."""
        return self is not LogLevel.INHERIT

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")


# Width every padded level name is brought up to
PADDED_NAME_WIDTH = 5

LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
    LogLevel.INHERIT: "INHERIT",
}


def get_level_name(level: Union[LogLevel, int], pad: bool = False) -> str:
    """
    Return the canonical uppercase name of a level.

    Args:
        level: A LogLevel (or its integer value)
        pad: Right-pad with spaces up to 5 characters

    Returns:
        The level name

    Raises:
        ContractViolation: If level is not one of the six defined values
    """
    try:
        name = LEVEL_NAMES[LogLevel(level)]
    except ValueError:
        raise ContractViolation(f"Unknown log level value: {level!r}") from None
    if pad:
        return name.ljust(PADDED_NAME_WIDTH)
    return name
