"""
Logger configuration management

Replaces build-time switches with a structure applied at startup.
"""

from dataclasses import dataclass
from enum import Enum

from tinylog.core.log_level import LogLevel
from tinylog.core.timestamp import DEFAULT_TIMESTAMP_FORMAT


class ExtrasLayout(Enum):
    """How extras are laid out in text output."""

    INLINE = "inline"                   # " - EXTRAS -  a ; b ;"
    SEPARATE_LINES = "separate_lines"   # one indented "- a ;" line per extra


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    The default level is what an all-INHERIT hierarchy resolves to. It is
    picked from ``default_debug_level`` or ``default_release_level``
    depending on ``debug_mode``, which follows the interpreter's
    ``__debug__`` flag unless set explicitly.
    """

    # Level settings
    default_debug_level: LogLevel = LogLevel.INFO
    default_release_level: LogLevel = LogLevel.WARN
    debug_mode: bool = __debug__

    # Format settings
    extras_layout: ExtrasLayout = ExtrasLayout.INLINE
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.default_debug_level, str):
            self.default_debug_level = LogLevel.from_string(self.default_debug_level)
        if isinstance(self.default_release_level, str):
            self.default_release_level = LogLevel.from_string(self.default_release_level)
        if isinstance(self.extras_layout, str):
            self.extras_layout = ExtrasLayout(self.extras_layout)

        if not LogLevel(self.default_debug_level).is_concrete:
            raise ValueError("default_debug_level cannot be INHERIT")
        if not LogLevel(self.default_release_level).is_concrete:
            raise ValueError("default_release_level cannot be INHERIT")
        if not self.timestamp_format:
            raise ValueError("timestamp_format cannot be empty")

    @property
    def default_level(self) -> LogLevel:
        """Level used when every logger in the hierarchy is INHERIT."""
        if self.debug_mode:
            return self.default_debug_level
        return self.default_release_level

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            default_debug_level=LogLevel.DEBUG,
            debug_mode=True,
            extras_layout=ExtrasLayout.SEPARATE_LINES,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            debug_mode=False,
            extras_layout=ExtrasLayout.INLINE,
        )
