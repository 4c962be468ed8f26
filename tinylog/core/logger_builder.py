"""Logger builder pattern"""

from typing import Any, List, Optional

from tinylog.core.log_level import LogLevel
from tinylog.core.logger import Logger
from tinylog.core.logger_config import LoggerConfig
from tinylog.core.outputs import (
    add_json_output,
    add_text_output,
    configure,
    enable_json_output,
    enable_text_output,
    is_json_output_enabled,
    is_text_output_enabled,
)


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Outputs are process-wide: ``build()`` enables them for every logger,
    not only the one it returns. A destination becomes the first one of
    its kind when that kind is disabled, and is added otherwise.
    """

    def __init__(self):
        self._level = LogLevel.INHERIT
        self._config: Optional[LoggerConfig] = None
        self._text_destinations: List[Any] = []
        self._json_destinations: List[Any] = []

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set the configured level (INHERIT by default)."""
        self._level = level
        return self

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """
        Apply a process-wide configuration when building.

        Example:
            logger = (LoggerBuilder()
                .with_config(LoggerConfig.debug_config())
                .with_text_output(sys.stderr)
                .build())
        """
        self._config = config
        return self

    def with_text_output(self, destination: Any) -> "LoggerBuilder":
        """Write text lines to destination."""
        self._text_destinations.append(destination)
        return self

    def with_json_output(self, destination: Any) -> "LoggerBuilder":
        """Stream a JSON array to destination."""
        self._json_destinations.append(destination)
        return self

    def build(self) -> Logger:
        """Apply configuration, enable outputs, and return a registered logger."""
        if self._config is not None:
            configure(self._config)

        for destination in self._text_destinations:
            if is_text_output_enabled():
                add_text_output(destination)
            else:
                enable_text_output(destination)

        for destination in self._json_destinations:
            if is_json_output_enabled():
                add_json_output(destination)
            else:
                enable_json_output(destination)

        return Logger(self._level)
