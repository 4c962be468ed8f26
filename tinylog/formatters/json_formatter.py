"""
JSON formatter for streamed array output

Formats one log entry as one JSON object (an element of the streamed array)
"""

import json

from tinylog.core.log_entry import LogEntry
from tinylog.core.log_level import get_level_name
from tinylog.core.timestamp import TimestampProvider
from tinylog.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Keys come out in a fixed order: severity, message, timestamp and,
    only when there are any, extras. The timestamp is always present.
    Entries are expected to be quote-escaped already (see escaping).
    """

    def __init__(
        self,
        timestamp_provider: TimestampProvider = None,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            timestamp_provider: Source of timestamp strings
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters
        """
        super().__init__(timestamp_provider)
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON object string, without separator or newline
        """
        log_dict = {
            "severity": get_level_name(entry.level),
            "message": entry.message,
            "timestamp": self.timestamp_provider.now(),
        }

        if entry.extras:
            log_dict["extras"] = list(entry.extras)

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
