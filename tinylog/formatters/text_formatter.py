"""
Text formatter for line-oriented output

Produces lines like:
    [ERROR] 2024-01-02 03:04:05 - a.py (line 10) - boom - EXTRAS -  x=1 ;
"""

from tinylog.core.log_entry import LogEntry
from tinylog.core.log_level import PADDED_NAME_WIDTH, get_level_name
from tinylog.core.logger_config import ExtrasLayout
from tinylog.core.timestamp import TimestampProvider
from tinylog.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entries as one newline-terminated text line.

    In SEPARATE_LINES layout the extras follow on their own lines,
    indented past the level tag.
    """

    EXTRAS_MARKER = " - EXTRAS "
    EXTRAS_INDENT = " " * (PADDED_NAME_WIDTH + 3)

    def __init__(
        self,
        extras_layout: ExtrasLayout = ExtrasLayout.INLINE,
        timestamp_provider: TimestampProvider = None
    ):
        """
        Initialize text formatter.

        Args:
            extras_layout: INLINE or SEPARATE_LINES
            timestamp_provider: Source of timestamp strings

        Example:
            formatter = TextFormatter()
            formatter = TextFormatter(ExtrasLayout.SEPARATE_LINES)
        """
        super().__init__(timestamp_provider)
        self.extras_layout = extras_layout

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a text line.

        Args:
            entry: Log entry to format

        Returns:
            The line, including its trailing newline
        """
        parts = ["[", get_level_name(entry.level, pad=True), "] "]

        if entry.show_timestamp:
            parts.append(self.timestamp_provider.now())
            parts.append(" - ")

        if entry.file_path is not None:
            parts.append(f"{entry.file_path} ")
        if entry.line_number is not None:
            parts.append(f"(line {entry.line_number}) ")
        if entry.has_location:
            parts.append("- ")

        parts.append(entry.message)

        if entry.extras:
            parts.append(self.EXTRAS_MARKER)
            if self.extras_layout is ExtrasLayout.SEPARATE_LINES:
                parts.append(":")
                for extra in entry.extras:
                    parts.append(f"\n{self.EXTRAS_INDENT}- {extra} ;")
            else:
                parts.append("- ")
                for extra in entry.extras:
                    parts.append(f" {extra} ;")

        parts.append("\n")
        return "".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(extras_layout={self.extras_layout.value})"
