"""
Base formatter interface
"""

from abc import ABC, abstractmethod

from tinylog.core.log_entry import LogEntry
from tinylog.core.timestamp import TimestampProvider


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into the exact characters written
    to a destination. Timestamps are taken from the provider at format
    time, so each call sees the current clock.
    """

    def __init__(self, timestamp_provider: TimestampProvider = None):
        self.timestamp_provider = timestamp_provider or TimestampProvider()

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string representation of the log entry
        """
        pass
