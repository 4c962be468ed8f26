"""Timestamp provider"""

from datetime import datetime
from typing import Callable, Optional

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class TimestampProvider:
    """
    Produce a fixed-format wall-clock timestamp on demand.

    Every call reads the clock again; nothing is cached between calls.
    """

    def __init__(
        self,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize timestamp provider.

        Args:
            timestamp_format: strftime format for timestamps
            clock: Callable returning the current datetime (default: datetime.now)

        Example:
            # Local time, second precision
            provider = TimestampProvider()

            # Frozen clock for reproducible output
            provider = TimestampProvider(clock=lambda: datetime(2024, 1, 2, 3, 4, 5))
        """
        self.timestamp_format = timestamp_format
        self.clock = clock or datetime.now

    def now(self) -> str:
        """Return the current time rendered with the configured format."""
        return self.clock().strftime(self.timestamp_format)

    def __repr__(self) -> str:
        """String representation."""
        return f"TimestampProvider(format='{self.timestamp_format}')"
