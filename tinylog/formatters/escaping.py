"""Text sanitizing for JSON string values"""

from typing import Iterable, List

from tinylog.core.log_entry import LogEntry


def escape_quotes(text: str) -> str:
    """Replace every double quote with a single quote."""
    return text.replace('"', "'")


def escape_all(texts: Iterable[str]) -> List[str]:
    """Apply escape_quotes to each string, keeping order."""
    return [escape_quotes(t) for t in texts]


def escape_entry(entry: LogEntry) -> LogEntry:
    """
    Return a copy of entry with quote-escaped message and extras.

    Called once per log call; the copy is shared by every JSON destination.
    """
    return entry.with_text(escape_quotes(entry.message), escape_all(entry.extras))
