"""
Log formatters module

Text-line and JSON-object formatters plus the JSON string sanitizing helpers.
"""

from tinylog.formatters.base_formatter import BaseFormatter
from tinylog.formatters.text_formatter import TextFormatter
from tinylog.formatters.json_formatter import JSONFormatter
from tinylog.formatters.escaping import escape_quotes, escape_all, escape_entry

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
    "escape_quotes",
    "escape_all",
    "escape_entry",
]
