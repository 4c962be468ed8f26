"""Sinks module - text and JSON destination sets"""

from tinylog.sinks.text_sinks import TextSinkSet
from tinylog.sinks.json_sinks import JsonSinkSet

__all__ = ["TextSinkSet", "JsonSinkSet"]
