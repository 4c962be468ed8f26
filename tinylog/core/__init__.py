"""
Core module for tinylog

This module contains the fundamental classes:
- Logger: Hierarchical logger
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- LoggingState: Process-wide hierarchy and sinks
"""

from tinylog.core.errors import ContractViolation
from tinylog.core.log_level import LogLevel, get_level_name
from tinylog.core.log_entry import LogEntry
from tinylog.core.logger_config import LoggerConfig, ExtrasLayout
from tinylog.core.timestamp import TimestampProvider
from tinylog.core.hierarchy import BaseHierarchy, ConstructionOrderHierarchy
from tinylog.core.state import LoggingState, get_state
from tinylog.core.logger import Logger
from tinylog.core.logger_builder import LoggerBuilder

__all__ = [
    "ContractViolation",
    "LogLevel",
    "get_level_name",
    "LogEntry",
    "LoggerConfig",
    "ExtrasLayout",
    "TimestampProvider",
    "BaseHierarchy",
    "ConstructionOrderHierarchy",
    "LoggingState",
    "get_state",
    "Logger",
    "LoggerBuilder",
]
