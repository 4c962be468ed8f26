"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

tinylog - A small synchronous hierarchical logging core
with text and streamed JSON outputs
"""

__version__ = "0.1.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

import logging

from tinylog.core.errors import ContractViolation
from tinylog.core.log_level import LogLevel, get_level_name
from tinylog.core.log_entry import LogEntry
from tinylog.core.logger import Logger
from tinylog.core.logger_builder import LoggerBuilder
from tinylog.core.logger_config import LoggerConfig, ExtrasLayout
from tinylog.core.timestamp import TimestampProvider
from tinylog.core.outputs import (
    enable_text_output,
    add_text_output,
    disable_text_output,
    is_text_output_enabled,
    enable_json_output,
    add_json_output,
    disable_json_output,
    is_json_output_enabled,
    close_all_outputs,
    reserve_hierarchy_capacity,
    configure,
    get_config,
    reset,
)

# Import submodules (not all classes by default)
from tinylog import formatters
from tinylog import sinks

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ContractViolation",
    "LogLevel",
    "get_level_name",
    "LogEntry",
    "Logger",
    "LoggerBuilder",
    "LoggerConfig",
    "ExtrasLayout",
    "TimestampProvider",
    "enable_text_output",
    "add_text_output",
    "disable_text_output",
    "is_text_output_enabled",
    "enable_json_output",
    "add_json_output",
    "disable_json_output",
    "is_json_output_enabled",
    "close_all_outputs",
    "reserve_hierarchy_capacity",
    "configure",
    "get_config",
    "reset",
    "formatters",
    "sinks",
]
