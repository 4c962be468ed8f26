"""
Process-wide output control

Module-level functions operating on the shared LoggingState. Outputs are
global: enabling one affects every Logger in the process.
"""

from typing import Any, Optional

from tinylog.core.logger_config import LoggerConfig
from tinylog.core.state import get_state
from tinylog.core.timestamp import TimestampProvider


def enable_text_output(destination: Any) -> None:
    """
    Enable text output to a destination.

    Args:
        destination: Object with a write(str) method. Example: sys.stdout
    """
    get_state().enable_text_output(destination)


def add_text_output(destination: Any) -> None:
    """Add another text destination. Text output must already be enabled."""
    get_state().add_text_output(destination)


def disable_text_output() -> None:
    """Disable text output and forget its destinations. Safe if never enabled."""
    get_state().disable_text_output()


def is_text_output_enabled() -> bool:
    """Whether text output is currently enabled."""
    return get_state().text_sinks.enabled


def enable_json_output(destination: Any) -> None:
    """
    Enable JSON output to a destination.

    Writes ``[`` to the destination immediately and resets the record
    counter, so the next record is written without a leading comma.
    """
    get_state().enable_json_output(destination)


def add_json_output(destination: Any) -> None:
    """Add another JSON destination, opening an array on it. JSON output must be enabled."""
    get_state().add_json_output(destination)


def disable_json_output() -> None:
    """Write ``]`` to every JSON destination and disable JSON output."""
    get_state().disable_json_output()


def is_json_output_enabled() -> bool:
    """Whether JSON output is currently enabled."""
    return get_state().json_sinks.enabled


def close_all_outputs() -> None:
    """Disable both text and JSON output, closing every JSON array."""
    get_state().close_all_outputs()


def reserve_hierarchy_capacity(capacity: int) -> None:
    """
    Pre-sizing hint for the logger hierarchy.

    Raises:
        ContractViolation: If capacity does not exceed the number of loggers
            constructed so far
    """
    get_state().reserve_capacity(capacity)


def configure(
    config: Optional[LoggerConfig] = None,
    timestamp_provider: Optional[TimestampProvider] = None
) -> None:
    """Apply a configuration at startup (default levels, extras layout, timestamps)."""
    get_state().configure(config, timestamp_provider)


def get_config() -> LoggerConfig:
    """Return the configuration currently applied."""
    return get_state().config


def reset(config: Optional[LoggerConfig] = None) -> None:
    """Close all outputs, forget every logger and apply config."""
    get_state().reset(config)
