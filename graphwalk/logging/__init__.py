"""Logging helpers for graphwalk."""

from .config import LIBRARY_LOGGER_NAME, configure_logging, get_logging_config
from .custom_levels import TRACE_LEVEL_NUMBER, add_custom_log_level

__all__ = [
    "configure_logging",
    "get_logging_config",
    "LIBRARY_LOGGER_NAME",
    "TRACE_LEVEL_NUMBER",
    "add_custom_log_level",
]
