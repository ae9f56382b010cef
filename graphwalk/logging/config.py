"""Logging configuration for graphwalk.

graphwalk never configures the root logger. Applications that want to see
library output call configure_logging(), which attaches a single stream
handler to the ``graphwalk`` logger.
"""

import logging
import os
from typing import Any, Dict, Optional

from .custom_levels import TRACE_LEVEL_NUMBER

logger = logging.getLogger(__name__)

LIBRARY_LOGGER_NAME = "graphwalk"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_level(level_name: str) -> Optional[int]:
    """Map a level name such as "DEBUG" or "TRACE" to its number."""
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else None


def get_logging_config() -> Dict[str, Any]:
    """Get logging configuration from environment variables and defaults.

    Returns:
        Dictionary with ``level`` (int), ``level_name`` and ``format`` keys

    Environment Variables:
        GRAPHWALK_LOG_LEVEL: Level name for the graphwalk logger
            (default: "WARNING"; "TRACE" enables per-vertex traversal output)
        GRAPHWALK_LOG_FORMAT: logging.Formatter format string
    """
    level_name = os.getenv("GRAPHWALK_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = _resolve_level(level_name)
    if level is None:
        logger.warning(
            f"Invalid log level: {level_name}, falling back to {DEFAULT_LOG_LEVEL}"
        )
        level_name = DEFAULT_LOG_LEVEL
        level = logging.WARNING

    return {
        "level": level,
        "level_name": level_name,
        "format": os.getenv("GRAPHWALK_LOG_FORMAT", DEFAULT_LOG_FORMAT),
    }


def configure_logging(
    level: Optional[int] = None, fmt: Optional[str] = None
) -> logging.Logger:
    """Configure the ``graphwalk`` logger.

    Explicit arguments win over the environment. A StreamHandler is added only
    if the logger has no handlers yet, so repeated calls just adjust the level.

    Args:
        level: Log level number (e.g. logging.DEBUG or TRACE_LEVEL_NUMBER)
        fmt: Format string for the handler

    Returns:
        The configured library logger
    """
    config = get_logging_config()
    if level is None:
        level = config["level"]
    if fmt is None:
        fmt = config["format"]

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(level)

    if not library_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        library_logger.addHandler(handler)

    return library_logger


__all__ = [
    "get_logging_config",
    "configure_logging",
    "LIBRARY_LOGGER_NAME",
    "TRACE_LEVEL_NUMBER",
]
