"""Custom log levels for graphwalk.

Traversal color transitions are logged below DEBUG so they can be switched on
without the rest of the debug output. TRACE is registered at import.
"""

import logging
from typing import Any, Optional

# Per-vertex traversal events (below DEBUG=10)
TRACE_LEVEL_NUMBER = 5


def add_custom_log_level(
    level_name: str, level_number: int, method_name: Optional[str] = None
) -> int:
    """Register a level name and a matching Logger method.

    Args:
        level_name: Name shown in records, e.g. "TRACE"
        level_number: Numeric level; values below DEBUG are noisier than debug output
        method_name: Logger method to add; defaults to level_name.lower()

    Returns:
        The registered level number

    Raises:
        ValueError: If level_name is already bound to another number
    """
    known = logging.getLevelName(level_name)
    if isinstance(known, int):
        if known != level_number:
            raise ValueError(
                f"Log level '{level_name}' already exists with number {known}"
            )
        return level_number

    logging.addLevelName(level_number, level_name)

    def log_at_level(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(level_number):
            self._log(level_number, message, args, **kwargs)

    setattr(logging.getLoggerClass(), method_name or level_name.lower(), log_at_level)
    return level_number


add_custom_log_level("TRACE", TRACE_LEVEL_NUMBER)


__all__ = ["add_custom_log_level", "TRACE_LEVEL_NUMBER"]
