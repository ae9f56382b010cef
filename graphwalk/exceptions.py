"""Exception hierarchy for graphwalk.

All library errors derive from GraphWalkError and carry a human readable
message plus an optional ``details`` dictionary with structured context.
"""

from typing import Any, Dict, Optional


class GraphWalkError(Exception):
    """Base exception for all graphwalk errors.

    Attributes:
        message: Human readable description of the error
        details: Structured context about the error
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ValidationError(GraphWalkError):
    """Raised when an argument fails validation."""

    pass


class InvalidConfigurationError(GraphWalkError):
    """Raised when a configuration value is unknown or conflicting."""

    def __init__(
        self,
        config_key: str,
        config_value: Any,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.config_key = config_key
        self.config_value = config_value
        super().__init__(
            f"Invalid configuration for '{config_key}' = {config_value!r}: {message}",
            details=details,
        )


class ExtensionError(GraphWalkError):
    """Base exception for graph extension failures."""

    pass


class DuplicateExtensionError(ExtensionError):
    """Raised when the same extension is applied twice to one graph."""

    def __init__(self, extension_id: Any, details: Optional[Dict[str, Any]] = None):
        self.extension_id = extension_id
        super().__init__(
            f"Extension {_describe(extension_id)} is already applied.",
            details=details,
        )


class InvalidExtensionError(ExtensionError):
    """Raised when an extension does not provide an apply(graph) operation."""

    def __init__(self, extension: Any, details: Optional[Dict[str, Any]] = None):
        self.extension = extension
        super().__init__(
            f"{_describe(extension)} does not implement Extension",
            details=details,
        )


def _describe(obj: Any) -> str:
    """Return a readable name for an extension id, class or instance."""
    if isinstance(obj, str):
        return obj
    if isinstance(obj, type):
        return f"{obj.__module__}.{obj.__qualname__}"
    return repr(obj)


__all__ = [
    "GraphWalkError",
    "ValidationError",
    "InvalidConfigurationError",
    "ExtensionError",
    "DuplicateExtensionError",
    "InvalidExtensionError",
]
