"""Extension contract for graphwalk graphs.

An extension is anything that knows how to modify a Graph through
``apply(graph)``. Graphs record which extensions they have received so that
each one is applied at most once.
"""

import inspect
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Type, Union

from graphwalk.exceptions import InvalidExtensionError

if TYPE_CHECKING:
    from .graph import Graph


class Extension(ABC):
    """Contract for extensions applied with Graph.apply()."""

    @abstractmethod
    def apply(self, graph: "Graph") -> Any:
        """Modify graph."""


def validate_extension(
    extension: Union[Type[Any], Any],
) -> Union[Type[Any], Any]:
    """Check that extension provides a callable apply(graph) operation.

    Args:
        extension: Extension class or instance

    Returns:
        The extension, unchanged

    Raises:
        InvalidExtensionError: If extension has no callable apply, or is an
            abstract Extension subclass that cannot be instantiated
    """
    apply = getattr(extension, "apply", None)
    if not callable(apply):
        raise InvalidExtensionError(
            extension,
            details={"reason": "missing apply(graph)"},
        )
    if inspect.isclass(extension) and inspect.isabstract(extension):
        raise InvalidExtensionError(
            extension,
            details={"reason": "abstract extension class"},
        )
    return extension


def instantiate_extension(extension: Union[Type[Any], Any]) -> Any:
    """Validate extension and return an instance of it.

    Classes are called without arguments; instances are returned as is.

    Raises:
        InvalidExtensionError: If validation fails or the class cannot be
            constructed without arguments
    """
    validate_extension(extension)
    if not inspect.isclass(extension):
        return extension
    try:
        return extension()
    except TypeError as exc:
        raise InvalidExtensionError(
            extension,
            details={"reason": f"cannot instantiate without arguments: {exc}"},
        ) from exc


def extension_id(extension: Union[Type[Any], Any]) -> Any:
    """Return the identifier a graph records for extension: its class."""
    return extension if inspect.isclass(extension) else type(extension)


__all__ = ["Extension", "validate_extension", "instantiate_extension", "extension_id"]
