"""Vertex and edge factories with registry-based configuration.

A Graph never constructs Vertex or Edge objects itself. It asks its
VertexFactory and EdgeFactory, and the edge class an EdgeFactory produces
decides whether the graph is directed or undirected.

Factories are registered by name so that the defaults for new graphs can be
selected through the environment:

    GRAPHWALK_VERTEX_FACTORY: vertex factory name (default: "default")
    GRAPHWALK_EDGE_FACTORY: edge factory name (default: "undirected")
"""

import os
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from typing_extensions import override

from graphwalk.exceptions import InvalidConfigurationError, ValidationError

from .entities import Edge, UndirectedEdge, Vertex


class VertexFactory(ABC):
    """Creates Vertex instances for a Graph."""

    @abstractmethod
    def new_vertex(self, name: str) -> Vertex:
        """Create a new vertex named name."""


class EdgeFactory(ABC):
    """Creates Edge instances for a Graph.

    The returned edge's __eq__ and __hash__ define which edges the graph
    treats as duplicates.
    """

    @abstractmethod
    def new_edge(self, one: str, two: str) -> Edge:
        """Create a new edge between the vertices named one and two."""


class DefaultVertexFactory(VertexFactory):
    """Creates vertices of a configurable Vertex subclass."""

    def __init__(self, vertex_class: Type[Vertex] = Vertex):
        if not (isinstance(vertex_class, type) and issubclass(vertex_class, Vertex)):
            raise ValidationError(
                f"Vertex class {vertex_class!r} must inherit from Vertex",
                details={"vertex_class": repr(vertex_class)},
            )
        self.vertex_class = vertex_class

    @override
    def new_vertex(self, name: str) -> Vertex:
        return self.vertex_class(name=name)


class UndirectedEdgeFactory(EdgeFactory):
    """Creates edges where edge(A, B) equals edge(B, A)."""

    edge_class: Type[Edge] = UndirectedEdge

    @override
    def new_edge(self, one: str, two: str) -> Edge:
        return self.edge_class(one=one, two=two)


class DirectedEdgeFactory(EdgeFactory):
    """Creates edges compared by position: edge(A, B) differs from edge(B, A)."""

    edge_class: Type[Edge] = Edge

    @override
    def new_edge(self, one: str, two: str) -> Edge:
        return self.edge_class(one=one, two=two)


# Registries of factory implementations
_VERTEX_FACTORY_REGISTRY: Dict[str, Type[VertexFactory]] = {}
_EDGE_FACTORY_REGISTRY: Dict[str, Type[EdgeFactory]] = {}
# Default factory names
_DEFAULT_VERTEX_FACTORY: str = "default"
_DEFAULT_EDGE_FACTORY: str = "undirected"


def _check_subclass(factory_class: Type, base: Type, kind: str) -> None:
    try:
        is_subclass = issubclass(factory_class, base)
    except TypeError:
        is_subclass = False
    if not is_subclass:
        name = getattr(factory_class, "__name__", repr(factory_class))
        raise ValidationError(
            f"{kind} factory class {name} must inherit from {base.__name__}",
            details={"factory_class": name},
        )


def register_vertex_factory(
    name: str,
    factory_class: Type[VertexFactory],
    set_as_default: bool = False,
) -> None:
    """Register a vertex factory implementation.

    Args:
        name: Factory name to register
        factory_class: Class implementing VertexFactory, constructible without arguments
        set_as_default: Whether to use this factory for new graphs by default

    Raises:
        ValidationError: If factory_class doesn't inherit from VertexFactory
        InvalidConfigurationError: If name is already registered
    """
    _check_subclass(factory_class, VertexFactory, "Vertex")

    if name in _VERTEX_FACTORY_REGISTRY:
        raise InvalidConfigurationError(
            "vertex_factory",
            name,
            "Vertex factory is already registered",
            details={"name": name},
        )

    _VERTEX_FACTORY_REGISTRY[name] = factory_class

    if set_as_default:
        global _DEFAULT_VERTEX_FACTORY
        _DEFAULT_VERTEX_FACTORY = name


def register_edge_factory(
    name: str,
    factory_class: Type[EdgeFactory],
    set_as_default: bool = False,
) -> None:
    """Register an edge factory implementation.

    Args:
        name: Factory name to register
        factory_class: Class implementing EdgeFactory, constructible without arguments
        set_as_default: Whether to use this factory for new graphs by default

    Raises:
        ValidationError: If factory_class doesn't inherit from EdgeFactory
        InvalidConfigurationError: If name is already registered
    """
    _check_subclass(factory_class, EdgeFactory, "Edge")

    if name in _EDGE_FACTORY_REGISTRY:
        raise InvalidConfigurationError(
            "edge_factory",
            name,
            "Edge factory is already registered",
            details={"name": name},
        )

    _EDGE_FACTORY_REGISTRY[name] = factory_class

    if set_as_default:
        global _DEFAULT_EDGE_FACTORY
        _DEFAULT_EDGE_FACTORY = name


def unregister_vertex_factory(name: str) -> None:
    """Unregister a vertex factory implementation."""
    _VERTEX_FACTORY_REGISTRY.pop(name, None)

    global _DEFAULT_VERTEX_FACTORY
    if _DEFAULT_VERTEX_FACTORY == name:
        _DEFAULT_VERTEX_FACTORY = "default"


def unregister_edge_factory(name: str) -> None:
    """Unregister an edge factory implementation."""
    _EDGE_FACTORY_REGISTRY.pop(name, None)

    global _DEFAULT_EDGE_FACTORY
    if _DEFAULT_EDGE_FACTORY == name:
        _DEFAULT_EDGE_FACTORY = "undirected"


def set_default_vertex_factory(name: str) -> None:
    """Set the vertex factory used by new graphs.

    Raises:
        InvalidConfigurationError: If name is not registered
    """
    if name not in _VERTEX_FACTORY_REGISTRY:
        available = ", ".join(sorted(_VERTEX_FACTORY_REGISTRY))
        raise InvalidConfigurationError(
            "vertex_factory",
            name,
            f"Vertex factory is not registered. Available factories: {available}",
            details={"available_factories": available},
        )

    global _DEFAULT_VERTEX_FACTORY
    _DEFAULT_VERTEX_FACTORY = name


def set_default_edge_factory(name: str) -> None:
    """Set the edge factory used by new graphs.

    Raises:
        InvalidConfigurationError: If name is not registered
    """
    if name not in _EDGE_FACTORY_REGISTRY:
        available = ", ".join(sorted(_EDGE_FACTORY_REGISTRY))
        raise InvalidConfigurationError(
            "edge_factory",
            name,
            f"Edge factory is not registered. Available factories: {available}",
            details={"available_factories": available},
        )

    global _DEFAULT_EDGE_FACTORY
    _DEFAULT_EDGE_FACTORY = name


def get_default_vertex_factory_name() -> str:
    """Get the current default vertex factory name."""
    return _DEFAULT_VERTEX_FACTORY


def get_default_edge_factory_name() -> str:
    """Get the current default edge factory name."""
    return _DEFAULT_EDGE_FACTORY


def list_available_vertex_factories() -> Dict[str, Type[VertexFactory]]:
    """Get all registered vertex factories by name."""
    return _VERTEX_FACTORY_REGISTRY.copy()


def list_available_edge_factories() -> Dict[str, Type[EdgeFactory]]:
    """Get all registered edge factories by name."""
    return _EDGE_FACTORY_REGISTRY.copy()


def get_vertex_factory(kind: Optional[str] = None) -> VertexFactory:
    """Get a vertex factory instance.

    Args:
        kind: Registered factory name.
              Defaults to env var GRAPHWALK_VERTEX_FACTORY or current default

    Raises:
        InvalidConfigurationError: If kind is not registered
    """
    if kind is None:
        kind = os.getenv("GRAPHWALK_VERTEX_FACTORY", _DEFAULT_VERTEX_FACTORY)

    if kind not in _VERTEX_FACTORY_REGISTRY:
        raise InvalidConfigurationError(
            "vertex_factory",
            kind,
            "Unsupported vertex factory",
            details={"available_factories": sorted(_VERTEX_FACTORY_REGISTRY)},
        )
    return _VERTEX_FACTORY_REGISTRY[kind]()


def get_edge_factory(kind: Optional[str] = None) -> EdgeFactory:
    """Get an edge factory instance.

    Args:
        kind: Registered factory name ("undirected", "directed", ...).
              Defaults to env var GRAPHWALK_EDGE_FACTORY or current default

    Raises:
        InvalidConfigurationError: If kind is not registered
    """
    if kind is None:
        kind = os.getenv("GRAPHWALK_EDGE_FACTORY", _DEFAULT_EDGE_FACTORY)

    if kind not in _EDGE_FACTORY_REGISTRY:
        raise InvalidConfigurationError(
            "edge_factory",
            kind,
            "Unsupported edge factory",
            details={"available_factories": sorted(_EDGE_FACTORY_REGISTRY)},
        )
    return _EDGE_FACTORY_REGISTRY[kind]()


def _register_builtin_factories() -> None:
    """Register built-in factory implementations."""
    register_vertex_factory("default", DefaultVertexFactory, set_as_default=True)
    register_edge_factory("undirected", UndirectedEdgeFactory, set_as_default=True)
    register_edge_factory("directed", DirectedEdgeFactory)


# Initialize built-in factories
_register_builtin_factories()
