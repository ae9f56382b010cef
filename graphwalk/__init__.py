"""
graphwalk - In-memory graph modeling and traversal.

graphwalk lets callers build a graph of named vertices and connecting edges
and run depth first or breadth first traversals over it, with pre-order,
post-order and visit callbacks that can stop a traversal early.

Key Features:
- Typed vertex/edge modeling via Pydantic
- Directed or undirected edge identity chosen by a pluggable factory
- Color based traversals that visit each vertex once, across components
- Early termination from inside any callback

Main Exports (Import from top level):
    Core Entities:
        - Vertex: Named vertex with an opaque payload
        - Edge: Directed edge (positional equality)
        - UndirectedEdge: Edge where {A, B} == {B, A}
        - Graph: Vertex and edge container with traversal entry points

    Factories:
        - VertexFactory, EdgeFactory: Creation strategies
        - get_vertex_factory, get_edge_factory: Registry lookups

    Traversal:
        - Traversal: CONTINUE / STOP results
        - TraversalColor: WHITE / GREY / BLACK
        - DepthFirstTraversalSpec, BreadthFirstTraversalSpec

    Modules:
        - exceptions: Custom exception classes
        - logging: Library logging helpers

Example:
    >>> from graphwalk import Graph
    >>>
    >>> graph = Graph()
    >>> graph.edge("A", "B")
    UndirectedEdge(one='A', two='B')
    >>> graph.edge("B", "C")
    UndirectedEdge(one='B', two='C')
    >>>
    >>> order = []
    >>> graph.depth_first_traversal(pre_visit=lambda v: order.append(v.name))
    <Traversal.CONTINUE: 'continue'>
    >>> order
    ['A', 'B', 'C']
"""

__version__ = "0.1.0"

# Modules
from . import exceptions, logging

# Core entities
from .core import (
    BreadthFirstTraversalSpec,
    DefaultVertexFactory,
    DepthFirstTraversalSpec,
    DirectedEdgeFactory,
    Edge,
    EdgeFactory,
    Extension,
    Graph,
    Traversal,
    TraversalColor,
    TraversalSpec,
    UndirectedEdge,
    UndirectedEdgeFactory,
    Vertex,
    VertexFactory,
    get_edge_factory,
    get_vertex_factory,
)
from .exceptions import (
    DuplicateExtensionError,
    GraphWalkError,
    InvalidExtensionError,
)

__all__ = [
    # Version
    "__version__",
    # Core entities
    "Vertex",
    "Edge",
    "UndirectedEdge",
    "Graph",
    "Extension",
    # Factories
    "VertexFactory",
    "EdgeFactory",
    "DefaultVertexFactory",
    "UndirectedEdgeFactory",
    "DirectedEdgeFactory",
    "get_vertex_factory",
    "get_edge_factory",
    # Traversal
    "Traversal",
    "TraversalColor",
    "TraversalSpec",
    "DepthFirstTraversalSpec",
    "BreadthFirstTraversalSpec",
    # Errors
    "GraphWalkError",
    "DuplicateExtensionError",
    "InvalidExtensionError",
    # Modules
    "exceptions",
    "logging",
]
