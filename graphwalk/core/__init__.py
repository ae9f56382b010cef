"""Core package for graphwalk graphs and traversals.

Provides the entity classes (Vertex, Edge), the factories that create them,
the Graph container and the depth first / breadth first traversal engine.
"""

from .annotations import AttributeProtectionError, private, protected
from .entities import Edge, Element, UndirectedEdge, Vertex
from .extensions import Extension
from .factory import (
    DefaultVertexFactory,
    DirectedEdgeFactory,
    EdgeFactory,
    UndirectedEdgeFactory,
    VertexFactory,
    get_edge_factory,
    get_vertex_factory,
    register_edge_factory,
    register_vertex_factory,
)
from .graph import Graph
from .traversal import (
    BreadthFirstTraversalSpec,
    DepthFirstTraversalSpec,
    Traversal,
    TraversalColor,
    TraversalSpec,
)

__all__ = [
    # Entities
    "Element",
    "Vertex",
    "Edge",
    "UndirectedEdge",
    # Graph
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
    "register_vertex_factory",
    "register_edge_factory",
    # Traversal
    "Traversal",
    "TraversalColor",
    "TraversalSpec",
    "DepthFirstTraversalSpec",
    "BreadthFirstTraversalSpec",
    # Annotations
    "AttributeProtectionError",
    "protected",
    "private",
]
