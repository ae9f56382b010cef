"""Entity classes for graphwalk.

This package contains the vertex and edge models stored by a Graph.
"""

from .edge import Edge, UndirectedEdge
from .element import Element
from .vertex import Vertex

__all__ = [
    "Element",
    "Vertex",
    "Edge",
    "UndirectedEdge",
]
