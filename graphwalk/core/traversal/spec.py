"""Traversal configuration objects.

A traversal spec carries the color map, the starting vertex and the callbacks
of a single traversal. Specs are mutable: the engine colors vertices in
``spec.colors`` in place, and the map is left behind for inspection after the
traversal returns. Passing the same spec (or the same colors dict) to a later
traversal continues from where the previous one stopped.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional

if TYPE_CHECKING:
    from ..entities import Vertex


class Traversal(Enum):
    """Result of a traversal callback or a traversal run."""

    #: keep going
    CONTINUE = "continue"
    #: stop the current traversal, e.g. once the searched vertex is found
    STOP = "stop"


class TraversalColor(Enum):
    """Visitation state of a vertex during a traversal."""

    #: an undiscovered vertex
    WHITE = "white"
    #: a discovered vertex that still needs work
    GREY = "grey"
    #: a vertex the algorithm is done with
    BLACK = "black"


ColorMap = Dict[str, TraversalColor]
VisitCallback = Callable[["Vertex"], Optional[Traversal]]


def is_stop(result: object) -> bool:
    """Whether a callback result asks the traversal to stop."""
    return result is Traversal.STOP


class TraversalSpec:
    """Settings shared by every traversal.

    Attributes:
        colors: Vertex name to TraversalColor. When empty, Graph.setup_spec
            fills it with every vertex colored WHITE.
        root: Name of the vertex to start from. When None, Graph.setup_spec
            picks the first vertex that is neither GREY nor BLACK.
    """

    def __init__(
        self, colors: Optional[ColorMap] = None, root: Optional[str] = None
    ) -> None:
        # Kept by reference so callers can observe the coloring
        self.colors = colors
        self.root = root

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root!r})"


class DepthFirstTraversalSpec(TraversalSpec):
    """Depth first traversal settings.

    Attributes:
        pre_visit: Called with each vertex when it is discovered, before its
            neighbors. Returning Traversal.STOP ends the traversal.
        post_visit: Called with each vertex after all of its neighbors are
            finished. Returning Traversal.STOP ends the traversal.
    """

    def __init__(
        self,
        colors: Optional[ColorMap] = None,
        root: Optional[str] = None,
        pre_visit: Optional[VisitCallback] = None,
        post_visit: Optional[VisitCallback] = None,
    ) -> None:
        super().__init__(colors=colors, root=root)
        self.pre_visit = pre_visit
        self.post_visit = post_visit


class BreadthFirstTraversalSpec(TraversalSpec):
    """Breadth first traversal settings.

    Attributes:
        visit: Called with each vertex when it is discovered. Returning
            Traversal.STOP ends the traversal.
    """

    def __init__(
        self,
        colors: Optional[ColorMap] = None,
        root: Optional[str] = None,
        visit: Optional[VisitCallback] = None,
    ) -> None:
        super().__init__(colors=colors, root=root)
        self.visit = visit


__all__ = [
    "Traversal",
    "TraversalColor",
    "ColorMap",
    "VisitCallback",
    "TraversalSpec",
    "DepthFirstTraversalSpec",
    "BreadthFirstTraversalSpec",
    "is_stop",
]
