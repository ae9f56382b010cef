"""Depth first and breadth first traversal algorithms.

The functions here are stateless: everything a traversal needs lives in the
Graph and in the TraversalSpec, and all progress is recorded in
``spec.colors``. Vertices move WHITE -> GREY -> BLACK and never back, which is
what guarantees each vertex is visited at most once.

Callbacks stop a traversal by returning Traversal.STOP. The request is honored
at well defined checkpoints only: right after the callback returns and before
any further neighbor is explored.
"""

import logging
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from graphwalk.exceptions import ValidationError
from graphwalk.logging.custom_levels import TRACE_LEVEL_NUMBER

from .queue_manager import TraversalQueue
from .spec import (
    BreadthFirstTraversalSpec,
    ColorMap,
    DepthFirstTraversalSpec,
    Traversal,
    TraversalColor,
    TraversalSpec,
    is_stop,
)

if TYPE_CHECKING:
    from ..entities import Edge
    from ..graph import Graph

logger = logging.getLogger(__name__)

WHITE = TraversalColor.WHITE
GREY = TraversalColor.GREY
BLACK = TraversalColor.BLACK


def _paint(colors: ColorMap, name: str, color: TraversalColor) -> None:
    colors[name] = color
    if logger.isEnabledFor(TRACE_LEVEL_NUMBER):
        logger.log(TRACE_LEVEL_NUMBER, "vertex %r -> %s", name, color.name)


def _require_vertex(graph: "Graph", name: Optional[str]) -> str:
    if name is None or name not in graph.vertices:
        raise ValidationError(
            f"Cannot start traversal at unknown vertex {name!r}",
            details={"vertex": name, "vertex_count": len(graph.vertices)},
        )
    return name


def setup_spec(graph: "Graph", spec: TraversalSpec) -> TraversalSpec:
    """Fill in the parts of spec the caller left empty.

    When spec.colors is missing, every vertex is colored WHITE. An empty dict
    supplied by the caller is filled in place so the caller keeps a live
    reference to the coloring. When spec.root is None it becomes the first
    vertex, in insertion order, that is neither GREY nor BLACK.

    Args:
        graph: Graph the traversal will run on
        spec: Spec to complete

    Returns:
        The same spec
    """
    if spec.colors is None:
        spec.colors = graph.make_color_map()
    elif not spec.colors:
        spec.colors.update(graph.make_color_map())
    if spec.root is None:
        spec.root = graph.unvisited_vertex_name(spec.colors)
    return spec


# ============== DEPTH FIRST ==============


def _depth_first_connected(
    graph: "Graph", name: str, spec: DepthFirstTraversalSpec
) -> Traversal:
    colors = spec.colors
    assert colors is not None
    vertices = graph.vertices
    # Explicit stack of (vertex name, remaining adjacent edges) in place of recursion
    stack: List[Tuple[str, Iterator["Edge"]]] = []

    def discover(vertex_name: str) -> bool:
        if spec.pre_visit is not None and is_stop(
            spec.pre_visit(vertices[vertex_name])
        ):
            _paint(colors, vertex_name, GREY)
            return True
        _paint(colors, vertex_name, GREY)
        stack.append((vertex_name, iter(graph.adjacent_edges(vertex_name))))
        return False

    if discover(name):
        return Traversal.STOP

    while stack:
        current, edges = stack[-1]
        for edge in edges:
            neighbor = edge.opposite(current)
            if colors.get(neighbor) is WHITE:
                if discover(neighbor):
                    return Traversal.STOP
                break
        else:
            stack.pop()
            if spec.post_visit is not None and is_stop(
                spec.post_visit(vertices[current])
            ):
                _paint(colors, current, BLACK)
                return Traversal.STOP
            _paint(colors, current, BLACK)

    return Traversal.CONTINUE


def depth_first_traversal_connected(
    graph: "Graph", name: str, spec: DepthFirstTraversalSpec
) -> Traversal:
    """Depth first traversal of the component containing name.

    pre_visit is called when a vertex is discovered and post_visit once all of
    its WHITE neighbors are finished. A STOP from pre_visit leaves the vertex
    GREY; a STOP from post_visit leaves it BLACK. Either way nothing else is
    explored.

    Args:
        graph: Graph to traverse
        name: Name of the vertex to start from
        spec: Traversal settings; colors are defaulted if missing

    Returns:
        Traversal.STOP if a callback stopped the traversal, else Traversal.CONTINUE

    Raises:
        ValidationError: If name is not a vertex of graph
    """
    setup_spec(graph, spec)
    _require_vertex(graph, name)
    logger.debug(f"Depth first traversal of component at '{name}'")
    return _depth_first_connected(graph, name, spec)


def depth_first_traversal(graph: "Graph", spec: DepthFirstTraversalSpec) -> Traversal:
    """Depth first traversal of every component of graph.

    Starts at spec.root and then restarts at the first unvisited vertex, in
    insertion order, until every vertex is BLACK or a callback returns STOP.

    Returns:
        Traversal.STOP if a callback stopped the traversal, else Traversal.CONTINUE
    """
    setup_spec(graph, spec)
    name = spec.root
    if name is not None:
        _require_vertex(graph, name)
    logger.debug(f"Depth first traversal of graph from '{name}'")

    while name is not None:
        if _depth_first_connected(graph, name, spec) is Traversal.STOP:
            logger.debug(f"Depth first traversal stopped in component of '{name}'")
            return Traversal.STOP
        name = graph.unvisited_vertex_name(spec.colors)
    return Traversal.CONTINUE


# ============== BREADTH FIRST ==============


def _breadth_first_connected(
    graph: "Graph", name: str, spec: BreadthFirstTraversalSpec
) -> Traversal:
    colors = spec.colors
    assert colors is not None
    vertices = graph.vertices
    visit = spec.visit

    result = visit(vertices[name]) if visit is not None else None
    _paint(colors, name, GREY)
    if is_stop(result):
        return Traversal.STOP

    queue = TraversalQueue()
    queue.enqueue(name)
    while queue:
        current = queue.dequeue()
        for edge in graph.adjacent_edges(current):
            neighbor = edge.opposite(current)
            if colors.get(neighbor) is WHITE:
                result = visit(vertices[neighbor]) if visit is not None else None
                _paint(colors, neighbor, GREY)
                if is_stop(result):
                    return Traversal.STOP
                queue.enqueue(neighbor)
        _paint(colors, current, BLACK)

    return Traversal.CONTINUE


def breadth_first_traversal_connected(
    graph: "Graph", name: str, spec: BreadthFirstTraversalSpec
) -> Traversal:
    """Breadth first traversal of the component containing name.

    Vertices are colored GREY as they are visited and queued, and BLACK once
    all their neighbors have been examined. A STOP from visit leaves the
    vertex GREY and it is never queued.

    Args:
        graph: Graph to traverse
        name: Name of the vertex to start from
        spec: Traversal settings; colors are defaulted if missing

    Returns:
        Traversal.STOP if visit stopped the traversal, else Traversal.CONTINUE

    Raises:
        ValidationError: If name is not a vertex of graph
    """
    setup_spec(graph, spec)
    _require_vertex(graph, name)
    logger.debug(f"Breadth first traversal of component at '{name}'")
    return _breadth_first_connected(graph, name, spec)


def breadth_first_traversal(
    graph: "Graph", spec: BreadthFirstTraversalSpec
) -> Traversal:
    """Breadth first traversal of every component of graph.

    Mirrors depth_first_traversal: each component is started from the first
    unvisited vertex in insertion order.
    """
    setup_spec(graph, spec)
    name = spec.root
    if name is not None:
        _require_vertex(graph, name)
    logger.debug(f"Breadth first traversal of graph from '{name}'")

    while name is not None:
        if _breadth_first_connected(graph, name, spec) is Traversal.STOP:
            logger.debug(f"Breadth first traversal stopped in component of '{name}'")
            return Traversal.STOP
        name = graph.unvisited_vertex_name(spec.colors)
    return Traversal.CONTINUE


__all__ = [
    "setup_spec",
    "depth_first_traversal",
    "depth_first_traversal_connected",
    "breadth_first_traversal",
    "breadth_first_traversal_connected",
]
