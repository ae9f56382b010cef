"""Traversal specs, queue and algorithms."""

from .engine import (
    breadth_first_traversal,
    breadth_first_traversal_connected,
    depth_first_traversal,
    depth_first_traversal_connected,
    setup_spec,
)
from .queue_manager import TraversalQueue
from .spec import (
    BreadthFirstTraversalSpec,
    DepthFirstTraversalSpec,
    Traversal,
    TraversalColor,
    TraversalSpec,
)

__all__ = [
    "Traversal",
    "TraversalColor",
    "TraversalSpec",
    "DepthFirstTraversalSpec",
    "BreadthFirstTraversalSpec",
    "TraversalQueue",
    "setup_spec",
    "depth_first_traversal",
    "depth_first_traversal_connected",
    "breadth_first_traversal",
    "breadth_first_traversal_connected",
]
