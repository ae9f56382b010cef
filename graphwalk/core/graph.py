"""Graph container for vertices, edges and applied extensions."""

import logging
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    KeysView,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    Union,
)

from graphwalk.exceptions import (
    DuplicateExtensionError,
    InvalidExtensionError,
    ValidationError,
)

from . import extensions as ext
from .entities import Edge, Vertex
from .factory import EdgeFactory, VertexFactory, get_edge_factory, get_vertex_factory
from .traversal import engine
from .traversal.spec import (
    BreadthFirstTraversalSpec,
    ColorMap,
    DepthFirstTraversalSpec,
    Traversal,
    TraversalColor,
    TraversalSpec,
)

logger = logging.getLogger(__name__)


class Graph:
    """In-memory graph of named vertices connected by edges.

    Vertices are kept in a name -> Vertex mapping in insertion order. Edges are
    kept in insertion order and deduplicated with the equality of the edge
    class produced by the edge factory: the default factory makes undirected
    edges, so edge("A", "B") and edge("B", "A") are the same edge.

    Graphs only grow. vertex() and edge() are upserts that return the
    existing instance when the name or edge is already present.

    Attributes:
        vertex_factory: Creates vertices on first reference to a name
        edge_factory: Creates edges and thereby defines edge identity
    """

    def __init__(
        self,
        vertex_factory: Optional[VertexFactory] = None,
        edge_factory: Optional[EdgeFactory] = None,
    ) -> None:
        """Create an empty graph.

        Args:
            vertex_factory: Vertex factory; defaults to the registry default
            edge_factory: Edge factory; defaults to the registry default
        """
        self.vertex_factory = (
            vertex_factory if vertex_factory is not None else get_vertex_factory()
        )
        self.edge_factory = (
            edge_factory if edge_factory is not None else get_edge_factory()
        )
        self._vertices: Dict[str, Vertex] = {}
        # Edge -> itself, so lookups use factory equality and keep insertion order
        self._edges: Dict[Edge, Edge] = {}
        self._adjacency: Dict[str, List[Edge]] = {}
        self._extensions: Dict[Any, None] = {}

    def __repr__(self) -> str:
        return f"Graph(V={len(self._vertices)}, E={len(self._edges)})"

    # ============== VIEWS ==============

    @property
    def vertices(self) -> Mapping[str, Vertex]:
        """Read-only mapping of vertex name to Vertex, in insertion order."""
        return MappingProxyType(self._vertices)

    @property
    def edges(self) -> KeysView[Edge]:
        """Read-only, set-like view of the edges, in insertion order."""
        return self._edges.keys()

    @property
    def extensions(self) -> Tuple[Any, ...]:
        """Identifiers of the extensions applied to this graph, in order."""
        return tuple(self._extensions)

    # ============== VERTEX / EDGE OPERATIONS ==============

    def vertex(
        self, name: str, configure: Optional[Callable[[Vertex], Any]] = None
    ) -> Vertex:
        """Get or create the vertex called name.

        Args:
            name: Vertex name
            configure: Optional callback run with the vertex, new or existing

        Returns:
            The vertex stored under name
        """
        vertex = self._vertices.get(name)
        if vertex is None:
            vertex = self.vertex_factory.new_vertex(name)
            self._vertices[name] = vertex
            logger.debug(f"Added vertex '{name}'")

        if configure is not None:
            configure(vertex)
        return vertex

    def edge(
        self,
        one: str,
        two: str,
        configure: Optional[Callable[[Edge], Any]] = None,
    ) -> Edge:
        """Get or create the edge between one and two.

        Endpoint vertices that do not exist yet are created. If an equal edge
        is already present it is returned unchanged, including its original
        endpoint orientation.

        Args:
            one: Name of the first endpoint
            two: Name of the second endpoint
            configure: Optional callback run with the edge, new or existing

        Returns:
            The edge stored in the graph
        """
        candidate = self.edge_factory.new_edge(one, two)
        edge = self._edges.get(candidate)
        if edge is None:
            self.vertex(one)
            self.vertex(two)
            edge = candidate
            self._edges[edge] = edge
            self._adjacency.setdefault(one, []).append(edge)
            if two != one:
                self._adjacency.setdefault(two, []).append(edge)
            logger.debug(f"Added edge '{one}' - '{two}'")

        if configure is not None:
            configure(edge)
        return edge

    def adjacent_edges(self, name: str) -> List[Edge]:
        """Edges with name as an endpoint, in edge insertion order.

        A self-loop is listed once.
        """
        return list(self._adjacency.get(name, ()))

    # ============== EXTENSIONS ==============

    def apply_extension(self, extension_id: Any, action: Callable[["Graph"], Any]) -> Any:
        """Apply action to this graph once per extension_id.

        Args:
            extension_id: Hashable identifier of the extension
            action: Callable invoked with this graph

        Returns:
            Whatever action returns

        Raises:
            DuplicateExtensionError: If extension_id was already applied
        """
        if extension_id in self._extensions:
            raise DuplicateExtensionError(
                extension_id, details={"applied": len(self._extensions)}
            )
        self._extensions[extension_id] = None
        logger.debug(f"Applying extension {extension_id!r}")
        return action(self)

    def apply(self, extension: Union[Type[ext.Extension], ext.Extension, Any]) -> Any:
        """Apply an extension class or instance.

        Classes are instantiated without arguments before anything is recorded.
        The extension class is the identifier recorded by the graph.

        Raises:
            InvalidExtensionError: If extension has no apply(graph) or the class
                cannot be instantiated; nothing is recorded
            DuplicateExtensionError: If the extension class was already applied
        """
        try:
            instance = ext.instantiate_extension(extension)
        except InvalidExtensionError:
            logger.warning(f"Rejected extension {extension!r}")
            raise

        return self.apply_extension(ext.extension_id(extension), instance.apply)

    # ============== TRAVERSAL SUPPORT ==============

    def make_color_map(self) -> ColorMap:
        """Map every vertex name to TraversalColor.WHITE, in insertion order."""
        return {name: TraversalColor.WHITE for name in self._vertices}

    def unvisited_vertex_name(self, colors: Mapping[str, TraversalColor]) -> Optional[str]:
        """Name of the first vertex, in insertion order, that is not GREY or BLACK.

        Vertices missing from colors count as unvisited.
        """
        for name in self._vertices:
            if colors.get(name) not in (TraversalColor.GREY, TraversalColor.BLACK):
                return name
        return None

    def unvisited_child_name(
        self, colors: Mapping[str, TraversalColor], parent_name: str
    ) -> Optional[str]:
        """Name of the first unvisited neighbor of parent_name, ignoring self-loops."""
        for edge in self.adjacent_edges(parent_name):
            if edge.is_loop:
                continue
            child_name = edge.opposite(parent_name)
            if colors.get(child_name) not in (TraversalColor.GREY, TraversalColor.BLACK):
                return child_name
        return None

    def setup_spec(self, spec: TraversalSpec) -> TraversalSpec:
        """Default the colors and root of spec. See engine.setup_spec."""
        return engine.setup_spec(self, spec)

    def depth_first_traversal_spec(
        self,
        configure: Optional[Callable[[DepthFirstTraversalSpec], Any]] = None,
        **options: Any,
    ) -> DepthFirstTraversalSpec:
        """Build a defaulted DepthFirstTraversalSpec.

        Args:
            configure: Optional callback that modifies the new spec
            **options: DepthFirstTraversalSpec arguments
                (colors, root, pre_visit, post_visit)
        """
        spec = DepthFirstTraversalSpec(**options)
        if configure is not None:
            configure(spec)
        return engine.setup_spec(self, spec)

    def breadth_first_traversal_spec(
        self,
        configure: Optional[Callable[[BreadthFirstTraversalSpec], Any]] = None,
        **options: Any,
    ) -> BreadthFirstTraversalSpec:
        """Build a defaulted BreadthFirstTraversalSpec.

        Args:
            configure: Optional callback that modifies the new spec
            **options: BreadthFirstTraversalSpec arguments (colors, root, visit)
        """
        spec = BreadthFirstTraversalSpec(**options)
        if configure is not None:
            configure(spec)
        return engine.setup_spec(self, spec)

    # ============== TRAVERSALS ==============

    def depth_first_traversal(
        self, spec: Optional[DepthFirstTraversalSpec] = None, **options: Any
    ) -> Traversal:
        """Depth first traversal of every component.

        Either pass a spec or the keyword options to build one, e.g.
        ``graph.depth_first_traversal(pre_visit=seen.append)``.

        Raises:
            ValidationError: If both a spec and keyword options are given
        """
        if spec is None:
            spec = self.depth_first_traversal_spec(**options)
        else:
            _reject_options(spec, options)
        return engine.depth_first_traversal(self, spec)

    def depth_first_traversal_connected(
        self, name: str, spec: DepthFirstTraversalSpec
    ) -> Traversal:
        """Depth first traversal of the component containing name."""
        return engine.depth_first_traversal_connected(self, name, spec)

    def breadth_first_traversal(
        self, spec: Optional[BreadthFirstTraversalSpec] = None, **options: Any
    ) -> Traversal:
        """Breadth first traversal of every component.

        Takes a spec or keyword options, like depth_first_traversal.
        """
        if spec is None:
            spec = self.breadth_first_traversal_spec(**options)
        else:
            _reject_options(spec, options)
        return engine.breadth_first_traversal(self, spec)

    def breadth_first_traversal_connected(
        self, name: str, spec: BreadthFirstTraversalSpec
    ) -> Traversal:
        """Breadth first traversal of the component containing name."""
        return engine.breadth_first_traversal_connected(self, name, spec)


def _reject_options(spec: TraversalSpec, options: Dict[str, Any]) -> None:
    if options:
        raise ValidationError(
            "Pass either a traversal spec or keyword options, not both",
            details={"spec": repr(spec), "options": sorted(options)},
        )
