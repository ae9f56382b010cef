"""Test suite for breadth first traversal."""

import pytest

from graphwalk import BreadthFirstTraversalSpec, Graph, Traversal, TraversalColor
from graphwalk.exceptions import ValidationError

WHITE = TraversalColor.WHITE
GREY = TraversalColor.GREY
BLACK = TraversalColor.BLACK


@pytest.fixture
def tree_graph():
    """A with children B and C; B with child D."""
    g = Graph()
    g.edge("A", "B")
    g.edge("B", "D")
    g.edge("A", "C")
    return g


def visitor(names, stop_at=None):
    def visit(vertex):
        names.append(vertex.name)
        if vertex.name == stop_at:
            return Traversal.STOP
        return None

    return visit


class TestBreadthFirstOrder:
    """Test visit ordering."""

    def test_path_graph_order(self, path_graph):
        """Test a path is visited from one end to the other"""
        names = []
        result = path_graph.breadth_first_traversal(visit=visitor(names))
        assert result is Traversal.CONTINUE
        assert names == ["A", "B", "C", "D"]

    def test_level_order(self, tree_graph):
        """Test all neighbors of a vertex are visited before their children"""
        names = []
        tree_graph.breadth_first_traversal(visit=visitor(names))
        assert names == ["A", "B", "C", "D"]

    def test_all_vertices_black_after_completion(self, tree_graph):
        """Test a finished traversal leaves every vertex BLACK"""
        spec = tree_graph.breadth_first_traversal_spec()
        tree_graph.breadth_first_traversal(spec)
        assert set(spec.colors.values()) == {BLACK}

    def test_cycle_and_self_loop(self):
        """Test each vertex is visited once in cyclic graphs"""
        graph = Graph()
        graph.edge("A", "B")
        graph.edge("B", "C")
        graph.edge("C", "A")
        graph.edge("B", "B")
        names = []
        graph.breadth_first_traversal(visit=visitor(names))
        assert names == ["A", "B", "C"]

    def test_empty_graph(self, graph):
        """Test traversing an empty graph is a no-op"""
        names = []
        assert graph.breadth_first_traversal(visit=visitor(names)) is Traversal.CONTINUE
        assert names == []


class TestBreadthFirstStop:
    """Test early termination."""

    def test_stop_on_neighbor(self, tree_graph):
        """Test a stopping neighbor is left GREY and its children unvisited"""
        names = []
        spec = tree_graph.breadth_first_traversal_spec(visit=visitor(names, "C"))
        assert tree_graph.breadth_first_traversal(spec) is Traversal.STOP
        assert names == ["A", "B", "C"]
        assert spec.colors == {"A": GREY, "B": GREY, "D": WHITE, "C": GREY}

    def test_stop_on_start_vertex(self, path_graph):
        """Test stopping at the start vertex visits nothing else"""
        names = []
        spec = BreadthFirstTraversalSpec(visit=visitor(names, "A"))
        result = path_graph.breadth_first_traversal_connected("A", spec)
        assert result is Traversal.STOP
        assert names == ["A"]
        assert spec.colors["A"] is GREY
        assert spec.colors["B"] is WHITE

    def test_stop_skips_later_components(self, two_component_graph):
        """Test STOP ends the whole traversal"""
        names = []
        spec = two_component_graph.breadth_first_traversal_spec(
            visit=visitor(names, "B")
        )
        assert two_component_graph.breadth_first_traversal(spec) is Traversal.STOP
        assert names == ["A", "B"]
        assert spec.colors["C"] is WHITE


class TestBreadthFirstComponents:
    """Test whole-graph and single component traversals."""

    def test_components_in_insertion_order(self, two_component_graph):
        """Test components are traversed in vertex insertion order"""
        names = []
        two_component_graph.breadth_first_traversal(visit=visitor(names))
        assert names == ["A", "B", "C", "D"]

    def test_connected_only_visits_component(self, two_component_graph):
        """Test the connected variant stays in one component"""
        names = []
        spec = BreadthFirstTraversalSpec(visit=visitor(names))
        result = two_component_graph.breadth_first_traversal_connected("D", spec)
        assert result is Traversal.CONTINUE
        assert names == ["D", "C"]
        assert spec.colors == {"A": WHITE, "B": WHITE, "C": BLACK, "D": BLACK}

    def test_explicit_root(self, path_graph):
        """Test the traversal starts at the given root"""
        names = []
        path_graph.breadth_first_traversal(root="C", visit=visitor(names))
        assert names == ["C", "B", "D", "A"]

    def test_empty_name_vertex_first(self, graph):
        """Test a first vertex named "" is visited and the rest follows"""
        graph.vertex("")
        graph.edge("A", "B")
        names = []
        spec = graph.breadth_first_traversal_spec(visit=visitor(names))
        assert graph.breadth_first_traversal(spec) is Traversal.CONTINUE
        assert names == ["", "A", "B"]
        assert set(spec.colors.values()) == {BLACK}

    def test_unknown_root_raises(self, path_graph):
        """Test starting at a missing vertex is rejected"""
        with pytest.raises(ValidationError):
            path_graph.breadth_first_traversal_connected(
                "Z", BreadthFirstTraversalSpec()
            )


def test_large_graph_traversal():
    """Test a long path is traversed completely"""
    graph = Graph()
    for i in range(4999):
        graph.edge(str(i), str(i + 1))
    names = []
    assert graph.breadth_first_traversal(visit=visitor(names)) is Traversal.CONTINUE
    assert names == [str(i) for i in range(5000)]


class TestBreadthFirstCallbackErrors:
    """Test exceptions raised by visit."""

    def test_visit_error_propagates(self, path_graph):
        """Test the error reaches the caller and earlier colors are kept"""

        def visit(vertex):
            if vertex.name == "B":
                raise RuntimeError("bad vertex")

        spec = path_graph.breadth_first_traversal_spec(visit=visit)
        with pytest.raises(RuntimeError, match="bad vertex"):
            path_graph.breadth_first_traversal(spec)
        assert spec.colors == {"A": GREY, "B": WHITE, "C": WHITE, "D": WHITE}
