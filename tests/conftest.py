"""Shared pytest fixtures for graphwalk tests."""

import pytest

from graphwalk import Graph
from graphwalk.core import factory


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep GRAPHWALK_* variables from the developer shell out of tests."""
    for var in (
        "GRAPHWALK_VERTEX_FACTORY",
        "GRAPHWALK_EDGE_FACTORY",
        "GRAPHWALK_LOG_LEVEL",
        "GRAPHWALK_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def restore_factory_defaults():
    """Undo changes a test makes to the factory registries."""
    vertex_registry = factory.list_available_vertex_factories()
    edge_registry = factory.list_available_edge_factories()
    vertex_default = factory.get_default_vertex_factory_name()
    edge_default = factory.get_default_edge_factory_name()
    yield
    factory._VERTEX_FACTORY_REGISTRY.clear()
    factory._VERTEX_FACTORY_REGISTRY.update(vertex_registry)
    factory._EDGE_FACTORY_REGISTRY.clear()
    factory._EDGE_FACTORY_REGISTRY.update(edge_registry)
    factory.set_default_vertex_factory(vertex_default)
    factory.set_default_edge_factory(edge_default)


@pytest.fixture
def graph():
    """An empty graph with the default (undirected) edge factory."""
    return Graph()


@pytest.fixture
def path_graph():
    """Path A - B - C - D."""
    g = Graph()
    g.edge("A", "B")
    g.edge("B", "C")
    g.edge("C", "D")
    return g


@pytest.fixture
def two_component_graph():
    """Components {A - B} and {C - D}."""
    g = Graph()
    g.edge("A", "B")
    g.edge("C", "D")
    return g
