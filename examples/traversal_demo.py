"""
Demonstrates graph construction and depth first / breadth first traversals.
Builds a small delivery network and searches it for hub cities.
"""

import logging
from typing import List

from graphwalk import (
    DefaultVertexFactory,
    Extension,
    Graph,
    Traversal,
    TraversalColor,
    Vertex,
)
from graphwalk.logging import configure_logging


class City(Vertex):
    population: int = 0
    is_hub: bool = False


class Highways(Extension):
    """Adds the highway network with distances in km."""

    highways = [
        ("Springfield", "Shelbyville", 42.0),
        ("Springfield", "Capital City", 120.5),
        ("Shelbyville", "Ogdenville", 18.2),
        ("Capital City", "North Haverbrook", 75.0),
        ("Brockway", "Cypress Creek", 33.3),
    ]

    def apply(self, graph):
        for one, two, km in self.highways:
            graph.edge(one, two, lambda e, km=km: setattr(e, "value", km))


def build_network() -> Graph:
    """Create the city graph and mark the hubs"""
    graph = Graph(vertex_factory=DefaultVertexFactory(City))
    graph.apply(Highways)

    for name, population in [
        ("Springfield", 30720),
        ("Capital City", 1250000),
        ("Cypress Creek", 88000),
    ]:
        graph.vertex(name, lambda city, p=population: setattr(city, "population", p))

    for city in graph.vertices.values():
        city.is_hub = city.population > 50000
    return graph


def depth_first_report(graph: Graph) -> List[str]:
    """Print the discovery and finish order of every city"""
    discovered: List[str] = []
    finished: List[str] = []
    graph.depth_first_traversal(
        pre_visit=lambda city: discovered.append(city.name),
        post_visit=lambda city: finished.append(city.name),
    )
    print(f"Discovered: {' -> '.join(discovered)}")
    print(f"Finished:   {' -> '.join(finished)}")
    return discovered


def find_first_hub(graph: Graph, start: str):
    """Breadth first search from start, stopping at the nearest hub"""
    found = []

    def visit(city: City):
        if city.is_hub and city.name != start:
            found.append(city)
            return Traversal.STOP
        return None

    spec = graph.breadth_first_traversal_spec(root=start, visit=visit)
    result = graph.breadth_first_traversal_connected(start, spec)
    if result is Traversal.STOP:
        print(f"Nearest hub to {start}: {found[0].name}")
    else:
        print(f"No hub reachable from {start}")

    unvisited = [n for n, c in spec.colors.items() if c is TraversalColor.WHITE]
    print(f"Cities not reached: {', '.join(unvisited) or 'none'}")
    return found[0] if found else None


def main():
    """Run the traversal demo"""
    configure_logging(level=logging.INFO)

    graph = build_network()
    print(f"Built {graph!r}")

    depth_first_report(graph)
    find_first_hub(graph, "Shelbyville")
    find_first_hub(graph, "Brockway")


if __name__ == "__main__":
    main()
