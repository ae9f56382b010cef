"""Edge classes for graphwalk graphs.

The edge class decides what "the same edge" means. ``Edge`` compares its
endpoints positionally, which is the directed interpretation, while
``UndirectedEdge`` ignores endpoint order. Graphs never choose between them
directly; the EdgeFactory they are built with does. Edges of different
classes never compare equal.
"""

from typing_extensions import override

from ..annotations import protected
from .element import Element


class Edge(Element):
    """Directed edge between two vertex names.

    Attributes:
        one: Name of the first endpoint (protected)
        two: Name of the second endpoint (protected)
        value: Opaque payload (inherited from Element)
        attributes: Key-value extension map (inherited from Element)
    """

    one: str = protected(description="Name of the first endpoint")
    two: str = protected(description="Name of the second endpoint")

    def opposite(self, name: str) -> str:
        """Return the endpoint on the other side of name.

        For a self-loop both endpoints are name, so name is returned.
        """
        return self.two if name == self.one else self.one

    def connects(self, name: str) -> bool:
        """Whether name is one of this edge's endpoints."""
        return name == self.one or name == self.two

    @property
    def is_loop(self) -> bool:
        """Whether both endpoints are the same vertex."""
        return self.one == self.two

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.one == other.one and self.two == other.two

    def __hash__(self) -> int:
        return hash((self.one, self.two))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(one={self.one!r}, two={self.two!r})"

    __str__ = __repr__


class UndirectedEdge(Edge):
    """Edge whose identity ignores endpoint order: {A, B} == {B, A}."""

    @override
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.one == other.one and self.two == other.two) or (
            self.one == other.two and self.two == other.one
        )

    @override
    def __hash__(self) -> int:
        return hash(frozenset((self.one, self.two)))
