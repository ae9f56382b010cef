"""Vertex class for graphwalk graphs."""

from ..annotations import protected
from .element import Element


class Vertex(Element):
    """A named vertex carrying an opaque payload.

    Attributes:
        name: Identity of the vertex (protected - cannot be modified after initialization)
        value: Opaque payload (inherited from Element)
        attributes: Key-value extension map (inherited from Element)

    Two vertices are equal when their names are equal; payloads are ignored.
    """

    name: str = protected(description="Unique name of the vertex within a graph")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

    __str__ = __repr__
