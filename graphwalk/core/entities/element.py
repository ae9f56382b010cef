"""Base Element class for graphwalk vertices and edges."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from ..annotations import ProtectedAttributeMixin


class Element(ProtectedAttributeMixin, BaseModel):
    """Common payload and key-value access shared by vertices and edges.

    Attributes:
        value: Opaque payload carried by the element
        attributes: Key-value extension map for dynamic properties

    Item access reads and writes model fields first and falls back to the
    attributes map, so ``element["value"]`` and ``element["weight"]`` both work.
    """

    model_config = ConfigDict(extra="ignore", arbitrary_types_allowed=True)

    value: Any = None
    attributes: Dict[str, Any] = Field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        if key in type(self).model_fields:
            return getattr(self, key)
        return self.attributes[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key in type(self).model_fields:
            setattr(self, key, value)
        else:
            self.attributes[key] = value

    def __contains__(self, key: object) -> bool:
        return key in type(self).model_fields or key in self.attributes

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for key, or default when it is not present."""
        try:
            return self[key]
        except KeyError:
            return default
