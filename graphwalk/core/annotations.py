"""Attribute protection annotations for graphwalk entities.

Vertex names and edge endpoints are identities: the graph indexes vertices by
name and deduplicates edges by endpoints, so changing them in place would
silently corrupt the graph. This module marks such fields as protected.

1. protected(): field may be set at construction but never reassigned
2. private(): Pydantic private attribute (underscore fields)

Examples:
    class Entity(ProtectedAttributeMixin, BaseModel):
        # Protected attribute - cannot be modified after initialization
        name: str = protected(..., description="Identity")

        # Private attribute - Pydantic private (underscore fields)
        _cache: dict = private(default_factory=dict)
"""

from typing import Any, Dict, Set, Type

from pydantic import Field
from pydantic.fields import PrivateAttr

# Registry of protected attribute names per class, filled on subclass creation
_PROTECTED_ATTRS: Dict[Type, Set[str]] = {}


def protected(default: Any = ..., **kwargs: Any) -> Any:
    """Mark a field as protected - it cannot be modified after initial assignment.

    Args:
        default: Default value; ``...`` makes the field required
        **kwargs: Additional Field arguments (description, alias, etc.)

    Returns:
        Pydantic Field with protection metadata

    Examples:
        name: str = protected(description="Vertex name")
        one: str = protected(description="First endpoint")
    """
    json_extra = dict(kwargs.pop("json_schema_extra", None) or {})
    json_extra["protected"] = True
    return Field(default, json_schema_extra=json_extra, **kwargs)


def private(default: Any = None, **kwargs: Any) -> Any:
    """Declare a Pydantic private attribute (fields with leading underscore).

    Args:
        default: Default value for the private attribute
        **kwargs: Additional arguments, primarily 'default_factory' for callable defaults

    Returns:
        PrivateAttr configured with the provided default or factory
    """
    if "default_factory" in kwargs:
        return PrivateAttr(default_factory=kwargs["default_factory"])
    return PrivateAttr(default=default)


def register_protected_attrs(cls: Type, attr_names: Set[str]) -> None:
    """Register protected attribute names for a class.

    Args:
        cls: Class to register attributes for
        attr_names: Set of attribute names to protect
    """
    if cls not in _PROTECTED_ATTRS:
        _PROTECTED_ATTRS[cls] = set()
    _PROTECTED_ATTRS[cls].update(attr_names)


def get_protected_attrs(cls: Type) -> Set[str]:
    """Get all protected attribute names for a class and its parents."""
    protected_set: Set[str] = set()
    for klass in cls.__mro__:
        if klass in _PROTECTED_ATTRS:
            protected_set.update(_PROTECTED_ATTRS[klass])
    return protected_set


def is_protected(cls: Type, attr_name: str) -> bool:
    """Check if an attribute is protected for a class."""
    return attr_name in get_protected_attrs(cls)


def _scan_protected_fields(cls: Type) -> Set[str]:
    """Collect field names whose json_schema_extra carries the protected marker."""
    found: Set[str] = set()
    for field_name, field_info in getattr(cls, "model_fields", {}).items():
        json_extra = getattr(field_info, "json_schema_extra", None)
        if isinstance(json_extra, dict) and json_extra.get("protected", False):
            found.add(field_name)
    return found


class AttributeProtectionError(Exception):
    """Raised when trying to modify a protected attribute."""

    def __init__(self, attr_name: str, cls_name: str):
        self.attr_name = attr_name
        self.cls_name = cls_name
        super().__init__(
            f"Cannot modify protected attribute '{attr_name}' on {cls_name} after initialization"
        )


class ProtectedAttributeMixin:
    """Mixin that rejects assignment to protected fields after construction.

    Pydantic populates fields during validation without calling __setattr__,
    so every __setattr__ call on a protected name is a post-construction write.
    """

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        """Register protected fields once Pydantic has built model_fields."""
        super().__pydantic_init_subclass__(**kwargs)  # type: ignore[misc]
        protected_attrs = _scan_protected_fields(cls)
        if protected_attrs:
            register_protected_attrs(cls, protected_attrs)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in get_protected_attrs(self.__class__):
            raise AttributeProtectionError(name, self.__class__.__name__)
        super().__setattr__(name, value)


__all__ = [
    "AttributeProtectionError",
    "ProtectedAttributeMixin",
    "get_protected_attrs",
    "is_protected",
    "private",
    "protected",
    "register_protected_attrs",
]
