"""Core data models shared across apimeta components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


class ElementKind(str, Enum):
    """Kinds of elements that can carry documentation metadata."""

    CLASS = "class"
    METHOD = "method"
    PROPERTY = "property"
    SCHEMA = "schema"


@dataclass(frozen=True)
class ElementRef:
    """Stable handle for an annotated element.

    ``owner`` is the class (for classes and properties) or the function object
    (for methods). Named schemas have no owner and are identified by ``name``.
    """

    kind: ElementKind
    owner: Any = None
    name: Optional[str] = None

    @classmethod
    def for_class(cls, owner: type) -> "ElementRef":
        return cls(ElementKind.CLASS, owner)

    @classmethod
    def for_method(cls, func: Any) -> "ElementRef":
        return cls(ElementKind.METHOD, func)

    @classmethod
    def for_property(cls, owner: type, name: str) -> "ElementRef":
        return cls(ElementKind.PROPERTY, owner, name)

    @classmethod
    def schema(cls, name: str) -> "ElementRef":
        return cls(ElementKind.SCHEMA, None, name)

    @property
    def id(self) -> str:
        if self.kind is ElementKind.SCHEMA:
            return f"schema:{self.name}"
        qualified = qualified_name(self.owner)
        if self.kind is ElementKind.PROPERTY:
            return f"property:{qualified}.{self.name}"
        return f"{self.kind.value}:{qualified}"


@dataclass(frozen=True)
class Scalar:
    """Explicit single-value type reference."""

    type: Any


@dataclass(frozen=True)
class ArrayOf:
    """Explicit array-of type reference."""

    type: Any


TypeRef = Union[Scalar, ArrayOf]


@dataclass(frozen=True)
class TypeDescriptor:
    """Canonical ``(type, is_array)`` pair produced by the normalizer."""

    type: Any = None
    is_array: bool = False


StatusKey = Union[int, str]


@dataclass(frozen=True)
class ResponseEntry:
    """One discriminant-keyed response within a responses fragment."""

    key: StatusKey
    description: str = ""
    type: Any = None
    is_array: bool = False
    schema: Optional[Dict[str, Any]] = None
    headers: Dict[str, Any] = field(default_factory=dict)
    content: Dict[str, Any] = field(default_factory=dict)
    links: Dict[str, Any] = field(default_factory=dict)


def qualified_name(obj: Any) -> str:
    """Return ``module.qualname`` for classes and functions, ``repr`` otherwise."""
    module = getattr(obj, "__module__", None)
    qualname = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None)
    if qualname is None:
        return repr(obj)
    return f"{module}.{qualname}" if module else qualname
