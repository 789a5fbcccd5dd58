"""Target resolution shared by the annotation decorators."""

from __future__ import annotations

import inspect
from typing import Any, Callable

from ..errors import TargetKindError
from ..models import ElementKind, ElementRef
from ..registry import MetadataRegistry, get_default_registry

_ALLOWED_LABELS = {
    (ElementKind.CLASS,): "classes",
    (ElementKind.METHOD,): "methods",
    (ElementKind.CLASS, ElementKind.METHOD): "classes or methods",
}


def resolve_element(target: Any, annotation: str, *kinds: ElementKind) -> ElementRef:
    """Map a decorated class or function onto its element handle."""
    if inspect.isclass(target):
        ref = ElementRef.for_class(target)
    elif isinstance(target, (staticmethod, classmethod)) or inspect.ismethod(target):
        ref = ElementRef.for_method(target.__func__)
    elif inspect.isfunction(target):
        ref = ElementRef.for_method(target)
    else:
        ref = None
    if ref is None or ref.kind not in kinds:
        raise TargetKindError(annotation, target, _ALLOWED_LABELS.get(kinds, "supported elements"))
    return ref


def resolve_registry(registry: MetadataRegistry | None) -> MetadataRegistry:
    return registry if registry is not None else get_default_registry()


class PropertyRegistration:
    """Class-body wrapper that registers a property once its owner exists.

    The owner and attribute name are only known in ``__set_name__``; at that
    point the wrapper registers and puts the original attribute back.
    """

    def __init__(self, wrapped: Any, register: Callable[[ElementRef], None]) -> None:
        self.wrapped = wrapped
        self._register = register

    def __set_name__(self, owner: type, name: str) -> None:
        set_name = getattr(type(self.wrapped), "__set_name__", None)
        if set_name is not None:
            set_name(self.wrapped, owner, name)
        self._register(ElementRef.for_property(owner, name))
        setattr(owner, name, unwrap_property(self))


def unwrap_property(value: Any) -> Any:
    while isinstance(value, PropertyRegistration):
        value = value.wrapped
    return value


def property_decorator(
    annotation: str, register: Callable[[ElementRef], None]
) -> Callable[[Any], PropertyRegistration]:
    def decorator(target: Any) -> PropertyRegistration:
        if inspect.isclass(target) or not (
            isinstance(target, PropertyRegistration)
            or callable(target)
            or hasattr(target, "__get__")
        ):
            raise TargetKindError(annotation, target, "properties")
        return PropertyRegistration(target, register)

    return decorator


__all__ = [
    "PropertyRegistration",
    "property_decorator",
    "resolve_element",
    "resolve_registry",
    "unwrap_property",
]
