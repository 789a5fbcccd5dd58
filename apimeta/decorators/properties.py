"""Property-level annotations and the ``api_model`` class scanner."""

from __future__ import annotations

import enum
import inspect
import typing
from typing import Any, Callable, Dict, Optional, TypeVar

from ..errors import TargetKindError
from ..models import ArrayOf, ElementRef
from ..normalizer import type_from_hint
from ..options import PropertyOptions, build_options
from ..registry import MetadataRegistry
from .base import PropertyRegistration, property_decorator, resolve_registry

C = TypeVar("C", bound=type)


class HiddenProperty:
    """``Annotated`` marker excluding a property from generated schemas."""

    def __repr__(self) -> str:
        return "HIDDEN"


HIDDEN = HiddenProperty()


def api_property(
    options: Optional[PropertyOptions] = None,
    /,
    *,
    registry: Optional[MetadataRegistry] = None,
    **fields: Any,
) -> Callable[[Any], PropertyRegistration]:
    """Describe the schema of a property defined in a class body.

    Wrap a ``property`` (or a plain function) inside the class; registration
    happens when the class is created. For annotated attributes use
    ``Annotated[T, PropertyOptions(...)]`` together with :func:`api_model`.
    """
    resolved = build_options(PropertyOptions, options, fields)

    def register(ref: ElementRef) -> None:
        resolve_registry(registry).describe_property(ref, resolved)

    return property_decorator("api_property", register)


def api_hide_property(
    *, registry: Optional[MetadataRegistry] = None
) -> Callable[[Any], PropertyRegistration]:
    """Exclude a property from generated schemas."""

    def register(ref: ElementRef) -> None:
        resolve_registry(registry).hide_property(ref)

    return property_decorator("api_hide_property", register)


def api_model(
    cls: Optional[C] = None, *, registry: Optional[MetadataRegistry] = None
) -> Any:
    """Register ``Annotated`` property markers declared directly on a class.

    Types omitted from the markers are taken from the annotation itself:
    ``list[T]`` becomes an array of ``T``, ``Optional[T]`` marks the property
    as not required and an ``Enum`` subclass becomes its enum reference.
    """

    def decorate(target: C) -> C:
        if not inspect.isclass(target):
            raise TargetKindError("api_model", target, "classes")
        active = resolve_registry(registry)
        own_names = inspect.get_annotations(target)
        hints = typing.get_type_hints(target, include_extras=True)
        for name in own_names:
            hint = hints.get(name)
            if typing.get_origin(hint) is not typing.Annotated:
                continue
            ref = ElementRef.for_property(target, name)
            for marker in hint.__metadata__:
                if isinstance(marker, HiddenProperty):
                    active.hide_property(ref)
                elif isinstance(marker, PropertyOptions):
                    active.describe_property(ref, _infer_from_hint(marker, hint))
        return target

    if cls is None:
        return decorate
    return decorate(cls)


def _infer_from_hint(options: PropertyOptions, hint: Any) -> PropertyOptions:
    raw_type, optional = type_from_hint(hint)
    element = raw_type.type if isinstance(raw_type, ArrayOf) else raw_type
    updates: Dict[str, Any] = {}
    if optional and options.required is None:
        updates["required"] = False
    if options.type is None:
        if options.enum is None and inspect.isclass(element) and issubclass(element, enum.Enum):
            updates["enum"] = element
            if isinstance(raw_type, ArrayOf) and options.is_array is None:
                updates["is_array"] = True
        elif options.enum is not None:
            if isinstance(raw_type, ArrayOf) and options.is_array is None:
                updates["is_array"] = True
        elif raw_type is not None:
            updates["type"] = raw_type
    if not updates:
        return options
    return options.model_copy(update=updates)


__all__ = [
    "HIDDEN",
    "HiddenProperty",
    "api_hide_property",
    "api_model",
    "api_property",
]
