"""Normalization of loose type and enum inputs into canonical descriptors."""

from __future__ import annotations

import enum
import inspect
import types
import typing
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional, Tuple

from .errors import InvalidOptionsError
from .models import ArrayOf, Scalar, TypeDescriptor


def normalize_type(raw_type: Any, is_array: Optional[bool] = None) -> TypeDescriptor:
    """Return the canonical descriptor for a caller-supplied type reference.

    An array-wrapped input (``ArrayOf(T)`` or ``[T]``) always yields
    ``is_array=True``; the explicit flag only applies to plain types.
    """
    if raw_type is None:
        return TypeDescriptor()
    if isinstance(raw_type, ArrayOf):
        return TypeDescriptor(type=raw_type.type, is_array=True)
    if isinstance(raw_type, Scalar):
        return TypeDescriptor(type=raw_type.type, is_array=bool(is_array))
    if isinstance(raw_type, (list, tuple)):
        if len(raw_type) != 1:
            raise InvalidOptionsError(
                f"Array type shorthand takes exactly one element type, got {len(raw_type)}"
            )
        return TypeDescriptor(type=raw_type[0], is_array=True)
    return TypeDescriptor(type=raw_type, is_array=bool(is_array))


def enum_values(value: Any) -> List[Any]:
    """Extract the member values of an enum reference."""
    if inspect.isclass(value) and issubclass(value, enum.Enum):
        return [member.value for member in value]
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return list(value)
    raise InvalidOptionsError(
        f"enum must be an Enum subclass, a mapping or a sequence, got {type(value).__name__}"
    )


def enum_type(values: Sequence[Any]) -> str:
    """Return ``number`` when every value is numeric, ``string`` otherwise."""
    if values and all(
        isinstance(item, (int, float)) and not isinstance(item, bool) for item in values
    ):
        return "number"
    return "string"


def enum_name_for(value: Any, explicit: Optional[str]) -> Optional[str]:
    """Synthesize the shared schema name for an enum reference."""
    if explicit:
        return explicit
    if inspect.isclass(value) and issubclass(value, enum.Enum):
        return value.__name__
    return None


def type_from_hint(hint: Any) -> Tuple[Any, bool]:
    """Convert a resolved annotation into ``(raw_type, optional)``.

    ``Optional[T]`` marks the property as optional; ``list[T]`` and friends
    become ``ArrayOf(T)``.
    """
    optional = False
    origin = typing.get_origin(hint)
    if origin is typing.Annotated:
        hint = typing.get_args(hint)[0]
        origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        optional = len(args) != len(typing.get_args(hint))
        if len(args) != 1:
            return None, optional
        hint = args[0]
        origin = typing.get_origin(hint)
    if origin in (list, set, frozenset, tuple) or (
        inspect.isclass(origin) and issubclass(origin, Sequence) and origin is not str
    ):
        args = typing.get_args(hint)
        if args and args[0] is not Ellipsis:
            return ArrayOf(args[0]), optional
        return ArrayOf(None), optional
    if origin is not None:
        return origin, optional
    return hint, optional


__all__ = [
    "enum_name_for",
    "enum_type",
    "enum_values",
    "normalize_type",
    "type_from_hint",
]
