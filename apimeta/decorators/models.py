"""Class and method level schema annotations: extra models and extensions."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from ..errors import InvalidOptionsError
from ..models import ElementKind
from ..registry import MetadataRegistry
from .base import resolve_element, resolve_registry

T = TypeVar("T")


def api_extra_models(
    *models: Any, registry: Optional[MetadataRegistry] = None
) -> Callable[[T], T]:
    """Register models that are only reachable indirectly (e.g. inside generics)."""
    if not models:
        raise InvalidOptionsError("api_extra_models requires at least one model")

    def decorator(target: T) -> T:
        ref = resolve_element(target, "api_extra_models", ElementKind.CLASS)
        resolve_registry(registry).add_extra_models(ref, *models)
        return target

    return decorator


def api_extension(
    key: str, value: Any, *, registry: Optional[MetadataRegistry] = None
) -> Callable[[T], T]:
    """Attach a vendor extension (``x-`` prefixed key) to a class or method."""

    def decorator(target: T) -> T:
        ref = resolve_element(target, "api_extension", ElementKind.CLASS, ElementKind.METHOD)
        resolve_registry(registry).add_extension(ref, key, value)
        return target

    return decorator


__all__ = ["api_extension", "api_extra_models"]
