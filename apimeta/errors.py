"""Exceptions raised while registering documentation metadata."""

from __future__ import annotations


class AnnotationError(RuntimeError):
    """Base class for failures raised at annotation time."""


class InvalidOptionsError(AnnotationError, ValueError):
    """Raised when annotation options contain unknown fields or invalid values."""


class TargetKindError(AnnotationError, TypeError):
    """Raised when an annotation is applied to an element kind it does not support."""

    def __init__(self, annotation: str, target: object, allowed: str) -> None:
        if isinstance(target, str):
            label = target
        else:
            label = getattr(target, "__qualname__", None) or type(target).__name__
        super().__init__(f"{annotation} can only be applied to {allowed}, got {label!r}")
        self.annotation = annotation
        self.target = target
        self.allowed = allowed


class ReservedExtensionKeyError(AnnotationError, ValueError):
    """Raised when a vendor extension key lacks the reserved prefix."""

    def __init__(self, key: str, prefix: str) -> None:
        super().__init__(f"Extension key {key!r} must start with {prefix!r}")
        self.key = key
        self.prefix = prefix


__all__ = [
    "AnnotationError",
    "InvalidOptionsError",
    "ReservedExtensionKeyError",
    "TargetKindError",
]
