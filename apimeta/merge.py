"""Merge policies combining new fragments with existing ones."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .models import ResponseEntry, StatusKey


def merge_response(
    existing: Optional[Mapping[StatusKey, ResponseEntry]],
    entry: ResponseEntry,
    override_existing: bool = True,
) -> Dict[StatusKey, ResponseEntry]:
    """Insert ``entry`` under its status key.

    When ``override_existing`` is false and the key is already present the
    existing fragment is returned unchanged. Other keys are never touched.
    """
    if existing is not None and entry.key in existing and not override_existing:
        return existing  # type: ignore[return-value]
    merged: Dict[StatusKey, ResponseEntry] = dict(existing or {})
    merged[entry.key] = entry
    return merged


def merge_extra_models(
    existing: Optional[Tuple[Any, ...]], models: Iterable[Any]
) -> Tuple[Any, ...]:
    """Ordered union of model references, first occurrence wins its position."""
    merged = list(existing or ())
    for model in models:
        if model not in merged:
            merged.append(model)
    return tuple(merged)


def merge_extension(
    existing: Optional[Mapping[str, Any]], key: str, value: Any
) -> Dict[str, Any]:
    merged = dict(existing or {})
    merged[key] = value
    return merged


def merge_mapping(
    existing: Optional[Mapping[str, Any]],
    new: Mapping[str, Any],
    override_existing: bool = True,
) -> Dict[str, Any]:
    """Shallow merge skipping ``None`` values from ``new``."""
    merged = dict(existing or {})
    for key, value in new.items():
        if value is None:
            continue
        if key in merged and not override_existing:
            continue
        merged[key] = value
    return merged


def merge_names(existing: Optional[Tuple[str, ...]], name: str) -> Tuple[str, ...]:
    if existing and name in existing:
        return existing
    return tuple(existing or ()) + (name,)


__all__ = [
    "merge_extension",
    "merge_extra_models",
    "merge_mapping",
    "merge_names",
    "merge_response",
]
