"""In-process store for per-element metadata fragments."""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from .models import ElementKind, ElementRef


class MetadataStore:
    """Holds one fragment per ``(element, namespace)`` pair.

    All mutation goes through :meth:`set` or :meth:`update`; ``update`` runs the
    read-merge-write sequence under a lock so concurrent registrations keep the
    merge contract.
    """

    def __init__(self) -> None:
        self._entries: Dict[ElementRef, Dict[str, Any]] = {}
        self._lock = threading.RLock()

    def get(self, ref: ElementRef, namespace: str, default: Any = None) -> Any:
        fragments = self._entries.get(ref)
        if not fragments:
            return default
        return fragments.get(namespace, default)

    def set(self, ref: ElementRef, namespace: str, fragment: Any) -> None:
        with self._lock:
            self._entries.setdefault(ref, {})[namespace] = fragment

    def update(
        self,
        ref: ElementRef,
        namespace: str,
        merge: Callable[[Optional[Any]], Any],
    ) -> Any:
        """Replace the fragment with ``merge(existing)`` and return the result."""
        with self._lock:
            existing = self.get(ref, namespace)
            merged = merge(existing)
            if merged is not existing:
                self._entries.setdefault(ref, {})[namespace] = merged
            return merged

    def view(self, ref: ElementRef, namespace: str, default: Any = None) -> Any:
        """Like :meth:`get`, but mapping fragments come back as read-only copies."""
        with self._lock:
            return read_only(self.get(ref, namespace, default))

    def namespaces(self, ref: ElementRef) -> List[str]:
        return list(self._entries.get(ref, {}))

    def snapshot(self, ref: ElementRef) -> Mapping[str, Any]:
        """Return a read-only view of every fragment attached to ``ref``."""
        with self._lock:
            fragments = self._entries.get(ref, {})
            return MappingProxyType(
                {namespace: read_only(value) for namespace, value in fragments.items()}
            )

    def elements(self, kind: ElementKind | None = None) -> Iterator[ElementRef]:
        with self._lock:
            refs = list(self._entries)
        for ref in refs:
            if kind is None or ref.kind is kind:
                yield ref

    def find(self, element_id: str) -> Optional[ElementRef]:
        for ref in self.elements():
            if ref.id == element_id:
                return ref
        return None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def read_only(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType(dict(value))
    return value


__all__ = ["MetadataStore", "read_only"]
