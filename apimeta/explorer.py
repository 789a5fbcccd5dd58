"""Read-side views over registered metadata for document assemblers."""

from __future__ import annotations

import enum
import inspect
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from .merge import merge_extra_models, merge_mapping
from .models import ElementKind, ElementRef, ResponseEntry, StatusKey, qualified_name
from .registry import MetadataRegistry

_PROPERTY_DEFAULTS = {"required": True, "is_array": False}


class Explorer:
    """Composes the fragments of related elements into assembler-ready views.

    Class hierarchies are walked base-first so subclasses override inherited
    property fragments, extensions and responses, while extra models
    accumulate.
    """

    def __init__(self, registry: MetadataRegistry) -> None:
        self._registry = registry

    def snapshot(self, ref: ElementRef) -> Mapping[str, Any]:
        return self._registry.store.snapshot(ref)

    def model_properties(self, model: type) -> Dict[str, Dict[str, Any]]:
        """Return visible property fragments keyed by their serialized name."""
        fragments: Dict[str, Dict[str, Any]] = {}
        hidden: Set[str] = set()
        for klass in _lineage(model):
            for name in self._registry.property_names(klass):
                ref = ElementRef.for_property(klass, name)
                options = self._registry.property_options(ref)
                fragments[name] = merge_mapping(fragments.get(name), options)
                if self._registry.is_hidden(ref):
                    hidden.add(name)
                elif options:
                    hidden.discard(name)

        result: Dict[str, Dict[str, Any]] = {}
        for name, fragment in fragments.items():
            if name in hidden:
                continue
            view = dict(_PROPERTY_DEFAULTS)
            view.update(fragment)
            result[fragment.get("name", name)] = view
        return result

    def model_extra_models(self, model: type) -> Tuple[Any, ...]:
        collected: Tuple[Any, ...] = ()
        for klass in _lineage(model):
            collected = merge_extra_models(
                collected, self._registry.extra_models(ElementRef.for_class(klass))
            )
        return collected

    def extensions(self, target: Any, owner: Optional[type] = None) -> Dict[str, Any]:
        """Extensions of a class (inherited ones included) or of a method.

        For methods, ``owner`` contributes its class-level extensions first.
        """
        merged: Dict[str, Any] = {}
        if inspect.isclass(target):
            owner, target = target, None
        if owner is not None:
            for klass in _lineage(owner):
                merged.update(self._registry.extensions(ElementRef.for_class(klass)))
        if target is not None:
            func = getattr(target, "__func__", target)
            merged.update(self._registry.extensions(ElementRef.for_method(func)))
        return merged

    def operation_responses(
        self, method: Any, owner: Optional[type] = None
    ) -> Dict[StatusKey, ResponseEntry]:
        """Responses for one operation, layering method entries over class ones."""
        merged: Dict[StatusKey, ResponseEntry] = {}
        if owner is not None:
            for klass in _lineage(owner):
                merged.update(self._registry.responses(ElementRef.for_class(klass)))
        func = getattr(method, "__func__", method)
        merged.update(self._registry.responses(ElementRef.for_method(func)))
        return merged

    def named_schemas(self) -> Dict[str, Mapping[str, Any]]:
        return self._registry.named_schemas()

    def find(self, element_id: str) -> Optional[ElementRef]:
        ref = self._registry.store.find(element_id)
        if ref is None or ref.kind is ElementKind.SCHEMA:
            return None
        return ref

    def element_ids(self) -> List[str]:
        return sorted(
            ref.id
            for ref in self._registry.store.elements()
            if ref.kind is not ElementKind.SCHEMA
        )

    def export_element(self, ref: ElementRef) -> Dict[str, Any]:
        return {
            "id": ref.id,
            "kind": ref.kind.value,
            "fragments": {
                namespace: to_jsonable(value)
                for namespace, value in self.snapshot(ref).items()
            },
        }

    def export(self) -> Dict[str, Any]:
        """JSON-ready dump of every element and named schema."""
        elements = [
            self.export_element(ref)
            for ref in sorted(self._registry.store.elements(), key=lambda item: item.id)
            if ref.kind is not ElementKind.SCHEMA
        ]
        return {"elements": elements, "schemas": self.export_schemas()}

    def export_schemas(self) -> Dict[str, Any]:
        return {
            name: to_jsonable(schema) for name, schema in sorted(self.named_schemas().items())
        }


def to_jsonable(value: Any) -> Any:
    """Convert fragment values into JSON-compatible structures."""
    if isinstance(value, enum.Enum):
        return to_jsonable(value.value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if inspect.isclass(value) or inspect.isfunction(value):
        return qualified_name(value)
    if is_dataclass(value):
        return to_jsonable(asdict(value))
    if isinstance(value, Mapping):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_jsonable(item) for item in value]
    return str(value)


def _lineage(model: type) -> List[type]:
    return [klass for klass in reversed(model.__mro__) if klass is not object]


__all__ = ["Explorer", "to_jsonable"]
