"""Explicit registration API over the metadata store."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .config import ApiMetaConfig
from .constants import (
    DEFAULT_EXTENSION_PREFIX,
    DEFAULT_STATUS,
    NS_EXTENSIONS,
    NS_EXTRA_MODELS,
    NS_HIDDEN,
    NS_PROPERTIES,
    NS_PROPERTY,
    NS_RESPONSES,
    NS_SCHEMA,
    STATUS_WILDCARDS,
)
from .errors import InvalidOptionsError, ReservedExtensionKeyError, TargetKindError
from .logging import configure_logging, get_logger
from .merge import (
    merge_extension,
    merge_extra_models,
    merge_mapping,
    merge_names,
    merge_response,
)
from .models import ElementKind, ElementRef, ResponseEntry, StatusKey
from .normalizer import enum_name_for, enum_type, enum_values, normalize_type
from .options import PropertyOptions, ResponseOptions
from .store import MetadataStore, read_only

_ENUM_FIELDS = {"type", "is_array", "enum", "enum_name", "enum_schema"}


class MetadataRegistry:
    """Registers documentation metadata for classes, methods and properties.

    Every operation normalizes its input, reads the element's fragment for one
    namespace, applies the merge policy and writes the result back.
    """

    def __init__(
        self,
        store: Optional[MetadataStore] = None,
        *,
        extension_prefix: str = DEFAULT_EXTENSION_PREFIX,
        override_existing: bool = True,
        warn_unknown_status: bool = False,
    ) -> None:
        self.store = store if store is not None else MetadataStore()
        self.extension_prefix = extension_prefix
        self.override_existing = override_existing
        self.warn_unknown_status = warn_unknown_status
        self.logger = get_logger("registry")

    @classmethod
    def from_config(cls, config: ApiMetaConfig) -> "MetadataRegistry":
        return cls(
            extension_prefix=config.extensions.prefix,
            override_existing=config.responses.override_existing,
            warn_unknown_status=config.responses.warn_unknown_status,
        )

    # ------------------------------------------------------------------
    # Responses

    def describe_response(
        self,
        ref: ElementRef,
        options: ResponseOptions,
        *,
        override_existing: Optional[bool] = None,
    ) -> Mapping[StatusKey, ResponseEntry]:
        """Record one response for ``ref`` and return the merged fragment.

        With ``override_existing=False`` a second response for a status that is
        already registered is ignored.
        """
        _require_kind(ref, "api_response", "classes or methods", ElementKind.CLASS, ElementKind.METHOD)
        override = self.override_existing if override_existing is None else override_existing
        descriptor = normalize_type(options.type, options.is_array)
        key: StatusKey = options.status if options.status is not None else DEFAULT_STATUS
        if self.warn_unknown_status and not is_known_status(key):
            self.logger.warning("Unrecognized response status %r on %s", key, ref.id)

        entry = ResponseEntry(
            key=key,
            description=options.description or "",
            type=descriptor.type,
            is_array=descriptor.is_array,
            schema=options.schema_,
            headers=dict(options.headers or {}),
            content=dict(options.content or {}),
            links=dict(options.links or {}),
        )
        merged = self.store.update(
            ref, NS_RESPONSES, lambda existing: merge_response(existing, entry, override)
        )
        if merged[key] is not entry:
            self.logger.debug("Kept existing %r response on %s", key, ref.id)
        else:
            self.logger.debug("Registered %r response on %s", key, ref.id)
        return read_only(merged)

    def responses(self, ref: ElementRef) -> Mapping[StatusKey, ResponseEntry]:
        return self.store.view(ref, NS_RESPONSES, {})

    # ------------------------------------------------------------------
    # Properties

    def describe_property(self, ref: ElementRef, options: PropertyOptions) -> Mapping[str, Any]:
        """Merge shape information for one property into its fragment."""
        _require_kind(ref, "api_property", "properties", ElementKind.PROPERTY)
        fragment = options.model_dump(exclude=_ENUM_FIELDS, exclude_none=True)
        descriptor = normalize_type(options.type, options.is_array)
        if descriptor.type is not None:
            fragment["type"] = descriptor.type
            fragment["is_array"] = descriptor.is_array
        elif options.enum is not None and options.is_array is not None:
            fragment["is_array"] = options.is_array

        if options.enum is not None:
            values = enum_values(options.enum)
            schema_name = enum_name_for(options.enum, options.enum_name)
            if schema_name is None:
                fragment["enum"] = values
                fragment.setdefault("type", enum_type(values))
            else:
                self._describe_enum_schema(schema_name, values, options)
                fragment["enum_name"] = schema_name

        self._index_property(ref)
        merged = self.store.update(
            ref, NS_PROPERTY, lambda existing: merge_mapping(existing, fragment)
        )
        self.logger.debug("Registered property %s", ref.id)
        return read_only(merged)

    def hide_property(self, ref: ElementRef) -> None:
        _require_kind(ref, "api_hide_property", "properties", ElementKind.PROPERTY)
        self._index_property(ref)
        self.store.set(ref, NS_HIDDEN, True)

    def property_options(self, ref: ElementRef) -> Mapping[str, Any]:
        return self.store.view(ref, NS_PROPERTY, {})

    def is_hidden(self, ref: ElementRef) -> bool:
        return bool(self.store.get(ref, NS_HIDDEN, False))

    def property_names(self, owner: type) -> Tuple[str, ...]:
        return self.store.get(ElementRef.for_class(owner), NS_PROPERTIES, ())

    def named_schema(self, name: str) -> Mapping[str, Any]:
        return self.store.view(ElementRef.schema(name), NS_SCHEMA, {})

    def named_schemas(self) -> Dict[str, Mapping[str, Any]]:
        return {
            ref.name: self.store.view(ref, NS_SCHEMA, {})
            for ref in self.store.elements(ElementKind.SCHEMA)
            if ref.name is not None
        }

    # ------------------------------------------------------------------
    # Extra models and extensions

    def add_extra_models(self, ref: ElementRef, *models: Any) -> Tuple[Any, ...]:
        _require_kind(ref, "api_extra_models", "classes", ElementKind.CLASS)
        if not models:
            raise InvalidOptionsError("api_extra_models requires at least one model")
        return self.store.update(
            ref, NS_EXTRA_MODELS, lambda existing: merge_extra_models(existing, models)
        )

    def extra_models(self, ref: ElementRef) -> Tuple[Any, ...]:
        return self.store.get(ref, NS_EXTRA_MODELS, ())

    def add_extension(self, ref: ElementRef, key: str, value: Any) -> Mapping[str, Any]:
        _require_kind(ref, "api_extension", "classes or methods", ElementKind.CLASS, ElementKind.METHOD)
        if not isinstance(key, str) or not key.startswith(self.extension_prefix):
            raise ReservedExtensionKeyError(str(key), self.extension_prefix)
        existing = self.extensions(ref)
        if key in existing:
            self.logger.debug("Replacing extension %s on %s", key, ref.id)
        merged = self.store.update(
            ref, NS_EXTENSIONS, lambda current: merge_extension(current, key, value)
        )
        return read_only(merged)

    def extensions(self, ref: ElementRef) -> Mapping[str, Any]:
        return self.store.view(ref, NS_EXTENSIONS, {})

    # ------------------------------------------------------------------
    # Internal helpers

    def _index_property(self, ref: ElementRef) -> None:
        name = ref.name
        if name is None:
            raise TargetKindError("api_property", ref.id, "named properties")
        self.store.update(
            ElementRef.for_class(ref.owner),
            NS_PROPERTIES,
            lambda existing: merge_names(existing, name),
        )

    def _describe_enum_schema(
        self, name: str, values: Iterable[Any], options: PropertyOptions
    ) -> None:
        values = list(values)
        fragment: Dict[str, Any] = {"type": enum_type(values), "enum": values}
        if options.enum_schema is not None:
            fragment.update(options.enum_schema.model_dump(exclude_none=True))
        self.store.update(
            ElementRef.schema(name), NS_SCHEMA, lambda existing: merge_mapping(existing, fragment)
        )
        self.logger.debug("Registered named schema %s", name)


def is_known_status(key: StatusKey) -> bool:
    if isinstance(key, int):
        return 100 <= key <= 599
    return key == DEFAULT_STATUS or key in STATUS_WILDCARDS


def _require_kind(ref: ElementRef, annotation: str, allowed: str, *kinds: ElementKind) -> None:
    if ref.kind not in kinds:
        raise TargetKindError(annotation, ref.id, allowed)


_default_registry = MetadataRegistry()


def get_default_registry() -> MetadataRegistry:
    """Return the process-wide registry used when decorators get no ``registry``."""
    return _default_registry


def set_default_registry(registry: MetadataRegistry) -> MetadataRegistry:
    """Install ``registry`` as the default and return the previous one."""
    global _default_registry
    previous = _default_registry
    _default_registry = registry
    return previous


def install_config(config: ApiMetaConfig) -> MetadataRegistry:
    """Apply ``config``: route logging and install a matching default registry."""
    configure_logging(config.logging)
    registry = MetadataRegistry.from_config(config)
    set_default_registry(registry)
    registry.logger.debug("Installed configuration from %s", config.root)
    return registry


__all__ = [
    "MetadataRegistry",
    "get_default_registry",
    "install_config",
    "is_known_status",
    "set_default_registry",
]
