"""Declarative API documentation metadata for classes, methods and properties.

Example:
    >>> from apimeta import ElementRef, MetadataRegistry, api_ok_response
    >>> registry = MetadataRegistry()
    >>> @api_ok_response(description="OK", registry=registry)
    ... def list_cats(): ...
    >>> registry.responses(ElementRef.for_method(list_cats))[200].description
    'OK'
"""

from .config import ApiMetaConfig, ConfigError, load_config
from .decorators import *  # noqa: F401,F403
from .decorators import __all__ as _decorator_names
from .errors import (
    AnnotationError,
    InvalidOptionsError,
    ReservedExtensionKeyError,
    TargetKindError,
)
from .explorer import Explorer
from .logging import configure_logging, get_logger
from .models import (
    ArrayOf,
    ElementKind,
    ElementRef,
    ResponseEntry,
    Scalar,
    TypeDescriptor,
    TypeRef,
)
from .normalizer import normalize_type
from .options import EnumSchemaOptions, PropertyOptions, ResponseOptions
from .registry import (
    MetadataRegistry,
    get_default_registry,
    install_config,
    set_default_registry,
)
from .store import MetadataStore

__version__ = "0.1.0"

__all__ = [
    "AnnotationError",
    "ApiMetaConfig",
    "ArrayOf",
    "ConfigError",
    "ElementKind",
    "ElementRef",
    "EnumSchemaOptions",
    "Explorer",
    "InvalidOptionsError",
    "MetadataRegistry",
    "MetadataStore",
    "PropertyOptions",
    "ReservedExtensionKeyError",
    "ResponseEntry",
    "ResponseOptions",
    "Scalar",
    "TargetKindError",
    "TypeDescriptor",
    "TypeRef",
    "configure_logging",
    "get_default_registry",
    "get_logger",
    "install_config",
    "load_config",
    "normalize_type",
    "set_default_registry",
    "__version__",
    *_decorator_names,
]
