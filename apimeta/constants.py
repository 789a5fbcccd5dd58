"""Namespace keys and status discriminants shared across apimeta."""

from __future__ import annotations

NS_RESPONSES = "responses"
NS_EXTRA_MODELS = "extra-models"
NS_EXTENSIONS = "extensions"
NS_HIDDEN = "hidden"
NS_PROPERTY = "property"
NS_PROPERTIES = "properties"
NS_SCHEMA = "schema"

DEFAULT_STATUS = "default"
STATUS_WILDCARDS = ("1XX", "2XX", "3XX", "4XX", "5XX")

DEFAULT_EXTENSION_PREFIX = "x-"
