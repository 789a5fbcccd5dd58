"""Tests for extra-model and extension decorators."""

from __future__ import annotations

import pytest

from apimeta.decorators import api_extension, api_extra_models
from apimeta.errors import InvalidOptionsError, ReservedExtensionKeyError, TargetKindError
from apimeta.models import ElementRef
from apimeta.registry import MetadataRegistry


class ExtraModel:
    pass


class Pagination:
    pass


def test_extra_models_accumulate_on_class(registry: MetadataRegistry) -> None:
    @api_extra_models(ExtraModel, registry=registry)
    @api_extra_models(Pagination, ExtraModel, registry=registry)
    class CatsController:
        pass

    assert registry.extra_models(ElementRef.for_class(CatsController)) == (Pagination, ExtraModel)


def test_extra_models_are_class_only(registry: MetadataRegistry) -> None:
    def handler() -> None:
        pass

    with pytest.raises(TargetKindError):
        api_extra_models(ExtraModel, registry=registry)(handler)
    with pytest.raises(InvalidOptionsError):
        api_extra_models()


def test_extension_on_class_and_method(registry: MetadataRegistry) -> None:
    @api_extension("x-tags", ["foo", "bar"], registry=registry)
    class CreateCat:
        @api_extension("x-rate-limit", 10, registry=registry)
        def create(self) -> None:
            pass

    assert registry.extensions(ElementRef.for_class(CreateCat)) == {"x-tags": ["foo", "bar"]}
    assert registry.extensions(ElementRef.for_method(CreateCat.create)) == {"x-rate-limit": 10}


def test_extension_key_without_prefix_fails_at_application(
    registry: MetadataRegistry,
) -> None:
    decorator = api_extension("tags", ["foo"], registry=registry)

    with pytest.raises(ReservedExtensionKeyError) as excinfo:
        decorator(ExtraModel)

    assert excinfo.value.key == "tags"
    assert excinfo.value.prefix == "x-"
    assert registry.extensions(ElementRef.for_class(ExtraModel)) == {}


def test_extension_rejects_properties(registry: MetadataRegistry) -> None:
    with pytest.raises(TargetKindError):
        api_extension("x-a", 1, registry=registry)(property(lambda self: 1))
