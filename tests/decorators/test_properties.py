"""Tests for property annotations and the api_model scanner."""

from __future__ import annotations

import enum
from typing import Annotated, Optional

import pytest

from apimeta.decorators import HIDDEN, api_hide_property, api_model, api_property
from apimeta.errors import InvalidOptionsError, TargetKindError
from apimeta.models import ElementRef
from apimeta.options import EnumSchemaOptions, PropertyOptions
from apimeta.registry import MetadataRegistry


class Letters(enum.Enum):
    A = "A"
    B = "B"
    C = "C"


class Tag:
    pass


class CreateCat:
    name: Annotated[str, PropertyOptions()]
    age: Annotated[int, PropertyOptions(minimum=1, maximum=200)]
    breed: Annotated[str, PropertyOptions(name="_breed", type=str)]
    tags: Annotated[Optional[list[str]], PropertyOptions(format="uri")]
    urls: Annotated[list[str], PropertyOptions(type="string", is_array=True)]
    letter: Annotated[Letters, PropertyOptions(description="A letter")]
    letters: Annotated[
        list[Letters],
        PropertyOptions(
            enum=Letters,
            enum_name="LettersEnum",
            description="Some letters",
            enum_schema=EnumSchemaOptions(description="Letters schema", deprecated=True),
        ),
    ]
    tag: Annotated[Tag, PropertyOptions(description="tag", required=False)]
    secret: Annotated[str, HIDDEN]
    untouched: int


def _props(registry: MetadataRegistry, owner: type, name: str) -> dict:
    return dict(registry.property_options(ElementRef.for_property(owner, name)))


def test_api_property_registers_class_body_property(registry: MetadataRegistry) -> None:
    class Cat:
        @api_property(description="Age in years", minimum=0, registry=registry)
        @property
        def age(self) -> int:
            return 3

    assert isinstance(Cat.__dict__["age"], property)
    assert Cat().age == 3
    assert _props(registry, Cat, "age") == {"description": "Age in years", "minimum": 0}
    assert registry.property_names(Cat) == ("age",)


def test_stacked_property_decorators(registry: MetadataRegistry) -> None:
    class Cat:
        @api_property(description="Internal", registry=registry)
        @api_hide_property(registry=registry)
        @property
        def secret(self) -> str:
            return "s"

    ref = ElementRef.for_property(Cat, "secret")
    assert registry.is_hidden(ref)
    assert registry.property_options(ref)["description"] == "Internal"
    assert isinstance(Cat.__dict__["secret"], property)


def test_property_decorators_reject_classes() -> None:
    with pytest.raises(TargetKindError):
        api_property(description="x")(Tag)
    with pytest.raises(TargetKindError):
        api_hide_property()(Tag)


def test_api_property_rejects_unknown_fields() -> None:
    with pytest.raises(InvalidOptionsError):
        api_property(maximun=3)


def test_api_model_registers_annotated_markers(registry: MetadataRegistry) -> None:
    api_model(registry=registry)(CreateCat)

    assert registry.property_names(CreateCat) == (
        "name",
        "age",
        "breed",
        "tags",
        "urls",
        "letter",
        "letters",
        "tag",
        "secret",
    )
    assert _props(registry, CreateCat, "name") == {"type": str, "is_array": False}
    assert _props(registry, CreateCat, "age") == {
        "type": int,
        "is_array": False,
        "minimum": 1,
        "maximum": 200,
    }
    assert _props(registry, CreateCat, "breed")["name"] == "_breed"
    assert _props(registry, CreateCat, "tags") == {
        "type": str,
        "is_array": True,
        "format": "uri",
        "required": False,
    }
    assert _props(registry, CreateCat, "urls") == {"type": "string", "is_array": True}
    assert _props(registry, CreateCat, "tag") == {
        "type": Tag,
        "is_array": False,
        "description": "tag",
        "required": False,
    }
    assert registry.is_hidden(ElementRef.for_property(CreateCat, "secret"))


def test_api_model_turns_enum_annotations_into_named_schemas(
    registry: MetadataRegistry,
) -> None:
    api_model(registry=registry)(CreateCat)

    assert _props(registry, CreateCat, "letter") == {
        "description": "A letter",
        "enum_name": "Letters",
    }
    assert _props(registry, CreateCat, "letters") == {
        "description": "Some letters",
        "is_array": True,
        "enum_name": "LettersEnum",
    }
    assert registry.named_schema("Letters") == {"type": "string", "enum": ["A", "B", "C"]}
    assert registry.named_schema("LettersEnum") == {
        "type": "string",
        "enum": ["A", "B", "C"],
        "description": "Letters schema",
        "deprecated": True,
    }


def test_api_model_is_idempotent(registry: MetadataRegistry) -> None:
    api_model(registry=registry)(CreateCat)
    first = {name: _props(registry, CreateCat, name) for name in registry.property_names(CreateCat)}

    api_model(registry=registry)(CreateCat)
    second = {name: _props(registry, CreateCat, name) for name in registry.property_names(CreateCat)}

    assert first == second


def test_api_model_decorator_form(registry: MetadataRegistry) -> None:
    @api_model(registry=registry)
    class Owner:
        name: Annotated[str, PropertyOptions(description="Owner name")]

    assert registry.property_names(Owner) == ("name",)


def test_api_model_rejects_functions() -> None:
    def not_a_class() -> None:
        pass

    with pytest.raises(TargetKindError):
        api_model(not_a_class)
