"""Option records accepted by the annotation functions."""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import InvalidOptionsError


class _Options(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class ResponseOptions(_Options):
    """Description of one response, keyed by ``status`` (``'default'`` when unset)."""

    status: Optional[Union[int, str]] = None
    description: Optional[str] = None
    type: Any = None
    is_array: Optional[bool] = None
    schema_: Optional[Dict[str, Any]] = Field(default=None, alias="schema")
    headers: Optional[Dict[str, Any]] = None
    content: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Any]] = None

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("status must be an int or a string")
        if isinstance(value, int):
            return int(value)
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        return value

    @model_validator(mode="after")
    def _check_exclusive(self) -> "ResponseOptions":
        if self.schema_ is not None and self.type is not None:
            raise ValueError("specify either 'type' or 'schema', not both")
        return self


class EnumSchemaOptions(_Options):
    """Fields attached to a shared enum schema rather than to the usage site."""

    description: Optional[str] = None
    deprecated: Optional[bool] = None


class PropertyOptions(_Options):
    """Shape information for one model property."""

    type: Any = None
    is_array: Optional[bool] = None
    description: Optional[str] = None
    title: Optional[str] = None
    name: Optional[str] = None
    required: Optional[bool] = None
    default: Any = None
    example: Any = None
    format: Optional[str] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_minimum: Optional[bool] = None
    exclusive_maximum: Optional[bool] = None
    multiple_of: Optional[float] = None
    min_length: Optional[int] = Field(default=None, ge=0)
    max_length: Optional[int] = Field(default=None, ge=0)
    pattern: Optional[str] = None
    min_items: Optional[int] = Field(default=None, ge=0)
    max_items: Optional[int] = Field(default=None, ge=0)
    nullable: Optional[bool] = None
    read_only: Optional[bool] = None
    write_only: Optional[bool] = None
    deprecated: Optional[bool] = None
    enum: Any = None
    enum_name: Optional[str] = None
    enum_schema: Optional[EnumSchemaOptions] = None
    items: Optional[Dict[str, Any]] = None
    properties: Optional[Dict[str, Any]] = None

    @model_validator(mode="after")
    def _check_ranges(self) -> "PropertyOptions":
        pairs = (
            ("minimum", "maximum"),
            ("min_length", "max_length"),
            ("min_items", "max_items"),
        )
        for low_name, high_name in pairs:
            low = getattr(self, low_name)
            high = getattr(self, high_name)
            if low is not None and high is not None and low > high:
                raise ValueError(f"{low_name} must not exceed {high_name}")
        if self.enum is None and (self.enum_name or self.enum_schema):
            raise ValueError("enum_name and enum_schema require enum")
        return self


def build_options(model: type, options: Any, fields: Dict[str, Any]) -> Any:
    """Return ``options`` updated with ``fields``, or a fresh record from ``fields``.

    pydantic validation errors surface as :class:`InvalidOptionsError`.
    """
    try:
        if options is None:
            return model(**fields)
        if not isinstance(options, model):
            raise InvalidOptionsError(
                f"Expected {model.__name__}, got {type(options).__name__}"
            )
        if not fields:
            return options
        merged = options.model_dump(by_alias=True, exclude_unset=True)
        merged.update(fields)
        return model(**merged)
    except ValidationError as exc:
        raise InvalidOptionsError(str(exc)) from exc


__all__ = [
    "EnumSchemaOptions",
    "PropertyOptions",
    "ResponseOptions",
    "build_options",
]
