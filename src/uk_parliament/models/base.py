"""Shared pydantic base classes and response envelopes."""

from __future__ import annotations

from typing import Annotated, Any, Generic, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel, to_pascal
from pydantic_core import PydanticCustomError

T = TypeVar("T")

STRICT_CONTEXT_KEY = "strict"

JsonDocument = Union[dict[str, Any], list[Any]]
"""Untyped JSON payload, returned where the upstream schema is not documented."""


def _known_keys(model: type[BaseModel]) -> set[str]:
    keys: set[str] = set()
    for name, info in model.model_fields.items():
        keys.add(name)
        if info.alias:
            keys.add(info.alias)
        if isinstance(info.validation_alias, str):
            keys.add(info.validation_alias)
    return keys


class ParliamentModel(BaseModel):
    """Immutable DTO mapped from camelCase JSON.

    Unknown keys are ignored unless validation runs with ``{"strict": True}``
    in its context, in which case they are reported as ``unmapped_field``
    errors. The context reaches nested models, so the check applies at any
    depth.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @model_validator(mode="before")
    @classmethod
    def reject_unmapped_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict) or not info.context or not info.context.get(STRICT_CONTEXT_KEY):
            return data
        unknown = sorted(key for key in data if key not in _known_keys(cls))
        if unknown:
            raise PydanticCustomError(
                "unmapped_field",
                "unmapped fields for {model}: {fields}",
                {"model": cls.__name__, "fields": ", ".join(unknown), "names": unknown},
            )
        return data


class PascalModel(ParliamentModel):
    """DTO for APIs that use PascalCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_pascal)


class SnakeModel(ParliamentModel):
    """DTO for APIs whose JSON keys already are snake_case."""

    model_config = ConfigDict(alias_generator=None)


def coerce_text(value: Any) -> Any:
    """Render scalars as text and collapse nested JSON to ``[]`` or ``{}``."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        return "[]"
    if isinstance(value, dict):
        return "{}"
    return str(value)


def coerce_text_list(value: Any) -> Any:
    if value is None or not isinstance(value, list):
        return value
    return ["" if item is None else coerce_text(item) for item in value]


AnyText = Annotated[Union[str, None], BeforeValidator(coerce_text)]
"""Text field that tolerates numbers, booleans and nested JSON on the wire."""

TextList = Annotated[Union[list[str], None], BeforeValidator(coerce_text_list)]


class Link(ParliamentModel):
    rel: str | None = None
    href: str | None = None
    method: str | None = None


class ValueWrapper(ParliamentModel, Generic[T]):
    """Item envelope ``{"value": ..., "links": [...]}``."""

    value: T
    links: list[Link] = Field(default_factory=list)


class PaginatedResponse(ParliamentModel, Generic[T]):
    """Skip/take envelope whose items are wrapped in :class:`ValueWrapper`."""

    total_results: int | None = None
    result_context: str | None = None
    skip: int | None = None
    take: int | None = None
    items: list[ValueWrapper[T]] = Field(default_factory=list)
    results: list[ValueWrapper[T]] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
    result_type: str | None = None

    def item_values(self) -> list[T]:
        """Return unwrapped items from ``items``, or from ``results`` when empty."""
        wrapped = self.items or self.results
        return [item.value for item in wrapped]


class ListResponse(ParliamentModel, Generic[T]):
    """Flat list envelope used by the bills and committees APIs."""

    items: list[T] = Field(default_factory=list)
    total_results: int | None = None
    items_per_page: int | None = None


__all__ = [
    "AnyText",
    "JsonDocument",
    "Link",
    "ListResponse",
    "PaginatedResponse",
    "ParliamentModel",
    "PascalModel",
    "STRICT_CONTEXT_KEY",
    "SnakeModel",
    "TextList",
    "ValueWrapper",
    "coerce_text",
]
