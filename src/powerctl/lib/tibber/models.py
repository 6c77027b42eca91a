from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, JsonValue, field_validator
from pydantic.alias_generators import to_camel


class PriceLevel(StrEnum):
    VERY_CHEAP = "VERY_CHEAP"
    CHEAP = "CHEAP"
    NORMAL = "NORMAL"
    EXPENSIVE = "EXPENSIVE"
    VERY_EXPENSIVE = "VERY_EXPENSIVE"


class _WireModel(BaseModel):
    """Read-only record decoded from camelCase API payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


def _none_as_empty_mapping(value: Any) -> Any:
    return {} if value is None else value


def _none_as_empty_list(value: Any) -> Any:
    return [] if value is None else value


class GraphQLRequest(BaseModel):
    query: str
    variables: dict[str, JsonValue] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid", frozen=True)


class GraphQLErrorDetail(BaseModel):
    message: str
    path: list[str | int] | None = None
    extensions: dict[str, Any] | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class GraphQLResponse(BaseModel):
    """Generic ``{data, errors}`` envelope; ``data`` shape depends on the query."""

    data: dict[str, Any] | None = None
    errors: list[GraphQLErrorDetail] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", frozen=True)

    errors_none_as_empty = field_validator("errors", mode="before")(_none_as_empty_list)


class HomeFeatures(_WireModel):
    real_time_consumption_enabled: bool = False


class Address(_WireModel):
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    postal_code: str | None = None
    city: str | None = None
    country: str | None = None


class Home(_WireModel):
    id: str
    app_nickname: str | None = None
    size: int | None = None
    type: str | None = None
    features: HomeFeatures = Field(default_factory=HomeFeatures)
    address: Address = Field(default_factory=Address)

    objects_none_as_empty = field_validator("features", "address", mode="before")(
        _none_as_empty_mapping
    )


class PricePoint(_WireModel):
    total: float | None = None
    energy: float | None = None
    tax: float | None = None
    starts_at: AwareDatetime
    level: PriceLevel | None = None
    currency: str | None = None


class PriceInfo(_WireModel):
    current: PricePoint | None = None
    today: list[PricePoint] = Field(default_factory=list)
    tomorrow: list[PricePoint] = Field(default_factory=list)

    lists_none_as_empty = field_validator("today", "tomorrow", mode="before")(_none_as_empty_list)


class Subscription(_WireModel):
    price_info: PriceInfo | None = None


class PriceHome(_WireModel):
    id: str
    current_subscription: Subscription | None = None


class _HomesViewer(_WireModel):
    homes: list[Home] = Field(default_factory=list)

    homes_none_as_empty = field_validator("homes", mode="before")(_none_as_empty_list)


class HomesData(_WireModel):
    viewer: _HomesViewer


class _PriceViewer(_WireModel):
    homes: list[PriceHome] = Field(default_factory=list)

    homes_none_as_empty = field_validator("homes", mode="before")(_none_as_empty_list)


class PriceData(_WireModel):
    viewer: _PriceViewer

