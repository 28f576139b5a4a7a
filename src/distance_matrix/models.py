from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Units(StrEnum):
    IMPERIAL = "imperial"
    METRIC = "metric"


class ResponseStatus(StrEnum):
    OK = "OK"
    INVALID_REQUEST = "INVALID_REQUEST"
    MAX_ELEMENTS_EXCEEDED = "MAX_ELEMENTS_EXCEEDED"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def classify(cls, raw: str) -> ResponseStatus:
        try:
            return cls(raw)
        except ValueError:
            return cls.UNRECOGNIZED


class ElementStatus(StrEnum):
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    ZERO_RESULTS = "ZERO_RESULTS"
    MAX_ROUTE_LENGTH_EXCEEDED = "MAX_ROUTE_LENGTH_EXCEEDED"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def classify(cls, raw: str) -> ElementStatus:
        try:
            return cls(raw)
        except ValueError:
            return cls.UNRECOGNIZED


class _RawModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class TextValue(_RawModel):
    text: str
    value: float


class Element(_RawModel):
    status: str
    distance: TextValue
    duration: TextValue


class Row(_RawModel):
    elements: list[Element]


class DistanceMatrix(_RawModel):
    status: str = ""
    origin_addresses: list[str]
    destination_addresses: list[str]
    rows: list[Row]

    @field_validator("status", mode="before")
    @classmethod
    def _null_status_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def flat_elements(self) -> list[Element]:
        return [element for row in self.rows for element in row.elements]


@dataclass(frozen=True)
class DistanceMatrixRequest:
    origin: str
    destination: str
    units: Units = Units.IMPERIAL

    def __post_init__(self) -> None:
        if not self.origin.strip():
            raise ValueError("origin must not be blank")
        if not self.destination.strip():
            raise ValueError("destination must not be blank")

    @property
    def encoded_origin(self) -> str:
        return encode_address(self.origin)

    @property
    def encoded_destination(self) -> str:
        return encode_address(self.destination)


@dataclass(frozen=True)
class DistanceMatrixItem:
    origin: str
    destination: str
    distance_text: str
    duration_text: str
    status: str
    distance_value: float | None = None
    duration_value: float | None = None

    @property
    def element_status(self) -> ElementStatus:
        return ElementStatus.classify(self.status)


@dataclass(frozen=True)
class DistanceMatrixResponse:
    status: str
    message: str
    items: tuple[DistanceMatrixItem, ...] = field(default_factory=tuple)

    @property
    def response_status(self) -> ResponseStatus:
        return ResponseStatus.classify(self.status)

    @property
    def ok(self) -> bool:
        return self.response_status is ResponseStatus.OK


def encode_address(address: str) -> str:
    """Replace spaces with ``+``. Other reserved characters are passed through unescaped."""
    return address.replace(" ", "+")
