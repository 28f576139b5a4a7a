from __future__ import annotations

import logging

import pydantic

from distance_matrix.errors import MalformedResponseError, ParseError
from distance_matrix.messages import item_message, response_message
from distance_matrix.models import (
    DistanceMatrix,
    DistanceMatrixItem,
    DistanceMatrixResponse,
    ResponseStatus,
)

logger = logging.getLogger(__name__)


class ResponseParser:
    """Turns a Distance Matrix API body into a flattened ``DistanceMatrixResponse``.

    Each parser owns its own deserializer, so instances share no state and
    can be used from any number of threads.
    """

    def __init__(self) -> None:
        self._adapter: pydantic.TypeAdapter[DistanceMatrix] = pydantic.TypeAdapter(DistanceMatrix)

    def decode(self, body: str | bytes) -> DistanceMatrix:
        try:
            return self._adapter.validate_json(body)
        except pydantic.ValidationError as exc:
            raise ParseError(f"invalid distance matrix payload: {exc.error_count()} error(s)") from exc

    def parse(self, body: str | bytes) -> DistanceMatrixResponse:
        return self.build_response(self.decode(body))

    def build_response(self, matrix: DistanceMatrix) -> DistanceMatrixResponse:
        status = ResponseStatus.classify(matrix.status)
        match status:
            case ResponseStatus.OK:
                items = flatten(matrix)
                return DistanceMatrixResponse(
                    status=matrix.status,
                    message="".join(item_message(item) for item in items),
                    items=tuple(items),
                )
            case _:
                logger.warning(
                    "distance_matrix_soft_error",
                    extra={"component": "distance_matrix", "status": matrix.status},
                )
                return DistanceMatrixResponse(status=matrix.status, message=response_message(status))


def flatten(matrix: DistanceMatrix) -> list[DistanceMatrixItem]:
    """Pair every origin/destination combination, row-major, with its element."""
    elements = matrix.flat_elements()
    width = len(matrix.destination_addresses)
    expected = len(matrix.origin_addresses) * width
    if len(elements) < expected:
        logger.error(
            "distance_matrix_malformed_response",
            extra={"component": "distance_matrix", "expected": expected, "actual": len(elements)},
        )
        raise MalformedResponseError(expected=expected, actual=len(elements))

    items: list[DistanceMatrixItem] = []
    for i, origin in enumerate(matrix.origin_addresses):
        for j, destination in enumerate(matrix.destination_addresses):
            element = elements[i * width + j]
            items.append(
                DistanceMatrixItem(
                    origin=origin,
                    destination=destination,
                    distance_text=element.distance.text,
                    duration_text=element.duration.text,
                    status=element.status,
                    distance_value=element.distance.value,
                    duration_value=element.duration.value,
                )
            )
    return items


def parse_response(body: str | bytes, parser: ResponseParser | None = None) -> DistanceMatrixResponse:
    return (parser or ResponseParser()).parse(body)
