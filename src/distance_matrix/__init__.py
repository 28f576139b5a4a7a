"""Distance Matrix API client and response flattening."""

from distance_matrix.client import DistanceMatrixClient, fetch_matrix
from distance_matrix.config import DistanceMatrixSettings, load_settings
from distance_matrix.errors import DistanceMatrixError, MalformedResponseError, NetworkError, ParseError
from distance_matrix.messages import item_message, response_message
from distance_matrix.models import (
    DistanceMatrix,
    DistanceMatrixItem,
    DistanceMatrixRequest,
    DistanceMatrixResponse,
    ElementStatus,
    ResponseStatus,
    Units,
)
from distance_matrix.observability import configure_otel
from distance_matrix.parser import ResponseParser, flatten, parse_response

__all__ = [
    "DistanceMatrix",
    "DistanceMatrixClient",
    "DistanceMatrixError",
    "DistanceMatrixItem",
    "DistanceMatrixRequest",
    "DistanceMatrixResponse",
    "DistanceMatrixSettings",
    "ElementStatus",
    "MalformedResponseError",
    "NetworkError",
    "ParseError",
    "ResponseParser",
    "ResponseStatus",
    "Units",
    "configure_otel",
    "fetch_matrix",
    "flatten",
    "item_message",
    "load_settings",
    "parse_response",
    "response_message",
]
