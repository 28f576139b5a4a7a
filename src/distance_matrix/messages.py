from __future__ import annotations

from distance_matrix.models import DistanceMatrixItem, ElementStatus, ResponseStatus

RESPONSE_MESSAGES: dict[ResponseStatus, str] = {
    ResponseStatus.INVALID_REQUEST: "The given request was invalid.",
    ResponseStatus.MAX_ELEMENTS_EXCEEDED: "The requests exceed the per-query limit.",
    ResponseStatus.OVER_DAILY_LIMIT: "There was an issue with the API key.",
    ResponseStatus.OVER_QUERY_LIMIT: "The API has received too many requests from this application.",
    ResponseStatus.REQUEST_DENIED: "This application cannot use the Distance Matrix API.",
    ResponseStatus.UNKNOWN_ERROR: "The request could not be processed due to a server error. Please try again.",
}
FALLBACK_RESPONSE_MESSAGE = "Internal server error."
FALLBACK_ITEM_MESSAGE = "Undefined error."


def response_message(status: ResponseStatus) -> str:
    """Message for a response whose top-level status is not OK.

    OK responses carry the concatenated item messages instead, so passing
    ``ResponseStatus.OK`` raises ``ValueError``.
    """
    if status is ResponseStatus.OK:
        raise ValueError("OK responses have no response-level message")
    return RESPONSE_MESSAGES.get(status, FALLBACK_RESPONSE_MESSAGE)


def item_message(item: DistanceMatrixItem) -> str:
    match item.element_status:
        case ElementStatus.OK:
            return (
                f"The distance from {item.origin} to {item.destination} is {item.distance_text}.\n"
                f"The drive will take {item.duration_text}.\n"
                "\n"
            )
        case ElementStatus.NOT_FOUND:
            return f"The origin {item.origin} and/or destination {item.destination} could not be geocoded."
        case ElementStatus.ZERO_RESULTS:
            return f"No route from {item.origin} to {item.destination} could be found."
        case ElementStatus.MAX_ROUTE_LENGTH_EXCEEDED:
            return "The requested route is too long and cannot be processed."
        case _:
            return FALLBACK_ITEM_MESSAGE
