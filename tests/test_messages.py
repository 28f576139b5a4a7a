import pytest

from distance_matrix.messages import item_message, response_message
from distance_matrix.models import DistanceMatrixItem, ResponseStatus


def _item(status: str) -> DistanceMatrixItem:
    return DistanceMatrixItem(
        origin="Boston, MA, USA",
        destination="New York, NY, USA",
        distance_text="215 mi",
        duration_text="3 hours 45 mins",
        status=status,
    )


def test_ok_item_message_has_two_lines_and_blank_line() -> None:
    message = item_message(_item("OK"))

    assert message == (
        "The distance from Boston, MA, USA to New York, NY, USA is 215 mi.\n"
        "The drive will take 3 hours 45 mins.\n"
        "\n"
    )


def test_not_found_item_message() -> None:
    assert item_message(_item("NOT_FOUND")) == (
        "The origin Boston, MA, USA and/or destination New York, NY, USA could not be geocoded."
    )


def test_zero_results_item_message() -> None:
    assert item_message(_item("ZERO_RESULTS")) == (
        "No route from Boston, MA, USA to New York, NY, USA could be found."
    )


def test_route_too_long_item_message() -> None:
    assert item_message(_item("MAX_ROUTE_LENGTH_EXCEEDED")) == (
        "The requested route is too long and cannot be processed."
    )


def test_unknown_item_status_falls_back() -> None:
    assert item_message(_item("SOMETHING_ELSE")) == "Undefined error."
    assert item_message(_item("")) == "Undefined error."


def test_response_message_fallback() -> None:
    assert response_message(ResponseStatus.UNRECOGNIZED) == "Internal server error."
    assert response_message(ResponseStatus.OVER_QUERY_LIMIT) == (
        "The API has received too many requests from this application."
    )


def test_response_message_rejects_ok() -> None:
    with pytest.raises(ValueError):
        response_message(ResponseStatus.OK)
