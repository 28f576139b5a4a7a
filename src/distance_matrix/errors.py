from __future__ import annotations


class DistanceMatrixError(Exception):
    """Base distance matrix exception."""


class NetworkError(DistanceMatrixError):
    """Raised when the distance matrix endpoint could not be read."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(DistanceMatrixError):
    """Raised when a response body is not a well-formed distance matrix."""


class MalformedResponseError(DistanceMatrixError):
    """Raised when matrix dimensions disagree with the number of elements."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"distance matrix expects {expected} elements, got {actual}")
        self.expected = expected
        self.actual = actual
