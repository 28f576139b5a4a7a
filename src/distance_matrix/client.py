from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from distance_matrix.config import DistanceMatrixSettings, load_settings
from distance_matrix.errors import NetworkError
from distance_matrix.models import DistanceMatrixRequest, DistanceMatrixResponse, Units
from distance_matrix.observability import get_tracer
from distance_matrix.parser import ResponseParser

logger = logging.getLogger(__name__)


class DistanceMatrixClient:
    """Blocking client for the Distance Matrix API.

    The API key, unit system, endpoint and timeout are fixed at construction;
    origin and destination are the only per-call inputs. Transport failures
    raise ``NetworkError`` and are never retried. Non-OK API statuses come back
    as a regular ``DistanceMatrixResponse`` carrying an explanatory message.
    """

    def __init__(
        self,
        settings: DistanceMatrixSettings | None = None,
        *,
        parser: ResponseParser | None = None,
        client_factory: Callable[[], httpx.Client] | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        if not self._settings.DISTANCE_MATRIX_API_KEY:
            raise ValueError("DISTANCE_MATRIX_API_KEY is required")
        self._parser = parser or ResponseParser()
        self._client_factory = client_factory

    @property
    def units(self) -> Units:
        return self._settings.DISTANCE_MATRIX_UNITS

    def build_request(self, origin: str, destination: str) -> DistanceMatrixRequest:
        return DistanceMatrixRequest(origin=origin, destination=destination, units=self.units)

    def build_url(self, request: DistanceMatrixRequest) -> str:
        return (
            f"{self._settings.DISTANCE_MATRIX_BASE_URL}"
            f"?units={request.units.value}"
            f"&origins={request.encoded_origin}"
            f"&destinations={request.encoded_destination}"
            f"&key={self._settings.DISTANCE_MATRIX_API_KEY}"
        )

    def fetch_matrix(self, origin: str, destination: str) -> str:
        request = self.build_request(origin, destination)
        url = self.build_url(request)
        log_extra = {"component": "distance_matrix", "url": self._redact(url)}
        logger.info("distance_matrix_request_started", extra=log_extra)

        factory = self._client_factory or (
            lambda: httpx.Client(timeout=self._settings.DISTANCE_MATRIX_TIMEOUT_SECONDS)
        )
        with get_tracer().start_as_current_span("distance_matrix.fetch") as span:
            span.set_attribute("distance_matrix.units", request.units.value)
            try:
                with factory() as client:
                    response = client.get(url)
                    response.raise_for_status()
                    span.set_attribute("http.status_code", response.status_code)
                    body = response.content.decode(response.encoding or "utf-8")
            except httpx.TimeoutException as exc:
                logger.error("distance_matrix_request_failed", extra={**log_extra, "reason": "timeout"})
                raise NetworkError("distance matrix request timed out") from exc
            except httpx.HTTPStatusError as exc:
                status_code = exc.response.status_code
                span.set_attribute("http.status_code", status_code)
                logger.error(
                    "distance_matrix_request_failed",
                    extra={**log_extra, "reason": "http_status", "status_code": status_code},
                )
                raise NetworkError(
                    f"distance matrix endpoint returned status {status_code}",
                    status_code=status_code,
                ) from exc
            except httpx.InvalidURL as exc:
                logger.error("distance_matrix_request_failed", extra={**log_extra, "reason": "invalid_url"})
                raise NetworkError("distance matrix request url is invalid") from exc
            except httpx.HTTPError as exc:
                logger.error("distance_matrix_request_failed", extra={**log_extra, "reason": "transport"})
                raise NetworkError("distance matrix request failed") from exc
            except (UnicodeDecodeError, LookupError) as exc:
                logger.error("distance_matrix_request_failed", extra={**log_extra, "reason": "undecodable_body"})
                raise NetworkError("distance matrix response body is not text") from exc

        logger.info(
            "distance_matrix_request_completed",
            extra={**log_extra, "body_length": len(body)},
        )
        return body

    def get_response(self, origin: str, destination: str) -> DistanceMatrixResponse:
        return self._parser.parse(self.fetch_matrix(origin, destination))

    def _redact(self, url: str) -> str:
        return url.replace(self._settings.DISTANCE_MATRIX_API_KEY, "***")


def fetch_matrix(
    origin: str,
    destination: str,
    api_key: str,
    units: Units = Units.IMPERIAL,
    client_factory: Callable[[], httpx.Client] | None = None,
) -> str:
    settings = load_settings(DISTANCE_MATRIX_API_KEY=api_key, DISTANCE_MATRIX_UNITS=units)
    return DistanceMatrixClient(settings, client_factory=client_factory).fetch_matrix(origin, destination)
