from __future__ import annotations

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider

from distance_matrix.observability import configure_otel, get_tracer


def test_configure_otel_installs_sdk_provider_once() -> None:
    configure_otel("distance-matrix-test")
    provider = trace.get_tracer_provider()
    configure_otel("distance-matrix-other")

    assert isinstance(provider, TracerProvider)
    assert trace.get_tracer_provider() is provider


def test_get_tracer_starts_spans() -> None:
    with get_tracer().start_as_current_span("distance_matrix.fetch") as span:
        span.set_attribute("distance_matrix.units", "imperial")
        assert span is trace.get_current_span()
