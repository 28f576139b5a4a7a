from __future__ import annotations

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

_configured = False


def configure_otel(service_name: str = "distance-matrix") -> None:
    """Install an SDK tracer provider for the process.

    The library only emits spans through ``get_tracer``; the embedding
    application calls this once at startup (or installs its own provider)
    to have them recorded.
    """
    global _configured
    if _configured:
        return
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    trace.set_tracer_provider(provider)
    _configured = True


def get_tracer() -> trace.Tracer:
    return trace.get_tracer("distance_matrix")
