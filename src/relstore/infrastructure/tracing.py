"""OpenTelemetry tracing for table operations.

Table operations are traced as ``relstore.table.<operation>`` spans. Span
attributes may carry table cells and column lists, which are coerced to
types OpenTelemetry accepts.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Mapping, Sequence

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.util.types import AttributeValue

from relstore.infrastructure.config import ObservabilityConfig

TRACER_NAME = "relstore"
TABLE_SPAN_PREFIX = "relstore.table"

_tracer: trace.Tracer | None = None


def setup_tracing(
    config: ObservabilityConfig | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """
    Install a tracer provider for relstore.

    Args:
        config: Observability settings; the service name and OTLP endpoint
            are read from it
        console_export: Whether to also export to console (for debugging)

    Returns:
        Configured tracer instance
    """
    global _tracer

    from relstore import __version__

    config = config or ObservabilityConfig()
    resource = Resource.create(
        {
            "service.name": config.otel_service_name,
            "service.version": __version__,
        }
    )

    provider = TracerProvider(resource=resource)

    if config.otel_endpoint:
        exporter = OTLPSpanExporter(endpoint=config.otel_endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(exporter))

    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)

    _tracer = provider.get_tracer(TRACER_NAME, __version__)

    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the relstore tracer (the global provider's until setup_tracing runs)."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(TRACER_NAME)
    return _tracer


def span_attribute(value: Any) -> AttributeValue:
    """Coerce value into an OpenTelemetry attribute value.

    Primitives pass through; sequences become lists of strings; anything
    else (cell values, for instance) is rendered with str().
    """
    if isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Sequence):
        return [str(item) for item in value]
    return str(value)


@contextmanager
def trace_span(
    name: str,
    attributes: Mapping[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """
    Context manager for creating a trace span.

    Args:
        name: Name of the span
        attributes: Optional attributes, coerced with span_attribute

    Yields:
        The created span
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(name) as span:
        if attributes:
            for key, value in attributes.items():
                span.set_attribute(key, span_attribute(value))
        yield span


@contextmanager
def table_span(
    operation: str,
    attributes: Mapping[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """Span for one table operation, named ``relstore.table.<operation>``."""
    with trace_span(f"{TABLE_SPAN_PREFIX}.{operation}", attributes) as span:
        span.set_attribute("relstore.operation", operation)
        yield span
