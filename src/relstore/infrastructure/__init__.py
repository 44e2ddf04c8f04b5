"""Infrastructure layer - cross-cutting concerns."""

from relstore.infrastructure.config import Config, get_config
from relstore.infrastructure.container import Container, get_container
from relstore.infrastructure.logging import setup_logging, get_logger
from relstore.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from relstore.infrastructure.tracing import setup_tracing, get_tracer, table_span, trace_span

__all__ = [
    "Config",
    "get_config",
    "Container",
    "get_container",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "table_span",
    "trace_span",
]
