"""Prometheus metrics for the relational store."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all relstore metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Table operation metrics
        self.table_operations_total = Counter(
            "relstore_table_operations_total",
            "Total number of table operations",
            ["operation"],  # select, update, equijoin, remove_rows, remove_all_rows
            registry=self._registry,
        )

        self.operation_latency_seconds = Histogram(
            "relstore_operation_latency_seconds",
            "Table operation latency in seconds",
            ["operation"],
            buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
            registry=self._registry,
        )

        # Row metrics
        self.rows_appended_total = Counter(
            "relstore_rows_appended_total",
            "Total rows stored by append",
            registry=self._registry,
        )

        self.rows_ignored_total = Counter(
            "relstore_rows_ignored_total",
            "Total appends ignored because the primary key already existed",
            registry=self._registry,
        )

        self.rows_removed_total = Counter(
            "relstore_rows_removed_total",
            "Total rows removed",
            registry=self._registry,
        )

        self.rows_updated_total = Counter(
            "relstore_rows_updated_total",
            "Total rows modified by update",
            registry=self._registry,
        )

        # Catalog metrics
        self.tables_registered = Gauge(
            "relstore_tables_registered",
            "Number of tables registered across all databases",
            registry=self._registry,
        )

        # Build info
        self.info = Info(
            "relstore",
            "Relational store information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """The collector registry these metrics are registered with."""
        return self._registry

    def sample(self, name: str, labels: dict[str, str] | None = None) -> float:
        """Current value of a sample, 0.0 if it has not been recorded yet."""
        value = self._registry.get_sample_value(name, labels or {})
        return value if value is not None else 0.0


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    if registry is None:
        set_metrics(None)
        metrics = get_metrics()
    else:
        metrics = MetricsRegistry(registry)
        set_metrics(metrics)

    from relstore import __version__
    metrics.info.info({
        "version": __version__,
    })

    # Start HTTP server for Prometheus scraping
    start_http_server(port, registry=registry or REGISTRY)

    return metrics


# Metrics bound to the default REGISTRY; collectors can only be registered once
_default_metrics: MetricsRegistry | None = None


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics, _default_metrics
    if _metrics is None:
        if _default_metrics is None:
            _default_metrics = MetricsRegistry()
        _metrics = _default_metrics
    return _metrics


def set_metrics(metrics: MetricsRegistry | None) -> None:
    """Replace the global metrics registry (None restores the default one)."""
    global _metrics
    _metrics = metrics
