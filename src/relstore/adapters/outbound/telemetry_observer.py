"""Telemetry adapter for the TableObserver port.

Turns table and database reports into OpenTelemetry spans, Prometheus
metrics and structlog debug events.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Generator

import structlog
from opentelemetry import trace

from relstore.domain.value_objects import Value
from relstore.infrastructure.logging import get_logger
from relstore.infrastructure.metrics import MetricsRegistry, get_metrics
from relstore.infrastructure.tracing import table_span


class TelemetryObserver:
    """Reports table operations as spans, metrics and log events.

    Operation counters and latency are recorded only for operations that
    complete; a failing operation still ends its span, with the error
    recorded on it.
    """

    def __init__(
        self,
        metrics: MetricsRegistry | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        """Initialize the observer.

        Args:
            metrics: Registry to record into. Defaults to the process-wide
                registry, looked up on each report.
            logger: Logger for debug events.
        """
        self._metrics = metrics
        self._logger = logger or get_logger(__name__)

    @property
    def metrics(self) -> MetricsRegistry:
        return self._metrics if self._metrics is not None else get_metrics()

    @contextmanager
    def operation(self, name: str, attributes: dict[str, Any]) -> Generator[trace.Span, None, None]:
        metrics = self.metrics
        start = time.perf_counter()
        with table_span(name, attributes) as span:
            yield span
        metrics.table_operations_total.labels(operation=name).inc()
        metrics.operation_latency_seconds.labels(operation=name).observe(
            time.perf_counter() - start
        )

    def rows_appended(self, table_id: str, count: int) -> None:
        self.metrics.rows_appended_total.inc(count)

    def row_ignored(self, table_id: str, key: Value) -> None:
        self.metrics.rows_ignored_total.inc()
        self._logger.debug("row_append_ignored", table=table_id, key=key)

    def rows_removed(self, table_id: str, count: int) -> None:
        self.metrics.rows_removed_total.inc(count)
        self._logger.debug("rows_removed", table=table_id, removed=count)

    def rows_updated(self, table_id: str, column_id: str, count: int) -> None:
        self.metrics.rows_updated_total.inc(count)
        self._logger.debug("rows_updated", table=table_id, column=column_id, updated=count)

    def table_derived(self, operation: str, table_id: str, new_table_id: str, rows: int) -> None:
        self._logger.debug(
            "table_derived",
            operation=operation,
            table=table_id,
            new_table=new_table_id,
            rows=rows,
        )

    def table_registered(self, database_id: str, table_id: str) -> None:
        self.metrics.tables_registered.inc()
        self._logger.debug("table_registered", database=database_id, table=table_id)

    def table_removed(self, database_id: str, table_id: str) -> None:
        self.metrics.tables_registered.dec()
        self._logger.debug("table_removed", database=database_id, table=table_id)

    def tables_cleared(self, database_id: str, count: int) -> None:
        self.metrics.tables_registered.dec(count)
        self._logger.debug("tables_cleared", database=database_id, removed=count)
