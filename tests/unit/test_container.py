"""Unit tests for the dependency container."""

from __future__ import annotations

from typing import Generator

import pytest
import structlog

from relstore.domain.entities import Table
from relstore.domain.value_objects import make_row
from relstore.infrastructure.config import Config, ObservabilityConfig
from relstore.infrastructure.container import Container, get_container
from relstore.infrastructure.metrics import MetricsRegistry
from relstore.ports.outbound import TableObserver


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.mark.unit
@pytest.mark.usefixtures("container")
class TestContainer:
    """Tests for Container wiring."""

    def test_create_uses_given_config(self, metrics_registry: MetricsRegistry) -> None:
        config = Config(observability=ObservabilityConfig(log_level="DEBUG", log_format="console"))
        container = Container.create(config)
        assert container.config is config
        assert container.metrics is metrics_registry
        assert container.tracer is not None
        assert container.logger is not None

    def test_create_is_singleton(self) -> None:
        first = Container.create(Config())
        assert Container.create(Config()) is first
        assert Container.get() is first
        assert get_container() is first

    def test_reset(self) -> None:
        first = Container.create(Config())
        Container.reset()
        assert Container.create(Config()) is not first

    def test_observer_records_into_container_metrics(self, metrics_registry: MetricsRegistry) -> None:
        container = Container.create(Config())
        assert isinstance(container.observer, TableObserver)

        table = Table("Tee", "ID", ["ID", "Name"], container.observer)
        table.append_row(make_row(1, "Sencha"))
        table.select(None, [], "Kopie")

        assert metrics_registry.sample("relstore_rows_appended_total") == 2
        assert metrics_registry.sample(
            "relstore_table_operations_total", {"operation": "select"}
        ) == 1
