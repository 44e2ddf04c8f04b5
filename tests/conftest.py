"""Pytest configuration and fixtures for relstore tests."""

from __future__ import annotations

from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from relstore.adapters.outbound import TelemetryObserver
from relstore.domain.entities import Database, Table
from relstore.domain.value_objects import make_row
from relstore.infrastructure.container import Container
from relstore.infrastructure.metrics import MetricsRegistry, set_metrics


@pytest.fixture(autouse=True)
def metrics_registry() -> Generator[MetricsRegistry, None, None]:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    metrics = MetricsRegistry(registry=registry)
    set_metrics(metrics)
    yield metrics
    set_metrics(None)


@pytest.fixture
def container() -> Generator[None, None, None]:
    """Reset the container singleton around a test."""
    Container.reset()
    yield
    Container.reset()


@pytest.fixture
def observer(metrics_registry: MetricsRegistry) -> TelemetryObserver:
    """Telemetry observer recording into the per-test registry."""
    return TelemetryObserver(metrics=metrics_registry)


@pytest.fixture
def tea_table(observer: TelemetryObserver) -> Table:
    """Tea varieties keyed by ID, referencing a category."""
    table = Table("Tee", "ID", ["ID", "Name", "Herkunftsland", "KategorieID"], observer)
    table.append_row(make_row(1, "Sencha", "Japan", 1))
    table.append_row(make_row(16, "Darjeeling", "Indien", 2))
    table.append_row(make_row(111, "Earl Grey", "Großbritannien", 2))
    table.append_row(make_row(2000, "Rooibos Vanille", "Südafrika", 3))
    return table


@pytest.fixture
def category_table(observer: TelemetryObserver) -> Table:
    """Tea categories keyed by ID."""
    table = Table("Kategorie", "ID", ["ID", "Beschreibung", "EnthaeltKoffein"], observer)
    table.append_row(make_row(1, "Grüner Tee", True))
    table.append_row(make_row(2, "Schwarzer Tee", True))
    table.append_row(make_row(3, "Kräutertee", False))
    return table


@pytest.fixture
def shop_db(tea_table: Table, category_table: Table, observer: TelemetryObserver) -> Database:
    """Database holding the tea and category tables."""
    db = Database("TassenFreudenDB", observer)
    db.add_table(category_table)
    db.add_table(tea_table)
    return db


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
