"""Unit tests for the table observer port and its telemetry adapter."""

from __future__ import annotations

import pytest

from relstore.adapters.outbound import TelemetryObserver
from relstore.domain.entities import Database, Table
from relstore.domain.errors import WrongVariantError
from relstore.domain.value_objects import Value, WhereParameter, greater_than, make_row
from relstore.infrastructure.metrics import MetricsRegistry
from relstore.ports.outbound import NULL_OBSERVER, OperationScope, TableObserver


@pytest.mark.unit
class TestNullObserver:
    """Tests for the default observer."""

    def test_implements_port(self) -> None:
        assert isinstance(NULL_OBSERVER, TableObserver)

    def test_operation_yields_scope(self) -> None:
        with NULL_OBSERVER.operation("select", {"table.id": "Tee"}) as scope:
            assert isinstance(scope, OperationScope)
            scope.set_attribute("table.rows_selected", 3)

    def test_tables_report_nothing_by_default(self, metrics_registry: MetricsRegistry) -> None:
        table = Table("Tee", "ID", ["ID", "Name"])
        table.append_row(make_row(1, "Sencha"))
        table.select(None, [], "Kopie")
        Database("Laden").add_table(table)

        assert metrics_registry.sample("relstore_rows_appended_total") == 0
        assert metrics_registry.sample(
            "relstore_table_operations_total", {"operation": "select"}
        ) == 0
        assert metrics_registry.sample("relstore_tables_registered") == 0


@pytest.mark.unit
class TestTelemetryObserver:
    """Tests for the telemetry adapter."""

    def test_implements_port(self, observer: TelemetryObserver) -> None:
        assert isinstance(observer, TableObserver)

    def test_defaults_to_global_registry(self, metrics_registry: MetricsRegistry) -> None:
        assert TelemetryObserver().metrics is metrics_registry

    def test_failed_operation_is_not_counted(
        self, tea_table: Table, metrics_registry: MetricsRegistry
    ) -> None:
        with pytest.raises(WrongVariantError):
            tea_table.remove_rows(WhereParameter("Name", greater_than(1)))

        assert metrics_registry.sample(
            "relstore_table_operations_total", {"operation": "remove_rows"}
        ) == 0
        assert metrics_registry.sample("relstore_rows_removed_total") == 0

    def test_derived_tables_inherit_observer(
        self, tea_table: Table, category_table: Table, metrics_registry: MetricsRegistry
    ) -> None:
        joined = tea_table.equijoin(category_table, "KategorieID", "Verbund")
        joined.update("Kategorie_Beschreibung", Value.of("Tee"), [])

        assert metrics_registry.sample("relstore_rows_updated_total") == 4
        assert metrics_registry.sample(
            "relstore_table_operations_total", {"operation": "update"}
        ) == 1

    def test_ignored_append_is_logged(self, metrics_registry: MetricsRegistry) -> None:
        events: list[dict[str, object]] = []

        class Recorder:
            def debug(self, event: str, **kw: object) -> None:
                events.append({"event": event, **kw})

        observer = TelemetryObserver(metrics=metrics_registry, logger=Recorder())  # type: ignore[arg-type]
        table = Table("Tee", "ID", ["ID", "Name"], observer)
        table.append_row(make_row(1, "Sencha"))
        table.append_row(make_row(1, "Gyokuro"))

        assert events == [{"event": "row_append_ignored", "table": "Tee", "key": Value.of(1)}]
        assert metrics_registry.sample("relstore_rows_ignored_total") == 1
