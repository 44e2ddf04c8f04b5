"""Unit tests for table operation tracing."""

from __future__ import annotations

from typing import Generator

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from relstore.adapters.outbound import TelemetryObserver
from relstore.domain.entities import Table
from relstore.domain.value_objects import Value, WhereParameter, equal_to
from relstore.infrastructure import tracing
from relstore.infrastructure.tracing import span_attribute, table_span


@pytest.fixture
def spans(monkeypatch: pytest.MonkeyPatch) -> Generator[InMemorySpanExporter, None, None]:
    """Route relstore spans into an in-memory exporter."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(tracing, "_tracer", provider.get_tracer(tracing.TRACER_NAME))
    yield exporter
    exporter.clear()


@pytest.mark.unit
class TestSpanAttribute:
    """Tests for attribute coercion."""

    @pytest.mark.parametrize("value", ["Tee", True, 3, 2.5])
    def test_primitives_pass_through(self, value: object) -> None:
        assert span_attribute(value) == value

    def test_sequences_become_strings(self) -> None:
        assert span_attribute(["ID", "Name"]) == ["ID", "Name"]
        assert span_attribute((Value.of(1), Value.of("Sencha"))) == ["1", "Sencha"]

    def test_cells_are_rendered(self) -> None:
        assert span_attribute(Value.of(16)) == "16"
        assert span_attribute(Value.of(False)) == "false"
        assert span_attribute(None) == "None"


@pytest.mark.unit
class TestTableSpan:
    """Tests for table operation spans."""

    def test_span_name_and_attributes(self, spans: InMemorySpanExporter) -> None:
        with table_span("select", {"table.id": "Tee", "select.columns": ["ID", "Name"]}):
            pass

        (span,) = spans.get_finished_spans()
        assert span.name == "relstore.table.select"
        assert span.attributes["relstore.operation"] == "select"
        assert span.attributes["table.id"] == "Tee"
        assert tuple(span.attributes["select.columns"]) == ("ID", "Name")

    def test_error_is_recorded(self, spans: InMemorySpanExporter) -> None:
        with pytest.raises(ValueError):
            with table_span("update"):
                raise ValueError("kaputt")

        (span,) = spans.get_finished_spans()
        assert not span.status.is_ok
        assert span.events[0].name == "exception"

    def test_table_operations_are_traced(self, spans: InMemorySpanExporter) -> None:
        table = Table("Tee", "ID", ["ID", "Name"], TelemetryObserver())
        table.append_row([Value.of(1), Value.of("Sencha")])
        table.append_row([Value.of(2), Value.of("Assam")])

        table.select(["ID"], [WhereParameter("Name", equal_to("Assam"))], "Auswahl")
        table.update("Name", Value.of("Gyokuro"), [WhereParameter("ID", equal_to(1))])

        names = [span.name for span in spans.get_finished_spans()]
        assert names == ["relstore.table.select", "relstore.table.update"]
        selected, updated = spans.get_finished_spans()
        assert selected.attributes["table.rows_selected"] == 1
        assert updated.attributes["update.column"] == "Name"
        assert updated.attributes["table.rows_updated"] == 1

    def test_untraced_without_observer(self, spans: InMemorySpanExporter) -> None:
        table = Table("Tee", "ID", ["ID"])
        table.select(None, [], "Kopie")
        assert spans.get_finished_spans() == ()
