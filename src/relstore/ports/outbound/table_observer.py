"""Table observer port for reporting table and database activity.

This outbound port is how entities report what they did without
depending on a telemetry stack. Adapters turn the reports into spans,
metrics and log events. Entities fall back to NULL_OBSERVER when no
observer is injected.
"""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from relstore.domain.value_objects import Value


@runtime_checkable
class OperationScope(Protocol):
    """Handle for annotating a running operation."""

    def set_attribute(self, key: str, value: Any) -> None:
        """Attach a result attribute to the operation."""
        ...


@runtime_checkable
class TableObserver(Protocol):
    """Protocol for observing table and database operations.

    operation() brackets select, update, equijoin and the remove
    operations. An operation counts as completed only if its body
    returns normally; the row-level reports are sent afterwards.
    """

    def operation(
        self, name: str, attributes: dict[str, Any]
    ) -> AbstractContextManager[OperationScope]:
        """Scope one table operation.

        Args:
            name: Operation name (select, update, equijoin, remove_rows,
                remove_all_rows).
            attributes: Table ids and parameters describing the call.
        """
        ...

    def rows_appended(self, table_id: str, count: int) -> None:
        """Rows were stored by append_row."""
        ...

    def row_ignored(self, table_id: str, key: Value) -> None:
        """An append was ignored because key was already present."""
        ...

    def rows_removed(self, table_id: str, count: int) -> None:
        ...

    def rows_updated(self, table_id: str, column_id: str, count: int) -> None:
        ...

    def table_derived(self, operation: str, table_id: str, new_table_id: str, rows: int) -> None:
        """select or equijoin produced a new table."""
        ...

    def table_registered(self, database_id: str, table_id: str) -> None:
        ...

    def table_removed(self, database_id: str, table_id: str) -> None:
        ...

    def tables_cleared(self, database_id: str, count: int) -> None:
        ...


class _NullScope:
    def set_attribute(self, key: str, value: Any) -> None:
        pass


class NullObserver:
    """Observer that discards every report."""

    def operation(
        self, name: str, attributes: dict[str, Any]
    ) -> AbstractContextManager[OperationScope]:
        return nullcontext(_NullScope())

    def rows_appended(self, table_id: str, count: int) -> None:
        pass

    def row_ignored(self, table_id: str, key: Value) -> None:
        pass

    def rows_removed(self, table_id: str, count: int) -> None:
        pass

    def rows_updated(self, table_id: str, column_id: str, count: int) -> None:
        pass

    def table_derived(self, operation: str, table_id: str, new_table_id: str, rows: int) -> None:
        pass

    def table_registered(self, database_id: str, table_id: str) -> None:
        pass

    def table_removed(self, database_id: str, table_id: str) -> None:
        pass

    def tables_cleared(self, database_id: str, count: int) -> None:
        pass


NULL_OBSERVER = NullObserver()
