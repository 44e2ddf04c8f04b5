"""Table entity: keyed row storage with select, update and equijoin.

A table has a fixed, ordered column schema with one primary-key column and
stores rows in an insertion-ordered dict keyed by the primary-key Value.

Key behaviors:
    - append_row is first-write-wins: a row whose key already exists is
      silently ignored
    - select keeps a row if ANY WHERE term matches (disjunction)
    - update changes a row only if ALL WHERE terms match (conjunction)
    - equijoin is an inner join of a foreign-key column against the other
      table's primary key, in this table's row order

All contract violations raise PreconditionError before any row is touched.
Operations are reported to an injected TableObserver port; without one,
nothing is reported. Tables are not synchronized; concurrent use requires
an external lock.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from relstore.domain.errors import PreconditionError
from relstore.domain.services.text_renderer import render_relation
from relstore.domain.value_objects import (
    ColumnLookup,
    Value,
    WhereParameter,
    all_match,
    any_match,
    are_unique_identifiers,
    are_valid_identifiers,
    is_valid_identifier,
)
from relstore.ports.inbound import Relation
from relstore.ports.outbound import NULL_OBSERVER, TableObserver


class Table:
    """A database table with a fixed schema and primary-key row index.

    Attributes:
        table_id: Table identifier.
        primary_key_column_id: Column whose values identify rows.
        column_ids: Column identifiers in schema order.

    Example:
        >>> tea = Table("Tee", "ID", ["ID", "Name"])
        >>> tea.append_row([Value.of(1), Value.of("Sencha")]).row_count
        1
    """

    def __init__(
        self,
        table_id: str,
        primary_key_column_id: str,
        column_ids: Sequence[str],
        observer: TableObserver | None = None,
    ) -> None:
        """Create an empty table.

        Args:
            table_id: Valid identifier naming the table.
            primary_key_column_id: Column holding the primary key; must be
                one of column_ids.
            column_ids: Unique, valid column identifiers in display order.
            observer: Receives operation reports. Tables derived by select
                and equijoin inherit it.

        Raises:
            PreconditionError: If any argument violates the contract above.
        """
        if not is_valid_identifier(table_id):
            raise PreconditionError(f"Invalid table id: {table_id!r}")
        self._require_column_collection(column_ids)
        columns = list(column_ids)
        if not are_valid_identifiers(columns):
            raise PreconditionError(f"column_ids contain invalid identifiers: {columns}")
        if not are_unique_identifiers(columns):
            raise PreconditionError(f"column_ids contain duplicates: {columns}")
        if primary_key_column_id not in columns:
            raise PreconditionError(
                f"Primary key {primary_key_column_id!r} is not one of the columns {columns}"
            )

        self._table_id = table_id
        self._primary_key_column_id = primary_key_column_id
        self._column_ids = tuple(columns)
        self._column_index = {column_id: i for i, column_id in enumerate(columns)}
        self._primary_key_index = self._column_index[primary_key_column_id]
        # Insertion-ordered: primary key -> row
        self._rows: dict[Value, list[Value]] = {}
        self._observer = observer if observer is not None else NULL_OBSERVER

    @property
    def table_id(self) -> str:
        return self._table_id

    @property
    def primary_key_column_id(self) -> str:
        return self._primary_key_column_id

    @property
    def column_count(self) -> int:
        return len(self._column_ids)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_ids(self) -> list[str]:
        """Column identifiers in schema order (a fresh list)."""
        return list(self._column_ids)

    def rows(self) -> Iterator[list[Value]]:
        """Iterate over copies of the stored rows in insertion order."""
        for row in list(self._rows.values()):
            yield list(row)

    def row_by_key(self, key: Value) -> list[Value] | None:
        """Look up a row by primary key.

        Args:
            key: Primary-key value.

        Returns:
            A copy of the stored row, or None if no row has that key.
        """
        if not isinstance(key, Value):
            raise PreconditionError(f"key must be a Value, got {key!r}")
        row = self._rows.get(key)
        if row is None:
            return None
        return list(row)

    def value_by_key(self, key: Value, column_id: str) -> Value | None:
        """Look up a single cell by primary key and column.

        Returns:
            The cell value, or None if no row has that key.

        Raises:
            PreconditionError: If column_id is not part of this table.
        """
        if not isinstance(key, Value):
            raise PreconditionError(f"key must be a Value, got {key!r}")
        index = self._index_of(column_id)
        row = self._rows.get(key)
        if row is None:
            return None
        return row[index]

    def has_column(self, column_id: str) -> bool:
        """Check if column_id is part of the schema."""
        if not is_valid_identifier(column_id):
            raise PreconditionError(f"Invalid column id: {column_id!r}")
        return column_id in self._column_index

    def has_any_column(self, column_ids: Iterable[str]) -> bool:
        """Check if at least one of column_ids is part of the schema."""
        self._require_column_collection(column_ids)
        for column_id in column_ids:
            if column_id in self._column_index:
                return True
        return False

    def has_all_columns(self, column_ids: Iterable[str]) -> bool:
        """Check if every one of column_ids is part of the schema."""
        self._require_column_collection(column_ids)
        for column_id in column_ids:
            if column_id not in self._column_index:
                return False
        return True

    def append_row(self, row: Sequence[Value]) -> Table:
        """Append a row unless its primary key is already present.

        The first row stored for a key wins; later appends with the same key
        are ignored without error. The row is copied.

        Args:
            row: One Value per column, in schema order.

        Returns:
            This table, for chaining.

        Raises:
            PreconditionError: If the row has the wrong length or holds
                anything other than Values.
        """
        if row is None:
            raise PreconditionError("row is None")
        stored = list(row)
        if len(stored) != len(self._column_ids):
            raise PreconditionError(
                f"Row has {len(stored)} values but table {self._table_id} "
                f"has {len(self._column_ids)} columns"
            )
        for value in stored:
            if not isinstance(value, Value):
                raise PreconditionError(f"Row values must be Values, got {value!r}")

        key = stored[self._primary_key_index]
        if key in self._rows:
            self._observer.row_ignored(self._table_id, key)
            return self

        self._rows[key] = stored
        self._observer.rows_appended(self._table_id, 1)
        return self

    def remove_rows(self, where: WhereParameter) -> Table:
        """Delete every row whose value in where.column_id matches.

        The predicate is evaluated once per row before anything is deleted,
        so a failing predicate leaves the table unchanged.

        Returns:
            This table, for chaining.
        """
        self._require_where_columns([where])
        index = self._column_index[where.column_id]

        attributes = {"table.id": self._table_id, "where.column": where.column_id}
        with self._observer.operation("remove_rows", attributes) as scope:
            doomed = [key for key, row in self._rows.items() if where.matches(row[index])]
            for key in doomed:
                del self._rows[key]
            scope.set_attribute("table.rows_removed", len(doomed))

        self._observer.rows_removed(self._table_id, len(doomed))
        return self

    def remove_all_rows(self) -> None:
        """Delete all rows; the schema is unchanged."""
        with self._observer.operation("remove_all_rows", {"table.id": self._table_id}):
            removed = len(self._rows)
            self._rows.clear()

        self._observer.rows_removed(self._table_id, removed)

    def select(
        self,
        column_ids: Sequence[str] | None,
        where_params: Sequence[WhereParameter],
        new_table_id: str,
    ) -> Table:
        """Project and filter rows into a new table.

        A row is selected if where_params is empty or if at least one term
        matches it. Selected rows keep their order and are projected onto
        column_ids in the given order.

        Args:
            column_ids: Columns of the new table, or None for all columns.
                Must include the primary key.
            where_params: WHERE terms combined with OR.
            new_table_id: Identifier of the new table.

        Returns:
            A new table with the same primary key column.

        Raises:
            PreconditionError: On invalid ids, unknown or duplicate columns,
                a projection without the primary key, or WHERE terms on
                unknown columns.
        """
        if not is_valid_identifier(new_table_id):
            raise PreconditionError(f"Invalid new table id: {new_table_id!r}")

        if column_ids is None:
            selected = list(self._column_ids)
        else:
            self._require_column_collection(column_ids)
            selected = list(column_ids)
            if not are_unique_identifiers(selected):
                raise PreconditionError(f"Selected columns contain duplicates: {selected}")
            if not self.has_all_columns(selected):
                raise PreconditionError(
                    f"Selected columns {selected} are not all part of table {self._table_id}"
                )
            if self._primary_key_column_id not in selected:
                raise PreconditionError(
                    f"Selected columns must include primary key {self._primary_key_column_id!r}"
                )

        terms = self._require_where_columns(where_params)

        attributes = {
            "table.id": self._table_id,
            "table.new_id": new_table_id,
            "select.columns": selected,
            "where.terms": len(terms),
        }
        with self._observer.operation("select", attributes) as scope:
            result = Table(new_table_id, self._primary_key_column_id, selected, self._observer)
            indices = [self._column_index[column_id] for column_id in selected]

            for row in self._rows.values():
                if terms and not any_match(terms, self._lookup(row)):
                    continue
                result.append_row([row[i] for i in indices])

            scope.set_attribute("table.rows_selected", result.row_count)

        self._observer.table_derived("select", self._table_id, new_table_id, result.row_count)
        return result

    def update(
        self,
        column_id: str,
        new_value: Value,
        where_params: Sequence[WhereParameter],
    ) -> Table:
        """Overwrite one column in place for every matching row.

        A row is updated if where_params is empty or if every term matches
        it. The primary key cannot be updated. All rows are matched before
        the first write, so a failing predicate leaves the table unchanged.

        Args:
            column_id: Column to overwrite; not the primary key.
            new_value: Value written into that column.
            where_params: WHERE terms combined with AND.

        Returns:
            This table, for chaining.
        """
        index = self._index_of(column_id)
        if column_id == self._primary_key_column_id:
            raise PreconditionError(f"Primary key column {column_id!r} cannot be updated")
        if not isinstance(new_value, Value):
            raise PreconditionError(f"new_value must be a Value, got {new_value!r}")
        terms = self._require_where_columns(where_params)

        attributes = {
            "table.id": self._table_id,
            "update.column": column_id,
            "where.terms": len(terms),
        }
        with self._observer.operation("update", attributes) as scope:
            matched = [row for row in self._rows.values() if all_match(terms, self._lookup(row))]
            for row in matched:
                row[index] = new_value
            scope.set_attribute("table.rows_updated", len(matched))

        self._observer.rows_updated(self._table_id, column_id, len(matched))
        return self

    def equijoin(self, other: Relation, fk_column_id: str, new_table_id: str) -> Table:
        """Inner-join this table's foreign-key column against other's primary key.

        The result has this table's columns except the foreign key, named
        "<this id>_<column>", followed by other's columns except its primary
        key, named "<other id>_<column>". Its primary key is
        "<this id>_<this primary key>". Rows keep this table's order; rows
        without a partner in other are dropped.

        Args:
            other: Table whose primary key the foreign key refers to.
            fk_column_id: Foreign-key column of this table; not its primary key.
            new_table_id: Identifier of the joined table.

        Returns:
            A new joined table.
        """
        if not isinstance(other, Relation):
            raise PreconditionError(f"other must be a table, got {other!r}")
        fk_index = self._index_of(fk_column_id)
        if fk_column_id == self._primary_key_column_id:
            raise PreconditionError(f"Foreign key {fk_column_id!r} is the primary key")
        if not is_valid_identifier(new_table_id):
            raise PreconditionError(f"Invalid new table id: {new_table_id!r}")

        other_id = other.table_id
        other_columns = other.column_ids
        other_pk_index = other_columns.index(other.primary_key_column_id)

        joined_columns = [
            f"{self._table_id}_{column_id}"
            for i, column_id in enumerate(self._column_ids)
            if i != fk_index
        ]
        joined_columns.extend(
            f"{other_id}_{column_id}"
            for i, column_id in enumerate(other_columns)
            if i != other_pk_index
        )

        attributes = {
            "table.id": self._table_id,
            "table.other_id": other_id,
            "table.new_id": new_table_id,
            "join.column": fk_column_id,
        }
        with self._observer.operation("equijoin", attributes) as scope:
            result = Table(
                new_table_id,
                f"{self._table_id}_{self._primary_key_column_id}",
                joined_columns,
                self._observer,
            )

            for row in self._rows.values():
                partner = other.row_by_key(row[fk_index])
                if partner is None:
                    continue
                joined = [value for i, value in enumerate(row) if i != fk_index]
                joined.extend(value for i, value in enumerate(partner) if i != other_pk_index)
                result.append_row(joined)

            scope.set_attribute("table.rows_joined", result.row_count)
            scope.set_attribute("table.rows_dropped", self.row_count - result.row_count)

        self._observer.table_derived("equijoin", self._table_id, new_table_id, result.row_count)
        return result

    def render(self) -> str:
        """Return the deterministic text rendering of this table."""
        return render_relation(self)

    def _index_of(self, column_id: str) -> int:
        """Return the schema position of column_id."""
        index = self._column_index.get(column_id)
        if index is None:
            raise PreconditionError(f"Column {column_id!r} is not part of table {self._table_id}")
        return index

    @staticmethod
    def _require_column_collection(column_ids: Iterable[str] | None) -> None:
        # A bare str is iterable but would be read one character at a time
        if column_ids is None:
            raise PreconditionError("column_ids is None")
        if isinstance(column_ids, str):
            raise PreconditionError(f"column_ids must be a collection of ids, got {column_ids!r}")

    def _require_where_columns(
        self, where_params: Iterable[WhereParameter] | None
    ) -> list[WhereParameter]:
        """Validate WHERE terms against the schema and return them as a list."""
        if where_params is None:
            raise PreconditionError("where_params is None")
        terms = list(where_params)
        for term in terms:
            if not isinstance(term, WhereParameter):
                raise PreconditionError(f"Not a WhereParameter: {term!r}")
            if term.column_id not in self._column_index:
                raise PreconditionError(
                    f"WHERE column {term.column_id!r} is not part of table {self._table_id}"
                )
        return terms

    def _lookup(self, row: list[Value]) -> ColumnLookup:
        """Column accessor for one row, as consumed by the WHERE combinators."""
        column_index = self._column_index
        return lambda column_id: row[column_index[column_id]]

    def __len__(self) -> int:
        return len(self._rows)

    def __bool__(self) -> bool:
        # An empty table is still a table
        return True

    def __iter__(self) -> Iterator[list[Value]]:
        return self.rows()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Table(table_id={self._table_id!r}, "
            f"primary_key={self._primary_key_column_id!r}, "
            f"columns={len(self._column_ids)}, rows={len(self._rows)})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._table_id == other._table_id

    def __hash__(self) -> int:
        return hash(self._table_id)

    def __lt__(self, other: Table) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._table_id < other._table_id
