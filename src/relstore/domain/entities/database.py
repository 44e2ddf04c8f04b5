"""Database entity: an ordered registry of tables.

Tables are stored in a dict for O(1) lookup alongside a list of their ids
kept in ascending lexical order with binary search. Range and prefix
queries position themselves with bisect and then scan forward.
"""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterator

from relstore.domain.entities.table import Table
from relstore.domain.errors import PreconditionError
from relstore.domain.services.text_renderer import render_catalog
from relstore.domain.value_objects import is_valid_identifier, is_valid_identifier_prefix
from relstore.ports.outbound import NULL_OBSERVER, TableObserver


class Database:
    """A named collection of tables ordered by table id.

    Attributes:
        database_id: Database identifier.

    Example:
        >>> db = Database("TassenFreudenDB")
        >>> db.add_table(Table("Tee", "ID", ["ID", "Name"]))
        >>> db.table_ids()
        ['Tee']
    """

    def __init__(self, database_id: str, observer: TableObserver | None = None) -> None:
        """Create an empty database.

        Args:
            database_id: Valid identifier naming the database.
            observer: Receives registration reports.

        Raises:
            PreconditionError: If database_id is not a valid identifier.
        """
        if not is_valid_identifier(database_id):
            raise PreconditionError(f"Invalid database id: {database_id!r}")

        self._database_id = database_id
        self._tables: dict[str, Table] = {}
        self._sorted_ids: list[str] = []
        self._observer = observer if observer is not None else NULL_OBSERVER

    @property
    def database_id(self) -> str:
        return self._database_id

    @property
    def table_count(self) -> int:
        return len(self._tables)

    def table(self, table_id: str) -> Table | None:
        """Get a table by id, or None if it is not registered."""
        if table_id is None:
            raise PreconditionError("table_id is None")
        return self._tables.get(table_id)

    def tables(self) -> Iterator[Table]:
        """Iterate over the tables in ascending id order."""
        for table_id in list(self._sorted_ids):
            yield self._tables[table_id]

    def table_ids(self) -> list[str]:
        """All table ids in ascending lexical order."""
        return list(self._sorted_ids)

    def table_ids_between(self, from_id: str, to_id: str) -> list[str]:
        """Table ids in the half-open range [from_id, to_id), ascending.

        Example:
            With tables Bestellung, Tee_Kategorie, Tee_Sorte and Verkauf,
            ``table_ids_between("T", "V")`` is ``["Tee_Kategorie", "Tee_Sorte"]``.

        Raises:
            PreconditionError: If either bound is not a valid identifier or
                from_id is not lexically smaller than to_id.
        """
        if not is_valid_identifier(from_id):
            raise PreconditionError(f"Invalid lower bound: {from_id!r}")
        if not is_valid_identifier(to_id):
            raise PreconditionError(f"Invalid upper bound: {to_id!r}")
        if not from_id < to_id:
            raise PreconditionError(f"Lower bound {from_id!r} must sort before {to_id!r}")

        start = bisect_left(self._sorted_ids, from_id)
        end = bisect_left(self._sorted_ids, to_id)
        return self._sorted_ids[start:end]

    def first_table_with_prefix(self, prefix: str) -> Table | None:
        """Lexically first table whose id starts with prefix.

        Ids sharing a prefix are contiguous in sorted order and begin at the
        first id not smaller than the prefix, so one bisect suffices.

        Args:
            prefix: A valid identifier or identifier prefix ("" matches all).

        Returns:
            The table, or None if no id starts with prefix.
        """
        if not is_valid_identifier_prefix(prefix):
            raise PreconditionError(f"Invalid identifier prefix: {prefix!r}")

        position = bisect_left(self._sorted_ids, prefix)
        if position < len(self._sorted_ids):
            candidate = self._sorted_ids[position]
            if candidate.startswith(prefix):
                return self._tables[candidate]
        return None

    def has_table(self, table_id: str) -> bool:
        """Check if a table with table_id is registered."""
        if table_id is None:
            raise PreconditionError("table_id is None")
        return table_id in self._tables

    def add_table(self, table: Table) -> None:
        """Register a table.

        Raises:
            PreconditionError: If table is not a Table or its id is taken.
                The registry is left unchanged.
        """
        if not isinstance(table, Table):
            raise PreconditionError(f"Not a Table: {table!r}")
        table_id = table.table_id
        if table_id in self._tables:
            raise PreconditionError(
                f"Database {self._database_id} already contains a table {table_id!r}"
            )

        self._tables[table_id] = table
        insort(self._sorted_ids, table_id)

        self._observer.table_registered(self._database_id, table_id)

    def remove_table(self, table_id: str) -> None:
        """Unregister a table; does nothing if it is not registered."""
        if table_id is None:
            raise PreconditionError("table_id is None")
        if self._tables.pop(table_id, None) is None:
            return

        del self._sorted_ids[bisect_left(self._sorted_ids, table_id)]

        self._observer.table_removed(self._database_id, table_id)

    def remove_all_tables(self) -> None:
        """Unregister every table."""
        removed = len(self._tables)
        self._tables.clear()
        self._sorted_ids.clear()

        self._observer.tables_cleared(self._database_id, removed)

    def render(self) -> str:
        """Return the database header followed by every table's rendering."""
        return render_catalog(self._database_id, self.tables())

    def __len__(self) -> int:
        return len(self._tables)

    def __bool__(self) -> bool:
        return True

    def __contains__(self, table_id: object) -> bool:
        return table_id in self._tables

    def __iter__(self) -> Iterator[Table]:
        return self.tables()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Database(database_id={self._database_id!r}, tables={self._sorted_ids!r})"
