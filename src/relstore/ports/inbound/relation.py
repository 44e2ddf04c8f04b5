"""Relation and Catalog ports.

These inbound ports describe the read surface that callers (and other
tables, for equijoin) rely on. Table and Database implement them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Protocol, runtime_checkable

if TYPE_CHECKING:
    from relstore.domain.value_objects import Value


@runtime_checkable
class Relation(Protocol):
    """Protocol for a keyed collection of rows with a fixed schema."""

    @property
    def table_id(self) -> str:
        """Identifier of the relation."""
        ...

    @property
    def primary_key_column_id(self) -> str:
        """Column holding the primary key."""
        ...

    @property
    def column_ids(self) -> list[str]:
        """Column identifiers in schema order."""
        ...

    @property
    def row_count(self) -> int:
        """Number of stored rows."""
        ...

    def rows(self) -> Iterator[list[Value]]:
        """Iterate over copies of the stored rows in storage order."""
        ...

    def row_by_key(self, key: Value) -> list[Value] | None:
        """Look up a row by primary key.

        Args:
            key: Primary-key value.

        Returns:
            A copy of the row, or None if no row has that key.
        """
        ...

    def render(self) -> str:
        """Return the deterministic text rendering of the relation."""
        ...


@runtime_checkable
class Catalog(Protocol):
    """Protocol for an ordered registry of relations keyed by id."""

    @property
    def table_count(self) -> int:
        """Number of registered relations."""
        ...

    def table_ids(self) -> list[str]:
        """All ids in ascending lexical order."""
        ...

    def table_ids_between(self, from_id: str, to_id: str) -> list[str]:
        """Ids in the half-open range [from_id, to_id), ascending."""
        ...

    def first_table_with_prefix(self, prefix: str) -> Relation | None:
        """Lexically first relation whose id starts with prefix."""
        ...

    def has_table(self, table_id: str) -> bool:
        """Check if a relation with table_id is registered."""
        ...
