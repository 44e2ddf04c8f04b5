"""Domain entities for the relational store.

Entities are objects with identity that have a lifecycle. Tables and
databases are identified by their ids.

Exports:
    Table:
        - Table: Keyed row storage with select, update and equijoin

    Database:
        - Database: Ordered registry of tables with range and prefix lookup
"""

from relstore.domain.entities.database import Database
from relstore.domain.entities.table import Table

__all__ = [
    "Database",
    "Table",
]
