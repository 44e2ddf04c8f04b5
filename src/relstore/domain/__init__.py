"""Domain layer for the relational store.

Exports the entities, value objects and errors callers work with.
"""

from relstore.domain.entities import Database, Table
from relstore.domain.errors import PreconditionError, RelstoreError, WrongVariantError
from relstore.domain.value_objects import (
    Predicate,
    Value,
    ValueKind,
    WhereParameter,
    equal_to,
    greater_than,
    less_than,
    make_row,
    not_equal_to,
)

__all__ = [
    "Database",
    "Table",
    "PreconditionError",
    "RelstoreError",
    "WrongVariantError",
    "Predicate",
    "Value",
    "ValueKind",
    "WhereParameter",
    "equal_to",
    "greater_than",
    "less_than",
    "make_row",
    "not_equal_to",
]
