"""Inbound ports - API contracts for the relational store.

Inbound ports define the interfaces that callers use to read tables
and look them up in a database.
"""

from relstore.ports.inbound.relation import Catalog, Relation

__all__ = [
    "Catalog",
    "Relation",
]
