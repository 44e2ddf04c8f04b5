"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: APIs offered to clients (Relation, Catalog)
- Outbound ports: Dependencies the domain reports to (TableObserver)

The domain entities implement the inbound ports; adapters implement the
outbound ones.
"""

from relstore.ports.inbound import Catalog, Relation
from relstore.ports.outbound import NULL_OBSERVER, NullObserver, OperationScope, TableObserver

__all__ = [
    # Inbound
    "Catalog",
    "Relation",
    # Outbound
    "NULL_OBSERVER",
    "NullObserver",
    "OperationScope",
    "TableObserver",
]
