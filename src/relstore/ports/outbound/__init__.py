"""Outbound ports - interfaces for dependencies of the domain.

Outbound ports define contracts the entities call out through, such as
reporting operations to a telemetry stack.
"""

from relstore.ports.outbound.table_observer import (
    NULL_OBSERVER,
    NullObserver,
    OperationScope,
    TableObserver,
)

__all__ = [
    "NULL_OBSERVER",
    "NullObserver",
    "OperationScope",
    "TableObserver",
]
