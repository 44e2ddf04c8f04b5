"""Adapters layer - concrete implementations of port interfaces.

Adapters provide the actual implementations:
- Outbound adapters: Report domain activity to tracing, metrics and logs
"""

from relstore.adapters.outbound import TelemetryObserver

__all__ = [
    # Outbound adapters
    "TelemetryObserver",
]
