"""Outbound adapters - implementations of outbound ports.

These adapters connect the domain to the telemetry stack.
"""

from relstore.adapters.outbound.telemetry_observer import TelemetryObserver

__all__ = [
    "TelemetryObserver",
]
