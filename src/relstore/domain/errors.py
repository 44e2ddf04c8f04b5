"""Error hierarchy for the relational store.

Contract violations are reported as PreconditionError before any state is
touched. Lookup misses are not errors; they return None.
"""

from __future__ import annotations


class RelstoreError(Exception):
    """Base class for all relstore errors."""
    pass


class PreconditionError(RelstoreError, ValueError):
    """An operation was called with arguments violating its contract."""
    pass


class WrongVariantError(RelstoreError, TypeError):
    """A variant-specific accessor was used on a Value of another variant."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"Expected a {expected} value, got {actual}")
        self.expected = expected
        self.actual = actual
