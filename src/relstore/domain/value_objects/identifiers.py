"""Identifier validation for database, table and column names.

An identifier is an ASCII letter followed by any number of ASCII letters,
digits or underscores. These helpers are pure predicates; callers decide
whether an invalid identifier is a contract violation.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_]*")
"""Grammar of valid identifiers (full match, ASCII only)."""


def is_valid_identifier(candidate: Any) -> bool:
    """Check whether candidate is a valid identifier.

    Example:
        >>> is_valid_identifier("Tee_Sorte")
        True
        >>> is_valid_identifier("1Tee")
        False
    """
    if not isinstance(candidate, str):
        return False
    return IDENTIFIER_PATTERN.fullmatch(candidate) is not None


def is_valid_identifier_prefix(candidate: Any) -> bool:
    """Check whether candidate can start a valid identifier.

    Every non-empty prefix of a valid identifier is itself a valid
    identifier, so the only extra case is the empty string.
    """
    return candidate == "" or is_valid_identifier(candidate)


def are_valid_identifiers(candidates: Iterable[Any]) -> bool:
    """Check that every element is a valid identifier (True when empty)."""
    return all(is_valid_identifier(c) for c in candidates)


def are_unique_identifiers(candidates: Iterable[str]) -> bool:
    """Check that no identifier occurs twice."""
    seen: set[str] = set()
    for candidate in candidates:
        if candidate in seen:
            return False
        seen.add(candidate)
    return True
