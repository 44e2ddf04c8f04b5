"""Value objects for the relational store domain.

Value objects are immutable types that represent domain concepts.
They have no identity - two value objects with the same attributes are equal.

Exports:
    Values:
        - Value: Tagged union over String, Double and Boolean
        - ValueKind: Variant tag
        - make_row: Build a row of Values from Python scalars

    Identifiers:
        - is_valid_identifier, is_valid_identifier_prefix
        - are_valid_identifiers, are_unique_identifiers

    WHERE terms:
        - WhereParameter: (column id, predicate) pair
        - Predicate, ValuePredicate: Predicate implementation and protocol
        - equal_to, not_equal_to, less_than, greater_than: Predicate factories
        - any_match, all_match: OR / AND combinators
"""

from relstore.domain.value_objects.identifiers import (
    IDENTIFIER_PATTERN,
    are_unique_identifiers,
    are_valid_identifiers,
    is_valid_identifier,
    is_valid_identifier_prefix,
)
from relstore.domain.value_objects.value import Value, ValueKind, make_row
from relstore.domain.value_objects.where import (
    ColumnLookup,
    Predicate,
    ValuePredicate,
    WhereParameter,
    all_match,
    any_match,
    as_predicate,
    equal_to,
    greater_than,
    less_than,
    not_equal_to,
)

__all__ = [
    # Values
    "Value",
    "ValueKind",
    "make_row",
    # Identifiers
    "IDENTIFIER_PATTERN",
    "is_valid_identifier",
    "is_valid_identifier_prefix",
    "are_valid_identifiers",
    "are_unique_identifiers",
    # WHERE terms
    "ColumnLookup",
    "Predicate",
    "ValuePredicate",
    "WhereParameter",
    "as_predicate",
    "equal_to",
    "not_equal_to",
    "less_than",
    "greater_than",
    "any_match",
    "all_match",
]
