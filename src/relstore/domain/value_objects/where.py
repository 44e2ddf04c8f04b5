"""WHERE clause terms.

A WhereParameter pairs a column id with a predicate over a single Value.
Tables combine several terms with one of two combinators:

    - any_match: disjunction, used by Table.select
    - all_match: conjunction, used by Table.update

Predicates are anything exposing ``test(value) -> bool``. Plain callables
are wrapped in a Predicate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Protocol, runtime_checkable

from relstore.domain.errors import PreconditionError
from relstore.domain.value_objects.value import Value

ColumnLookup = Callable[[str], Value]
"""Maps a column id to the current row's value in that column."""


@runtime_checkable
class ValuePredicate(Protocol):
    """Capability testing a single Value."""

    def test(self, value: Value) -> bool:
        """Return True if value satisfies the predicate."""
        ...


@dataclass(frozen=True)
class Predicate:
    """Predicate backed by a function.

    Supports composition with ``&``, ``|`` and ``~``.
    """

    fn: Callable[[Value], bool]
    description: str = "predicate"

    def test(self, value: Value) -> bool:
        return bool(self.fn(value))

    def __call__(self, value: Value) -> bool:
        return self.test(value)

    def __and__(self, other: Any) -> Predicate:
        right = as_predicate(other)
        return Predicate(
            lambda v: self.test(v) and right.test(v),
            f"({self} and {right})",
        )

    def __or__(self, other: Any) -> Predicate:
        right = as_predicate(other)
        return Predicate(
            lambda v: self.test(v) or right.test(v),
            f"({self} or {right})",
        )

    def __invert__(self) -> Predicate:
        return Predicate(lambda v: not self.test(v), f"not {self}")

    def __str__(self) -> str:
        return self.description


def as_predicate(candidate: Any) -> ValuePredicate:
    """Coerce candidate into something with a ``test`` method.

    Raises:
        PreconditionError: If candidate is neither a predicate nor callable.
    """
    if isinstance(candidate, ValuePredicate):
        return candidate
    if callable(candidate):
        return Predicate(candidate, getattr(candidate, "__name__", "predicate"))
    raise PreconditionError(f"Not a predicate: {candidate!r}")


def equal_to(expected: Any) -> Predicate:
    """Match values equal to expected (variant-aware)."""
    target = Value.of(expected)
    return Predicate(lambda v: v == target, f"== {target}")


def not_equal_to(expected: Any) -> Predicate:
    """Match values different from expected (variant-aware)."""
    target = Value.of(expected)
    return Predicate(lambda v: v != target, f"!= {target}")


def less_than(bound: float) -> Predicate:
    """Match Double values below bound.

    Raises WrongVariantError when tested against a non-Double value.
    """
    return Predicate(lambda v: v.as_number() < bound, f"< {bound}")


def greater_than(bound: float) -> Predicate:
    """Match Double values above bound.

    Raises WrongVariantError when tested against a non-Double value.
    """
    return Predicate(lambda v: v.as_number() > bound, f"> {bound}")


@dataclass(frozen=True)
class WhereParameter:
    """A single WHERE term: (column id, predicate).

    Attributes:
        column_id: Column whose value is tested.
        predicate: Test applied to that value.
    """

    column_id: str
    predicate: ValuePredicate

    def __post_init__(self) -> None:
        if not isinstance(self.column_id, str) or not self.column_id:
            raise PreconditionError(f"column_id must be a non-empty string, got {self.column_id!r}")
        if self.predicate is None:
            raise PreconditionError("predicate is None")
        object.__setattr__(self, "predicate", as_predicate(self.predicate))

    def matches(self, value: Value) -> bool:
        """Apply the predicate to value."""
        return bool(self.predicate.test(value))

    def __str__(self) -> str:
        return f"{self.column_id} {self.predicate}"


def any_match(terms: Iterable[WhereParameter], lookup: ColumnLookup) -> bool:
    """Disjunction: True if at least one term matches (False for no terms)."""
    for term in terms:
        if term.matches(lookup(term.column_id)):
            return True
    return False


def all_match(terms: Iterable[WhereParameter], lookup: ColumnLookup) -> bool:
    """Conjunction: True if every term matches (True for no terms)."""
    for term in terms:
        if not term.matches(lookup(term.column_id)):
            return False
    return True
