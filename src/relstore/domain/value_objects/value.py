"""Scalar values stored in table cells.

A Value is a closed tagged union over three variants: String, Double and
Boolean. Integers are represented as Doubles. The tag decides equality,
ordering and which typed accessor is allowed:

    >>> v = Value.of(16)
    >>> v.kind
    <ValueKind.DOUBLE: 1>
    >>> v.as_number()
    16.0
    >>> str(v)
    '16'
    >>> v.as_string()
    Traceback (most recent call last):
        ...
    relstore.domain.errors.WrongVariantError: Expected a string value, got double
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from relstore.domain.errors import PreconditionError, WrongVariantError


class ValueKind(Enum):
    """Variant tag of a Value.

    The enum value doubles as the cross-variant sort rank.
    """

    BOOLEAN = 0
    DOUBLE = 1
    STRING = 2

    def __str__(self) -> str:
        return self.name.lower()


Payload = str | float | bool


@dataclass(frozen=True, slots=True, eq=True)
class Value:
    """Immutable scalar cell value.

    Attributes:
        kind: The variant tag.
        payload: The Python scalar carried by the variant.
    """

    kind: ValueKind
    payload: Payload

    def __post_init__(self) -> None:
        """Validate that the payload matches the variant tag."""
        if not isinstance(self.kind, ValueKind):
            raise PreconditionError(f"kind must be a ValueKind, got {self.kind!r}")

        payload = self.payload
        if self.kind is ValueKind.STRING:
            if not isinstance(payload, str):
                raise PreconditionError(f"String value requires str, got {type(payload).__name__}")
        elif self.kind is ValueKind.BOOLEAN:
            if not isinstance(payload, bool):
                raise PreconditionError(f"Boolean value requires bool, got {type(payload).__name__}")
        else:
            if isinstance(payload, bool) or not isinstance(payload, (int, float)):
                raise PreconditionError(f"Double value requires a number, got {type(payload).__name__}")
            # Normalize ints so that Value.double(1) == Value.double(1.0)
            object.__setattr__(self, "payload", float(payload))

    @classmethod
    def string(cls, text: str) -> Value:
        """Create a String value."""
        return cls(ValueKind.STRING, text)

    @classmethod
    def double(cls, number: int | float) -> Value:
        """Create a Double value."""
        return cls(ValueKind.DOUBLE, number)

    @classmethod
    def boolean(cls, flag: bool) -> Value:
        """Create a Boolean value."""
        return cls(ValueKind.BOOLEAN, flag)

    @classmethod
    def of(cls, obj: Any) -> Value:
        """Create a Value from a plain Python scalar.

        Args:
            obj: A str, int, float or bool. Existing Values are returned as is.

        Returns:
            The matching Value variant.

        Raises:
            TypeError: If obj has no matching variant.
        """
        if isinstance(obj, Value):
            return obj
        # bool is a subclass of int and must be checked first
        if isinstance(obj, bool):
            return cls.boolean(obj)
        if isinstance(obj, (int, float)):
            return cls.double(obj)
        if isinstance(obj, str):
            return cls.string(obj)
        raise TypeError(f"Unsupported value type {type(obj).__name__} for {obj!r}")

    @property
    def is_string(self) -> bool:
        return self.kind is ValueKind.STRING

    @property
    def is_double(self) -> bool:
        return self.kind is ValueKind.DOUBLE

    @property
    def is_boolean(self) -> bool:
        return self.kind is ValueKind.BOOLEAN

    def as_string(self) -> str:
        """Return the text of a String value.

        Raises:
            WrongVariantError: If this is not a String value.
        """
        if self.kind is not ValueKind.STRING:
            raise WrongVariantError("string", str(self.kind))
        return self.payload  # type: ignore[return-value]

    def as_number(self) -> float:
        """Return the number of a Double value.

        Raises:
            WrongVariantError: If this is not a Double value.
        """
        if self.kind is not ValueKind.DOUBLE:
            raise WrongVariantError("double", str(self.kind))
        return self.payload  # type: ignore[return-value]

    def as_boolean(self) -> bool:
        """Return the flag of a Boolean value.

        Raises:
            WrongVariantError: If this is not a Boolean value.
        """
        if self.kind is not ValueKind.BOOLEAN:
            raise WrongVariantError("boolean", str(self.kind))
        return self.payload  # type: ignore[return-value]

    def _sort_key(self) -> tuple[int, Payload]:
        return (self.kind.value, self.payload)

    def __lt__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return other < self

    def __ge__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self == other or other < self

    def __str__(self) -> str:
        if self.kind is ValueKind.BOOLEAN:
            return "true" if self.payload else "false"
        if self.kind is ValueKind.DOUBLE:
            number = self.payload
            if math.isfinite(number) and number.is_integer():  # type: ignore[union-attr]
                return str(int(number))
            return repr(number)
        return self.payload  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"Value.{self.kind}({self.payload!r})"


def make_row(*objs: Any) -> list[Value]:
    """Build a row from plain Python scalars.

    Example:
        >>> make_row(1, "Sencha", "Japan", 1)
        [Value.double(1.0), Value.string('Sencha'), Value.string('Japan'), Value.double(1.0)]
    """
    return [Value.of(obj) for obj in objs]
