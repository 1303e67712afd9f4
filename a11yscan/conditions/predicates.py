"""Value predicates applied by :class:`PropertyCondition` to a present value.

A predicate never raises for a value of the wrong type; a value it cannot
interpret simply does not match.
"""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValuePredicate:
    """Base class for property value tests."""

    def __call__(self, value: Any) -> bool:
        raise NotImplementedError

    def describe(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Equals(ValuePredicate):
    expected: Any

    def __call__(self, value: Any) -> bool:
        return value == self.expected

    def describe(self) -> str:
        return f"== {self.expected!r}"


@dataclass(frozen=True)
class EqualsIgnoreCase(ValuePredicate):
    expected: str

    def __call__(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return value.casefold() == self.expected.casefold()

    def describe(self) -> str:
        return f"== {self.expected!r} (ignoring case)"


@dataclass(frozen=True)
class InRange(ValuePredicate):
    """Inclusive numeric range."""

    low: float
    high: float

    def __call__(self, value: Any) -> bool:
        if isinstance(value, bool):
            return False
        try:
            number = float(value)
        except (TypeError, ValueError):
            return False
        return self.low <= number <= self.high

    def describe(self) -> str:
        return f"in [{self.low}, {self.high}]"


@dataclass(frozen=True)
class HasFlags(ValuePredicate):
    """All bits of *mask* are set."""

    mask: int

    def __call__(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value & self.mask == self.mask

    def describe(self) -> str:
        return f"has flags 0x{self.mask:x}"


@dataclass(frozen=True)
class NotEmpty(ValuePredicate):
    """Non-blank strings, non-empty collections, any other present value."""

    def __call__(self, value: Any) -> bool:
        if isinstance(value, str):
            return bool(value.strip())
        if isinstance(value, Sized):
            return len(value) > 0
        return True

    def describe(self) -> str:
        return "is not empty"


@dataclass(frozen=True)
class IsTrue(ValuePredicate):
    def __call__(self, value: Any) -> bool:
        return value is True

    def describe(self) -> str:
        return "is true"
