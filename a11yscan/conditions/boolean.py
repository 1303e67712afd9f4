"""And / Or / Not combinators and the constant conditions."""

from __future__ import annotations

from dataclasses import dataclass

from a11yscan.conditions.base import Condition


@dataclass(frozen=True)
class AndCondition(Condition):
    """All operands match.  Evaluated left to right, stops at the first miss.

    An empty operand list matches.
    """

    operands: tuple[Condition, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "operands", tuple(self.operands))

    def describe(self) -> str:
        if not self.operands:
            return "true"
        return "(" + " and ".join(c.describe() for c in self.operands) + ")"


@dataclass(frozen=True)
class OrCondition(Condition):
    """Some operand matches.  Stops at the first hit; empty never matches."""

    operands: tuple[Condition, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "operands", tuple(self.operands))

    def describe(self) -> str:
        if not self.operands:
            return "false"
        return "(" + " or ".join(c.describe() for c in self.operands) + ")"


@dataclass(frozen=True)
class NotCondition(Condition):
    inner: Condition

    def describe(self) -> str:
        return f"not ({self.inner.describe()})"


@dataclass(frozen=True)
class ConstantCondition(Condition):
    value: bool

    def describe(self) -> str:
        return "true" if self.value else "false"


TRUE = ConstantCondition(True)
FALSE = ConstantCondition(False)


def all_of(*conditions: Condition) -> AndCondition:
    return AndCondition(conditions)


def any_of(*conditions: Condition) -> OrCondition:
    return OrCondition(conditions)


def not_(condition: Condition) -> NotCondition:
    return NotCondition(condition)
