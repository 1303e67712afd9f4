"""Atomic conditions over a single element."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from a11yscan.conditions.base import Condition
from a11yscan.conditions.predicates import (
    Equals,
    EqualsIgnoreCase,
    HasFlags,
    InRange,
    IsTrue,
    NotEmpty,
    ValuePredicate,
)
from a11yscan.types import ControlType, PropertyId, display_name

if TYPE_CHECKING:
    from a11yscan.elements.base import A11yElement


def _property_label(property_id: int) -> str:
    try:
        return display_name(PropertyId(property_id))
    except ValueError:
        return f"Property({property_id})"


def _control_type_label(control_type: int) -> str:
    try:
        return display_name(ControlType(control_type))
    except ValueError:
        return str(control_type)


@dataclass(frozen=True)
class PropertyCondition(Condition):
    """The property is present and satisfies *predicate*."""

    property_id: int
    predicate: ValuePredicate

    def describe(self) -> str:
        return f"{_property_label(self.property_id)} {self.predicate.describe()}"


@dataclass(frozen=True)
class ControlTypeCondition(Condition):
    """The element's control type is one of *control_types*."""

    control_types: frozenset[int]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "control_types", frozenset(int(c) for c in self.control_types)
        )

    def describe(self) -> str:
        labels = sorted(_control_type_label(c) for c in self.control_types)
        if len(labels) == 1:
            return f"ControlType == {labels[0]}"
        return f"ControlType in ({', '.join(labels)})"


@dataclass(frozen=True)
class DelegateCondition(Condition):
    """Wraps a plain callable for predicates the primitives cannot express.

    The callable must obey the same contract as any condition: no
    mutation, no retained state.
    """

    func: Callable[[A11yElement], bool]
    description: str = "custom condition"

    def describe(self) -> str:
        return self.description


# ---------------------------------------------------------------------------
# Shorthand constructors
# ---------------------------------------------------------------------------


def control_type(*control_types: int) -> ControlTypeCondition:
    return ControlTypeCondition(frozenset(control_types))


def property_equals(property_id: int, expected: Any) -> PropertyCondition:
    return PropertyCondition(property_id, Equals(expected))


def property_equals_ignore_case(property_id: int, expected: str) -> PropertyCondition:
    return PropertyCondition(property_id, EqualsIgnoreCase(expected))


def property_in_range(property_id: int, low: float, high: float) -> PropertyCondition:
    return PropertyCondition(property_id, InRange(low, high))


def property_has_flags(property_id: int, mask: int) -> PropertyCondition:
    return PropertyCondition(property_id, HasFlags(mask))


def property_not_empty(property_id: int) -> PropertyCondition:
    return PropertyCondition(property_id, NotEmpty())


def property_is_true(property_id: int) -> PropertyCondition:
    return PropertyCondition(property_id, IsTrue())
