"""Condition base class and the ``&`` / ``|`` / ``~`` composition operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from a11yscan.elements.base import A11yElement


@dataclass(frozen=True)
class Condition:
    """A pure, stateless predicate over an element.

    Conditions are built once and shared by every rule and thread that
    uses them.  Subclasses only carry configuration; the evaluation logic
    for every kind lives in :func:`a11yscan.conditions.evaluator.evaluate`.
    """

    def matches(self, element: A11yElement) -> bool:
        from a11yscan.conditions.evaluator import evaluate

        return evaluate(self, element)

    def describe(self) -> str:
        """Structural description, used when rendering rule text."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.describe()

    def __and__(self, other: Condition) -> Condition:
        from a11yscan.conditions.boolean import AndCondition

        return AndCondition((self, other))

    def __or__(self, other: Condition) -> Condition:
        from a11yscan.conditions.boolean import OrCondition

        return OrCondition((self, other))

    def __invert__(self) -> Condition:
        from a11yscan.conditions.boolean import NotCondition

        return NotCondition(self)
