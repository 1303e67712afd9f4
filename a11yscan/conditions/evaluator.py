"""Single dispatch point that evaluates every kind of condition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from a11yscan.conditions.base import Condition
from a11yscan.conditions.boolean import (
    AndCondition,
    ConstantCondition,
    NotCondition,
    OrCondition,
)
from a11yscan.conditions.primitives import (
    ControlTypeCondition,
    DelegateCondition,
    PropertyCondition,
)
from a11yscan.conditions.structural import (
    AncestorCondition,
    ChildCondition,
    DescendantCondition,
    SiblingCondition,
    iter_ancestors,
    iter_descendants,
    iter_siblings,
)

if TYPE_CHECKING:
    from a11yscan.elements.base import A11yElement


def evaluate(condition: Condition, element: A11yElement) -> bool:
    """Return whether *condition* holds for *element*.

    Failures raised by the element are propagated unchanged; the rule
    boundary decides what they mean.  Raises :class:`TypeError` for a
    condition kind this evaluator does not know.
    """
    if isinstance(condition, PropertyCondition):
        value = element.get_property(condition.property_id)
        if value is None:
            return False
        return condition.predicate(value)

    if isinstance(condition, ControlTypeCondition):
        return element.control_type() in condition.control_types

    if isinstance(condition, AndCondition):
        for operand in condition.operands:
            if not evaluate(operand, element):
                return False
        return True

    if isinstance(condition, OrCondition):
        for operand in condition.operands:
            if evaluate(operand, element):
                return True
        return False

    if isinstance(condition, NotCondition):
        return not evaluate(condition.inner, element)

    if isinstance(condition, ConstantCondition):
        return condition.value

    if isinstance(condition, ChildCondition):
        return any(evaluate(condition.inner, c) for c in element.children())

    if isinstance(condition, DescendantCondition):
        return any(
            evaluate(condition.inner, d)
            for d in iter_descendants(element, condition.max_depth)
        )

    if isinstance(condition, SiblingCondition):
        return any(evaluate(condition.inner, s) for s in iter_siblings(element))

    if isinstance(condition, AncestorCondition):
        return any(
            evaluate(condition.inner, a)
            for a in iter_ancestors(element, condition.max_depth)
        )

    if isinstance(condition, DelegateCondition):
        return bool(condition.func(element))

    raise TypeError(f"Unsupported condition type: {type(condition).__name__}")
