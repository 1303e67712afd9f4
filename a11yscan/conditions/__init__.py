"""Composable, side-effect-free predicates over elements.

Usage::

    from a11yscan.conditions import child, control_type
    from a11yscan.types import ControlType

    has_edit = child(control_type(ControlType.EDIT))
    has_edit.matches(element)
"""

from a11yscan.conditions.base import Condition
from a11yscan.conditions.boolean import (
    FALSE,
    TRUE,
    AndCondition,
    ConstantCondition,
    NotCondition,
    OrCondition,
    all_of,
    any_of,
    not_,
)
from a11yscan.conditions.evaluator import evaluate
from a11yscan.conditions.predicates import (
    Equals,
    EqualsIgnoreCase,
    HasFlags,
    InRange,
    IsTrue,
    NotEmpty,
    ValuePredicate,
)
from a11yscan.conditions.primitives import (
    ControlTypeCondition,
    DelegateCondition,
    PropertyCondition,
    control_type,
    property_equals,
    property_equals_ignore_case,
    property_has_flags,
    property_in_range,
    property_is_true,
    property_not_empty,
)
from a11yscan.conditions.structural import (
    AncestorCondition,
    ChildCondition,
    DescendantCondition,
    SiblingCondition,
    ancestor,
    child,
    descendant,
    sibling,
)

__all__ = [
    "FALSE",
    "TRUE",
    "AncestorCondition",
    "AndCondition",
    "ChildCondition",
    "Condition",
    "ConstantCondition",
    "ControlTypeCondition",
    "DelegateCondition",
    "DescendantCondition",
    "Equals",
    "EqualsIgnoreCase",
    "HasFlags",
    "InRange",
    "IsTrue",
    "NotCondition",
    "NotEmpty",
    "OrCondition",
    "PropertyCondition",
    "SiblingCondition",
    "ValuePredicate",
    "all_of",
    "ancestor",
    "any_of",
    "child",
    "control_type",
    "descendant",
    "evaluate",
    "not_",
    "property_equals",
    "property_equals_ignore_case",
    "property_has_flags",
    "property_in_range",
    "property_is_true",
    "property_not_empty",
    "sibling",
]
