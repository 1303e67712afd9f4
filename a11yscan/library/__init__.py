"""Built-in rules, grouped by what they inspect."""

from a11yscan.library.properties import HeadingLevelRange, NameNotEmpty, PropertyRules
from a11yscan.library.structure import (
    ContentViewEditStructure,
    ListItemParent,
    RadioButtonSiblings,
    StructureRules,
)
from a11yscan.rules.base import Rule


def all_rules() -> list[Rule]:
    """Fresh instances of every built-in rule, in a fixed order."""
    return StructureRules.all_rules() + PropertyRules.all_rules()


__all__ = [
    "ContentViewEditStructure",
    "HeadingLevelRange",
    "ListItemParent",
    "NameNotEmpty",
    "PropertyRules",
    "RadioButtonSiblings",
    "StructureRules",
    "all_rules",
]
