"""Closed catalogs of rule identifiers, verdict codes and criteria tags."""

from __future__ import annotations

from enum import Enum


class RuleId(str, Enum):
    """Globally unique rule identifiers."""

    CONTENT_VIEW_EDIT_STRUCTURE = "ContentViewEditStructure"
    HEADING_LEVEL_RANGE = "HeadingLevelRange"
    LIST_ITEM_PARENT = "ListItemParent"
    NAME_NOT_EMPTY = "NameNotEmpty"
    RADIO_BUTTON_SIBLINGS = "RadioButtonSiblings"


class EvaluationCode(str, Enum):
    """Verdict of evaluating one rule against one element."""

    PASS = "pass"
    FAIL = "fail"
    NOTE = "note"
    """Heuristic finding that needs manual review."""

    OPEN = "open"
    """Rule not applicable to the element."""

    RULE_EXECUTION_ERROR = "rule_execution_error"


class A11yCriteriaId(str, Enum):
    """WCAG success criteria a rule reports against."""

    INFO_AND_RELATIONSHIPS = "1.3.1 Info and Relationships"
    KEYBOARD = "2.1.1 Keyboard"
    HEADINGS_AND_LABELS = "2.4.6 Headings and Labels"
    NAME_ROLE_VALUE = "4.1.2 Name, Role, Value"
