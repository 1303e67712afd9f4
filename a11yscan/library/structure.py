"""Structural rules — how an element relates to its children and siblings."""

from __future__ import annotations

from a11yscan.conditions import ancestor, control_type, sibling
from a11yscan.library import resources
from a11yscan.library.conditions import (
    CONTAINER,
    CONTENT_VIEW,
    EDIT_STRUCTURE,
    HAS_VALUE_PATTERN,
    LIST_CONTAINER,
    RADIO_BUTTON,
)
from a11yscan.rules.base import Rule
from a11yscan.rules.ids import A11yCriteriaId, EvaluationCode, RuleId
from a11yscan.types import ControlType


class ContentViewEditStructure(Rule):
    """A content-view container exposing a value should hold an editable child.

    Plenty of custom editors draw their own text surface, so a missing
    child is reported as a note rather than a failure.
    """

    def __init__(self) -> None:
        super().__init__(
            RuleId.CONTENT_VIEW_EDIT_STRUCTURE,
            description=resources.STRUCTURE_DESCRIPTION,
            how_to_fix=resources.STRUCTURE_HOW_TO_FIX,
            standard=A11yCriteriaId.INFO_AND_RELATIONSHIPS,
            condition=EDIT_STRUCTURE,
            applicability=CONTENT_VIEW & CONTAINER & HAS_VALUE_PATTERN,
            non_match_code=EvaluationCode.NOTE,
        )


class ListItemParent(Rule):
    """List items sit in a list container (a wrapping group is tolerated)."""

    def __init__(self) -> None:
        super().__init__(
            RuleId.LIST_ITEM_PARENT,
            description=resources.LIST_ITEM_PARENT_DESCRIPTION,
            how_to_fix=resources.LIST_ITEM_PARENT_HOW_TO_FIX,
            standard=A11yCriteriaId.INFO_AND_RELATIONSHIPS,
            condition=ancestor(LIST_CONTAINER, max_depth=2),
            applicability=control_type(ControlType.LIST_ITEM),
        )


class RadioButtonSiblings(Rule):
    """A lone radio button is suspicious but can be legitimate."""

    def __init__(self) -> None:
        super().__init__(
            RuleId.RADIO_BUTTON_SIBLINGS,
            description=resources.RADIO_BUTTON_SIBLINGS_DESCRIPTION,
            how_to_fix=resources.RADIO_BUTTON_SIBLINGS_HOW_TO_FIX,
            standard=A11yCriteriaId.INFO_AND_RELATIONSHIPS,
            condition=sibling(RADIO_BUTTON),
            applicability=RADIO_BUTTON,
            non_match_code=EvaluationCode.NOTE,
        )


class StructureRules:
    """Collection of all structural rules."""

    @staticmethod
    def all_rules() -> list[Rule]:
        return [
            ContentViewEditStructure(),
            ListItemParent(),
            RadioButtonSiblings(),
        ]
