"""Property rules — names and property values."""

from __future__ import annotations

from a11yscan.conditions import property_in_range
from a11yscan.elements.base import A11yElement
from a11yscan.library import resources
from a11yscan.library.conditions import (
    CONTROL_VIEW,
    HAS_HEADING_LEVEL,
    KEYBOARD_FOCUSABLE,
    NAME_NOT_EMPTY,
    OFFSCREEN,
)
from a11yscan.rules.base import Rule
from a11yscan.rules.ids import A11yCriteriaId, EvaluationCode, RuleId
from a11yscan.types import HEADING_LEVEL_9, HEADING_LEVEL_NONE, PropertyId


class NameNotEmpty(Rule):
    """Focusable control-view elements need a name."""

    def __init__(self) -> None:
        super().__init__(
            RuleId.NAME_NOT_EMPTY,
            description=resources.NAME_NOT_EMPTY_DESCRIPTION,
            how_to_fix=resources.NAME_NOT_EMPTY_HOW_TO_FIX,
            standard=A11yCriteriaId.NAME_ROLE_VALUE,
            condition=NAME_NOT_EMPTY,
            applicability=CONTROL_VIEW & KEYBOARD_FOCUSABLE,
        )

    def evaluate_element(self, element: A11yElement) -> EvaluationCode:
        # Offscreen elements cannot be reached, so their names are not checked
        if OFFSCREEN.matches(element):
            return EvaluationCode.OPEN
        return super().evaluate_element(element)


class HeadingLevelRange(Rule):
    def __init__(self) -> None:
        super().__init__(
            RuleId.HEADING_LEVEL_RANGE,
            description=resources.HEADING_LEVEL_DESCRIPTION,
            how_to_fix=resources.HEADING_LEVEL_HOW_TO_FIX,
            standard=A11yCriteriaId.HEADINGS_AND_LABELS,
            condition=property_in_range(
                PropertyId.HEADING_LEVEL, HEADING_LEVEL_NONE, HEADING_LEVEL_9
            ),
            applicability=HAS_HEADING_LEVEL,
        )


class PropertyRules:
    """Collection of all property rules."""

    @staticmethod
    def all_rules() -> list[Rule]:
        return [
            NameNotEmpty(),
            HeadingLevelRange(),
        ]
