"""Named conditions shared by the built-in rules.

Module-level constants are safe to share: conditions are frozen and carry
no evaluation state.
"""

from __future__ import annotations

from a11yscan.conditions import (
    child,
    control_type,
    not_,
    property_is_true,
    property_not_empty,
)
from a11yscan.conditions.base import Condition
from a11yscan.types import ControlType, PropertyId

CONTENT_VIEW: Condition = property_is_true(PropertyId.IS_CONTENT_ELEMENT)
CONTROL_VIEW: Condition = property_is_true(PropertyId.IS_CONTROL_ELEMENT)
KEYBOARD_FOCUSABLE: Condition = property_is_true(PropertyId.IS_KEYBOARD_FOCUSABLE)
OFFSCREEN: Condition = property_is_true(PropertyId.IS_OFFSCREEN)
HAS_VALUE_PATTERN: Condition = property_is_true(PropertyId.IS_VALUE_PATTERN_AVAILABLE)
READ_ONLY: Condition = property_is_true(PropertyId.VALUE_IS_READ_ONLY)
NAME_NOT_EMPTY: Condition = property_not_empty(PropertyId.NAME)
HAS_HEADING_LEVEL: Condition = property_not_empty(PropertyId.HEADING_LEVEL)

CONTAINER: Condition = control_type(ControlType.GROUP, ControlType.PANE, ControlType.CUSTOM)
LIST_CONTAINER: Condition = control_type(
    ControlType.LIST, ControlType.COMBO_BOX, ControlType.DATA_GRID
)
RADIO_BUTTON: Condition = control_type(ControlType.RADIO_BUTTON)

# Text input the user can change
EDITABLE: Condition = control_type(ControlType.EDIT, ControlType.DOCUMENT) & not_(READ_ONLY)

# A content-view container that claims a value and exposes an editable child
EDIT_STRUCTURE: Condition = child(EDITABLE)
