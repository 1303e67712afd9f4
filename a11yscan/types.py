"""Identifier catalogs: control types, properties and events.

Numeric values follow the UI Automation identifiers so that snapshots
captured from a live provider can be evaluated without translation.  The
catalogs are intentionally small; providers may report ids that are not
listed here and the engine treats them as opaque integers.
"""

from __future__ import annotations

from enum import IntEnum


class ControlType(IntEnum):
    """Control-type identifiers."""

    BUTTON = 50000
    CALENDAR = 50001
    CHECK_BOX = 50002
    COMBO_BOX = 50003
    EDIT = 50004
    HYPERLINK = 50005
    IMAGE = 50006
    LIST_ITEM = 50007
    LIST = 50008
    MENU = 50009
    MENU_BAR = 50010
    MENU_ITEM = 50011
    PROGRESS_BAR = 50012
    RADIO_BUTTON = 50013
    SCROLL_BAR = 50014
    SLIDER = 50015
    SPINNER = 50016
    STATUS_BAR = 50017
    TAB = 50018
    TAB_ITEM = 50019
    TEXT = 50020
    TOOL_BAR = 50021
    TOOL_TIP = 50022
    TREE = 50023
    TREE_ITEM = 50024
    CUSTOM = 50025
    GROUP = 50026
    THUMB = 50027
    DATA_GRID = 50028
    DATA_ITEM = 50029
    DOCUMENT = 50030
    SPLIT_BUTTON = 50031
    WINDOW = 50032
    PANE = 50033
    HEADER = 50034
    HEADER_ITEM = 50035
    TABLE = 50036
    TITLE_BAR = 50037
    SEPARATOR = 50038
    SEMANTIC_ZOOM = 50039
    APP_BAR = 50040


class PropertyId(IntEnum):
    """Element property identifiers."""

    RUNTIME_ID = 30000
    BOUNDING_RECTANGLE = 30001
    PROCESS_ID = 30002
    CONTROL_TYPE = 30003
    LOCALIZED_CONTROL_TYPE = 30004
    NAME = 30005
    ACCELERATOR_KEY = 30006
    ACCESS_KEY = 30007
    HAS_KEYBOARD_FOCUS = 30008
    IS_KEYBOARD_FOCUSABLE = 30009
    IS_ENABLED = 30010
    AUTOMATION_ID = 30011
    CLASS_NAME = 30012
    HELP_TEXT = 30013
    CLICKABLE_POINT = 30014
    CULTURE = 30015
    IS_CONTROL_ELEMENT = 30016
    IS_CONTENT_ELEMENT = 30017
    LABELED_BY = 30018
    IS_PASSWORD = 30019
    NATIVE_WINDOW_HANDLE = 30020
    ITEM_TYPE = 30021
    IS_OFFSCREEN = 30022
    ORIENTATION = 30023
    FRAMEWORK_ID = 30024
    IS_REQUIRED_FOR_FORM = 30025
    ITEM_STATUS = 30026
    IS_TEXT_PATTERN_AVAILABLE = 30040
    IS_VALUE_PATTERN_AVAILABLE = 30043
    VALUE_VALUE = 30045
    VALUE_IS_READ_ONLY = 30046
    RANGE_VALUE_VALUE = 30047
    RANGE_VALUE_MINIMUM = 30049
    RANGE_VALUE_MAXIMUM = 30050
    LANDMARK_TYPE = 30157
    HEADING_LEVEL = 30173


class EventId(IntEnum):
    """Event identifiers known to the recorder."""

    TOOL_TIP_OPENED = 20000
    TOOL_TIP_CLOSED = 20001
    STRUCTURE_CHANGED = 20002
    MENU_OPENED = 20003
    AUTOMATION_PROPERTY_CHANGED = 20004
    AUTOMATION_FOCUS_CHANGED = 20005
    ASYNC_CONTENT_LOADED = 20006
    MENU_CLOSED = 20007
    LAYOUT_INVALIDATED = 20008
    INVOKE_INVOKED = 20009
    SELECTION_ITEM_ELEMENT_ADDED_TO_SELECTION = 20010
    SELECTION_ITEM_ELEMENT_REMOVED_FROM_SELECTION = 20011
    SELECTION_ITEM_ELEMENT_SELECTED = 20012
    SELECTION_INVALIDATED = 20013
    TEXT_TEXT_SELECTION_CHANGED = 20014
    TEXT_TEXT_CHANGED = 20015
    WINDOW_WINDOW_OPENED = 20016
    WINDOW_WINDOW_CLOSED = 20017
    MENU_MODE_START = 20018
    MENU_MODE_END = 20019
    INPUT_REACHED_TARGET = 20020
    INPUT_REACHED_OTHER_ELEMENT = 20021
    INPUT_DISCARDED = 20022
    SYSTEM_ALERT = 20023
    LIVE_REGION_CHANGED = 20024
    HOSTED_FRAGMENT_ROOTS_INVALIDATED = 20025
    DRAG_DRAG_START = 20026
    DRAG_DRAG_CANCEL = 20027
    DRAG_DRAG_COMPLETE = 20028
    DROP_TARGET_DRAG_ENTER = 20029
    DROP_TARGET_DRAG_LEAVE = 20030
    DROP_TARGET_DROPPED = 20031
    TEXT_EDIT_TEXT_CHANGED = 20032
    TEXT_EDIT_CONVERSION_TARGET_CHANGED = 20033
    CHANGES = 20034
    NOTIFICATION = 20035


# Heading level property values
HEADING_LEVEL_NONE = 80050
HEADING_LEVEL_1 = 80051
HEADING_LEVEL_9 = 80059


def display_name(member: IntEnum) -> str:
    """Render an enum member as a display name, e.g. ``IsContentElement``."""
    return "".join(part.capitalize() for part in member.name.split("_"))


def catalog_pairs(catalog: type[IntEnum]) -> list[tuple[int, str]]:
    """Return ``(id, name)`` pairs for every member, ordered by id."""
    return [(int(m), display_name(m)) for m in sorted(catalog, key=int)]
