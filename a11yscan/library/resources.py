"""Description and how-to-fix templates.

Templates may reference ``{condition}``; the report layer substitutes the
rule's structural condition description.
"""

STRUCTURE_DESCRIPTION = "The element's structure does not match the expected pattern: {condition}."
STRUCTURE_HOW_TO_FIX = (
    "Update the element's children so that the following holds: {condition}. "
    "If the structure is intentional, verify it manually with a screen reader."
)

NAME_NOT_EMPTY_DESCRIPTION = "A focusable element must have a non-empty Name."
NAME_NOT_EMPTY_HOW_TO_FIX = (
    "Provide a Name that describes the element's purpose, for example via a "
    "label or the framework's accessible-name property."
)

LIST_ITEM_PARENT_DESCRIPTION = "A list item must be contained in a list, combo box or data grid."
LIST_ITEM_PARENT_HOW_TO_FIX = (
    "Place the list item inside an element with control type List, ComboBox "
    "or DataGrid so assistive technology can report its position."
)

HEADING_LEVEL_DESCRIPTION = "The HeadingLevel property must hold a valid heading level."
HEADING_LEVEL_HOW_TO_FIX = "Set HeadingLevel to a value between HeadingLevel_None and HeadingLevel9."

RADIO_BUTTON_SIBLINGS_DESCRIPTION = "A radio button is expected to be grouped with other radio buttons."
RADIO_BUTTON_SIBLINGS_HOW_TO_FIX = (
    "Group related radio buttons under a common parent, or use a check box "
    "when the choice stands alone."
)
