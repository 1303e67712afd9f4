"""In-memory element trees for tests and serialized snapshots.

A snapshot is a nested JSON document::

    {
      "control_type": 50033,
      "properties": {"Name": "Editor", "30017": true},
      "children": [{"control_type": 50004}]
    }

Property keys may be numeric ids or :class:`~a11yscan.types.PropertyId`
display names.
"""

from __future__ import annotations

import json
import logging
import weakref
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from a11yscan.elements.base import A11yElement
from a11yscan.types import PropertyId, display_name

logger = logging.getLogger(__name__)

_PROPERTY_NAMES: dict[str, int] = {display_name(p): int(p) for p in PropertyId}


class ElementSnapshot(BaseModel):
    """Serialized form of one node and its subtree."""

    control_type: int
    properties: dict[str, Any] = Field(default_factory=dict)
    children: list[ElementSnapshot] = Field(default_factory=list)
    key: str | None = None
    """Optional stable identity; defaults to object identity."""


class FixtureElement(A11yElement):
    """A node backed by plain Python data.

    Parent links are weak references: the tree is owned top-down through
    ``children``.
    """

    def __init__(
        self,
        control_type: int,
        properties: dict[int, Any] | None = None,
        key: str | None = None,
    ) -> None:
        self._control_type = int(control_type)
        self._properties = dict(properties or {})
        self._children: list[A11yElement] = []
        self._parent: weakref.ref[A11yElement] | None = None
        self.key = key

    def get_property(self, property_id: int) -> Any:
        return self._properties.get(int(property_id))

    def control_type(self) -> int:
        return self._control_type

    def children(self) -> list[A11yElement]:
        return list(self._children)

    def parent(self) -> A11yElement | None:
        if self._parent is None:
            return None
        return self._parent()

    def runtime_key(self) -> Any:
        return self.key if self.key is not None else id(self)

    # -- construction helpers (not part of the read-only contract) --

    def add_child(self, child: FixtureElement) -> FixtureElement:
        """Append *child* and point its parent link here.  Returns *child*."""
        self._children.append(child)
        child._parent = weakref.ref(self)
        return child

    def attach_child(self, child: A11yElement) -> None:
        """Append *child* without touching its parent link.

        Lets tests model corrupted providers that report an ancestor as a
        child.
        """
        self._children.append(child)

    def set_parent(self, parent: A11yElement | None) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    def __repr__(self) -> str:
        name = self._properties.get(int(PropertyId.NAME))
        return f"FixtureElement(control_type={self._control_type}, name={name!r})"


def _property_id(key: str) -> int:
    if key in _PROPERTY_NAMES:
        return _PROPERTY_NAMES[key]
    try:
        return int(key)
    except ValueError:
        raise ValueError(f"Unknown property key: {key!r}") from None


def build_tree(snapshot: ElementSnapshot | dict[str, Any]) -> FixtureElement:
    """Build a :class:`FixtureElement` tree from a snapshot."""
    if not isinstance(snapshot, ElementSnapshot):
        snapshot = ElementSnapshot.model_validate(snapshot)

    root = _make_element(snapshot)
    # Iterative so deep snapshots do not hit the recursion limit
    stack: list[tuple[ElementSnapshot, FixtureElement]] = [(snapshot, root)]
    while stack:
        node, element = stack.pop()
        for child_snap in node.children:
            child = element.add_child(_make_element(child_snap))
            stack.append((child_snap, child))
    return root


def _make_element(node: ElementSnapshot) -> FixtureElement:
    props = {_property_id(k): v for k, v in node.properties.items()}
    return FixtureElement(node.control_type, props, key=node.key)


def load_tree(path: str | Path) -> FixtureElement:
    """Load a snapshot JSON file and build its element tree."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    root = build_tree(data)
    logger.debug("Loaded element snapshot from %s", path)
    return root
