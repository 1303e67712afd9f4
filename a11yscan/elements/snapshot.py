"""Snapshot sessions — freeze reads of a live tree for one evaluation.

A live provider may change between two reads of the same property.  Rules
evaluate against a :class:`SnapshotSession` view instead, so every read of
a given node and property inside one evaluation returns the first value
observed.  A session is cheap, single-use, and never shared across
evaluations.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from a11yscan.elements.base import A11yElement

_UNSET = object()


class SnapshotSession:
    """Hands out one memoizing wrapper per logical node."""

    def __init__(self) -> None:
        self._views: dict[Hashable, SnapshotElement] = {}

    def wrap(self, element: A11yElement) -> SnapshotElement:
        if isinstance(element, SnapshotElement) and element.session is self:
            return element
        key = element.runtime_key()
        view = self._views.get(key)
        if view is None:
            view = SnapshotElement(element, self)
            self._views[key] = view
        return view

    def __len__(self) -> int:
        return len(self._views)


class SnapshotElement(A11yElement):
    """Memoizing view over another element, bound to a session."""

    def __init__(self, source: A11yElement, session: SnapshotSession) -> None:
        self.source = source
        self.session = session
        self._key = source.runtime_key()
        self._properties: dict[int, Any] = {}
        self._control_type: Any = _UNSET
        self._children: list[SnapshotElement] | None = None
        self._parent: Any = _UNSET

    def get_property(self, property_id: int) -> Any:
        pid = int(property_id)
        if pid not in self._properties:
            self._properties[pid] = self.source.get_property(pid)
        return self._properties[pid]

    def control_type(self) -> int:
        if self._control_type is _UNSET:
            self._control_type = self.source.control_type()
        return self._control_type

    def children(self) -> list[SnapshotElement]:
        if self._children is None:
            self._children = [self.session.wrap(c) for c in self.source.children()]
        return list(self._children)

    def parent(self) -> SnapshotElement | None:
        if self._parent is _UNSET:
            p = self.source.parent()
            self._parent = self.session.wrap(p) if p is not None else None
        return self._parent

    def runtime_key(self) -> Hashable:
        return self._key
