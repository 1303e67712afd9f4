"""Tests for the element port adapters: fixtures, snapshots and sessions."""

from __future__ import annotations

import gc
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from a11yscan.elements import (
    A11yElement,
    ElementSnapshot,
    FixtureElement,
    SnapshotElement,
    SnapshotSession,
    build_tree,
    load_tree,
)
from a11yscan.types import ControlType, PropertyId


SNAPSHOT = {
    "control_type": 50032,
    "properties": {"Name": "Main", "30017": True},
    "children": [
        {"control_type": 50004, "properties": {"Name": "Input"}},
        {
            "control_type": 50033,
            "key": "pane-1",
            "children": [{"control_type": 50000, "properties": {"IsEnabled": False}}],
        },
    ],
}


class _LiveElement(A11yElement):
    """Element whose values change on every read, like a busy live tree."""

    def __init__(self) -> None:
        self.reads = 0
        self.kids: list[A11yElement] = []

    def get_property(self, property_id):
        self.reads += 1
        return f"value-{self.reads}"

    def control_type(self):
        self.reads += 1
        return ControlType.TEXT + self.reads

    def children(self):
        return list(self.kids)

    def parent(self):
        return None


# ---------------------------------------------------------------------------
# Fixture trees
# ---------------------------------------------------------------------------


class TestBuildTree:
    def test_build_from_dict(self) -> None:
        root = build_tree(SNAPSHOT)
        assert root.control_type() == ControlType.WINDOW
        assert root.get_property(PropertyId.NAME) == "Main"
        assert root.get_property(PropertyId.IS_CONTENT_ELEMENT) is True
        assert [c.control_type() for c in root.children()] == [ControlType.EDIT, ControlType.PANE]

    def test_parent_links(self) -> None:
        root = build_tree(SNAPSHOT)
        pane = root.children()[1]
        button = pane.children()[0]
        assert button.parent() is pane
        assert pane.parent() is root
        assert root.parent() is None

    def test_absent_property_is_none(self) -> None:
        root = build_tree(SNAPSHOT)
        assert root.get_property(PropertyId.HELP_TEXT) is None

    def test_explicit_key(self) -> None:
        root = build_tree(SNAPSHOT)
        assert root.children()[1].runtime_key() == "pane-1"
        assert root.runtime_key() == id(root)

    def test_accepts_model(self) -> None:
        root = build_tree(ElementSnapshot.model_validate(SNAPSHOT))
        assert len(root.children()) == 2

    def test_unknown_property_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown property key"):
            build_tree({"control_type": 50000, "properties": {"Bogus": 1}})

    def test_invalid_snapshot(self) -> None:
        with pytest.raises(ValidationError):
            build_tree({"properties": {}})

    def test_load_tree(self, tmp_path: Path) -> None:
        path = tmp_path / "tree.json"
        path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")
        root = load_tree(path)
        assert root.get_property(PropertyId.NAME) == "Main"

    def test_children_are_copies(self) -> None:
        root = build_tree(SNAPSHOT)
        root.children().clear()
        assert len(root.children()) == 2

    def test_parent_reference_is_weak(self) -> None:
        root = FixtureElement(ControlType.WINDOW)
        leaf = root.add_child(FixtureElement(ControlType.BUTTON))
        del root
        gc.collect()
        assert leaf.parent() is None


# ---------------------------------------------------------------------------
# Snapshot sessions
# ---------------------------------------------------------------------------


class TestSnapshot:
    def test_property_reads_are_frozen(self) -> None:
        live = _LiveElement()
        view = SnapshotSession().wrap(live)
        first = view.get_property(PropertyId.NAME)
        assert view.get_property(PropertyId.NAME) == first
        assert live.reads == 1

    def test_control_type_is_frozen(self) -> None:
        live = _LiveElement()
        view = SnapshotSession().wrap(live)
        assert view.control_type() == view.control_type()

    def test_new_session_sees_new_values(self) -> None:
        live = _LiveElement()
        a = SnapshotSession().wrap(live).get_property(PropertyId.NAME)
        b = SnapshotSession().wrap(live).get_property(PropertyId.NAME)
        assert a != b

    def test_one_view_per_node(self) -> None:
        root = build_tree(SNAPSHOT)
        session = SnapshotSession()
        view = session.wrap(root)
        pane_view = view.children()[1]
        assert isinstance(pane_view, SnapshotElement)
        assert pane_view.children()[0].parent() is pane_view
        assert session.wrap(root) is view
        assert session.wrap(view) is view
        assert len(session) == 4

    def test_keys_delegate(self) -> None:
        root = build_tree(SNAPSHOT)
        view = SnapshotSession().wrap(root)
        assert view.runtime_key() == root.runtime_key()
        assert view.source is root
