"""Element access — the read-only port plus fixture and snapshot adapters."""

from a11yscan.elements.base import A11yElement
from a11yscan.elements.fixture import ElementSnapshot, FixtureElement, build_tree, load_tree
from a11yscan.elements.snapshot import SnapshotElement, SnapshotSession

__all__ = [
    "A11yElement",
    "ElementSnapshot",
    "FixtureElement",
    "SnapshotElement",
    "SnapshotSession",
    "build_tree",
    "load_tree",
]
