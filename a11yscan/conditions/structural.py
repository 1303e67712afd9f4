"""Conditions that inspect relatives of an element instead of the element.

Descendant and ancestor walks are iterative, bounded by ``max_depth`` and
guarded by a visited set of runtime keys.  A revisit or a node beyond the
bound ends that path as "no match"; it is never an error.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from a11yscan.conditions.base import Condition
from a11yscan.config import MAX_TRAVERSAL_DEPTH

if TYPE_CHECKING:
    from a11yscan.elements.base import A11yElement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChildCondition(Condition):
    inner: Condition

    def describe(self) -> str:
        return f"any child ({self.inner.describe()})"


@dataclass(frozen=True)
class DescendantCondition(Condition):
    inner: Condition
    max_depth: int = MAX_TRAVERSAL_DEPTH

    def describe(self) -> str:
        return f"any descendant ({self.inner.describe()})"


@dataclass(frozen=True)
class SiblingCondition(Condition):
    inner: Condition

    def describe(self) -> str:
        return f"any sibling ({self.inner.describe()})"


@dataclass(frozen=True)
class AncestorCondition(Condition):
    inner: Condition
    max_depth: int = MAX_TRAVERSAL_DEPTH

    def describe(self) -> str:
        return f"any ancestor ({self.inner.describe()})"


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def iter_descendants(element: A11yElement, max_depth: int) -> Iterator[A11yElement]:
    """Yield descendants depth-first in document order, each at most once."""
    if max_depth < 1:
        return
    visited: set[Hashable] = {element.runtime_key()}
    # Stack of (iterator over a node's children, depth of those children)
    stack: list[tuple[Iterator[A11yElement], int]] = [(iter(element.children()), 1)]
    while stack:
        children, depth = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            continue
        key = child.runtime_key()
        if key in visited:
            logger.debug("Cycle detected below %r; skipping revisit", element)
            continue
        visited.add(key)
        yield child
        if depth < max_depth:
            stack.append((iter(child.children()), depth + 1))
        else:
            logger.debug("Traversal depth bound %d reached below %r", max_depth, element)


def iter_ancestors(element: A11yElement, max_depth: int) -> Iterator[A11yElement]:
    """Yield ancestors nearest first, stopping on a revisit or the bound."""
    visited: set[Hashable] = {element.runtime_key()}
    current = element.parent()
    depth = 1
    while current is not None and depth <= max_depth:
        key = current.runtime_key()
        if key in visited:
            logger.debug("Cycle detected above %r", element)
            return
        visited.add(key)
        yield current
        current = current.parent()
        depth += 1


def iter_siblings(element: A11yElement) -> Iterator[A11yElement]:
    """Yield the other children of the element's parent."""
    parent = element.parent()
    if parent is None:
        return
    own_key = element.runtime_key()
    for child in parent.children():
        if child.runtime_key() != own_key:
            yield child


# ---------------------------------------------------------------------------
# Shorthand constructors
# ---------------------------------------------------------------------------


def child(inner: Condition) -> ChildCondition:
    return ChildCondition(inner)


def descendant(inner: Condition, max_depth: int = MAX_TRAVERSAL_DEPTH) -> DescendantCondition:
    return DescendantCondition(inner, max_depth)


def sibling(inner: Condition) -> SiblingCondition:
    return SiblingCondition(inner)


def ancestor(inner: Condition, max_depth: int = MAX_TRAVERSAL_DEPTH) -> AncestorCondition:
    return AncestorCondition(inner, max_depth)
