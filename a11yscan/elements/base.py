"""Abstract A11yElement interface — the read-only view of one tree node."""

from __future__ import annotations

import abc
from collections.abc import Hashable, Sequence
from typing import Any


class A11yElement(abc.ABC):
    """Base class for every element handed to the rule engine.

    Implementations adapt a live accessibility provider, a test fixture or a
    serialized snapshot.  None of the methods may mutate the tree, and
    repeated calls against the same node must agree for the duration of one
    evaluation.
    """

    @abc.abstractmethod
    def get_property(self, property_id: int) -> Any:
        """Return the value of *property_id*, or *None* when unsupported.

        Absence is a normal outcome, not an error.
        """

    @abc.abstractmethod
    def control_type(self) -> int:
        """Control-type identifier of this node."""

    @abc.abstractmethod
    def children(self) -> Sequence[A11yElement]:
        """Ordered direct children.  Finite; may be empty."""

    @abc.abstractmethod
    def parent(self) -> A11yElement | None:
        """Parent node, or *None* for a root."""

    def runtime_key(self) -> Hashable:
        """Identity of the logical node behind this handle.

        Cycle guards and sibling exclusion compare keys, not handles, so
        adapters that hand out a fresh wrapper per call should override
        this with a stable id from the provider.
        """
        return id(self)
