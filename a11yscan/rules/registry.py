"""RuleRegistry — register rules and run them over elements and trees."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator

from a11yscan.config import MAX_SCAN_ELEMENTS, MAX_TRAVERSAL_DEPTH
from a11yscan.elements.base import A11yElement
from a11yscan.rules.base import InvalidArgumentError, Rule
from a11yscan.rules.ids import RuleId
from a11yscan.rules.result import EvaluationResult, ScanReport

logger = logging.getLogger(__name__)


class DuplicateRuleError(ValueError):
    """Raised when a rule id is registered twice."""


class RuleRegistry:
    """Catalog of rules keyed by id, kept in registration order.

    Batch evaluation runs rules in registration order, so a fixed
    registration sequence gives reproducible scan output.
    """

    def __init__(self, rules: list[Rule] | None = None) -> None:
        self._rules: dict[RuleId, Rule] = {}
        for rule in rules or []:
            self.register(rule)

    @classmethod
    def default(cls) -> RuleRegistry:
        """Registry holding every rule in :mod:`a11yscan.library`."""
        from a11yscan.library import all_rules

        return cls(all_rules())

    def register(self, rule: Rule) -> None:
        """Add *rule*.  Raises :class:`DuplicateRuleError` on a reused id."""
        if rule.id in self._rules:
            raise DuplicateRuleError(f"Rule {rule.id.value} is already registered")
        self._rules[rule.id] = rule
        logger.info("Registered rule: %s", rule.id.value)

    def get(self, rule_id: RuleId | str) -> Rule | None:
        """Return the rule registered under *rule_id*, or *None*."""
        try:
            key = RuleId(rule_id)
        except ValueError:
            return None
        return self._rules.get(key)

    def list_rules(self) -> list[Rule]:
        return list(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        try:
            return RuleId(rule_id) in self._rules
        except ValueError:
            return False

    def evaluate_all(self, element: A11yElement | None) -> list[EvaluationResult]:
        """One result per registered rule, in registration order."""
        if element is None:
            raise InvalidArgumentError("evaluate_all requires an element, got None")
        return [
            EvaluationResult(rule_id=rule.id, element=element, code=rule.evaluate(element))
            for rule in self._rules.values()
        ]

    def scan(
        self,
        root: A11yElement,
        *,
        max_depth: int = MAX_TRAVERSAL_DEPTH,
        max_elements: int = MAX_SCAN_ELEMENTS,
    ) -> ScanReport:
        """Evaluate every rule against *root* and each node below it.

        The walk visits every logical node once, stops descending at
        *max_depth* and stops entirely after *max_elements* nodes.
        """
        if root is None:
            raise InvalidArgumentError("scan requires a root element, got None")

        report = ScanReport()
        for element in _walk(root, max_depth, max_elements):
            report.results.extend(self.evaluate_all(element))
            report.elements_scanned += 1

        logger.info(
            "Scanned %d elements with %d rules", report.elements_scanned, len(self._rules)
        )
        return report


def _walk(root: A11yElement, max_depth: int, max_elements: int) -> Iterator[A11yElement]:
    """Pre-order walk guarded against cycles.  A node whose key or children
    cannot be read is still yielded, but treated as a leaf."""
    visited: set[Hashable] = set()
    stack: list[tuple[A11yElement, int]] = [(root, 0)]
    yielded = 0
    while stack and yielded < max_elements:
        element, depth = stack.pop()
        try:
            key = element.runtime_key()
        except Exception:
            # No identity means no cycle guard: evaluate the node but do not descend
            logger.warning("Could not read runtime key of %r", element, exc_info=True)
            yield element
            yielded += 1
            continue
        if key in visited:
            continue
        visited.add(key)
        yield element
        yielded += 1

        if depth >= max_depth:
            continue
        try:
            children = list(element.children())
        except Exception:
            logger.warning("Could not read children of %r", element, exc_info=True)
            continue
        # Reversed so the stack pops children in document order
        for c in reversed(children):
            stack.append((c, depth + 1))

    if stack and yielded >= max_elements:
        logger.warning("Scan stopped after %d elements", max_elements)
