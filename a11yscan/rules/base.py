"""Rule — binds a root condition to its identifier and remediation text."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from a11yscan.conditions.base import Condition
from a11yscan.elements.base import A11yElement
from a11yscan.elements.snapshot import SnapshotSession
from a11yscan.rules.ids import A11yCriteriaId, EvaluationCode, RuleId

logger = logging.getLogger(__name__)

_NON_MATCH_CODES = (EvaluationCode.FAIL, EvaluationCode.NOTE)


class InvalidArgumentError(ValueError):
    """Raised when a rule is asked to evaluate a missing element."""


class RuleInfo(BaseModel):
    """Metadata a reporting layer renders next to a verdict.

    ``description`` and ``how_to_fix`` are raw templates; ``condition`` is
    the structural description of the rule's root condition, available for
    substitution.
    """

    model_config = ConfigDict(frozen=True)

    id: RuleId
    description: str
    how_to_fix: str
    standard: A11yCriteriaId
    condition: str


class Rule:
    """One accessibility check.

    Parameters
    ----------
    rule_id:
        Identifier from :class:`RuleId`.
    description, how_to_fix:
        Templates for the report layer.
    standard:
        The success criterion the rule reports against.
    condition:
        Root condition; a match is a pass.
    applicability:
        Optional condition an element must meet for the rule to apply.
        Elements outside it evaluate to ``OPEN``.
    non_match_code:
        ``FAIL`` (default) or ``NOTE`` for heuristic rules whose
        non-match may be a false positive.

    Subclasses may override :meth:`evaluate_element` for policies the
    parameters cannot express.
    """

    def __init__(
        self,
        rule_id: RuleId | str,
        description: str,
        how_to_fix: str,
        standard: A11yCriteriaId,
        condition: Condition,
        *,
        applicability: Condition | None = None,
        non_match_code: EvaluationCode = EvaluationCode.FAIL,
    ) -> None:
        if non_match_code not in _NON_MATCH_CODES:
            raise ValueError(f"non_match_code must be FAIL or NOTE, not {non_match_code}")
        self._condition = condition
        self._applicability = applicability
        self._non_match_code = EvaluationCode(non_match_code)
        self._info = RuleInfo(
            id=RuleId(rule_id),
            description=description,
            how_to_fix=how_to_fix,
            standard=standard,
            condition=condition.describe(),
        )

    @property
    def id(self) -> RuleId:
        return self._info.id

    @property
    def info(self) -> RuleInfo:
        return self._info

    @property
    def condition(self) -> Condition:
        return self._condition

    @property
    def applicability(self) -> Condition | None:
        return self._applicability

    @property
    def non_match_code(self) -> EvaluationCode:
        return self._non_match_code

    def evaluate(self, element: A11yElement | None) -> EvaluationCode:
        """Evaluate this rule against *element*.

        Raises :class:`InvalidArgumentError` if *element* is *None*.  Every
        other failure is logged and reported as ``RULE_EXECUTION_ERROR``.
        """
        if element is None:
            raise InvalidArgumentError(f"Rule {self.id.value} requires an element, got None")

        try:
            view = SnapshotSession().wrap(element)
            code: Any = self.evaluate_element(view)
        except Exception:
            logger.warning("Rule %s raised during evaluation", self.id.value, exc_info=True)
            return EvaluationCode.RULE_EXECUTION_ERROR

        if not isinstance(code, EvaluationCode):
            logger.warning("Rule %s returned %r, not an EvaluationCode", self.id.value, code)
            return EvaluationCode.RULE_EXECUTION_ERROR
        return code

    def evaluate_element(self, element: A11yElement) -> EvaluationCode:
        """Verdict for a non-null element.  Exceptions are handled by the caller."""
        if self._applicability is not None and not self._applicability.matches(element):
            return EvaluationCode.OPEN
        if self._condition.matches(element):
            return EvaluationCode.PASS
        return self._non_match_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id.value!r})"
