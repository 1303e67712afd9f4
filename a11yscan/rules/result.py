"""EvaluationResult and ScanReport models."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from a11yscan.rules.ids import EvaluationCode, RuleId


class EvaluationResult(BaseModel):
    """Verdict of one rule against one element.  Immutable."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    rule_id: RuleId
    element: Any
    """The element handle exactly as the caller passed it."""

    code: EvaluationCode

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_id": self.rule_id.value,
            "element": repr(self.element),
            "code": self.code.value,
        }


class ScanReport(BaseModel):
    """All verdicts produced by scanning one tree."""

    results: list[EvaluationResult] = Field(default_factory=list)
    elements_scanned: int = 0
    scanned_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def counts(self) -> dict[EvaluationCode, int]:
        """Number of results per verdict code; every code is present."""
        totals = {code: 0 for code in EvaluationCode}
        for r in self.results:
            totals[r.code] += 1
        return totals

    def by_code(self, code: EvaluationCode) -> list[EvaluationResult]:
        return [r for r in self.results if r.code == code]

    def for_rule(self, rule_id: RuleId) -> list[EvaluationResult]:
        return [r for r in self.results if r.rule_id == rule_id]

    @property
    def has_failures(self) -> bool:
        return any(
            r.code in (EvaluationCode.FAIL, EvaluationCode.RULE_EXECUTION_ERROR)
            for r in self.results
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "scanned_at": self.scanned_at.isoformat(),
            "elements_scanned": self.elements_scanned,
            "counts": {code.value: n for code, n in self.counts().items()},
            "results": [r.to_dict() for r in self.results],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
