"""Rules, verdicts and the registry that runs them."""

from a11yscan.rules.base import InvalidArgumentError, Rule, RuleInfo
from a11yscan.rules.ids import A11yCriteriaId, EvaluationCode, RuleId
from a11yscan.rules.registry import DuplicateRuleError, RuleRegistry
from a11yscan.rules.result import EvaluationResult, ScanReport

__all__ = [
    "A11yCriteriaId",
    "DuplicateRuleError",
    "EvaluationCode",
    "EvaluationResult",
    "InvalidArgumentError",
    "Rule",
    "RuleId",
    "RuleInfo",
    "RuleRegistry",
    "ScanReport",
]
