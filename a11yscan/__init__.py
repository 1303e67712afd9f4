"""a11yscan — accessibility rule evaluation over UI element trees."""

__version__ = "1.0.0"

from a11yscan.conditions import Condition
from a11yscan.elements import A11yElement, FixtureElement, build_tree, load_tree
from a11yscan.rules import (
    A11yCriteriaId,
    DuplicateRuleError,
    EvaluationCode,
    EvaluationResult,
    InvalidArgumentError,
    Rule,
    RuleId,
    RuleInfo,
    RuleRegistry,
    ScanReport,
)
from a11yscan.settings import RecorderSetting, load_configuration

__all__ = [
    "__version__",
    "A11yCriteriaId",
    "A11yElement",
    "Condition",
    "DuplicateRuleError",
    "EvaluationCode",
    "EvaluationResult",
    "FixtureElement",
    "InvalidArgumentError",
    "RecorderSetting",
    "Rule",
    "RuleId",
    "RuleInfo",
    "RuleRegistry",
    "ScanReport",
    "build_tree",
    "load_configuration",
    "load_tree",
]
