"""Insight rule engine."""

from scanner.insights.engine import (
    ActionSet,
    CategoryEvaluation,
    InsightSet,
    evaluate,
    evaluate_category,
)
from scanner.insights.rules import (
    CREATIVE_RULES,
    PPC_RULES,
    RULE_SETS,
    SEO_RULES,
    TECH_RULES,
    Category,
    InsightRule,
    RuleSet,
)

__all__ = [
    # Engine
    "evaluate",
    "evaluate_category",
    "CategoryEvaluation",
    "InsightSet",
    "ActionSet",
    # Rules
    "Category",
    "InsightRule",
    "RuleSet",
    "RULE_SETS",
    "SEO_RULES",
    "PPC_RULES",
    "CREATIVE_RULES",
    "TECH_RULES",
]
