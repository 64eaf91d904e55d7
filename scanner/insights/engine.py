"""Rule engine: fold ordered rule tables over a signal record."""

from dataclasses import dataclass, field

from scanner.extraction.signals import PageSignals
from scanner.insights.rules import RULE_SETS, Category, RuleSet

InsightSet = dict[Category, list[str]]
ActionSet = dict[Category, str]


@dataclass
class CategoryEvaluation:
    """Outcome of evaluating one category's rules."""

    category: Category
    insights: list[str] = field(default_factory=list)
    action: str | None = None
    fired_rules: list[str] = field(default_factory=list)


def evaluate_category(rule_set: RuleSet, signals: PageSignals) -> CategoryEvaluation:
    """
    Evaluate one category's rules in order.

    Insights accumulate across matching rules. The action slot is filled
    by the first matching rule that has one, and falls back to the rule
    set's default when nothing fills it.
    """
    result = CategoryEvaluation(category=rule_set.category)

    for rule in rule_set.rules:
        if not rule.predicate(signals):
            continue
        result.fired_rules.append(rule.name)

        insight = rule.render_insight(signals)
        if insight:
            result.insights.append(insight)

        if rule.action and result.action is None:
            result.action = rule.action

    if result.action is None:
        result.action = rule_set.default_action

    return result


def evaluate(
    signals: PageSignals,
    rule_sets: tuple[RuleSet, ...] = RULE_SETS,
) -> tuple[InsightSet, ActionSet]:
    """
    Evaluate every category against a signal record.

    Args:
        signals: Extracted page signals
        rule_sets: Category tables to evaluate

    Returns:
        (insights, actions) keyed by category. Every category has an
        action; insight lists may be empty.
    """
    insights: InsightSet = {}
    actions: ActionSet = {}

    for rule_set in rule_sets:
        evaluation = evaluate_category(rule_set, signals)
        insights[evaluation.category] = evaluation.insights
        actions[evaluation.category] = evaluation.action or rule_set.default_action

    return insights, actions
