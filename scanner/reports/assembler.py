"""Assemble the analysis result returned to callers."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from scanner.extraction.signals import PageSignals
from scanner.insights.engine import ActionSet, InsightSet
from scanner.insights.rules import Category
from scanner.scoring.health import HealthScore

# Shown when a category produced no insight
NO_INSIGHT_PLACEHOLDER = "No issues detected."


@dataclass(frozen=True)
class AnalysisResult:
    """Immutable outcome of analyzing one page."""

    url: str
    insights: Mapping[Category, tuple[str, ...]]
    actions: Mapping[Category, str]
    score: int
    improvement: int
    signals: PageSignals | None = None

    def primary_insight(self, category: Category) -> str:
        """First insight for a category, or a placeholder when there is none."""
        items = self.insights.get(category, ())
        return items[0] if items else NO_INSIGHT_PLACEHOLDER

    def to_dict(self) -> dict:
        """Render the success payload."""
        payload: dict = {
            category.value: list(self.insights.get(category, ())) for category in Category
        }
        payload["actions"] = {category.value: self.actions[category] for category in Category}
        payload["score"] = self.score
        payload["improvement"] = self.improvement
        return payload


def assemble_result(
    url: str,
    insights: InsightSet,
    actions: ActionSet,
    health: HealthScore,
    signals: PageSignals | None = None,
) -> AnalysisResult:
    """Freeze rule engine and scorer outputs into an AnalysisResult."""
    missing = [category.value for category in Category if not actions.get(category)]
    if missing:
        raise ValueError(f"Missing actions for categories: {', '.join(missing)}")

    return AnalysisResult(
        url=url,
        insights=MappingProxyType(
            {category: tuple(insights.get(category, [])) for category in Category}
        ),
        actions=MappingProxyType({category: actions[category] for category in Category}),
        score=health.score,
        improvement=health.improvement,
        signals=signals,
    )
