"""Static insight rule tables.

Each category owns an ordered table of rules. Every matching rule
contributes its insight; the first matching rule that carries an action
decides the category's recommended action. Tables are evaluated by
scanner.insights.engine.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from scanner.extraction.signals import PageSignals

# Title length below this is flagged as too short
MIN_TITLE_LENGTH = 30
# Image count above this triggers the ALT text check
ALT_CHECK_MIN_IMAGES = 10

FINANCE_KEYWORDS = ("loan", "credit", "bank")
SAAS_KEYWORDS = ("software", "saas")


class Category(str, Enum):
    """Insight categories, evaluated independently."""

    SEO = "seo"
    PPC = "ppc"
    CREATIVE = "creative"
    TECH = "tech"


Predicate = Callable[[PageSignals], bool]
InsightText = str | Callable[[PageSignals], str]


@dataclass(frozen=True)
class InsightRule:
    """A single condition with the insight and action it produces."""

    name: str
    predicate: Predicate
    insight: InsightText | None = None
    action: str | None = None

    def render_insight(self, signals: PageSignals) -> str | None:
        """Render the insight text for these signals."""
        if self.insight is None:
            return None
        if callable(self.insight):
            return self.insight(signals)
        return self.insight


@dataclass(frozen=True)
class RuleSet:
    """Ordered rules for one category plus its fallback action."""

    category: Category
    rules: tuple[InsightRule, ...]
    default_action: str


@lru_cache(maxsize=256)
def keyword_vertical(signals: PageSignals) -> str:
    """Classify the page as "finance", "saas" or "generic" from its title and description.

    Finance keywords take precedence over SaaS keywords.
    """
    text = f"{signals.title or ''} {signals.description or ''}".lower()
    if any(keyword in text for keyword in FINANCE_KEYWORDS):
        return "finance"
    if any(keyword in text for keyword in SAAS_KEYWORDS):
        return "saas"
    return "generic"


SEO_RULES = RuleSet(
    category=Category.SEO,
    rules=(
        InsightRule(
            name="title_missing",
            predicate=lambda s: s.title is None,
            insight="title missing",
            action="add descriptive title with primary keywords",
        ),
        InsightRule(
            name="title_short",
            predicate=lambda s: s.title is not None and len(s.title) < MIN_TITLE_LENGTH,
            insight=lambda s: (
                f"title too short ({len(s.title or '')} chars); "
                "competitors average 55–60 chars"
            ),
            action="expand title with brand USP and secondary keywords",
        ),
        InsightRule(
            name="title_adequate",
            predicate=lambda s: s.title is not None and len(s.title) >= MIN_TITLE_LENGTH,
            insight="title length adequate but lacks emotional power words",
            action="A/B test title variants with higher sentiment",
        ),
        InsightRule(
            name="description_missing",
            predicate=lambda s: s.description is None,
            insight="meta description missing",
            action="write compelling meta description (150–160 chars)",
        ),
        InsightRule(
            name="h1_missing",
            predicate=lambda s: s.h1_count == 0,
            insight="no H1 found",
        ),
        InsightRule(
            name="h1_multiple",
            predicate=lambda s: s.h1_count > 1,
            insight="multiple H1s dilute relevance",
        ),
    ),
    default_action="conduct full keyword gap analysis",
)

TECH_RULES = RuleSet(
    category=Category.TECH,
    rules=(
        InsightRule(
            name="viewport_missing",
            predicate=lambda s: s.viewport is None,
            insight="mobile viewport missing",
            action="add viewport meta tag",
        ),
        InsightRule(
            name="viewport_present",
            predicate=lambda s: s.viewport is not None,
            insight="viewport present but touch targets may be too small",
            action="run mobile usability audit",
        ),
        # Only the all-missing case is flagged, partial ALT coverage passes
        InsightRule(
            name="alt_text_missing",
            predicate=lambda s: s.image_count > ALT_CHECK_MIN_IMAGES and s.images_with_alt == 0,
            insight=lambda s: f"found {s.image_count} images, many missing ALT text",
        ),
    ),
    default_action="implement lazy loading for images to improve load metrics",
)

PPC_RULES = RuleSet(
    category=Category.PPC,
    rules=(
        InsightRule(
            name="finance_keywords",
            predicate=lambda s: keyword_vertical(s) == "finance",
            insight="high-CPC finance keywords detected",
            action="shift budget toward B2B-targeted channels",
        ),
        InsightRule(
            name="saas_keywords",
            predicate=lambda s: keyword_vertical(s) == "saas",
            insight="SaaS competitive bidding detected",
            action="target competitor-comparison keywords",
        ),
        InsightRule(
            name="generic_keywords",
            predicate=lambda s: keyword_vertical(s) == "generic",
            insight="generic keyword strategy detected",
            action="implement single-keyword ad groups to reduce waste",
        ),
    ),
    default_action="implement single-keyword ad groups to reduce waste",
)

CREATIVE_RULES = RuleSet(
    category=Category.CREATIVE,
    rules=(
        InsightRule(
            name="video_missing",
            predicate=lambda s: s.video_count == 0,
            insight="no video content detected",
            action="create a short explainer video",
        ),
        InsightRule(
            name="video_without_cta",
            predicate=lambda s: s.video_count > 0,
            insight="video detected but lacks a clear call-to-action",
            action="add inline lead-capture to video",
        ),
    ),
    default_action="create a short explainer video",
)

# Evaluation order across categories does not affect results
RULE_SETS: tuple[RuleSet, ...] = (SEO_RULES, PPC_RULES, CREATIVE_RULES, TECH_RULES)
