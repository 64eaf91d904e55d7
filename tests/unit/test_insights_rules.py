"""Tests for the insight rule tables and engine."""

from itertools import product

import pytest

from scanner.extraction.signals import PageSignals
from scanner.insights.engine import evaluate, evaluate_category
from scanner.insights.rules import (
    CREATIVE_RULES,
    PPC_RULES,
    RULE_SETS,
    SEO_RULES,
    TECH_RULES,
    Category,
    InsightRule,
    RuleSet,
    keyword_vertical,
)

LONG_TITLE = "Secure Online Banking Made Easy"


def _signals(**overrides) -> PageSignals:
    """Fully populated signals with optional overrides."""
    base = {
        "title": "A Perfectly Reasonable Homepage Title",
        "description": "Something people want",
        "h1_count": 1,
        "viewport": "width=device-width",
        "image_count": 0,
        "images_with_alt": 0,
        "video_count": 0,
    }
    base.update(overrides)
    return PageSignals(**base)


class TestSeoRules:
    """Tests for the seo category."""

    def test_title_missing(self) -> None:
        result = evaluate_category(SEO_RULES, _signals(title=None))

        assert result.insights[0] == "title missing"
        assert result.action == "add descriptive title with primary keywords"

    def test_title_short_cites_length(self) -> None:
        result = evaluate_category(SEO_RULES, _signals(title="Acme Widgets"))

        assert result.insights[0] == "title too short (12 chars); competitors average 55–60 chars"
        assert result.action == "expand title with brand USP and secondary keywords"

    def test_title_boundary_30_is_adequate(self) -> None:
        result = evaluate_category(SEO_RULES, _signals(title="x" * 30))

        assert result.insights[0] == "title length adequate but lacks emotional power words"
        assert result.action == "A/B test title variants with higher sentiment"

    def test_title_29_is_short(self) -> None:
        result = evaluate_category(SEO_RULES, _signals(title="x" * 29))
        assert result.insights[0].startswith("title too short (29 chars)")

    def test_description_missing_appends_insight(self) -> None:
        result = evaluate_category(SEO_RULES, _signals(description=None))

        assert result.insights == [
            "title length adequate but lacks emotional power words",
            "meta description missing",
        ]
        # Title rule already filled the action slot
        assert result.action == "A/B test title variants with higher sentiment"

    def test_empty_description_is_not_missing(self) -> None:
        result = evaluate_category(SEO_RULES, _signals(description=""))
        assert "meta description missing" not in result.insights

    def test_no_h1(self) -> None:
        result = evaluate_category(SEO_RULES, _signals(h1_count=0))
        assert "no H1 found" in result.insights
        assert "multiple H1s dilute relevance" not in result.insights

    def test_multiple_h1(self) -> None:
        result = evaluate_category(SEO_RULES, _signals(h1_count=2))
        assert "multiple H1s dilute relevance" in result.insights
        assert "no H1 found" not in result.insights

    def test_single_h1_no_heading_insight(self) -> None:
        result = evaluate_category(SEO_RULES, _signals())
        assert result.insights == ["title length adequate but lacks emotional power words"]

    def test_insight_order(self) -> None:
        result = evaluate_category(SEO_RULES, _signals(title=None, description=None, h1_count=0))
        assert result.insights == ["title missing", "meta description missing", "no H1 found"]


class TestTechRules:
    """Tests for the tech category."""

    def test_viewport_missing(self) -> None:
        result = evaluate_category(TECH_RULES, _signals(viewport=None))

        assert result.insights == ["mobile viewport missing"]
        assert result.action == "add viewport meta tag"

    def test_viewport_present(self) -> None:
        result = evaluate_category(TECH_RULES, _signals())

        assert result.insights == ["viewport present but touch targets may be too small"]
        assert result.action == "run mobile usability audit"

    def test_images_without_any_alt(self) -> None:
        result = evaluate_category(TECH_RULES, _signals(image_count=15, images_with_alt=0))
        assert "found 15 images, many missing ALT text" in result.insights

    def test_images_with_full_alt_not_flagged(self) -> None:
        result = evaluate_category(TECH_RULES, _signals(image_count=15, images_with_alt=15))
        assert not any("ALT" in insight for insight in result.insights)

    def test_partial_alt_not_flagged(self) -> None:
        """Only the all-missing case is flagged."""
        result = evaluate_category(TECH_RULES, _signals(image_count=15, images_with_alt=1))
        assert not any("ALT" in insight for insight in result.insights)

    def test_ten_images_not_flagged(self) -> None:
        result = evaluate_category(TECH_RULES, _signals(image_count=10, images_with_alt=0))
        assert not any("ALT" in insight for insight in result.insights)


class TestPpcRules:
    """Tests for the ppc category."""

    @pytest.mark.parametrize(
        "title",
        ["Easy Loans Today", "Best CREDIT cards compared", LONG_TITLE],
    )
    def test_finance_keywords(self, title: str) -> None:
        result = evaluate_category(PPC_RULES, _signals(title=title))

        assert result.insights == ["high-CPC finance keywords detected"]
        assert result.action == "shift budget toward B2B-targeted channels"

    def test_finance_in_description(self) -> None:
        result = evaluate_category(PPC_RULES, _signals(description="Your local bank"))
        assert result.insights == ["high-CPC finance keywords detected"]

    def test_saas_keywords(self) -> None:
        result = evaluate_category(PPC_RULES, _signals(title="Invoicing SaaS for freelancers"))

        assert result.insights == ["SaaS competitive bidding detected"]
        assert result.action == "target competitor-comparison keywords"

    def test_finance_wins_over_saas(self) -> None:
        result = evaluate_category(PPC_RULES, _signals(title="Banking software"))
        assert result.insights == ["high-CPC finance keywords detected"]

    def test_generic(self) -> None:
        result = evaluate_category(PPC_RULES, _signals(title="Fresh flowers delivered"))

        assert result.insights == ["generic keyword strategy detected"]
        assert result.action == "implement single-keyword ad groups to reduce waste"

    def test_absent_text_is_generic(self) -> None:
        result = evaluate_category(PPC_RULES, _signals(title=None, description=None))
        assert result.insights == ["generic keyword strategy detected"]

    @pytest.mark.parametrize(
        ("title", "vertical"),
        [
            ("Banking software", "finance"),
            ("Invoicing SaaS", "saas"),
            ("Fresh flowers", "generic"),
        ],
    )
    def test_keyword_vertical(self, title: str, vertical: str) -> None:
        assert keyword_vertical(_signals(title=title)) == vertical

    def test_vertical_classified_once_per_page(self) -> None:
        keyword_vertical.cache_clear()
        signals = _signals(title="Invoicing SaaS for freelancers")

        evaluate_category(PPC_RULES, signals)

        info = keyword_vertical.cache_info()
        assert info.misses == 1
        assert info.hits == len(PPC_RULES.rules) - 1


class TestCreativeRules:
    """Tests for the creative category."""

    def test_no_video(self) -> None:
        result = evaluate_category(CREATIVE_RULES, _signals(video_count=0))

        assert result.insights == ["no video content detected"]
        assert result.action == "create a short explainer video"

    def test_video(self) -> None:
        result = evaluate_category(CREATIVE_RULES, _signals(video_count=1))

        assert result.insights == ["video detected but lacks a clear call-to-action"]
        assert result.action == "add inline lead-capture to video"


class TestEngine:
    """Tests for rule folding."""

    def test_default_action_when_nothing_fires(self) -> None:
        rule_set = RuleSet(
            category=Category.SEO,
            rules=(InsightRule(name="never", predicate=lambda s: False, action="never"),),
            default_action="fallback",
        )
        result = evaluate_category(rule_set, _signals())

        assert result.insights == []
        assert result.action == "fallback"
        assert result.fired_rules == []

    def test_first_action_wins(self) -> None:
        rule_set = RuleSet(
            category=Category.TECH,
            rules=(
                InsightRule(name="a", predicate=lambda s: True, insight="one"),
                InsightRule(name="b", predicate=lambda s: True, insight="two", action="first"),
                InsightRule(name="c", predicate=lambda s: True, insight="three", action="second"),
            ),
            default_action="fallback",
        )
        result = evaluate_category(rule_set, _signals())

        assert result.insights == ["one", "two", "three"]
        assert result.action == "first"
        assert result.fired_rules == ["a", "b", "c"]

    def test_evaluate_covers_every_category(self) -> None:
        insights, actions = evaluate(_signals())

        assert set(insights) == set(Category)
        assert set(actions) == set(Category)

    def test_actions_never_empty(self) -> None:
        """Every category gets a non-empty action for any signal record."""
        for title, description, viewport, h1, images, alt, videos in product(
            (None, "", "Short", LONG_TITLE),
            (None, "", "saas platform"),
            (None, "", "width=device-width"),
            (0, 1, 3),
            (0, 15),
            (0, 15),
            (0, 2),
        ):
            signals = PageSignals(
                title=title,
                description=description,
                viewport=viewport,
                h1_count=h1,
                image_count=images,
                images_with_alt=min(alt, images),
                video_count=videos,
            )
            _, actions = evaluate(signals)
            for category in Category:
                assert isinstance(actions[category], str) and actions[category]

    def test_idempotent(self) -> None:
        signals = _signals(title=None, h1_count=0, image_count=12)
        assert evaluate(signals) == evaluate(signals)

    def test_rule_sets_cover_categories_once(self) -> None:
        assert sorted(r.category.value for r in RULE_SETS) == sorted(c.value for c in Category)
