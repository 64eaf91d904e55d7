"""Page health score calculator.

Deterministic function of the signal record; independent of the
insight text produced by the rule engine.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from scanner.extraction.signals import PageSignals

BASE_SCORE = 85
MAX_IMPROVEMENT = 20

# (name, points deducted, condition)
SCORE_DEDUCTIONS: tuple[tuple[str, int, Callable[[PageSignals], bool]], ...] = (
    ("title_missing", 10, lambda s: s.title is None),
    ("description_missing", 10, lambda s: s.description is None),
    ("viewport_missing", 15, lambda s: s.viewport is None),
    ("h1_missing", 5, lambda s: s.h1_count == 0),
)


@dataclass(frozen=True)
class HealthScore:
    """Health score with capped improvement headroom."""

    score: int  # 0-100
    improvement: int  # 0-MAX_IMPROVEMENT
    deductions: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[int]:
        # Allows `score, improvement = calculate_health_score(...)`
        yield self.score
        yield self.improvement

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "improvement": self.improvement,
            "deductions": list(self.deductions),
        }


def calculate_health_score(signals: PageSignals) -> HealthScore:
    """Score a page from its structural signals."""
    score = BASE_SCORE
    applied: list[str] = []

    for name, points, condition in SCORE_DEDUCTIONS:
        if condition(signals):
            score -= points
            applied.append(name)

    score = max(score, 0)
    improvement = min(100 - score, MAX_IMPROVEMENT)

    return HealthScore(score=score, improvement=improvement, deductions=tuple(applied))
