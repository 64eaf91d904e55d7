"""Health scoring."""

from scanner.scoring.health import (
    BASE_SCORE,
    MAX_IMPROVEMENT,
    SCORE_DEDUCTIONS,
    HealthScore,
    calculate_health_score,
)

__all__ = [
    "HealthScore",
    "calculate_health_score",
    "BASE_SCORE",
    "MAX_IMPROVEMENT",
    "SCORE_DEDUCTIONS",
]
