"""Single-page analysis pipeline: fetch, extract, evaluate, score."""

import structlog

from api.exceptions import InvalidTargetError, UnreachableTargetError
from api.metrics import record_analysis, record_fetch
from scanner.crawler.fetcher import Fetcher
from scanner.crawler.url import normalize_target
from scanner.extraction.signals import extract_signals
from scanner.insights.engine import evaluate
from scanner.reports.assembler import AnalysisResult, assemble_result
from scanner.scoring.health import calculate_health_score

logger = structlog.get_logger(__name__)


async def analyze_url(identifier: str | None, fetcher: Fetcher | None = None) -> AnalysisResult:
    """
    Analyze one page.

    Args:
        identifier: URL or bare host supplied by the caller
        fetcher: Optional Fetcher (defaults to the fixed network policy)

    Returns:
        AnalysisResult with insights, actions and score

    Raises:
        InvalidTargetError: If the identifier is missing or blank
        UnreachableTargetError: If the page could not be fetched
    """
    if identifier is None or not identifier.strip():
        record_analysis("invalid_input")
        raise InvalidTargetError()

    target_url = normalize_target(identifier)
    fetcher = fetcher or Fetcher()

    logger.info("analysis_started", url=target_url)

    fetch_result = await fetcher.fetch(target_url)
    record_fetch(fetch_result.fetch_time_ms)

    if not fetch_result.success:
        logger.warning(
            "analysis_fetch_failed",
            url=target_url,
            status_code=fetch_result.status_code,
            error=fetch_result.error,
        )
        record_analysis("unreachable")
        raise UnreachableTargetError(fetch_result.error or "Unknown fetch error")

    signals = extract_signals(fetch_result.html or "")
    insights, actions = evaluate(signals)
    health = calculate_health_score(signals)

    result = assemble_result(
        url=fetch_result.final_url,
        insights=insights,
        actions=actions,
        health=health,
        signals=signals,
    )

    logger.info(
        "analysis_completed",
        url=target_url,
        final_url=fetch_result.final_url,
        content_type=fetch_result.content_type,
        is_html=fetch_result.is_html,
        fetch_time_ms=fetch_result.fetch_time_ms,
        **health.to_dict(),
    )
    record_analysis("success", score=health.score)

    return result
