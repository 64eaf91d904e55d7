"""Crawler package for single-page fetching."""

from scanner.crawler.fetcher import (
    DESKTOP_USER_AGENT,
    FETCH_TIMEOUT_SECONDS,
    Fetcher,
    FetchResult,
)
from scanner.crawler.url import has_scheme, normalize_target

__all__ = [
    # Fetcher
    "Fetcher",
    "FetchResult",
    "DESKTOP_USER_AGENT",
    "FETCH_TIMEOUT_SECONDS",
    # URL utilities
    "normalize_target",
    "has_scheme",
]
