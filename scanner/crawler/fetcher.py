"""HTTP fetcher for a single target page."""

from dataclasses import dataclass
from datetime import UTC, datetime

import httpx
import structlog

logger = structlog.get_logger(__name__)

# Fixed network policy. Some origins reject clients without a browser identity.
FETCH_TIMEOUT_SECONDS = 10.0
MAX_REDIRECTS = 5
DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass(frozen=True)
class FetchResult:
    """Result of fetching a URL."""

    url: str
    final_url: str  # After redirects
    status_code: int
    content_type: str | None
    html: str | None
    error: str | None
    fetch_time_ms: int
    fetched_at: datetime

    @property
    def success(self) -> bool:
        """Check if fetch was successful."""
        return self.error is None and self.html is not None

    @property
    def is_html(self) -> bool:
        """Check if response is HTML."""
        if not self.content_type:
            return False
        return "text/html" in self.content_type.lower()


class Fetcher:
    """Single-shot HTTP fetcher. No retries, no rate limiting."""

    def __init__(
        self,
        user_agent: str = DESKTOP_USER_AGENT,
        timeout: float = FETCH_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self._transport = transport

    def _failure(
        self,
        url: str,
        error: str,
        start_time: datetime,
        status_code: int = 0,
        final_url: str | None = None,
    ) -> FetchResult:
        return FetchResult(
            url=url,
            final_url=final_url or url,
            status_code=status_code,
            content_type=None,
            html=None,
            error=error,
            fetch_time_ms=int((datetime.now(UTC) - start_time).total_seconds() * 1000),
            fetched_at=start_time,
        )

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch a URL once.

        Args:
            url: Absolute URL to fetch

        Returns:
            FetchResult with the body on any 2xx response, or with error set
        """
        start_time = datetime.now(UTC)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                max_redirects=MAX_REDIRECTS,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    url,
                    headers={
                        "User-Agent": self.user_agent,
                        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                        "Accept-Language": "en-US,en;q=0.5",
                    },
                )

        except httpx.TimeoutException:
            logger.warning("fetch_timeout", url=url, timeout=self.timeout)
            return self._failure(url, "Request timed out", start_time)

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            error = str(e) or type(e).__name__
            logger.warning("fetch_error", url=url, error=error)
            return self._failure(url, error, start_time)

        if not response.is_success:
            logger.warning("fetch_bad_status", url=url, status_code=response.status_code)
            return self._failure(
                url,
                f"HTTP error: {response.status_code}",
                start_time,
                status_code=response.status_code,
                final_url=str(response.url),
            )

        fetch_time = int((datetime.now(UTC) - start_time).total_seconds() * 1000)
        return FetchResult(
            url=url,
            final_url=str(response.url),
            status_code=response.status_code,
            content_type=response.headers.get("content-type"),
            html=response.text,
            error=None,
            fetch_time_ms=fetch_time,
            fetched_at=start_time,
        )
