"""Prometheus metrics for monitoring and observability."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware

# Request metrics
REQUEST_COUNT = Counter(
    "nexus_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

REQUEST_LATENCY = Histogram(
    "nexus_http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

REQUEST_IN_PROGRESS = Gauge(
    "nexus_http_requests_in_progress",
    "HTTP requests currently being processed",
    ["method", "endpoint"],
)

ERROR_COUNT = Counter(
    "nexus_errors_total",
    "Total unhandled application errors",
    ["error_type", "endpoint"],
)

# Pipeline metrics
ANALYSES_TOTAL = Counter(
    "nexus_analyses_total",
    "Page analyses by outcome",
    ["outcome"],
)

FETCH_LATENCY = Histogram(
    "nexus_fetch_duration_seconds",
    "Target page fetch time in seconds",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 7.5, 10.0],
)

HEALTH_SCORE = Histogram(
    "nexus_health_score",
    "Distribution of computed page health scores",
    buckets=[0, 25, 45, 55, 65, 75, 85, 100],
)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    metrics: bytes = generate_latest()
    return metrics


def get_metrics_content_type() -> str:
    """Get the content type for Prometheus metrics."""
    content_type: str = CONTENT_TYPE_LATEST
    return content_type


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to collect request metrics."""

    EXCLUDE_PATHS = {"/metrics", "/api/health", "/favicon.ico"}

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        if request.url.path in self.EXCLUDE_PATHS:
            return await call_next(request)

        method = request.method
        endpoint = request.url.path

        REQUEST_IN_PROGRESS.labels(method=method, endpoint=endpoint).inc()
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            REQUEST_COUNT.labels(
                method=method,
                endpoint=endpoint,
                status_code=str(response.status_code),
            ).inc()
            REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(
                time.perf_counter() - start_time
            )
            return response

        except Exception as e:
            ERROR_COUNT.labels(error_type=type(e).__name__, endpoint=endpoint).inc()
            raise

        finally:
            REQUEST_IN_PROGRESS.labels(method=method, endpoint=endpoint).dec()


def record_analysis(outcome: str, score: int | None = None) -> None:
    """Record a finished analysis (success, unreachable, invalid_input)."""
    ANALYSES_TOTAL.labels(outcome=outcome).inc()
    if score is not None:
        HEALTH_SCORE.observe(score)


def record_fetch(fetch_time_ms: int) -> None:
    """Record target fetch duration."""
    FETCH_LATENCY.observe(fetch_time_ms / 1000)
