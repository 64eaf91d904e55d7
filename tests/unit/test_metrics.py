"""Tests for metrics module."""

from unittest.mock import MagicMock

import pytest

from api.metrics import (
    ANALYSES_TOTAL,
    MetricsMiddleware,
    get_metrics,
    get_metrics_content_type,
    record_analysis,
    record_fetch,
)


class TestMetricsOutput:
    """Tests for metrics output generation."""

    def test_get_metrics_returns_bytes(self):
        assert isinstance(get_metrics(), bytes)

    def test_get_metrics_content_type(self):
        content_type = get_metrics_content_type()
        assert "text/plain" in content_type or "openmetrics" in content_type

    def test_get_metrics_contains_custom_metrics(self):
        output = get_metrics().decode("utf-8")
        assert "nexus_http_requests_total" in output
        assert "nexus_fetch_duration_seconds" in output
        assert "nexus_health_score" in output


class TestMetricsMiddleware:
    """Tests for metrics middleware."""

    @pytest.fixture
    def middleware(self):
        return MetricsMiddleware(MagicMock())

    def test_exclude_paths(self, middleware):
        assert "/metrics" in middleware.EXCLUDE_PATHS
        assert "/api/health" in middleware.EXCLUDE_PATHS


class TestPipelineMetrics:
    """Tests for pipeline metric helpers."""

    def test_record_analysis_increments(self):
        before = ANALYSES_TOTAL.labels(outcome="success")._value.get()
        record_analysis("success", score=85)
        after = ANALYSES_TOTAL.labels(outcome="success")._value.get()
        assert after == before + 1

    def test_record_analysis_without_score(self):
        before = ANALYSES_TOTAL.labels(outcome="unreachable")._value.get()
        record_analysis("unreachable")
        assert ANALYSES_TOTAL.labels(outcome="unreachable")._value.get() == before + 1

    def test_record_fetch(self):
        record_fetch(1500)
        output = get_metrics().decode("utf-8")
        assert "nexus_fetch_duration_seconds_count" in output
