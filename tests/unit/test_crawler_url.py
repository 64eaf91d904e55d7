"""Tests for target URL normalization."""

import pytest

from scanner.crawler.url import has_scheme, normalize_target


class TestNormalizeTarget:
    """Tests for normalize_target function."""

    def test_bare_host_gets_https(self) -> None:
        """Test bare hosts default to the secure scheme."""
        assert normalize_target("example.com") == "https://example.com"
        assert normalize_target("example.com/pricing?x=1") == "https://example.com/pricing?x=1"

    def test_existing_scheme_kept(self) -> None:
        """Test explicit schemes are left alone."""
        assert normalize_target("http://example.com") == "http://example.com"
        assert normalize_target("https://example.com/") == "https://example.com/"
        assert normalize_target("HTTPS://Example.com") == "HTTPS://Example.com"

    def test_strips_whitespace(self) -> None:
        """Test surrounding whitespace is trimmed."""
        assert normalize_target("  example.com \n") == "https://example.com"

    def test_protocol_relative(self) -> None:
        """Test protocol-relative references get https."""
        assert normalize_target("//cdn.example.com/page") == "https://cdn.example.com/page"

    def test_http_prefixed_host_is_not_a_scheme(self) -> None:
        """Test hosts that merely start with 'http' still get a scheme."""
        assert normalize_target("httpbin.org") == "https://httpbin.org"

    @pytest.mark.parametrize("value", ["", "   ", "\t"])
    def test_empty_rejected(self, value: str) -> None:
        """Test empty identifiers are rejected."""
        with pytest.raises(ValueError):
            normalize_target(value)


class TestHasScheme:
    """Tests for has_scheme function."""

    def test_recognized(self) -> None:
        assert has_scheme("https://example.com") is True
        assert has_scheme("http://example.com") is True

    def test_unrecognized(self) -> None:
        assert has_scheme("example.com") is False
        assert has_scheme("ftp://example.com") is False
