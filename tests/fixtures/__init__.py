"""Shared test fixtures: sample pages and mock transports."""

from tests.fixtures.pages import (
    EMPTY_PAGE,
    build_page,
    failing_transport,
    html_transport,
    recording_transport,
)

__all__ = [
    "EMPTY_PAGE",
    "build_page",
    "html_transport",
    "failing_transport",
    "recording_transport",
]
