"""Tests for custom exceptions and error payloads."""

from fastapi import status

from api.exceptions import InvalidTargetError, NexusError, UnreachableTargetError


def test_nexus_error_base() -> None:
    """Test base NexusError."""
    error = NexusError(message="Test error", code="test_error")
    assert error.message == "Test error"
    assert error.code == "test_error"
    assert error.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert error.details is None
    assert error.to_payload() == {"error": "Test error"}


def test_invalid_target_error() -> None:
    """Test InvalidTargetError."""
    error = InvalidTargetError()
    assert error.message == "URL is required"
    assert error.code == "invalid_input"
    assert error.status_code == status.HTTP_400_BAD_REQUEST
    assert error.to_payload() == {"error": "URL is required"}


def test_unreachable_target_error() -> None:
    """Test UnreachableTargetError carries the fetch reason."""
    error = UnreachableTargetError("HTTP error: 503")
    assert error.code == "unreachable_target"
    assert error.status_code == status.HTTP_502_BAD_GATEWAY
    assert error.reason == "HTTP error: 503"
    assert error.to_payload() == {
        "error": "Failed to analyze URL. Ensure it is reachable.",
        "details": "HTTP error: 503",
    }


def test_errors_share_base() -> None:
    assert isinstance(InvalidTargetError(), NexusError)
    assert isinstance(UnreachableTargetError("x"), NexusError)
