"""Custom exceptions and error handling."""

from typing import Any

from fastapi import status


class NexusError(Exception):
    """Base exception for the analyzer."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: str | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        """Render the error payload returned to clients."""
        payload: dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidTargetError(NexusError):
    """Target identifier missing or blank."""

    def __init__(self, message: str = "URL is required"):
        super().__init__(
            message=message,
            code="invalid_input",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class UnreachableTargetError(NexusError):
    """Target page could not be fetched."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            message="Failed to analyze URL. Ensure it is reachable.",
            code="unreachable_target",
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=reason,
        )
