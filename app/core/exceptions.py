"""
Custom exception classes for the contact API.

Every fault raised here is rendered as ``{"success": false, "error": ...}``
by the handlers registered in ``app.main``.
"""
from fastapi import HTTPException, status

GENERIC_ERROR_MESSAGE = "Internal server error. Please try again later."


class ContactAPIError(HTTPException):
    """Base class for contact pipeline faults."""

    def __init__(
        self,
        message: str = GENERIC_ERROR_MESSAGE,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        super().__init__(status_code=status_code, detail=message)

    @property
    def error(self) -> str:
        return self.detail


class SubmissionParseError(ContactAPIError):
    """Raised when a request body is not valid JSON."""


class RecordingError(ContactAPIError):
    """Raised when a recorder cannot store or forward a submission."""
