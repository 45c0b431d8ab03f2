"""
Error response schemas for API endpoints.

Every non-2xx response from the API uses the same envelope:
`{"error": {"message": "..."}}`.
"""
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Inner error object."""

    message: str = Field(description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing request."""

    error: ErrorDetail

    @classmethod
    def from_message(cls, message: str) -> "ErrorResponse":
        """Build an envelope around a single message."""
        return cls(error=ErrorDetail(message=message))
