"""Validation-related exceptions."""

from .base import LexiLookupException


class ValidationError(LexiLookupException):
    """Raised when validation fails."""

    pass


class CallerValidationError(ValidationError):
    """Raised when a lookup request is malformed.

    Attributes:
        code: Machine-readable error code (INVALID_REQUEST or VALIDATION_ERROR)
        message: Human-readable description
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        """Build the error response body."""
        return {"success": False, "error": {"code": self.code, "message": self.message}}


class SetupError(LexiLookupException):
    """Raised when setup checks fail (unreadable input files, etc)."""

    pass
