"""Dictionary provider exceptions."""

from .base import LexiLookupException


class ProviderError(LexiLookupException):
    """Raised when a provider call fails.

    Attributes:
        retryable: Whether repeating the call could succeed
        status_code: HTTP status returned by the upstream service, if any
    """

    def __init__(self, message: str, retryable: bool = True, status_code: int | None = None):
        super().__init__(message)
        self.retryable = retryable
        self.status_code = status_code


class ProviderUnavailableError(ProviderError):
    """Raised when a provider cannot serve requests (bad credentials, URL too long)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message, retryable=False, status_code=status_code)


class MalformedPayloadError(ProviderError):
    """Raised when an upstream payload cannot be decoded."""

    def __init__(self, message: str):
        super().__init__(message, retryable=False)
