"""Custom exceptions for lexilookup."""

from .base import LexiLookupException
from .provider import MalformedPayloadError, ProviderError, ProviderUnavailableError
from .validation import CallerValidationError, SetupError, ValidationError

__all__ = [
    "LexiLookupException",
    "ProviderError",
    "ProviderUnavailableError",
    "MalformedPayloadError",
    "ValidationError",
    "CallerValidationError",
    "SetupError",
]
