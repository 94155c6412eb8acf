"""Base exception classes for lexilookup."""


class LexiLookupException(Exception):
    """Base exception for all lexilookup errors.

    All custom exceptions in the lexilookup package should inherit
    from this base class for consistent error handling.
    """

    pass
