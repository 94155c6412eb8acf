"""Three-way outcome of a single provider attempt."""

from dataclasses import dataclass

from .result import ProviderEntry


@dataclass(frozen=True)
class ProviderSuccess:
    """Provider returned an accepted entry."""

    entry: ProviderEntry


@dataclass(frozen=True)
class ProviderNotFound:
    """Provider answered authoritatively that it has nothing for the item."""

    reason: str = "not found"


@dataclass(frozen=True)
class ProviderFailed:
    """Provider call failed after its retry budget (or was not retryable)."""

    error: Exception

    @property
    def message(self) -> str:
        return str(self.error) or type(self.error).__name__


ProviderResult = ProviderSuccess | ProviderNotFound | ProviderFailed
