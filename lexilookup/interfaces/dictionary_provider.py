"""Protocol for dictionary lookup providers."""

from typing import Any, Protocol

from lexilookup.models import LookupItem, LookupOptions, ProviderEntry, ResultSource


class DictionaryProvider(Protocol):
    """Interface for a definition or translation backend.

    Any source (Free Dictionary, Oxford, an LLM, etc.) implements this
    protocol to take part in the provider chain. The chain asks
    ``is_available`` and ``supports`` before every attempt, wraps ``fetch``
    in the retry executor, and passes non-None payloads to ``transform``.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this provider (e.g., 'Free Dictionary API')."""
        ...

    @property
    def source(self) -> ResultSource:
        """Source tag recorded on results this provider produces."""
        ...

    @property
    def max_retries(self) -> int:
        """Retries allowed after the first attempt."""
        ...

    @property
    def retry_delay(self) -> float:
        """Seconds to wait between attempts."""
        ...

    def is_available(self) -> bool:
        """Check if this provider is configured to serve lookups."""
        ...

    def supports(self, item: LookupItem, options: LookupOptions) -> bool:
        """Check if this provider applies to the item under the given options."""
        ...

    def fetch(self, item: LookupItem, options: LookupOptions) -> Any | None:
        """Fetch the raw upstream payload for an item.

        Returns:
            Raw payload, or None if the item is authoritatively not found.

        Raises:
            ProviderError: If the call failed
            requests.RequestException: On network faults and timeouts
        """
        ...

    def transform(
        self, raw: Any, item: LookupItem, options: LookupOptions
    ) -> ProviderEntry | None:
        """Convert a raw payload into a normalized entry limited by the options."""
        ...

    def is_retryable(self, error: Exception) -> bool:
        """Decide whether a failed fetch may be attempted again."""
        ...
