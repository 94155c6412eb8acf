"""Free Dictionary API provider (primary lexicon)."""

import logging
from typing import Any
from urllib.parse import quote

import requests

from lexilookup.exceptions import ProviderError
from lexilookup.models import (
    ItemKind,
    LookupItem,
    LookupOptions,
    Meaning,
    ProviderEntry,
    ResultSource,
)
from lexilookup.services.retry_executor import is_retryable_error
from lexilookup.utils import take_unique

logger = logging.getLogger(__name__)


class FreeDictionaryProvider:
    """Free, unauthenticated lexical lookup via dictionaryapi.dev.

    Implements DictionaryProvider protocol.
    """

    SUPPORTED_KINDS = frozenset({ItemKind.WORD, ItemKind.PHRASE})

    def __init__(
        self,
        api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en",
        timeout: float = 10.0,
        max_retries: int = 2,
        retry_delay: float = 0.5,
    ):
        """Initialize with API URL and retry policy.

        Args:
            api_url: Base URL of the entries endpoint.
            timeout: Seconds before a request times out.
            max_retries: Retries allowed after the first attempt.
            retry_delay: Seconds to wait between attempts.
        """
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    @property
    def name(self) -> str:
        return "Free Dictionary API"

    @property
    def source(self) -> ResultSource:
        return ResultSource.PRIMARY_LEXICON

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def retry_delay(self) -> float:
        return self._retry_delay

    def is_available(self) -> bool:
        return True

    def supports(self, item: LookupItem, options: LookupOptions) -> bool:
        return item.kind in self.SUPPORTED_KINDS

    def is_retryable(self, error: Exception) -> bool:
        return is_retryable_error(error)

    def fetch(self, item: LookupItem, options: LookupOptions) -> dict | None:
        """Look up the normalized form of an item.

        Args:
            item: Item to look up.
            options: Request options (unused by this provider).

        Returns:
            First entry of the API response, or None if not found.

        Raises:
            ProviderError: On any non-200, non-404 status.
            requests.RequestException: On network faults and timeouts.
        """
        url = f"{self._api_url}/{quote(item.normalized)}"
        response = requests.get(url, timeout=self._timeout)

        if response.status_code == 404:
            logger.debug(f"[{item.original}] Free Dictionary API: not found")
            return None

        if response.status_code != 200:
            raise ProviderError(
                f"Free Dictionary API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            logger.warning(f"[{item.original}] Free Dictionary API: response is not JSON")
            return None

        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            return None

        return data[0]

    def transform(self, raw: Any, item: LookupItem, options: LookupOptions) -> ProviderEntry:
        """Extract meanings from a Free Dictionary entry.

        Args:
            raw: First entry of the API response.
            item: Item that was looked up.
            options: Limits for meanings, definitions and word lists.

        Returns:
            Normalized entry.
        """
        meanings = []
        for meaning in (raw.get("meanings") or [])[: options.meaning_count]:
            definitions = [d for d in meaning.get("definitions") or [] if isinstance(d, dict)]
            selected = definitions[: max(options.definition_count, 1)]

            definition = ""
            if options.meaning_display.includes_english and options.definition_count > 0:
                definition = "; ".join(
                    d["definition"] for d in selected if d.get("definition")
                )

            examples = [d["example"] for d in selected if d.get("example")]

            meanings.append(
                Meaning(
                    part_of_speech=meaning.get("partOfSpeech") or "",
                    definition=definition,
                    examples=examples,
                    synonyms=_collect(definitions, meaning, "synonyms", options.synonym_count),
                    antonyms=_collect(definitions, meaning, "antonyms", options.antonym_count),
                    related=[],
                )
            )

        return ProviderEntry(
            word=raw.get("word") or "",
            meanings=meanings,
            phonetic=_phonetic(raw),
        )


def _collect(definitions: list[dict], meaning: dict, key: str, limit: int) -> list[str]:
    """Gather synonyms or antonyms across definitions, then the meaning itself."""
    candidates: list[str] = []
    for definition in definitions:
        candidates.extend(definition.get(key) or [])
    candidates.extend(meaning.get(key) or [])
    return take_unique(candidates, limit)


def _phonetic(raw: dict) -> str | None:
    if raw.get("phonetic"):
        return raw["phonetic"]
    for phonetic in raw.get("phonetics") or []:
        if isinstance(phonetic, dict) and phonetic.get("text"):
            return phonetic["text"]
    return None
