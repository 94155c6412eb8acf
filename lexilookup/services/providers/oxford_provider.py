"""Oxford Dictionaries API provider (CEFR-leveled lexicon)."""

import logging
from typing import Any
from urllib.parse import quote

import requests

from lexilookup.exceptions import ProviderError, ProviderUnavailableError
from lexilookup.models import (
    CefrLevel,
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

# 403: bad credentials, 414: URL too long. Neither changes on retry.
UNAVAILABLE_STATUS_CODES = {403: "authentication failed", 414: "URL too long"}


class OxfordProvider:
    """CEFR-aware definitions from the Oxford Dictionaries API.

    Implements DictionaryProvider protocol. Only consulted when English
    content is requested and both credentials are configured.
    """

    SUPPORTED_KINDS = frozenset({ItemKind.WORD, ItemKind.PHRASE})

    def __init__(
        self,
        app_id: str,
        app_key: str,
        api_url: str = "https://od-api-sandbox.oxforddictionaries.com/api/v2",
        timeout: float = 10.0,
        max_retries: int = 2,
        retry_delay: float = 0.5,
    ):
        """Initialize with credentials, API URL and retry policy.

        Args:
            app_id: Oxford application id.
            app_key: Oxford application key.
            api_url: Base URL of the API.
            timeout: Seconds before a request times out.
            max_retries: Retries allowed after the first attempt.
            retry_delay: Seconds to wait between attempts.
        """
        self._app_id = app_id
        self._app_key = app_key
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    @property
    def name(self) -> str:
        return "Oxford Dictionaries API"

    @property
    def source(self) -> ResultSource:
        return ResultSource.LEVELED_LEXICON

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def retry_delay(self) -> float:
        return self._retry_delay

    def is_available(self) -> bool:
        return bool(self._app_id and self._app_key)

    def supports(self, item: LookupItem, options: LookupOptions) -> bool:
        return item.kind in self.SUPPORTED_KINDS and options.meaning_display.includes_english

    def is_retryable(self, error: Exception) -> bool:
        return is_retryable_error(error)

    def fetch(self, item: LookupItem, options: LookupOptions) -> dict | None:
        """Fetch the Oxford entry for an item.

        Args:
            item: Item to look up.
            options: Request options (unused when fetching).

        Returns:
            Parsed API response, or None if not found.

        Raises:
            ProviderUnavailableError: On 403 or 414, or missing credentials.
            ProviderError: On any other non-200 status.
            requests.RequestException: On network faults and timeouts.
        """
        if not self.is_available():
            raise ProviderUnavailableError("Oxford API credentials are not configured")

        url = f"{self._api_url}/entries/en-us/{quote(item.normalized)}"
        response = requests.get(
            url,
            headers={"app_id": self._app_id, "app_key": self._app_key},
            timeout=self._timeout,
        )

        if response.status_code == 404:
            logger.debug(f"[{item.original}] Oxford API: not found")
            return None

        if response.status_code in UNAVAILABLE_STATUS_CODES:
            raise ProviderUnavailableError(
                f"Oxford API {UNAVAILABLE_STATUS_CODES[response.status_code]} "
                f"(HTTP {response.status_code})",
                status_code=response.status_code,
            )

        if response.status_code != 200:
            raise ProviderError(
                f"Oxford API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            logger.warning(f"[{item.original}] Oxford API: response is not JSON")
            return None

        if not isinstance(data, dict) or not data.get("results"):
            logger.debug(f"[{item.original}] Oxford API: no results in response")
            return None

        return data

    def transform(self, raw: Any, item: LookupItem, options: LookupOptions) -> ProviderEntry:
        """Extract CEFR-filtered meanings from an Oxford response.

        Args:
            raw: Parsed API response.
            item: Item that was looked up.
            options: Limits and CEFR level.

        Returns:
            Normalized entry.
        """
        result = raw["results"][0]
        lexical_entries = result.get("lexicalEntries") or []

        meanings = []
        for lexical_entry in lexical_entries:
            if len(meanings) >= options.meaning_count:
                break

            entries = lexical_entry.get("entries") or [{}]
            senses = entries[0].get("senses") or []
            if not senses:
                continue

            sense = filter_senses_by_level(senses, options.cefr_level)[0]
            definitions = sense.get("definitions") or []

            definition = ""
            if options.definition_count > 0:
                definition = "; ".join(definitions[: options.definition_count])

            meanings.append(
                Meaning(
                    part_of_speech=(lexical_entry.get("lexicalCategory") or {}).get("text", ""),
                    definition=definition,
                    examples=[e["text"] for e in sense.get("examples") or [] if e.get("text")][:1],
                    synonyms=take_unique(
                        (s.get("text") for s in sense.get("synonyms") or []), options.synonym_count
                    ),
                    antonyms=take_unique(
                        (a.get("text") for a in sense.get("antonyms") or []), options.antonym_count
                    ),
                    related=[],
                )
            )

        return ProviderEntry(
            word=result.get("word") or result.get("id") or "",
            meanings=meanings,
            phonetic=_ipa(lexical_entries),
        )


def filter_senses_by_level(senses: list[dict], level: CefrLevel) -> list[dict]:
    """Keep senses tagged with the requested CEFR level.

    Falls back to the full sense list when no sense carries that level.

    Args:
        senses: Oxford sense objects
        level: Requested CEFR level

    Returns:
        Filtered senses (never empty if ``senses`` is non-empty)
    """
    tagged = [
        sense
        for sense in senses
        if any(
            register.get("id") == level.value.lower() or register.get("text") == level.value
            for register in sense.get("registers") or []
        )
    ]
    return tagged or senses


def _ipa(lexical_entries: list[dict]) -> str | None:
    if not lexical_entries:
        return None
    entries = lexical_entries[0].get("entries") or [{}]
    for pronunciation in entries[0].get("pronunciations") or []:
        if pronunciation.get("phoneticNotation") == "IPA" and pronunciation.get("phoneticSpelling"):
            return pronunciation["phoneticSpelling"]
    return None
