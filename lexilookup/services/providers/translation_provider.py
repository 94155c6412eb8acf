"""LLM-backed translation provider for native-language terms."""

import logging
from typing import Any

from openai import OpenAI

from lexilookup.exceptions import MalformedPayloadError, ProviderUnavailableError
from lexilookup.models import (
    ItemKind,
    LookupItem,
    LookupOptions,
    Meaning,
    ProviderEntry,
    ResultSource,
)
from lexilookup.services.retry_executor import is_retryable_error

from .llm_client import request_completion
from .llm_json import decode_json_payload
from .prompts import build_translation_prompt

logger = logging.getLogger(__name__)


class TranslationProvider:
    """Translate native-language terms into the target language.

    Implements DictionaryProvider protocol. Shares the generative credential.
    """

    def __init__(
        self,
        client: OpenAI | None,
        model: str = "gemini-2.5-flash-lite",
        native_language: str = "Korean",
        target_language: str = "English",
        max_retries: int = 2,
        retry_delay: float = 0.25,
    ):
        """Initialize with a chat client, languages and retry policy.

        Args:
            client: OpenAI-compatible client, or None when no key is configured.
            model: Model name.
            native_language: Language of the input terms.
            target_language: Language to translate into.
            max_retries: Retries allowed after the first attempt.
            retry_delay: Seconds to wait between attempts.
        """
        self._client = client
        self._model = model
        self._native_language = native_language
        self._target_language = target_language
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    @property
    def name(self) -> str:
        return "Translation API"

    @property
    def source(self) -> ResultSource:
        return ResultSource.TRANSLATION_FALLBACK

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def retry_delay(self) -> float:
        return self._retry_delay

    def is_available(self) -> bool:
        return self._client is not None

    def supports(self, item: LookupItem, options: LookupOptions) -> bool:
        return item.kind is ItemKind.NATIVE

    def is_retryable(self, error: Exception) -> bool:
        return is_retryable_error(error)

    def fetch(self, item: LookupItem, options: LookupOptions) -> dict | None:
        """Ask the model to translate a native-language term.

        Raises:
            ProviderUnavailableError: If no client is configured or the key is rejected.
            ProviderError: On other API failures.
        """
        if self._client is None:
            raise ProviderUnavailableError("Generative API key is not configured")

        prompt = build_translation_prompt(item, self._native_language, self._target_language)
        text = request_completion(self._client, self._model, prompt)

        try:
            payload = decode_json_payload(text)
        except MalformedPayloadError as e:
            logger.warning(f"[{item.original}] Translation API: {e}")
            return None

        if payload.get("error"):
            return None

        return payload

    def transform(self, raw: Any, item: LookupItem, options: LookupOptions) -> ProviderEntry:
        """Convert the translation JSON into a normalized entry."""
        meanings = []
        definition = str(raw.get("definition") or "")
        example = str(raw.get("example") or "")
        if definition or example:
            meanings.append(
                Meaning(
                    part_of_speech=str(raw.get("partOfSpeech") or ""),
                    definition=definition if options.definition_count > 0 else "",
                    examples=[example] if example else [],
                )
            )

        translation = raw.get("translation")
        return ProviderEntry(
            word=item.original,
            meanings=meanings,
            translation=str(translation).strip() if translation else None,
            phonetic=raw.get("phonetic") or None,
        )
