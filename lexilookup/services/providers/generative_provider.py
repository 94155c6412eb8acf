"""LLM-backed dictionary provider (generative fallback)."""

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
from lexilookup.utils import take_unique

from .llm_client import request_completion
from .llm_json import decode_json_payload
from .prompts import build_definition_prompt, build_sentence_prompt

logger = logging.getLogger(__name__)


class GenerativeProvider:
    """Definitions, idioms and sentence rewrites from a language model.

    Implements DictionaryProvider protocol. Calls cost quota, so this is the
    last provider in the lexical chain.
    """

    SUPPORTED_KINDS = frozenset({ItemKind.WORD, ItemKind.PHRASE, ItemKind.SENTENCE})

    def __init__(
        self,
        client: OpenAI | None,
        model: str = "gemini-2.5-flash-lite",
        native_language: str = "Korean",
        max_retries: int = 2,
        retry_delay: float = 0.5,
    ):
        """Initialize with a chat client and retry policy.

        Args:
            client: OpenAI-compatible client, or None when no key is configured.
            model: Model name.
            native_language: Language used for native meanings and translations.
            max_retries: Retries allowed after the first attempt.
            retry_delay: Seconds to wait between attempts.
        """
        self._client = client
        self._model = model
        self._native_language = native_language
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    @property
    def name(self) -> str:
        return "Generative API"

    @property
    def source(self) -> ResultSource:
        return ResultSource.GENERATIVE_FALLBACK

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def retry_delay(self) -> float:
        return self._retry_delay

    def is_available(self) -> bool:
        return self._client is not None

    def supports(self, item: LookupItem, options: LookupOptions) -> bool:
        return item.kind in self.SUPPORTED_KINDS

    def is_retryable(self, error: Exception) -> bool:
        return is_retryable_error(error)

    def fetch(self, item: LookupItem, options: LookupOptions) -> dict | None:
        """Ask the model for a dictionary entry or sentence rewrite.

        Malformed output and explicit ``{"error": ...}`` payloads are treated
        as not found, so deterministic bad output is never retried.

        Raises:
            ProviderUnavailableError: If no client is configured or the key is rejected.
            ProviderError: On other API failures.
        """
        if self._client is None:
            raise ProviderUnavailableError("Generative API key is not configured")

        if item.kind is ItemKind.SENTENCE:
            prompt = build_sentence_prompt(item, options, self._native_language)
        else:
            prompt = build_definition_prompt(item, options, self._native_language)

        text = request_completion(self._client, self._model, prompt)

        try:
            payload = decode_json_payload(text)
        except MalformedPayloadError as e:
            logger.warning(f"[{item.original}] Generative API: {e}")
            return None

        if payload.get("error"):
            logger.debug(f"[{item.original}] Generative API: {payload['error']}")
            return None

        return payload

    def transform(self, raw: Any, item: LookupItem, options: LookupOptions) -> ProviderEntry:
        """Convert the model's JSON into a normalized entry."""
        if item.kind is ItemKind.SENTENCE:
            return self._transform_sentence(raw, item, options)

        meanings = []
        for meaning in _dicts(raw.get("meanings"))[: options.meaning_count]:
            definitions = _dicts(meaning.get("definitions"))[: max(options.definition_count, 1)]

            definition = ""
            if options.meaning_display.includes_english and options.definition_count > 0:
                definition = "; ".join(
                    str(d["definition"]) for d in definitions if d.get("definition")
                )

            meanings.append(
                Meaning(
                    part_of_speech=str(meaning.get("partOfSpeech") or ""),
                    definition=definition,
                    examples=[str(d["example"]) for d in definitions if d.get("example")],
                    synonyms=take_unique(_strings(meaning.get("synonyms")), options.synonym_count),
                    antonyms=take_unique(_strings(meaning.get("antonyms")), options.antonym_count),
                    related=take_unique(_strings(meaning.get("related")), options.related_count),
                )
            )

        translation = None
        if options.meaning_display.includes_native and raw.get("nativeMeaning"):
            translation = str(raw["nativeMeaning"])

        return ProviderEntry(
            word=str(raw.get("word") or item.original),
            meanings=meanings,
            translation=translation,
            phonetic=raw.get("phonetic") or None,
        )

    def _transform_sentence(self, raw: dict, item: LookupItem, options: LookupOptions) -> ProviderEntry:
        similar = take_unique(_strings(raw.get("similarExpressions")), max(options.synonym_count, 1))

        meanings = []
        if similar:
            meanings.append(
                Meaning(
                    part_of_speech="sentence",
                    definition="; ".join(similar),
                    examples=take_unique(_strings(raw.get("examples")), 2),
                )
            )

        translation = None
        if options.meaning_display.includes_native and raw.get("translation"):
            translation = str(raw["translation"])

        return ProviderEntry(
            word=str(raw.get("original") or item.original),
            meanings=meanings,
            translation=translation,
        )


def _dicts(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]


def _strings(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, str)]
