"""Resolution of one lookup item through the ordered provider chain."""

import logging

from lexilookup.config import LexiLookupConfig
from lexilookup.interfaces import DictionaryProvider
from lexilookup.models import (
    ItemKind,
    LookupItem,
    LookupOptions,
    LookupResult,
    ProviderFailed,
    ProviderNotFound,
    ProviderResult,
    ProviderSuccess,
    ResultSource,
)

from .providers import (
    FreeDictionaryProvider,
    GenerativeProvider,
    OxfordProvider,
    TranslationProvider,
    create_llm_client,
)
from .retry_executor import RetryExecutor

NOT_FOUND_MESSAGE = "Not found in dictionary"
SENTENCE_UNSUPPORTED_MESSAGE = "Sentence translation unsupported"
TRANSLATION_NOT_CONFIGURED_MESSAGE = (
    "Translation requires a generative API key (set GEMINI_API_KEY)"
)
TRANSLATION_NOT_FOUND_MESSAGE = "Translation not found"


class ProviderChain:
    """Resolve items by trying providers in order until one succeeds.

    ``resolve`` never raises: every outcome, including unexpected faults,
    is encoded in the returned LookupResult.
    """

    def __init__(
        self,
        lexical_providers: list[DictionaryProvider],
        translation_provider: DictionaryProvider | None = None,
        retry_executor: RetryExecutor | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize the provider chain.

        Args:
            lexical_providers: Providers for words, phrases and sentences, in order
            translation_provider: Provider for native-language items
            retry_executor: Executor wrapping every provider call
            logger: Logger for chain decisions (defaults to the module logger)
        """
        self.lexical_providers = list(lexical_providers)
        self.translation_provider = translation_provider
        self.retry_executor = retry_executor or RetryExecutor()
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: LexiLookupConfig, logger: logging.Logger | None = None) -> "ProviderChain":
        """Build the standard Primary -> Leveled -> Generative chain.

        Args:
            config: Configuration with endpoints, credentials and retry budgets
            logger: Optional logger shared by the chain and its executor

        Returns:
            Configured ProviderChain
        """
        client = create_llm_client(config)

        lexical_providers = [
            FreeDictionaryProvider(
                api_url=config.dictionary_api_url,
                timeout=config.request_timeout,
                max_retries=config.primary_max_retries,
                retry_delay=config.primary_retry_delay,
            ),
            OxfordProvider(
                app_id=config.oxford_app_id,
                app_key=config.oxford_app_key,
                api_url=config.oxford_api_url,
                timeout=config.request_timeout,
                max_retries=config.leveled_max_retries,
                retry_delay=config.leveled_retry_delay,
            ),
            GenerativeProvider(
                client=client,
                model=config.generative_model,
                native_language=config.native_language,
                max_retries=config.generative_max_retries,
                retry_delay=config.generative_retry_delay,
            ),
        ]
        translation_provider = TranslationProvider(
            client=client,
            model=config.generative_model,
            native_language=config.native_language,
            target_language=config.target_language,
            max_retries=config.translation_max_retries,
            retry_delay=config.translation_retry_delay,
        )

        return cls(
            lexical_providers=lexical_providers,
            translation_provider=translation_provider,
            retry_executor=RetryExecutor(logger=logger),
            logger=logger,
        )

    def resolve(self, item: LookupItem, options: LookupOptions) -> LookupResult:
        """Resolve one item into a LookupResult.

        Args:
            item: Classified item
            options: Request options

        Returns:
            Exactly one LookupResult for the item
        """
        try:
            if item.kind is ItemKind.NATIVE:
                return self._resolve_native(item, options)
            return self._resolve_lexical(item, options)
        except Exception as e:
            self._logger.exception(f"[{item.original}] Unexpected error during lookup")
            return LookupResult.failure(item, f"Unexpected error: {e}", source=ResultSource.ERROR)

    def _resolve_native(self, item: LookupItem, options: LookupOptions) -> LookupResult:
        provider = self.translation_provider
        if provider is None or not provider.is_available():
            return LookupResult.failure(
                item, TRANSLATION_NOT_CONFIGURED_MESSAGE, source=ResultSource.ERROR
            )

        outcome = self._attempt(provider, item, options)

        if isinstance(outcome, ProviderSuccess):
            return LookupResult.from_entry(item, outcome.entry, provider.source)
        if isinstance(outcome, ProviderFailed):
            return LookupResult.failure(
                item, f"Translation failed: {outcome.message}", source=ResultSource.ERROR
            )
        return LookupResult.failure(item, TRANSLATION_NOT_FOUND_MESSAGE)

    def _resolve_lexical(self, item: LookupItem, options: LookupOptions) -> LookupResult:
        last_failure: ProviderFailed | None = None

        for provider in self.lexical_providers:
            if not provider.supports(item, options):
                continue
            if not provider.is_available():
                self._logger.debug(f"[{item.original}] Skipping {provider.name}: not configured")
                continue

            outcome = self._attempt(provider, item, options)

            if isinstance(outcome, ProviderSuccess):
                self._logger.debug(f"[{item.original}] Resolved by {provider.name}")
                return LookupResult.from_entry(item, outcome.entry, provider.source)

            if isinstance(outcome, ProviderFailed):
                self._logger.warning(f"[{item.original}] {provider.name} failed: {outcome.message}")
                last_failure = outcome
            else:
                self._logger.debug(f"[{item.original}] {provider.name}: {outcome.reason}")
                last_failure = None

        message = (
            SENTENCE_UNSUPPORTED_MESSAGE if item.kind is ItemKind.SENTENCE else NOT_FOUND_MESSAGE
        )
        if last_failure is not None:
            message = f"{message} ({last_failure.message})"
        return LookupResult.failure(item, message)

    def _attempt(
        self, provider: DictionaryProvider, item: LookupItem, options: LookupOptions
    ) -> ProviderResult:
        """Run one provider (with retries) and classify the outcome."""
        try:
            raw = self.retry_executor.run(
                lambda: provider.fetch(item, options),
                max_retries=provider.max_retries,
                delay=provider.retry_delay,
                is_retryable=provider.is_retryable,
                description=f"{provider.name} lookup for '{item.original}'",
            )
        except Exception as e:
            return ProviderFailed(e)

        if raw is None:
            return ProviderNotFound()

        entry = provider.transform(raw, item, options)
        if entry is None:
            return ProviderNotFound("empty entry")

        accepted = entry.has_translation if item.kind is ItemKind.NATIVE else entry.has_meanings
        if not accepted:
            return ProviderNotFound("entry failed validation")

        return ProviderSuccess(entry)
