"""Configuration classes for lexilookup."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LexiLookupConfig:
    """Immutable configuration for lookup operations.

    Built once at process start and passed explicitly into every component.
    Frozen so concurrent item resolutions can share it without locking.
    """

    # Primary lexicon (Free Dictionary API)
    dictionary_api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    primary_max_retries: int = 2
    primary_retry_delay: float = 0.5  # Seconds between attempts

    # Leveled lexicon (Oxford Dictionaries API)
    oxford_api_url: str = "https://od-api-sandbox.oxforddictionaries.com/api/v2"
    oxford_app_id: str = ""
    oxford_app_key: str = ""
    leveled_max_retries: int = 2
    leveled_retry_delay: float = 0.5

    # Generative fallback and translation (OpenAI-compatible endpoint)
    generative_api_key: str = ""
    generative_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    generative_model: str = "gemini-2.5-flash-lite"
    generative_max_retries: int = 2
    generative_retry_delay: float = 0.5
    translation_max_retries: int = 2
    translation_retry_delay: float = 0.25

    # Languages used in prompts
    native_language: str = "Korean"
    target_language: str = "English"

    # Network settings
    request_timeout: float = 10.0  # Seconds per provider call

    # Batch settings
    batch_size: int = 10  # Items resolved concurrently per batch
    inter_batch_delay: float = 1.0  # Seconds to wait between batches
    max_inputs: int = 500

    def __post_init__(self):
        """Validate numeric settings."""
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {self.batch_size}")
        if self.max_inputs < 1:
            raise ValueError(f"max_inputs must be at least 1, got {self.max_inputs}")
        for name in (
            "primary_retry_delay",
            "leveled_retry_delay",
            "generative_retry_delay",
            "translation_retry_delay",
            "inter_batch_delay",
            "request_timeout",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        for name in (
            "primary_max_retries",
            "leveled_max_retries",
            "generative_max_retries",
            "translation_max_retries",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @property
    def has_oxford_credentials(self) -> bool:
        """Check if both Oxford credentials are configured."""
        return bool(self.oxford_app_id and self.oxford_app_key)

    @property
    def has_generative_credentials(self) -> bool:
        """Check if the generative API key is configured."""
        return bool(self.generative_api_key)
