"""Dictionary provider implementations."""

from .free_dictionary_provider import FreeDictionaryProvider
from .generative_provider import GenerativeProvider
from .llm_client import create_llm_client
from .oxford_provider import OxfordProvider
from .translation_provider import TranslationProvider

__all__ = [
    "FreeDictionaryProvider",
    "OxfordProvider",
    "GenerativeProvider",
    "TranslationProvider",
    "create_llm_client",
]
