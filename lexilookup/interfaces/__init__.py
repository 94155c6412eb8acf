"""Interface protocols for lexilookup."""

from .dictionary_provider import DictionaryProvider
from .progress import ProgressCallback

__all__ = ["DictionaryProvider", "ProgressCallback"]
