"""Data models for lexilookup."""

from .item import ItemKind, LookupItem
from .options import CefrLevel, LookupOptions, MeaningDisplay
from .provider_result import ProviderFailed, ProviderNotFound, ProviderResult, ProviderSuccess
from .result import (
    BatchProgress,
    LookupResponse,
    LookupResult,
    Meaning,
    ProviderEntry,
    ResultSource,
)

__all__ = [
    "ItemKind",
    "LookupItem",
    "LookupOptions",
    "MeaningDisplay",
    "CefrLevel",
    "Meaning",
    "ProviderEntry",
    "ResultSource",
    "LookupResult",
    "BatchProgress",
    "LookupResponse",
    "ProviderResult",
    "ProviderSuccess",
    "ProviderNotFound",
    "ProviderFailed",
]
