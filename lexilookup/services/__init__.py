"""Business logic services for lexilookup."""

from .batch_scheduler import BatchScheduler
from .input_classifier import classify, detect_kind, type_stats
from .provider_chain import ProviderChain
from .providers import FreeDictionaryProvider, GenerativeProvider, OxfordProvider, TranslationProvider
from .request_validation import validate_request
from .result_aggregator import ResultAggregator
from .retry_executor import RetryExecutor, is_retryable_error

__all__ = [
    "RetryExecutor",
    "is_retryable_error",
    "classify",
    "detect_kind",
    "type_stats",
    "FreeDictionaryProvider",
    "OxfordProvider",
    "GenerativeProvider",
    "TranslationProvider",
    "ProviderChain",
    "BatchScheduler",
    "ResultAggregator",
    "validate_request",
]
