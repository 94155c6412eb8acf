"""Pytest configuration and shared fixtures."""

import threading

import pytest

from lexilookup.config import LexiLookupConfig
from lexilookup.models import (
    ItemKind,
    LookupItem,
    LookupOptions,
    Meaning,
    ProviderEntry,
    ResultSource,
)
from lexilookup.services.retry_executor import is_retryable_error


@pytest.fixture
def test_config():
    """Provide a test configuration with no delays and no credentials."""
    return LexiLookupConfig(
        dictionary_api_url="https://dictionary.test/api/v2/entries/en",
        oxford_api_url="https://oxford.test/api/v2",
        primary_retry_delay=0.0,
        leveled_retry_delay=0.0,
        generative_retry_delay=0.0,
        translation_retry_delay=0.0,
        inter_batch_delay=0.0,
        request_timeout=1.0,
    )


@pytest.fixture
def default_options():
    """Provide default lookup options."""
    return LookupOptions()


@pytest.fixture
def make_item():
    """Factory fixture for creating LookupItem instances with sensible defaults."""

    def _make(original="apple", kind=ItemKind.WORD, input_index=0, normalized=None):
        return LookupItem(
            original=original,
            normalized=normalized if normalized is not None else original.strip().lower(),
            kind=kind,
            input_index=input_index,
        )

    return _make


def make_entry(word="apple", definition="a round fruit", translation=None):
    """Build a ProviderEntry with a single meaning."""
    return ProviderEntry(
        word=word,
        meanings=[Meaning(part_of_speech="noun", definition=definition)],
        translation=translation,
    )


class StubProvider:
    """A real DictionaryProvider implementation driven by a list of outcomes.

    Each call to ``fetch`` consumes the next outcome: an exception instance is
    raised, anything else is returned. The last outcome repeats once the list
    is exhausted.
    """

    def __init__(
        self,
        name="Stub",
        source=ResultSource.PRIMARY_LEXICON,
        kinds=(ItemKind.WORD, ItemKind.PHRASE),
        outcomes=None,
        available=True,
        max_retries=2,
        retry_delay=0.0,
        entry_factory=None,
    ):
        self._name = name
        self._source = source
        self._kinds = set(kinds)
        self._outcomes = list(outcomes) if outcomes is not None else [{"word": "apple"}]
        self._available = available
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._entry_factory = entry_factory or (lambda raw, item: make_entry(word=item.original))
        self._lock = threading.Lock()
        self.fetch_calls = []

    @property
    def name(self):
        return self._name

    @property
    def source(self):
        return self._source

    @property
    def max_retries(self):
        return self._max_retries

    @property
    def retry_delay(self):
        return self._retry_delay

    def is_available(self):
        return self._available

    def supports(self, item, options):
        return item.kind in self._kinds

    def is_retryable(self, error):
        return is_retryable_error(error)

    def fetch(self, item, options):
        with self._lock:
            index = min(len(self.fetch_calls), len(self._outcomes) - 1)
            self.fetch_calls.append(item)
        outcome = self._outcomes[index]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def transform(self, raw, item, options):
        return self._entry_factory(raw, item)


@pytest.fixture
def stub_provider():
    """Factory fixture for StubProvider instances."""
    return StubProvider


class RecordingProgress:
    """A real ProgressCallback implementation that records all calls for assertion."""

    def __init__(self):
        self.starts = []
        self.progresses = []
        self.completes = 0

    def on_start(self, total: int, description: str) -> None:
        self.starts.append((total, description))

    def on_progress(self, progress) -> None:
        self.progresses.append(progress)

    def on_complete(self) -> None:
        self.completes += 1


@pytest.fixture
def recording_progress():
    """Provide a progress callback that records all calls for assertion."""
    return RecordingProgress()
