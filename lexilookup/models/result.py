"""Data models for lookup results and responses."""

from dataclasses import dataclass, field
from enum import Enum

from .item import ItemKind, LookupItem


class ResultSource(str, Enum):
    """Which provider produced a result."""

    PRIMARY_LEXICON = "PrimaryLexicon"
    LEVELED_LEXICON = "LeveledLexicon"
    GENERATIVE_FALLBACK = "GenerativeFallback"
    TRANSLATION_FALLBACK = "TranslationFallback"
    NONE = "None"
    ERROR = "Error"


@dataclass(frozen=True)
class Meaning:
    """One sense of a looked-up item."""

    part_of_speech: str
    definition: str
    examples: list[str] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)
    related: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "partOfSpeech": self.part_of_speech,
            "definition": self.definition,
            "examples": list(self.examples),
            "synonyms": list(self.synonyms),
            "antonyms": list(self.antonyms),
            "related": list(self.related),
        }


@dataclass(frozen=True)
class ProviderEntry:
    """Normalized payload produced by a provider's transform step."""

    word: str
    meanings: list[Meaning] = field(default_factory=list)
    translation: str | None = None
    phonetic: str | None = None

    @property
    def has_meanings(self) -> bool:
        return bool(self.word and self.word.strip()) and len(self.meanings) > 0

    @property
    def has_translation(self) -> bool:
        return bool(self.translation and self.translation.strip())


@dataclass(frozen=True)
class LookupResult:
    """Final outcome for one lookup item."""

    word: str
    kind: ItemKind
    meanings: list[Meaning]
    source: ResultSource
    success: bool
    input_index: int
    translation: str | None = None
    error: str | None = None
    phonetic: str | None = None

    @classmethod
    def from_entry(cls, item: LookupItem, entry: ProviderEntry, source: ResultSource) -> "LookupResult":
        """Build a successful result from an accepted provider entry."""
        return cls(
            word=entry.word or item.original,
            kind=item.kind,
            meanings=list(entry.meanings),
            source=source,
            success=True,
            input_index=item.input_index,
            translation=entry.translation,
            phonetic=entry.phonetic,
        )

    @classmethod
    def failure(cls, item: LookupItem, message: str, source: ResultSource = ResultSource.NONE) -> "LookupResult":
        """Build a failed result for an item."""
        return cls(
            word=item.original,
            kind=item.kind,
            meanings=[],
            source=source,
            success=False,
            input_index=item.input_index,
            error=message,
        )

    def to_dict(self) -> dict:
        data = {
            "word": self.word,
            "kind": self.kind.value,
            "meanings": [meaning.to_dict() for meaning in self.meanings],
            "source": self.source.value,
            "success": self.success,
            "inputIndex": self.input_index,
        }
        if self.translation is not None:
            data["translation"] = self.translation
        if self.phonetic:
            data["phonetic"] = self.phonetic
        if self.error is not None:
            data["error"] = self.error
        return data

    def __str__(self) -> str:
        status = self.source.value if self.success else f"failed: {self.error}"
        return f"{self.word} [{status}]"


@dataclass(frozen=True)
class BatchProgress:
    """Cumulative progress snapshot emitted after each batch."""

    processed: int
    total: int
    percentage: int


@dataclass
class LookupResponse:
    """Aggregated response for a whole lookup request."""

    data: list[LookupResult]
    total_inputs: int
    processed_inputs: int
    failed_inputs: int
    type_stats: dict[str, int] = field(default_factory=dict)
    elapsed_time: float = 0.0

    @property
    def processing_time(self) -> str:
        return f"{self.elapsed_time:.1f}s"

    def to_dict(self) -> dict:
        return {
            "success": True,
            "data": [result.to_dict() for result in self.data],
            "meta": {
                "totalInputs": self.total_inputs,
                "processedInputs": self.processed_inputs,
                "failedInputs": self.failed_inputs,
                "typeStats": dict(self.type_stats),
                "processingTime": self.processing_time,
            },
        }

    def __str__(self) -> str:
        return (
            f"LookupResponse(total={self.total_inputs}, "
            f"processed={self.processed_inputs}, failed={self.failed_inputs}, "
            f"time={self.processing_time})"
        )
