"""Data models for classified lookup items."""

from dataclasses import dataclass
from enum import Enum


class ItemKind(str, Enum):
    """Kind of a lookup item, assigned by the input classifier."""

    WORD = "word"
    PHRASE = "phrase"
    SENTENCE = "sentence"
    NATIVE = "native"


@dataclass(frozen=True)
class LookupItem:
    """A single deduplicated input ready for lookup."""

    original: str  # Trimmed input as the user typed it
    normalized: str  # Lowercased form used for lookups and deduplication
    kind: ItemKind
    input_index: int  # Position in the deduplicated input sequence

    def __str__(self) -> str:
        return f"{self.original} ({self.kind.value})"
