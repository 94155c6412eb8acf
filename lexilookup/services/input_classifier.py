"""Classification of raw inputs into typed, deduplicated lookup items."""

from collections.abc import Iterable

from lexilookup.models import ItemKind, LookupItem, LookupResult
from lexilookup.utils import contains_hangul, is_hyphenated_compound, normalize_text, split_tokens

TERMINAL_PUNCTUATION = (".", "!", "?")
MIN_SENTENCE_TOKENS = 3
MIN_PHRASE_TOKENS = 2
MAX_PHRASE_TOKENS = 5


def detect_kind(text: str) -> ItemKind:
    """Detect the kind of a single trimmed input.

    Rules are applied in order:
    1. Any Hangul syllable -> NATIVE
    2. Terminal punctuation and at least 3 tokens -> SENTENCE
    3. 2-5 tokens that are not one hyphenated compound -> PHRASE
    4. Anything else -> WORD

    Args:
        text: Trimmed input text

    Returns:
        The detected ItemKind
    """
    if contains_hangul(text):
        return ItemKind.NATIVE

    token_count = len(split_tokens(text))

    if text.endswith(TERMINAL_PUNCTUATION) and token_count >= MIN_SENTENCE_TOKENS:
        return ItemKind.SENTENCE

    if MIN_PHRASE_TOKENS <= token_count <= MAX_PHRASE_TOKENS and not is_hyphenated_compound(text):
        return ItemKind.PHRASE

    return ItemKind.WORD


def classify(inputs: Iterable[str]) -> list[LookupItem]:
    """Turn raw input strings into deduplicated, typed lookup items.

    Inputs are trimmed and deduplicated case-insensitively; the first
    occurrence wins and keeps its original casing. ``input_index`` is the
    position in the deduplicated output.

    Args:
        inputs: Raw input strings

    Returns:
        Lookup items in original order
    """
    items: list[LookupItem] = []
    seen: set[str] = set()

    for raw in inputs:
        original = raw.strip()
        if not original:
            continue

        normalized = normalize_text(original)
        if normalized in seen:
            continue
        seen.add(normalized)

        items.append(
            LookupItem(
                original=original,
                normalized=normalized,
                kind=detect_kind(original),
                input_index=len(items),
            )
        )

    return items


def type_stats(entries: Iterable[LookupItem | LookupResult]) -> dict[str, int]:
    """Count items or results per kind.

    Args:
        entries: Lookup items or results

    Returns:
        Dict with total, words, phrases, sentences and native counts
    """
    stats = {"total": 0, "words": 0, "phrases": 0, "sentences": 0, "native": 0}
    keys = {
        ItemKind.WORD: "words",
        ItemKind.PHRASE: "phrases",
        ItemKind.SENTENCE: "sentences",
        ItemKind.NATIVE: "native",
    }
    for entry in entries:
        stats["total"] += 1
        stats[keys[entry.kind]] += 1
    return stats
