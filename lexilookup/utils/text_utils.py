"""Text processing utilities."""

import re

_HYPHEN_COMPOUND = re.compile(r"^\w+(-\w+)+$")
_CODE_FENCE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)


def normalize_text(text: str) -> str:
    """Trim and lowercase text for lookups and deduplication.

    Args:
        text: Raw input text

    Returns:
        Normalized text
    """
    return text.strip().lower()


def split_tokens(text: str) -> list[str]:
    """Split text into whitespace-separated tokens."""
    return text.split()


def contains_hangul(text: str) -> bool:
    """Check whether text contains any Hangul syllable.

    Args:
        text: Input text

    Returns:
        True if any character is in the Hangul syllables block
    """
    return any("\uac00" <= char <= "\ud7a3" for char in text)


def is_hyphenated_compound(text: str) -> bool:
    """Check whether text is a single hyphen-joined compound (e.g. mother-in-law)."""
    return bool(_HYPHEN_COMPOUND.match(text))


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence markers from model output.

    Args:
        text: Raw model output, possibly wrapped in ```json ... ```

    Returns:
        Text with fence markers removed and whitespace trimmed
    """
    return _CODE_FENCE.sub("", text).strip()


def take_unique(values, limit: int) -> list[str]:
    """Collect up to ``limit`` distinct non-empty strings, preserving order.

    Args:
        values: Iterable of candidate strings
        limit: Maximum number of strings to keep

    Returns:
        List of at most ``limit`` strings
    """
    collected: list[str] = []
    if limit <= 0:
        return collected
    for value in values:
        if not isinstance(value, str) or not value.strip():
            continue
        if value not in collected:
            collected.append(value)
        if len(collected) >= limit:
            break
    return collected
