"""Utility functions for lexilookup."""

from .file_utils import read_inputs_file
from .text_utils import (
    contains_hangul,
    is_hyphenated_compound,
    normalize_text,
    split_tokens,
    strip_code_fences,
    take_unique,
)

__all__ = [
    "read_inputs_file",
    "contains_hangul",
    "is_hyphenated_compound",
    "normalize_text",
    "split_tokens",
    "strip_code_fences",
    "take_unique",
]
