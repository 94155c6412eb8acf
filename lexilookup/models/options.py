"""Data models for per-request lookup options."""

from dataclasses import dataclass
from enum import Enum

from lexilookup.exceptions import CallerValidationError


class MeaningDisplay(str, Enum):
    """Which language the meanings should be shown in."""

    ENGLISH_ONLY = "english-only"
    NATIVE_ONLY = "native-only"
    BOTH = "both"

    @property
    def includes_english(self) -> bool:
        return self is not MeaningDisplay.NATIVE_ONLY

    @property
    def includes_native(self) -> bool:
        return self is not MeaningDisplay.ENGLISH_ONLY


class CefrLevel(str, Enum):
    """CEFR proficiency tier used to pick definition complexity."""

    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"


# Wire names accepted for meaningDisplay
_DISPLAY_ALIASES = {
    "english-only": MeaningDisplay.ENGLISH_ONLY,
    "native-only": MeaningDisplay.NATIVE_ONLY,
    "korean-only": MeaningDisplay.NATIVE_ONLY,
    "both": MeaningDisplay.BOTH,
}

# Wire name -> (field name, allowed range)
_COUNT_FIELDS = {
    "meanings": ("meaning_count", range(1, 3)),
    "definitions": ("definition_count", range(0, 3)),
    "synonyms": ("synonym_count", range(0, 3)),
    "antonyms": ("antonym_count", range(0, 3)),
    "related": ("related_count", range(0, 3)),
}


@dataclass(frozen=True)
class LookupOptions:
    """User-selected options, fixed for the whole request."""

    meaning_count: int = 2
    definition_count: int = 1
    synonym_count: int = 2
    antonym_count: int = 2
    related_count: int = 0
    meaning_display: MeaningDisplay = MeaningDisplay.BOTH
    cefr_level: CefrLevel = CefrLevel.B1

    @classmethod
    def from_dict(cls, data: object) -> "LookupOptions":
        """Parse options from their wire form.

        Missing count fields fall back to defaults; present ones must be
        integers in range.

        Args:
            data: Mapping with keys meanings, definitions, synonyms, antonyms,
                related, meaningDisplay and cefrLevel

        Returns:
            Parsed LookupOptions

        Raises:
            CallerValidationError: If the shape or any value is invalid
        """
        if not isinstance(data, dict):
            raise CallerValidationError("INVALID_REQUEST", "options must be an object")

        values: dict = {}
        for wire_name, (field_name, allowed) in _COUNT_FIELDS.items():
            if wire_name not in data:
                continue
            value = data[wire_name]
            # bool is an int subclass but never a valid count
            if isinstance(value, bool) or not isinstance(value, int):
                raise CallerValidationError(
                    "INVALID_REQUEST", f"options.{wire_name} must be a number"
                )
            if value not in allowed:
                raise CallerValidationError(
                    "VALIDATION_ERROR",
                    f"options.{wire_name} must be between {allowed.start} and {allowed.stop - 1}",
                )
            values[field_name] = value

        display = data.get("meaningDisplay")
        if display is not None:
            if not isinstance(display, str):
                raise CallerValidationError(
                    "INVALID_REQUEST", "options.meaningDisplay must be a string"
                )
            if display not in _DISPLAY_ALIASES:
                raise CallerValidationError(
                    "VALIDATION_ERROR",
                    f"options.meaningDisplay must be one of {', '.join(sorted(_DISPLAY_ALIASES))}",
                )
            values["meaning_display"] = _DISPLAY_ALIASES[display]

        level = data.get("cefrLevel")
        if level is not None:
            if not isinstance(level, str):
                raise CallerValidationError("INVALID_REQUEST", "options.cefrLevel must be a string")
            try:
                values["cefr_level"] = CefrLevel(level.upper())
            except ValueError:
                raise CallerValidationError(
                    "VALIDATION_ERROR",
                    f"options.cefrLevel must be one of {', '.join(c.value for c in CefrLevel)}",
                ) from None

        return cls(**values)
