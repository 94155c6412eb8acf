"""Prompt templates used for the generative providers."""

import json

from lexilookup.models import CefrLevel, ItemKind, LookupItem, LookupOptions

CEFR_INSTRUCTIONS = {
    CefrLevel.A2: (
        "Use very basic vocabulary (A2 level). Explain with simple, everyday words that "
        "elementary learners understand. Keep sentences short (5-10 words)."
    ),
    CefrLevel.B1: (
        "Use common vocabulary (B1 level). Explain with clear, everyday language that "
        "intermediate learners use. Use moderate sentence length (10-15 words)."
    ),
    CefrLevel.B2: (
        "Use varied vocabulary (B2 level). Provide detailed explanations with a wider range "
        "of words. Use natural, fluent expressions."
    ),
    CefrLevel.C1: (
        "Use sophisticated vocabulary (C1 level). Give precise, academic definitions with "
        "advanced terminology and complex structures."
    ),
}

NOT_FOUND_INSTRUCTION = 'If you do not know it, return exactly: {"error": "Definition not found"}'


def build_definition_prompt(item: LookupItem, options: LookupOptions, native_language: str) -> str:
    """Build the dictionary-entry prompt for a word or phrase."""
    label = "idiom/phrase" if item.kind is ItemKind.PHRASE else "word"
    part_of_speech = "idiom" if item.kind is ItemKind.PHRASE else "noun/verb/adjective/etc"
    shape = {
        "word": item.original,
        "phonetic": "pronunciation if available",
        "meanings": [
            {
                "partOfSpeech": part_of_speech,
                "definitions": [
                    {"definition": "English definition", "example": "Example sentence"}
                ],
                "synonyms": ["synonym1", "synonym2"],
                "antonyms": ["antonym1", "antonym2"],
                "related": ["related1", "related2"],
            }
        ],
        "nativeMeaning": f"{native_language} translation",
    }

    return (
        f"You are a dictionary API for English learners at CEFR {options.cefr_level.value} level. "
        f"{CEFR_INSTRUCTIONS[options.cefr_level]}\n\n"
        f"Provide the definition of the following English {label} in JSON format.\n\n"
        f'{label.capitalize()}: "{item.original}"\n\n'
        "Return ONLY a valid JSON object (no markdown, no explanation) with this exact structure:\n"
        f"{json.dumps(shape, indent=2, ensure_ascii=False)}\n\n"
        f"Provide {options.meaning_count} meaning(s) if available, each with up to "
        f"{max(options.definition_count, 1)} definition(s). {NOT_FOUND_INSTRUCTION}"
    )


def build_sentence_prompt(item: LookupItem, options: LookupOptions, native_language: str) -> str:
    """Build the similar-expression prompt for a full sentence."""
    shape = {
        "original": item.original,
        "examples": ["Example of the sentence used in context"],
        "similarExpressions": ["The most commonly used similar expression"],
        "translation": f"{native_language} translation of the sentence",
    }

    return (
        "You are an English learning assistant for learners at CEFR "
        f"{options.cefr_level.value} level. {CEFR_INSTRUCTIONS[options.cefr_level]}\n\n"
        "For the following English sentence, provide the most commonly used similar "
        "expression and a translation.\n\n"
        f'Sentence: "{item.original}"\n\n'
        "Return ONLY a valid JSON object (no markdown, no explanation) with this exact structure:\n"
        f"{json.dumps(shape, indent=2, ensure_ascii=False)}\n\n"
        "Requirements:\n"
        "- Similar expressions must be short, simple and practical (5-10 words)\n"
        "- Use everyday conversational English\n"
        f"- Provide at most {max(options.synonym_count, 1)} similar expression(s)"
    )


def build_translation_prompt(item: LookupItem, native_language: str, target_language: str) -> str:
    """Build the translation prompt for a native-language term."""
    shape = {
        "translation": f"Most common {target_language} equivalent",
        "phonetic": f"Pronunciation of the {target_language} equivalent",
        "partOfSpeech": "noun/verb/adjective/etc",
        "definition": f"Short {target_language} definition",
        "example": f"{target_language} example sentence",
    }

    return (
        f"Translate the following {native_language} term into {target_language}.\n\n"
        f'Term: "{item.original}"\n\n'
        "Return ONLY a valid JSON object (no markdown, no explanation) with this exact structure:\n"
        f"{json.dumps(shape, indent=2, ensure_ascii=False)}\n\n"
        'If the term cannot be translated, return exactly: {"error": "Translation not found"}'
    )
