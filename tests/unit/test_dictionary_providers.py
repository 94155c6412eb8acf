"""Tests for the HTTP dictionary providers."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from lexilookup.exceptions import ProviderError, ProviderUnavailableError
from lexilookup.models import CefrLevel, ItemKind, LookupOptions, MeaningDisplay, ResultSource
from lexilookup.services.providers import FreeDictionaryProvider, OxfordProvider
from lexilookup.services.providers.oxford_provider import filter_senses_by_level

FREE_DICTIONARY_GET = "lexilookup.services.providers.free_dictionary_provider.requests.get"
OXFORD_GET = "lexilookup.services.providers.oxford_provider.requests.get"


def _response(status_code=200, json_data=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


FREE_DICTIONARY_ENTRY = {
    "word": "bright",
    "phonetic": "/bɹaɪt/",
    "meanings": [
        {
            "partOfSpeech": "adjective",
            "definitions": [
                {
                    "definition": "Visually dazzling; luminous.",
                    "example": "a bright star",
                    "synonyms": ["luminous", "radiant"],
                    "antonyms": ["dim"],
                },
                {
                    "definition": "Intelligent.",
                    "example": "a bright student",
                    "synonyms": ["clever"],
                    "antonyms": [],
                },
            ],
            "synonyms": ["shining"],
            "antonyms": ["dull", "dark"],
        },
        {
            "partOfSpeech": "adverb",
            "definitions": [{"definition": "Brightly."}],
        },
        {
            "partOfSpeech": "noun",
            "definitions": [{"definition": "An artist's brush."}],
        },
    ],
}


@pytest.fixture
def free_dictionary():
    return FreeDictionaryProvider(api_url="https://dictionary.test/entries/en/", retry_delay=0)


@pytest.fixture
def oxford():
    return OxfordProvider(app_id="id", app_key="key", api_url="https://oxford.test/api/v2")


class TestFreeDictionaryFetch:
    """Tests for FreeDictionaryProvider.fetch."""

    def test_returns_first_entry(self, free_dictionary, make_item, default_options):
        with patch(FREE_DICTIONARY_GET, return_value=_response(json_data=[FREE_DICTIONARY_ENTRY])) as get:
            raw = free_dictionary.fetch(make_item("Bright"), default_options)

        assert raw["word"] == "bright"
        url = get.call_args[0][0]
        assert url == "https://dictionary.test/entries/en/bright"

    def test_quotes_phrases_in_url(self, free_dictionary, make_item, default_options):
        with patch(FREE_DICTIONARY_GET, return_value=_response(status_code=404)) as get:
            free_dictionary.fetch(make_item("give up", kind=ItemKind.PHRASE), default_options)

        assert get.call_args[0][0].endswith("/give%20up")

    def test_404_is_not_found(self, free_dictionary, make_item, default_options):
        with patch(FREE_DICTIONARY_GET, return_value=_response(status_code=404)):
            assert free_dictionary.fetch(make_item(), default_options) is None

    def test_server_error_raises_retryable(self, free_dictionary, make_item, default_options):
        with patch(FREE_DICTIONARY_GET, return_value=_response(status_code=500)):
            with pytest.raises(ProviderError) as exc_info:
                free_dictionary.fetch(make_item(), default_options)

        assert exc_info.value.retryable is True
        assert exc_info.value.status_code == 500

    def test_network_error_propagates(self, free_dictionary, make_item, default_options):
        with patch(FREE_DICTIONARY_GET, side_effect=requests.ConnectionError("down")):
            with pytest.raises(requests.ConnectionError):
                free_dictionary.fetch(make_item(), default_options)

    def test_invalid_json_is_not_found(self, free_dictionary, make_item, default_options):
        with patch(FREE_DICTIONARY_GET, return_value=_response(json_error=ValueError("bad"))):
            assert free_dictionary.fetch(make_item(), default_options) is None

    def test_empty_list_is_not_found(self, free_dictionary, make_item, default_options):
        with patch(FREE_DICTIONARY_GET, return_value=_response(json_data=[])):
            assert free_dictionary.fetch(make_item(), default_options) is None

    def test_supports_words_and_phrases_only(self, free_dictionary, make_item, default_options):
        assert free_dictionary.supports(make_item(kind=ItemKind.WORD), default_options)
        assert free_dictionary.supports(make_item(kind=ItemKind.PHRASE), default_options)
        assert not free_dictionary.supports(make_item(kind=ItemKind.SENTENCE), default_options)
        assert not free_dictionary.supports(make_item(kind=ItemKind.NATIVE), default_options)

    def test_always_available(self, free_dictionary):
        assert free_dictionary.is_available() is True
        assert free_dictionary.source is ResultSource.PRIMARY_LEXICON


class TestFreeDictionaryTransform:
    """Tests for FreeDictionaryProvider.transform."""

    def test_respects_meaning_count(self, free_dictionary, make_item):
        entry = free_dictionary.transform(
            FREE_DICTIONARY_ENTRY, make_item("bright"), LookupOptions(meaning_count=2)
        )

        assert entry.word == "bright"
        assert [m.part_of_speech for m in entry.meanings] == ["adjective", "adverb"]
        assert entry.phonetic == "/bɹaɪt/"

    def test_joins_definitions_up_to_count(self, free_dictionary, make_item):
        entry = free_dictionary.transform(
            FREE_DICTIONARY_ENTRY, make_item("bright"), LookupOptions(definition_count=2)
        )

        first = entry.meanings[0]
        assert first.definition == "Visually dazzling; luminous.; Intelligent."
        assert first.examples == ["a bright star", "a bright student"]

    def test_zero_definitions_leaves_definition_blank(self, free_dictionary, make_item):
        entry = free_dictionary.transform(
            FREE_DICTIONARY_ENTRY, make_item("bright"), LookupOptions(definition_count=0)
        )

        assert entry.meanings[0].definition == ""
        assert entry.has_meanings

    def test_native_only_hides_english_definition(self, free_dictionary, make_item):
        options = LookupOptions(meaning_display=MeaningDisplay.NATIVE_ONLY)
        entry = free_dictionary.transform(FREE_DICTIONARY_ENTRY, make_item("bright"), options)

        assert entry.meanings[0].definition == ""

    def test_collects_synonyms_across_definitions(self, free_dictionary, make_item):
        options = LookupOptions(synonym_count=2, antonym_count=2)
        entry = free_dictionary.transform(FREE_DICTIONARY_ENTRY, make_item("bright"), options)

        first = entry.meanings[0]
        assert first.synonyms == ["luminous", "radiant"]
        assert first.antonyms == ["dim", "dull"]
        assert first.related == []

    def test_zero_synonyms(self, free_dictionary, make_item):
        options = LookupOptions(synonym_count=0, antonym_count=0)
        entry = free_dictionary.transform(FREE_DICTIONARY_ENTRY, make_item("bright"), options)

        assert entry.meanings[0].synonyms == []
        assert entry.meanings[0].antonyms == []

    def test_phonetic_falls_back_to_phonetics_list(self, free_dictionary, make_item, default_options):
        raw = {"word": "cat", "phonetics": [{"audio": ""}, {"text": "/kæt/"}], "meanings": []}

        entry = free_dictionary.transform(raw, make_item("cat"), default_options)

        assert entry.phonetic == "/kæt/"
        assert not entry.has_meanings


OXFORD_RESPONSE = {
    "results": [
        {
            "id": "run",
            "word": "run",
            "lexicalEntries": [
                {
                    "lexicalCategory": {"id": "verb", "text": "Verb"},
                    "entries": [
                        {
                            "pronunciations": [
                                {"phoneticNotation": "respell", "phoneticSpelling": "run"},
                                {"phoneticNotation": "IPA", "phoneticSpelling": "rʌn"},
                            ],
                            "senses": [
                                {
                                    "definitions": ["move at a speed faster than a walk"],
                                    "registers": [{"id": "c1", "text": "C1"}],
                                },
                                {
                                    "definitions": ["move fast on foot"],
                                    "examples": [{"text": "the dog ran across the road"}],
                                    "registers": [{"id": "b1", "text": "B1"}],
                                    "synonyms": [{"text": "sprint"}, {"text": "dash"}, {"text": "race"}],
                                },
                            ],
                        }
                    ],
                },
                {
                    "lexicalCategory": {"id": "noun", "text": "Noun"},
                    "entries": [{"senses": [{"definitions": ["an act of running"]}]}],
                },
            ],
        }
    ]
}


class TestOxfordFetch:
    """Tests for OxfordProvider.fetch."""

    def test_sends_credentials(self, oxford, make_item, default_options):
        with patch(OXFORD_GET, return_value=_response(json_data=OXFORD_RESPONSE)) as get:
            raw = oxford.fetch(make_item("run"), default_options)

        assert raw is OXFORD_RESPONSE
        assert get.call_args[0][0] == "https://oxford.test/api/v2/entries/en-us/run"
        assert get.call_args[1]["headers"] == {"app_id": "id", "app_key": "key"}

    @pytest.mark.parametrize("status", [403, 414])
    def test_unavailable_statuses_are_not_retryable(self, oxford, make_item, default_options, status):
        with patch(OXFORD_GET, return_value=_response(status_code=status)):
            with pytest.raises(ProviderUnavailableError) as exc_info:
                oxford.fetch(make_item(), default_options)

        assert exc_info.value.retryable is False
        assert exc_info.value.status_code == status

    def test_server_error_is_retryable(self, oxford, make_item, default_options):
        with patch(OXFORD_GET, return_value=_response(status_code=503)):
            with pytest.raises(ProviderError) as exc_info:
                oxford.fetch(make_item(), default_options)

        assert exc_info.value.retryable is True

    def test_404_is_not_found(self, oxford, make_item, default_options):
        with patch(OXFORD_GET, return_value=_response(status_code=404)):
            assert oxford.fetch(make_item(), default_options) is None

    def test_empty_results_is_not_found(self, oxford, make_item, default_options):
        with patch(OXFORD_GET, return_value=_response(json_data={"results": []})):
            assert oxford.fetch(make_item(), default_options) is None

    def test_missing_credentials(self, make_item, default_options):
        provider = OxfordProvider(app_id="", app_key="")

        assert provider.is_available() is False
        with pytest.raises(ProviderUnavailableError):
            provider.fetch(make_item(), default_options)

    def test_skipped_when_english_not_shown(self, oxford, make_item):
        options = LookupOptions(meaning_display=MeaningDisplay.NATIVE_ONLY)

        assert oxford.supports(make_item(), options) is False
        assert oxford.supports(make_item(), LookupOptions()) is True


class TestOxfordTransform:
    """Tests for OxfordProvider.transform."""

    def test_picks_sense_matching_level(self, oxford, make_item):
        entry = oxford.transform(OXFORD_RESPONSE, make_item("run"), LookupOptions(cefr_level=CefrLevel.B1))

        verb = entry.meanings[0]
        assert verb.part_of_speech == "Verb"
        assert verb.definition == "move fast on foot"
        assert verb.examples == ["the dog ran across the road"]
        assert verb.synonyms == ["sprint", "dash"]

    def test_falls_back_to_first_sense(self, oxford, make_item):
        entry = oxford.transform(OXFORD_RESPONSE, make_item("run"), LookupOptions(cefr_level=CefrLevel.A2))

        assert entry.meanings[0].definition == "move at a speed faster than a walk"

    def test_extracts_ipa(self, oxford, make_item, default_options):
        entry = oxford.transform(OXFORD_RESPONSE, make_item("run"), default_options)

        assert entry.phonetic == "rʌn"
        assert entry.word == "run"

    def test_limits_meanings(self, oxford, make_item):
        entry = oxford.transform(OXFORD_RESPONSE, make_item("run"), LookupOptions(meaning_count=1))

        assert len(entry.meanings) == 1


class TestFilterSensesByLevel:
    """Tests for filter_senses_by_level."""

    def test_matches_register_id_or_text(self):
        senses = [
            {"registers": [{"id": "b2"}]},
            {"registers": [{"text": "B2"}]},
            {"registers": [{"id": "a2"}]},
        ]

        assert filter_senses_by_level(senses, CefrLevel.B2) == senses[:2]

    def test_returns_all_when_none_match(self):
        senses = [{"definitions": ["x"]}, {"registers": [{"id": "a2"}]}]

        assert filter_senses_by_level(senses, CefrLevel.C1) == senses
