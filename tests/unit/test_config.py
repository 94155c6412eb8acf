"""Tests for configuration loading."""

import pytest

from lexilookup.config import LexiLookupConfig, create_default_config, load_config_from_env


class TestLexiLookupConfig:
    """Tests for LexiLookupConfig."""

    def test_defaults(self):
        config = LexiLookupConfig()

        assert config.batch_size == 10
        assert config.inter_batch_delay == 1.0
        assert config.max_inputs == 500
        assert config.primary_max_retries == 2
        assert config.primary_retry_delay == 0.5
        assert config.translation_retry_delay == 0.25
        assert config.has_oxford_credentials is False
        assert config.has_generative_credentials is False

    def test_credentials(self):
        config = LexiLookupConfig(oxford_app_id="id", oxford_app_key="key", generative_api_key="k")

        assert config.has_oxford_credentials is True
        assert config.has_generative_credentials is True

    def test_oxford_needs_both_parts(self):
        assert LexiLookupConfig(oxford_app_id="id").has_oxford_credentials is False

    def test_rejects_zero_batch_size(self):
        with pytest.raises(ValueError):
            LexiLookupConfig(batch_size=0)

    def test_rejects_negative_delay(self):
        with pytest.raises(ValueError):
            LexiLookupConfig(inter_batch_delay=-1.0)

    def test_is_frozen(self):
        config = LexiLookupConfig()

        with pytest.raises(AttributeError):
            config.batch_size = 3

    def test_create_default_config_overrides(self):
        config = create_default_config(batch_size=5, inter_batch_delay=0.0)

        assert config.batch_size == 5
        assert config.inter_batch_delay == 0.0


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env."""

    def test_reads_credentials(self):
        config = load_config_from_env(
            {"GEMINI_API_KEY": "gem", "OXFORD_APP_ID": "id", "OXFORD_APP_KEY": "key"}
        )

        assert config.generative_api_key == "gem"
        assert config.has_oxford_credentials is True

    def test_converts_numbers(self):
        config = load_config_from_env({"LEXILOOKUP_BATCH_SIZE": "4", "LEXILOOKUP_BATCH_DELAY": "0.5"})

        assert config.batch_size == 4
        assert config.inter_batch_delay == 0.5

    def test_blank_values_are_ignored(self):
        config = load_config_from_env({"LEXILOOKUP_BATCH_SIZE": "  "})

        assert config.batch_size == 10

    def test_invalid_number(self):
        with pytest.raises(ValueError, match="LEXILOOKUP_BATCH_SIZE"):
            load_config_from_env({"LEXILOOKUP_BATCH_SIZE": "ten"})

    def test_overrides_win(self):
        config = load_config_from_env({"LEXILOOKUP_BATCH_SIZE": "4"}, batch_size=2)

        assert config.batch_size == 2

    def test_generic_key_wins_over_gemini_key(self):
        config = load_config_from_env(
            {"GEMINI_API_KEY": "gem", "LEXILOOKUP_GENERATIVE_API_KEY": "generic"}
        )

        assert config.generative_api_key == "generic"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("LEXILOOKUP_NATIVE_LANGUAGE", "Japanese")

        assert load_config_from_env().native_language == "Japanese"
