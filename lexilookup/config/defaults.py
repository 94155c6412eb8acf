"""Default configuration values for lexilookup."""

import os
from collections.abc import Mapping

from .config import LexiLookupConfig

# Environment variable -> (config field, converter)
_ENV_FIELDS = {
    "DICTIONARY_API_URL": ("dictionary_api_url", str),
    "OXFORD_API_URL": ("oxford_api_url", str),
    "OXFORD_APP_ID": ("oxford_app_id", str),
    "OXFORD_APP_KEY": ("oxford_app_key", str),
    "GEMINI_API_KEY": ("generative_api_key", str),
    "LEXILOOKUP_GENERATIVE_API_KEY": ("generative_api_key", str),
    "LEXILOOKUP_GENERATIVE_BASE_URL": ("generative_base_url", str),
    "LEXILOOKUP_GENERATIVE_MODEL": ("generative_model", str),
    "LEXILOOKUP_NATIVE_LANGUAGE": ("native_language", str),
    "LEXILOOKUP_REQUEST_TIMEOUT": ("request_timeout", float),
    "LEXILOOKUP_BATCH_SIZE": ("batch_size", int),
    "LEXILOOKUP_BATCH_DELAY": ("inter_batch_delay", float),
}


def create_default_config(**overrides) -> LexiLookupConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        LexiLookupConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            batch_size=5,
            inter_batch_delay=0.0
        )
    """
    return LexiLookupConfig(**overrides)


def load_config_from_env(environ: Mapping[str, str] | None = None, **overrides) -> LexiLookupConfig:
    """Create a configuration from environment variables.

    This is the only place that reads the process environment. Later entries
    in the variable table win when two variables map to the same field.
    Explicit overrides win over the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)
        **overrides: Keyword arguments applied after the environment

    Returns:
        LexiLookupConfig built from the environment

    Raises:
        ValueError: If a numeric variable cannot be converted
    """
    environ = os.environ if environ is None else environ

    values = {}
    for env_name, (field_name, convert) in _ENV_FIELDS.items():
        raw = environ.get(env_name, "").strip()
        if not raw:
            continue
        try:
            values[field_name] = convert(raw)
        except ValueError as e:
            raise ValueError(f"Invalid value for {env_name}: {raw!r}") from e

    values.update(overrides)
    return LexiLookupConfig(**values)
