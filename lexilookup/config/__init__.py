"""Configuration management for lexilookup."""

from .config import LexiLookupConfig
from .defaults import create_default_config, load_config_from_env

__all__ = ["LexiLookupConfig", "create_default_config", "load_config_from_env"]
