"""Spell checker core definitions."""

from .config import DEFAULT_DB_PATH, DEFAULT_PROBABILITY, FORMAT_VERSION, MAGIC, FilterConfig
from .errors import (
    ConfigurationError,
    DegenerateInputError,
    DictionaryError,
    FormatError,
    HashError,
    SpellCheckerError,
)
from .types import FilterState, HashFailurePolicy, Item

__all__ = [
    "DEFAULT_DB_PATH",
    "DEFAULT_PROBABILITY",
    "FORMAT_VERSION",
    "MAGIC",
    "FilterConfig",
    "SpellCheckerError",
    "FormatError",
    "ConfigurationError",
    "DegenerateInputError",
    "HashError",
    "DictionaryError",
    "FilterState",
    "HashFailurePolicy",
    "Item",
]
