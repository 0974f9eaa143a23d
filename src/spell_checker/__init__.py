"""Spell checker - bloom filter dictionary lookups with a compact on-disk format."""

from .app import build_filter, find_missing, load_filter
from .components.bloom import BloomFilter
from .components.codec import decode, encode, read_filter, write_filter
from .core.config import DEFAULT_DB_PATH, DEFAULT_PROBABILITY, FORMAT_VERSION, MAGIC, FilterConfig
from .core.errors import (
    SpellCheckerError,
    FormatError,
    ConfigurationError,
    DegenerateInputError,
    HashError,
    DictionaryError,
)
from .core.types import FilterState, HashFailurePolicy, Item

__all__ = [
    "BloomFilter",
    "encode",
    "decode",
    "read_filter",
    "write_filter",
    "build_filter",
    "load_filter",
    "find_missing",
    "FilterConfig",
    "DEFAULT_DB_PATH",
    "DEFAULT_PROBABILITY",
    "FORMAT_VERSION",
    "MAGIC",
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
