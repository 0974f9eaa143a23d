"""Build and query orchestration.

Ties the dictionary reader, the bloom filter and the CCBF codec together.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Iterable
from pathlib import Path

from .components.bloom import BloomFilter
from .components.codec import read_filter, write_filter
from .core.config import DEFAULT_DB_PATH, FilterConfig
from .interfaces.bloom import MembershipFilter
from .io.dictionary import read_words

logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def build_filter(
    source: str | Path,
    config: FilterConfig | None = None,
    db_path: str | Path = DEFAULT_DB_PATH,
) -> BloomFilter:
    """Build a filter from a dictionary file and persist it to db_path.

    Words are inserted exactly as they appear in the file.

    Raises:
        DegenerateInputError: if the dictionary is empty and the size or
            hash count has to be derived
        OSError: if the dictionary cannot be read or the filter written
    """
    config = config if config is not None else FilterConfig()
    words = read_words(source)

    bloom = BloomFilter.from_config(len(words), config)
    for word in words:
        bloom.insert(word.encode("utf-8"))

    write_filter(db_path, bloom.state())
    logger.info(
        f"Built filter from {source}: {len(words)} words, m={bloom.size}, "
        f"k={bloom.hash_count}, fill={bloom.fill_ratio():.3f}"
    )
    return bloom


def load_filter(db_path: str | Path = DEFAULT_DB_PATH) -> BloomFilter:
    """Load a previously built filter."""
    return BloomFilter.from_state(read_filter(db_path))


def find_missing(bloom: MembershipFilter, words: Iterable[str]) -> list[str]:
    """Return the words the filter definitely does not contain.

    Words are ASCII-lowercased before lookup and reported with their
    original spelling, in input order.
    """
    missing = []
    for word in words:
        if not bloom.lookup(word.translate(_ASCII_LOWER).encode("utf-8")):
            missing.append(word)
    logger.debug(f"{len(missing)} missing words")
    return missing
