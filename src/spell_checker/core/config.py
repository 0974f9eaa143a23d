"""Configuration for the spell checker.

Holds the fixed constants of the CCBF file format and the optional
override bundle used when sizing a new filter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError

# CCBF file format
MAGIC = b"CCBF"
FORMAT_VERSION = 1

DEFAULT_DB_PATH = Path("db") / "words.bf"
DEFAULT_PROBABILITY = 0.2

# hash_count is a one-byte quantity widened to two bytes on disk
MAX_HASH_COUNT = 0xFF
MAX_SIZE = 0xFFFFFFFF


@dataclass
class FilterConfig:
    """Optional overrides for sizing a bloom filter.

    ``None`` means "unset": the value is derived when the filter is built.
    Fallback order is probability, then size, then hash count; an explicit
    size or hash count overrides its derived value independently of the other.

    Attributes:
        probability: Target false positive rate, defaults to DEFAULT_PROBABILITY
        size: Bit array length (m), defaults to ceil(-(n * ln p) / ln(2)^2)
        hash_count: Hash rounds per item (k), defaults to ceil((m / n) * ln 2)
    """

    probability: float | None = None
    size: int | None = None
    hash_count: int | None = None

    def __post_init__(self) -> None:
        if self.probability is not None:
            if not math.isfinite(self.probability) or not 0.0 < self.probability < 1.0:
                raise ConfigurationError(
                    f"probability must be between 0 and 1 (exclusive), got {self.probability}"
                )
        if self.size is not None and not 1 <= self.size <= MAX_SIZE:
            raise ConfigurationError(f"size must be between 1 and {MAX_SIZE}, got {self.size}")
        if self.hash_count is not None and not 1 <= self.hash_count <= MAX_HASH_COUNT:
            raise ConfigurationError(
                f"hash_count must be between 1 and {MAX_HASH_COUNT}, got {self.hash_count}"
            )

    @property
    def resolved_probability(self) -> float:
        """Probability to size with, after applying the default."""
        return DEFAULT_PROBABILITY if self.probability is None else self.probability
