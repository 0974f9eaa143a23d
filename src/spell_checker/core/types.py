"""Common type definitions for the spell checker.

Defines fundamental types shared by the filter engine and the codec.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Core primitive types
Item = bytes


class HashFailurePolicy(Enum):
    """What the filter does when the hash function rejects an item."""

    ZERO = "zero"
    RAISE = "raise"


@dataclass(frozen=True)
class FilterState:
    """Snapshot of a bloom filter, in the shape the codec persists.

    Attributes:
        bits: One byte per bit, each 0 or 1, in index order
        hash_count: Number of hash rounds per item (k)
        size: Length of the bit array (m)
        probability: Target false positive rate, single precision (p)
    """

    bits: bytes
    hash_count: int
    size: int
    probability: float
