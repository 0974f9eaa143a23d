"""Bloom filter implementation.

Byte-per-bit bloom filter hashed with seeded 32-bit MurmurHash3. Sizing math
runs at IEEE-754 single precision so that filters sized here match the
CCBF files produced by other implementations of the format.
"""

from __future__ import annotations

import logging
import math
import struct
from collections.abc import Iterable, Iterator

import mmh3

from ..core.config import MAX_HASH_COUNT, MAX_SIZE, FilterConfig
from ..core.errors import ConfigurationError, DegenerateInputError, HashError
from ..core.types import FilterState, HashFailurePolicy, Item

logger = logging.getLogger(__name__)

_FLOAT32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round a Python float to the nearest single precision value."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


_LN_2 = _f32(math.log(2.0))


class BloomFilter:
    """Probabilistic set membership test over a fixed bit array.

    Args:
        item_count: Number of items expected to be inserted (n)
        probability: Target false positive rate (p), defaults to 0.2
        size: Explicit bit array length (m), derived from n and p when omitted
        hash_count: Explicit hash rounds per item (k), derived from m and n when omitted
        hash_failure_policy: ZERO hashes a rejected item to 0, RAISE raises HashError

    Invariants:
        - False positives are possible
        - False negatives are not possible
        - m and k are fixed at creation time
        - Bits only ever go from 0 to 1
    """

    def __init__(
        self,
        item_count: int,
        probability: float | None = None,
        size: int | None = None,
        hash_count: int | None = None,
        *,
        hash_failure_policy: HashFailurePolicy = HashFailurePolicy.ZERO,
    ):
        config = FilterConfig(probability=probability, size=size, hash_count=hash_count)
        if item_count < 0:
            raise ConfigurationError(f"item_count must not be negative, got {item_count}")

        p = _f32(config.resolved_probability)
        if not 0.0 < p < 1.0:
            raise ConfigurationError(f"probability {config.resolved_probability} is not representable")

        m = config.size if config.size is not None else self.calculate_size(item_count, p)
        if m > MAX_SIZE:
            raise ConfigurationError(f"derived size {m} exceeds the maximum of {MAX_SIZE}")
        k = config.hash_count if config.hash_count is not None else self.calculate_hash_count(m, item_count)

        self._item_count = item_count
        self._probability = p
        self._hash_count = k
        self._bits = bytearray(m)
        self._hash_failure_policy = hash_failure_policy

        logger.debug(f"Created bloom filter n={item_count}, p={p}, m={m}, k={k}")

    @classmethod
    def from_config(
        cls,
        item_count: int,
        config: FilterConfig,
        *,
        hash_failure_policy: HashFailurePolicy = HashFailurePolicy.ZERO,
    ) -> BloomFilter:
        """Create an empty filter sized from an override bundle."""
        return cls(
            item_count,
            probability=config.probability,
            size=config.size,
            hash_count=config.hash_count,
            hash_failure_policy=hash_failure_policy,
        )

    @classmethod
    def from_state(
        cls,
        state: FilterState,
        *,
        hash_failure_policy: HashFailurePolicy = HashFailurePolicy.ZERO,
    ) -> BloomFilter:
        """Rebuild a filter from a persisted snapshot, bits restored verbatim.

        The CCBF format does not store the original item count, so the
        rebuilt filter reports its bit array size as ``item_count``.
        """
        if len(state.bits) != state.size:
            raise ConfigurationError(
                f"state has {len(state.bits)} bits but declares size {state.size}"
            )
        bf = cls(
            state.size,
            probability=state.probability,
            size=state.size,
            hash_count=state.hash_count,
            hash_failure_policy=hash_failure_policy,
        )
        bf._bits[:] = state.bits
        return bf

    @staticmethod
    def calculate_size(item_count: int, probability: float) -> int:
        """Return the bit array size for n items at false positive rate p.

        ``m = ceil(-(n * ln(p)) / ln(2)^2)``
        """
        if item_count <= 0:
            raise DegenerateInputError("cannot size a bloom filter for zero items")
        n = _f32(item_count)
        ln_p = _f32(math.log(_f32(probability)))
        m = _f32(-_f32(n * ln_p) / _f32(_LN_2 * _LN_2))
        return math.ceil(m)

    @staticmethod
    def calculate_hash_count(size: int, item_count: int) -> int:
        """Return the number of hash rounds for m bits and n items.

        ``k = ceil((m / n) * ln(2))``, saturating at 255.
        """
        if item_count <= 0:
            raise DegenerateInputError("cannot derive a hash count for zero items")
        ratio = _f32(_f32(size) / _f32(item_count))
        k = math.ceil(_f32(ratio * _LN_2))
        return min(k, MAX_HASH_COUNT)

    def _hash(self, item: Item, seed: int) -> int:
        try:
            return mmh3.hash(item, seed, signed=False)
        except TypeError as e:
            if self._hash_failure_policy is HashFailurePolicy.RAISE:
                raise HashError(f"Cannot hash item of type {type(item).__name__}") from e
            logger.warning(f"Hash round {seed} failed for {type(item).__name__} item, using 0: {e}")
            return 0

    def _indexes(self, item: Item) -> Iterator[int]:
        m = len(self._bits)
        for seed in range(self._hash_count):
            yield self._hash(item, seed) % m

    def insert(self, item: Item) -> None:
        """Add item to the filter."""
        for index in self._indexes(item):
            self._bits[index] = 1

    def update(self, items: Iterable[Item]) -> None:
        """Add every item to the filter."""
        for item in items:
            self.insert(item)

    def lookup(self, item: Item) -> bool:
        """Return True if item may be present; False if definitely absent."""
        for index in self._indexes(item):
            if not self._bits[index]:
                return False
        return True

    def __contains__(self, item: Item) -> bool:
        return self.lookup(item)

    def __len__(self) -> int:
        return len(self._bits)

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def probability(self) -> float:
        return self._probability

    @property
    def hash_count(self) -> int:
        return self._hash_count

    @property
    def size(self) -> int:
        return len(self._bits)

    def bits(self) -> bytes:
        """Copy of the bit array, one 0/1 byte per bit."""
        return bytes(self._bits)

    def state(self) -> FilterState:
        """Snapshot for handing to the codec."""
        return FilterState(
            bits=self.bits(),
            hash_count=self._hash_count,
            size=len(self._bits),
            probability=self._probability,
        )

    def fill_ratio(self) -> float:
        """Fraction of bits currently set."""
        return self._bits.count(1) / len(self._bits)

    def estimated_false_positive_rate(self) -> float:
        """Expected false positive rate once item_count items are inserted.

        ``(1 - (1 - 1/m)^(k * n))^k``
        """
        m = len(self._bits)
        k = self._hash_count
        return (1.0 - (1.0 - 1.0 / m) ** (k * self._item_count)) ** k

    def __repr__(self) -> str:
        return (
            f"BloomFilter(item_count={self._item_count}, probability={self._probability}, "
            f"size={len(self._bits)}, hash_count={self._hash_count})"
        )
