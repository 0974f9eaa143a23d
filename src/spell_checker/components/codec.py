"""CCBF codec.

Encodes bloom filter state to the CCBF binary layout and back, plus thin
helpers that move encoded filters to and from disk.
"""

from __future__ import annotations

import logging
import math
import struct
from pathlib import Path

from ..core.config import FORMAT_VERSION, MAGIC, MAX_HASH_COUNT
from ..core.errors import FormatError
from ..core.types import FilterState

logger = logging.getLogger(__name__)

# CCBF layout (big endian):
# [magic (4B)] [version (2B)] [hash_count (2B)] [bit_array_size (4B)] [probability f32 (4B)] [bits (m x 1B)]
_MAGIC = struct.Struct(">4s")
_VERSION = struct.Struct(">H")
_PARAMS = struct.Struct(">HIf")
HEADER_SIZE = _MAGIC.size + _VERSION.size + _PARAMS.size

_VALID_BITS = frozenset((0, 1))


def encode(state: FilterState) -> bytes:
    """Serialize filter state to CCBF bytes."""
    if len(state.bits) != state.size:
        raise ValueError(f"state has {len(state.bits)} bits but declares size {state.size}")
    header = (
        _MAGIC.pack(MAGIC)
        + _VERSION.pack(FORMAT_VERSION)
        + _PARAMS.pack(state.hash_count, state.size, state.probability)
    )
    return header + bytes(state.bits)


def decode(data: bytes) -> FilterState:
    """Deserialize CCBF bytes into filter state.

    Bit array bytes are parsed strictly: anything other than 0 or 1 is
    treated as corruption.

    Raises:
        FormatError: if the stream is not a well-formed version 1 CCBF file
    """
    view = memoryview(data)
    if len(view) < _MAGIC.size:
        raise FormatError("Unrecognized file type: stream too short for magic identifier")
    (magic,) = _MAGIC.unpack_from(view, 0)
    if magic != MAGIC:
        raise FormatError(f"Unrecognized file type: bad magic {magic!r}")

    offset = _MAGIC.size
    if len(view) < offset + _VERSION.size:
        raise FormatError("Unsupported version: stream ends before version field")
    (version,) = _VERSION.unpack_from(view, offset)
    if version != FORMAT_VERSION:
        raise FormatError(f"Unsupported version: {version}")

    offset += _VERSION.size
    if len(view) < offset + _PARAMS.size:
        raise FormatError(f"Truncated header: expected {HEADER_SIZE} bytes, got {len(view)}")
    hash_count, size, probability = _PARAMS.unpack_from(view, offset)
    offset += _PARAMS.size

    if not 1 <= hash_count <= MAX_HASH_COUNT:
        raise FormatError(f"Invalid hash count: {hash_count}")
    if size == 0:
        raise FormatError("Invalid bit array size: 0")
    if not (math.isfinite(probability) and 0.0 < probability < 1.0):
        raise FormatError(f"Invalid probability: {probability}")

    bits = bytes(view[offset:])
    if len(bits) != size:
        raise FormatError(f"Bit array length mismatch: header says {size}, found {len(bits)}")
    if not _VALID_BITS.issuperset(set(bits)):
        raise FormatError("Corrupt bit array: bytes other than 0 and 1 present")

    return FilterState(bits=bits, hash_count=hash_count, size=size, probability=probability)


def write_filter(path: str | Path, state: FilterState) -> int:
    """Encode state and write it to path. Returns bytes written."""
    path = Path(path)
    data = encode(state)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info(f"Wrote filter to {path}: {len(data)} bytes, m={state.size}, k={state.hash_count}")
    return len(data)


def read_filter(path: str | Path) -> FilterState:
    """Read and decode the filter stored at path."""
    path = Path(path)
    data = path.read_bytes()
    state = decode(data)
    logger.info(f"Loaded filter from {path}: m={state.size}, k={state.hash_count}")
    return state
