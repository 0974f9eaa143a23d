"""Unit tests for the CCBF codec."""

import math
import shutil
import struct
import tempfile
from pathlib import Path

import pytest

from spell_checker.components.bloom import BloomFilter
from spell_checker.components.codec import HEADER_SIZE, decode, encode, read_filter, write_filter
from spell_checker.core.errors import FormatError
from spell_checker.core.types import FilterState


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def populated():
    bf = BloomFilter(100)
    for word in (b'hello', b'world', b'spell', b'checker'):
        bf.insert(word)
    return bf


def test_encode_layout():
    """Header fields are big endian in a fixed order, followed by one byte per bit."""
    state = FilterState(bits=bytes([1, 0, 0, 1, 0, 0, 0, 1]), hash_count=2, size=8, probability=0.5)

    data = encode(state)

    assert data == (
        b'CCBF'
        + b'\x00\x01'
        + b'\x00\x02'
        + b'\x00\x00\x00\x08'
        + b'\x3f\x00\x00\x00'
        + b'\x01\x00\x00\x01\x00\x00\x00\x01'
    )
    assert HEADER_SIZE == 16


def test_encode_default_probability(populated):
    data = encode(populated.state())

    assert data[12:16] == b'\x3e\x4c\xcc\xcd'
    assert struct.unpack('>I', data[8:12])[0] == 335
    assert len(data) == HEADER_SIZE + 335


def test_encode_is_deterministic(populated):
    assert encode(populated.state()) == encode(populated.state())


def test_decode_restores_state(populated):
    state = populated.state()

    decoded = decode(encode(state))

    assert decoded == state
    assert decoded.bits == populated.bits()
    assert decoded.hash_count == populated.hash_count
    assert decoded.probability == populated.probability


def test_decoded_filter_keeps_membership(populated):
    restored = BloomFilter.from_state(decode(encode(populated.state())))

    for word in (b'hello', b'world', b'spell', b'checker'):
        assert word in restored
    assert restored.item_count == restored.size


def test_decode_bad_magic(populated):
    corrupted = bytearray(encode(populated.state()))
    corrupted[0:4] = b'XXXX'

    with pytest.raises(FormatError, match="Unrecognized file type"):
        decode(bytes(corrupted))


def test_decode_magic_checked_before_version():
    with pytest.raises(FormatError, match="Unrecognized file type"):
        decode(b'NOPE\x00\x63')


@pytest.mark.parametrize("data", [b'', b'CC', b'CCB'])
def test_decode_too_short_for_magic(data):
    with pytest.raises(FormatError, match="Unrecognized file type"):
        decode(data)


def test_decode_bad_version(populated):
    corrupted = bytearray(encode(populated.state()))
    corrupted[4:6] = b'\x00\x02'

    with pytest.raises(FormatError, match="Unsupported version"):
        decode(bytes(corrupted))


def test_decode_missing_version():
    with pytest.raises(FormatError, match="Unsupported version"):
        decode(b'CCBF\x00')


def test_decode_truncated_header():
    with pytest.raises(FormatError, match="Truncated header"):
        decode(b'CCBF\x00\x01\x00\x02\x00\x00')


def test_decode_short_bit_array(populated):
    data = encode(populated.state())

    with pytest.raises(FormatError, match="length mismatch"):
        decode(data[:-1])


def test_decode_trailing_bytes(populated):
    data = encode(populated.state())

    with pytest.raises(FormatError, match="length mismatch"):
        decode(data + b'\x00')


def test_decode_rejects_non_binary_bits():
    """Bit bytes other than 0 and 1 are treated as corruption."""
    data = encode(FilterState(bits=bytes(8), hash_count=1, size=8, probability=0.5))
    corrupted = bytearray(data)
    corrupted[-1] = 2

    with pytest.raises(FormatError, match="Corrupt bit array"):
        decode(bytes(corrupted))


def test_decode_rejects_zero_hash_count():
    data = b'CCBF\x00\x01\x00\x00\x00\x00\x00\x01\x3f\x00\x00\x00\x00'

    with pytest.raises(FormatError, match="Invalid hash count"):
        decode(data)


def test_decode_rejects_wide_hash_count():
    data = b'CCBF\x00\x01\x01\x00\x00\x00\x00\x01\x3f\x00\x00\x00\x00'

    with pytest.raises(FormatError, match="Invalid hash count"):
        decode(data)


def test_decode_rejects_zero_size():
    data = b'CCBF\x00\x01\x00\x01\x00\x00\x00\x00\x3f\x00\x00\x00'

    with pytest.raises(FormatError, match="Invalid bit array size"):
        decode(data)


def test_encode_rejects_inconsistent_state():
    with pytest.raises(ValueError):
        encode(FilterState(bits=bytes(3), hash_count=1, size=4, probability=0.5))


def test_write_and_read_filter(temp_dir, populated):
    path = Path(temp_dir) / "nested" / "words.bf"

    written = write_filter(path, populated.state())

    assert path.exists()
    assert written == path.stat().st_size == HEADER_SIZE + populated.size
    assert read_filter(path) == populated.state()


def test_read_missing_file(temp_dir):
    with pytest.raises(FileNotFoundError):
        read_filter(Path(temp_dir) / "absent.bf")


def test_read_foreign_file(temp_dir):
    path = Path(temp_dir) / "words.bf"
    path.write_bytes(b'\x89PNG\r\n\x1a\n')

    with pytest.raises(FormatError):
        read_filter(path)


@pytest.mark.parametrize("probability", [math.nan, math.inf, 0.0, 1.0, 2.0, -0.5])
def test_decode_rejects_bad_probability(probability):
    """A probability outside (0, 1) is a malformed file, not a config error."""
    data = b'CCBF\x00\x01\x00\x01\x00\x00\x00\x04' + struct.pack('>f', probability) + bytes(4)

    with pytest.raises(FormatError, match="Invalid probability"):
        decode(data)


def test_load_rejects_bad_probability(temp_dir):
    path = Path(temp_dir) / "words.bf"
    path.write_bytes(b'CCBF\x00\x01\x00\x01\x00\x00\x00\x04' + struct.pack('>f', math.nan) + bytes(4))

    with pytest.raises(FormatError):
        read_filter(path)
