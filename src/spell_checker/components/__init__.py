"""Filter engine and CCBF codec."""

from .bloom import BloomFilter
from .codec import decode, encode, read_filter, write_filter

__all__ = ["BloomFilter", "encode", "decode", "read_filter", "write_filter"]
