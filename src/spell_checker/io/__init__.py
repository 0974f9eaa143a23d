"""Readers for dictionary sources."""

from .dictionary import iter_words, read_words

__all__ = ["iter_words", "read_words"]
