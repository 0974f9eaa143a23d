"""Line-oriented dictionary reader.

Each line of a UTF-8 text file is one record. Only the line terminator is
removed; blank lines are kept.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from ..core.errors import DictionaryError

logger = logging.getLogger(__name__)


def iter_words(path: str | Path) -> Iterator[str]:
    """Yield records from a dictionary file in file order.

    Raises:
        DictionaryError: if a line is not valid UTF-8
    """
    with open(path, "rb") as f:
        for lineno, line in enumerate(f, start=1):
            if line.endswith(b"\n"):
                line = line[:-1]
                if line.endswith(b"\r"):
                    line = line[:-1]
            try:
                word = line.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DictionaryError(f"{path}:{lineno}: not valid UTF-8 ({e.reason})") from e
            yield word


def read_words(path: str | Path) -> list[str]:
    """Read every record of a dictionary file."""
    words = list(iter_words(path))
    logger.debug(f"Read {len(words)} words from {path}")
    return words
