"""Reading word lists from text files.

A source file holds any number of words per line, separated by
whitespace or common punctuation.  Case is kept as written, so
"Word" and "word" load as two entries.
"""

from __future__ import annotations

import logging
import os

from wordtrie.constants import DEFAULT_ENCODING, TOKEN_SEPARATORS
from wordtrie.dictionary import PrefixDictionary

log = logging.getLogger("wordtrie.loader")


def tokenize(line: str) -> list[str]:
    """Split a line of text into words."""
    return [tok for tok in TOKEN_SEPARATORS.split(line) if tok]


def read_words(path: str | os.PathLike, encoding: str = DEFAULT_ENCODING) -> set[str]:
    """Distinct words found in the file at ``path``.

    I/O and decoding errors propagate to the caller.
    """
    words: set[str] = set()
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            words.update(tokenize(line))
    log.debug("Read %d distinct tokens from %s", len(words), path)
    return words


def load_file(
    dictionary: PrefixDictionary,
    path: str | os.PathLike,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """Add every word of ``path`` to ``dictionary``; returns how many were new."""
    added = dictionary.add_many(read_words(path, encoding))
    log.info("Loaded %s words from %s", f"{added:,}", path)
    return added
