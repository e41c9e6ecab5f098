"""Word dictionary backed by a prefix trie."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable

from wordtrie.collation import SortKey, get_collation
from wordtrie.constants import DEFAULT_COLLATION, WILDCARD
from wordtrie.trie import Trie

log = logging.getLogger("wordtrie")


class AddResult(enum.Enum):
    """Outcome of ``PrefixDictionary.add``."""

    ADDED = "added"
    DUPLICATE = "duplicate"
    INVALID = "invalid"


class PrefixDictionary:
    """Case-sensitive word store with trailing-wildcard search.

    Every public method trims surrounding whitespace from its argument and
    treats an empty result as invalid input: nothing is mutated and an
    "empty" answer (``AddResult.INVALID``, ``None``, ``False`` or ``[]``)
    comes back instead of an exception.
    """

    def __init__(self, collation: str | SortKey = DEFAULT_COLLATION):
        self.trie = Trie()
        self._count = 0
        self._sort_key = get_collation(collation)

    @staticmethod
    def normalize(raw: str | None) -> str | None:
        """Stripped word, or None if nothing usable is left."""
        if not raw or not isinstance(raw, str):
            return None
        word = raw.strip()
        return word or None

    # mutation

    def add(self, word: str | None) -> AddResult:
        processed = self.normalize(word)
        if processed is None:
            return AddResult.INVALID
        if not self.trie.insert(processed):
            return AddResult.DUPLICATE
        self._count += 1
        log.debug("Added %r (%d words)", processed, self._count)
        return AddResult.ADDED

    def add_many(self, words: Iterable[str]) -> int:
        """Add words without per-word reporting. Returns how many were new."""
        added = 0
        for word in words:
            if self.add(word) is AddResult.ADDED:
                added += 1
        return added

    def delete(self, word: str | None) -> str | None:
        """Remove ``word``; returns it on success, None if it was not stored."""
        processed = self.normalize(word)
        if processed is None or not self.trie.remove(processed):
            return None
        self._count -= 1
        log.debug("Deleted %r (%d words)", processed, self._count)
        return processed

    # lookup

    def contains(self, word: str | None) -> bool:
        processed = self.normalize(word)
        return processed is not None and self.trie.is_word(processed)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def query(self, pattern: str | None) -> list[str]:
        """Exact lookup, or prefix search when the pattern ends in ``*``.

        ``*`` alone lists every word (in collation order).  ``ca*`` lists
        the words starting with ``ca`` in trie order, unsorted.  A ``*``
        anywhere but the end is matched literally.
        """
        processed = self.normalize(pattern)
        if processed is None:
            return []

        if not processed.endswith(WILDCARD):
            return [processed] if self.trie.is_word(processed) else []

        if processed == WILDCARD:
            return self.all_words_sorted()

        prefix = processed[:-1]
        node = self.trie.walk(prefix)
        if node is None:
            return []
        return list(self.trie.words_from(node, prefix))

    def count_words(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def all_words_sorted(self) -> list[str]:
        return sorted(self.trie, key=self._sort_key)
