"""Sort-key policies for listing dictionary words.

The word listing is ordered by a key function rather than by the host's
locale settings, so the result is the same on every machine.  Two
policies are registered:

  * ``codepoint`` -- plain Unicode code point order.
  * ``uk``        -- Ukrainian alphabetical order.  Letters compare
    case-insensitively by their place in the alphabet first (``ґ`` after
    ``г``, ``є`` after ``е``, ``і ї`` after ``и``); only when two words are
    equal on letters does case decide, lowercase first.  Symbols sort
    before digits, digits before Latin, Latin before Cyrillic.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from wordtrie.constants import (
    GROUP_CYRILLIC,
    GROUP_DIGIT,
    GROUP_LATIN,
    GROUP_OTHER,
    GROUP_SYMBOL,
    GROUP_UKRAINIAN,
    LATIN_ALPHABET,
    UKRAINIAN_ALPHABET,
)

SortKey = Callable[[str], Any]

_LATIN_RANK: dict[str, int] = {ch: i for i, ch in enumerate(LATIN_ALPHABET)}
_UKRAINIAN_RANK: dict[str, int] = {ch: i for i, ch in enumerate(UKRAINIAN_ALPHABET)}


def _primary(ch: str) -> tuple[int, int]:
    """(group, rank) of a character, ignoring case."""
    low = ch.lower()
    if len(low) != 1:  # e.g. "İ" lowercases to two code points
        low = ch
    if low in _UKRAINIAN_RANK:
        return GROUP_UKRAINIAN, _UKRAINIAN_RANK[low]
    if low in _LATIN_RANK:
        return GROUP_LATIN, _LATIN_RANK[low]
    if ch.isdigit():
        return GROUP_DIGIT, ord(ch)
    if "\u0400" <= low <= "\u04ff":
        return GROUP_CYRILLIC, ord(low)
    if ch.isalpha():
        return GROUP_OTHER, ord(low)
    return GROUP_SYMBOL, ord(ch)


def ukrainian_key(word: str) -> tuple:
    """Sort key ordering words the way a Ukrainian dictionary would."""
    primary = tuple(_primary(ch) for ch in word)
    # 0 for lowercase (or caseless), 1 for uppercase.
    case = tuple(0 if ch == ch.lower() else 1 for ch in word)
    return primary, case, word


def codepoint_key(word: str) -> str:
    return word


COLLATIONS: dict[str, SortKey] = {
    "uk": ukrainian_key,
    "codepoint": codepoint_key,
}


def get_collation(collation: str | SortKey) -> SortKey:
    """Resolve a policy name (or pass a key function straight through)."""
    if callable(collation):
        return collation
    try:
        return COLLATIONS[collation]
    except KeyError:
        raise ValueError(
            f"Unknown collation {collation!r}; expected one of {', '.join(sorted(COLLATIONS))}"
        ) from None
