"""Word dictionary backed by a prefix trie."""

from wordtrie.constants import WILDCARD
from wordtrie.trie import Trie, TrieNode
from wordtrie.collation import COLLATIONS, codepoint_key, get_collation, ukrainian_key
from wordtrie.dictionary import AddResult, PrefixDictionary
from wordtrie.loader import load_file, read_words, tokenize

__all__ = [
    "COLLATIONS",
    "WILDCARD",
    "AddResult",
    "PrefixDictionary",
    "Trie",
    "TrieNode",
    "codepoint_key",
    "get_collation",
    "load_file",
    "read_words",
    "tokenize",
    "ukrainian_key",
]
