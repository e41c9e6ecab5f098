"""Shared constants for the word dictionary."""

from __future__ import annotations

import re

# Only a trailing wildcard is special; anywhere else it is a literal character.
WILDCARD = "*"

DEFAULT_ENCODING = "utf-8"
DEFAULT_COLLATION = "uk"

# Runs of whitespace and common punctuation separate words in a source file.
TOKEN_SEPARATORS = re.compile(r"[\s,.;:!?()\[\]{}\"']+")

# ── Alphabets ───────────────────────────────────────────────────────────

LATIN_ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# Ukrainian alphabet in dictionary order (33 letters).
UKRAINIAN_ALPHABET = "абвгґдеєжзиіїйклмнопрстуфхцчшщьюя"

# Sort groups for the Ukrainian collation, lowest first.
GROUP_SYMBOL = 0
GROUP_DIGIT = 1
GROUP_LATIN = 2
GROUP_UKRAINIAN = 3
GROUP_CYRILLIC = 4
GROUP_OTHER = 5
