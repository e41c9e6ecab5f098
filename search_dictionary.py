#!/usr/bin/env python3
"""
Search Dictionary

Loads the words of a text file into a prefix-trie dictionary, then either
runs the queries given on the command line or opens an interactive shell
(add / del / has / count / list / <prefix>*).

Usage:
    python search_dictionary.py words.txt            # interactive
    python search_dictionary.py words.txt 'ca*' dog  # one-shot queries
"""

from wordtrie.cli import main

if __name__ == "__main__":
    main()
