"""Interactive shell and command-line entry point."""

from __future__ import annotations

import argparse
import logging

from wordtrie.collation import COLLATIONS
from wordtrie.constants import DEFAULT_COLLATION, DEFAULT_ENCODING
from wordtrie.dictionary import AddResult, PrefixDictionary
from wordtrie.loader import load_file

log = logging.getLogger("wordtrie")

_ADD_MESSAGES: dict[AddResult, str] = {
    AddResult.ADDED: "The new word added into the dictionary",
    AddResult.DUPLICATE: "The word already exists",
    AddResult.INVALID: "Invalid word",
}

EXIT_COMMANDS = ("exit", "quit")


def print_query(dictionary: PrefixDictionary, pattern: str) -> None:
    """Run one query and print its results."""
    print(f"\n______ Query: {pattern}")
    results = dictionary.query(pattern)
    if not results:
        print("No results found")
        return
    print(f"Found {len(results)} result(s)")
    print()
    for word in results:
        print(word)


def print_help() -> None:
    print()
    print("Commands:")
    print("  <word> or <prefix>*   -- search (e.g. cat, ca*, *)")
    print("  add <word>            -- add a word")
    print("  del <word>            -- delete a word")
    print("  has <word>            -- check whether a word exists")
    print("  count                 -- number of stored words")
    print("  list                  -- all words in alphabetical order")
    print("  exit                  -- leave")


def run_menu(dictionary: PrefixDictionary) -> None:
    """Read commands from the terminal until exit / EOF."""
    print_help()

    while True:
        try:
            inp = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        if inp.lower() in EXIT_COMMANDS:
            print("Program completed.")
            break

        parts = inp.split(None, 1)
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else None

        if cmd in ("add", "del", "has") and arg is None:
            print(f"Usage: {cmd} <word>")
        elif cmd == "add":
            print(_ADD_MESSAGES[dictionary.add(arg)])
        elif cmd == "del":
            if dictionary.delete(arg) is not None:
                print("The word deleted from the dictionary")
            else:
                print("The word not found in the dictionary")
        elif cmd == "has":
            print("The word exists" if dictionary.contains(arg) else "The word does not exist")
        elif cmd == "count":
            print(f"Number of words: {dictionary.count_words()}")
        elif cmd == "list":
            words = dictionary.all_words_sorted()
            if not words:
                print("The dictionary is empty")
            for word in words:
                print(word)
        else:
            print_query(dictionary, inp)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search dictionary -- load a word list and query it",
    )
    parser.add_argument("file",
                        help="Text file to load words from")
    parser.add_argument("queries", nargs="*",
                        help="Queries to run instead of the interactive shell (e.g. 'ca*')")
    parser.add_argument("--collation", choices=sorted(COLLATIONS), default=DEFAULT_COLLATION,
                        help="Sort order for word listings (default: %(default)s)")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING,
                        help="Encoding of the word file (default: %(default)s)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = PrefixDictionary(args.collation)
    try:
        load_file(dictionary, args.file, args.encoding)
    except FileNotFoundError:
        log.error("File not found: %s", args.file)
    except (OSError, UnicodeDecodeError) as e:
        log.error("Error reading file: %s", e)
    else:
        print("\nDictionary loaded")
    print(f"We have {dictionary.count_words()} words in the dictionary")

    if args.queries:
        for pattern in args.queries:
            print_query(dictionary, pattern)
    else:
        run_menu(dictionary)
