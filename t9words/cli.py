"""
t9words.cli
===========
Command-line entry point.
Registered as the ``t9words`` console script in pyproject.toml.

Usage:
    t9words 4663                      # words and phrases for 4663
    t9words 2646 --sort               # print results sorted
    t9words 4663 --dict words.txt     # use an explicit word list
    t9words 4663 --lang en,sv         # override languages on the fly
    t9words --list-langs              # show available wordlists and exit
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import load_config, make_keypad
from .errors import ConfigError, InvalidDigitsError, SearchLimitExceeded
from .keypad import Keypad
from .search import decompose
from .trie import Trie
from .wordlist import build_trie, list_wordlists, load_wordlist, read_wordlist

log = logging.getLogger(__name__)


def _list_languages(wordlist_dir: str) -> None:
    counts = list_wordlists(wordlist_dir)
    if not counts:
        print(f"No wordlists found in {wordlist_dir}")
        return
    print(f"Available languages in {wordlist_dir}:\n")
    for lang, lines in counts.items():
        print(f"  {lang:<10}  {lines:>6,} words   ({lang}.txt)")
    print()


def _build_index(config: dict, keypad: Keypad, dict_paths: list[str] | None) -> Trie:
    trie = Trie()
    min_length = config["min_word_length"]
    if dict_paths:
        for path in dict_paths:
            words = list(read_wordlist(path))
            log.info("Loaded %s words  [%s]", f"{len(words):,}", path)
            build_trie(words, min_length, keypad.alphabet, trie)
    else:
        for lang in config["languages"]:
            words = load_wordlist(lang, config["wordlist_dir"])
            build_trie(words, min_length, keypad.alphabet, trie)
    log.info("Index ready: %s words, %s nodes", f"{len(trie):,}", f"{trie.node_count:,}")
    return trie


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="t9words",
        description="Find the words and phrases a keypad digit string can spell.",
    )
    parser.add_argument(
        "digits",
        nargs="?",
        help="Digit string to decode, e.g. 4663.",
    )
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="Path to a custom config.json (overrides default resolution order).",
    )
    parser.add_argument(
        "--lang", "-l",
        metavar="CODES",
        help="Comma-separated language codes to load, e.g. en,sv  (overrides config).",
    )
    parser.add_argument(
        "--dict", "-d",
        metavar="PATH",
        action="append",
        dest="dict_paths",
        help="Word list file to load instead of the configured languages (repeatable).",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        metavar="N",
        help="Minimum accepted word length (overrides config).",
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        metavar="N",
        help="Stop the search after N frames (overrides config).",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Collect all results and print them sorted.",
    )
    parser.add_argument(
        "--list-langs",
        action="store_true",
        help="List available wordlists and exit.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log loading progress to stderr.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.config)
        if args.lang:
            config["languages"] = [c.strip() for c in args.lang.split(",") if c.strip()]
        if args.min_length is not None:
            if args.min_length < 0:
                raise ConfigError("--min-length must not be negative")
            config["min_word_length"] = args.min_length
        if args.max_frames is not None:
            if args.max_frames <= 0:
                raise ConfigError("--max-frames must be positive")
            config["max_frames"] = args.max_frames
        keypad = make_keypad(config)
    except ConfigError as e:
        parser.error(str(e))

    if args.list_langs:
        try:
            _list_languages(config["wordlist_dir"])
        except (OSError, UnicodeDecodeError) as e:
            parser.error(f"could not read word list: {e}")
        return 0

    if args.digits is None:
        parser.error("the following arguments are required: digits")
    try:
        digits = Keypad.validate_digits(args.digits)
    except InvalidDigitsError as e:
        parser.error(str(e))

    try:
        trie = _build_index(config, keypad, args.dict_paths)
    except (OSError, UnicodeDecodeError) as e:
        parser.error(f"could not read word list: {e}")

    results = decompose(digits, trie, keypad, config["max_frames"])
    found: list[str] = []
    try:
        for phrase in results:
            if args.sort:
                found.append(phrase)
            else:
                print(phrase)
    except SearchLimitExceeded as e:
        log.error("%s; results are incomplete", e)
        status = 1
    else:
        status = 0

    for phrase in sorted(found):
        print(phrase)
    return status


if __name__ == "__main__":
    sys.exit(main())
