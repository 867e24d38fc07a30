#!/usr/bin/env python3
"""
add_wordlist.py
===============
Helper utility: import an external word list into the t9words wordlists
directory, cleaning and deduplicating it in the process.

Usage:
    python add_wordlist.py <lang_code> <source_file> [--append] [--min-length N]

Examples:
    # Import a German word list → creates t9words/wordlists/de.txt
    python add_wordlist.py de /path/to/german_words.txt

    # Append new words to an existing list without overwriting
    python add_wordlist.py en /usr/share/dict/words --append
"""

import argparse
import logging
import sys
from pathlib import Path

from t9words.config import DEFAULTS
from t9words.wordlist import DEFAULT_MIN_LENGTH, merge_wordlist

WORDLIST_DIR = Path(DEFAULTS["wordlist_dir"])


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Import a plain-text word list into t9words."
    )
    parser.add_argument("lang", help="Language code, e.g. en, sv, de, fr")
    parser.add_argument("source", help="Path to source word list (.txt, one word per line)")
    parser.add_argument(
        "--append", action="store_true",
        help="Append to existing wordlist instead of replacing it.",
    )
    parser.add_argument(
        "--min-length", type=int, default=DEFAULT_MIN_LENGTH, metavar="N",
        help=f"Drop words shorter than N letters (default {DEFAULT_MIN_LENGTH}).",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="  %(message)s")

    source_path = Path(args.source).resolve()
    if not source_path.exists():
        print(f"ERROR: Source file not found: {source_path}")
        sys.exit(1)

    dest_path = WORDLIST_DIR / f"{args.lang}.txt"
    print(f"Source : {source_path}")
    total, added = merge_wordlist(
        source_path, dest_path, append=args.append, min_length=args.min_length,
    )

    print(f"Written : {dest_path}")
    print(f"Total   : {total:,} words  (+{added} new)")
    print(f"\nAdd '{args.lang}' to the languages list in config.json to activate it.")


if __name__ == "__main__":
    main()
