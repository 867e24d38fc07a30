"""
t9words
=======
Find every dictionary word and phrase a phone keypad digit string can spell.

Public API
----------
    from t9words import Trie, decompose

    trie = Trie.from_words(["an", "go", "good", "home"])
    sorted(decompose("2646", trie))   # ['an go']
    sorted(decompose("4663", trie))   # ['good', 'home']
"""

from .errors import ConfigError, InvalidDigitsError, SearchLimitExceeded, T9WordsError
from .keypad import DEFAULT_KEYPAD, Keypad
from .trie import ROOT, Trie
from .search import decompose, solve
from .wordlist import build_trie, is_acceptable, load_wordlist
from .config import load_config

__all__ = [
    "DEFAULT_KEYPAD",
    "ROOT",
    "ConfigError",
    "InvalidDigitsError",
    "Keypad",
    "SearchLimitExceeded",
    "T9WordsError",
    "Trie",
    "build_trie",
    "decompose",
    "is_acceptable",
    "load_config",
    "load_wordlist",
    "solve",
]
__version__ = "1.0.0"
