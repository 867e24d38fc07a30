"""
t9words.config
==============
Loads and validates config.json.
Falls back to sane defaults if the file is missing or partially specified.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path

from .errors import ConfigError
from .keypad import DEFAULT_KEYPAD, Keypad

log = logging.getLogger(__name__)

# The package ships a default config.json alongside this file.
_PACKAGE_DIR = Path(__file__).parent
_DEFAULT_CONFIG_PATH = _PACKAGE_DIR / "config.json"

# Name of the environment variable pointing at a custom config file.
ENV_VAR = "T9WORDS_CONFIG"


DEFAULTS: dict = {
    "languages": ["en"],
    "wordlist_dir": str(_PACKAGE_DIR / "wordlists"),
    "min_word_length": 2,
    "keypad": None,
    "max_frames": None,
}


def load_config(path: str | Path | None = None) -> dict:
    """
    Load configuration from a JSON file and merge with defaults.

    Resolution order (first found wins):
        1. Explicit ``path`` argument
        2. ``T9WORDS_CONFIG`` environment variable
        3. ``config.json`` in the current working directory
        4. Packaged default ``t9words/config.json``

    Returns a fully-populated, validated config dict.
    """
    cfg = copy.deepcopy(DEFAULTS)

    candidates: list[Path] = []
    if path:
        candidates.append(Path(path))
    env_path = os.environ.get(ENV_VAR)
    if env_path:
        candidates.append(Path(env_path))
    candidates.append(Path.cwd() / "config.json")
    candidates.append(_DEFAULT_CONFIG_PATH)

    for candidate in candidates:
        if candidate.exists():
            try:
                with open(candidate, "r", encoding="utf-8") as f:
                    user = json.load(f)
                if not isinstance(user, dict):
                    raise ValueError("top level must be a JSON object")
            except (OSError, ValueError) as e:
                log.warning("Could not parse %s: %s", candidate, e)
                break
            # Strip comment keys (keys starting with _)
            user = {k: v for k, v in user.items() if not k.startswith("_")}
            cfg.update(user)
            validate_config(cfg)
            # Resolve wordlist_dir relative to the config file's location
            if not Path(cfg["wordlist_dir"]).is_absolute():
                cfg["wordlist_dir"] = str(candidate.parent / cfg["wordlist_dir"])
            log.debug("Using config %s", candidate)
            break   # stop at first found

    validate_config(cfg)
    return cfg


def validate_config(cfg: dict) -> None:
    """Raise :class:`ConfigError` if any known key holds an unusable value."""
    langs = cfg.get("languages")
    if not isinstance(langs, list) or not all(isinstance(x, str) and x for x in langs):
        raise ConfigError(f"'languages' must be a list of language codes, got {langs!r}")

    if not isinstance(cfg.get("wordlist_dir"), str):
        raise ConfigError("'wordlist_dir' must be a path string")

    min_len = cfg.get("min_word_length")
    if isinstance(min_len, bool) or not isinstance(min_len, int) or min_len < 0:
        raise ConfigError(f"'min_word_length' must be a non-negative integer, got {min_len!r}")

    max_frames = cfg.get("max_frames")
    if max_frames is not None and (
        isinstance(max_frames, bool) or not isinstance(max_frames, int) or max_frames <= 0
    ):
        raise ConfigError(f"'max_frames' must be a positive integer or null, got {max_frames!r}")

    layout = cfg.get("keypad")
    if layout is not None:
        if not isinstance(layout, dict):
            raise ConfigError("'keypad' must be an object mapping digits to letters")
        Keypad(layout)


def make_keypad(cfg: dict) -> Keypad:
    layout = cfg.get("keypad")
    if layout is None:
        return DEFAULT_KEYPAD
    return Keypad(layout)
