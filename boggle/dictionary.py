"""Word list loading and the "qu" letter codec.

Boards place "Qu" on a single cell, so words are stored with every "qu"
compressed to a lone "q". The compressed form is what the board, the
dictionary and the path search all use; `expand_qu` restores the spelling
shown to the player.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger("boggle")

DEFAULT_VOWELS = "aeiouy"


def has_bare_q(word: str) -> bool:
    """True if some "q" is not followed by "u"; such words cannot be stored compressed."""
    return re.search("q(?!u)", word) is not None


def compress_qu(word: str) -> str:
    return word.replace("qu", "q")


def expand_qu(word: str) -> str:
    return word.replace("q", "qu")


def normalize_word(word: str) -> str:
    """Turn raw player input into the board's compressed lowercase form."""
    return compress_qu(word.strip().lower())


def has_vowel(word: str, vowels: str = DEFAULT_VOWELS) -> bool:
    return any(ch in vowels for ch in word)


def filter_words(min_len: int, words: Iterable[str]) -> list[str]:
    return [w for w in words if len(w) >= min_len]


def load_words(path: str | Path, min_len: int = 3, vowels: str = DEFAULT_VOWELS) -> list[str]:
    """Load a one-word-per-line dictionary, compressed and filtered.

    Lines that are not made of ASCII letters, or that contain a "q" without a
    following "u", are skipped. Words shorter than `min_len` (after compression)
    or without a vowel are dropped. File order is kept and repeated words are
    only returned once.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    words: dict[str, None] = {}
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            raw = line.strip()
            if not raw or not (raw.isascii() and raw.isalpha()):
                continue
            if has_bare_q(raw.lower()):
                continue
            word = normalize_word(raw)
            if len(word) >= min_len and has_vowel(word, vowels):
                words[word] = None

    logger.info("Loaded %d words from %s (min_len=%d)", len(words), path, min_len)
    return list(words)
