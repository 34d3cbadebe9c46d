"""Letter frequencies of a word list and sampling letters from them."""
from __future__ import annotations

import logging
import string
from collections.abc import Sequence

import numpy as np

logger = logging.getLogger("boggle")

ALPHABET = string.ascii_lowercase


def letter_distribution(words: Sequence[str]) -> np.ndarray:
    """Empirical frequency of each letter a-z across all characters of `words`.

    Returns a float64 array of length 26 (index 0 is "a") summing to 1.0.
    Raises ValueError for an empty word list or characters outside a-z.
    """
    text = "".join(words)
    if not text:
        raise ValueError("Cannot compute a letter distribution from an empty word list")

    codes = np.frombuffer(text.encode("ascii", errors="replace"), dtype=np.uint8).astype(np.int64)
    codes -= ord("a")
    if codes.min() < 0 or codes.max() >= len(ALPHABET):
        bad = sorted({ch for ch in text if ch not in ALPHABET})
        raise ValueError(f"Words contain characters outside a-z: {''.join(bad)!r}")

    counts = np.bincount(codes, minlength=len(ALPHABET))
    return counts / counts.sum()


def sample_letter(distribution: Sequence[float], r: float) -> str:
    """Pick the letter whose cumulative interval contains `r` in [0, 1).

    Linear scan, subtracting each letter's mass in turn. If rounding leaves
    `r` above the total mass, the last letter scanned wins.
    """
    for j, p in enumerate(distribution):
        if r < p:
            return ALPHABET[j]
        r -= p
    return ALPHABET[len(distribution) - 1]
