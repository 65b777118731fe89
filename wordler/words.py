"""
words.py

Handles loading the dictionary and picking the secret word.
No game rules here, just text handling and one random draw.
"""

import logging
from pathlib import Path

import numpy as np


log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DICT_PATH = DATA_DIR / "dict.txt"

# Used when the dictionary has no words at all
FALLBACK_WORD = "fudge"


def load_dictionary(path=None):
    """Read a newline-delimited dictionary, the bundled one by default."""
    path = Path(path) if path is not None else DICT_PATH
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def split_words(dictionary: str) -> list[str]:
    """One word per line. Blank lines are skipped, nothing else is touched."""
    return [line for line in dictionary.splitlines() if line.strip()]


def pick_word(dictionary: str, rng: np.random.Generator) -> str:
    """
    Pick one word uniformly at random from the dictionary text.

    The generator is passed in by the caller and seeded once per session,
    so a fixed seed (or any object with a numpy-style ``integers`` method)
    makes the choice reproducible.
    """
    words = split_words(dictionary)
    if not words:
        log.warning("Dictionary is empty, using fallback word.")
        return FALLBACK_WORD

    log.info("Picking secret word from %d candidates.", len(words))
    return words[int(rng.integers(len(words)))]
