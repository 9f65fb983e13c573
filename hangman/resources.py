"""
resources.py — Word list and art loaders for Hangman.

Every resource is a plain text file read in full and closed inside the
call that needs it; nothing is cached between rounds, so editing a word
list or an art file takes effect on the next round.

Word list format
----------------
  One candidate word per line.  Surrounding whitespace is stripped,
  blank lines are skipped and words are upper-cased.  Lines containing
  anything other than letters (e.g. "ice-cream") are dropped with a
  warning, because A-Z guesses could never complete them.
"""

import os

from hangman.errors import EmptySourceError, ResourceUnavailableError
from hangman.game_logger import game_logger


def load_lines(path: str) -> list:
    """Read *path* and return its lines without trailing newlines."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceUnavailableError(path, str(e)) from e


def load_word_list(path: str) -> list:
    words = []
    for lineno, line in enumerate(load_lines(path), start=1):
        word = line.strip()
        if not word:
            continue
        if not (word.isascii() and word.isalpha()):
            game_logger.logger.warning(
                "Skipping '%s' (%s:%d): not a plain word",
                word, os.path.basename(path), lineno)
            continue
        words.append(word.upper())
    return words


def pick_random_word(words, rng) -> str:
    """
    Choose one entry of *words* uniformly at random.

    Raises
    ------
    EmptySourceError – *words* has no entries.
    """
    if not words:
        raise EmptySourceError("word list contains no words")
    return words[rng.randrange(len(words))].upper()
