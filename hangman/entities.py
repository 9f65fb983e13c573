"""
entities.py — Game state classes for Hangman.
"""

from hangman.constants import MAX_ATTEMPTS


class GuessResult:
    """
    Outcome of checking one letter against the word.

    Attributes
    ----------
    letter    : str    – the uppercase letter that was checked.
    positions : tuple  – zero-based indices where it occurs, ascending.
                         Empty means "no match".
    """

    def __init__(self, letter: str, positions=()):
        self.letter    = letter
        self.positions = tuple(positions)

    @property
    def matched(self) -> bool:
        return bool(self.positions)

    def __eq__(self, other):
        if not isinstance(other, GuessResult):
            return NotImplemented
        return (self.letter, self.positions) == (other.letter, other.positions)

    def __repr__(self):
        if self.matched:
            return f"GuessResult({self.letter!r}, matched at {list(self.positions)})"
        return f"GuessResult({self.letter!r}, no match)"


class GameSession:
    """
    Everything a single round of Hangman tracks.

    Attributes
    ----------
    word        : str   – uppercase target word.
    mask        : str   – same length as *word*; '_' marks hidden letters.
    attempts    : int   – misses left before the round is lost.
    wrong_count : int   – misses so far; selects the gallows frame.
    correct     : list  – letters guessed that were in the word, in order.
    incorrect   : list  – letters guessed that were not, in order.
    """

    def __init__(self, word: str, mask: str, attempts: int = MAX_ATTEMPTS):
        if len(mask) != len(word):
            raise ValueError(
                f"mask '{mask}' does not match the length of '{word}'.")
        self.word        = word
        self.mask        = mask
        self.attempts    = attempts
        self.wrong_count = 0
        self.correct     = []
        self.incorrect   = []

    def already_guessed(self, letter: str) -> bool:
        return letter in self.correct or letter in self.incorrect

    @property
    def is_won(self) -> bool:
        return self.mask == self.word
