"""
engine.py — Core game logic for Hangman.

Letter matching, mask reveal and the per-guess state transition.
No I/O or rendering happens here; randomness comes from the
``random.Random`` instance the caller passes in.
"""

from hangman.constants import MAX_ATTEMPTS, PLACEHOLDER
from hangman.entities import GameSession, GuessResult


def initial_reveal(word: str, rng) -> str:
    """
    Build the opening mask with a few random letters already shown.

    ``max(0, len(word) // 2 - 1)`` indices are drawn independently, so the
    same index can come up twice and fewer letters end up revealed.
    """
    count = max(0, len(word) // 2 - 1)
    picked = [rng.randrange(len(word)) for _ in range(count)]
    return "".join(
        ch if i in picked else PLACEHOLDER for i, ch in enumerate(word))


def apply_reveal(word: str, positions, mask: str) -> str:
    """Return *mask* with the letters at *positions* uncovered."""
    revealed = list(mask)
    for i in positions:
        if 0 <= i < len(word):
            revealed[i] = word[i]
    return "".join(revealed)


def evaluate(word: str, letter: str) -> GuessResult:
    """Find every index where *letter* occurs in *word* (case-insensitive)."""
    letter = letter.upper()
    positions = [i for i, ch in enumerate(word.upper()) if ch == letter]
    return GuessResult(letter, positions)


def new_session(word: str, rng, attempts: int = MAX_ATTEMPTS) -> GameSession:
    word = word.upper()
    return GameSession(word, initial_reveal(word, rng), attempts)


def apply_guess(session: GameSession, letter: str) -> str:
    """
    Apply one validated letter to *session*.

    Returns
    -------
    'repeat' – letter was guessed before → nothing changes.
    'hit'    – letter is in the word → matching positions revealed.
    'miss'   – letter is not in the word → one attempt lost.
    """
    letter = letter.upper()
    if session.already_guessed(letter):
        return "repeat"

    result = evaluate(session.word, letter)
    if result.matched:
        session.mask = apply_reveal(session.word, result.positions, session.mask)
        session.correct.append(letter)
        return "hit"

    session.attempts    -= 1
    session.wrong_count += 1
    session.incorrect.append(letter)
    return "miss"


def round_status(session: GameSession) -> str:
    """'won', 'lost' or 'playing'; a full mask wins even on the last attempt."""
    if session.is_won:
        return "won"
    if session.attempts <= 0:
        return "lost"
    return "playing"
