"""
game.py — Round driver for Hangman.

One round runs: load resources → pick a word → loop
(read letter → apply guess → redraw → check status) → end screen.
Input, the post-round pause and randomness are all passed in so the
whole round can be driven from tests.
"""

import time

from hangman import console, renderer
from hangman.constants import (
    END_DELAY, HANGMAN_ART_FILE, LOSE_BANNER_FILE, WIN_BANNER_FILE,
)
from hangman.engine import apply_guess, new_session, round_status
from hangman.entities import GameSession
from hangman.game_logger import game_logger
from hangman.resources import load_lines, load_word_list, pick_random_word

# Status line printed after each kind of guess.
GUESS_MESSAGES = {
    "hit":  "Letter found.",
    "miss": "Letter not found.",
}


def play_round(session: GameSession, frames: list, win_banner: list,
               lose_banner: list, read_letter=console.read_letter,
               pause: float = END_DELAY, sleep=time.sleep) -> str:
    """
    Play *session* to the end and return 'won' or 'lost'.

    Parameters
    ----------
    frames      : gallows art lines, FRAME_HEIGHT lines per wrong guess.
    win_banner  : lines of the win screen.
    lose_banner : lines of the lose screen.
    read_letter : callable returning one validated uppercase letter.
    sleep       : called with *pause* once the end screen is drawn.
    """
    renderer.clear_screen()
    renderer.show_frame(frames, session.wrong_count)
    print(session.mask)

    status = round_status(session)
    while status == "playing":
        letter  = read_letter()
        outcome = apply_guess(session, letter)
        game_logger.log_guess(letter, outcome, session.mask, session.attempts)

        renderer.clear_screen()
        if outcome == "repeat":
            renderer.render(session, frames)
            print(f"You've already guessed {letter}.")
        else:
            renderer.render(session, frames, GUESS_MESSAGES[outcome])
        status = round_status(session)

    # ── End screen ──
    renderer.clear_screen()
    if status == "won":
        renderer.show_banner(win_banner)
        print(renderer.colored(
            f"Congratulations! You guessed the word: {session.word}", "yellow"))
    else:
        renderer.show_banner(lose_banner)
        print(renderer.colored(f"The word was: {session.word}", "red"))

    game_logger.log_round_end(status, session.word, session.attempts,
                              session.wrong_count)
    sleep(pause)
    return status


def run_round(config, rng, read_letter=console.read_letter,
              sleep=time.sleep) -> str:
    """
    Load every resource fresh from disk and play one round.

    Raises ResourceUnavailableError, EmptySourceError or
    ResourceTooShortError before the round starts if a resource is bad.
    """
    words       = load_word_list(config.WORDLIST)
    frames      = load_lines(config.asset(HANGMAN_ART_FILE))
    win_banner  = renderer.banner_lines(load_lines(config.asset(WIN_BANNER_FILE)))
    lose_banner = renderer.banner_lines(load_lines(config.asset(LOSE_BANNER_FILE)))

    word    = pick_random_word(words, rng)
    session = new_session(word, rng, config.MAX_ATTEMPTS)
    game_logger.log_round_start(len(words), session.mask, session.attempts)

    return play_round(session, frames, win_banner, lose_banner,
                      read_letter=read_letter, pause=config.END_DELAY,
                      sleep=sleep)
