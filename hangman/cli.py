"""
cli.py — Menu loop and process entry point for Hangman.

    hangman              # play with the bundled word list
    hangman words.txt    # play with a custom word list

At the menu an empty line starts a round and ``99`` quits.
"""

import os
import random
import sys
import time

from hangman.config import load_config
from hangman.console import read_letter, read_line
from hangman.constants import EXIT_SENTINEL, START_BANNER_FILE
from hangman.errors import HangmanError, ReadStreamClosedError
from hangman.game import run_round
from hangman.game_logger import game_logger
from hangman.renderer import clear_screen, colored, show_banner
from hangman.resources import load_lines


def enable_windows_ansi():
    """Enable virtual-terminal processing on Windows 10+ for ANSI codes."""
    if os.name == "nt":
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            # ENABLE_PROCESSED_OUTPUT | ENABLE_WRAP_AT_EOL | ENABLE_VIRTUAL_TERMINAL
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
        except Exception:
            pass   # colors may not render


def menu_loop(config, rng, read=input, sleep=time.sleep):
    """
    Show the start screen and play rounds until the operator quits.

    Any menu input other than an empty line or EXIT_SENTINEL just
    redraws the start screen.
    """
    while True:
        clear_screen()
        show_banner(load_lines(config.asset(START_BANNER_FILE)))
        choice = read_line(colored("INPUT : ", "red"), read).strip()

        if choice == EXIT_SENTINEL:
            return
        if choice == "":
            run_round(config, rng,
                      read_letter=lambda: read_letter(read), sleep=sleep)


def main(argv=None, read=input, sleep=time.sleep) -> int:
    enable_windows_ansi()
    argv = sys.argv[1:] if argv is None else argv

    try:
        config = load_config()
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    if argv:
        config.WORDLIST = argv[0]

    try:
        game_logger.configure(config.LOG_DIR, config.LOG_LEVEL)
    except OSError as e:
        print(f"Error: cannot write logs to '{config.LOG_DIR}': {e}")
        return 1
    rng = random.Random(config.SEED)

    try:
        menu_loop(config, rng, read, sleep)
    except (ReadStreamClosedError, KeyboardInterrupt):
        print("\n  Goodbye!")
    except HangmanError as e:
        game_logger.log_error(e, "menu_loop")
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
