"""
renderer.py — Terminal rendering for Hangman.

Slices the gallows art and the banners out of their resources and
prints them, plus the word mask and guess history, in ANSI colour.
"""

from hangman.constants import (
    ANSI_BOLD, ANSI_CLEAR, ANSI_COLORS, ANSI_RESET, BANNER_HEIGHT,
    FRAME_HEIGHT,
)
from hangman.errors import ResourceTooShortError


def clear_screen():
    """Clear the terminal and home the cursor."""
    print(ANSI_CLEAR, end="", flush=True)


def colored(text: str, color: str) -> str:
    return f"{ANSI_COLORS.get(color, '')}{text}{ANSI_RESET}"


def frame_lines(lines: list, wrong_count: int) -> list:
    """
    Return the gallows frame for *wrong_count* misses.

    Frames are consecutive FRAME_HEIGHT-line blocks.  Both ends of the
    slice are clamped to the resource, so a count past the last frame
    yields a partial or empty frame rather than an error.
    """
    first = wrong_count * FRAME_HEIGHT
    start = min(max(first, 0), len(lines))
    end   = min(max(first + FRAME_HEIGHT, 0), len(lines))
    return lines[start:end]


def banner_lines(lines: list) -> list:
    """First BANNER_HEIGHT lines of a banner resource."""
    if len(lines) < BANNER_HEIGHT:
        raise ResourceTooShortError(BANNER_HEIGHT, len(lines))
    return lines[:BANNER_HEIGHT]


def show_frame(lines: list, wrong_count: int):
    for line in frame_lines(lines, wrong_count):
        print(colored(line, "blue"))


def show_banner(lines: list):
    for line in banner_lines(lines):
        print(colored(line, "red"))


def render(session, frames: list, message: str = ""):
    """Print the full game screen for *session*."""
    show_frame(frames, session.wrong_count)

    # ── Status ──
    if message:
        print(f"{message} Remaining attempts: {session.attempts}")
    print(f"Word: {ANSI_BOLD}{session.mask}{ANSI_RESET}")

    # ── Guess history ──
    used_false = "".join(f"{ch} " for ch in session.incorrect)
    used_true  = "".join(f"{ch} " for ch in session.correct)
    print("Used letter False:", colored(used_false, "red"))
    print("Used letter True:", colored(used_true, "green"))
