"""
constants.py — Shared constants for Hangman.

ANSI escape codes, art geometry, default resource paths and timing
values live here so every other module can import them from a single
authoritative source.
"""

import os

# ═══════════════════════════════════════════════════════════════════════════
#  ANSI ESCAPE CODES
# ═══════════════════════════════════════════════════════════════════════════

ANSI_RESET = "\033[0m"
ANSI_BOLD  = "\033[1m"
ANSI_CLEAR = "\033[H\033[2J"

ANSI_COLORS = {
    "red":     "\033[31m",
    "green":   "\033[32m",
    "yellow":  "\033[33m",
    "blue":    "\033[34m",
}

# ═══════════════════════════════════════════════════════════════════════════
#  GAME RULES
# ═══════════════════════════════════════════════════════════════════════════

# Attempts a fresh session starts with.
MAX_ATTEMPTS = 10

# Shown in the mask for every letter not yet revealed.
PLACEHOLDER = "_"

# Menu input that quits the program.
EXIT_SENTINEL = "99"

# ═══════════════════════════════════════════════════════════════════════════
#  ART GEOMETRY
# ═══════════════════════════════════════════════════════════════════════════

# Lines per gallows frame in hangman.txt (one frame per wrong guess).
FRAME_HEIGHT  = 7

# Lines shown from the start / win / lose banners.
BANNER_HEIGHT = 16

# ═══════════════════════════════════════════════════════════════════════════
#  RESOURCES
# ═══════════════════════════════════════════════════════════════════════════

ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")

WORDLIST_FILE     = "words.txt"
HANGMAN_ART_FILE  = "hangman.txt"
START_BANNER_FILE = "start.txt"
WIN_BANNER_FILE   = "win.txt"
LOSE_BANNER_FILE  = "lose.txt"

# ═══════════════════════════════════════════════════════════════════════════
#  TIMING
# ═══════════════════════════════════════════════════════════════════════════

# Seconds the win / lose screen stays up before returning to the menu.
END_DELAY = 5
