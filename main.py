#!/usr/bin/env python3
"""
main.py — Entry point for Hangman.

Run from the repository root:
    python main.py              # bundled word list
    python main.py words.txt    # custom word list, one word per line
"""

import sys

from hangman.cli import main

if __name__ == "__main__":
    sys.exit(main())
