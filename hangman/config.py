"""
Configuration Management Module

All runtime settings come from environment variables with sensible
defaults.  A ``.env`` file in the working directory is honoured when
``load_config()`` is called.
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from hangman.constants import (
    ASSETS_DIR, END_DELAY, MAX_ATTEMPTS, WORDLIST_FILE,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_setting(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None


class Config:
    """Settings for one run of the game."""

    def __init__(self, **overrides):
        # Resource Settings
        self.ASSETS_DIR   = os.getenv('HANGMAN_ASSETS_DIR', ASSETS_DIR)
        self.WORDLIST     = os.getenv('HANGMAN_WORDLIST',
                                      os.path.join(self.ASSETS_DIR, WORDLIST_FILE))

        # Game Settings
        self.MAX_ATTEMPTS = _int_setting('HANGMAN_MAX_ATTEMPTS', MAX_ATTEMPTS)
        self.END_DELAY    = _int_setting('HANGMAN_END_DELAY', END_DELAY)
        self.SEED         = _int_setting('HANGMAN_SEED', None)

        # Logging Settings
        self.LOG_DIR   = os.getenv('HANGMAN_LOG_DIR') or None
        self.LOG_LEVEL = os.getenv('HANGMAN_LOG_LEVEL', 'INFO')

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting '{key}'")
            setattr(self, key, value)

        if self.MAX_ATTEMPTS < 1:
            raise ValueError("HANGMAN_MAX_ATTEMPTS must be at least 1")
        if self.END_DELAY < 0:
            raise ValueError("HANGMAN_END_DELAY cannot be negative")
        if str(self.LOG_LEVEL).upper() not in LOG_LEVELS:
            raise ValueError(
                f"HANGMAN_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got '{self.LOG_LEVEL}'")

    def asset(self, filename: str) -> str:
        """Full path of an art file inside the assets directory."""
        return os.path.join(self.ASSETS_DIR, filename)


def load_config(dotenv_path: Optional[str] = None, **overrides) -> Config:
    """Read ``.env`` (if present) into the environment, then build a Config."""
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))
    return Config(**overrides)
