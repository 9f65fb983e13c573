"""
errors.py — Exception types raised by the Hangman package.
"""


class HangmanError(Exception):
    """Base class for every error the game reports to the operator."""


class ResourceUnavailableError(HangmanError):
    """A word list or art file could not be opened or read."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"cannot read resource '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class EmptySourceError(HangmanError):
    """The word list held no usable candidate words."""


class ResourceTooShortError(HangmanError):
    """A banner resource has fewer lines than a banner needs."""

    def __init__(self, needed: int, found: int):
        self.needed = needed
        self.found  = found
        super().__init__(
            f"banner needs {needed} lines but the resource has only {found}")


class InvalidGuessInput(HangmanError):
    """Operator input that is not exactly one letter A-Z."""


class ReadStreamClosedError(HangmanError):
    """End of input reached on the interactive stream."""
