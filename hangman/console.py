"""
console.py — Operator input for Hangman.
"""

from string import ascii_uppercase

from hangman.errors import InvalidGuessInput, ReadStreamClosedError


def parse_letter(raw: str) -> str:
    """Trim and upper-case *raw*; it must then be exactly one letter A-Z."""
    text = raw.strip().upper()
    if len(text) != 1 or text not in ascii_uppercase:
        raise InvalidGuessInput(f"'{raw.strip()}' is not a single letter")
    return text


def read_line(prompt: str = "", read=input) -> str:
    try:
        return read(prompt)
    except EOFError:
        raise ReadStreamClosedError("input stream closed") from None


def read_letter(read=input) -> str:
    """
    Prompt until the operator types a single letter.

    There is no retry limit.  The only way out other than a valid letter
    is end of input, which raises ReadStreamClosedError.
    """
    while True:
        raw = read_line("Enter a single letter: ", read)
        try:
            return parse_letter(raw)
        except InvalidGuessInput:
            print("Invalid input. Please enter a single letter.")
