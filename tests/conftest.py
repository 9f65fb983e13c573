import random

import pytest

from hangman.constants import (
    HANGMAN_ART_FILE, LOSE_BANNER_FILE, START_BANNER_FILE, WIN_BANNER_FILE,
)
from hangman.game_logger import game_logger

ENV_VARS = (
    "HANGMAN_ASSETS_DIR", "HANGMAN_WORDLIST", "HANGMAN_MAX_ATTEMPTS",
    "HANGMAN_END_DELAY", "HANGMAN_SEED", "HANGMAN_LOG_DIR", "HANGMAN_LOG_LEVEL",
)


class ScriptedInput:
    """Stand-in for input(): replays *replies*, then behaves like EOF."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.replies:
            raise EOFError
        return self.replies.pop(0)


class FixedRandom:
    """Returns queued values from randrange() in order."""

    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # load_config() searches for .env from the working directory up
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def console_only_logging():
    game_logger.configure()
    yield
    game_logger.configure()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def art_frames():
    # 11 frames of 7 lines, each line tagged with its frame number
    return [f"frame{n}-line{i}" for n in range(11) for i in range(7)]


@pytest.fixture
def banner():
    return [f"banner-line{i}" for i in range(16)]


@pytest.fixture
def assets_dir(tmp_path, art_frames):
    directory = tmp_path / "assets"
    directory.mkdir()
    (directory / HANGMAN_ART_FILE).write_text("\n".join(art_frames) + "\n")
    for name, label in ((START_BANNER_FILE, "START"),
                        (WIN_BANNER_FILE, "WIN"),
                        (LOSE_BANNER_FILE, "LOSE")):
        lines = [f"{label} {i}" for i in range(16)]
        (directory / name).write_text("\n".join(lines) + "\n")
    return directory


@pytest.fixture
def word_file(tmp_path):
    def _write(*words):
        path = tmp_path / "words.txt"
        path.write_text("\n".join(words) + "\n", encoding="utf-8")
        return str(path)
    return _write
