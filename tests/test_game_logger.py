import json

from hangman.errors import EmptySourceError
from hangman.game_logger import GameLogger, game_logger


def _entries(log_dir):
    files = list(log_dir.glob("game_log_*.log"))
    assert len(files) == 1
    lines = files[0].read_text(encoding="utf-8").splitlines()
    return [json.loads(line.split(" | ", 2)[2]) for line in lines]


def test_console_only_by_default():
    logger = GameLogger()
    assert logger.log_dir is None
    assert len(logger.logger.handlers) == 1


def test_events_written_as_json(tmp_path):
    log_dir = tmp_path / "logs"
    game_logger.configure(str(log_dir))

    game_logger.log_round_start(38, "__A__", 10)
    game_logger.log_guess("Z", "miss", "__A__", 9)
    game_logger.log_round_end("lost", "SNAKE", 0, 10)
    game_logger.log_error(EmptySourceError("word list contains no words"), "load_words")
    for handler in game_logger.logger.handlers:
        handler.flush()

    entries = _entries(log_dir)
    assert [e["action"] for e in entries] == [
        "round_started", "guess", "round_lost", "load_words"]
    assert entries[0]["details"] == {"word_count": 38, "mask": "__A__", "attempts": 10}
    assert entries[1]["event_type"] == "USER_ACTION"
    assert entries[2]["details"]["word"] == "SNAKE"
    assert entries[3]["event_type"] == "ERROR"
    assert entries[3]["details"]["error_type"] == "EmptySourceError"


def test_reconfigure_does_not_duplicate_handlers(tmp_path):
    game_logger.configure(str(tmp_path / "a"))
    game_logger.configure(str(tmp_path / "b"))
    assert len(game_logger.logger.handlers) == 2


def test_level_filters_info(tmp_path):
    log_dir = tmp_path / "logs"
    game_logger.configure(str(log_dir), level="WARNING")
    game_logger.log_guess("A", "hit", "A____", 10)
    game_logger.log_error(ValueError("boom"), "menu_loop")
    for handler in game_logger.logger.handlers:
        handler.flush()
    assert [e["action"] for e in _entries(log_dir)] == ["menu_loop"]
