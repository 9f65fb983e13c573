"""
Game Logger Module for Hangman

Structured logging for round lifecycle events, guesses and errors.
Only warnings and errors reach the console so they never interleave
with the game screen; the full event stream goes to a dated log file
when a log directory is configured.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


class GameLogger:
    """
    Centralized logging for Hangman rounds.

    Every event is written as a JSON object so log files can be parsed
    line by line.
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = "INFO"):
        self.log_dir = None
        self.logger = logging.getLogger('hangman_game')
        self.configure(log_dir, level)

    def configure(self, log_dir: Optional[str] = None, level: str = "INFO"):
        """(Re)build the handlers; *log_dir* None means console only."""
        self.logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
        self.logger.propagate = False

        # Prevent duplicate handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        self.logger.addHandler(console_handler)

        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(file_handler)

    def _create_log_entry(self, event_type: str, action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_round_start(self, word_count: int, mask: str, attempts: int):
        """
        Log the start of a round.

        The target word itself is left out so a log tail cannot spoil it;
        only the opening mask is recorded.
        """
        details = {'word_count': word_count, 'mask': mask, 'attempts': attempts}
        self.logger.info(self._create_log_entry('GAME_EVENT', 'round_started', details))

    def log_guess(self, letter: str, outcome: str, mask: str, attempts: int):
        details = {'letter': letter, 'outcome': outcome,
                   'mask': mask, 'attempts': attempts}
        self.logger.info(self._create_log_entry('USER_ACTION', 'guess', details))

    def log_round_end(self, status: str, word: str, attempts: int, wrong_count: int):
        details = {'status': status, 'word': word,
                   'attempts': attempts, 'wrong_count': wrong_count}
        self.logger.info(self._create_log_entry('GAME_EVENT', f'round_{status}', details))

    def log_error(self, error: Exception, action: str):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: What the program was doing (e.g. 'load_words')
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance
game_logger = GameLogger()
