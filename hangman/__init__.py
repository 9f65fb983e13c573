"""
hangman — A console word-guessing game.

This package exposes the pure game functions and the thin I/O layers
wrapped around them:

  constants    – ANSI codes, art geometry, default resource paths.
  entities     – GameSession and GuessResult.
  engine       – evaluate(), initial_reveal(), apply_reveal(), apply_guess().
  resources    – load_word_list(), load_lines(), pick_random_word().
  renderer     – clear_screen(), frame_lines(), banner_lines(), render().
  console      – read_letter() input validation.
  game         – play_round() / run_round() round driver.
  config       – environment-based settings.
  game_logger  – structured event logging.
  cli          – menu loop and entry point.
"""
