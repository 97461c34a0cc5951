"""Configuration constants for focal application."""

LANGUAGE = 'ga'

# Word scoring
CORRECT_WORD_XP = 10          # Base XP for every completed word
NO_MISTAKES_BONUS = 2         # Added when the word was typed without a mistake
NO_HELP_BONUS = 2             # Added when no letter of the word was revealed

# Exercise scoring
REPEAT_BONUS = 5              # Bonus per earlier completion when an exercise is completed again
MAX_REPEAT_BONUS = 50         # Cap on the repeat bonus

# Input timing
ERROR_CLEAR_DELAY_MS = 250    # milliseconds before an incorrect letter is cleared

# Session stats
MIN_SESSION_MINUTES = 1       # Shortest session ever reported
