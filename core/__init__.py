from .models import (
    Exercise, Unit, Token, TokenType, LetterSlotStatus, CharMatch, Progress,
    calculate_completion_bonus, calculate_score
)
from .interfaces import Feedback, Scheduler, Storage
from .utils import tokenize_text, compare_chars, is_punctuation
from .session import ExerciseSession
from .config import (
    CORRECT_WORD_XP, NO_MISTAKES_BONUS, NO_HELP_BONUS,
    REPEAT_BONUS, MAX_REPEAT_BONUS, ERROR_CLEAR_DELAY_MS, LANGUAGE
)

__all__ = [
    'Exercise', 'Unit', 'Token', 'TokenType', 'LetterSlotStatus', 'CharMatch', 'Progress',
    'calculate_completion_bonus', 'calculate_score',
    'Feedback', 'Scheduler', 'Storage',
    'tokenize_text', 'compare_chars', 'is_punctuation',
    'ExerciseSession',
    'CORRECT_WORD_XP', 'NO_MISTAKES_BONUS', 'NO_HELP_BONUS',
    'REPEAT_BONUS', 'MAX_REPEAT_BONUS', 'ERROR_CLEAR_DELAY_MS', 'LANGUAGE'
]
