"""Domain models for focal application."""

import math
from dataclasses import dataclass
from enum import Enum

from .config import LANGUAGE, REPEAT_BONUS, MAX_REPEAT_BONUS


class TokenType(str, Enum):
    WORD = 'word'
    PUNCTUATION = 'punctuation'


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str

    @property
    def is_punctuation(self) -> bool:
        return self.type is TokenType.PUNCTUATION


class LetterSlotStatus(str, Enum):
    EMPTY = 'empty'
    FOCUSED = 'focused'
    CORRECT = 'correct'
    INCORRECT = 'incorrect'
    FADA_MISSING = 'fadaMissing'
    DISABLED = 'disabled'


class CharMatch(str, Enum):
    """Outcome of comparing a typed letter with its target letter."""
    CORRECT = 'correct'
    FADA_MISSING = 'fadaMissing'
    INCORRECT = 'incorrect'


class Unit:
    """One sentence of an exercise."""

    def __init__(self, id: str, source_text: str, target_text: str):
        self.id = id
        self.source_text = source_text
        self.target_text = target_text

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'source_text': self.source_text,
            'target_text': self.target_text
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Unit':
        return cls(str(data['id']), data.get('source_text', ''), data.get('target_text', ''))


class Exercise:
    """An ordered list of units typed in one session."""

    def __init__(self, id: str, units: list[Unit], title: str = '', language: str = LANGUAGE):
        self.id = id
        self.units = units
        self.title = title
        self.language = language

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'language': self.language,
            'units': [u.to_dict() for u in self.units]
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Exercise':
        units = data.get('units')
        if units is None:
            units = data.get('sentences', [])
        return cls(
            str(data['id']),
            [Unit.from_dict(u) for u in units],
            title=data.get('title', ''),
            language=data.get('language', LANGUAGE)
        )

    def get_unit_ids(self) -> list[str]:
        return [u.id for u in self.units]

class Progress:
    """Durable per-user progress, kept outside the typing engine.

    The engine only reports completed unit ids and session stats; this record
    accumulates them across sessions so the next session can resume.
    """

    def __init__(self):
        self.completed_units = {}         # exercise_id -> [unit_id, ...]
        self.completion_counts = {}       # exercise_id -> times fully completed
        self.total_xp = 0
        self.total_mistakes = 0
        self.practice_minutes = 0
        self.sessions = 0

    def to_dict(self) -> dict:
        return {
            'completed_units': self.completed_units,
            'completion_counts': self.completion_counts,
            'total_xp': self.total_xp,
            'total_mistakes': self.total_mistakes,
            'practice_minutes': self.practice_minutes,
            'sessions': self.sessions
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Progress':
        progress = cls()
        progress.completed_units = {k: list(v) for k, v in data.get('completed_units', {}).items()}
        progress.completion_counts = dict(data.get('completion_counts', {}))
        progress.total_xp = data.get('total_xp', 0)
        progress.total_mistakes = data.get('total_mistakes', 0)
        progress.practice_minutes = data.get('practice_minutes', 0)
        progress.sessions = data.get('sessions', 0)
        return progress

    def completed_for(self, exercise_id: str) -> list[str]:
        """Unit ids already completed in an exercise."""
        return list(self.completed_units.get(exercise_id, []))

    def completion_count(self, exercise_id: str) -> int:
        return self.completion_counts.get(exercise_id, 0)

    def merge_completed(self, exercise_id: str, unit_ids) -> int:
        """Add newly completed unit ids. Returns how many were new."""
        known = self.completed_units.setdefault(exercise_id, [])
        added = 0
        for unit_id in unit_ids:
            if unit_id not in known:
                known.append(unit_id)
                added += 1
        return added

    def record_session(self, exercise: Exercise, completed_unit_ids, stats: dict,
                       exercise_completed: bool = False) -> int:
        """Fold a finished session into the totals.

        When the session completed the exercise, the repeat bonus for the
        completions before this one is added. Returns the XP credited.
        """
        self.merge_completed(exercise.id, completed_unit_ids)
        earned = stats.get('session_xp', 0)

        if exercise_completed:
            earned += calculate_completion_bonus(self.completion_count(exercise.id))
            self.completion_counts[exercise.id] = self.completion_count(exercise.id) + 1

        self.total_xp += earned
        self.total_mistakes += stats.get('mistakes', 0)
        self.practice_minutes += stats.get('time_spent_minutes', 0)
        self.sessions += 1
        return earned


def calculate_completion_bonus(previous_completions: int) -> int:
    """Bonus XP for completing an exercise again: nothing the first time, capped later."""
    return min(MAX_REPEAT_BONUS, previous_completions * REPEAT_BONUS)


def calculate_score(unit_count: int, mistakes: int) -> int:
    """Percentage score for a session, 100 with no mistakes, never below 0."""
    if unit_count <= 0:
        return 0
    return max(0, math.floor((unit_count - mistakes) / unit_count * 100 + 0.5))
