"""One exercise-typing session: the state object all engine components share."""

import time

from .feedback import SilentFeedback
from .input_engine import InputEngine
from .interfaces import Feedback, Scheduler
from .lesson import LessonController
from .navigation import NavigationHelper
from .scheduler import CooperativeScheduler
from .stats import StatsTracker


class ExerciseSession(LessonController, InputEngine, NavigationHelper, StatsTracker):
    """Typing exercise state.

    Created empty; initialize_lesson() starts a session and clear_lesson()
    tears it down. Every public method runs to completion synchronously, the
    only deferred work being the revert of wrong letters via the scheduler.
    """

    def __init__(self, feedback: Feedback = None, scheduler: Scheduler = None, clock=None):
        self.feedback = feedback or SilentFeedback()
        self.scheduler = scheduler or CooperativeScheduler()
        self.clock = clock or time.time
        self._word_generation = 0
        self._pending_reverts = {}
        self.clear_lesson()

    def to_dict(self) -> dict:
        """Snapshot read by the presentation layer."""
        unit = self.get_current_unit()
        return {
            'exercise_id': self.exercise.id if self.exercise else None,
            'unit_index': self.current_unit_index,
            'unit_count': len(self.units),
            'current_unit': unit.to_dict() if unit else None,
            'show_source_text': self.show_source_text,
            'all_words': [t.text for t in self.all_words],
            'punctuation': [t.is_punctuation for t in self.all_words],
            'revealed_words': list(self.revealed_words),
            'current_word_index': self.current_word_index,
            'current_word': self.get_current_word(),
            'typed_letters': list(self.typed_letters),
            'slot_states': [s.value for s in self.slot_states],
            'current_letter_index': self.current_letter_index,
            'word_complete': self.is_word_complete(),
            'progress': self.get_progress(),
            'is_complete': self.is_complete(),
            'can_proceed': self.can_proceed(),
            'can_navigate_previous': self.can_navigate_previous(),
            'can_navigate_next': self.can_navigate_next(),
            'completed_unit_ids': self.get_completed_unit_ids(),
            'stats': self.get_session_stats()
        }
