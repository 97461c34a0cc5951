"""Lesson controller: units, completion and the word-advance algorithm."""

import logging

from .models import Exercise, Unit
from .utils import tokenize_text

logger = logging.getLogger(__name__)


class LessonController:
    """Owns the exercise, the current unit and the completed unit set."""

    def initialize_lesson(self, exercise, completed_unit_ids=None) -> None:
        """Start a session on exercise, resuming at the first unit not yet completed."""
        if isinstance(exercise, dict):
            exercise = Exercise.from_dict(exercise)
        self.clear_lesson()

        completed = set(completed_unit_ids or [])
        self.exercise = exercise
        self.initial_completed_ids = frozenset(completed)
        self.completed_unit_ids = completed
        self.current_unit_index = self._first_incomplete_index()

        logger.info(f"Lesson {exercise.id} started at unit {self.current_unit_index} "
                    f"({len(completed)} already completed)")
        if self.units:
            self._initialize_word_state()

    def clear_lesson(self) -> None:
        """Tear the session down to an empty state."""
        self._clear_word_state()
        self.exercise = None
        self.current_unit_index = 0
        self.completed_unit_ids = set()
        self.initial_completed_ids = frozenset()
        self.show_source_text = False
        self.all_words = []
        self.revealed_words = []
        self.current_word_index = 0
        self._reset_stats()

    def reset_lesson(self) -> None:
        """Rewind to the first unit. Completed units are durable and survive."""
        self.current_unit_index = 0
        self.show_source_text = False
        # never drop below what the caller supplied
        self.completed_unit_ids |= self.initial_completed_ids
        self._reset_stats()
        self._initialize_word_state()

    @property
    def units(self) -> list[Unit]:
        return self.exercise.units if self.exercise else []

    def _first_incomplete_index(self) -> int:
        for i, unit in enumerate(self.units):
            if unit.id not in self.completed_unit_ids:
                return i
        # everything done: replay from the start
        return 0

    # Unit navigation

    def next_unit(self) -> None:
        if self.current_unit_index < len(self.units) - 1:
            self._move_to_unit(self.current_unit_index + 1)

    def previous_unit(self) -> None:
        if self.units and self.current_unit_index > 0:
            self._move_to_unit(self.current_unit_index - 1)

    def go_to_unit(self, index: int) -> None:
        if 0 <= index < len(self.units):
            self._move_to_unit(index)

    def _move_to_unit(self, index: int) -> None:
        self.current_unit_index = index
        self.show_source_text = False
        self._initialize_word_state()

    def toggle_source_text(self) -> None:
        self.show_source_text = not self.show_source_text

    # Completion

    def mark_current_unit_complete(self) -> None:
        unit = self.get_current_unit()
        if unit:
            self.mark_unit_complete(unit.id)

    def mark_unit_complete(self, unit_id: str) -> None:
        if unit_id not in self.completed_unit_ids:
            self.completed_unit_ids.add(unit_id)
            logger.debug(f"Unit {unit_id} completed")

    # Queries

    def get_current_unit(self) -> Unit | None:
        if 0 <= self.current_unit_index < len(self.units):
            return self.units[self.current_unit_index]
        return None

    def get_completed_unit_ids(self) -> list[str]:
        """Completed ids in exercise order, then any foreign ids the caller supplied."""
        ordered = [u.id for u in self.units if u.id in self.completed_unit_ids]
        extra = sorted(self.completed_unit_ids.difference(ordered))
        return ordered + extra

    def _completed_count(self) -> int:
        return sum(1 for u in self.units if u.id in self.completed_unit_ids)

    def get_progress(self) -> float:
        """Percentage of this exercise's units that are completed."""
        if not self.units:
            return 0
        return self._completed_count() / len(self.units) * 100

    def is_complete(self) -> bool:
        return bool(self.units) and self._completed_count() == len(self.units)

    def can_proceed(self) -> bool:
        unit = self.get_current_unit()
        return unit is not None and unit.id in self.completed_unit_ids

    # Words of the current unit

    def _initialize_word_state(self) -> None:
        """Tokenize the current unit and focus its first typeable word."""
        self._clear_word_state()
        unit = self.get_current_unit()
        if unit is None:
            self.all_words = []
            self.revealed_words = []
            self.current_word_index = 0
            return

        self.all_words = tokenize_text(unit.target_text)
        self.revealed_words = [''] * len(self.all_words)
        self.current_word_index = 0
        self._start_word_at(0)

    def _all_words_revealed(self) -> bool:
        return all(
            token.is_punctuation or self.revealed_words[i] == token.text
            for i, token in enumerate(self.all_words)
        )

    def _find_typeable_word(self, start: int) -> int | None:
        """First unrevealed word at or after start, revealing punctuation passed over."""
        index = start
        while index < len(self.all_words):
            token = self.all_words[index]
            if token.is_punctuation:
                self.revealed_words[index] = token.text
            elif not self.revealed_words[index]:
                return index
            index += 1
        return None

    def _start_word_at(self, start: int) -> None:
        index = self._find_typeable_word(start)
        if index is None and start > 0:
            # words skipped by navigation are still waiting earlier in the sentence
            index = self._find_typeable_word(0)
        if index is None:
            if self._all_words_revealed():
                self.mark_current_unit_complete()
            return
        self.current_word_index = index
        self.initialize_current_word()

    def complete_current_word(self) -> None:
        """Record the finished word, then complete the unit or move to the next word."""
        index = self.current_word_index
        self.revealed_words[index] = self.all_words[index].text

        if self._all_words_revealed():
            for i, token in enumerate(self.all_words):
                if token.is_punctuation:
                    self.revealed_words[i] = token.text
            self.mark_current_unit_complete()
            logger.info(f"Unit {self.current_unit_index} complete, progress {self.get_progress():.0f}%")
            return
        self._start_word_at(index + 1)
