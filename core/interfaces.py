"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod
from typing import Callable


class Feedback(ABC):
    """Audio/haptic cues raised by the typing engine.

    Calls are fire-and-forget: the engine never depends on them succeeding.
    """

    @abstractmethod
    def letter_correct(self) -> None:
        """A letter was typed correctly and the word continues."""
        pass

    @abstractmethod
    def letter_incorrect(self) -> None:
        """A letter was wrong or missing its fada."""
        pass

    @abstractmethod
    def word_complete(self) -> None:
        """The last letter of a word was typed or revealed."""
        pass


class Scheduler(ABC):
    """Runs a callback once after a delay."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]):
        """Schedule callback. Returns a handle with a cancel() method."""
        pass


class Storage(ABC):
    """Abstract base class for exercise and progress storage."""

    @abstractmethod
    def list_exercises(self) -> list[dict]:
        """List stored exercises as dicts (see Exercise.to_dict)."""
        pass

    @abstractmethod
    def load_exercise(self, exercise_id: str) -> dict | None:
        """Load one exercise. Returns exercise dict or None if not found."""
        pass

    @abstractmethod
    def seed_exercises(self, exercises: list[dict]) -> None:
        """Insert or replace exercises, keyed by id."""
        pass

    @abstractmethod
    def load_progress(self, user_id: str = "default") -> dict | None:
        """Load progress for a user. Returns progress dict or None if not found."""
        pass

    @abstractmethod
    def save_progress(self, progress: dict, user_id: str = "default") -> None:
        """Save progress for a user."""
        pass
