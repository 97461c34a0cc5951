"""Feedback implementations that need no audio backend."""

from .interfaces import Feedback


class SilentFeedback(Feedback):
    """Discards every cue."""

    def letter_correct(self) -> None:
        pass

    def letter_incorrect(self) -> None:
        pass

    def word_complete(self) -> None:
        pass


class QueuedFeedback(Feedback):
    """Collects cue names so a remote client can play them later."""

    def __init__(self):
        self.events: list[str] = []

    def letter_correct(self) -> None:
        self.events.append('letter_correct')

    def letter_incorrect(self) -> None:
        self.events.append('letter_incorrect')

    def word_complete(self) -> None:
        self.events.append('word_complete')

    def drain(self) -> list[str]:
        """Return and forget the cues raised so far."""
        events, self.events = self.events, []
        return events
