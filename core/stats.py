"""Session bookkeeping: elapsed time, mistakes and XP."""

import math

from .config import MIN_SESSION_MINUTES


class StatsTracker:
    """Counters for the running session. Expects self.clock (seconds)."""

    def _reset_stats(self) -> None:
        self.session_start_time = self.clock()
        self.mistakes = 0
        self.session_xp = 0

    def record_mistake(self) -> None:
        self.mistakes += 1

    def add_session_xp(self, amount: int) -> None:
        self.session_xp += amount

    def get_session_stats(self) -> dict:
        """Stats handed to the progress collaborator at the end of a session."""
        elapsed_ms = (self.clock() - self.session_start_time) * 1000
        # round half up, never report a zero-length session
        minutes = math.floor(elapsed_ms / 60000 + 0.5)
        return {
            'time_spent_minutes': max(MIN_SESSION_MINUTES, minutes),
            'mistakes': self.mistakes,
            'session_xp': self.session_xp
        }
