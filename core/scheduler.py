"""Polled timer queue for deferred engine callbacks."""

import time

from .interfaces import Scheduler


class ScheduledCall:
    def __init__(self, due: float, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class CooperativeScheduler(Scheduler):
    """Keeps deferred callbacks until the owner calls run_pending().

    Nothing runs on another thread; callbacks fire inside run_pending() on the
    caller's thread, in due order.
    """

    def __init__(self, clock=None):
        self.clock = clock or time.monotonic
        self._queue: list[ScheduledCall] = []

    def call_later(self, delay_ms: int, callback) -> ScheduledCall:
        call = ScheduledCall(self.clock() + delay_ms / 1000.0, callback)
        self._queue.append(call)
        return call

    def run_pending(self) -> int:
        """Run every due callback. Returns how many ran."""
        now = self.clock()
        due = sorted((c for c in self._queue if c.due <= now), key=lambda c: c.due)
        self._queue = [c for c in self._queue if c.due > now and not c.cancelled]
        ran = 0
        for call in due:
            # an earlier callback may have cancelled this one
            if call.cancelled:
                continue
            call.callback()
            ran += 1
        return ran

    def pending_count(self) -> int:
        return sum(1 for c in self._queue if not c.cancelled)
