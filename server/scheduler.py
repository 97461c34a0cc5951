"""Scheduler backed by the server's event loop."""

import asyncio

from core.interfaces import Scheduler


class AsyncioScheduler(Scheduler):
    """Defers callbacks with loop.call_later.

    Must be called from inside the running loop (an async endpoint), so the
    callbacks run on the same thread as every other session operation.
    """

    def call_later(self, delay_ms: int, callback) -> asyncio.TimerHandle:
        loop = asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000.0, callback)
