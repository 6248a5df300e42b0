"""Cancellable delayed callbacks keyed by an arbitrary hashable key.

Hides how "after N seconds, unless something happened first" is realised.
All callbacks run on the event loop that scheduled them.
"""

import asyncio
from collections.abc import Callable, Hashable

ErrorHandler = Callable[[Hashable, Exception], None]


class DelayedTasks:
    """A set of named asyncio timers.

    Scheduling a key that is already pending replaces the earlier timer.
    An exception raised by a callback is passed to ``on_error`` when one is
    given, otherwise it propagates out of the timer task.

    Example:
        timers = DelayedTasks()
        timers.schedule(("undo-offer", message.id), 0.5, offer_undo)
        timers.cancel(("undo-offer", message.id))
    """

    def __init__(self, on_error: ErrorHandler | None = None) -> None:
        self._tasks: dict[Hashable, asyncio.Task] = {}
        self._on_error = on_error

    def schedule(
        self, key: Hashable, delay: float, callback: Callable[[], None]
    ) -> asyncio.Task:
        """Run ``callback`` after ``delay`` seconds unless cancelled first.

        Must be called from inside a running event loop.
        """
        loop = asyncio.get_running_loop()
        self.cancel(key)
        task = loop.create_task(self._run(key, delay, callback))
        self._tasks[key] = task
        return task

    async def _run(self, key: Hashable, delay: float, callback: Callable[[], None]) -> None:
        await asyncio.sleep(delay)
        # Drop the entry first so the callback may reschedule the same key
        if self._tasks.get(key) is asyncio.current_task():
            del self._tasks[key]
        try:
            callback()
        except Exception as e:
            if self._on_error is None:
                raise
            self._on_error(key, e)

    def cancel(self, key: Hashable) -> bool:
        """Cancel a pending timer. Returns True if one was pending."""
        task = self._tasks.pop(key, None)
        if task is None or task.done():
            return False
        task.cancel()
        return True

    def is_pending(self, key: Hashable) -> bool:
        task = self._tasks.get(key)
        return task is not None and not task.done()

    def cancel_all(self) -> None:
        """Cancel every pending timer."""
        for key in list(self._tasks):
            self.cancel(key)

    def __len__(self) -> int:
        return sum(1 for task in self._tasks.values() if not task.done())
