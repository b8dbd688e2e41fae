"""
scheduler.py — Cancellable One-Shot Timers
===========================================
The playback controller never touches a timer primitive directly.  It
asks a Scheduler to run a callback after a delay and keeps the returned
TaskHandle so it can cancel it.  That keeps "at most one pending timer"
a property of one attribute on the controller.

Implementations:
  • AsyncioScheduler – wraps an asyncio event loop's call_later.
  • ManualScheduler  – virtual millisecond clock advanced by hand.
                       Used for headless replay and in tests.

Both are single-threaded: callbacks run on the same control flow as
every user operation, so they never interleave mid-mutation.
"""

import asyncio
import itertools
import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class TaskHandle:
    """A scheduled callback that may still be cancelled."""

    def cancel(self) -> None:
        raise NotImplementedError

    @property
    def cancelled(self) -> bool:
        raise NotImplementedError


class Scheduler:
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TaskHandle:
        """Run `callback` once after `delay_ms` milliseconds."""
        raise NotImplementedError


# ---------------------------------------------------------------------------
# asyncio
# ---------------------------------------------------------------------------
class _AsyncioTask(TaskHandle):
    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()

    @property
    def cancelled(self) -> bool:
        return self._handle.cancelled()


class AsyncioScheduler(Scheduler):
    """
    Schedules on `loop`, or on the running loop at call time when no
    loop was given.  Raises RuntimeError if neither exists.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TaskHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioTask(loop.call_later(delay_ms / 1000.0, callback))


# ---------------------------------------------------------------------------
# Manual / virtual clock
# ---------------------------------------------------------------------------
class _ManualTask(TaskHandle):
    __slots__ = ("due_ms", "seq", "callback", "_cancelled", "fired")

    def __init__(self, due_ms: int, seq: int, callback: Callable[[], None]):
        self.due_ms     = due_ms
        self.seq        = seq
        self.callback   = callback
        self._cancelled = False
        self.fired      = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return not self._cancelled and not self.fired


class ManualScheduler(Scheduler):
    """
    Nothing fires until `advance()` moves the clock.  Tasks due at the
    same instant fire in the order they were scheduled.
    """

    def __init__(self):
        self.now_ms: int = 0
        self._tasks: List[_ManualTask] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TaskHandle:
        task = _ManualTask(self.now_ms + max(0, int(delay_ms)), next(self._seq), callback)
        self._tasks.append(task)
        return task

    @property
    def pending(self) -> int:
        return sum(1 for t in self._tasks if t.active)

    def advance(self, ms: int) -> int:
        """Move the clock forward `ms`, firing everything that falls due. Returns fired count."""
        target = self.now_ms + ms
        fired = 0
        while True:
            task = self._next_due(target)
            if task is None:
                break
            self.now_ms = task.due_ms
            task.fired = True
            task.callback()
            fired += 1
        self.now_ms = target
        self._tasks = [t for t in self._tasks if t.active]
        return fired

    def run_until_idle(self, limit: int = 10_000) -> int:
        """Fire tasks in due order until none are pending (or `limit` is hit)."""
        fired = 0
        while fired < limit:
            active = [t for t in self._tasks if t.active]
            if not active:
                break
            soonest = min(active, key=lambda t: (t.due_ms, t.seq))
            fired += self.advance(soonest.due_ms - self.now_ms)
        if fired >= limit:
            logger.warning("ManualScheduler stopped after %d callbacks", limit)
        return fired

    def _next_due(self, target: int) -> Optional[_ManualTask]:
        due = [t for t in self._tasks if t.active and t.due_ms <= target]
        if not due:
            return None
        return min(due, key=lambda t: (t.due_ms, t.seq))
