"""Cancellable delayed callbacks.

The selection debounce needs exactly one kind of deferred work: "run this
callback after a quiet window unless cancelled first".  Two hosts are
supported:

* :class:`PollingScheduler` keeps its own task list and runs whatever is
  due when :meth:`PollingScheduler.run_due` is called.  The Dash server
  drives it from a ``dcc.Interval`` tick; tests drive it with a fake clock.
* :class:`AsyncioScheduler` hands the work to an asyncio event loop.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import time
from typing import Callable, Protocol

Clock = Callable[[], float]


class ScheduledTask(Protocol):
    def cancel(self) -> None: ...

    @property
    def cancelled(self) -> bool: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask: ...


class PollingTask:
    """Handle for a callback registered with :class:`PollingScheduler`."""

    def __init__(self, deadline: float, callback: Callable[[], None]) -> None:
        self.deadline = deadline
        self._callback = callback
        self.cancelled = False
        self.done = False

    def cancel(self) -> None:
        self.cancelled = True

    def _run(self) -> None:
        self.done = True
        self._callback()


class PollingScheduler:
    """Scheduler whose tasks run on explicit :meth:`run_due` calls."""

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self.clock = clock
        self._heap: list[tuple[float, int, PollingTask]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> PollingTask:
        task = PollingTask(self.clock() + delay, callback)
        heapq.heappush(self._heap, (task.deadline, next(self._counter), task))
        return task

    @property
    def pending(self) -> int:
        """Number of tasks neither run nor cancelled."""
        return sum(1 for _, _, t in self._heap if not t.cancelled)

    def run_due(self) -> int:
        """Run every task whose deadline has passed; return how many ran."""
        now = self.clock()
        ran = 0
        while self._heap and self._heap[0][0] <= now:
            _, _, task = heapq.heappop(self._heap)
            if task.cancelled:
                continue
            task._run()
            ran += 1
        return ran


class AsyncioTask:
    """Wrapper giving an ``asyncio.TimerHandle`` the task interface."""

    def __init__(self, handle: asyncio.TimerHandle) -> None:
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()

    @property
    def cancelled(self) -> bool:
        return self._handle.cancelled()


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> AsyncioTask:
        loop = self._loop or asyncio.get_running_loop()
        return AsyncioTask(loop.call_later(delay, callback))
