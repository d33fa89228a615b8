"""Delayed-callback contracts used by the editor.

Debounced grammar checks, debounced snapshots, the remote-check cool-down and
the interview reminder poll all go through a ``Scheduler`` instead of touching
timers directly. ``AsyncioScheduler`` runs on the event loop, ``ThreadingScheduler``
serves callers that have no running loop, and ``ManualScheduler`` keeps a
virtual clock so behaviour can be driven deterministically.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import threading
import time
import typing

logger = logging.getLogger(__name__)

Callback = typing.Callable[[], typing.Any]


class ScheduledTask(typing.Protocol):
    def cancel(self) -> None: ...


class Scheduler(typing.Protocol):
    def now(self) -> float: ...

    def call_later(self, delay: float, callback: Callback) -> ScheduledTask: ...


class _BackgroundTasks:
    """Runs callbacks; coroutine results become tasks held here until they finish."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Future[typing.Any]] = set()

    @property
    def running_tasks(self) -> int:
        return len(self._tasks)

    def run(self, callback: Callback) -> None:
        result = callback()
        if asyncio.iscoroutine(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._finished)

    def _finished(self, task: asyncio.Future[typing.Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Scheduled callback failed: %s", error, exc_info=error)

    def close(self) -> None:
        for task in list(self._tasks):
            task.cancel()

    async def aclose(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)


class AsyncioScheduler(_BackgroundTasks):
    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        super().__init__()
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time()

    def call_later(self, delay: float, callback: Callback) -> ScheduledTask:
        return self.loop.call_later(max(delay, 0.0), self.run, callback)


class ThreadingScheduler:
    """Timer threads for synchronous callers.

    Coroutine callbacks run to completion on their timer thread.
    """

    def __init__(self) -> None:
        self._timers: set[threading.Timer] = set()
        self._lock = threading.Lock()

    def now(self) -> float:
        return time.monotonic()

    def call_later(self, delay: float, callback: Callback) -> ScheduledTask:
        timer = threading.Timer(max(delay, 0.0), self._fire)
        timer.args = (timer, callback)
        timer.daemon = True
        with self._lock:
            self._timers.add(timer)
        timer.start()
        return timer

    def _fire(self, timer: threading.Timer, callback: Callback) -> None:
        with self._lock:
            self._timers.discard(timer)
        try:
            result = callback()
            if asyncio.iscoroutine(result):
                asyncio.run(result)
        except Exception:
            logger.exception("Scheduled callback failed")

    def close(self) -> None:
        with self._lock:
            timers, self._timers = self._timers, set()
        for timer in timers:
            timer.cancel()


def default_scheduler() -> Scheduler:
    """The running event loop when there is one, timer threads otherwise."""
    try:
        return AsyncioScheduler(asyncio.get_running_loop())
    except RuntimeError:
        return ThreadingScheduler()


class _ManualTask:
    __slots__ = ("due", "callback", "cancelled")

    def __init__(self, due: float, callback: Callback) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(_BackgroundTasks):
    """Virtual clock; callbacks fire only when ``advance`` moves time past them."""

    def __init__(self, start: float = 0.0) -> None:
        super().__init__()
        self._now = start
        self._counter = itertools.count()
        self._queue: list[tuple[float, int, _ManualTask]] = []

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callback) -> ScheduledTask:
        task = _ManualTask(self._now + max(delay, 0.0), callback)
        heapq.heappush(self._queue, (task.due, next(self._counter), task))
        return task

    @property
    def pending(self) -> int:
        return sum(1 for _, _, task in self._queue if not task.cancelled)

    def advance(self, seconds: float) -> None:
        target = self._now + seconds
        while self._queue and self._queue[0][0] <= target:
            due, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            self._now = due
            self.run(task.callback)
        self._now = target


class _PendingCall:
    __slots__ = ("callback", "task")

    def __init__(self, callback: Callback) -> None:
        self.callback = callback
        self.task: ScheduledTask | None = None


class Debouncer:
    """Keyed debounce: a new call for a key replaces the pending call for that key."""

    def __init__(self, scheduler: Scheduler, delay: float) -> None:
        self._scheduler = scheduler
        self._delay = delay
        self._pending: dict[typing.Hashable, _PendingCall] = {}
        self._lock = threading.Lock()

    def schedule(self, key: typing.Hashable, callback: Callback) -> None:
        pending = _PendingCall(callback)

        def fire() -> typing.Any:
            with self._lock:
                if self._pending.get(key) is not pending:
                    return None
                del self._pending[key]
            return callback()

        with self._lock:
            previous = self._pending.get(key)
            self._pending[key] = pending
        if previous is not None and previous.task is not None:
            previous.task.cancel()
        pending.task = self._scheduler.call_later(self._delay, fire)

    def is_pending(self, key: typing.Hashable) -> bool:
        return key in self._pending

    def flush(self) -> None:
        """Run every pending call now, in scheduling order."""
        with self._lock:
            pending = list(self._pending.values())
            self._pending.clear()
        for call in pending:
            if call.task is not None:
                call.task.cancel()
            result = call.callback()
            if asyncio.iscoroutine(result):
                self._scheduler.call_later(0.0, lambda coroutine=result: coroutine)

    def cancel_all(self) -> None:
        with self._lock:
            pending = list(self._pending.values())
            self._pending.clear()
        for call in pending:
            if call.task is not None:
                call.task.cancel()
