"""Debounce and throttle wrappers for high-rate dashboard callbacks.

Each wrapper is an object owning at most one pending timer; nothing is shared
between instances. Timers come from an injected Scheduler so the same wrappers
run on threads, on an asyncio loop, or on virtual time in tests.
"""

from __future__ import annotations

import asyncio
import functools
import heapq
import itertools
import logging
import threading
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Runs a callback once after ``delay_ms`` milliseconds."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class ThreadingScheduler:
    """Fires callbacks on daemon ``threading.Timer`` threads."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay_ms / 1000.0, self._run, args=(callback,))
        timer.daemon = True
        timer.start()
        return timer

    @staticmethod
    def _run(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception as exc:
            logger.error("Scheduled callback failed: %s", exc)


class AsyncioScheduler:
    """Schedules on an asyncio event loop (the running loop by default)."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000.0, callback)


class _VirtualTimer:
    def __init__(self, due_ms: float, callback: Callable[[], None]):
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class VirtualScheduler:
    """Deterministic scheduler on a virtual millisecond clock.

    Nothing fires until ``advance`` moves the clock; timers then run in due
    order, ties in scheduling order.
    """

    def __init__(self, start_ms: float = 0):
        self.now_ms = start_ms
        self._queue: list[tuple[float, int, _VirtualTimer]] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        timer = _VirtualTimer(self.now_ms + delay_ms, callback)
        heapq.heappush(self._queue, (timer.due_ms, next(self._counter), timer))
        return timer

    def advance(self, delta_ms: float) -> None:
        self.advance_to(self.now_ms + delta_ms)

    def advance_to(self, target_ms: float) -> None:
        while self._queue and self._queue[0][0] <= target_ms:
            due_ms, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now_ms = due_ms
            timer.callback()
        self.now_ms = max(self.now_ms, target_ms)

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)


_default_scheduler = ThreadingScheduler()


class Debouncer:
    """Call ``func`` only after ``wait_ms`` passes with no further calls.

    Every call cancels the pending invocation and schedules a new one with the
    latest arguments. Calls that never stop never fire.
    """

    def __init__(self, func: Callable[..., Any], wait_ms: float, scheduler: Optional[Scheduler] = None):
        self.func = func
        self.wait_ms = wait_ms
        self._scheduler = scheduler or _default_scheduler
        self._pending: Optional[TimerHandle] = None
        self._generation = 0
        self._lock = threading.Lock()
        functools.update_wrapper(self, func, updated=())

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    def _fire(self, generation: int, args: tuple, kwargs: dict) -> None:
        with self._lock:
            # A newer call superseded this timer after it had already started.
            if generation != self._generation:
                return
            self._pending = None
        self.func(*args, **kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
            self._generation += 1
            self._pending = self._scheduler.call_later(
                self.wait_ms, functools.partial(self._fire, self._generation, args, kwargs)
            )

    invoke = __call__


class Throttler:
    """Call ``func`` at most once per ``limit_ms``, on the leading edge.

    Calls made while locked are dropped, not queued.
    """

    def __init__(self, func: Callable[..., Any], limit_ms: float, scheduler: Optional[Scheduler] = None):
        self.func = func
        self.limit_ms = limit_ms
        self._scheduler = scheduler or _default_scheduler
        self._locked = False
        self._lock = threading.Lock()
        functools.update_wrapper(self, func, updated=())

    @property
    def is_locked(self) -> bool:
        return self._locked

    def _unlock(self) -> None:
        with self._lock:
            self._locked = False

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            if self._locked:
                return None
            self._locked = True
        try:
            result = self.func(*args, **kwargs)
        except Exception:
            # A failed call does not consume the window.
            self._unlock()
            raise
        self._scheduler.call_later(self.limit_ms, self._unlock)
        return result

    invoke = __call__


def debounce(func: Callable[..., Any], wait_ms: float, scheduler: Optional[Scheduler] = None) -> Debouncer:
    return Debouncer(func, wait_ms, scheduler)


def throttle(func: Callable[..., Any], limit_ms: float, scheduler: Optional[Scheduler] = None) -> Throttler:
    return Throttler(func, limit_ms, scheduler)
