"""Deferred-callback schedulers used to space out serialized releases."""
from __future__ import annotations

import heapq
import itertools
import threading
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Callable, List, Optional, Set, Tuple

Callback = Callable[[], None]


class Scheduler(ABC):
    """Fire-after-delay port. Scheduled callbacks cannot be cancelled."""

    @abstractmethod
    def after(self, delay: timedelta, callback: Callback) -> None:
        ...

    @property
    @abstractmethod
    def pending(self) -> int:
        ...


class ThreadingScheduler(Scheduler):
    """
    Wall-clock scheduler backed by daemon ``threading.Timer`` instances.

    Timers are daemonic so an interpreter exit drops outstanding work
    instead of hanging for weeks; call :meth:`wait` to keep the chain alive.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._timers: Set[threading.Timer] = set()

    def after(self, delay: timedelta, callback: Callback) -> None:
        timer: threading.Timer

        def _fire() -> None:
            try:
                callback()
            finally:
                with self._idle:
                    self._timers.discard(timer)
                    if not self._timers:
                        self._idle.notify_all()

        timer = threading.Timer(max(delay.total_seconds(), 0.0), _fire)
        timer.daemon = True
        with self._lock:
            self._timers.add(timer)
        timer.start()

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._timers)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until nothing is scheduled. Returns False on timeout."""
        with self._idle:
            return self._idle.wait_for(lambda: not self._timers, timeout=timeout)


class ManualScheduler(Scheduler):
    """Fake clock: callbacks only fire when the clock is driven explicitly."""

    def __init__(self) -> None:
        self._now = timedelta(0)
        self._queue: List[Tuple[timedelta, int, Callback]] = []
        self._seq = itertools.count()

    @property
    def now(self) -> timedelta:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._queue)

    def after(self, delay: timedelta, callback: Callback) -> None:
        due = self._now + max(delay, timedelta(0))
        heapq.heappush(self._queue, (due, next(self._seq), callback))

    def next_due(self) -> Optional[timedelta]:
        return self._queue[0][0] if self._queue else None

    def run_next(self) -> bool:
        """Advance to the earliest due callback and fire it."""
        if not self._queue:
            return False
        due, _, callback = heapq.heappop(self._queue)
        self._now = max(self._now, due)
        callback()
        return True

    def advance(self, delta: timedelta) -> int:
        """Move the clock forward by ``delta``, firing everything due on the way."""
        if delta < timedelta(0):
            raise ValueError(f"cannot move the clock backwards by {delta}")
        deadline = self._now + delta
        fired = 0
        while self._queue and self._queue[0][0] <= deadline:
            self.run_next()
            fired += 1
        self._now = deadline
        return fired

    def run_all(self, limit: Optional[int] = None) -> int:
        fired = 0
        while limit is None or fired < limit:
            if not self.run_next():
                break
            fired += 1
        return fired
