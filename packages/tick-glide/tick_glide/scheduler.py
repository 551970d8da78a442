"""Timer capability: schedule a callback after N milliseconds, cancel it.

Two implementations ship with the package. ``ManualScheduler`` owns a fake
clock that only moves when ``advance()`` is called, which makes tween timing
fully deterministic in tests and frame-driven hosts. ``RealtimeScheduler``
follows the wall clock and can either be pumped from an existing loop or run
its own sleep loop.
"""
from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol, runtime_checkable

from tick_glide.util import now as _wall_now


@dataclass(order=True)
class TimerHandle:
    """Opaque, cancelable reference to one scheduled callback."""

    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)
    fired: bool = field(default=False, compare=False)

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


@runtime_checkable
class Scheduler(Protocol):
    """Protocol for timer implementations used by Tweenable."""

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> TimerHandle:
        """Run ``callback`` once, ``delay_ms`` milliseconds from now."""
        ...

    def cancel(self, handle: TimerHandle | None) -> None:
        """Prevent ``handle`` from firing. Unknown or spent handles are ignored."""
        ...

    def now(self) -> float:
        """Current time in epoch milliseconds."""
        ...


class _HeapScheduler:

    def __init__(self) -> None:
        self._queue: list[TimerHandle] = []
        self._seq = itertools.count()

    def now(self) -> float:
        raise NotImplementedError

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> TimerHandle:
        handle = TimerHandle(
            due=self.now() + max(delay_ms, 0), seq=next(self._seq), callback=callback
        )
        heapq.heappush(self._queue, handle)
        return handle

    def cancel(self, handle: TimerHandle | None) -> None:
        if handle is None:
            return
        handle.cancelled = True

    @property
    def pending(self) -> int:
        return sum(1 for h in self._queue if h.pending)

    def next_due(self) -> float | None:
        self._discard_cancelled()
        if not self._queue:
            return None
        return self._queue[0].due

    def _discard_cancelled(self) -> None:
        while self._queue and not self._queue[0].pending:
            heapq.heappop(self._queue)

    def _pop_due(self, until: float) -> TimerHandle | None:
        self._discard_cancelled()
        if self._queue and self._queue[0].due <= until:
            return heapq.heappop(self._queue)
        return None

    def _fire(self, handle: TimerHandle) -> None:
        handle.fired = True
        handle.callback()


class ManualScheduler(_HeapScheduler):
    """Deterministic scheduler driven by ``advance()``.

    Args:
        start: Initial clock value in milliseconds (default 0).
    """

    def __init__(self, start: float = 0) -> None:
        super().__init__()
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms``, firing every callback that falls due.

        Callbacks fire in due order with the clock set to their due time, so
        callbacks scheduled while advancing also fire if they fall inside the
        window. Returns the number of callbacks fired.
        """
        if ms < 0:
            raise ValueError("cannot advance the clock backwards")
        target = self._now + ms
        fired = 0
        while True:
            handle = self._pop_due(target)
            if handle is None:
                break
            self._now = max(self._now, handle.due)
            self._fire(handle)
            fired += 1
        self._now = target
        return fired

    def run_until_idle(self, limit: int = 100_000) -> int:
        """Advance straight to each due callback until nothing is scheduled."""
        fired = 0
        while fired < limit:
            due = self.next_due()
            if due is None:
                break
            fired += self.advance(max(due - self._now, 0))
        return fired


class RealtimeScheduler(_HeapScheduler):
    """Wall-clock scheduler.

    Call ``pump()`` once per frame from an existing loop, or hand control over
    with ``run_until_idle()``.
    """

    def now(self) -> float:
        return _wall_now()

    def pump(self) -> int:
        """Fire every callback that is due right now."""
        fired = 0
        while True:
            handle = self._pop_due(self.now())
            if handle is None:
                return fired
            self._fire(handle)
            fired += 1

    def run_until_idle(self) -> int:
        """Sleep between callbacks until nothing is left scheduled."""
        fired = 0
        while True:
            due = self.next_due()
            if due is None:
                return fired
            sleep_time = (due - self.now()) / 1000
            if sleep_time > 0:
                time.sleep(sleep_time)
            fired += self.pump()
