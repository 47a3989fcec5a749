"""
Scheduler - cancellable delayed callbacks

The study modes never sleep. Transient messages and card animations are
sequenced with callbacks scheduled for a later time; the host (the Streamlit
page, or a test) calls `run_due()` to fire whatever has come due.

Each mode component schedules through its own `TimerScope`. Closing the scope
on mode exit invalidates every callback it created, so nothing scheduled by an
old mode can touch state after the mode is gone.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(order=True)
class TaskHandle:
    """
    A scheduled callback. Cancelling is idempotent.
    """
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)
    fired: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class Scheduler:
    """
    Time-ordered queue of callbacks driven by an injectable clock.

    Args:
        clock: Returns the current time in seconds (default: time.monotonic)
    """

    def __init__(self, clock: Clock = time.monotonic):
        self.clock = clock
        self._queue: list[TaskHandle] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TaskHandle:
        """Schedule `callback` to run `delay` seconds from now."""
        handle = TaskHandle(
            due=self.clock() + max(0.0, delay),
            seq=next(self._seq),
            callback=callback,
        )
        heapq.heappush(self._queue, handle)
        return handle

    def run_due(self) -> int:
        """
        Fire every pending callback whose due time has passed.

        Callbacks scheduled while running are fired in the same pass if they
        are already due. Returns the number of callbacks fired.
        """
        fired = 0
        while self._queue:
            handle = self._queue[0]
            if handle.cancelled:
                heapq.heappop(self._queue)
                continue
            if handle.due > self.clock():
                break
            heapq.heappop(self._queue)
            handle.fired = True
            handle.callback()
            fired += 1
        return fired

    def next_due(self) -> Optional[float]:
        """Due time of the earliest pending callback, if any."""
        for handle in sorted(self._queue):
            if handle.pending:
                return handle.due
        return None

    @property
    def has_pending(self) -> bool:
        return any(handle.pending for handle in self._queue)

    def cancel_all(self) -> None:
        for handle in self._queue:
            handle.cancel()
        self._queue.clear()


class TimerScope:
    """
    Callbacks owned by one mode component.

    After `close()` every handle created here is cancelled and new requests
    come back already cancelled.
    """

    def __init__(self, scheduler: Scheduler, name: str = ""):
        self.scheduler = scheduler
        self.name = name
        self.closed = False
        self._handles: list[TaskHandle] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> TaskHandle:
        if self.closed:
            handle = TaskHandle(due=self.scheduler.clock(), seq=-1, callback=callback)
            handle.cancel()
            return handle

        def guarded() -> None:
            if not self.closed:
                callback()

        handle = self.scheduler.call_later(delay, guarded)
        self._handles = [h for h in self._handles if h.pending]
        self._handles.append(handle)
        return handle

    def cancel_all(self) -> None:
        """Cancel pending callbacks but keep the scope usable."""
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()

    def close(self) -> None:
        self.cancel_all()
        self.closed = True
        logger.debug("Closed timer scope %s", self.name)

    @property
    def has_pending(self) -> bool:
        return any(handle.pending for handle in self._handles)
