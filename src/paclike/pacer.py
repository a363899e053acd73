from __future__ import annotations

import time
from collections.abc import Callable

from . import constants as c


class FramePacer:
    """Turn wall-clock time into a whole number of fixed simulation ticks.

    Elapsed time between polls is clamped to `max_step` so a long stall (a debugger
    break, a suspended laptop) cannot queue up an unbounded burst of catch-up ticks.
    """

    def __init__(
        self,
        step: float = c.DT,
        max_step: float = c.MAX_TIME_STEP,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        self.step = step
        self.max_step = max_step
        self.clock = clock
        self.accumulator = 0.0
        self.last: float | None = None

    def reset(self, now: float | None = None) -> None:
        self.accumulator = 0.0
        self.last = self.clock() if now is None else now

    def pump(self, tick: Callable[[], None], now: float | None = None) -> int:
        """Run as many ticks as the elapsed time covers; return how many ran."""
        if now is None:
            now = self.clock()
        if self.last is None:
            self.last = now
            return 0

        elapsed = max(0.0, now - self.last)
        self.last = now
        self.accumulator += min(elapsed, self.max_step)

        ticks = 0
        while self.accumulator >= self.step:
            tick()
            self.accumulator -= self.step
            ticks += 1
        return ticks
