"""Fixed-interval driver for polling cycles."""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class PollScheduler:
    """Runs a cycle on a fixed tick grid, one cycle at a time.

    Ticks are spaced ``interval`` seconds apart measured from the previous
    tick, not from the end of the previous cycle. When a cycle overruns one
    or more ticks, those ticks are skipped and the next cycle starts on the
    following tick of the grid. Any exception raised by the cycle stops the
    scheduler and propagates out of ``run``.
    """

    def __init__(
        self,
        cycle: Callable[[], Any],
        interval: float,
        *,
        run_immediately: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ):
        if interval < 0:
            raise ValueError(f"interval must not be negative, got {interval}")
        self.cycle = cycle
        self.interval = interval
        self.run_immediately = run_immediately
        self.clock = clock
        self._stopped = threading.Event()
        self.cycles_run = 0
        self.ticks_skipped = 0

    def stop(self) -> None:
        """Ask the loop to exit before the next cycle."""
        self._stopped.set()

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    def _next_tick(self, previous: float, now: float) -> float:
        """Advance ``previous`` along the grid to the first tick after a cycle."""
        tick = previous + self.interval
        if self.interval == 0 or tick >= now:
            return tick

        missed = int((now - tick) // self.interval) + 1
        self.ticks_skipped += missed
        logger.warning(
            f"Cycle overran the {self.interval}s interval, skipping {missed} tick(s)"
        )
        return tick + missed * self.interval

    def run(self) -> None:
        """Block running cycles until stopped or a cycle fails."""
        tick = self.clock()
        if not self.run_immediately:
            tick += self.interval

        while not self._stopped.is_set():
            delay = tick - self.clock()
            if delay > 0 and self._stopped.wait(delay):
                break

            logger.debug(f"Tick: starting cycle {self.cycles_run + 1}")
            self.cycle()
            self.cycles_run += 1
            if self._stopped.is_set():
                break
            tick = self._next_tick(tick, self.clock())
