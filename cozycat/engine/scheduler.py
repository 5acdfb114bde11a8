"""Accrual scheduler — the fixed-cadence passive income loop.

One firing every ``tick_interval_s`` of wall time, each worth a fixed
``1 / ticks_per_second`` of a nominal second. Late or bunched firings are not
corrected for: a firing is a firing.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from cozycat.data.balance import BALANCE
from cozycat.engine.economy import apply_passive_tick
from cozycat.engine.game_state import ProgressionState

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def stop(self) -> None: ...


# (interval_s, callback) -> handle; matches textual's App.set_interval
SetInterval = Callable[[float, Callable[[], object]], TimerHandle]


class AccrualScheduler:
    """Owns the passive loop for one garden."""

    def __init__(
        self,
        state: ProgressionState,
        on_accrued: Callable[[], object] | None = None,
        interval_s: float = BALANCE.economy.tick_interval_s,
        fraction: float = 1.0 / BALANCE.economy.ticks_per_second,
    ) -> None:
        self.state = state
        self.interval_s = interval_s
        self.fraction = fraction
        self._on_accrued = on_accrued
        self._timer: TimerHandle | None = None
        self._carry_s: float = 0.0
        self.firings: int = 0

    @property
    def running(self) -> bool:
        return self._timer is not None

    def fire(self) -> bool:
        """One timer firing. Returns True if any pets accrued.

        With no passive rate this touches nothing and calls nobody.
        """
        self.firings += 1
        if self.state.passive_rate <= 0:
            return False

        apply_passive_tick(self.state, self.fraction)
        if self._on_accrued is not None:
            self._on_accrued()
        return True

    def start(self, set_interval: SetInterval) -> None:
        """Begin firing for the life of the process."""
        if self._timer is not None:
            return
        self._timer = set_interval(self.interval_s, self.fire)
        logger.debug("accrual timer started (every %.3fs)", self.interval_s)

    def stop(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer = None
        logger.debug("accrual timer stopped after %d firings", self.firings)

    def catch_up(self, elapsed_s: float, max_catch_up_s: float = 60.0) -> int:
        """Fire once per whole interval in elapsed_s. Returns firings made.

        For hosts without a real timer (the web API). Leftover time carries
        into the next call; anything past max_catch_up_s is dropped.
        """
        if elapsed_s <= 0:
            return 0
        budget = min(elapsed_s + self._carry_s, max_catch_up_s)
        count = int(budget // self.interval_s)
        self._carry_s = budget - count * self.interval_s
        for _ in range(count):
            self.fire()
        return count
