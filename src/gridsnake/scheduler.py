"""Two fixed-period clocks driving a :class:`Simulation`.

The logic timer applies game ticks; the frame timer only reads a snapshot
for drawing. Both are fed elapsed milliseconds by whoever owns the event
loop, so nothing here sleeps or reschedules itself.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from . import config
from .logic import Simulation
from .state import Snapshot

logger = logging.getLogger(__name__)

FrameCallback = Callable[[Snapshot, bool], None]


class FixedTimer:
    """Fires ``callback`` once per ``period_ms`` of time fed to ``advance``.

    ``max_fires`` bounds catch-up: at most that many callbacks per
    ``advance``, and any further whole periods are dropped.
    """

    def __init__(
        self,
        period_ms: float,
        callback: Callable[[], None],
        max_fires: int | None = None,
    ) -> None:
        if period_ms <= 0:
            raise ValueError("Timer period must be positive.")
        if max_fires is not None and max_fires < 1:
            raise ValueError("max_fires must be at least 1.")
        self.period_ms = period_ms
        self.callback = callback
        self.max_fires = max_fires
        self.active = False
        self._elapsed = 0.0

    def start(self) -> None:
        if not self.active:
            self._elapsed = 0.0
            self.active = True

    def cancel(self) -> None:
        self.active = False

    def advance(self, dt_ms: float) -> int:
        """Add elapsed time and fire for full periods. Returns fire count."""
        if not self.active:
            return 0
        self._elapsed += dt_ms
        fired = 0
        while self.active and self._elapsed >= self.period_ms:
            if self.max_fires is not None and fired >= self.max_fires:
                self._elapsed %= self.period_ms
                break
            self._elapsed -= self.period_ms
            fired += 1
            self.callback()
        return fired


class Scheduler:
    def __init__(
        self,
        simulation: Simulation,
        tick_ms: float = config.TICK_MS,
        frame_ms: float = config.FRAME_MS,
        on_frame: FrameCallback | None = None,
    ) -> None:
        self.simulation = simulation
        self.on_frame = on_frame
        self.logic_timer = FixedTimer(tick_ms, self._on_logic, max_fires=config.MAX_CATCHUP_TICKS)
        self.frame_timer = FixedTimer(frame_ms, self._on_frame, max_fires=1)
        self.paused = False
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self.logic_timer.active

    def start(self) -> None:
        if self.running:
            return
        self.logic_timer.start()
        self.frame_timer.start()
        logger.info(
            "Scheduler started (tick %sms, frame %sms)",
            self.logic_timer.period_ms,
            self.frame_timer.period_ms,
        )

    def stop(self) -> None:
        if not self.running:
            return
        self.logic_timer.cancel()
        self.frame_timer.cancel()
        logger.info("Scheduler stopped after %d ticks", self.ticks)

    def pause(self) -> None:
        if not self.paused:
            self.paused = True
            logger.debug("Paused")

    def resume(self) -> None:
        if self.paused:
            self.paused = False
            logger.debug("Resumed")

    def toggle_pause(self) -> None:
        """Pause/unpause; after a game over, unpausing starts a new round."""
        if self.simulation.over and self.paused:
            self.simulation.reset()
            self.resume()
        elif self.paused:
            self.resume()
        else:
            self.pause()

    def advance(self, dt_ms: float) -> None:
        self.logic_timer.advance(dt_ms)
        self.frame_timer.advance(dt_ms)

    def _on_logic(self) -> None:
        if self.simulation.over:
            self.pause()
        if self.paused:
            return
        self.simulation.tick()
        self.ticks += 1
        if self.simulation.over:
            self.pause()

    def _on_frame(self) -> None:
        if self.on_frame is not None:
            self.on_frame(self.simulation.snapshot(), self.paused)
