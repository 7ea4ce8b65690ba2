"""Per-pick countdown held as an explicit deadline.

The timer never polls. An external scheduler calls :meth:`PickTimer.check`
whenever it likes; the first check after the deadline passes fires the
registered expiry callbacks for that pick, once.
"""

import logging
import time
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class PickTimer:
    """Countdown for the pick on the clock."""

    def __init__(
        self,
        time_per_pick_seconds: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        if time_per_pick_seconds < 0:
            raise ValueError(
                f"time_per_pick_seconds cannot be negative ({time_per_pick_seconds})"
            )
        self.time_per_pick_seconds = time_per_pick_seconds
        self._clock = clock
        self._callbacks: List[Callable[[int], None]] = []

        self.pick_number: Optional[int] = None
        self.deadline: Optional[float] = None
        self._paused_remaining: Optional[float] = None
        self._fired_for: Optional[int] = None

    @property
    def enabled(self) -> bool:
        """A zero time limit means the draft has no pick clock."""
        return self.time_per_pick_seconds > 0

    @property
    def is_running(self) -> bool:
        return self.deadline is not None

    @property
    def is_paused(self) -> bool:
        return self._paused_remaining is not None

    def on_expire(self, callback: Callable[[int], None]):
        """Register ``callback(pick_number)`` to run when a pick's time runs out."""
        self._callbacks.append(callback)

    def reset(self, pick_number: int):
        """Arm the clock for ``pick_number``.

        Repeating the reset for the pick already armed changes nothing.
        """
        if not self.enabled:
            return
        if pick_number == self.pick_number and (self.is_running or self.is_paused):
            return
        self.pick_number = pick_number
        self.deadline = self._clock() + self.time_per_pick_seconds
        self._paused_remaining = None
        self._fired_for = None
        logger.debug(
            "Pick clock armed for pick %d (%ds)", pick_number, self.time_per_pick_seconds
        )

    def pause(self):
        if self.deadline is None:
            return
        self._paused_remaining = max(self.deadline - self._clock(), 0.0)
        self.deadline = None

    def resume(self):
        if self._paused_remaining is None:
            return
        self.deadline = self._clock() + self._paused_remaining
        self._paused_remaining = None

    def stop(self):
        """Disarm the clock entirely (e.g. the draft finished)."""
        self.pick_number = None
        self.deadline = None
        self._paused_remaining = None
        self._fired_for = None

    def remaining(self) -> Optional[float]:
        """Seconds left for the current pick, ``None`` when not armed."""
        if self._paused_remaining is not None:
            return self._paused_remaining
        if self.deadline is None:
            return None
        return max(self.deadline - self._clock(), 0.0)

    def is_expired(self) -> bool:
        return self.deadline is not None and self._clock() >= self.deadline

    def check(self) -> bool:
        """Fire expiry callbacks if the deadline has passed.

        Returns True only on the call that fired them.
        """
        if not self.is_expired() or self._fired_for == self.pick_number:
            return False
        self._fired_for = self.pick_number
        logger.info("Pick clock expired for pick %d", self.pick_number)
        for callback in list(self._callbacks):
            callback(self.pick_number)
        return True
