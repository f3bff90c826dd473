# scheduler.py
from typing import Callable, Optional

import pygame  # type: ignore

TICK_EVENT = pygame.USEREVENT + 1


class TickScheduler:
    """
    Fixed-period tick source on top of pygame's timer events.

    A running pygame timer keeps its old period, so every change of interval
    goes through `arm()`, which cancels the old timer before starting the
    new one.
    """

    def __init__(self, event_type: int = TICK_EVENT, set_timer: Callable[[int, int], None] = pygame.time.set_timer):
        self.event_type = event_type
        self._set_timer = set_timer
        self._callback: Optional[Callable[[], None]] = None
        self._interval_ms: Optional[int] = None

    @property
    def armed(self) -> bool:
        return self._callback is not None

    @property
    def interval_ms(self) -> Optional[int]:
        return self._interval_ms

    def arm(self, interval_ms: int, callback: Callable[[], None]) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        self.cancel()
        self._callback = callback
        self._interval_ms = interval_ms
        self._set_timer(self.event_type, interval_ms)

    def cancel(self) -> None:
        if self._callback is None:
            return
        self._set_timer(self.event_type, 0)  # 0 disables the pygame timer
        self._callback = None
        self._interval_ms = None

    def dispatch(self, event) -> bool:
        """Run the callback if `event` is one of our ticks. Returns True if handled."""
        if event.type != self.event_type:
            return False
        # A tick already queued before cancel() may still arrive; drop it.
        if self._callback is not None:
            self._callback()
        return True
