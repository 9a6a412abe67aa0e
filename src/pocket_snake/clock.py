"""Host-driven timers: the fixed-period game clock and the splash fade."""

from __future__ import annotations

from typing import Callable, Optional

from .config import TICK_MS, SPLASH_FADE_IN_MS, SPLASH_HOLD_MS, SPLASH_FADE_OUT_MS


class GameClock:
    """
    Fires `on_tick` once every `period_ms` while running.

    The clock never reads the time itself: the host passes its own millisecond
    timestamp to start() and update() (pygame.time.get_ticks() in the app, plain
    ints in tests).
    """

    def __init__(
        self,
        period_ms: int = TICK_MS,
        on_tick: Optional[Callable[[], object]] = None,
        max_catchup: int = 5,
    ):
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        if max_catchup < 1:
            raise ValueError("max_catchup must be >= 1")
        self._period_ms = period_ms
        self._on_tick = on_tick
        self._max_catchup = max_catchup
        self._running = False
        self._next_due = 0
        self._tick_count = 0

    @property
    def period_ms(self) -> int:
        return self._period_ms

    @property
    def running(self) -> bool:
        return self._running

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def set_callback(self, on_tick: Callable[[], object]) -> None:
        self._on_tick = on_tick

    def start(self, now_ms: int) -> None:
        if self._running:
            return
        self._running = True
        self._next_due = now_ms + self._period_ms

    def stop(self) -> None:
        self._running = False

    def update(self, now_ms: int) -> int:
        """Fire every tick that is due at now_ms. Returns how many fired."""
        fired = 0
        while self._running and now_ms >= self._next_due:
            if fired == self._max_catchup:
                # too far behind, drop the backlog instead of bursting
                self._next_due = now_ms + self._period_ms
                break
            self._next_due += self._period_ms
            self._tick_count += 1
            fired += 1
            if self._on_tick is not None:
                self._on_tick()
        return fired


class SplashSequence:
    """
    One-shot fade in / hold / fade out. Calls `on_done` exactly once when the
    whole sequence has elapsed.
    """

    def __init__(
        self,
        fade_in_ms: int = SPLASH_FADE_IN_MS,
        hold_ms: int = SPLASH_HOLD_MS,
        fade_out_ms: int = SPLASH_FADE_OUT_MS,
        on_done: Optional[Callable[[], object]] = None,
    ):
        if min(fade_in_ms, hold_ms, fade_out_ms) < 0:
            raise ValueError("splash durations must be >= 0")
        self.fade_in_ms = fade_in_ms
        self.hold_ms = hold_ms
        self.fade_out_ms = fade_out_ms
        self._on_done = on_done
        self._started_at: Optional[int] = None
        self._done = False

    @property
    def duration_ms(self) -> int:
        return self.fade_in_ms + self.hold_ms + self.fade_out_ms

    @property
    def done(self) -> bool:
        return self._done

    def set_callback(self, on_done: Callable[[], object]) -> None:
        self._on_done = on_done

    def start(self, now_ms: int) -> None:
        if self._started_at is None:
            self._started_at = now_ms

    def elapsed(self, now_ms: int) -> int:
        if self._started_at is None:
            return 0
        return max(0, now_ms - self._started_at)

    def alpha(self, now_ms: int) -> float:
        """Opacity of the splash title in [0, 1]."""
        t = self.elapsed(now_ms)
        if t < self.fade_in_ms:
            return t / self.fade_in_ms
        t -= self.fade_in_ms
        if t < self.hold_ms:
            return 1.0
        t -= self.hold_ms
        if t < self.fade_out_ms:
            return 1.0 - t / self.fade_out_ms
        return 0.0

    def update(self, now_ms: int) -> bool:
        """Returns True on the call that finished the sequence."""
        if self._done or self._started_at is None:
            return False
        if self.elapsed(now_ms) < self.duration_ms:
            return False
        self._done = True
        if self._on_done is not None:
            self._on_done()
        return True
