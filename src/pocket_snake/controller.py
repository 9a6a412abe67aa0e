# controller.py
from typing import Optional
import logging

from .config import CFG, Config, SPLASH, MENU, PLAYING, PAUSED, GAME_OVER
from .engine import SimulationEngine, Direction
from .clock import GameClock, SplashSequence

logger = logging.getLogger(__name__)


class GameController:
    """
    Top-level application object. Owns one engine, the game clock and the
    splash sequence, and turns button presses into engine operations.

    Buttons follow the handheld layout: a d-pad, START (start / pause /
    resume / play again) and SELECT (back to the main menu).
    """

    def __init__(
        self,
        config: Config = CFG,
        engine: Optional[SimulationEngine] = None,
        now_ms: int = 0,
    ):
        self.config = config
        self.engine = engine if engine is not None else SimulationEngine(
            grid_size=config.grid_size, seed=config.seed,
        )
        self.clock = GameClock(period_ms=config.tick_ms, on_tick=self.engine.tick)
        self.splash = SplashSequence(
            fade_in_ms=config.splash_fade_in_ms,
            hold_ms=config.splash_hold_ms,
            fade_out_ms=config.splash_fade_out_ms,
            on_done=self._finish_splash,
        )
        self._press_ms: Optional[int] = None
        self._start_pending = False
        self.engine.add_phase_listener(self._on_phase_change)
        if self.engine.phase == SPLASH:
            self.splash.start(now_ms)

    @property
    def phase(self) -> str:
        return self.engine.phase

    # ----- Lifecycle -----
    def _finish_splash(self) -> None:
        self.engine.request_phase(MENU)

    def _on_phase_change(self, old_phase: str, new_phase: str) -> None:
        if old_phase == PLAYING:
            self.clock.stop()
            self._start_pending = False
        if new_phase == PLAYING:
            if self._press_ms is not None:
                self.clock.start(self._press_ms)
            else:
                # anchored by the next update(), never by a stale timestamp
                self._start_pending = True
        if new_phase == GAME_OVER:
            logger.info("game over, score %d", self.engine.score)

    def _request(self, phase: str, now_ms: Optional[int]) -> bool:
        self._press_ms = now_ms
        try:
            return self.engine.request_phase(phase)
        finally:
            self._press_ms = None

    def update(self, now_ms: int) -> None:
        """Advance timers to now_ms. The only place time enters the game."""
        if self.engine.phase == SPLASH:
            self.splash.update(now_ms)
            return
        if self._start_pending:
            self._start_pending = False
            self.clock.start(now_ms)
        self.clock.update(now_ms)

    # ----- Buttons -----
    # now_ms is the host time of the press; without it the clock starts
    # counting from the next update().
    def press_direction(self, direction: Direction) -> bool:
        return self.engine.handle_input(direction)

    def press_start(self, now_ms: Optional[int] = None) -> bool:
        phase = self.engine.phase
        if phase == PLAYING:
            return self._request(PAUSED, now_ms)
        if phase in (MENU, PAUSED, GAME_OVER):
            return self._request(PLAYING, now_ms)
        return False

    def press_select(self, now_ms: Optional[int] = None) -> bool:
        # SPLASH -> MENU belongs to the splash timer, not the player
        if self.engine.phase not in (PAUSED, GAME_OVER):
            return False
        return self._request(MENU, now_ms)

    def play_again(self, now_ms: Optional[int] = None) -> bool:
        if self.engine.phase != GAME_OVER:
            return False
        return self._request(PLAYING, now_ms)

    def main_menu(self, now_ms: Optional[int] = None) -> bool:
        return self.press_select(now_ms)
