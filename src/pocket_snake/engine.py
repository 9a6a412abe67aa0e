# engine.py
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple
import logging
import random

from .config import (
    GRID_SIZE,
    UP, DOWN, LEFT, RIGHT,
    SPLASH, MENU, PLAYING, PAUSED, GAME_OVER, PHASES,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
Direction = Tuple[int, int]
PhaseListener = Callable[[str, str], None]

VALID_DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Legal phase transitions. GAME_OVER is only entered from tick().
TRANSITIONS: Dict[str, FrozenSet[str]] = {
    SPLASH: frozenset({MENU}),
    MENU: frozenset({PLAYING}),
    PLAYING: frozenset({PAUSED}),
    PAUSED: frozenset({PLAYING, MENU}),
    GAME_OVER: frozenset({PLAYING, MENU}),
}

# Entering PLAYING from these phases starts a fresh game.
RESET_ON_ENTRY_FROM = frozenset({MENU, GAME_OVER})

# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def wrap_move(pos: Position, direction: Direction, grid_size: int) -> Position:
    """Move one cell in direction on a toroidal grid."""
    return ((pos[0] + direction[0]) % grid_size, (pos[1] + direction[1]) % grid_size)

def random_cell(rng, grid_size: int) -> Position:
    return (rng.randrange(grid_size), rng.randrange(grid_size))

def spawn_food(rng, grid_size: int, exclude: Position) -> Position:
    """Random cell other than `exclude`, used when a new game starts."""
    while True:
        cell = random_cell(rng, grid_size)
        if cell != exclude:
            return cell

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Position]   # head at index 0
    direction: Direction
    food: Position
    score: int
    phase: str
    ticks: int = 0          # ticks applied since the last reset

# ---------- Engine ----------
class SimulationEngine:
    """
    Authoritative game state plus the rules that mutate it.

    The engine knows nothing about time or drawing. A host calls tick() on a
    fixed schedule while the phase is PLAYING and forwards player input through
    handle_input() and request_phase(). Listeners registered with
    add_phase_listener() are told about every phase change, which is how the
    host starts and stops its clock.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        if grid_size < 2:
            raise ValueError(f"grid_size must be >= 2, got {grid_size}")
        self._grid_size = grid_size
        self._rng = rng if rng is not None else random.Random(seed)
        self._listeners: List[PhaseListener] = []
        center = (grid_size // 2, grid_size // 2)
        self._state = GameState(
            snake=[center],
            direction=RIGHT,
            food=spawn_food(self._rng, grid_size, center),
            score=0,
            phase=SPLASH,
        )

    # ----- Read accessors -----
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def grid_size(self) -> int:
        return self._grid_size

    @property
    def snake(self) -> Tuple[Position, ...]:
        return tuple(self._state.snake)

    @property
    def head(self) -> Position:
        return self._state.snake[0]

    @property
    def food(self) -> Position:
        return self._state.food

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def phase(self) -> str:
        return self._state.phase

    @property
    def direction(self) -> Direction:
        return self._state.direction

    @property
    def ticks(self) -> int:
        return self._state.ticks

    # ----- Listeners -----
    def add_phase_listener(self, listener: PhaseListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_phase_listener(self, listener: PhaseListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _set_phase(self, new_phase: str) -> None:
        old_phase = self._state.phase
        self._state.phase = new_phase
        logger.debug("phase %s -> %s", old_phase, new_phase)
        for listener in list(self._listeners):
            listener(old_phase, new_phase)

    # ----- Mutators -----
    def reset(self) -> None:
        """Start a fresh game: one centre cell heading RIGHT, score 0, new food."""
        center = (self._grid_size // 2, self._grid_size // 2)
        self._state.snake = [center]
        self._state.direction = RIGHT
        self._state.score = 0
        self._state.ticks = 0
        self._state.food = spawn_food(self._rng, self._grid_size, center)
        logger.debug("reset: snake=%s food=%s", center, self._state.food)

    def handle_input(self, direction: Direction) -> bool:
        """
        Set the heading for the next tick. 180° turns and anything that is not
        one of the four direction vectors are ignored. Returns whether the
        input was accepted.
        """
        if direction not in VALID_DIRECTIONS:
            return False
        if is_opposite(direction, self._state.direction):
            return False
        self._state.direction = direction
        return True

    def request_phase(self, phase: str) -> bool:
        """Apply a legal phase transition; anything else is a no-op returning False."""
        current = self._state.phase
        if not isinstance(phase, str) or phase not in PHASES:
            return False
        if phase not in TRANSITIONS[current]:
            return False
        if phase == PLAYING and current in RESET_ON_ENTRY_FROM:
            self.reset()
        self._set_phase(phase)
        return True

    def tick(self) -> bool:
        """
        Advance the game by one step.
        Returns True if the snake is alive afterwards, False on game over.
        """
        state = self._state
        if state.phase == GAME_OVER:
            return False

        new_head = wrap_move(state.snake[0], state.direction, self._grid_size)

        if new_head == state.food:
            state.score += 1
            # no exclusion against the body here, food may land under the snake
            state.food = random_cell(self._rng, self._grid_size)
            state.snake.insert(0, new_head)
        else:
            # checked against the pre-move body, so the tail cell still counts
            if new_head in state.snake:
                logger.debug("game over: score=%d length=%d", state.score, len(state.snake))
                self._set_phase(GAME_OVER)
                return False
            state.snake.insert(0, new_head)
            state.snake.pop()

        state.ticks += 1
        return True
