# src/autoplay/env.py
from __future__ import annotations
from dataclasses import dataclass
import random

import numpy as np  # type: ignore

from src.pocket_snake.config import GRID_SIZE, UP, DOWN, LEFT, RIGHT, MENU, PLAYING, GAME_OVER
from src.pocket_snake.engine import SimulationEngine, wrap_move

# -----------------------------------------------------------------------------
# Actions: integers -> grid directions (dx, dy)
# -----------------------------------------------------------------------------
ACTIONS = {
    0: UP,
    1: DOWN,
    2: LEFT,
    3: RIGHT,
}

# -----------------------------------------------------------------------------
# Small geometry helpers
# -----------------------------------------------------------------------------
def left_of(direction):
    """Rotate a direction 90° CCW (screen coordinates, y down)."""
    dx, dy = direction
    return (dy, -dx)

def right_of(direction):
    """Rotate a direction 90° CW (screen coordinates, y down)."""
    dx, dy = direction
    return (-dy, dx)

def would_hit(engine: SimulationEngine, direction) -> bool:
    """
    True if the next tick in 'direction' would end the game. Uses the engine's
    rule: food is checked first, then the whole pre-move body, tail included.
    """
    nxt = wrap_move(engine.head, direction, engine.grid_size)
    if nxt == engine.food:
        return False
    return nxt in engine.state.snake

def wrap_distance(a: int, b: int, n: int) -> int:
    """Shortest distance between two coordinates on a ring of size n."""
    d = abs(a - b) % n
    return min(d, n - d)

def torus_manhattan(ax: int, ay: int, bx: int, by: int, n: int) -> int:
    return wrap_distance(ax, bx, n) + wrap_distance(ay, by, n)

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def observe(engine: SimulationEngine) -> np.ndarray:
    """
    Compact 9-D observation vector.

    Features:
      0: hx_n  - head x normalized in [0, 1]
      1: hy_n  - head y normalized in [0, 1]
      2: fx_n  - food x normalized in [0, 1]
      3: fy_n  - food y normalized in [0, 1]
      4: dx    - current direction x component in {-1, 0, 1}
      5: dy    - current direction y component in {-1, 0, 1}
      6: danger_ahead  - 1.0 if the next cell forward would be fatal
      7: danger_left   - 1.0 if the next cell to the left would be fatal
      8: danger_right  - 1.0 if the next cell to the right would be fatal
    """
    hx, hy = engine.head
    fx, fy = engine.food
    denom = max(engine.grid_size - 1, 1)
    dx, dy = engine.direction

    return np.array(
        [
            hx / denom, hy / denom, fx / denom, fy / denom,
            float(dx), float(dy),
            float(would_hit(engine, engine.direction)),
            float(would_hit(engine, left_of(engine.direction))),
            float(would_hit(engine, right_of(engine.direction))),
        ],
        dtype=np.float32,
    )

# -----------------------------------------------------------------------------
# Headless environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Gym-like wrapper that plays the game without a window or clock: every
    step() is one handle_input() followed by one tick().

    Rewards:
      + eat_reward  when food is eaten
      + shaping_coef * (d_before - d_after) per step (closer -> positive)
      + step_penalty per step
      + death_reward on death
    """
    grid_size: int    = GRID_SIZE
    step_penalty: float = -0.001
    eat_reward: float   = 1.0
    death_reward: float = -1.0
    shaping_coef: float = 0.01
    seed_value: int     = 0

    def __post_init__(self):
        self.rng = random.Random(self.seed_value)
        np.random.seed(self.seed_value)
        self.engine: SimulationEngine | None = None

    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new game (MENU -> PLAYING) and return the first observation."""
        if seed is not None:
            self.rng.seed(seed)
            np.random.seed(seed)
        self.engine = SimulationEngine(grid_size=self.grid_size, rng=self.rng)
        self.engine.request_phase(MENU)
        self.engine.request_phase(PLAYING)
        return observe(self.engine)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one tick, and return:
          (obs, reward, terminated, info)
        """
        assert self.engine is not None, "Call reset() first."
        assert action in ACTIONS, f"Invalid action {action}"
        engine = self.engine
        assert engine.phase == PLAYING, "Episode is over, call reset()."

        engine.handle_input(ACTIONS[action])

        hx, hy = engine.head
        fx, fy = engine.food
        d_before = torus_manhattan(hx, hy, fx, fy, engine.grid_size)
        score_before = engine.score

        alive = engine.tick()
        if not alive:
            info = {"reason": "self", "score": engine.score, "length": len(engine.snake)}
            return observe(engine), self.death_reward, True, info

        reward = self.step_penalty
        if engine.score > score_before:
            reward += self.eat_reward
        else:
            hx2, hy2 = engine.head
            d_after = torus_manhattan(hx2, hy2, engine.food[0], engine.food[1], engine.grid_size)
            reward += self.shaping_coef * (d_before - d_after)

        info = {"score": engine.score, "length": len(engine.snake)}
        return observe(engine), reward, engine.phase == GAME_OVER, info

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        # 9 features defined in observe()
        return (9,)
