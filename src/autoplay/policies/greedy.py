import numpy as np # type: ignore
from src.pocket_snake.config import UP, DOWN, LEFT, RIGHT
from src.autoplay.env import ACTIONS, left_of, right_of


def axis_step(a: int, b: int, n: int) -> int:
    """
    Sign of the shortest step from a to b on a ring of size n
    (wrapping through the edge when that is shorter). 0 when equal.
    """
    if a == b:
        return 0
    forward = (b - a) % n
    return 1 if forward <= n - forward else -1


def best_move_toward_food(hx: int, hy: int, fx: int, fy: int, n: int):
    """
    Returns a preference ordering of moves, those that reduce the wrap-aware
    Manhattan distance to food first. Does NOT check collisions.
    """
    prefs = []
    sx = axis_step(hx, fx, n)
    sy = axis_step(hy, fy, n)
    if sx < 0:
        prefs.append(LEFT)
    elif sx > 0:
        prefs.append(RIGHT)
    if sy < 0:
        prefs.append(UP)
    elif sy > 0:
        prefs.append(DOWN)
    for d in (UP, DOWN, LEFT, RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def dir_to_action(direction) -> int:
    """Map (dx, dy) to the env action id."""
    for a, d in ACTIONS.items():
        if d == direction:
            return a
    raise ValueError(f"Not a direction: {direction!r}")


def decode_obs(obs: np.ndarray, grid_size: int):
    """
    Matches env.observe() layout (9 dims):
    [hx_n, hy_n, fx_n, fy_n, dx, dy, danger_ahead, danger_left, danger_right]
    Grid coords are recovered by multiplying by (grid_size - 1).
    """
    hx_n, hy_n, fx_n, fy_n, dx, dy, dan_f, dan_l, dan_r = obs.tolist()
    scale = grid_size - 1
    return (
        int(round(hx_n * scale)), int(round(hy_n * scale)),
        int(round(fx_n * scale)), int(round(fy_n * scale)),
        int(dx), int(dy), bool(dan_f), bool(dan_l), bool(dan_r),
    )


def policy_greedy(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Greedy on food distance with simple safety:
    - prefer actions that reduce the wrap-aware Manhattan distance
    - never pick a move flagged dangerous if a safe one exists
    - the reverse move is rejected by the engine, so it counts as "keep going"
    - if everything is dangerous, keep heading forward
    """
    hx, hy, fx, fy, dx, dy, dan_f, dan_l, dan_r = decode_obs(obs, env.grid_size)

    forward = (dx, dy)
    danger = {
        dir_to_action(forward): dan_f,
        dir_to_action(left_of(forward)): dan_l,
        dir_to_action(right_of(forward)): dan_r,
    }

    for d in best_move_toward_food(hx, hy, fx, fy, env.grid_size):
        a = dir_to_action(d)
        if a in danger and not danger[a]:
            return a

    return dir_to_action(forward)
