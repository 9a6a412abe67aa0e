import numpy as np # type: ignore
from src.autoplay.env import ACTIONS


def turn_actions(obs: np.ndarray):
    """
    Actions the engine will actually apply: every direction except the
    reverse of the current heading (obs[4:6]), which handle_input rejects.
    """
    dx, dy = int(obs[4]), int(obs[5])
    return [a for a, (ax, ay) in ACTIONS.items() if (ax, ay) != (-dx, -dy)]


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Uniform over forward, left and right. Walls wrap, so any of the three
    can only hurt by running into the body.
    """
    choices = turn_actions(obs)
    return int(choices[np.random.randint(len(choices))])
