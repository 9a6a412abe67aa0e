import numpy as np # type: ignore
from src.autoplay.env import left_of, right_of
from src.autoplay.policies.random import policy_random
from src.autoplay.policies.greedy import policy_greedy, dir_to_action


def safe_turns(obs: np.ndarray):
    """Forward/left/right actions whose danger flag (obs[6:9]) is clear."""
    forward = (int(obs[4]), int(obs[5]))
    candidates = [
        (dir_to_action(forward), obs[6]),
        (dir_to_action(left_of(forward)), obs[7]),
        (dir_to_action(right_of(forward)), obs[8]),
    ]
    return [a for a, danger in candidates if not danger]


def policy_eps_greedy(obs: np.ndarray, env, epsilon: float = 0.1) -> int:
    """
    With probability epsilon explore, otherwise play greedy. Exploration
    picks among turns that do not bite the body this tick, and only falls
    back to a blind random turn when every move is fatal.
    """
    if np.random.rand() < epsilon:
        safe = safe_turns(obs)
        if safe:
            return int(safe[np.random.randint(len(safe))])
        return policy_random(obs, env)
    return policy_greedy(obs, env)
