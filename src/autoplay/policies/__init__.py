"""Scripted input policies for headless play."""

from src.autoplay.policies.random import policy_random
from src.autoplay.policies.greedy import policy_greedy
from src.autoplay.policies.eps_greedy import policy_eps_greedy

POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
    "eps-greedy": policy_eps_greedy,
}

__all__ = ["policy_random", "policy_greedy", "policy_eps_greedy", "POLICIES"]
