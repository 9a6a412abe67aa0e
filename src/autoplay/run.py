# src/autoplay/run.py
from __future__ import annotations
import argparse
import csv
import os
from typing import Tuple

from src.autoplay.env import SnakeEnv
from src.autoplay.policies import POLICIES


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: SnakeEnv, policy: str, epsilon: float, max_steps: int = 10_000) -> Tuple[int, float, int]:
    """
    Play one headless game with a scripted policy.

    Returns:
        steps: number of ticks taken
        total: total return (sum of rewards)
        score: final score
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    choose = POLICIES[policy]

    obs = env.reset()
    total = 0.0
    steps = 0
    score = 0

    while True:
        a = choose(obs, env, epsilon)
        obs, r, done, info = env.step(a)
        total += r
        steps += 1

        if done or steps >= max_steps:
            score = info.get("score", 0)
            break

    return steps, total, score


def run_batch(env: SnakeEnv, policy: str, episodes: int, epsilon: float, max_steps: int, out_csv: str) -> str:
    """Play `episodes` games, print one CSV row per game and save them to out_csv."""
    print(f"Running {episodes} episode(s) with policy={policy} ε={epsilon}")
    print("ep,steps,return,score")

    rows = [("ep", "steps", "return", "score")]
    for ep in range(1, episodes + 1):
        steps, ret, score = run_episode(env, policy, epsilon, max_steps)
        print(f"{ep},{steps},{ret:.3f},{score}")
        rows.append((ep, steps, float(f"{ret:.6f}"), score))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    print(f"\nSaved results → {out_csv}")
    return out_csv


# --------------------------
# Main
# --------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Snake headless with a scripted policy.")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument(
        "--policy",
        type=str,
        default="greedy",
        choices=sorted(POLICIES),
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy",
    )
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--max-steps",
        type=int,
        default=10_000,
        help="cut an episode after this many ticks",
    )
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV is saved here",
    )

    args = parser.parse_args(argv)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"autoplay_{args.policy}.csv")

    env = SnakeEnv(seed_value=args.seed)
    run_batch(env, args.policy, args.episodes, args.epsilon, args.max_steps, out_csv)


if __name__ == "__main__":
    main()
