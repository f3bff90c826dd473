# autoplay.py
from __future__ import annotations
import argparse
import csv
import os
import random
from typing import List, Optional, Tuple

from .board import BOARD, Board
from .config import CFG, Config, DIRECTIONS, UP, DOWN, LEFT, RIGHT
from .game import Direction, GameState, is_opposite, new_game_state, set_direction, step_game


def best_move_toward_food(hx: int, hy: int, fx: int, fy: int) -> List[Direction]:
    """
    Returns a preference ordering of moves that reduce Manhattan distance to food,
    followed by the remaining directions. Does NOT check collisions.
    """
    prefs = []
    if fx < hx:
        prefs.append(LEFT)
    elif fx > hx:
        prefs.append(RIGHT)
    if fy < hy:
        prefs.append(UP)
    elif fy > hy:
        prefs.append(DOWN)
    for d in DIRECTIONS:
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def would_hit(state: GameState, board: Board, direction: Direction) -> bool:
    """Same collision rule as the game itself: walls, and any body cell including the tail."""
    hx, hy = state.head
    nxt = (hx + direction[0], hy + direction[1])
    return not board.in_bounds(nxt) or nxt in state.occupied


def policy_greedy(state: GameState, board: Board = BOARD) -> Direction:
    """
    Greedy on food distance with simple safety:
    - prefer moves that reduce Manhattan distance
    - skip reversals and moves that die on the next step
    - if every move is fatal, keep going straight
    """
    hx, hy = state.head
    fx, fy = state.food
    for d in best_move_toward_food(hx, hy, fx, fy):
        if is_opposite(d, state.direction):
            continue
        if not would_hit(state, board, d):
            return d
    return state.direction


def run_episode(cfg: Config, board: Board, rng: random.Random, max_steps: int = 10_000) -> Tuple[int, int, str]:
    """
    Play one game to the end with the greedy policy.

    Returns:
        steps: number of ticks taken
        score: final score
        outcome: how the game ended ("wall", "self", "board_full", or "timeout")
    """
    state = new_game_state(cfg, board, rng)
    steps = 0
    while steps < max_steps:
        set_direction(state, policy_greedy(state, board))
        result = step_game(state, board, cfg, rng)
        steps += 1
        if not result.alive:
            return steps, state.score, result.outcome.value
    return steps, state.score, "timeout"


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the game headless with a greedy autopilot.")
    parser.add_argument("--episodes", type=int, default=20)
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--max-steps", type=int, default=10_000)
    parser.add_argument(
        "--out",
        type=str,
        default=None,
        help="optional CSV path for per-episode results",
    )
    args = parser.parse_args(argv)

    cfg = Config(seed=args.seed)
    rng = random.Random(args.seed)

    print(f"[AUTOPLAY] Running {args.episodes} episode(s), seed={args.seed}")
    print("ep,steps,score,outcome")

    rows = [("ep", "steps", "score", "outcome")]
    for ep in range(1, args.episodes + 1):
        steps, score, outcome = run_episode(cfg, BOARD, rng, args.max_steps)
        print(f"{ep},{steps},{score},{outcome}")
        rows.append((ep, steps, score, outcome))

    if args.out:
        parent = os.path.dirname(args.out)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(args.out, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerows(rows)
        print(f"\n[AUTOPLAY] Saved results → {args.out}")


if __name__ == "__main__":
    main()
