#!/usr/bin/env python3
"""
Simulate four-player Mahjong games.

Usage:
    python simulate.py --seed 42 --verbose
    python simulate.py --games 1000 --policy random
"""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent))

from agents import AGENTS, RandomAgent
from mahjong_sim.game import Game
from mahjong_sim.text_view import render_state, render_outcome

logger = logging.getLogger(__name__)


def make_policy(name: str, seed: int = None):
    """Build the discard policy callable for an agent name."""
    if name == "random":
        return RandomAgent(seed).act
    return AGENTS[name]().act


def play_one(seed: int = None, policy: str = "tsumogiri", show_turns: bool = False):
    """Play a single game and print its outcome."""
    game = Game(seed=seed, discard_policy=make_policy(policy, seed))
    print("=" * 60)
    print("🀄 Mahjong - game start")
    print("=" * 60)

    on_draw = (lambda g: print(render_state(g) + "\n")) if show_turns else None
    result = game.play(on_draw=on_draw)

    print()
    print(render_outcome(result))
    return result


def play_many(num_games: int, seed: int = None, policy: str = "tsumogiri"):
    """Play many games and print a summary."""
    seeds = np.random.default_rng(seed).integers(0, 2**31 - 1, size=num_games)
    wins = Counter()
    exhausted = 0
    turns = []

    for game_num, game_seed in enumerate(seeds):
        game = Game(seed=int(game_seed), discard_policy=make_policy(policy, int(game_seed)))
        result = game.play()
        turns.append(result.turns)
        if result.winner is None:
            exhausted += 1
        else:
            wins[result.winner] += 1
        logger.debug(f"Game {game_num + 1}/{num_games}: winner={result.winner} turns={result.turns}")

    print(f"\n=== Results over {num_games} games ({policy}) ===")
    for seat in range(Game.NUM_PLAYERS):
        print(f"  Player {seat + 1}: {wins[seat]} wins ({100 * wins[seat] / num_games:.1f}%)")
    print(f"  Stock exhausted: {exhausted} ({100 * exhausted / num_games:.1f}%)")
    print(f"  Mean turns: {np.mean(turns):.1f}")
    return wins, exhausted


def main():
    parser = argparse.ArgumentParser(description="Simulate four-player Mahjong games")

    parser.add_argument("--seed", type=int, default=None,
                       help="Random seed for a reproducible shuffle")
    parser.add_argument("--games", type=int, default=1,
                       help="Number of games to play")
    parser.add_argument("--policy", type=str, default="tsumogiri",
                       choices=sorted(AGENTS))
    parser.add_argument("--verbose", action="store_true",
                       help="Show every turn and debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    if args.games < 1:
        parser.error("--games must be at least 1")

    if args.games == 1:
        play_one(args.seed, args.policy, show_turns=args.verbose)
    else:
        play_many(args.games, args.seed, args.policy)


if __name__ == "__main__":
    main()
