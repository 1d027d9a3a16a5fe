"""
Baseline discard agents.

Agents are discard policies for Game: act(hand, last_draw) returns the
hand position to throw away.
"""

import numpy as np
from typing import Optional

from mahjong_sim.game import discard_last_drawn
from mahjong_sim.player import Hand
from mahjong_sim.tiles import Tile


class TsumogiriAgent:
    """
    Discards whatever it just drew.

    Never changes its hand after the deal, so it only wins if the
    drawn tile completes the hand it was dealt.
    """

    def act(self, hand: Hand, last_draw: Optional[Tile]) -> int:
        return discard_last_drawn(hand, last_draw)

    def __repr__(self) -> str:
        return "TsumogiriAgent()"


class RandomAgent:
    """
    Random agent that discards a uniformly chosen tile.

    This serves as a baseline for comparison.
    """

    def __init__(self, seed: int = None):
        """
        Initialize the random agent.

        Args:
            seed: Random seed for reproducibility
        """
        self.rng = np.random.default_rng(seed)

    def act(self, hand: Hand, last_draw: Optional[Tile]) -> int:
        """
        Select a discard position.

        Args:
            hand: The 14-tile hand after drawing
            last_draw: Tile just drawn (ignored)

        Returns:
            Hand position to discard
        """
        return int(self.rng.integers(len(hand)))

    def __repr__(self) -> str:
        return "RandomAgent()"
