"""
Mahjong Stock Module

Handles the stock (the shuffled pile of undealt tiles), dealing, and drawing.
"""

from typing import List, Optional
from dataclasses import dataclass, field
import numpy as np

from .tiles import Tile, all_tile_types


@dataclass
class Stock:
    """
    Represents the stock of undealt tiles.

    Tiles are drawn from the end of the list. The stock only shrinks;
    nothing is ever returned to it.

    Attributes:
        tiles: Remaining tiles in the stock
        rng: Random generator used for shuffling
        dealt_count: Number of tiles that have been dealt/drawn
    """
    tiles: List[Tile] = field(default_factory=list)
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)
    dealt_count: int = 0

    COPIES_PER_TYPE = 4
    NUM_TILES = 136

    @classmethod
    def build(cls, rng: Optional[np.random.Generator] = None,
              seed: Optional[int] = None) -> 'Stock':
        """
        Create and shuffle a full 136-tile stock.

        Args:
            rng: Generator to shuffle with; takes precedence over seed
            seed: Seed for a fresh generator, for reproducible games
        """
        if rng is None:
            rng = np.random.default_rng(seed)
        tiles = [tile for tile in all_tile_types() for _ in range(cls.COPIES_PER_TYPE)]
        stock = cls(tiles=tiles, rng=rng)
        stock.shuffle()
        return stock

    def shuffle(self) -> None:
        """Shuffle the remaining tiles with a uniform random permutation"""
        order = self.rng.permutation(len(self.tiles))
        self.tiles = [self.tiles[i] for i in order]

    def draw(self) -> Optional[Tile]:
        """
        Draw one tile from the top of the stock.
        Returns None if the stock is empty.
        """
        if not self.tiles:
            return None
        tile = self.tiles.pop()
        self.dealt_count += 1
        return tile

    def draw_many(self, count: int) -> List[Tile]:
        """
        Draw multiple tiles from the stock.
        Returns fewer tiles if the stock doesn't have enough.
        """
        drawn = []
        for _ in range(count):
            tile = self.draw()
            if tile is None:
                break
            drawn.append(tile)
        return drawn

    def deal_hands(self, num_players: int = 4, hand_size: int = 13) -> List[List[Tile]]:
        """
        Deal initial hands, one tile per player per pass.

        Returns list of hands (each a list of hand_size tiles).
        """
        if num_players * hand_size > self.remaining:
            raise ValueError(
                f"Cannot deal {num_players}x{hand_size} tiles from {self.remaining}"
            )
        hands = [[] for _ in range(num_players)]
        for _ in range(hand_size):
            for player_idx in range(num_players):
                hands[player_idx].append(self.draw())
        return hands

    @property
    def remaining(self) -> int:
        """Number of tiles remaining in the stock"""
        return len(self.tiles)

    @property
    def is_empty(self) -> bool:
        """Check if stock is empty"""
        return len(self.tiles) == 0

    def __len__(self) -> int:
        return len(self.tiles)

    def __repr__(self) -> str:
        return f"Stock({self.remaining} tiles remaining)"
