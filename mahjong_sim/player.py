"""
Mahjong Player Module

Handles player state: the concealed hand and the discard record.
"""

import bisect
from dataclasses import dataclass, field
from typing import List, Tuple

from .tiles import Tile
from .completion import is_complete


@dataclass
class Hand:
    """
    Tiles held by a player, kept in tile order, plus the tiles they
    have discarded.

    Attributes:
        held: Concealed tiles, always sorted
        discards: Discarded tiles, oldest first (append-only)
    """
    held: List[Tile] = field(default_factory=list)
    discards: List[Tile] = field(default_factory=list)

    def __post_init__(self):
        self.held = sorted(self.held)

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        """Snapshot of the held tiles"""
        return tuple(self.held)

    def add(self, tile: Tile) -> int:
        """Insert a tile keeping tile order. Returns its position."""
        position = bisect.bisect_right(self.held, tile)
        self.held.insert(position, tile)
        return position

    def discard_at(self, index: int) -> Tile:
        """
        Move the tile at a position into the discard record.

        Raises:
            IndexError: If no tile is held at that position
        """
        if not 0 <= index < len(self.held):
            raise IndexError(
                f"Cannot discard position {index} from a hand of {len(self.held)} tiles"
            )
        tile = self.held.pop(index)
        self.discards.append(tile)
        return tile

    def index_of(self, tile: Tile) -> int:
        """Position of the first held tile equal to tile"""
        position = bisect.bisect_left(self.held, tile)
        if position == len(self.held) or self.held[position] != tile:
            raise ValueError(f"{tile} is not in hand")
        return position

    def count(self, tile: Tile) -> int:
        """Count held copies of a tile"""
        return bisect.bisect_right(self.held, tile) - bisect.bisect_left(self.held, tile)

    def __len__(self) -> int:
        return len(self.held)

    def __iter__(self):
        return iter(self.held)

    def __getitem__(self, index):
        return self.held[index]

    def __str__(self) -> str:
        return " ".join(str(t) for t in self.held)


@dataclass
class Player:
    """
    Represents a Mahjong player.

    Attributes:
        index: Seat index (0-3); shown to users as 1-4
        hand: Held tiles and discards
    """
    index: int
    hand: Hand = field(default_factory=Hand)

    @property
    def label(self) -> str:
        return f"Player {self.index + 1}"

    @property
    def discards(self) -> List[Tile]:
        return self.hand.discards

    def add_tile(self, tile: Tile) -> int:
        """Add a tile to the player's hand"""
        return self.hand.add(tile)

    def discard_at(self, index: int) -> Tile:
        """Discard the tile at a hand position"""
        return self.hand.discard_at(index)

    def is_complete(self) -> bool:
        """Check if the held tiles form a winning hand"""
        return is_complete(self.hand.held)

    def __repr__(self) -> str:
        return f"Player({self.index}, hand={len(self.hand)}, discards={len(self.discards)})"

    def __str__(self) -> str:
        return f"{self.label}: Hand[{self.hand}]"
