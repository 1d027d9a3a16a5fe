"""
Mahjong Tiles System

Defines the 136 tiles used by the simulator:
- 9 Characters (万) x4 = 36
- 9 Bamboos (条) x4 = 36
- 9 Dots (筒) x4 = 36
- 4 Winds (东南西北) x4 = 16
- 3 Dragons (中发白) x4 = 12
Total: 136 tiles

Ranks are zero-based: 0-8 for the numbered suits, 0-3 for winds and
0-2 for dragons. The printed face of a numbered tile is rank + 1.
"""

import numbers
from enum import IntEnum
from dataclasses import dataclass
from typing import Iterable, Iterator, List
import numpy as np


class TileKind(IntEnum):
    """Tile kinds, in the fixed order used for sorting"""
    CHARACTERS = 0  # 万 (Wan)
    BAMBOOS = 1     # 条 (Tiao)
    DOTS = 2        # 筒 (Tong)
    WINDS = 3       # 风 (Feng) - East, South, West, North
    DRAGONS = 4     # 箭 (Jian) - Red, Green, White


class WindType(IntEnum):
    """Wind tile ranks"""
    EAST = 0   # 东
    SOUTH = 1  # 南
    WEST = 2   # 西
    NORTH = 3  # 北


class DragonType(IntEnum):
    """Dragon tile ranks"""
    RED = 0    # 中 (Zhong)
    GREEN = 1  # 发 (Fa)
    WHITE = 2  # 白 (Bai)


NUMBERED_KINDS = (TileKind.CHARACTERS, TileKind.BAMBOOS, TileKind.DOTS)

# Number of legal ranks for each kind
RANK_COUNTS = {
    TileKind.CHARACTERS: 9,
    TileKind.BAMBOOS: 9,
    TileKind.DOTS: 9,
    TileKind.WINDS: 4,
    TileKind.DRAGONS: 3,
}

# Offset of each kind in the 34-slot tile index space
KIND_OFFSETS = {
    TileKind.CHARACTERS: 0,
    TileKind.BAMBOOS: 9,
    TileKind.DOTS: 18,
    TileKind.WINDS: 27,
    TileKind.DRAGONS: 31,
}

NUM_TILE_TYPES = 34

SUIT_NAMES = {
    TileKind.CHARACTERS: "万",
    TileKind.BAMBOOS: "条",
    TileKind.DOTS: "筒",
}
WIND_NAMES = ["东", "南", "西", "北"]
DRAGON_NAMES = ["中", "发", "白"]


@dataclass(frozen=True, order=True)
class Tile:
    """
    A single Mahjong tile value.

    Tiles carry no identity beyond (kind, rank): the four physical copies
    of a tile compare equal and are interchangeable.

    Attributes:
        kind: The tile family
        rank: Zero-based rank within the kind
    """
    kind: TileKind
    rank: int

    def __post_init__(self):
        """Validate the rank against the kind's legal range"""
        if not isinstance(self.kind, TileKind):
            object.__setattr__(self, "kind", TileKind(self.kind))
        if isinstance(self.rank, bool) or not isinstance(self.rank, numbers.Integral):
            raise ValueError(f"Tile rank must be an integer, got {self.rank!r}")
        object.__setattr__(self, "rank", int(self.rank))
        limit = RANK_COUNTS[self.kind]
        if not 0 <= self.rank < limit:
            raise ValueError(
                f"{self.kind.name} tiles must have rank 0-{limit - 1}, got {self.rank}"
            )

    @property
    def is_numbered(self) -> bool:
        """Check if the tile belongs to a suit with consecutive ranks"""
        return self.kind in NUMBERED_KINDS

    @property
    def is_honor(self) -> bool:
        """Check if tile is an honor tile (Wind or Dragon)"""
        return not self.is_numbered

    @property
    def face(self) -> int:
        """Printed number of a numbered tile (1-9)"""
        if not self.is_numbered:
            raise ValueError(f"{self!r} has no face value")
        return self.rank + 1

    @property
    def tile_index(self) -> int:
        """
        Get unique index for this tile type (0-33).
        Numbered suits occupy 0-26, winds 27-30, dragons 31-33.
        """
        return KIND_OFFSETS[self.kind] + self.rank

    def __repr__(self) -> str:
        return f"Tile({self.kind.name}, {self.rank})"

    def __str__(self) -> str:
        """Human-readable label"""
        if self.kind == TileKind.WINDS:
            return WIND_NAMES[self.rank] + "风"
        if self.kind == TileKind.DRAGONS:
            return DRAGON_NAMES[self.rank] + "箭"
        return f"{self.rank + 1}{SUIT_NAMES[self.kind]}"

    @classmethod
    def from_index(cls, tile_index: int) -> 'Tile':
        """Create a tile from its type index (0-33)"""
        if not 0 <= tile_index < NUM_TILE_TYPES:
            raise ValueError(f"Tile index must be 0-33, got {tile_index}")
        for kind in reversed(TileKind):
            if tile_index >= KIND_OFFSETS[kind]:
                return cls(kind, tile_index - KIND_OFFSETS[kind])
        raise AssertionError("unreachable")

    @classmethod
    def from_string(cls, s: str) -> 'Tile':
        """
        Create tile from its label.

        Args:
            s: Label like "1万", "9条", "5筒", "东风", "东", "中箭", "中"
        """
        s = s.strip()
        if len(s) == 2 and s[0].isdigit():
            for kind, name in SUIT_NAMES.items():
                if s[1] == name:
                    return cls(kind, int(s[0]) - 1)

        honor = s[:-1] if len(s) == 2 and s[-1] in "风箭" else s
        if honor in WIND_NAMES and (len(s) == 1 or s[-1] == "风"):
            return cls(TileKind.WINDS, WIND_NAMES.index(honor))
        if honor in DRAGON_NAMES and (len(s) == 1 or s[-1] == "箭"):
            return cls(TileKind.DRAGONS, DRAGON_NAMES.index(honor))

        raise ValueError(f"Cannot parse tile string: {s}")


def all_tile_types() -> Iterator[Tile]:
    """Yield each of the 34 legal tiles once, in tile order"""
    for kind in TileKind:
        for rank in range(RANK_COUNTS[kind]):
            yield Tile(kind, rank)


def to_count_array(tiles: Iterable[Tile]) -> np.ndarray:
    """
    Convert tiles to a 34-element array counting each tile type.
    Useful for hand analysis.
    """
    counts = np.zeros(NUM_TILE_TYPES, dtype=np.int8)
    for tile in tiles:
        counts[tile.tile_index] += 1
    return counts


def from_count_array(counts: Iterable[int]) -> List[Tile]:
    """Expand a count vector back into a sorted list of tiles"""
    tiles = []
    for idx, count in enumerate(counts):
        tiles.extend([Tile.from_index(idx)] * int(count))
    return tiles


def parse_tiles(s: str) -> List[Tile]:
    """Parse a whitespace separated list of tile labels"""
    return [Tile.from_string(part) for part in s.split()]


# Convenience functions for creating specific tiles
def char(face: int) -> Tile:
    """Create a Characters tile (1-9万)"""
    return Tile(TileKind.CHARACTERS, face - 1)

def bam(face: int) -> Tile:
    """Create a Bamboos tile (1-9条)"""
    return Tile(TileKind.BAMBOOS, face - 1)

def dot(face: int) -> Tile:
    """Create a Dots tile (1-9筒)"""
    return Tile(TileKind.DOTS, face - 1)

def wind(wind_type: WindType) -> Tile:
    """Create a Wind tile (东南西北)"""
    return Tile(TileKind.WINDS, int(wind_type))

def dragon(dragon_type: DragonType) -> Tile:
    """Create a Dragon tile (中发白)"""
    return Tile(TileKind.DRAGONS, int(dragon_type))


# Named wind tiles
EAST = Tile(TileKind.WINDS, WindType.EAST)
SOUTH = Tile(TileKind.WINDS, WindType.SOUTH)
WEST = Tile(TileKind.WINDS, WindType.WEST)
NORTH = Tile(TileKind.WINDS, WindType.NORTH)

# Named dragon tiles
RED_DRAGON = Tile(TileKind.DRAGONS, DragonType.RED)
GREEN_DRAGON = Tile(TileKind.DRAGONS, DragonType.GREEN)
WHITE_DRAGON = Tile(TileKind.DRAGONS, DragonType.WHITE)
