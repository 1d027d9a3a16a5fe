"""
Hand Completion Evaluator

Decides whether a 14-tile hand splits into one pair plus four melds,
where a meld is either a triplet (three identical tiles) or a run
(three consecutive ranks of one numbered suit).

The search works on 34-slot count vectors, so multiplicity is tracked
exactly: a tile held four times can be split between the pair, a
triplet and runs. Each recursive step derives a new immutable count
tuple, and meld search results are cached on it.
"""

from enum import IntEnum
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Tuple

from .tiles import Tile, NUMBERED_KINDS, KIND_OFFSETS, to_count_array

WINNING_HAND_SIZE = 14

Counts = Tuple[int, ...]

# Indices from which a run (i, i+1, i+2) can start: ranks 0-6 of numbered suits
_RUN_STARTS = frozenset(
    KIND_OFFSETS[kind] + rank for kind in NUMBERED_KINDS for rank in range(7)
)


class MeldType(IntEnum):
    """Types of concealed meld"""
    RUN = 0      # 顺子 - three consecutive ranks in one numbered suit
    TRIPLET = 1  # 刻子 - three identical tiles


@dataclass(frozen=True)
class Meld:
    """A meld found in a decomposition"""
    meld_type: MeldType
    tiles: Tuple[Tile, Tile, Tile]

    def __str__(self) -> str:
        return "".join(str(t) for t in self.tiles)


@dataclass(frozen=True)
class Decomposition:
    """A winning split of a hand: one pair and four melds"""
    pair: Tile
    melds: Tuple[Meld, ...]

    def __str__(self) -> str:
        parts = [f"{self.pair}{self.pair}"] + [str(m) for m in self.melds]
        return " | ".join(parts)


def _lowest(counts: Counts) -> int:
    for idx, count in enumerate(counts):
        if count:
            return idx
    return -1


def _take(counts: Counts, *indices: int) -> Counts:
    """Return a copy of counts with one tile removed at each index"""
    reduced = list(counts)
    for idx in indices:
        reduced[idx] -= 1
    return tuple(reduced)


@lru_cache(maxsize=4096)
def _meld_search(counts: Counts) -> Optional[Tuple[Tuple[MeldType, int], ...]]:
    """
    Split counts into melds, lowest tile first.

    Returns a tuple of (meld type, starting index) entries, or None when
    no split exists. An empty tuple means counts was already empty.
    """
    first = _lowest(counts)
    if first == -1:
        return ()

    # The lowest tile has to start whatever meld it lands in
    if counts[first] >= 3:
        rest = _meld_search(_take(counts, first, first, first))
        if rest is not None:
            return ((MeldType.TRIPLET, first),) + rest

    if first in _RUN_STARTS and counts[first + 1] and counts[first + 2]:
        rest = _meld_search(_take(counts, first, first + 1, first + 2))
        if rest is not None:
            return ((MeldType.RUN, first),) + rest

    return None


def _canonical(tiles: Iterable[Tile]) -> Optional[Counts]:
    tiles = list(tiles)
    if len(tiles) != WINNING_HAND_SIZE:
        return None
    return tuple(int(c) for c in to_count_array(tiles))


def forms_melds(counts: Iterable[int]) -> bool:
    """
    Check whether a count vector splits entirely into melds.

    Args:
        counts: 34-element array of tile counts (total a multiple of 3)
    """
    counts = tuple(int(c) for c in counts)
    if sum(counts) % 3:
        return False
    return _meld_search(counts) is not None


def _search(counts: Counts) -> Optional[Decomposition]:
    for idx, count in enumerate(counts):
        if count < 2:
            continue
        melds = _meld_search(_take(counts, idx, idx))
        if melds is None:
            continue
        found = []
        for meld_type, start in melds:
            if meld_type == MeldType.TRIPLET:
                group = (Tile.from_index(start),) * 3
            else:
                group = tuple(Tile.from_index(start + k) for k in range(3))
            found.append(Meld(meld_type, group))
        return Decomposition(pair=Tile.from_index(idx), melds=tuple(found))
    return None


def find_decomposition(tiles: Iterable[Tile]) -> Optional[Decomposition]:
    """
    Find a pair + four melds split of a 14-tile hand.

    Pair candidates are tried in tile order and the first split found is
    returned. Returns None if the hand is not complete, including when it
    does not hold exactly 14 tiles.
    """
    counts = _canonical(tiles)
    if counts is None:
        return None
    return _search(counts)


def is_complete(tiles: Iterable[Tile]) -> bool:
    """
    Check whether a hand is a winning hand.

    Total over all inputs: a hand of any size other than 14 is simply not
    complete. The result depends only on the multiset of tiles, never on
    their order.
    """
    return find_decomposition(tiles) is not None
