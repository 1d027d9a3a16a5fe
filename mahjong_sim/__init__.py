"""
Mahjong Simulator
Four-player draw-and-discard game with a pair + four melds completion rule.
"""

from .tiles import Tile, TileKind
from .stock import Stock
from .player import Player, Hand
from .completion import MeldType, Meld, Decomposition, is_complete, forms_melds, find_decomposition
from .game import Game, GamePhase, GameResult, GameStateError, Action, ActionType

__version__ = "0.1.0"
__all__ = [
    "Tile",
    "TileKind",
    "Stock",
    "Player",
    "Hand",
    "MeldType",
    "Meld",
    "Decomposition",
    "is_complete",
    "forms_melds",
    "find_decomposition",
    "Game",
    "GamePhase",
    "GameResult",
    "GameStateError",
    "Action",
    "ActionType",
]
