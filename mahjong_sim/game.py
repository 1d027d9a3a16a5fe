"""
Mahjong Game Engine

Turn controller for a four-player game: draw, check for a win, discard,
pass the turn, until someone wins or the stock runs out.
"""

import logging
from enum import IntEnum
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import numpy as np

from .tiles import Tile
from .player import Player, Hand
from .stock import Stock
from .completion import Decomposition, find_decomposition

logger = logging.getLogger(__name__)

# (hand, last drawn tile) -> position of the tile to discard
DiscardPolicy = Callable[[Hand, Optional[Tile]], int]


class GameStateError(RuntimeError):
    """Raised when an operation is not legal in the current phase"""


class GamePhase(IntEnum):
    """Phases of the game"""
    NOT_STARTED = 0
    AWAITING_DRAW = 1     # Current player draws a tile
    AWAITING_DISCARD = 2  # Current player must discard
    WON = 3               # Terminal: current player completed their hand
    EXHAUSTED = 4         # Terminal: draw attempted on an empty stock


class ActionType(IntEnum):
    """Events recorded in the game history"""
    DRAW = 0
    DISCARD = 1
    WIN = 2
    EXHAUSTED = 3


@dataclass
class Action:
    """
    A recorded game event.

    Attributes:
        action_type: Kind of event
        player_idx: Index of the acting player
        tile: Tile drawn or discarded, if any
    """
    action_type: ActionType
    player_idx: int
    tile: Optional[Tile] = None

    def __repr__(self) -> str:
        return f"Action({self.action_type.name}, P{self.player_idx}, {self.tile})"


@dataclass
class GameResult:
    """Outcome of a finished game"""
    winner: Optional[int]
    turns: int
    stock_remaining: int
    winning_hand: Optional[Tuple[Tile, ...]] = None
    decomposition: Optional[Decomposition] = None

    @property
    def is_exhausted(self) -> bool:
        return self.winner is None


def discard_last_drawn(hand: Hand, last_draw: Optional[Tile]) -> int:
    """Default policy: throw away the tile just drawn"""
    if last_draw is None:
        return len(hand) - 1
    return hand.index_of(last_draw)


class Game:
    """
    Mahjong Game Engine.

    Owns the stock and all four players for the lifetime of one game.
    """

    NUM_PLAYERS = 4
    HAND_SIZE = 13

    def __init__(self, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None,
                 discard_policy: Optional[DiscardPolicy] = None):
        """
        Initialize a new game.

        Args:
            seed: Random seed for reproducibility
            rng: Generator for the shuffle; overrides seed
            discard_policy: Chooses the discard; defaults to the tile just drawn
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.discard_policy = discard_policy or discard_last_drawn
        self.stock = Stock(rng=self.rng)
        self.players: List[Player] = [Player(i) for i in range(self.NUM_PLAYERS)]

        self.phase = GamePhase.NOT_STARTED
        self.current_player = 0
        self.turn_count = 0
        self.last_draw: Optional[Tile] = None
        self.winner: Optional[int] = None
        self.decomposition: Optional[Decomposition] = None
        self.winning_hand: Optional[Tuple[Tile, ...]] = None

        self.history: List[Action] = []

    def start_game(self) -> None:
        """Build the stock and deal 13 tiles to each player"""
        if self.phase != GamePhase.NOT_STARTED:
            raise GameStateError("Game already started")

        self.stock = Stock.build(rng=self.rng)
        hands = self.stock.deal_hands(self.NUM_PLAYERS, self.HAND_SIZE)
        for player, hand in zip(self.players, hands):
            for tile in hand:
                player.add_tile(tile)

        self.current_player = 0
        self.phase = GamePhase.AWAITING_DRAW
        logger.debug(f"Dealt {self.HAND_SIZE} tiles each, {self.stock.remaining} left in stock")

    @property
    def is_over(self) -> bool:
        return self.phase in (GamePhase.WON, GamePhase.EXHAUSTED)

    @property
    def active_player(self) -> Player:
        return self.players[self.current_player]

    def _require(self, phase: GamePhase, operation: str) -> None:
        if self.phase != phase:
            raise GameStateError(f"Cannot {operation} in phase {self.phase.name}")

    def draw(self) -> Optional[Tile]:
        """
        Draw a tile for the active player.

        Returns the drawn tile, or None if the stock was empty, in which
        case the game ends with no winner.
        """
        self._require(GamePhase.AWAITING_DRAW, "draw")
        player = self.active_player

        tile = self.stock.draw()
        if tile is None:
            self.phase = GamePhase.EXHAUSTED
            self.history.append(Action(ActionType.EXHAUSTED, player.index))
            logger.info("Stock exhausted, no winner")
            return None

        player.add_tile(tile)
        self.last_draw = tile
        self.turn_count += 1
        self.history.append(Action(ActionType.DRAW, player.index, tile))
        logger.debug(f"{player.label} draws {tile}")

        self.phase = GamePhase.AWAITING_DISCARD
        return tile

    def discard(self, index: Optional[int] = None) -> Tile:
        """
        Discard a tile from the active player's hand.

        The win check runs on the full 14-tile hand before the tile leaves
        it. On a win the game ends; otherwise the turn passes on.

        Args:
            index: Hand position to discard; the discard policy picks if None
        """
        self._require(GamePhase.AWAITING_DISCARD, "discard")
        player = self.active_player

        decomposition = find_decomposition(player.hand.held)
        winning_hand = player.hand.tiles

        if index is None:
            index = self.discard_policy(player.hand, self.last_draw)
        tile = player.discard_at(index)
        self.history.append(Action(ActionType.DISCARD, player.index, tile))
        logger.debug(f"{player.label} discards {tile}")
        self.last_draw = None

        if decomposition is not None:
            self.phase = GamePhase.WON
            self.winner = player.index
            self.winning_hand = winning_hand
            self.decomposition = decomposition
            self.history.append(Action(ActionType.WIN, player.index))
            logger.info(f"{player.label} wins: {decomposition}")
            return tile

        self.current_player = (self.current_player + 1) % self.NUM_PLAYERS
        self.phase = GamePhase.AWAITING_DRAW
        return tile

    def play_turn(self) -> None:
        """Run one draw and, if the game is still live, one discard"""
        if self.draw() is not None:
            self.discard()

    def play(self, on_draw: Optional[Callable[['Game'], None]] = None) -> GameResult:
        """
        Play the game to a terminal phase.

        Args:
            on_draw: Called after every draw, before the discard, e.g. for display
        """
        if self.phase == GamePhase.NOT_STARTED:
            self.start_game()
        if self.is_over:
            raise GameStateError("Game is already over")

        while not self.is_over:
            if self.draw() is None:
                break
            if on_draw is not None:
                on_draw(self)
            self.discard()

        return self.result()

    def result(self) -> GameResult:
        """Outcome of a finished game"""
        if not self.is_over:
            raise GameStateError("Game is not over")
        return GameResult(
            winner=self.winner,
            turns=self.turn_count,
            stock_remaining=self.stock.remaining,
            winning_hand=self.winning_hand,
            decomposition=self.decomposition,
        )

    def __repr__(self) -> str:
        return f"Game(phase={self.phase.name}, current={self.current_player}, stock={self.stock.remaining})"
