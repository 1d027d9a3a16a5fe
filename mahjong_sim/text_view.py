"""
Console rendering for games in progress and finished games.
"""

from typing import Iterable

from .tiles import Tile
from .game import Game, GameResult

EXHAUSTED_MESSAGE = "No winner, stock exhausted."


def format_tiles(tiles: Iterable[Tile]) -> str:
    """Join tile labels with spaces."""
    return " ".join(str(t) for t in tiles)


def render_state(game: Game) -> str:
    """Render stock size, the active hand and the active player's discards."""
    player = game.active_player
    lines = []
    lines.append(f"=== Turn {game.turn_count} - {player.label} ===")
    lines.append(f"Stock Remaining: {game.stock.remaining}")
    if game.last_draw is not None:
        lines.append(f"Drew: {game.last_draw}")
    lines.append(f"Hand: {format_tiles(player.hand)}")
    lines.append(f"Discards: {format_tiles(player.discards)}")
    return "\n".join(lines)


def render_outcome(result: GameResult) -> str:
    """One of the two terminal messages, plus the winning shape on a win."""
    if result.winner is None:
        return EXHAUSTED_MESSAGE
    lines = [f"Player {result.winner + 1} wins!"]
    if result.winning_hand is not None:
        lines.append(f"Hand: {format_tiles(result.winning_hand)}")
    if result.decomposition is not None:
        lines.append(f"Shape: {result.decomposition}")
    return "\n".join(lines)
