"""
Everything that changes while a game is played.

A GameState is owned by a single Game (no module level state): create one per game.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from src.draughts.board import Board
from src.draughts.layout import ColorLayout
from src.draughts.pieces import Color


class WinResult(Enum):
    NONE = auto()
    BLACK_WINS = auto()
    WHITE_WINS = auto()


def _no_captures() -> dict[Color, int]:
    return {Color.BLACK: 0, Color.WHITE: 0}


@dataclass
class GameState:
    """
    `capture_counts` tallies the pieces of each color that were removed from the board
    (so capture_counts[WHITE] goes up when black captures).
    """

    board: Board
    turn: Color
    layout: ColorLayout
    capture_counts: dict[Color, int] = field(default_factory=_no_captures)
    over: bool = False


def initial_game_state(
    layout: ColorLayout | None = None, first_player: Color = Color.BLACK
) -> GameState:
    """Standard setup: men on the dark squares of each color's home rows."""
    layout = layout or ColorLayout.standard()
    return GameState(board=Board.standard(layout), turn=first_player, layout=layout)
