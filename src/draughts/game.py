"""
The Game class will be the entrypoint into the domain layer for the service layer.
It orchestrates one move cycle: surface the legal moves of a selected piece,
accept one of them, apply it, check for victory and pass the turn.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.core.config import EngineConfig
from src.core.exceptions import (
    GameOverError,
    InvalidMoveError,
    InvalidSelectionError,
)
from src.core.models import GameModel
from src.core.shared_types import CapturePolicy, Status
from src.draughts.board import Board
from src.draughts.moves import Move, longest_capture, restrict_to_maximal_captures
from src.draughts.pieces import Color
from src.draughts.rules import (
    advance_turn,
    apply_move,
    check_victory,
    has_any_legal_move,
    legal_moves_at,
)
from src.draughts.square import Position
from src.draughts.state import GameState, WinResult, initial_game_state

_LOGGER = logging.getLogger(__name__)


class Phase(Enum):
    AWAITING_SELECTION = auto()
    AWAITING_MOVE_CHOICE = auto()
    OVER = auto()


PHASE_TO_STATUS: dict[Phase, Status] = {
    Phase.AWAITING_SELECTION: Status.AWAITING_SELECTION,
    Phase.AWAITING_MOVE_CHOICE: Status.AWAITING_MOVE_CHOICE,
    Phase.OVER: Status.OVER,
}

WINNERS: dict[WinResult, Color] = {
    WinResult.BLACK_WINS: Color.BLACK,
    WinResult.WHITE_WINS: Color.WHITE,
}


@dataclass
class Selection:
    """The piece picked up by the player to move, with the moves surfaced for it"""

    position: Position
    moves: list[Move]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    state: GameState
    capture_policy: CapturePolicy = CapturePolicy.ANY
    phase: Phase = Phase.AWAITING_SELECTION
    selection: Optional[Selection] = None
    result: WinResult = WinResult.NONE

    @classmethod
    def new_game(cls, config: Optional[EngineConfig] = None) -> Self:
        """Start a game from the standard layout (rows per color taken from the config)."""
        config = config or EngineConfig()
        state = initial_game_state(
            config.layout.to_layout(), first_player=config.first_player_color
        )
        return cls(state=state, capture_policy=config.capture_policy)

    @classmethod
    def from_model(
        cls, model: GameModel, config: Optional[EngineConfig] = None
    ) -> Self:
        """
        Rebuild a game from a snapshot (or start from a custom position).

        NOTE: a pending selection is not part of the snapshot, the player to move selects again.
        """
        config = config or EngineConfig()
        state = GameState(
            board=Board.from_layout(model.board_layout),
            turn=Color[model.turn.upper()],
            layout=config.layout.to_layout(),
            capture_counts={
                color: model.capture_counts.get(color.name.lower(), 0)
                for color in Color
            },
        )
        game = cls(state=state, capture_policy=config.capture_policy)
        # a finished game stays finished, a position without pieces for one side is decided right away
        game._update_result(check_victory(state))
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        winner = self.winner
        return GameModel(
            board_layout=self.state.board.to_layout(),
            turn=self.state.turn.name.lower(),
            capture_counts={
                color.name.lower(): count
                for color, count in self.state.capture_counts.items()
            },
            status=self.status.value,
            winner=winner.name.lower() if winner else None,
        )

    @property
    def status(self) -> Status:
        return PHASE_TO_STATUS[self.phase]

    @property
    def winner(self) -> Optional[Color]:
        return WINNERS.get(self.result)

    @property
    def turn(self) -> Color:
        return self.state.turn

    def select(self, position: Position) -> list[Move]:
        """
        Pick up a piece of the player to move
        ----
        1. The game must still be going on
        2. The square must hold a piece of the player to move
        3. That piece must have at least one legal move
        4. Remember the surfaced moves: only those are accepted by `choose()`

        Selecting again while a move choice is pending replaces the previous selection.
        """
        self._assert_not_over()

        piece = self.state.board.piece(position)
        if piece is None:
            raise InvalidSelectionError(f"No piece on {position.to_notation()}.")
        if piece.color != self.state.turn:
            raise InvalidSelectionError(
                f"The piece on {position.to_notation()} is not yours. "
                f"Waiting for {self.state.turn.name.lower()} to move."
            )

        moves = self._moves_for(position)
        if not moves:
            raise InvalidSelectionError(
                f"The piece on {position.to_notation()} has no legal moves."
            )

        self.selection = Selection(position, moves)
        self.phase = Phase.AWAITING_MOVE_CHOICE
        _LOGGER.debug(
            "Selected %s: %d legal moves", position.to_notation(), len(moves)
        )
        return list(moves)

    def choose(self, move: Move) -> WinResult:
        """
        Play one of the moves surfaced by the last `select()`
        -----

        1. apply the move to the board
        2. check for victory
        3. pass the turn (unless the game is over)
        """
        self._assert_not_over()

        if self.phase != Phase.AWAITING_MOVE_CHOICE or self.selection is None:
            raise InvalidMoveError("Select a piece before choosing a move.")

        origin = self.selection.position
        if move not in self.selection.moves:
            raise InvalidMoveError(
                f"Move not allowed for the piece on {origin.to_notation()}: {move.to_notation(origin)}"
            )

        apply_move(self.state, origin, move)
        self.selection = None
        result = check_victory(self.state)
        self._update_result(result)
        if self.phase != Phase.OVER:
            advance_turn(self.state)
            self.phase = Phase.AWAITING_SELECTION
            if not has_any_legal_move(self.state, self.state.turn):
                # TODO: decide this as a draw/loss once blocked positions get scored
                _LOGGER.warning(
                    "%s has no legal moves left", self.state.turn.name.lower()
                )
        return result

    def play(self, origin: Position, move: Move) -> WinResult:
        """Convenience method: select + choose in one go"""
        self.select(origin)
        return self.choose(move)

    def cancel_selection(self) -> None:
        """Put the piece back down: no move is made"""
        self._assert_not_over()
        self.selection = None
        self.phase = Phase.AWAITING_SELECTION

    def movable_pieces(self) -> list[Position]:
        """Squares of the player to move holding a piece that can move (under the capture policy)"""
        if self.phase == Phase.OVER:
            return []
        return [
            position
            for position in self.state.board.locate_color(self.state.turn)
            if self._moves_for(position)
        ]

    # -- PRIVATE HELPERS ---
    def _assert_not_over(self) -> None:
        if self.phase == Phase.OVER:
            raise GameOverError(f"Game is over. winner: {self.result.name.lower()}")

    def _moves_for(self, position: Position) -> list[Move]:
        moves = legal_moves_at(self.state, position)
        if self.capture_policy == CapturePolicy.MAXIMAL:
            moves = restrict_to_maximal_captures(moves, self._longest_capture_for_side())
        return moves

    def _longest_capture_for_side(self) -> int:
        """Forced capture looks at every piece of the player to move, not only the selected one"""
        return max(
            (
                longest_capture(legal_moves_at(self.state, position))
                for position in self.state.board.locate_color(self.state.turn)
            ),
            default=0,
        )

    def _update_result(self, result: WinResult) -> None:
        if result == WinResult.NONE:
            return
        self.result = result
        self.phase = Phase.OVER
        _LOGGER.info("Game over: %s", result.name.lower())
