"""
Rules that change the GameState: applying a move, promotion, victory and turn order.

Legality of a move is decided by `moves.legal_moves`; nothing here re-validates (apart from a debug check).
"""

import logging

from src.core.exceptions import PreconditionViolationError
from src.draughts.moves import Jump, Move, legal_moves
from src.draughts.pieces import Color, Rank
from src.draughts.square import Position
from src.draughts.state import GameState, WinResult

_LOGGER = logging.getLogger(__name__)


def legal_moves_at(state: GameState, position: Position) -> list[Move]:
    """Convenience wrapper: legal moves of whatever piece stands on `position` (none for an empty square)"""
    piece = state.board.piece(position)
    if piece is None:
        return []
    return legal_moves(state.board, piece, position, state.layout)


def has_any_legal_move(state: GameState, color: Color) -> bool:
    return any(
        legal_moves_at(state, position) for position in state.board.locate_color(color)
    )


def apply_move(state: GameState, origin: Position, move: Move) -> None:
    """
    Update the board for a move previously returned by `legal_moves` for `origin`
    ----

    1. Jump: remove every captured piece and tally it
    2. relocate the moving piece to its destination
    3. promote a man that reached the farthest row of its color
    """
    if __debug__:
        _check_precondition(state, origin, move)

    board = state.board
    if isinstance(move, Jump):
        for square in move.captures:
            captured = board.remove_piece(square)
            # for the type checker: validated moves only jump over pieces
            assert captured is not None
            state.capture_counts[captured.color] += 1
    board.move_piece(origin, move.destination)

    _promote_if_needed(state, move.destination)
    _LOGGER.info("Applied %s", move.to_notation(origin))


def _check_precondition(state: GameState, origin: Position, move: Move) -> None:
    """Only moves the generator produced for this board may be applied. Runs before anything is mutated"""
    if move not in legal_moves_at(state, origin):
        raise PreconditionViolationError(
            f"Move {move.to_notation(origin)} was never validated for the current board."
        )


def _promote_if_needed(state: GameState, position: Position) -> None:
    piece = state.board.piece(position)
    assert piece is not None
    if piece.rank != Rank.MAN:
        return
    if position.y == state.layout.promotion_row(piece.color):
        piece.promote()
        _LOGGER.info("Promoted %s man on %s", piece.color.name.lower(), position.to_notation())


def check_victory(state: GameState) -> WinResult:
    """
    A color loses once it has no pieces left on the board.

    Counted directly from the board (not from the capture tallies).
    """
    if state.board.count_pieces(Color.WHITE) == 0:
        state.over = True
        return WinResult.BLACK_WINS
    if state.board.count_pieces(Color.BLACK) == 0:
        state.over = True
        return WinResult.WHITE_WINS
    return WinResult.NONE


def advance_turn(state: GameState) -> None:
    state.turn = state.turn.opponent
