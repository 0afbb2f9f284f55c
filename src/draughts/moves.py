"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the diagonals each rank may use.
Both slides and jump chains (of every length) are generated here;
which of them a player must pick (forced capture) is decided by the Game.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.draughts.layout import ALL_DIAGONALS, ColorLayout, Direction
from src.draughts.pieces import Color, Piece, Rank
from src.draughts.square import Position


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, position: Position) -> Optional[Piece]: ...
    def is_empty(self, position: Position) -> bool: ...


@dataclass(frozen=True)
class Slide:
    """Relocate one square diagonally into an empty square"""

    to: Position

    @property
    def destination(self) -> Position:
        return self.to

    def to_notation(self, origin: Position) -> str:
        return f"{origin.to_notation()}-{self.to.to_notation()}"


@dataclass(frozen=True)
class Jump:
    """
    A chain of one or more single jumps.
    `landings[i]` is reached by jumping the opponent piece on `captures[i]`.
    """

    captures: tuple[Position, ...]
    landings: tuple[Position, ...]

    def __post_init__(self) -> None:
        if len(self.captures) != len(self.landings) or not self.landings:
            raise ValueError(
                f"A jump needs as many captures as landings (at least one): {self.captures} / {self.landings}"
            )

    @classmethod
    def from_landings(cls, origin: Position, landings: list[Position]) -> Self:
        """Every single jump covers two squares, so the captured square is always the midpoint"""
        captures: list[Position] = []
        current = origin
        for landing in landings:
            captures.append(
                Position((current.x + landing.x) // 2, (current.y + landing.y) // 2)
            )
            current = landing
        return cls(tuple(captures), tuple(landings))

    @property
    def destination(self) -> Position:
        return self.landings[-1]

    def to_notation(self, origin: Position) -> str:
        squares = [origin, *self.landings]
        return "x".join(square.to_notation() for square in squares)


Move = Slide | Jump


def parse_move(notation: str) -> tuple[Position, Move]:
    """
    Reverse of `to_notation`:
    * "1,6-0,5": slide from (1,6) to (0,5)
    * "2,2x4,4x6,6": jump chain from (2,2), landing on (4,4) and then (6,6)
    """
    if "-" in notation:
        origin_str, to_str = notation.split("-")
        return Position.from_notation(origin_str), Slide(Position.from_notation(to_str))

    origin_str, *landing_strs = notation.split("x")
    origin = Position.from_notation(origin_str)
    landings = [Position.from_notation(landing) for landing in landing_strs]
    return origin, Jump.from_landings(origin, landings)


# --- MOVEMENT RULES ---
def man_directions(color: Color, layout: ColorLayout) -> list[Direction]:
    """A man only moves (and captures) along its two forward diagonals"""
    return layout.forward_diagonals(color)


def king_directions(color: Color, layout: ColorLayout) -> list[Direction]:
    """Kings move diagonally in any direction"""
    return ALL_DIAGONALS


# -- STRATEGY PATTERN: MOVEMENT RULES ---
DirectionsFn = Callable[[Color, ColorLayout], list[Direction]]
MOVEMENT_RULES: dict[Rank, DirectionsFn] = {
    Rank.MAN: man_directions,
    Rank.KING: king_directions,
}


def slide_moves(
    position: Position, board: Board, directions: list[Direction]
) -> list[Slide]:
    """A single step along each direction, as long as it stays on the board and the square is free"""
    moves: list[Slide] = []
    for dx, dy in directions:
        target = position.offset(dx, dy)
        if not target.is_within_bounds():
            continue
        if board.is_empty(target):
            moves.append(Slide(target))
    return moves


def jump_moves(
    position: Position, piece: Piece, board: Board, directions: list[Direction]
) -> list[Jump]:
    """
    Depth-first search for jump chains
    -----

    ---
    Every chain found is reported, also the ones that could still be extended:
    a 1-jump and its 2-jump continuation are separate moves to choose from.

    ---
    NOTE: captured pieces stay on the board during the search (they are only removed when the move is applied).
    They can not be jumped a second time within the same chain.
    """
    moves: list[Jump] = []
    _search_jumps(
        board,
        piece,
        start=position,
        current=position,
        captures=(),
        landings=(),
        directions=directions,
        moves=moves,
    )
    return moves


def _search_jumps(
    board: Board,
    piece: Piece,
    start: Position,
    current: Position,
    captures: tuple[Position, ...],
    landings: tuple[Position, ...],
    directions: list[Direction],
    moves: list[Jump],
) -> None:
    for dx, dy in directions:
        over = current.offset(dx, dy)
        landing = current.offset(2 * dx, 2 * dy)
        if not _is_valid_landing(board, piece, start, over, landing, captures, landings):
            continue

        # Each branch extends its own copy of the chain so far (tuples are never shared mutably)
        chain_captures = captures + (over,)
        chain_landings = landings + (landing,)
        moves.append(Jump(chain_captures, chain_landings))
        _search_jumps(
            board,
            piece,
            start,
            landing,
            chain_captures,
            chain_landings,
            directions,
            moves,
        )


def _is_valid_landing(
    board: Board,
    piece: Piece,
    start: Position,
    over: Position,
    landing: Position,
    captures: tuple[Position, ...],
    landings: tuple[Position, ...],
) -> bool:
    # never jump back to the starting square
    if landing == start:
        return False
    if not landing.is_within_bounds():
        return False
    if not board.is_empty(landing):
        return False
    # must jump over an opponent's piece (man or king)
    jumped = board.piece(over)
    if jumped is None or jumped.color != piece.color.opponent:
        return False
    # never visit a square twice in the same chain
    if landing in landings:
        return False
    # a piece can only be captured once
    if over in captures:
        return False
    return True


def legal_moves(
    board: Board, piece: Piece, position: Position, layout: ColorLayout
) -> list[Move]:
    """
    All slides followed by all jump chains of every length for the piece on `position`.

    The caller makes sure `piece` is the one standing on `position`.
    """
    directions = MOVEMENT_RULES[piece.rank](piece.color, layout)
    moves: list[Move] = []
    moves.extend(slide_moves(position, board, directions))
    moves.extend(jump_moves(position, piece, board, directions))
    return moves


# --- FORCED CAPTURE ---
def restrict_to_maximal_captures(
    moves: list[Move], longest: Optional[int] = None
) -> list[Move]:
    """
    Strict rule: if any jump is available, only the longest chains may be played (slides drop out).
    Without any jump, the moves are returned as they are.

    ---
    `longest` is the longest chain available to the whole side (any of its pieces).
    Defaults to the longest chain among `moves`.
    """
    if longest is None:
        longest = longest_capture(moves)
    if longest == 0:
        return moves
    return [
        move
        for move in moves
        if isinstance(move, Jump) and len(move.captures) == longest
    ]


def longest_capture(moves: list[Move]) -> int:
    """0 if there is no jump among the moves"""
    return max(
        (len(move.captures) for move in moves if isinstance(move, Jump)), default=0
    )
