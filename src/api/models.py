"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.config import EngineConfig
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, ErrorKind, Status
from src.draughts.moves import parse_move
from src.draughts.square import BOARD_DIMENSIONS

PieceColor = str
SquareNotation = str
MoveNotation = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    config: Optional[EngineConfig] = None
    starting_layout: Optional[str] = None
    turn: Optional[Color] = None

    @field_validator("starting_layout")
    @classmethod
    def validate_starting_layout(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        rows = value.strip().split("/")
        if len(rows) != BOARD_DIMENSIONS[1] or any(
            len(row) != BOARD_DIMENSIONS[0] for row in rows
        ):
            raise InvalidRequestError(
                f"Layout must contain {BOARD_DIMENSIONS[1]} slash-separated rows of {BOARD_DIMENSIONS[0]} squares."
            )
        return value.strip()


class SelectPieceRequest(BaseModel):
    game_id: UUID
    x: int
    y: int

    @field_validator("x", "y")
    @classmethod
    def validate_on_board(cls, value: int) -> int:
        # NOTE: the board is square, so one bound covers both coordinates
        if not 0 <= value < BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(f"Coordinate {value} is not on the board.")
        return value


class MoveRequest(BaseModel):
    game_id: UUID
    move: MoveNotation

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: str) -> str:
        value = value.strip()
        try:
            origin, move = parse_move(value)
        except ValueError as exc:
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a move."
            ) from exc

        squares = [origin, move.destination]
        if not all(square.is_within_bounds() for square in squares):
            raise InvalidRequestError(f"Move {value!r} leaves the board.")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class CancelSelectionRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board_layout: str
    turn: Color
    capture_counts: dict[PieceColor, int]
    status: Status
    winner: Optional[Color] = None
    movable_pieces: list[SquareNotation] = []


class LegalMovesResponse(BaseModel):
    game_id: UUID
    accepted: bool
    square: SquareNotation
    legal_moves: list[MoveNotation] = []
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None


class MoveResponse(BaseModel):
    game_id: UUID
    accepted: bool
    game: GameResponse
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None
