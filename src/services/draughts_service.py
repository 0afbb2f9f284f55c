"""
Orchestration of communication from a host (console, GUI, ...) to the game logic.

Rejected selections/moves come back as result values (accepted=False), so a host can
render the message without its game loop having to catch anything.
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

from src.api.models import (
    CancelSelectionRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
    SelectPieceRequest,
)
from src.core.config import EngineConfig
from src.core.exceptions import (
    GameError,
    GameNotFoundError,
    GameOverError,
    InvalidMoveError,
    InvalidSelectionError,
    PreconditionViolationError,
)
from src.core.models import GameModel
from src.core.shared_types import Color, ErrorKind, Status
from src.draughts.game import Game
from src.draughts.moves import parse_move
from src.draughts.square import Position

_LOGGER = logging.getLogger(__name__)

ERROR_KINDS: dict[type[GameError], ErrorKind] = {
    InvalidSelectionError: ErrorKind.INVALID_SELECTION,
    InvalidMoveError: ErrorKind.INVALID_MOVE,
    GameOverError: ErrorKind.GAME_OVER,
    PreconditionViolationError: ErrorKind.PRECONDITION_VIOLATION,
}


def error_kind(error: GameError) -> ErrorKind:
    return ERROR_KINDS[type(error)]


class DraughtsService:
    """Orchestration of layers for draughts games. Every game is owned by exactly one Game instance."""

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self._games: dict[UUID, Game] = {}

    # -- host API logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a game: standard layout, unless the request brings its own starting position."""
        config = request.config or self.config
        if request.starting_layout is None:
            game = Game.new_game(config)
        else:
            turn = request.turn or config.first_player
            model = GameModel(
                board_layout=request.starting_layout,
                turn=turn.value,
                capture_counts={},
                status=Status.AWAITING_SELECTION.value,
            )
            game = Game.from_model(model, config)

        game_id = uuid4()
        self._games[game_id] = game
        _LOGGER.info("Created game %s", game_id)
        return self._create_game_response(game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def select_piece(self, request: SelectPieceRequest) -> LegalMovesResponse:
        """Surface the legal moves of the piece on the requested square."""
        game = self._fetch_game(request.game_id)
        position = Position(request.x, request.y)
        try:
            moves = game.select(position)
        except GameError as error:
            _LOGGER.warning("Rejected selection in game %s: %s", request.game_id, error)
            return LegalMovesResponse(
                game_id=request.game_id,
                accepted=False,
                square=position.to_notation(),
                error_kind=error_kind(error),
                message=str(error),
            )

        return LegalMovesResponse(
            game_id=request.game_id,
            accepted=True,
            square=position.to_notation(),
            legal_moves=[move.to_notation(position) for move in moves],
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        Make a move attempt.
        ----
        If the moving piece is not the one selected last, it gets selected first.
        """
        game = self._fetch_game(request.game_id)
        origin, move = parse_move(request.move)
        try:
            if game.selection is None or game.selection.position != origin:
                game.select(origin)
            game.choose(move)
        except GameError as error:
            _LOGGER.warning("Rejected move in game %s: %s", request.game_id, error)
            return MoveResponse(
                game_id=request.game_id,
                accepted=False,
                game=self._create_game_response(request.game_id, game),
                error_kind=error_kind(error),
                message=str(error),
            )

        return MoveResponse(
            game_id=request.game_id,
            accepted=True,
            game=self._create_game_response(request.game_id, game),
        )

    def cancel_selection(self, request: CancelSelectionRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        if game.selection is not None:
            game.cancel_selection()
        return self._create_game_response(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Drop the game. Unknown ids are ignored"""
        self._games.pop(request.game_id, None)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        model = game.to_model()
        return GameResponse(
            game_id=game_id,
            board_layout=model.board_layout,
            turn=Color(model.turn),
            capture_counts=model.capture_counts,
            status=Status(model.status),
            winner=Color(model.winner) if model.winner else None,
            movable_pieces=[
                position.to_notation() for position in game.movable_pieces()
            ],
        )

    def _fetch_game(self, game_id: UUID) -> Game:
        """Attempt to find the game and raise error if it fails."""
        game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game
