"""Play draughts on the console: two humans taking turns at the same terminal."""

import argparse
import logging
from typing import Callable, Optional, Sequence

from src.api.models import (
    CancelSelectionRequest,
    CreateGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    SelectPieceRequest,
)
from src.core.config import load_config
from src.core.exceptions import ConfigError, InvalidLayoutError, InvalidRequestError
from src.core.shared_types import Status
from src.draughts.square import BOARD_DIMENSIONS, Position
from src.services.draughts_service import DraughtsService

_LOGGER = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}
CANCEL_WORDS = {"c", "cancel"}

ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]


class QuitGame(Exception):
    """The player typed one of the quit words"""


def render_board(board_layout: str) -> str:
    """Text version of the board, with x along the top and y down the side"""
    header = "   " + " ".join(str(x) for x in range(BOARD_DIMENSIONS[0]))
    lines = [header]
    for y, row in enumerate(board_layout.split("/")):
        lines.append(f"{y:>2} " + " ".join(row))
    return "\n".join(lines)


def parse_square(raw: str) -> Optional[Position]:
    """'x,y' or 'x y' -> Position. None if it is not a square on the board"""
    parts = raw.replace(",", " ").split()
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        return None
    position = Position(int(parts[0]), int(parts[1]))
    return position if position.is_within_bounds() else None


def _ask(read: ReadFn, prompt: str) -> str:
    raw = read(prompt).strip()
    if raw.lower() in QUIT_WORDS:
        raise QuitGame
    return raw


def _print_game(game: GameResponse, write: WriteFn) -> None:
    write("")
    write(render_board(game.board_layout))
    write(
        f"captured: black {game.capture_counts.get('black', 0)}, white {game.capture_counts.get('white', 0)}"
    )


def _play_turn(service: DraughtsService, game: GameResponse, read: ReadFn, write: WriteFn) -> None:
    """One selection + move choice. Rejections just print a message and return"""
    write(f"{game.turn.value} to move. Pieces that can move: {', '.join(game.movable_pieces)}")
    position = parse_square(_ask(read, "Select a piece (x,y): "))
    if position is None:
        write("Enter a square as x,y with both coordinates on the board.")
        return

    selection = service.select_piece(
        SelectPieceRequest(game_id=game.game_id, x=position.x, y=position.y)
    )
    if not selection.accepted:
        write(f"{selection.message}")
        return

    for index, notation in enumerate(selection.legal_moves):
        write(f"  {index}: {notation}")
    raw = _ask(read, "Pick a move by index (c to cancel): ")
    if raw.lower() in CANCEL_WORDS:
        service.cancel_selection(CancelSelectionRequest(game_id=game.game_id))
        return
    if not raw.isdigit() or int(raw) >= len(selection.legal_moves):
        write("Not one of the listed moves.")
        return

    result = service.make_move(
        MoveRequest(game_id=game.game_id, move=selection.legal_moves[int(raw)])
    )
    if not result.accepted:
        write(f"{result.message}")


def play(
    service: DraughtsService,
    read: ReadFn = input,
    write: WriteFn = print,
    starting_layout: Optional[str] = None,
) -> GameResponse:
    """Game loop. Returns the last known state of the game (finished or not)"""
    game = service.create_new_game(CreateGameRequest(starting_layout=starting_layout))
    try:
        while game.status != Status.OVER:
            _print_game(game, write)
            _play_turn(service, game, read, write)
            game = service.get_game_state(GetGameRequest(game_id=game.game_id))
    except (QuitGame, EOFError):
        write("Game stopped.")
        return game

    _print_game(game, write)
    winner = game.winner.value if game.winner else "nobody"
    write(f"Game over: {winner} wins!")
    return game


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play draughts on the console.")
    parser.add_argument("--config", type=str, default=None, help="YAML file with engine settings")
    parser.add_argument(
        "--layout",
        type=str,
        default=None,
        help="custom starting position: 10 slash-separated rows of '.', 'b', 'w', 'B', 'W'",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ConfigError as error:
        _LOGGER.error("%s", error)
        return 2

    service = DraughtsService(config)
    try:
        play(service, starting_layout=args.layout)
    except (InvalidRequestError, InvalidLayoutError) as error:
        _LOGGER.error("%s", error)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
