"""Unit tests for /src/draughts/board.py"""

import pytest

from src.core.exceptions import InvalidLayoutError
from src.draughts.board import Board
from src.draughts.layout import ColorLayout
from src.draughts.pieces import Color, Piece, Rank
from src.draughts.square import Position

EMPTY_LAYOUT = "/".join(["." * 10] * 10)
STANDARD_LAYOUT = "/".join(
    [
        ".w.w.w.w.w",
        "w.w.w.w.w.",
        ".w.w.w.w.w",
        "w.w.w.w.w.",
        "..........",
        "..........",
        ".b.b.b.b.b",
        "b.b.b.b.b.",
        ".b.b.b.b.b",
        "b.b.b.b.b.",
    ]
)


# -- CREATION LOGIC ---
def test_standard_board() -> None:
    """White men on the dark squares of rows 0-3, black men on rows 6-9"""
    board = Board.standard(ColorLayout.standard())
    assert board.to_layout() == STANDARD_LAYOUT
    assert board.count_pieces(Color.WHITE) == 20
    assert board.count_pieces(Color.BLACK) == 20
    assert all(position.is_dark() for position in board.locate_color(Color.BLACK))
    assert all(position.is_dark() for position in board.locate_color(Color.WHITE))


def test_standard_board_follows_layout(reversed_layout: ColorLayout) -> None:
    """Color to row mapping is configuration, not a rule"""
    board = Board.standard(reversed_layout)
    assert board.piece(Position(1, 0)) == Piece(Color.BLACK)
    assert board.piece(Position(1, 6)) == Piece(Color.WHITE)


def test_empty_board() -> None:
    board = Board.empty()
    assert board.occupied_count() == 0
    assert board.to_layout() == EMPTY_LAYOUT


def test_layout_roundtrip(make_layout) -> None:
    layout = make_layout({(1, 0): "B", (4, 4): "b", (5, 5): "w", (8, 9): "W"})
    board = Board.from_layout(layout)
    assert board.piece(Position(1, 0)) == Piece(Color.BLACK, Rank.KING)
    assert board.piece(Position(4, 4)) == Piece(Color.BLACK, Rank.MAN)
    assert board.piece(Position(5, 5)) == Piece(Color.WHITE, Rank.MAN)
    assert board.piece(Position(8, 9)) == Piece(Color.WHITE, Rank.KING)
    assert board.is_empty(Position(0, 0))
    assert board.to_layout() == layout


@pytest.mark.parametrize(
    "layout",
    [
        "/".join(["." * 10] * 9),  # a row missing
        "/".join(["." * 9] + ["." * 10] * 9),  # a short row
        "/".join(["." * 9 + "x"] + ["." * 10] * 9),  # unknown token
    ],
)
def test_invalid_layout(layout: str) -> None:
    with pytest.raises(InvalidLayoutError):
        Board.from_layout(layout)


# -- ACCESSORS / UPDATES ---
def test_place_and_remove_piece() -> None:
    board = Board.empty()
    square = Position(3, 4)
    board.place_piece(Piece(Color.WHITE), square)
    assert not board.is_empty(square)
    removed = board.remove_piece(square)
    assert removed == Piece(Color.WHITE)
    assert board.is_empty(square)


def test_move_piece() -> None:
    """The piece itself (not a copy) ends up on the target square"""
    board = Board.empty()
    piece = Piece(Color.BLACK)
    board.place_piece(piece, Position(1, 6))
    board.move_piece(Position(1, 6), Position(0, 5))
    assert board.is_empty(Position(1, 6))
    assert board.piece(Position(0, 5)) is piece


def test_men_and_kings_count_the_same(make_layout) -> None:
    board = Board.from_layout(make_layout({(0, 1): "w", (2, 1): "W", (5, 6): "b"}))
    assert board.count_pieces(Color.WHITE) == 2
    assert board.count_pieces(Color.BLACK) == 1
    assert board.occupied_count() == 3
    assert set(board.locate_color(Color.WHITE)) == {Position(0, 1), Position(2, 1)}
