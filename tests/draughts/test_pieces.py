"""Unit tests for /src/draughts/pieces.py"""

import pytest

from src.core.exceptions import InvalidLayoutError
from src.draughts.pieces import Color, Piece, Rank


@pytest.mark.parametrize(
    "token, color, rank",
    [
        ("b", Color.BLACK, Rank.MAN),
        ("B", Color.BLACK, Rank.KING),
        ("w", Color.WHITE, Rank.MAN),
        ("W", Color.WHITE, Rank.KING),
    ],
)
def test_piece_from_token(token: str, color: Color, rank: Rank) -> None:
    """Lower case letters are men, upper case letters are kings"""
    piece = Piece.from_token(token)
    assert piece == Piece(color, rank)
    assert piece is not None
    assert piece.to_token() == token


def test_empty_token() -> None:
    assert Piece.from_token(".") is None


def test_unknown_token() -> None:
    with pytest.raises(InvalidLayoutError):
        Piece.from_token("x")


def test_opponent() -> None:
    assert Color.BLACK.opponent == Color.WHITE
    assert Color.WHITE.opponent == Color.BLACK


@pytest.mark.parametrize("color", [c for c in Color])
def test_promotion_to_king(color: Color) -> None:
    """Promote a man. Make sure the class is mutable and the color does not change by accident"""
    piece = Piece(color)
    assert not piece.is_king
    piece.promote()
    assert piece.rank == Rank.KING
    assert piece.color == color


def test_king_stays_king() -> None:
    piece = Piece(Color.WHITE, Rank.KING)
    piece.promote()
    assert piece.is_king
