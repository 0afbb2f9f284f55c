"""Defines the draughts pieces: a color and a rank, nothing more."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import InvalidLayoutError


class Color(Enum):
    BLACK = auto()
    WHITE = auto()

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self == Color.BLACK else Color.BLACK


class Rank(Enum):
    MAN = auto()
    KING = auto()


# Tokens used in board layout strings: lower case for men, upper case for kings
EMPTY_TOKEN = "."
COLOR_TO_TOKEN: dict[Color, str] = {
    Color.BLACK: "b",
    Color.WHITE: "w",
}
TOKEN_TO_COLOR: dict[str, Color] = {value: key for key, value in COLOR_TO_TOKEN.items()}


@dataclass
class Piece:
    color: Color
    rank: Rank = Rank.MAN

    @classmethod
    def from_token(cls, token: str) -> Optional[Self]:
        """'.' is an empty square, 'b'/'w' are men and 'B'/'W' are kings"""
        if token == EMPTY_TOKEN:
            return None
        if token.lower() not in TOKEN_TO_COLOR:
            raise InvalidLayoutError(f"Unknown piece token: {token!r}")
        rank = Rank.KING if token.isupper() else Rank.MAN
        return cls(TOKEN_TO_COLOR[token.lower()], rank)

    def to_token(self) -> str:
        token = COLOR_TO_TOKEN[self.color]
        return token.upper() if self.is_king else token

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def promote(self) -> None:
        # NOTE: a king never demotes, promoting a king is a no-op
        self.rank = Rank.KING
