"""The Game board: pure data describing which piece stands on which square."""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import InvalidLayoutError
from src.draughts.layout import ColorLayout
from src.draughts.pieces import EMPTY_TOKEN, Color, Piece, Rank
from src.draughts.square import BOARD_DIMENSIONS, Position, all_positions


@dataclass
class Board:
    cells: dict[Position, Optional[Piece]]

    @classmethod
    def empty(cls) -> Self:
        return cls({position: None for position in all_positions()})

    @classmethod
    def standard(cls, layout: ColorLayout) -> Self:
        """Men on every dark square of each color's home rows, middle rows empty"""
        board = cls.empty()
        for color, rows in layout.home_rows.items():
            for position in all_positions():
                if position.y in rows and position.is_dark():
                    board.place_piece(Piece(color, Rank.MAN), position)
        return board

    @classmethod
    def from_layout(cls, layout_str: str) -> Self:
        """Construct a board from a layout string.

        Rows are separated by slashes and read from row 0 to row 9, one token per square:
        * '.' an empty square
        * 'b' / 'w' a black / white man
        * 'B' / 'W' a black / white king

        ex. a board with only a black king on (3, 0):
        ...B....../........../ (and 8 more empty rows)
        """
        rows = layout_str.split("/")
        if len(rows) != BOARD_DIMENSIONS[1]:
            raise InvalidLayoutError(
                f"Expected {BOARD_DIMENSIONS[1]} rows, got {len(rows)}: {layout_str!r}"
            )

        cells: dict[Position, Optional[Piece]] = {}
        for y, row in enumerate(rows):
            if len(row) != BOARD_DIMENSIONS[0]:
                raise InvalidLayoutError(
                    f"Row {y} should hold {BOARD_DIMENSIONS[0]} squares: {row!r}"
                )
            for x, token in enumerate(row):
                cells[Position(x, y)] = Piece.from_token(token)
        return cls(cells)

    def to_layout(self) -> str:
        return "/".join(self._row_to_layout(y) for y in range(BOARD_DIMENSIONS[1]))

    def _row_to_layout(self, y: int) -> str:
        tokens: list[str] = []
        for x in range(BOARD_DIMENSIONS[0]):
            piece = self.piece(Position(x, y))
            tokens.append(piece.to_token() if piece else EMPTY_TOKEN)
        return "".join(tokens)

    def piece(self, position: Position) -> Optional[Piece]:
        return self.cells[position]

    def is_empty(self, position: Position) -> bool:
        return self.cells[position] is None

    def place_piece(self, piece: Piece, position: Position) -> None:
        self.cells[position] = piece

    def remove_piece(self, position: Position) -> Optional[Piece]:
        """Empty the square, hand back whatever stood there"""
        piece = self.cells[position]
        self.cells[position] = None
        return piece

    def move_piece(self, from_position: Position, to_position: Position) -> None:
        """Relocate a piece. No rules are checked here"""
        piece_that_moved = self.cells[from_position]
        self.cells[from_position] = None
        self.cells[to_position] = piece_that_moved

    def locate_color(self, color: Color) -> list[Position]:
        return [
            position
            for position, piece in self.cells.items()
            if piece is not None and piece.color == color
        ]

    def count_pieces(self, color: Color) -> int:
        """men and kings of the same color count the same"""
        return len(self.locate_color(color))

    def occupied_count(self) -> int:
        return sum(1 for piece in self.cells.values() if piece is not None)
