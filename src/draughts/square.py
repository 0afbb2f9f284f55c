"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# International draughts is played on 10x10. Kept adjustable for smaller variants
BOARD_DIMENSIONS = (10, 10)


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    @classmethod
    def from_notation(cls, notation: str) -> Position:
        """Coordinate notation: '1,6' gets converted to Position(x=1, y=6)"""
        x, y = notation.split(",")
        return cls(int(x), int(y))

    def to_notation(self) -> str:
        return f"{self.x},{self.y}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (
            0 <= self.y < BOARD_DIMENSIONS[1]
        )

    def is_dark(self) -> bool:
        """Only the dark squares are ever occupied in a regular game"""
        return (self.x + self.y) % 2 == 1

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)


def all_positions() -> list[Position]:
    """Row by row, starting at row 0"""
    return [
        Position(x, y)
        for y in range(BOARD_DIMENSIONS[1])
        for x in range(BOARD_DIMENSIONS[0])
    ]
