"""
Which rows each color starts on.

The color-to-row mapping is configuration, not a rule: the direction a man moves in follows from it.
"""

from dataclasses import dataclass

from src.draughts.pieces import Color
from src.draughts.square import BOARD_DIMENSIONS

Direction = tuple[int, int]


@dataclass(frozen=True)
class ColorLayout:
    home_rows: dict[Color, tuple[int, ...]]

    @classmethod
    def standard(cls) -> "ColorLayout":
        """White fills rows 0-3, black fills rows 6-9."""
        return cls(
            home_rows={
                Color.WHITE: (0, 1, 2, 3),
                Color.BLACK: (6, 7, 8, 9),
            }
        )

    def forward(self, color: Color) -> int:
        """+1 if the color advances towards higher row indices, -1 otherwise"""
        own_rows = self.home_rows[color]
        opponent_rows = self.home_rows[color.opponent]
        return 1 if min(opponent_rows) > max(own_rows) else -1

    def promotion_row(self, color: Color) -> int:
        """The farthest row for a color"""
        return BOARD_DIMENSIONS[1] - 1 if self.forward(color) == 1 else 0

    def forward_diagonals(self, color: Color) -> list[Direction]:
        dy = self.forward(color)
        return [(-1, dy), (1, dy)]


ALL_DIAGONALS: list[Direction] = [(-1, 1), (1, 1), (-1, -1), (1, -1)]
