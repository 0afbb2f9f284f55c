"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.config import EngineConfig, LayoutConfig
from src.draughts.board import Board
from src.draughts.layout import ColorLayout
from src.draughts.pieces import Color
from src.draughts.state import GameState

PiecesByCoordinate = dict[tuple[int, int], str]
LayoutFn = Callable[[PiecesByCoordinate], str]


def build_layout(pieces: PiecesByCoordinate) -> str:
    """Layout string with the given tokens on (x, y), every other square empty"""
    rows = [
        "".join(pieces.get((x, y), ".") for x in range(10)) for y in range(10)
    ]
    return "/".join(rows)


@pytest.fixture
def make_layout() -> LayoutFn:
    """Call the returned function with {(x, y): token} to get a layout string"""
    return build_layout


@pytest.fixture
def reversed_layout() -> ColorLayout:
    """Black starts on rows 0-3 (so black men advance towards row 9), white on rows 6-9."""
    return ColorLayout(
        home_rows={Color.BLACK: (0, 1, 2, 3), Color.WHITE: (6, 7, 8, 9)}
    )


@pytest.fixture
def reversed_config() -> EngineConfig:
    return EngineConfig(layout=LayoutConfig(black_rows=[0, 1, 2, 3], white_rows=[6, 7, 8, 9]))


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Call the inner function with the pieces on the board, who is to move and the color layout"""

    def _create_state(
        pieces: PiecesByCoordinate,
        turn: Color = Color.BLACK,
        layout: ColorLayout | None = None,
    ) -> GameState:
        return GameState(
            board=Board.from_layout(build_layout(pieces)),
            turn=turn,
            layout=layout or ColorLayout.standard(),
        )

    return _create_state
