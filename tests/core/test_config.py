"""Unit tests for /src/core/config.py"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.core.config import EngineConfig, LayoutConfig, load_config
from src.core.exceptions import ConfigError
from src.core.shared_types import CapturePolicy, Color
from src.draughts.layout import ColorLayout
from src.draughts.pieces import Color as PieceColor


def test_defaults() -> None:
    config = EngineConfig()
    assert config.layout.to_layout() == ColorLayout.standard()
    assert config.first_player == Color.BLACK
    assert config.first_player_color == PieceColor.BLACK
    assert config.capture_policy == CapturePolicy.ANY


def test_rows_are_sorted_and_deduplicated() -> None:
    layout = LayoutConfig(white_rows=[2, 0, 1, 1], black_rows=[9, 8])
    assert layout.white_rows == [0, 1, 2]
    assert layout.to_layout().home_rows[PieceColor.BLACK] == (8, 9)


@pytest.mark.parametrize(
    "white_rows, black_rows",
    [
        ([0, 1, 2, 3], [3, 4]),  # overlap
        ([0, 5], [3, 4]),  # interleaved
        ([], [6, 7, 8, 9]),  # no home row
        ([0, 10], [6, 7]),  # off the board
    ],
)
def test_invalid_home_rows(white_rows: list[int], black_rows: list[int]) -> None:
    with pytest.raises(ValidationError):
        LayoutConfig(white_rows=white_rows, black_rows=black_rows)


def test_load_without_path() -> None:
    assert load_config() == EngineConfig()


def test_load_yaml(tmp_path: Path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text(
        "capture_policy: maximal\n"
        "first_player: white\n"
        "layout:\n"
        "  white_rows: [6, 7, 8, 9]\n"
        "  black_rows: [0, 1, 2, 3]\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.capture_policy == CapturePolicy.MAXIMAL
    assert config.first_player_color == PieceColor.WHITE
    assert config.layout.to_layout().forward(PieceColor.BLACK) == 1


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == EngineConfig()


@pytest.mark.parametrize(
    "content",
    [
        "capture_policy: greedy\n",
        "layout:\n  white_rows: [0, 1]\n  black_rows: [1, 2]\n",
        "layout: [unclosed\n",
    ],
)
def test_load_invalid_yaml(tmp_path: Path, content: str) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")
