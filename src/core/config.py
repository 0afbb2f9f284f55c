"""
Engine configuration.

Validated with pydantic; the console adapter can read it from a YAML file.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from src.core.exceptions import ConfigError
from src.core.shared_types import CapturePolicy, Color
from src.draughts.layout import ColorLayout
from src.draughts.pieces import Color as PieceColor
from src.draughts.square import BOARD_DIMENSIONS


class LayoutConfig(BaseModel):
    """Home rows of each color. One color must start entirely below the other."""

    white_rows: list[int] = Field(default_factory=lambda: [0, 1, 2, 3])
    black_rows: list[int] = Field(default_factory=lambda: [6, 7, 8, 9])

    @field_validator("white_rows", "black_rows")
    @classmethod
    def validate_rows(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("Every color needs at least one home row.")
        off_board = [row for row in value if not 0 <= row < BOARD_DIMENSIONS[1]]
        if off_board:
            raise ValueError(f"Rows {off_board} are not on the board.")
        return sorted(set(value))

    @model_validator(mode="after")
    def validate_sides(self) -> "LayoutConfig":
        white_below = max(self.white_rows) < min(self.black_rows)
        black_below = max(self.black_rows) < min(self.white_rows)
        if not (white_below or black_below):
            raise ValueError(
                f"Home rows overlap or interleave: white {self.white_rows}, black {self.black_rows}"
            )
        return self

    def to_layout(self) -> ColorLayout:
        return ColorLayout(
            home_rows={
                PieceColor.WHITE: tuple(self.white_rows),
                PieceColor.BLACK: tuple(self.black_rows),
            }
        )


class EngineConfig(BaseModel):
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    first_player: Color = Color.BLACK
    capture_policy: CapturePolicy = CapturePolicy.ANY

    @property
    def first_player_color(self) -> PieceColor:
        return PieceColor[self.first_player.name]


def load_config(path: Optional[str | Path] = None) -> EngineConfig:
    """
    Read the configuration from a YAML file. Without a path the defaults are used.

    ex.
        capture_policy: maximal
        first_player: white
        layout:
          white_rows: [0, 1, 2, 3]
          black_rows: [6, 7, 8, 9]
    """
    if path is None:
        return EngineConfig()

    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc

    try:
        return EngineConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {config_path}:\n{exc}") from exc
