"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    AWAITING_SELECTION = "awaiting selection"
    AWAITING_MOVE_CHOICE = "awaiting move choice"
    OVER = "over"


# --- NOTE The domain layer has its own Color enum (src/draughts/pieces.py). Same names, so converting is a lookup by name


class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"


class CapturePolicy(StrEnum):
    """
    ANY: every jump chain length (and every slide) may be played.
    MAXIMAL: when a side can capture, only its longest jump chains may be played.
    """

    ANY = "any"
    MAXIMAL = "maximal"


class ErrorKind(StrEnum):
    INVALID_SELECTION = "invalid selection"
    INVALID_MOVE = "invalid move"
    GAME_OVER = "game over"
    PRECONDITION_VIOLATION = "precondition violation"
