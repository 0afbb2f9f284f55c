"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the host adapters (higher) and the domain layer (lower) use model(s) defined here to send to/receive from the Service
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PieceColor = str
BoardLayout = str


@dataclass
class GameModel:
    """Transport-safe snapshot of a draughts game used between the host adapters, Service, and Game layers."""

    board_layout: BoardLayout
    turn: PieceColor
    capture_counts: dict[PieceColor, int]
    status: str
    winner: Optional[PieceColor] = None
