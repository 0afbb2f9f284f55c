"""
Custom errors raised across layers.

The domain layer raises these, the service layer turns them into result values a host can render.
"""


class GameError(Exception):
    """Base class for anything that goes wrong while playing a game."""


class InvalidSelectionError(GameError):
    """Selected square is empty or holds a piece of the player who is not to move."""


class InvalidMoveError(GameError):
    """Move is not part of the legal moves surfaced for the selected piece."""


class GameOverError(GameError):
    """No selections or moves are accepted once the game has been decided."""


class PreconditionViolationError(GameError):
    """
    A move was applied that was never validated against the current board.

    Programmer error: should never occur if the Game controller is used.
    """


class GameNotFoundError(GameError):
    """No game registered under the requested id."""


class InvalidLayoutError(ValueError):
    """Board layout string cannot be parsed."""


class ConfigError(ValueError):
    """Engine configuration is invalid or cannot be read."""


class InvalidRequestError(Exception):
    """Request sent by a host does not pass validation."""
