"""Exception types raised by the engine.

Recoverable move problems (bad cell, occupied cell, game over) are never
raised; they come back as a MoveResult. Only construction and lifecycle
misuse end up here.
"""


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class BoardConfigurationError(TicTacToeError, ValueError):
    """Board cannot be built with the given size or contents."""


class GameConfigurationError(TicTacToeError, ValueError):
    """Players or board handed to a Game violate its preconditions."""


class GameStateError(TicTacToeError, RuntimeError):
    """Lifecycle call made in the wrong state (e.g. starting twice)."""
