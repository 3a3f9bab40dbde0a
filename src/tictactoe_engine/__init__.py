"""tictactoe_engine package.

An N x N Tic-Tac-Toe engine: board state with win/draw detection, players,
and a turn-based game state machine, plus a small replay CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board
from .errors import (
    BoardConfigurationError,
    GameConfigurationError,
    GameStateError,
    TicTacToeError,
)
from .game import Game, GameStatus, Move, MoveOutcome, MoveResult
from .player import Player
from .symbols import Symbol

__all__ = [
    "Board",
    "Game",
    "GameStatus",
    "Move",
    "MoveOutcome",
    "MoveResult",
    "Player",
    "Symbol",
    "TicTacToeError",
    "BoardConfigurationError",
    "GameConfigurationError",
    "GameStateError",
]
