"""
Game: turn order and the NOT_STARTED -> RUNNING -> ENDED state machine.
Teaching notes:
- The Game decides when a move is allowed and who may act; the Board only
  answers questions about the grid.
- A failed move never advances the turn. Bad moves are reported through
  MoveResult instead of raised, so callers can simply ask again.
- ENDED is absorbing: once there is a winner or a draw nothing else changes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .board import Board
from .errors import GameConfigurationError, GameStateError
from .player import Player

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    ENDED = "ended"


class MoveOutcome(Enum):
    ACCEPTED = "accepted"
    WIN = "win"
    DRAW = "draw"
    INVALID_POSITION = "invalid_position"
    CELL_OCCUPIED = "cell_occupied"
    GAME_ENDED = "game_ended"
    NOT_STARTED = "not_started"


_SUCCESS = (MoveOutcome.ACCEPTED, MoveOutcome.WIN, MoveOutcome.DRAW)


@dataclass(frozen=True)
class Move:
    player: Player
    row: int
    col: int
    number: int  # 0-based ply index


@dataclass(frozen=True)
class MoveResult:
    outcome: MoveOutcome
    player: Optional[Player]
    row: int
    col: int
    message: str

    @property
    def ok(self) -> bool:
        return self.outcome in _SUCCESS


class Game:
    def __init__(self, board: Board, player1: Player, player2: Player) -> None:
        if player1.symbol == player2.symbol:
            raise GameConfigurationError(
                f"Players must hold distinct symbols, both have {player1.symbol}"
            )
        if player1.id == player2.id:
            raise GameConfigurationError(f"Players must have distinct ids, both are {player1.id!r}")
        if board.filled_count:
            raise GameConfigurationError("A game must start on an empty board")
        self._board = board
        self._player1 = player1
        self._player2 = player2
        self._current: Optional[Player] = None
        self._status = GameStatus.NOT_STARTED
        self._winner: Optional[Player] = None
        self._is_draw = False
        self._moves: List[Move] = []

    @property
    def board(self) -> Board:
        return self._board

    @property
    def players(self) -> Tuple[Player, Player]:
        return self._player1, self._player2

    @property
    def current_player(self) -> Optional[Player]:
        return self._current

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def is_draw(self) -> bool:
        return self._is_draw

    @property
    def is_over(self) -> bool:
        return self._status is GameStatus.ENDED

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    def start_game(self) -> None:
        if self._status is not GameStatus.NOT_STARTED:
            raise GameStateError(f"Game already {self._status.value}")
        self._status = GameStatus.RUNNING
        self._current = self._player1
        logger.info("Game started on %dx%d board; %s moves first",
                    self._board.size, self._board.size, self._current)

    def play_move(self, row: int, col: int) -> MoveResult:
        """Attempt a move for the active player."""
        if self._status is GameStatus.ENDED:
            logger.info("Move (%d, %d) ignored: game already ended", row, col)
            return self._result(MoveOutcome.GAME_ENDED, row, col, "Game already ended")
        if self._status is GameStatus.NOT_STARTED:
            logger.warning("Move (%d, %d) ignored: game not started", row, col)
            return self._result(MoveOutcome.NOT_STARTED, row, col, "Game has not been started")

        mover = self._current
        if mover is None:
            raise GameStateError("Game is running without an active player")
        if not self._board.place_symbol(row, col, mover.symbol):
            if not self._board.is_valid_cell(row, col):
                logger.warning("Invalid move by %s: (%d, %d) is off the board", mover, row, col)
                return self._result(
                    MoveOutcome.INVALID_POSITION, row, col,
                    f"Cell ({row}, {col}) is outside the board, try again",
                )
            logger.warning("Invalid move by %s: (%d, %d) is occupied", mover, row, col)
            return self._result(
                MoveOutcome.CELL_OCCUPIED, row, col,
                f"Cell ({row}, {col}) is already occupied, try again",
            )

        self._moves.append(Move(player=mover, row=row, col=col, number=len(self._moves)))
        logger.debug("%s placed %s at (%d, %d)", mover.name, mover.symbol, row, col)
        return self._evaluate(mover, row, col)

    def play_moves(self, moves: Iterable[Tuple[int, int]]) -> List[MoveResult]:
        """Replay a sequence of (row, col) moves; returns one result per move."""
        return [self.play_move(row, col) for row, col in moves]

    def _evaluate(self, mover: Player, row: int, col: int) -> MoveResult:
        if self._board.has_winning_line(mover.symbol):
            self._status = GameStatus.ENDED
            self._winner = mover
            logger.info("%s wins after %d moves", mover, len(self._moves))
            return self._result(MoveOutcome.WIN, row, col, f"{mover.name} wins")
        if self._board.is_full():
            self._status = GameStatus.ENDED
            self._is_draw = True
            logger.info("Board full with no winner: draw")
            return self._result(MoveOutcome.DRAW, row, col, "Draw")
        self._switch_turn()
        return MoveResult(MoveOutcome.ACCEPTED, mover, row, col, f"{self._current.name} to move")

    def _switch_turn(self) -> None:
        self._current = self._player2 if self._current is self._player1 else self._player1

    def _result(self, outcome: MoveOutcome, row: int, col: int, message: str) -> MoveResult:
        return MoveResult(outcome, self._current, row, col, message)
