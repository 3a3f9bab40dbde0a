from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Tuple

import numpy as np

from .board import Board
from .config import default_board_size, default_log_level
from .errors import BoardConfigurationError
from .game import Game
from .player import Player
from .symbols import Symbol


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe engine CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    p_play = sub.add_parser("play", help="Replay a sequence of moves through a new game")
    p_play.add_argument(
        "--size", type=int, default=None, help="Board size (default: $TTT_BOARD_SIZE or 3)"
    )
    p_play.add_argument(
        "--moves",
        required=True,
        help='Space-separated row,col pairs, e.g. "0,0 1,1 0,1"; '
        'use --moves=-1,0 when the first pair is negative',
    )
    p_play.add_argument("--player1", default="Player 1", help="Name of X (moves first)")
    p_play.add_argument("--player2", default="Player 2", help="Name of O")

    p_chk = sub.add_parser("check", help="Report lines and fullness of a board string")
    p_chk.add_argument("--board", required=True, help="Row-major digits, e.g. 111020200 (0=empty,1=X,2=O)")

    return p


def parse_moves(raw: str) -> List[Tuple[int, int]]:
    moves: List[Tuple[int, int]] = []
    for token in raw.split():
        parts = token.split(",")
        if len(parts) != 2:
            raise ValueError(f"Move must look like row,col: {token!r}")
        moves.append((int(parts[0]), int(parts[1])))
    return moves


def _print_info() -> None:
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    print(f"numpy={np.__version__}")


def _run_play(ns: argparse.Namespace) -> int:
    try:
        moves = parse_moves(ns.moves)
    except ValueError as exc:
        logging.error("Invalid moves: %s", exc)
        return 2
    try:
        board = Board(ns.size if ns.size is not None else default_board_size())
    except BoardConfigurationError as exc:
        logging.error("%s", exc)
        return 2

    game = Game(board, Player("1", ns.player1, Symbol.X), Player("2", ns.player2, Symbol.O))
    game.start_game()
    for row, col in moves:
        res = game.play_move(row, col)
        logging.info("move=(%d,%d) outcome=%s message=%s", row, col, res.outcome.value, res.message)

    for line in board.render().splitlines():
        logging.info("%s", line)
    if game.winner is not None:
        logging.info("result=winner winner=%s", game.winner.name)
    elif game.is_draw:
        logging.info("result=draw")
    else:
        logging.info("result=in_progress to_move=%s", game.current_player.name)
    return 0


def _run_check(ns: argparse.Namespace) -> int:
    try:
        board = Board.from_string(ns.board)
    except BoardConfigurationError as exc:
        logging.error("Invalid board string: %s", exc)
        return 2
    logging.info(
        "size=%d x_wins=%s o_wins=%s full=%s",
        board.size,
        board.has_winning_line(Symbol.X),
        board.has_winning_line(Symbol.O),
        board.is_full(),
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else default_log_level(),
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        from importlib.metadata import PackageNotFoundError, version as _ver

        try:
            print(_ver("tictactoe-engine"))
        except PackageNotFoundError:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "play":
        return _run_play(ns)
    if ns.cmd == "check":
        return _run_check(ns)

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
