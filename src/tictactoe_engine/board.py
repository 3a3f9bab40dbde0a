"""
Board: grid state, cell validity, occupancy, and win/draw detection.
Teaching notes:
- The grid is an N x N numpy array of Symbol values (0=empty, 1=X, 2=O).
- place_symbol is the only way to change a cell, and it never overwrites.
- A line is a full row, a full column, the main diagonal or the anti-diagonal.
"""
from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

import numpy as np

from .config import default_board_size
from .errors import BoardConfigurationError
from .symbols import PLAYER_SYMBOLS, Symbol

Cell = Tuple[int, int]


def line_patterns(size: int) -> Dict[str, List[List[Cell]]]:
    """All winning lines of a size x size board, grouped by kind."""
    rows = [[(r, c) for c in range(size)] for r in range(size)]
    cols = [[(r, c) for r in range(size)] for c in range(size)]
    diag = [[(i, i) for i in range(size)], [(i, size - 1 - i) for i in range(size)]]
    return {'row': rows, 'col': cols, 'diag': diag}


class Board:
    def __init__(self, size: Optional[int] = None) -> None:
        if size is None:
            size = default_board_size()
        if isinstance(size, bool) or not isinstance(size, int):
            raise BoardConfigurationError(f"Board size must be an integer, got {size!r}")
        if size < 1:
            raise BoardConfigurationError(f"Board size must be >= 1, got {size}")
        self._size = size
        self._grid = np.full((size, size), int(Symbol.EMPTY), dtype=np.int8)

    @classmethod
    def from_string(cls, raw: str) -> "Board":
        """Rebuild a board from row-major digits, e.g. ``100020000``."""
        raw = raw.strip()
        n = math.isqrt(len(raw))
        if n == 0 or n * n != len(raw):
            raise BoardConfigurationError(
                f"Board string length must be a non-zero perfect square, got {len(raw)}"
            )
        if any(ch not in "012" for ch in raw):
            raise BoardConfigurationError("Board string must contain only 0/1/2.")
        board = cls(n)
        for i, ch in enumerate(raw):
            symbol = Symbol(int(ch))
            if symbol is not Symbol.EMPTY:
                board.place_symbol(i // n, i % n, symbol)
        return board

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size * self._size

    def __repr__(self) -> str:
        return f"Board(size={self._size}, cells={self.serialize()!r})"

    def is_valid_cell(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def is_cell_empty(self, row: int, col: int) -> bool:
        if not self.is_valid_cell(row, col):
            return False
        return bool(self._grid[row, col] == int(Symbol.EMPTY))

    def cell(self, row: int, col: int) -> Symbol:
        # numpy would accept negative indices, so bounds are checked here
        if not self.is_valid_cell(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self._size}x{self._size} board")
        return Symbol(int(self._grid[row, col]))

    def place_symbol(self, row: int, col: int, symbol: Symbol) -> bool:
        """Mark a cell.

        Returns False, leaving the grid untouched, when the cell is outside
        the board or already holds a symbol. Anything other than X or O
        raises ValueError.
        """
        symbol = Symbol(symbol)
        if symbol not in PLAYER_SYMBOLS:
            raise ValueError("Cannot place EMPTY; cells are never cleared")
        if not self.is_valid_cell(row, col):
            return False
        if not self.is_cell_empty(row, col):
            return False
        self._grid[row, col] = int(symbol)
        return True

    @property
    def filled_count(self) -> int:
        return int(np.count_nonzero(self._grid))

    def is_full(self) -> bool:
        return self.filled_count == len(self)

    def empty_cells(self) -> List[Cell]:
        rows, cols = np.nonzero(self._grid == int(Symbol.EMPTY))
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def has_winning_line(self, symbol: Symbol) -> bool:
        if symbol == Symbol.EMPTY:
            return False
        mask = self._grid == int(symbol)
        return bool(
            mask.all(axis=1).any()
            or mask.all(axis=0).any()
            or np.diagonal(mask).all()
            or np.diagonal(np.fliplr(mask)).all()
        )

    def lines(self) -> List[List[Cell]]:
        patterns = line_patterns(self._size)
        return patterns['row'] + patterns['col'] + patterns['diag']

    def winning_line(self, symbol: Symbol) -> Optional[List[Cell]]:
        """First line fully owned by ``symbol`` (rows, columns, diagonals), or None."""
        if symbol == Symbol.EMPTY:
            return None
        for line in self.lines():
            if all(self._grid[r, c] == int(symbol) for r, c in line):
                return line
        return None

    def serialize(self) -> str:
        return ''.join(str(int(v)) for v in self._grid.flat)

    def render(self) -> str:
        return "\n".join(
            " ".join(str(Symbol(int(v))) for v in row) for row in self._grid
        )
