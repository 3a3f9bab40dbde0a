"""
Cell symbols.
Teaching notes:
- Cells use the same integer encoding as the serialized board: 0=empty, 1=X, 2=O.
- IntEnum lets the values live directly inside a numpy grid.
"""
from __future__ import annotations

from enum import IntEnum


class Symbol(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    def opponent(self) -> "Symbol":
        if self is Symbol.X:
            return Symbol.O
        if self is Symbol.O:
            return Symbol.X
        raise ValueError("EMPTY has no opponent")

    @classmethod
    def from_char(cls, ch: str) -> "Symbol":
        if ch == " ":
            return cls.EMPTY
        c = ch.strip().upper()
        if c == "X":
            return cls.X
        if c == "O":
            return cls.O
        if c == ".":
            return cls.EMPTY
        raise ValueError(f"Unknown symbol character: {ch!r}")

    def __str__(self) -> str:
        return _CHARS[self]

    # IntEnum would otherwise format as the bare integer inside f-strings
    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_CHARS = {Symbol.EMPTY: ".", Symbol.X: "X", Symbol.O: "O"}

PLAYER_SYMBOLS = (Symbol.X, Symbol.O)
