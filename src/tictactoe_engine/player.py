"""Player: identity plus an assigned symbol. No behaviour beyond accessors."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import GameConfigurationError
from .symbols import PLAYER_SYMBOLS, Symbol


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    symbol: Symbol

    def __post_init__(self) -> None:
        if self.symbol not in PLAYER_SYMBOLS:
            raise GameConfigurationError(
                f"Player {self.name!r} must play X or O, got {self.symbol!r}"
            )
        # accept plain ints (1/2) but always store the enum member
        object.__setattr__(self, "symbol", Symbol(self.symbol))

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol})"
