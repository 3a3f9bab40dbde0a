"""Environment-driven defaults.

Environment first, then a built-in fallback, so the engine behaves the same
whether installed as a package or run from a checkout.
"""

from __future__ import annotations

import logging
import os

from .errors import BoardConfigurationError

DEFAULT_BOARD_SIZE = 3
DEFAULT_LOG_LEVEL = "INFO"


def default_board_size() -> int:
    """Board size used when none is given.

    Order: env var TTT_BOARD_SIZE -> 3.
    """
    raw = os.getenv("TTT_BOARD_SIZE")
    if raw is None or not raw.strip():
        return DEFAULT_BOARD_SIZE
    try:
        size = int(raw)
    except ValueError:
        raise BoardConfigurationError(f"TTT_BOARD_SIZE must be an integer, got {raw!r}") from None
    if size < 1:
        raise BoardConfigurationError(f"TTT_BOARD_SIZE must be >= 1, got {size}")
    return size


def default_log_level() -> int:
    name = (os.getenv("TTT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.INFO
