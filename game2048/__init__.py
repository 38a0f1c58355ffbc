# -*- coding: utf-8 -*-
"""
2048 board engine.

Exposes the pure engine functions and the stateful `Game2048` wrapper.
"""

from .core import (
    Direction,
    GameConfig,
    GameError,
    GameState,
    InvalidDirection,
    MoveOnTerminalState,
    MoveResult,
    Status,
    apply_move,
    new_game,
    reset,
)
from .envs import Game2048

__all__ = [
    "Direction",
    "GameConfig",
    "GameError",
    "GameState",
    "InvalidDirection",
    "MoveOnTerminalState",
    "MoveResult",
    "Status",
    "apply_move",
    "new_game",
    "reset",
    "Game2048",
]
