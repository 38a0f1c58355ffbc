# -*- coding: utf-8 -*-
"""
Core of the 2048 game: board manipulation, move analysis, configuration and the pure
state-transition engine.
"""

from .config import GameConfig, default_2048_config
from .engine import apply_move, make_rng, new_game, reset
from .errors import ConfigError, GameError, InvalidDirection, MoveOnTerminalState
from .gameboard import after_state, fill_cells, is_done, latent_state, merge_line, next_state, slide_and_merge
from .gamemove import illegal_directions, legal_directions, legal_directions_mask
from .state import GameState, MoveResult, evaluate_status
from .types import Direction, Status

__all__ = [
    "GameConfig",
    "default_2048_config",
    "apply_move",
    "evaluate_status",
    "make_rng",
    "new_game",
    "reset",
    "ConfigError",
    "GameError",
    "InvalidDirection",
    "MoveOnTerminalState",
    "after_state",
    "fill_cells",
    "is_done",
    "latent_state",
    "merge_line",
    "next_state",
    "slide_and_merge",
    "illegal_directions",
    "legal_directions",
    "legal_directions_mask",
    "GameState",
    "MoveResult",
    "Direction",
    "Status",
]
