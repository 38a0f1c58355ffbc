"""
State transitions of the 2048 game.

The engine is a set of pure functions: each takes a GameState and returns a new one. The random
source used for spawning is always passed in by the caller.
"""

import logging
from dataclasses import replace

from numpy.random import Generator, default_rng

from game2048.core.config import GameConfig
from game2048.core.errors import MoveOnTerminalState
from game2048.core.gameboard import empty_board, fill_cells, next_state
from game2048.core.state import GameState, MoveResult, evaluate_status
from game2048.core.types import Direction

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Accepted random sources: a generator, a seed or None for fresh entropy.
RandomSource = Generator | int | None


def make_rng(rng: RandomSource = None) -> Generator:
    """
    Turn a random source into a numpy Generator.

    Parameters
    ----------
    rng : Generator, int or None
        An existing generator (returned as is), a seed, or None for an unseeded generator.

    Returns
    -------
    Generator
        Generator owned by the caller.
    """
    if isinstance(rng, Generator):
        return rng
    return default_rng(rng)


def new_game(config: GameConfig | None = None, rng: RandomSource = None) -> GameState:
    """
    Start a game.

    Parameters
    ----------
    config : GameConfig, optional
        Rules of the game, by default the reference 4x4 game.
    rng : Generator, int or None
        Random source for the starting tiles.

    Returns
    -------
    GameState
        In-progress state with ``config.start_tiles`` tiles on random cells.
    """
    config = config or GameConfig()
    board, cells = fill_cells(
        empty_board(config.size), number_tile=config.start_tiles, rng=make_rng(rng), spawn_probs=config.spawn_probs
    )
    _logger.info('New %dx%d game with tiles at %s', config.size, config.size, cells)
    return GameState(board=board, config=config, status=evaluate_status(board, config))


def reset(state: GameState, rng: RandomSource = None) -> GameState:
    """
    Start a new game with the rules of an existing one, whatever its status.

    Parameters
    ----------
    state : GameState
        The game to replace.
    rng : Generator, int or None
        Random source for the starting tiles.

    Returns
    -------
    GameState
        Fresh in-progress state.
    """
    return new_game(config=state.config, rng=rng)


def apply_move(state: GameState, direction, rng: RandomSource = None) -> MoveResult:
    """
    Apply a move to a game.

    Parameters
    ----------
    state : GameState
        The current game. Must be in progress.
    direction : Direction, str or int
        Direction of the move; see ``Direction.parse``.
    rng : Generator, int or None
        Random source for the spawned tile.

    Returns
    -------
    MoveResult
        The new state, whether anything moved, and the score gained.

    Raises
    ------
    InvalidDirection
        If the direction isn't one of the four directions.
    MoveOnTerminalState
        If the game is already won or lost.

    Notes
    -----
    - A move that changes nothing spawns no tile and reports ``moved=False``; the state is returned
      as is, with its status re-evaluated from the board.
    - After a legal move exactly one tile spawns, then the status is evaluated.
    """
    direction = Direction.parse(direction)
    if state.is_terminal:
        raise MoveOnTerminalState(state.status)

    board, score_delta, spawned = next_state(
        state.board, direction, rng=make_rng(rng), spawn_probs=state.config.spawn_probs
    )
    if spawned is None:
        _logger.debug('Move %s changed nothing', direction.name)
        status = evaluate_status(state.board, state.config)
        if status is not state.status:
            _logger.info('Game %s with score %d and max tile %d', status.value, state.score, state.max_tile)
            state = replace(state, status=status)
        return MoveResult(new_state=state, moved=False, score_delta=0)

    status = evaluate_status(board, state.config)
    new_state = GameState(board=board, score=state.score + score_delta, status=status, config=state.config)
    _logger.debug('Move %s: +%d points, tile %d spawned at %s', direction.name, score_delta, board[spawned], spawned)
    if status.is_terminal:
        _logger.info('Game %s with score %d and max tile %d', status.value, new_state.score, new_state.max_tile)

    return MoveResult(new_state=new_state, moved=True, score_delta=score_delta, spawned=spawned)
