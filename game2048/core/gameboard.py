"""
Core functionality of the 2048 game: line merging, board sliding, tile spawning and terminal
predicates.

Boards are square ``int64`` arrays where 0 marks an empty cell. Every direction is handled by
rotating the board so that the move becomes a leftward slide, sliding, then rotating back.
"""

from collections.abc import Mapping

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, array_equal, asarray, int64, isfinite, ndarray, rot90, zeros, zeros_like
from numpy.random import Generator

from game2048.core.gamemove import can_move

# ##>: Tile spawn probabilities of the reference game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def empty_board(size: int) -> ndarray:
    """Return a size x size board with no tile."""
    return zeros((size, size), dtype=int64)


def validate_board(board: ndarray) -> ndarray:
    """
    Check that an array is a playable board.

    Parameters
    ----------
    board : ndarray
        Candidate board.

    Returns
    -------
    ndarray
        The board as an ``int64`` array.

    Raises
    ------
    ValueError
        If the board isn't a square grid of integers, or holds a value that is neither 0 nor a power
        of two >= 2.
    """
    raw = asarray(board)
    if raw.dtype.kind not in 'iuf':
        raise ValueError(f'board must hold numbers, got dtype {raw.dtype}')
    if raw.dtype.kind == 'f' and not (np_all(isfinite(raw)) and array_equal(raw, raw.astype(int64))):
        raise ValueError('board must hold whole numbers')

    board = raw.astype(int64)
    if board.ndim != 2 or board.shape[0] != board.shape[1] or board.shape[0] < 2:
        raise ValueError(f'board must be a square grid of size >= 2, got shape {board.shape}')

    tiles = board[board != 0]
    if np_any(tiles < 2) or np_any(tiles & (tiles - 1)):
        raise ValueError(f'tile values must be powers of two >= 2, got {sorted(set(tiles.tolist()))}')
    return board


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Merge adjacent equal values in a line and compute the total score.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row or column, ordered from the edge tiles move toward.

    Returns
    -------
    score : int
        The total score obtained from merging.
    merged_line : ndarray
        The tiles of the line after merging, without empty cells.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the line towards the end.
    - A tile produced by a merge never merges again: [2, 2, 2] gives [4, 2].
    """
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result.append(merged)
            score += int(merged)
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    # ##: Last tile wasn't consumed by a merge.
    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=line.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.

    Notes
    -----
    - Rows are processed independently and padded with empty cells on the right.
    - For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_line(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def latent_state(board: ndarray, direction: int) -> tuple[ndarray, int]:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current game board.
    direction : int
        The direction to move (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    new_board : ndarray
        The board after sliding and merging.
    score : int
        The score obtained from the merges.
    """
    rotated_board = rot90(board, k=int(direction))
    score, updated_board = slide_and_merge(rotated_board)
    return rot90(updated_board, k=-int(direction)).copy(), score


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """Positions (row, col) of the empty cells, in row-major order."""
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(board == 0)]


def fill_cells(
    board: ndarray,
    number_tile: int,
    rng: Generator,
    spawn_probs: Mapping[int, float] | None = None,
) -> tuple[ndarray, list[tuple[int, int]]]:
    """
    Spawn new tiles on randomly chosen empty cells.

    Parameters
    ----------
    board : ndarray
        The current game board. Not modified.
    number_tile : int
        Number of new tiles to add.
    rng : Generator
        Random source used to pick cells and values.
    spawn_probs : Mapping[int, float], optional
        Tile value mapped to its probability, by default TILE_SPAWN_PROBS.

    Returns
    -------
    new_board : ndarray
        A copy of the board with the new tiles.
    cells : list[tuple[int, int]]
        Positions of the new tiles.

    Notes
    -----
    - Cells are chosen uniformly among the empty ones, without replacement.
    - Each tile value is drawn independently from spawn_probs.
    - If there are fewer empty cells than requested, every empty cell is filled.
    """
    spawn_probs = TILE_SPAWN_PROBS if spawn_probs is None else spawn_probs
    new_board = board.copy()

    available_cells = argwhere(new_board == 0)
    number_tile = min(number_tile, len(available_cells))
    if number_tile <= 0:
        return new_board, []

    # ##: Choose positions, then values.
    chosen_indices = rng.choice(len(available_cells), size=number_tile, replace=False)
    chosen_cells = available_cells[chosen_indices]
    values = rng.choice(list(spawn_probs), size=number_tile, p=list(spawn_probs.values()))

    new_board[tuple(chosen_cells.T)] = values
    return new_board, [(int(cell[0]), int(cell[1])) for cell in chosen_cells]


def after_state(board: ndarray, spawn_probs: Mapping[int, float] | None = None) -> list[tuple[ndarray, float]]:
    """
    Generate every board that can follow a spawn, with its probability.

    Parameters
    ----------
    board : ndarray
        The board after a move, before the spawn.
    spawn_probs : Mapping[int, float], optional
        Tile value mapped to its probability, by default TILE_SPAWN_PROBS.

    Returns
    -------
    list of tuple
        Pairs of (possible next board, probability of that board). Probabilities sum to 1.

    Notes
    -----
    - If there are no empty cells, the board itself is returned with probability 1.
    - Probabilities account for both the empty cell selection and the new tile value.
    """
    spawn_probs = TILE_SPAWN_PROBS if spawn_probs is None else spawn_probs
    cells = empty_cells(board)
    if not cells:
        return [(board, 1.0)]

    outcomes = []
    for cell in cells:
        for value, prob in spawn_probs.items():
            new_board = board.copy()
            new_board[cell] = value
            outcomes.append((new_board, prob / len(cells)))
    return outcomes


def max_tile(board: ndarray) -> int:
    """Largest tile on the board, 0 for an empty board."""
    return int(board.max())


def has_won(board: ndarray, winning_value: int) -> bool:
    """Check if any tile reached the winning value."""
    return max_tile(board) >= winning_value


def is_done(board: ndarray) -> bool:
    """
    Check if no move can change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no orthogonally adjacent cells hold
    the same value.
    """
    return bool(
        np_all(board != 0) and not np_any(board[:-1] == board[1:]) and not np_any(board[:, :-1] == board[:, 1:])
    )


def next_state(
    board: ndarray,
    direction: int,
    rng: Generator,
    spawn_probs: Mapping[int, float] | None = None,
) -> tuple[ndarray, int, tuple[int, int] | None]:
    """
    Compute the board and score after a move, including the new tile.

    Parameters
    ----------
    board : ndarray
        The current game board. Not modified.
    direction : int
        The direction to move (0: left, 1: up, 2: right, 3: down).
    rng : Generator
        Random source for the spawned tile.
    spawn_probs : Mapping[int, float], optional
        Tile value mapped to its probability, by default TILE_SPAWN_PROBS.

    Returns
    -------
    new_board : ndarray
        The board after the move and the spawn; the input board itself if nothing moved.
    score : int
        The score obtained from the merges.
    spawned : tuple[int, int] or None
        Position of the new tile, None if nothing moved.

    Notes
    -----
    If the move doesn't change the board, the score is 0 and no tile is added.
    """
    if not can_move(board, direction):
        return board, 0, None

    updated_board, score = latent_state(board, direction)
    updated_board, cells = fill_cells(updated_board, number_tile=1, rng=rng, spawn_probs=spawn_probs)
    return updated_board, score, cells[0]
