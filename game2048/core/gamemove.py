"""
Move analysis for the 2048 game: which directions change a board, computed from adjacent
cell comparisons instead of simulated moves.
"""

from numpy import ndarray

from game2048.core.types import Direction


def can_move(board: ndarray, direction: int = Direction.LEFT) -> bool:
    """
    Check if a move in the given direction changes the board.

    Parameters
    ----------
    board : ndarray
        The game board to check.
    direction : int, optional
        Direction to check (0: left, 1: up, 2: right, 3: down), by default left.

    Returns
    -------
    bool
        True if the move is possible, False otherwise.

    Notes
    -----
    A move is possible if a tile has an empty cell on its side of travel, or if two
    adjacent tiles along the direction of travel hold the same value.
    """
    if direction in (Direction.LEFT, Direction.RIGHT):
        lead, trail = board[:, :-1], board[:, 1:]
    else:
        lead, trail = board[:-1, :], board[1:, :]

    # ##>: For right and down the tile travels from the lead cell into the trail cell.
    if direction in (Direction.RIGHT, Direction.DOWN):
        lead, trail = trail, lead

    can_slide = (lead == 0) & (trail != 0)
    if can_slide.any():
        return True

    can_merge = (lead != 0) & (lead == trail)
    return bool(can_merge.any())


def legal_directions_mask(board: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask of legal moves for all four directions in a single pass.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.

    Notes
    -----
    Adjacent equal pairs are computed once per axis: a pair that merges leftward also
    merges rightward, and likewise for up and down.
    """
    # ##>: Horizontal neighbours, shared by left and right.
    west, east = board[:, :-1], board[:, 1:]
    h_can_merge = (west != 0) & (west == east)

    # ##>: Vertical neighbours, shared by up and down.
    north, south = board[:-1, :], board[1:, :]
    v_can_merge = (north != 0) & (north == south)

    left = (west == 0) & (east != 0)
    right = (east == 0) & (west != 0)
    up = (north == 0) & (south != 0)
    down = (south == 0) & (north != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_directions(board: ndarray) -> list[Direction]:
    """
    List the directions that change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        Legal directions, in code order (left, up, right, down).
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if mask[direction]]


def illegal_directions(board: ndarray) -> list[Direction]:
    """
    List the directions that leave the board unchanged.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        Illegal directions, in code order (left, up, right, down).
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if not mask[direction]]
