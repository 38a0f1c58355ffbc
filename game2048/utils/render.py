"""Plain-text rendering of a 2048 board."""

from numpy import ndarray

EMPTY_CELL = '-'


def render_board(board: ndarray, cell_width: int = 6) -> str:
    """
    Render a board as text, one row per line.

    Parameters
    ----------
    board : ndarray
        The game board.
    cell_width : int, optional
        Width each cell is centred in (default is 6).

    Returns
    -------
    str
        The board, empty cells shown as ``-``.
    """
    width = max(cell_width, len(str(int(board.max()))) + 2)
    return '\n'.join(
        ''.join(f'{value if value else EMPTY_CELL:^{width}}' for value in row) for row in board.tolist()
    )
