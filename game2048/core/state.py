"""
Immutable game state and move result of the 2048 game.
"""

from dataclasses import dataclass, field
from typing import NamedTuple

from numpy import array, int64, ndarray

from game2048.core.config import GameConfig
from game2048.core.gameboard import empty_board, has_won, is_done, max_tile, validate_board
from game2048.core.types import Status


def evaluate_status(board: ndarray, config: GameConfig) -> Status:
    """
    Compute the status of a board.

    Parameters
    ----------
    board : ndarray
        The game board.
    config : GameConfig
        Rules of the game.

    Returns
    -------
    Status
        WON if a tile reached the winning value, LOST if no move changes the board,
        IN_PROGRESS otherwise.
    """
    if has_won(board, config.winning_value):
        return Status.WON
    if is_done(board):
        return Status.LOST
    return Status.IN_PROGRESS


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Snapshot of a game.

    Attributes
    ----------
    board : ndarray
        Square ``int64`` grid, 0 for an empty cell. Stored as a read-only copy.
    score : int
        Sum of every tile created by a merge since the game started.
    status : Status
        Whether the game is in progress, won or lost.
    config : GameConfig
        Rules the game is played with.
    """

    board: ndarray
    score: int = 0
    status: Status = Status.IN_PROGRESS
    config: GameConfig = field(default_factory=GameConfig)

    def __post_init__(self):
        board = array(validate_board(self.board), dtype=int64)
        if board.shape[0] != self.config.size:
            raise ValueError(f'board size {board.shape[0]} does not match config size {self.config.size}')
        if self.score < 0:
            raise ValueError(f'score must be non-negative, got {self.score}')
        board.setflags(write=False)
        object.__setattr__(self, 'board', board)
        object.__setattr__(self, 'status', Status(self.status))

    @classmethod
    def empty(cls, config: GameConfig | None = None) -> 'GameState':
        """Build an in-progress state with no tile on the board."""
        config = config or GameConfig()
        return cls(board=empty_board(config.size), config=config)

    @classmethod
    def from_board(cls, board: ndarray, score: int = 0, config: GameConfig | None = None) -> 'GameState':
        """
        Build a state from a board, with the status the board is in.

        Parameters
        ----------
        board : ndarray
            Square grid of tiles, 0 for an empty cell.
        score : int, optional
            Score reached so far (default is 0).
        config : GameConfig, optional
            Rules of the game, by default the reference 4x4 game.

        Returns
        -------
        GameState
            WON, LOST or IN_PROGRESS state holding a copy of the board.

        Raises
        ------
        ValueError
            If the board isn't a playable board for the config.
        """
        config = config or GameConfig()
        board = validate_board(board)
        return cls(board=board, score=score, status=evaluate_status(board, config), config=config)

    @property
    def size(self) -> int:
        """Dimension of the board."""
        return self.board.shape[0]

    @property
    def max_tile(self) -> int:
        """Largest tile on the board."""
        return max_tile(self.board)

    @property
    def is_terminal(self) -> bool:
        """True once the game is won or lost."""
        return self.status.is_terminal

    def __repr__(self) -> str:
        return f'GameState(board={self.board.tolist()}, score={self.score}, status={self.status.value})'


class MoveResult(NamedTuple):
    """
    Outcome of a move.

    Attributes
    ----------
    new_state : GameState
        State after the move; the very same state when nothing moved.
    moved : bool
        Whether at least one tile slid or merged.
    score_delta : int
        Sum of the tiles created by merges during the move.
    spawned : tuple[int, int] or None
        Position of the tile spawned after the move, None if nothing moved.
    """

    new_state: GameState
    moved: bool
    score_delta: int
    spawned: tuple[int, int] | None = None
