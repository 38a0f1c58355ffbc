"""2048 game owning its state and its random source."""

from numpy import ndarray
from numpy.random import Generator, default_rng

from game2048.core.config import GameConfig
from game2048.core.engine import apply_move, new_game
from game2048.core.gamemove import legal_directions
from game2048.core.state import GameState, MoveResult
from game2048.core.types import Direction, Status
from game2048.utils.render import render_board


class Game2048:
    """
    2048 game.

    This class keeps the current GameState between moves so a caller can play without threading the
    state through every call. It is the single writer of its state: moves must not be issued
    concurrently.
    """

    # ##: All directions, by name.
    ACTIONS = {direction.name.lower(): direction for direction in Direction}

    def __init__(self, config: GameConfig | None = None, seed: int | None = None):
        """
        Initialize the game and place the starting tiles.

        Parameters
        ----------
        config : GameConfig, optional
            Rules of the game (default is the reference 4x4 game).
        seed : int, optional
            Seed of the random source, for reproducible games.
        """
        self.config = config or GameConfig()
        self._rng: Generator = default_rng(seed)
        self._state: GameState = new_game(self.config, rng=self._rng)
        self._last_result: MoveResult | None = None

    @property
    def size(self) -> int:
        """Dimension of the board."""
        return self.config.size

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self._state

    @property
    def board(self) -> ndarray:
        """Copy of the current board."""
        return self._state.board.copy()

    @property
    def score(self) -> int:
        """Current score."""
        return self._state.score

    @property
    def status(self) -> Status:
        """Current status."""
        return self._state.status

    @property
    def is_finished(self) -> bool:
        """True once the game is won or lost."""
        return self._state.is_terminal

    @property
    def last_result(self) -> MoveResult | None:
        """Result of the last move, None since the last reset."""
        return self._last_result

    @property
    def legal_moves(self) -> list[Direction]:
        """Directions that would change the board, empty once the game is over."""
        if self.is_finished:
            return []
        return legal_directions(self._state.board)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game, whatever the status of the current one.

        Parameters
        ----------
        seed : int, optional
            New seed for the random source. Without one the current source keeps going.

        Returns
        -------
        ndarray
            The new game board.
        """
        if seed is not None:
            self._rng = default_rng(seed)
        self._state = new_game(self.config, rng=self._rng)
        self._last_result = None
        return self.board

    def move(self, direction) -> MoveResult:
        """
        Apply a move to the current game.

        Parameters
        ----------
        direction : Direction, str or int
            Direction of the move (0: left, 1: up, 2: right, 3: down).

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
        """
        result = apply_move(self._state, direction, rng=self._rng)
        self._state = result.new_state
        self._last_result = result
        return result

    def render(self) -> None:
        """
        Render the game board. This method prints the current board and score to the console.
        """
        print(render_board(self._state.board))
        print(f'score: {self.score}  status: {self.status.value}')
