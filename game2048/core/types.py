"""
Directions and statuses of the 2048 game.
"""

from enum import Enum, IntEnum

from numpy import integer

from game2048.core.errors import InvalidDirection


class Direction(IntEnum):
    """
    Direction of a move.

    The integer value is the number of counter-clockwise quarter turns that brings the
    direction to the left, so a single leftward pass serves all four directions.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: object) -> 'Direction':
        """
        Convert a direction given by the caller to a Direction.

        Parameters
        ----------
        value : object
            A Direction, a direction name (case-insensitive) or an integer code
            (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        InvalidDirection
            If the value doesn't name one of the four directions.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidDirection(value)
        if isinstance(value, (int, integer)):
            try:
                return cls(int(value))
            except ValueError:
                raise InvalidDirection(value) from None
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidDirection(value) from None
        raise InvalidDirection(value)


class Status(str, Enum):
    """
    Status of a game.

    IN_PROGRESS: moves are accepted.
    WON: a tile reached the winning value.
    LOST: the board is full and no move changes it.
    """

    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'

    @property
    def is_terminal(self) -> bool:
        """True for WON and LOST."""
        return self is not Status.IN_PROGRESS
