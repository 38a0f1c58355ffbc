"""
Exceptions raised by the 2048 engine.
"""


class GameError(Exception):
    """Base class for every error raised by the engine."""


class ConfigError(GameError, ValueError):
    """Raised when a game configuration is not playable."""


class InvalidDirection(GameError, ValueError):
    """
    Raised when a move is requested in a direction the engine does not know.

    Parameters
    ----------
    direction : object
        The rejected value.
    """

    def __init__(self, direction: object):
        super().__init__(f'Invalid direction: {direction!r}')
        self.direction = direction


class MoveOnTerminalState(GameError):
    """
    Raised when a move is requested on a game that is already won or lost.

    Parameters
    ----------
    status : Status
        The terminal status of the game.
    """

    def __init__(self, status):
        super().__init__(f'Game is over ({status.value}); reset to play again')
        self.status = status
