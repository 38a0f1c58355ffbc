"""
Configuration of a 2048 game.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from math import isclose
from types import MappingProxyType

from game2048.core.errors import ConfigError


def is_power_of_two(value: int) -> bool:
    """Return True if value is a positive power of two."""
    return value > 0 and value & (value - 1) == 0


@dataclass(frozen=True)
class GameConfig:
    """
    Rules of a 2048 game.

    Attributes
    ----------
    size : int
        Dimension of the square board.
    winning_value : int
        Tile value that wins the game.
    spawn_probs : Mapping[int, float]
        Value of a spawned tile mapped to its probability. Stored as a read-only copy.
    start_tiles : int
        Number of tiles placed on the board at game start.
    """

    size: int = 4
    winning_value: int = 2048
    spawn_probs: Mapping[int, float] = field(default_factory=lambda: {2: 0.9, 4: 0.1})
    start_tiles: int = 2

    def __post_init__(self):
        object.__setattr__(self, 'spawn_probs', MappingProxyType(dict(self.spawn_probs)))
        if self.size < 2:
            raise ConfigError(f'size must be >= 2, got {self.size}')
        if self.winning_value < 4 or not is_power_of_two(self.winning_value):
            raise ConfigError(f'winning_value must be a power of two >= 4, got {self.winning_value}')
        if not self.spawn_probs:
            raise ConfigError('spawn_probs must not be empty')
        for value, prob in self.spawn_probs.items():
            if value < 2 or not is_power_of_two(value):
                raise ConfigError(f'spawn value must be a power of two >= 2, got {value}')
            if not 0.0 <= prob <= 1.0:
                raise ConfigError(f'spawn probability must be in [0, 1], got {prob} for {value}')
        if not isclose(sum(self.spawn_probs.values()), 1.0):
            raise ConfigError(f'spawn probabilities must sum to 1, got {sum(self.spawn_probs.values())}')
        if not 1 <= self.start_tiles <= self.size**2:
            raise ConfigError(f'start_tiles must be in [1, {self.size**2}], got {self.start_tiles}')

    def __hash__(self) -> int:
        return hash((self.size, self.winning_value, frozenset(self.spawn_probs.items()), self.start_tiles))


def default_2048_config() -> GameConfig:
    """
    Create the configuration of the reference game.

    Returns
    -------
    GameConfig
        4x4 board, 2048 to win, 90% twos and 10% fours, two starting tiles.
    """
    return GameConfig()
