"""
Configuration for a 2048 game session.
"""

from dataclasses import dataclass
from math import isclose
from numbers import Integral


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _is_tile(value: object) -> bool:
    """Check if ``value`` is a power of two that a tile can hold (2, 4, 8, ...)."""
    return _is_integer(value) and value >= 2 and not int(value) & (int(value) - 1)


@dataclass
class GameConfig:
    """
    Rules and limits for a game session.

    Raises
    ------
    ValueError
        If the size range is empty, the default size falls outside it, the spawn distribution is
        malformed or the target is not a power of two.
    """

    # ##>: Board geometry.
    size: int = 4  # Default side length
    min_size: int = 3  # Smallest accepted side length
    max_size: int = 5  # Largest accepted side length

    # ##>: Rules.
    target: int = 2048  # Tile value that wins the game
    start_tiles: int = 2  # Tiles spawned by a new game

    # ##>: Spawn distribution.
    tile_values: tuple[int, ...] = (2, 4)
    tile_probs: tuple[float, ...] = (0.9, 0.1)

    def __post_init__(self):
        if self.min_size < 2 or self.min_size > self.max_size:
            raise ValueError(f'Invalid size range [{self.min_size}, {self.max_size}]')
        if not self.accepts_size(self.size):
            raise ValueError(f'Default size {self.size} outside [{self.min_size}, {self.max_size}]')
        if not _is_tile(self.target):
            raise ValueError(f'target must be a power of two, got {self.target}')
        if self.start_tiles < 0:
            raise ValueError(f'start_tiles must be >= 0, got {self.start_tiles}')
        if len(self.tile_values) != len(self.tile_probs) or not self.tile_values:
            raise ValueError('tile_values and tile_probs must be non-empty and of equal length')
        if not all(_is_tile(value) for value in self.tile_values):
            raise ValueError(f'tile_values must be powers of two, got {self.tile_values}')
        if any(prob < 0 for prob in self.tile_probs):
            raise ValueError(f'tile_probs must be non-negative, got {self.tile_probs}')
        if not isclose(sum(self.tile_probs), 1.0):
            raise ValueError(f'tile_probs must sum to 1, got {sum(self.tile_probs)}')

    def accepts_size(self, size: object) -> bool:
        """Check if ``size`` is a valid board side length."""
        return _is_integer(size) and self.min_size <= size <= self.max_size
