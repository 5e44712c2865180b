"""
Move directions for the 2048 board, with helpers for determining legal and illegal moves.
"""

from enum import IntEnum
from numbers import Integral

from numpy import any as np_any
from numpy import ndarray


class Direction(IntEnum):
    """
    The four cardinal moves.

    The value of each member is the number of counter-clockwise quarter turns that bring
    the move's target edge to the left side of the board.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


def parse_direction(value: object) -> Direction | None:
    """
    Convert raw input into a direction.

    Parameters
    ----------
    value : object
        A ``Direction``, an integer in ``range(4)`` or a direction name (case-insensitive).

    Returns
    -------
    Direction or None
        The matching direction, or None if the input does not name one.
    """
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        return Direction.__members__.get(value.strip().upper())
    if isinstance(value, Integral) and not isinstance(value, bool) and 0 <= value < len(Direction):
        return Direction(int(value))
    return None


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Tell, for each direction, whether moving that way would change ``state``.

    A direction is legal when some tile has an empty cell on its target side, or when two equal
    tiles touch along that axis.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        One flag per ``Direction``, indexed by its value.
    """
    # ##>: Pairs of neighbours: (west, east) along rows, (north, south) along columns.
    west, east = state[:, :-1], state[:, 1:]
    north, south = state[:-1, :], state[1:, :]

    row_pair = np_any((west != 0) & (west == east))
    column_pair = np_any((north != 0) & (north == south))

    mask = [False] * len(Direction)
    mask[Direction.LEFT] = bool(row_pair or np_any((west == 0) & (east != 0)))
    mask[Direction.RIGHT] = bool(row_pair or np_any((east == 0) & (west != 0)))
    mask[Direction.UP] = bool(column_pair or np_any((north == 0) & (south != 0)))
    mask[Direction.DOWN] = bool(column_pair or np_any((south == 0) & (north != 0)))
    return tuple(mask)


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Directions that would change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Legal directions, in ``Direction`` order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if mask[direction]]


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Directions that would leave the board untouched.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Illegal directions, in ``Direction`` order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if not mask[direction]]
