"""
Board engine for the 2048 game: merging, sliding, moving, tile spawning and end-of-game checks.
"""

import logging
from collections.abc import Iterator, Sequence
from typing import NamedTuple

from numpy import all as np_all
from numpy import any as np_any
from numpy import array, array_equal, ascontiguousarray, int64, ndarray, nonzero, rot90, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from board2048.core.gamemove import parse_direction

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

_TILE_VALUES = tuple(TILE_SPAWN_PROBS)
_TILE_PROBS = tuple(TILE_SPAWN_PROBS.values())

# ##>: Shared generator used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())

_logger = logging.getLogger(__name__)


class MoveOutcome(NamedTuple):
    """
    Result of a single move.

    Attributes
    ----------
    board : ndarray
        The board after sliding and merging (no new tile spawned).
    score : int
        Sum of the values produced by merges during the move.
    changed : bool
        Whether any cell differs from the board before the move.
    """

    board: ndarray
    score: int
    changed: bool


class EmptyCells:
    """
    Lazy view of the empty cells of a board.

    Iterating yields ``(row, col)`` coordinates and re-reads the board every time, so the
    view can be iterated again after the board changes.
    """

    def __init__(self, board: ndarray):
        self._board = board

    def __iter__(self) -> Iterator[tuple[int, int]]:
        rows, cols = nonzero(self._board == 0)
        for row, col in zip(rows, cols):
            yield int(row), int(col)

    def __len__(self) -> int:
        return int((self._board == 0).sum())

    def __bool__(self) -> bool:
        return not np_all(self._board != 0)

    def __repr__(self) -> str:
        return f'EmptyCells({list(self)})'


def empty_cells(board: ndarray) -> EmptyCells:
    """Return a restartable view over the coordinates of empty cells."""
    return EmptyCells(board)


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Collapse one line toward its first cell.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row or column, read from the edge the tiles move toward.

    Returns
    -------
    score : int
        Sum of the tiles created by merges.
    merged_line : ndarray
        The tiles left after merging, in order and without empty cells.

    Notes
    -----
    A tile created by a merge is final for this line, so ``[2, 2, 2, 2]`` gives ``[4, 4]`` and
    ``[4, 4, 8]`` gives ``[8, 8]``.
    """
    result = []
    score = 0
    pending = None

    for value in line[line != 0]:
        if pending is not None and value == pending:
            result.append(2 * int(value))
            score += result[-1]
            pending = None
            continue
        if pending is not None:
            result.append(int(pending))
        pending = value

    if pending is not None:
        result.append(int(pending))

    return score, array(result, dtype=line.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Move every row of ``board`` to the left.

    Returns
    -------
    score : int
        Score of the move, summed over all rows.
    updated_board : ndarray
        A new board of the same shape and dtype; the input is not written to.
    """
    result = zeros_like(board)
    score = 0

    for row_index, row in enumerate(board):
        row_score, tiles = merge_line(row)
        result[row_index, : len(tiles)] = tiles
        score += row_score

    return score, result


def move(board: ndarray, direction: object) -> MoveOutcome:
    """
    Slide and merge the whole board toward one edge.

    Parameters
    ----------
    board : ndarray
        The current board. It is not modified.
    direction : object
        Anything accepted by ``parse_direction``.

    Returns
    -------
    MoveOutcome
        The resulting board, the score delta and whether the board changed.

    Notes
    -----
    - The board is rotated so that the target edge is on the left, slid, then rotated back.
    - ``changed`` compares the full result with the input board.
    - An unknown direction yields an unchanged copy of the board with ``changed=False``.
    """
    parsed = parse_direction(direction)
    if parsed is None:
        _logger.debug('Ignoring unknown direction %r', direction)
        return MoveOutcome(board.copy(), 0, False)

    score, updated = slide_and_merge(rot90(board, k=parsed.value))
    new_board = ascontiguousarray(rot90(updated, k=-parsed.value))
    return MoveOutcome(new_board, score, not array_equal(new_board, board))


def spawn_random_tile(
    board: ndarray,
    rng: Generator | None = None,
    values: Sequence[int] = _TILE_VALUES,
    probs: Sequence[float] = _TILE_PROBS,
) -> bool:
    """
    Place one new tile on a random empty cell.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**
    rng : Generator, optional
        Random source; the module-level generator is used when omitted.
    values : Sequence[int], optional
        Candidate tile values (default ``(2, 4)``).
    probs : Sequence[float], optional
        Probability of each value (default ``(0.9, 0.1)``).

    Returns
    -------
    bool
        True if a tile was placed, False if the board was full.
    """
    rng = rng if rng is not None else _GENERATOR

    cells = list(empty_cells(board))
    if not cells:
        return False

    cell = cells[int(rng.integers(len(cells)))]
    board[cell] = int(rng.choice(values, p=probs))
    return True


def fill_cells(board: ndarray, number_tile: int, rng: Generator | None = None, **spawn_kwargs) -> int:
    """
    Spawn up to ``number_tile`` tiles, stopping early when the board fills up.

    Returns
    -------
    int
        The number of tiles actually placed.
    """
    placed = 0
    for _ in range(number_tile):
        if not spawn_random_tile(board, rng=rng, **spawn_kwargs):
            break
        placed += 1
    return placed


def new_board(size: int, rng: Generator | None = None, number_tile: int = 2, **spawn_kwargs) -> ndarray:
    """
    Create an empty ``size`` x ``size`` board and add the starting tiles.

    Parameters
    ----------
    size : int
        Side length of the square grid.
    rng : Generator, optional
        Random source for the starting tiles.
    number_tile : int, optional
        Number of starting tiles (default is 2).

    Returns
    -------
    ndarray
        The new board.
    """
    board = zeros((size, size), dtype=int64)
    fill_cells(board, number_tile, rng=rng, **spawn_kwargs)
    return board


def is_game_over(state: ndarray) -> bool:
    """Check if ``state`` is full and no two neighbouring tiles, in a row or a column, are equal."""
    if not np_all(state):
        return False
    same_in_row = state[:, 1:] == state[:, :-1]
    same_in_column = state[1:, :] == state[:-1, :]
    return not (np_any(same_in_row) or np_any(same_in_column))


def has_won(state: ndarray, target: int = 2048) -> bool:
    """Check if any tile has reached ``target``."""
    return bool(np_any(state == target))
