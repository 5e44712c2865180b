"""Game session for 2048: owns the board, the score and the best score of one player."""

import logging
from enum import Enum
from math import isfinite
from numbers import Real

from numpy import ndarray
from numpy.random import Generator, default_rng

from board2048.config import GameConfig
from board2048.core.gameboard import (
    EmptyCells,
    MoveOutcome,
    empty_cells,
    has_won,
    is_game_over,
    move,
    new_board,
    spawn_random_tile,
)
from board2048.core.gamemove import Direction, legal_actions, parse_direction
from board2048.storage.best_score import BestScoreStore, NullStore

_logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """Lifecycle of a game session."""

    IDLE = 'idle'
    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'


class GameSession:
    """
    2048 game session.

    This class holds the state of a single game (board, score, status) and applies moves to it.
    The board engine stays pure; the session commits its results, spawns tiles and keeps the
    best score in sync with the injected store.

    Parameters
    ----------
    config : GameConfig, optional
        Rules and limits (default is ``GameConfig()``).
    store : BestScoreStore, optional
        Persistence for the best score (default is a ``NullStore``).
    seed : int, optional
        Seed for the session's random generator.
    rng : Generator, optional
        Random generator to use instead of seeding a new one.
    """

    # ##: All Actions.
    ACTIONS = {direction.name.lower(): direction for direction in Direction}

    def __init__(
        self,
        config: GameConfig | None = None,
        store: BestScoreStore | None = None,
        seed: int | None = None,
        rng: Generator | None = None,
    ):
        self.config = config if config is not None else GameConfig()
        self._store = store if store is not None else NullStore()
        self._rng = rng if rng is not None else default_rng(seed)

        self._board: ndarray | None = None
        self._score = 0
        self._status = GameStatus.IDLE
        self._continued = False

        self._best_score = self._store.load_best_score()

    @property
    def status(self) -> GameStatus:
        """Current lifecycle state."""
        return self._status

    @property
    def score(self) -> int:
        """Score of the current game."""
        return self._score

    @property
    def best_score(self) -> int:
        """Best score known to this session."""
        return self._best_score

    @property
    def size(self) -> int | None:
        """Side length of the current board, or None before the first game."""
        return None if self._board is None else self._board.shape[0]

    @property
    def board(self) -> ndarray | None:
        """
        Get a copy of the current board.

        Returns
        -------
        ndarray or None
            The board as a 2D numpy array, or None before the first game.
        """
        return None if self._board is None else self._board.copy()

    @property
    def is_finished(self) -> bool:
        """True if the current board admits no move."""
        return self._board is not None and is_game_over(self._board)

    @property
    def has_won(self) -> bool:
        """True if the current board holds the target tile."""
        return self._board is not None and has_won(self._board, self.config.target)

    @property
    def empty_cells(self) -> EmptyCells:
        """Lazy view of the empty cells of the current board."""
        if self._board is None:
            raise RuntimeError('No game in progress, call new_game() first')
        return empty_cells(self._board)

    @property
    def legal_actions(self) -> list[Direction]:
        """Directions that would change the board while the game is being played."""
        if self._board is None or self._status is not GameStatus.PLAYING:
            return []
        return legal_actions(self._board)

    def new_game(self, size: int | None = None, seed: int | None = None) -> bool:
        """
        Start a new game on an empty board with the starting tiles.

        Parameters
        ----------
        size : int, optional
            Side length of the board (default is ``config.size``).
        seed : int, optional
            Reseed the session's random generator before spawning.

        Returns
        -------
        bool
            True if the game was started, False if ``size`` is outside the configured range, in
            which case the session is left untouched.
        """
        size = self.config.size if size is None else size
        if not self.config.accepts_size(size):
            _logger.warning(
                'Rejecting board size %r, expected %d to %d', size, self.config.min_size, self.config.max_size
            )
            return False

        if seed is not None:
            self._rng = default_rng(seed)

        self._board = new_board(
            size,
            rng=self._rng,
            number_tile=self.config.start_tiles,
            values=self.config.tile_values,
            probs=self.config.tile_probs,
        )
        self._score = 0
        self._continued = False
        self._status = GameStatus.PLAYING
        _logger.info('New %dx%d game', size, size)
        return True

    def step(self, direction: object) -> MoveOutcome:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : object
            A ``Direction``, its integer value or its name.

        Returns
        -------
        MoveOutcome
            The board after the move and the new tile, the score delta and whether the board
            changed.

        Notes
        -----
        - Moves are only processed while the game is being played; otherwise, or for an unknown
          direction, the session is untouched and ``changed`` is False.
        - A new tile is spawned only when the move changed the board.
        - Winning is reported once per game; after ``keep_playing`` the target is not checked
          again.
        """
        if self._status is not GameStatus.PLAYING or parse_direction(direction) is None:
            _logger.debug('Ignoring move %r while %s', direction, self._status.value)
            board = None if self._board is None else self._board.copy()
            return MoveOutcome(board, 0, False)

        outcome = move(self._board, direction)
        if not outcome.changed:
            return outcome

        self._board = outcome.board
        self._add_score(outcome.score)
        spawn_random_tile(self._board, rng=self._rng, values=self.config.tile_values, probs=self.config.tile_probs)

        if not self._continued and has_won(self._board, self.config.target):
            self._status = GameStatus.WON
            _logger.info('Reached %d with score %d', self.config.target, self._score)
        elif is_game_over(self._board):
            self._status = GameStatus.LOST
            _logger.info('Game over with score %d', self._score)

        return MoveOutcome(self._board.copy(), outcome.score, True)

    def keep_playing(self) -> bool:
        """
        Resume a won game.

        Returns
        -------
        bool
            True if the session went back to playing, False if the game was not won.
        """
        if self._status is not GameStatus.WON:
            return False
        self._continued = True
        self._status = GameStatus.LOST if is_game_over(self._board) else GameStatus.PLAYING
        return True

    def update_score(self, score: object) -> bool:
        """
        Raise the current score and refresh the best score.

        Non-numeric and non-finite values are ignored, as is anything below the current score.

        Returns
        -------
        bool
            True if the score was accepted.
        """
        if isinstance(score, bool) or not isinstance(score, Real) or not isfinite(score) or score < self._score:
            _logger.debug('Ignoring score %r', score)
            return False
        self._score = int(score)
        self._sync_best_score()
        return True

    def render(self) -> None:
        """
        Render the game board. This method prints the current board and scores to the console.
        """
        if self._board is None:
            print('No game in progress.')
            return
        for row in self._board.tolist():
            print(' \t'.join(str(value) if value else '.' for value in row))
        print(f'score={self._score} best={self._best_score} status={self._status.value}')

    def _add_score(self, delta: int) -> None:
        self._score += int(delta)
        self._sync_best_score()

    def _sync_best_score(self) -> None:
        if self._score > self._best_score:
            self._best_score = self._score
            self._store.save_best_score(self._best_score)
