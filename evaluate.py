# -*- coding: utf-8 -*-
"""
Evaluate random play on the 2048 board.
"""
import logging
from collections import Counter
from typing import Dict

import numpy as np
from numpy.random import default_rng
from tqdm import trange

from board2048.config import GameConfig
from board2048.envs import GameSession, GameStatus
from board2048.storage import MemoryStore

_logger = logging.getLogger(__name__)


def evaluate(length: int = 10, size: int = 4, seed: int | None = None) -> Dict[int, int]:
    """
    Play random games until they are lost and count the max tile reached.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    size : int, optional
        Side length of the board (default is 4).
    seed : int, optional
        Seed for both the board and the random player.

    Returns
    -------
    Dict[int, int]
        Number of games per max tile.
    """
    rng = default_rng(seed)
    session = GameSession(config=GameConfig(size=size), store=MemoryStore(), rng=rng)
    score = []

    with trange(length) as period:
        for num in period:
            session.new_game()

            # ##: Play a game, continuing past the target tile.
            while session.status is not GameStatus.LOST:
                if session.status is GameStatus.WON:
                    session.keep_playing()
                    continue
                legal = session.legal_actions
                session.step(legal[int(rng.integers(len(legal)))])

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(score=session.score, max=int(np.max(session.board)))

            # ##: Save max cells.
            score.append(int(np.max(session.board)))
            _logger.debug("Game %d ended with score %d", num + 1, session.score)

    # ##: Final log.
    frequency = Counter(score)
    return dict(frequency)


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    result = evaluate(length=args.games, size=args.size, seed=args.seed)
    print(f"Random play on {args.size}x{args.size}, max tiles: {dict(sorted(result.items()))}")
