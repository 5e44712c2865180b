# -*- coding: utf-8 -*-
"""
Play 2048 in the console.
"""
import logging
from argparse import ArgumentParser
from pathlib import Path

from board2048.config import GameConfig
from board2048.envs import GameSession, GameStatus
from board2048.storage import JsonFileStore

# ##: Keyboard shortcuts on top of the direction names.
KEYS = {"a": "left", "w": "up", "d": "right", "s": "down"}


def step(session: GameSession, action: str):
    """
    Apply an action to the game and redraw it.

    Parameters
    ----------
    session: GameSession
        The game session

    action: str
        Direction name or shortcut
    """
    outcome = session.step(KEYS.get(action, action))
    if not outcome.changed:
        print("nothing moved")
        return

    print(f"reward={outcome.score}")
    session.render()
    if session.status is GameStatus.WON:
        print("you won! press 'c' to keep playing or 'n' for a new game")
    elif session.status is GameStatus.LOST:
        print("terminated!")


def key_handler(session: GameSession, key: str) -> bool:
    """
    Handle one line of input.

    Parameters
    ----------
    session: GameSession
        The game session

    key: str
        The typed command

    Returns
    -------
    bool
        False when the player asked to quit.
    """
    key = key.strip().lower()

    if key in ("q", "quit", "escape"):
        return False

    if key in ("n", "new"):
        session.new_game()
        session.render()
        return True

    if key in ("c", "continue"):
        if session.keep_playing():
            session.render()
        return True

    if key in KEYS or key in session.ACTIONS:
        step(session, key)
    return True


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--store", type=Path, default=Path.home() / ".board2048.json")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    game = GameSession(config=GameConfig(), store=JsonFileStore(args.store), seed=args.seed)
    if not game.new_game(size=args.size):
        parser.error(f"--size must be between {game.config.min_size} and {game.config.max_size}")
    game.render()

    # Blocking input loop
    try:
        while key_handler(game, input("move (w/a/s/d, n, c, q)> ")):
            pass
    except (EOFError, KeyboardInterrupt):
        print()
    print(f"score={game.score} best={game.best_score}")
