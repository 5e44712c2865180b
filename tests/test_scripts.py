"""
Tests for the console and evaluation scripts.
"""

from contextlib import redirect_stdout
from io import StringIO
from unittest import TestCase, main

import numpy as np

from board2048.envs import GameSession, GameStatus
from evaluate import evaluate
from manuals_control import key_handler


class TestEvaluate(TestCase):
    def test_counts_every_game(self):
        """Each game contributes one max tile."""
        result = evaluate(length=3, size=3, seed=0)
        self.assertEqual(sum(result.values()), 3)
        for tile in result:
            self.assertEqual(tile & (tile - 1), 0)

    def test_reproducible(self):
        """Same seed, same results."""
        self.assertEqual(evaluate(length=2, size=3, seed=4), evaluate(length=2, size=3, seed=4))


class TestKeyHandler(TestCase):
    def setUp(self):
        self.session = GameSession(seed=0)
        self.session.new_game()
        self.out = StringIO()

    def test_quit(self):
        """q stops the loop."""
        with redirect_stdout(self.out):
            self.assertFalse(key_handler(self.session, "q"))

    def test_move_shortcut(self):
        """a moves left."""
        self.session._board = np.array([[0, 0, 2, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        with redirect_stdout(self.out):
            self.assertTrue(key_handler(self.session, "a"))
        self.assertEqual(self.session.board[0, 0], 4)
        self.assertIn("reward=4", self.out.getvalue())

    def test_unknown_key(self):
        """Unknown keys change nothing."""
        board = self.session.board
        with redirect_stdout(self.out):
            self.assertTrue(key_handler(self.session, "x"))
        np.testing.assert_array_equal(self.session.board, board)

    def test_new_game(self):
        """n restarts the game."""
        self.session.update_score(64)
        with redirect_stdout(self.out):
            key_handler(self.session, "n")
        self.assertEqual(self.session.score, 0)
        self.assertIs(self.session.status, GameStatus.PLAYING)


if __name__ == '__main__':
    main()
