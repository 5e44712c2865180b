from unittest import TestCase, main

import numpy as np

from board2048.config import GameConfig


class TestGameConfig(TestCase):
    def test_defaults(self):
        """Default rules match the classic game."""
        config = GameConfig()
        self.assertEqual(config.size, 4)
        self.assertEqual((config.min_size, config.max_size), (3, 5))
        self.assertEqual(config.target, 2048)
        self.assertEqual(config.start_tiles, 2)

    def test_accepts_size(self):
        """Only integers inside the range are accepted."""
        config = GameConfig()
        self.assertTrue(all(config.accepts_size(size) for size in (3, 4, 5)))
        for size in (2, 6, 4.0, "4", None, True):
            with self.subTest(size=size):
                self.assertFalse(config.accepts_size(size))

    def test_invalid_configurations(self):
        """Inconsistent settings are refused at construction."""
        for kwargs in (
            {"min_size": 5, "max_size": 3},
            {"min_size": 1},
            {"size": 8},
            {"target": 1000},
            {"start_tiles": -1},
            {"tile_probs": (0.5, 0.4)},
            {"tile_values": (2,)},
            {"tile_probs": (1.2, -0.2)},
            {"tile_values": (3, 4)},
            {"tile_values": (1, 2)},
            {"tile_values": (2.0, 4)},
            {"target": True},
        ):
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    GameConfig(**kwargs)

    def test_numpy_integers(self):
        """numpy integers are valid sizes, targets and tile values."""
        config = GameConfig(size=np.int64(4), target=np.int64(1024), tile_values=(np.int64(2), np.int32(4)))
        self.assertTrue(config.accepts_size(np.int64(3)))
        self.assertFalse(config.accepts_size(np.int64(6)))
        self.assertFalse(config.accepts_size(np.bool_(True)))

    def test_custom_range(self):
        """Bigger boards can be enabled."""
        config = GameConfig(size=8, max_size=8)
        self.assertTrue(config.accepts_size(8))


if __name__ == '__main__':
    main()
