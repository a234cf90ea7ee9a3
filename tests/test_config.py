from unittest import TestCase, main

from slidetiles.config import GameSettings
from slidetiles.core.errors import BoardError, InvalidDimension, InvalidProbability, InvalidSetting


class TestGameSettings(TestCase):
    def test_defaults(self):
        """
        Defaults match the usual game.
        """
        settings = GameSettings()
        self.assertEqual((settings.size, settings.prob4, settings.target_value, settings.max_undo), (4, 0.1, 2048, 10))

    def test_invalid_size(self):
        """
        Size below one is refused.
        """
        with self.assertRaises(InvalidDimension):
            GameSettings(size=0)

    def test_invalid_probability(self):
        """
        Probabilities outside [0, 1] are refused.
        """
        for prob4 in (-0.01, 1.01):
            with self.assertRaises(InvalidProbability):
                GameSettings(prob4=prob4)

    def test_invalid_target(self):
        """
        Target must be a power of two.
        """
        for target in (0, 1, 3, 1000):
            with self.assertRaises(InvalidSetting):
                GameSettings(target_value=target)

    def test_invalid_undo_depth(self):
        """
        Undo depth cannot be negative.
        """
        with self.assertRaises(InvalidSetting):
            GameSettings(max_undo=-1)

    def test_errors_are_value_errors(self):
        """
        Every engine error is a ValueError.
        """
        self.assertTrue(issubclass(BoardError, ValueError))
        self.assertTrue(issubclass(InvalidSetting, BoardError))


if __name__ == '__main__':
    main()
