import os
import tempfile
import unittest

from maze4d.config import GameConfig, load_config, parse_config
from maze4d.domain.errors import ConfigError


class TestParseConfig(unittest.TestCase):

    def test_defaults(self):
        config = parse_config("")
        self.assertEqual(config, GameConfig())
        self.assertEqual(config.dimensions, (10, 10, 10, 10))
        self.assertEqual(config.braid_axis_names, "x,y")

    def test_all_keys(self):
        text = """
        # Maze settings
        dimensions: 4x5x2X3
        food: 7
        ghosts: 2
        ghost_move_time: 0.5
        braid: 0.3
        braid_axes: x, z
        seed: 99
        max_sample_attempts: 500
        """
        config = parse_config(text)
        self.assertEqual(config.dimensions, (4, 5, 2, 3))
        self.assertEqual(config.food_count, 7)
        self.assertEqual(config.ghost_count, 2)
        self.assertEqual(config.ghost_move_time, 0.5)
        self.assertEqual(config.braid_probability, 0.3)
        self.assertEqual(config.braid_axes, (0, 2))
        self.assertEqual(config.seed, 99)
        self.assertEqual(config.max_sample_attempts, 500)

    def test_seed_none(self):
        self.assertIsNone(parse_config("seed: random").seed)

    def test_unknown_key(self):
        with self.assertRaises(ConfigError):
            parse_config("colour: red")

    def test_missing_separator(self):
        with self.assertRaises(ConfigError):
            parse_config("dimensions 4x4x4x4")

    def test_bad_values(self):
        for text in ["dimensions: 4x4", "food: many", "braid: 2.0", "braid_axes: q",
                     "food: 100\ndimensions: 2x2x2x2", "ghost_move_time: 0"]:
            with self.assertRaises(ConfigError, msg=text):
                parse_config(text)

    def test_config_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_config("food: -1")


class TestGameConfig(unittest.TestCase):

    def test_replace_ignores_none(self):
        config = GameConfig().replace(seed=None, food_count=3)
        self.assertEqual(config.food_count, 3)
        self.assertIsNone(config.seed)

    def test_validate_rejects_bad_dimensions(self):
        with self.assertRaises(ConfigError):
            GameConfig(dimensions=(1, 1, 0, 1)).validate()

    def test_ghosts_need_room(self):
        with self.assertRaises(ConfigError):
            GameConfig(dimensions=(1, 1, 1, 1), food_count=0, ghost_count=1).validate()
        GameConfig(dimensions=(1, 1, 1, 1), food_count=0, ghost_count=0).validate()


class TestLoadConfig(unittest.TestCase):

    def test_load_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "maze.cfg")
            with open(path, "w") as f:
                f.write("dimensions: 3x3x3x3\nfood: 4\n")
            config = load_config(path)
        self.assertEqual(config.dimensions, (3, 3, 3, 3))
        self.assertEqual(config.food_count, 4)

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            load_config("/nonexistent/maze.cfg")


if __name__ == '__main__':
    unittest.main()
