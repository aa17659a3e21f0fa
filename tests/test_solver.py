import unittest

from maze4d.domain.errors import OutOfBoundsError
from maze4d.domain.generator import generate
from maze4d.domain.grid import Grid
from maze4d.domain.moves import check_move, step_between
from maze4d.domain.path import describe_path, get_path_steps, reconstruct_path, validate_path
from maze4d.domain.solver import bfs, find_path, next_waypoint


def _line_grid(length):
    """A corridor along x: (0,0,0,0) - (1,0,0,0) - ... with no other openings."""
    grid = Grid((length, 1, 1, 1))
    for x in range(length - 1):
        grid.open_passage((x, 0, 0, 0), 0)
    return grid


class TestBFS(unittest.TestCase):

    def test_connectivity_and_path_validity(self):
        grid = generate((3, 3, 2, 2), seed=4)
        start = (0, 0, 0, 0)
        for finish in grid.iter_coords():
            path = bfs(grid, start, finish)
            self.assertEqual(path[0], start)
            self.assertEqual(path[-1], finish)
            for a, b in zip(path, path[1:]):
                self.assertTrue(check_move(grid, a, step_between(a, b)))
            self.assertTrue(validate_path(path, grid))

    def test_shortest_in_braided_maze(self):
        grid = generate((4, 4, 1, 1), seed=2, braid_probability=1.0)
        # Every x/y wall is open, so the shortest path is the Manhattan distance
        path = bfs(grid, (0, 0, 0, 0), (3, 3, 0, 0))
        self.assertEqual(len(path) - 1, 6)

    def test_corridor(self):
        grid = _line_grid(5)
        self.assertEqual(bfs(grid, (4, 0, 0, 0), (1, 0, 0, 0)),
                         [(4, 0, 0, 0), (3, 0, 0, 0), (2, 0, 0, 0), (1, 0, 0, 0)])

    def test_start_equals_finish(self):
        grid = _line_grid(3)
        result = find_path(grid, (1, 0, 0, 0), (1, 0, 0, 0))
        self.assertTrue(result.success)
        self.assertEqual(result.path, [(1, 0, 0, 0)])
        self.assertEqual(result.length, 0)

    def test_unreachable_returns_empty(self):
        grid = Grid((3, 1, 1, 1))
        grid.open_passage((0, 0, 0, 0), 0)
        self.assertEqual(bfs(grid, (0, 0, 0, 0), (2, 0, 0, 0)), [])
        result = find_path(grid, (0, 0, 0, 0), (2, 0, 0, 0))
        self.assertFalse(result.success)
        self.assertIsNone(result.length)
        self.assertEqual(result.nodes_explored, 2)

    def test_out_of_bounds_endpoints(self):
        grid = _line_grid(2)
        with self.assertRaises(OutOfBoundsError):
            bfs(grid, (0, 0, 0, 0), (2, 0, 0, 0))

    def test_repeated_calls_do_not_change_grid(self):
        grid = generate((3, 3, 3, 1), seed=8)
        snapshot = {k: list(v) for k, v in grid.adjacency.items()}
        first = bfs(grid, (0, 0, 0, 0), (2, 2, 2, 0))
        for _ in range(10):
            self.assertEqual(bfs(grid, (0, 0, 0, 0), (2, 2, 2, 0)), first)
        self.assertEqual(grid.adjacency, snapshot)

    def test_next_waypoint(self):
        grid = _line_grid(4)
        self.assertEqual(next_waypoint(grid, (3, 0, 0, 0), (0, 0, 0, 0)), (2, 0, 0, 0))
        self.assertEqual(next_waypoint(grid, (1, 0, 0, 0), (1, 0, 0, 0)), (1, 0, 0, 0))
        enclosed = Grid((2, 1, 1, 1))
        self.assertEqual(next_waypoint(enclosed, (0, 0, 0, 0), (1, 0, 0, 0)), (0, 0, 0, 0))


class TestPathHelpers(unittest.TestCase):

    def test_reconstruct_path(self):
        came_from = {(1, 0, 0, 0): (0, 0, 0, 0), (1, 1, 0, 0): (1, 0, 0, 0)}
        self.assertEqual(reconstruct_path(came_from, (0, 0, 0, 0), (1, 1, 0, 0)),
                         [(0, 0, 0, 0), (1, 0, 0, 0), (1, 1, 0, 0)])

    def test_steps_and_names(self):
        path = [(0, 0, 0, 0), (0, 0, 0, 1), (0, 0, 1, 1), (1, 0, 1, 1)]
        self.assertEqual(get_path_steps(path), [(0, 0, 0, 1), (0, 0, 1, 0), (1, 0, 0, 0)])
        self.assertEqual(describe_path(path), ["fourth_inc", "ascend", "right"])

    def test_validate_path_rejects_walls_and_jumps(self):
        grid = _line_grid(3)
        self.assertFalse(validate_path([], grid))
        self.assertFalse(validate_path([(0, 0, 0, 0), (2, 0, 0, 0)], grid))
        self.assertFalse(validate_path([(0, 0, 0, 0), (-1, 0, 0, 0)], grid))
        self.assertTrue(validate_path([(0, 0, 0, 0), (1, 0, 0, 0)], grid))


if __name__ == '__main__':
    unittest.main()
