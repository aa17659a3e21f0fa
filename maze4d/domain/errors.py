"""Error types raised by the maze core."""


class MazeError(Exception):
    """Base class for maze errors."""


class OutOfBoundsError(MazeError, IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, coord, shape):
        super().__init__(f"Coordinate {tuple(coord)} is out of bounds for grid {tuple(shape)}")
        self.coord = tuple(coord)
        self.shape = tuple(shape)


class UnknownKeyError(MazeError, KeyError):
    """A disjoint set key was used before being added."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Value {self.key!r} not in disjoint set"


class SamplingExhaustedError(MazeError, RuntimeError):
    """Rejection sampling gave up before finding an empty cell."""

    def __init__(self, attempts: int):
        super().__init__(f"No empty cell found after {attempts} attempts")
        self.attempts = attempts


class ConfigError(MazeError, ValueError):
    """Malformed configuration line or value."""
