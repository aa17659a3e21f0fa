"""Core type definitions for the 4D maze."""

from dataclasses import dataclass, field
from enum import IntEnum
from numbers import Integral
from itertools import product
from typing import Iterator, List, Optional, Tuple

# Cell coordinate (x, y, z, w)
Coord = Tuple[int, int, int, int]

# Unit step: +1 or -1 on exactly one axis
UnitStep = Tuple[int, int, int, int]

AXIS_NAMES = ("x", "y", "z", "w")


def is_integral(value) -> bool:
    """True for int-like values (numpy integers included), False for floats and bools."""
    return isinstance(value, Integral) and not isinstance(value, bool)


class Wall(IntEnum):
    """State of the boundary between two axis-adjacent cells."""
    SOLID_WALL = 0
    NO_WALL = 1


class CellState(IntEnum):
    """Occupancy of a single cell."""
    EMPTY = 0
    FOOD = 1


@dataclass(frozen=True)
class Dimensions:
    """Grid extent along x, y, z and w."""
    width: int
    height: int
    depth: int
    fourth: int

    def __post_init__(self):
        for name, value in zip(("width", "height", "depth", "fourth"), self.shape):
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"Grid dimension {name} must be a positive integer, got {value!r}")

    @classmethod
    def of(cls, dims) -> "Dimensions":
        """Build from a 4-sequence, passing existing instances through."""
        if isinstance(dims, cls):
            return dims
        values = tuple(dims)
        if len(values) != 4:
            raise ValueError(f"Expected 4 dimensions, got {len(values)}")
        return cls(*(int(v) for v in values))

    @property
    def shape(self) -> Tuple[int, int, int, int]:
        return (self.width, self.height, self.depth, self.fourth)

    @property
    def cell_count(self) -> int:
        return self.width * self.height * self.depth * self.fourth

    def contains(self, coord) -> bool:
        """Check if coordinate has four integer components within grid bounds."""
        if len(coord) != 4 or not all(is_integral(c) for c in coord):
            return False
        return all(0 <= c < d for c, d in zip(coord, self.shape))

    def iter_coords(self) -> Iterator[Coord]:
        """Iterate over every cell coordinate, x varying fastest."""
        for w, z, y, x in product(range(self.fourth), range(self.depth),
                                  range(self.height), range(self.width)):
            yield (x, y, z, w)

    def __str__(self) -> str:
        return "x".join(str(d) for d in self.shape)


@dataclass
class PathResult:
    """Result of a path search."""
    path: List[Coord] = field(default_factory=list)
    nodes_explored: int = 0
    found: bool = False

    @property
    def success(self) -> bool:
        """Whether a path was found."""
        return self.found and len(self.path) > 0

    @property
    def length(self) -> Optional[int]:
        """Number of steps in the path, None when no path exists."""
        return len(self.path) - 1 if self.success else None
