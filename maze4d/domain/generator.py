"""Maze generation with randomized Kruskal over a 4D grid."""

import logging
from typing import Iterable, List, Optional, Tuple

from .disjoint_set import DisjointSet
from .grid import Grid
from .types import AXIS_NAMES, Coord
from ..utils.rng import SeededRNG, resolve_rng

logger = logging.getLogger(__name__)

# Loop probability used by the braided variant of the game
BRAID_PROBABILITY = 0.3

# Axes on which the braided variant adds loops (x and y)
DEFAULT_BRAID_AXES: Tuple[int, ...] = (0, 1)

EXIT_STEP = (1, 0, 0, 0)

# Candidate edge: the upper cell of a pair and the axis to its lower neighbour
Edge = Tuple[Coord, int]


def candidate_edges(grid: Grid) -> List[Edge]:
    """
    List every internal boundary of the grid.

    Each cell contributes one edge per axis along which it is not at
    coordinate 0. Outer walls are never candidates.
    """
    edges = []
    for coord in grid.iter_coords():
        for axis in range(4):
            if coord[axis] > 0:
                edges.append((coord, axis))
    return edges


def generate(dimensions, rng: Optional[SeededRNG] = None, seed: Optional[int] = None,
             braid_probability: float = 0.0,
             braid_axes: Iterable[int] = DEFAULT_BRAID_AXES) -> Grid:
    """
    Generate a new maze.

    Every wall starts solid. Candidate edges are shuffled and each one is
    opened when it joins two regions that are not connected yet, which
    yields a spanning tree over all cells. An edge inside one region is
    opened anyway with probability ``braid_probability`` when it lies on
    one of ``braid_axes``, adding loops. Finally the outer wall past the
    far corner cell is opened as the exit.

    Args:
        dimensions: (width, height, depth, fourth) or a Dimensions instance
        rng: Random number generator to use
        seed: Seed for a fresh generator, used when ``rng`` is None
        braid_probability: Chance of keeping an edge that closes a loop
        braid_axes: Axes (0=x, 1=y, 2=z, 3=w) on which loops may be added

    Returns:
        The generated Grid

    Raises:
        ValueError: If the dimensions or braiding parameters are invalid
    """
    if not (0.0 <= braid_probability <= 1.0):
        raise ValueError(f"Braid probability must be between 0.0 and 1.0, got {braid_probability}")
    braid_axes = frozenset(braid_axes)
    if not braid_axes <= {0, 1, 2, 3}:
        raise ValueError(f"Braid axes must be in 0..3, got {sorted(braid_axes)}")

    rng = resolve_rng(rng, seed)
    grid = Grid(dimensions)

    edges = candidate_edges(grid)
    rng.shuffle(edges)

    cells: DisjointSet[Coord] = DisjointSet()
    for coord in grid.iter_coords():
        cells.add(coord)

    tree_edges = 0
    loops = 0
    for upper, axis in edges:
        lower = list(upper)
        lower[axis] -= 1
        lower = tuple(lower)
        set_a = cells.find(lower)
        set_b = cells.find(upper)
        if set_a != set_b:
            grid.open_passage(lower, axis)
            cells.union(set_a, set_b)
            tree_edges += 1
        elif braid_probability > 0.0 and axis in braid_axes and rng.random() < braid_probability:
            grid.open_passage(lower, axis)
            loops += 1

    exit_cell = tuple(d - 1 for d in grid.shape)
    grid.open_exit(exit_cell, EXIT_STEP)

    logger.debug(
        "Generated %s maze: %d candidate edges, %d tree edges, %d loops, open by axis %s",
        grid.dimensions, len(edges), tree_edges, loops, grid.open_boundary_counts_by_axis(),
    )
    return grid


def parse_axes(names: str) -> Tuple[int, ...]:
    """Turn ``"x,y"`` into ``(0, 1)``."""
    axes = []
    for name in names.split(","):
        name = name.strip().lower()
        if not name:
            continue
        if name not in AXIS_NAMES:
            raise ValueError(f"Unknown axis {name!r}, expected one of {', '.join(AXIS_NAMES)}")
        axes.append(AXIS_NAMES.index(name))
    return tuple(axes)
