"""Random placement of content on empty cells."""

import logging
from typing import Collection, List, Optional

from .errors import SamplingExhaustedError
from .grid import Grid
from .types import CellState, Coord
from ..utils.rng import SeededRNG, resolve_rng

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10_000


def random_cell(grid: Grid, rng: Optional[SeededRNG] = None) -> Coord:
    """Uniformly random coordinate inside the grid."""
    rng = resolve_rng(rng)
    return tuple(rng.randrange(d) for d in grid.shape)


def random_empty_cell(grid: Grid, rng: Optional[SeededRNG] = None,
                      max_attempts: int = DEFAULT_MAX_ATTEMPTS,
                      exclude: Collection[Coord] = ()) -> Coord:
    """
    Draw random coordinates until one holds no content.

    Args:
        grid: Grid to sample from
        rng: Random number generator to use (uses default if None)
        max_attempts: Number of draws before giving up
        exclude: Cells to treat as occupied even if they are empty

    Returns:
        Coordinate of an empty cell

    Raises:
        SamplingExhaustedError: If every draw hit an occupied cell
    """
    if max_attempts <= 0:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
    rng = resolve_rng(rng)
    for _ in range(max_attempts):
        coord = random_cell(grid, rng)
        if coord not in exclude and grid.is_empty(coord):
            return coord
    raise SamplingExhaustedError(max_attempts)


def place_content(grid: Grid, count: int, state: CellState = CellState.FOOD,
                  rng: Optional[SeededRNG] = None,
                  max_attempts: int = DEFAULT_MAX_ATTEMPTS,
                  exclude: Collection[Coord] = ()) -> List[Coord]:
    """
    Put ``count`` items of ``state`` on distinct empty cells.

    Returns:
        The coordinates that were filled, in placement order

    Raises:
        ValueError: If there are fewer empty cells than ``count``
    """
    if state == CellState.EMPTY:
        raise ValueError("Cannot place empty content")
    if count < 0:
        raise ValueError(f"Content count must be non-negative, got {count}")
    available = grid.empty_cell_count() - sum(1 for c in set(exclude) if grid.is_empty(c))
    if count > available:
        raise ValueError(f"Cannot place {count} items on {available} empty cells")

    rng = resolve_rng(rng)
    placed = []
    for _ in range(count):
        coord = random_empty_cell(grid, rng, max_attempts, exclude)
        grid.set_cell_state(coord, state)
        placed.append(coord)
    logger.debug("Placed %d %s items", count, state.name.lower())
    return placed
