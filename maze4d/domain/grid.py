"""Grid model: cells, per-axis wall arrays and the adjacency index."""

from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .errors import OutOfBoundsError
from .types import AXIS_NAMES, CellState, Coord, Dimensions, UnitStep, Wall


class Grid:
    """
    A 4D maze grid.

    Walls are kept in one numpy array per axis. The array for axis ``a`` has
    the grid shape with one extra slot along ``a``: boundary index ``b``
    separates cell ``b - 1`` from cell ``b``, so indices ``0`` and ``dim``
    are the outer walls of the whole grid. All arrays are indexed by
    ``(x, y, z, w)`` tuples.

    Walls and adjacency are written only while the maze is generated. After
    that the only mutable state is cell occupancy, changed through
    :meth:`set_cell_state` and :meth:`clear_cell`.
    """

    def __init__(self, dimensions):
        self.dimensions = Dimensions.of(dimensions)
        shape = self.dimensions.shape
        self.cells = np.full(shape, CellState.EMPTY, dtype=np.uint8)
        self.walls: Tuple[np.ndarray, ...] = tuple(
            np.full(_wall_shape(shape, axis), Wall.SOLID_WALL, dtype=np.uint8)
            for axis in range(4)
        )
        self.adjacency: Dict[Coord, List[Coord]] = {}
        self.exit_cell: Optional[Coord] = None
        self.exit_step: Optional[UnitStep] = None

    def __repr__(self) -> str:
        return f"Grid({self.dimensions}, open={self.open_boundary_count()})"

    @property
    def shape(self) -> Tuple[int, int, int, int]:
        return self.dimensions.shape

    @property
    def cell_count(self) -> int:
        return self.dimensions.cell_count

    def is_valid_coord(self, coord) -> bool:
        """Check if coordinate is within grid bounds."""
        return self.dimensions.contains(coord)

    def require(self, coord) -> Coord:
        """
        Validate a coordinate and return it as a tuple of plain ints.

        Raises:
            OutOfBoundsError: If the coordinate is outside the grid or has a
                non-integer component
        """
        if not self.is_valid_coord(coord):
            raise OutOfBoundsError(coord, self.shape)
        return tuple(int(c) for c in coord)

    def iter_coords(self) -> Iterator[Coord]:
        return self.dimensions.iter_coords()

    # Walls

    def boundary_index(self, coord: Coord, axis: int, direction: int) -> Tuple[int, int, int, int]:
        """
        Index into ``walls[axis]`` of the boundary crossed when stepping
        from ``coord`` one cell in ``direction`` (+1 or -1) along ``axis``.
        """
        index = list(coord)
        if direction > 0:
            index[axis] += 1
        return tuple(index)

    def wall_at(self, coord: Coord, axis: int, direction: int) -> Wall:
        coord = self.require(coord)
        return Wall(int(self.walls[axis][self.boundary_index(coord, axis, direction)]))

    def set_wall(self, coord: Coord, axis: int, direction: int, wall: Wall) -> None:
        coord = self.require(coord)
        self.walls[axis][self.boundary_index(coord, axis, direction)] = wall

    def open_passage(self, lower: Coord, axis: int) -> Coord:
        """
        Remove the wall between ``lower`` and its upper neighbour along
        ``axis`` and record both cells as neighbours.

        Returns:
            The upper neighbour
        """
        lower = self.require(lower)
        upper = list(lower)
        upper[axis] += 1
        upper = self.require(upper)
        self.walls[axis][upper] = Wall.NO_WALL
        self.adjacency.setdefault(lower, []).append(upper)
        self.adjacency.setdefault(upper, []).append(lower)
        return upper

    def open_exit(self, cell: Coord, step: UnitStep) -> None:
        """Punch a hole through the outer wall next to ``cell``."""
        cell = self.require(cell)
        axis = _step_axis(step)
        direction = step[axis]
        target = cell[axis] + direction
        if 0 <= target < self.shape[axis]:
            raise ValueError(f"Exit step {step} from {cell} does not cross the outer wall")
        self.set_wall(cell, axis, direction, Wall.NO_WALL)
        self.exit_cell = cell
        self.exit_step = tuple(step)

    def internal_walls(self, axis: int) -> np.ndarray:
        """View of the boundaries along ``axis`` that separate two cells."""
        index = [slice(None)] * 4
        index[axis] = slice(1, self.shape[axis])
        return self.walls[axis][tuple(index)]

    def open_boundary_count(self) -> int:
        """Number of open boundaries between cells (outer walls excluded)."""
        return int(sum(np.count_nonzero(self.internal_walls(axis) == Wall.NO_WALL)
                       for axis in range(4)))

    def open_boundary_counts_by_axis(self) -> Dict[str, int]:
        return {
            AXIS_NAMES[axis]: int(np.count_nonzero(self.internal_walls(axis) == Wall.NO_WALL))
            for axis in range(4)
        }

    def neighbors(self, coord: Coord) -> List[Coord]:
        """Cells joined to ``coord`` by an open boundary."""
        return list(self.adjacency.get(self.require(coord), ()))

    # Cells

    def cell_state(self, coord: Coord) -> CellState:
        return CellState(int(self.cells[self.require(coord)]))

    def is_empty(self, coord: Coord) -> bool:
        return self.cell_state(coord) == CellState.EMPTY

    def set_cell_state(self, coord: Coord, state: CellState) -> None:
        """Mark a cell as holding content (or empty)."""
        self.cells[self.require(coord)] = CellState(state)

    def clear_cell(self, coord: Coord) -> CellState:
        """Empty a cell and return what it held."""
        previous = self.cell_state(coord)
        self.set_cell_state(coord, CellState.EMPTY)
        return previous

    def empty_cell_count(self) -> int:
        return int(np.count_nonzero(self.cells == CellState.EMPTY))

    def cells_with_state(self, state: CellState) -> List[Coord]:
        return [tuple(int(c) for c in idx) for idx in np.argwhere(self.cells == state)]


def _wall_shape(shape, axis: int) -> Tuple[int, ...]:
    return tuple(d + 1 if i == axis else d for i, d in enumerate(shape))


def _step_axis(step) -> int:
    nonzero = [i for i, d in enumerate(step) if d != 0]
    if len(step) != 4 or len(nonzero) != 1 or abs(step[nonzero[0]]) != 1:
        raise ValueError(f"Not a unit step: {step}")
    return nonzero[0]
