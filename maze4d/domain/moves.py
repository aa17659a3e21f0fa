"""Unit steps and move validation against the maze walls."""

from typing import Dict, List, Optional

from .grid import Grid
from .types import Coord, UnitStep, Wall, is_integral

# The eight unit steps in 4D, named after the controls that trigger them
STEP_NAMES: Dict[UnitStep, str] = {
    (0, -1, 0, 0): "up",
    (0, 1, 0, 0): "down",
    (-1, 0, 0, 0): "left",
    (1, 0, 0, 0): "right",
    (0, 0, 1, 0): "ascend",
    (0, 0, -1, 0): "descend",
    (0, 0, 0, -1): "fourth_dec",
    (0, 0, 0, 1): "fourth_inc",
}

UNIT_STEPS: List[UnitStep] = list(STEP_NAMES)

STEPS_BY_NAME: Dict[str, UnitStep] = {name: step for step, name in STEP_NAMES.items()}


def step_axis(delta) -> Optional[int]:
    """Axis a unit step moves along, or None if ``delta`` is not a unit step."""
    try:
        components = tuple(delta)
    except TypeError:
        return None
    if len(components) != 4 or not all(is_integral(d) for d in components):
        return None
    nonzero = [axis for axis, d in enumerate(components) if d != 0]
    if len(nonzero) != 1 or abs(components[nonzero[0]]) != 1:
        return None
    return nonzero[0]


def is_unit_step(delta) -> bool:
    return step_axis(delta) is not None


def apply_step(coord: Coord, delta: UnitStep) -> Coord:
    return tuple(c + d for c, d in zip(coord, delta))


def step_between(from_coord: Coord, to_coord: Coord) -> UnitStep:
    """Get the step vector between two coordinates."""
    return tuple(b - a for a, b in zip(from_coord, to_coord))


def reverse_step(delta: UnitStep) -> UnitStep:
    return tuple(-d for d in delta)


def check_move(grid: Grid, current: Coord, delta) -> bool:
    """
    Check whether one unit step from ``current`` crosses an open boundary.

    A step off the edge of the grid reads the outer wall, which is solid
    everywhere except at the exit.

    Args:
        grid: Generated maze
        current: Cell the agent is in
        delta: Proposed step

    Returns:
        True if the boundary is open; False for a wall or a non-unit delta

    Raises:
        OutOfBoundsError: If ``current`` is outside the grid
    """
    current = grid.require(current)
    axis = step_axis(delta)
    if axis is None:
        return False
    index = grid.boundary_index(current, axis, delta[axis])
    return bool(grid.walls[axis][index] == Wall.NO_WALL)


def open_neighbors(grid: Grid, coord: Coord) -> List[Coord]:
    """
    In-grid cells reachable from ``coord`` in one step, read from the walls.

    Unlike ``grid.neighbors`` this does not rely on the adjacency index, so
    it stays correct if walls are edited after generation.
    """
    coord = grid.require(coord)
    result = []
    for delta in UNIT_STEPS:
        target = apply_step(coord, delta)
        if grid.is_valid_coord(target) and check_move(grid, coord, delta):
            result.append(target)
    return result
