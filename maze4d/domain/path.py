"""Path reconstruction and direction utilities."""

from typing import Dict, List

from .grid import Grid
from .moves import check_move, step_between, STEP_NAMES
from .types import Coord, UnitStep


def reconstruct_path(came_from: Dict[Coord, Coord], start: Coord, finish: Coord) -> List[Coord]:
    """
    Walk back-pointers from ``finish`` to ``start``.
    Returns the path from start to finish (reversed from the pointer chain).

    Raises:
        KeyError: If the chain is broken before reaching ``start``
    """
    path = [finish]
    current = finish
    while current != start:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def get_path_steps(path: List[Coord]) -> List[UnitStep]:
    """
    Get the step vector for each segment of the path.
    """
    return [step_between(path[i - 1], path[i]) for i in range(1, len(path))]


def describe_path(path: List[Coord]) -> List[str]:
    """Control names ("left", "ascend", ...) for each step of the path."""
    return [STEP_NAMES.get(step, "?") for step in get_path_steps(path)]


def validate_path(path: List[Coord], grid: Grid) -> bool:
    """
    Validate that a path stays in the grid and every step crosses an
    open boundary. Returns True if path is valid.
    """
    if not path:
        return False

    for coord in path:
        if not grid.is_valid_coord(coord):
            return False

    for i in range(1, len(path)):
        if not check_move(grid, path[i - 1], step_between(path[i - 1], path[i])):
            return False

    return True
