"""Breadth-first shortest paths over the maze adjacency index."""

from collections import deque
from typing import Dict, List

from .grid import Grid
from .path import reconstruct_path
from .types import Coord, PathResult


def find_path(grid: Grid, start: Coord, finish: Coord) -> PathResult:
    """
    Breadth-first search from ``start`` to ``finish``.

    The search stops as soon as ``finish`` is discovered, which already
    fixes a shortest back-pointer chain. The grid is only read, so the
    same maze can be searched any number of times.

    Raises:
        OutOfBoundsError: If either endpoint is outside the grid
    """
    start = grid.require(start)
    finish = grid.require(finish)

    if start == finish:
        return PathResult(path=[start], nodes_explored=0, found=True)

    frontier = deque([start])
    visited = {start}
    came_from: Dict[Coord, Coord] = {}
    nodes_explored = 0

    while frontier:
        current = frontier.popleft()
        nodes_explored += 1
        for neighbor in grid.adjacency.get(current, ()):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            came_from[neighbor] = current
            if neighbor == finish:
                path = reconstruct_path(came_from, start, finish)
                return PathResult(path=path, nodes_explored=nodes_explored, found=True)
            frontier.append(neighbor)

    return PathResult(path=[], nodes_explored=nodes_explored, found=False)


def bfs(grid: Grid, start: Coord, finish: Coord) -> List[Coord]:
    """
    Shortest path from ``start`` to ``finish``, both included.

    Returns an empty list when ``finish`` cannot be reached.
    """
    return find_path(grid, start, finish).path


def next_waypoint(grid: Grid, start: Coord, finish: Coord) -> Coord:
    """
    The cell an agent at ``start`` should step to in order to reach
    ``finish``. Stays put when already there or when no path exists.
    """
    path = bfs(grid, start, finish)
    if len(path) < 2:
        return grid.require(start)
    return path[1]


def reachable_from(grid: Grid, start: Coord) -> set:
    """All cells connected to ``start`` (including itself)."""
    start = grid.require(start)
    seen = {start}
    frontier = deque([start])
    while frontier:
        current = frontier.popleft()
        for neighbor in grid.adjacency.get(current, ()):
            if neighbor not in seen:
                seen.add(neighbor)
                frontier.append(neighbor)
    return seen
