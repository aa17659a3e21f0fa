"""4D Maze - procedural maze generation and path queries in four dimensions.

The maze lives on an integer grid with three spatial axes plus a fourth
axis used as a gameplay mechanic. Generation uses randomized Kruskal over
a disjoint set; queries are an O(1) move check and a BFS shortest path.
"""

from .domain.generator import generate
from .domain.moves import check_move
from .domain.solver import bfs
from .domain.sampler import random_empty_cell

__version__ = "1.0.0"
__author__ = "4D Maze Demo"

__all__ = ["generate", "check_move", "bfs", "random_empty_cell"]
