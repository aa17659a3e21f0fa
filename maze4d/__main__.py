"""Main entry point: generate a 4D maze and report on it."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import GameConfig, load_config
from .domain.errors import MazeError
from .domain.generator import BRAID_PROBABILITY, generate, parse_axes
from .domain.path import describe_path
from .domain.sampler import place_content
from .domain.solver import find_path
from .domain.types import CellState
from .utils.rng import SeededRNG


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze4d",
        description="Generate a 4D maze and solve it from the origin to the exit.",
    )
    parser.add_argument("dimensions", nargs="*", type=int, metavar="N",
                        help="Width, height, depth and fourth extent, e.g. 10 10 10 10")
    parser.add_argument("--config", help="Config file with 'key: value' lines")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--braid", type=float, nargs="?", const=BRAID_PROBABILITY,
                        help=f"Add loops with this probability (default {BRAID_PROBABILITY} when given)")
    parser.add_argument("--braid-axes", help="Axes that may get loops, e.g. x,y")
    parser.add_argument("--food", type=int, help="Number of food items to place")
    parser.add_argument("--solve", action="store_true", help="Print the path to the exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> GameConfig:
    """Merge defaults, the config file and command line overrides."""
    config = load_config(args.config) if args.config else GameConfig()
    if args.dimensions and len(args.dimensions) != 4:
        raise MazeError(f"Expected 4 dimensions, got {len(args.dimensions)}")
    return config.replace(
        dimensions=tuple(args.dimensions) if args.dimensions else None,
        seed=args.seed,
        braid_probability=args.braid,
        braid_axes=parse_axes(args.braid_axes) if args.braid_axes else None,
        food_count=args.food,
    ).validate()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
        rng = SeededRNG(config.seed)
        grid = generate(config.dimensions, rng=rng,
                        braid_probability=config.braid_probability,
                        braid_axes=config.braid_axes)
        food = place_content(grid, config.food_count, CellState.FOOD, rng=rng,
                             max_attempts=config.max_sample_attempts)
    except (MazeError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    start = (0, 0, 0, 0)
    result = find_path(grid, start, grid.exit_cell)

    print(f"Maze {grid.dimensions}: {grid.cell_count} cells")
    print(f"Open boundaries: {grid.open_boundary_count()} {grid.open_boundary_counts_by_axis()}")
    if config.braid_probability > 0:
        print(f"Braiding: {config.braid_probability} on {config.braid_axis_names}")
    print(f"Food placed: {len(food)}")
    print(f"Exit: {grid.exit_cell} -> {grid.exit_step}")

    if not result.success:
        print("No path exists from start to exit!")
        return 1

    print(f"Path to exit: {result.length} steps ({result.nodes_explored} nodes explored)")
    if args.solve:
        for coord, move in zip(result.path[1:], describe_path(result.path)):
            print(f"  {move:<10} {coord}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
