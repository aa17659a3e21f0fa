"""Game session controller connecting the maze core to a front end."""

import logging
from typing import List, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ..config import GameConfig
from ..domain.errors import MazeError, SamplingExhaustedError
from ..domain.generator import generate
from ..domain.grid import Grid
from ..domain.moves import apply_step, check_move
from ..domain.sampler import place_content, random_cell
from ..domain.solver import bfs, next_waypoint
from ..domain.types import CellState, Coord
from ..utils.rng import SeededRNG
from .fsm import GameState, GameStateMachine

logger = logging.getLogger(__name__)

PLAYER_START: Coord = (0, 0, 0, 0)


class GameController(QObject):
    """
    Controller that owns one maze session: the grid, the player, the
    ghosts chasing the player and the food scattered around the maze.

    Signals:
        state_changed: Emitted when the game state changes
        maze_generated: Emitted when a new maze is ready
        player_moved: Emitted with the player's new cell
        food_collected: Emitted with the cell the food was taken from
        ghost_moved: Emitted with the ghost index and its new cell
        error_occurred: Emitted when an operation fails
    """

    # Qt Signals
    state_changed = Signal(object)  # GameState
    maze_generated = Signal()
    player_moved = Signal(object)  # Coord
    food_collected = Signal(object)  # Coord
    ghost_moved = Signal(int, object)  # ghost index, Coord
    error_occurred = Signal(str)  # Error message

    def __init__(self, config: Optional[GameConfig] = None):
        super().__init__()

        self._config = config or GameConfig()
        self._state_machine = GameStateMachine()
        self._grid: Optional[Grid] = None
        self._player: Coord = PLAYER_START
        self._ghosts: List[Coord] = []
        self._food_collected = 0

        # Ghosts take one step per timer tick
        self._timer = QTimer()
        self._timer.timeout.connect(self._on_timer_tick)

        self._setup_state_callbacks()

    def _setup_state_callbacks(self):
        """Setup callbacks for state machine transitions."""
        self._state_machine.on_state_enter(GameState.PLAYING, self._on_playing_entered)
        self._state_machine.on_state_enter(GameState.IDLE, self._on_stopped)
        self._state_machine.on_state_enter(GameState.WON, self._on_stopped)
        self._state_machine.on_state_enter(GameState.LOST, self._on_stopped)

    # Properties

    @property
    def grid(self) -> Optional[Grid]:
        return self._grid

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def player(self) -> Coord:
        return self._player

    @property
    def ghosts(self) -> List[Coord]:
        return list(self._ghosts)

    @property
    def current_state(self) -> GameState:
        return self._state_machine.current_state

    @property
    def food_remaining(self) -> int:
        if self._grid is None:
            return 0
        return len(self._grid.cells_with_state(CellState.FOOD))

    @property
    def timer_interval(self) -> int:
        """Ghost step interval in milliseconds."""
        return max(1, int(self._config.ghost_move_time * 1000))

    # Session management

    def new_game(self, config: Optional[GameConfig] = None) -> bool:
        """Generate a new maze, scatter food and ghosts, and start playing."""
        try:
            config = (config or self._config).validate()
            rng = SeededRNG(config.seed)

            grid = generate(
                config.dimensions,
                rng=rng,
                braid_probability=config.braid_probability,
                braid_axes=config.braid_axes,
            )
            place_content(grid, config.food_count, CellState.FOOD, rng=rng,
                          max_attempts=config.max_sample_attempts,
                          exclude={PLAYER_START})
            ghosts = [self._random_ghost_cell(grid, rng, config.max_sample_attempts)
                      for _ in range(config.ghost_count)]
        except (MazeError, ValueError) as e:
            logger.warning("Failed to start new game: %s", e)
            self.error_occurred.emit(f"Failed to start new game: {e}")
            return False

        if self._state_machine.current_state != GameState.IDLE:
            self._state_machine.reset_to_idle()

        self._config = config
        self._grid = grid
        self._player = PLAYER_START
        self._ghosts = ghosts
        self._food_collected = 0
        logger.info("New %s maze with %d food and %d ghosts", grid.dimensions,
                    config.food_count, len(ghosts))
        self.maze_generated.emit()
        return self._state_machine.start()

    def reset(self) -> bool:
        """Stop the current session."""
        return self._state_machine.reset_to_idle()

    @staticmethod
    def _random_ghost_cell(grid: Grid, rng: SeededRNG, max_attempts: int) -> Coord:
        for _ in range(max_attempts):
            coord = random_cell(grid, rng)
            if coord != PLAYER_START:
                return coord
        raise SamplingExhaustedError(max_attempts)

    # Player and ghosts

    def move_player(self, delta) -> bool:
        """
        Move the player one step if the wall allows it.

        Returns:
            True if the player moved
        """
        if not self._state_machine.is_playing():
            return False

        try:
            if not check_move(self._grid, self._player, delta):
                return False
        except MazeError as e:
            self.error_occurred.emit(f"Invalid move: {e}")
            return False

        target = apply_step(self._player, tuple(delta))
        self._player = target
        self.player_moved.emit(target)

        if not self._grid.is_valid_coord(target):
            # Only the exit opens onto the outside
            self._state_machine.win({"player": target})
            return True

        if self._grid.cell_state(target) == CellState.FOOD:
            self._grid.clear_cell(target)
            self._food_collected += 1
            self.food_collected.emit(target)

        if target in self._ghosts:
            self._state_machine.lose({"player": target})
        return True

    def tick(self) -> bool:
        """
        Advance every ghost one cell along a shortest path to the player.

        Returns:
            True if the ghosts moved
        """
        if not self._state_machine.is_playing():
            return False

        for index, ghost in enumerate(self._ghosts):
            if ghost == self._player:
                self._state_machine.lose({"ghost": index})
                return True
            step = next_waypoint(self._grid, ghost, self._player)
            self._ghosts[index] = step
            self.ghost_moved.emit(index, step)
            if step == self._player:
                self._state_machine.lose({"ghost": index})
                return True
        return True

    def solve(self) -> List[Coord]:
        """Shortest path from the player to the exit cell."""
        if self._grid is None or self._grid.exit_cell is None:
            return []
        if not self._grid.is_valid_coord(self._player):
            return []
        return bfs(self._grid, self._player, self._grid.exit_cell)

    # State Machine Callbacks

    def _on_playing_entered(self, context):
        """Called when entering PLAYING state."""
        if self._config.ghost_count > 0:
            self._timer.start(self.timer_interval)
        self.state_changed.emit(GameState.PLAYING)

    def _on_stopped(self, context):
        """Called when entering IDLE, WON or LOST."""
        self._timer.stop()
        state = self._state_machine.current_state
        logger.info("Game state: %s", self._state_machine.get_state_description())
        self.state_changed.emit(state)

    def _on_timer_tick(self):
        """Called on each timer tick while playing."""
        self.tick()

    # Utility methods

    def get_statistics(self) -> dict:
        """Get current session statistics."""
        return {
            "dimensions": str(self._grid.dimensions) if self._grid else None,
            "player": self._player,
            "ghosts": list(self._ghosts),
            "food_collected": self._food_collected,
            "food_remaining": self.food_remaining,
            "current_state": self._state_machine.current_state.value,
            "state_description": self._state_machine.get_state_description(),
        }
