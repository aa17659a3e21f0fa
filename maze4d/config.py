"""Game configuration and the ``key: value`` config file loader."""

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .domain.errors import ConfigError
from .domain.generator import DEFAULT_BRAID_AXES, parse_axes
from .domain.sampler import DEFAULT_MAX_ATTEMPTS
from .domain.types import AXIS_NAMES, Dimensions


@dataclass
class GameConfig:
    """Configuration for a maze game session."""
    dimensions: Tuple[int, int, int, int] = (10, 10, 10, 10)
    food_count: int = 10
    ghost_count: int = 1
    ghost_move_time: float = 1.0  # Seconds per ghost step
    braid_probability: float = 0.0
    braid_axes: Tuple[int, ...] = DEFAULT_BRAID_AXES
    seed: Optional[int] = None
    max_sample_attempts: int = DEFAULT_MAX_ATTEMPTS

    def validate(self) -> "GameConfig":
        """
        Check value ranges.

        Raises:
            ConfigError: On the first invalid value
        """
        try:
            dims = Dimensions.of(self.dimensions)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid dimensions {self.dimensions!r}: {e}") from e
        if self.food_count < 0:
            raise ConfigError(f"food_count must be non-negative, got {self.food_count}")
        if self.ghost_count < 0:
            raise ConfigError(f"ghost_count must be non-negative, got {self.ghost_count}")
        # Player start and every item need their own cell
        if self.food_count + 1 > dims.cell_count:
            raise ConfigError(f"{self.food_count} food items do not fit in a {dims} grid")
        if self.ghost_count > 0 and dims.cell_count < 2:
            raise ConfigError(f"Ghosts need a grid with more than one cell, got {dims}")
        if self.ghost_move_time <= 0:
            raise ConfigError(f"ghost_move_time must be positive, got {self.ghost_move_time}")
        if not (0.0 <= self.braid_probability <= 1.0):
            raise ConfigError(f"braid_probability must be between 0.0 and 1.0, got {self.braid_probability}")
        if not set(self.braid_axes) <= {0, 1, 2, 3}:
            raise ConfigError(f"braid_axes must be in 0..3, got {self.braid_axes!r}")
        if self.max_sample_attempts <= 0:
            raise ConfigError(f"max_sample_attempts must be positive, got {self.max_sample_attempts}")
        return self

    def replace(self, **kwargs) -> "GameConfig":
        """Copy with the given fields changed; None values are ignored."""
        changes = {key: value for key, value in kwargs.items() if value is not None}
        return dataclasses.replace(self, **changes)

    @property
    def braid_axis_names(self) -> str:
        return ",".join(AXIS_NAMES[axis] for axis in self.braid_axes)


def _parse_dimensions(value: str) -> Tuple[int, int, int, int]:
    parts = value.lower().split("x")
    if len(parts) != 4:
        raise ValueError("Expected dimensions of the form 10x10x10x10")
    return tuple(int(p) for p in parts)


def _parse_seed(value: str) -> Optional[int]:
    return None if value.lower() in ("", "none", "random") else int(value)


# Config file key -> (GameConfig field, parser)
_KEYS = {
    "dimensions": ("dimensions", _parse_dimensions),
    "food": ("food_count", int),
    "ghosts": ("ghost_count", int),
    "ghost_move_time": ("ghost_move_time", float),
    "braid": ("braid_probability", float),
    "braid_axes": ("braid_axes", parse_axes),
    "seed": ("seed", _parse_seed),
    "max_sample_attempts": ("max_sample_attempts", int),
}


def parse_config(text: str, base: Optional[GameConfig] = None) -> GameConfig:
    """
    Parse ``key: value`` lines on top of ``base`` (defaults if None).

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        ConfigError: For malformed lines, unknown keys or bad values
    """
    changes = {}
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition(":")
        if not sep:
            raise ConfigError(f"Invalid config line {number}: {raw!r}")
        key, value = key.strip().lower(), value.strip()
        if key not in _KEYS:
            raise ConfigError(f"Unknown config key {key!r} on line {number}")
        field_name, parser = _KEYS[key]
        try:
            changes[field_name] = parser(value)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {key!r} on line {number}: {e}") from e

    config = dataclasses.replace(base or GameConfig(), **changes)
    return config.validate()


def load_config(filepath, base: Optional[GameConfig] = None) -> GameConfig:
    """Load a config file."""
    try:
        text = Path(filepath).read_text()
    except OSError as e:
        raise ConfigError(f"Couldn't read config file {filepath}: {e}") from e
    return parse_config(text, base)
