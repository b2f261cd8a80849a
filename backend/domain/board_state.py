"""
BoardState entity - a snapshot of the board at a point in time.

Snapshots are frozen; every transition builds a new one, so keeping a list
of them is enough for undo and replay.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .constants import (
    Direction,
    DEFAULT_CELL_SIZE,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_SNAKE_LENGTH,
)
from .errors import ConfigurationError, InvalidDirectionError, InvalidSnapshotError
from .geometry import displacement
from .snake import Block, Snake


def _require_positive_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class Grid:
    """
    Board configuration.

    Attributes:
        cell_size: unit of movement and of initial block spacing
        width, height: board dimensions, only used for configuration

    All three must be positive integers.
    """

    cell_size: int
    width: int
    height: int

    def __post_init__(self):
        _require_positive_int("cell_size", self.cell_size)
        _require_positive_int("width", self.width)
        _require_positive_int("height", self.height)

    def to_dict(self) -> dict:
        return {"cellSize": self.cell_size, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class BoardState:
    """
    A snapshot of the board at a specific point in time.

    Attributes:
        is_playing: whether the simulation is running
        tick_interval: milliseconds between ticks; None whenever paused
        tick_count: number of ticks seen so far (starts at 0)
        snake: the snake body and heading
        grid: board configuration
    """

    is_playing: bool
    tick_count: int
    snake: Snake
    grid: Grid
    tick_interval: Optional[float] = None

    def __post_init__(self):
        if not self.is_playing and self.tick_interval is not None:
            raise InvalidSnapshotError(
                f"A paused board cannot carry a tick interval, got {self.tick_interval!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the snapshot shape consumed by renderers.

        ``tickInterval`` is only present while an interval is set.
        """
        data: Dict[str, Any] = {"isPlaying": self.is_playing}
        if self.tick_interval is not None:
            data["tickInterval"] = self.tick_interval
        data["tickCount"] = self.tick_count
        data["snake"] = self.snake.to_dict()
        data["grid"] = self.grid.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoardState":
        """
        Rebuild a snapshot produced by ``to_dict``.

        Raises:
            InvalidSnapshotError: a required key is missing or has the wrong
                type, the snake has no blocks, or a paused snapshot carries
                a tick interval.
            InvalidDirectionError: the snake direction is not a known Direction.
            ConfigurationError: the grid values are not positive integers.
        """
        try:
            snake_data = data["snake"]
            grid_data = data["grid"]
            raw_direction = snake_data["direction"]
            blocks = tuple(Block(x=b["x"], y=b["y"]) for b in snake_data["blocks"])
            cell_size = grid_data["cellSize"]
            width = grid_data["width"]
            height = grid_data["height"]
            is_playing = bool(data["isPlaying"])
            tick_count = int(data["tickCount"])
        except (KeyError, TypeError) as exc:
            raise InvalidSnapshotError(f"Malformed board snapshot: {exc!r}") from exc

        try:
            direction = Direction(raw_direction)
        except ValueError as exc:
            raise InvalidDirectionError(raw_direction) from exc

        return cls(
            is_playing=is_playing,
            tick_count=tick_count,
            snake=Snake(blocks=blocks, direction=direction),
            grid=Grid(cell_size=cell_size, width=width, height=height),
            tick_interval=data.get("tickInterval"),
        )

    def __repr__(self):
        return (
            f"<BoardState playing={self.is_playing}, ticks={self.tick_count}, "
            f"head={self.snake.head}, direction={self.snake.direction.value}>"
        )


def initial_snake(
    length: int,
    tail_x: int,
    tail_y: int,
    direction: Direction,
    cell_size: int,
) -> Snake:
    """
    Lay out ``length`` blocks from the tail towards the head along ``direction``.

    Block i (counted from the tail) sits i cell steps ahead of the tail.
    """
    dx, dy = displacement(direction, cell_size)
    blocks = tuple(
        Block(x=tail_x + dx * index, y=tail_y + dy * index)
        for index in range(length)
    )
    return Snake(blocks=blocks, direction=direction)


def initialize_board(
    cell_size: int,
    width: int,
    height: int,
    initial_length: int,
) -> BoardState:
    """
    Build the starting board: paused, no ticks, snake heading RIGHT with its
    tail anchored at (cell_size, cell_size).

    Args:
        cell_size: size of one grid cell, also the distance covered per move
        width: board width
        height: board height
        initial_length: number of blocks in the starting snake

    Raises:
        ConfigurationError: any dimension is not a positive integer, or the
            length is below 1.
    """
    grid = Grid(cell_size=cell_size, width=width, height=height)
    _require_positive_int("initial_length", initial_length)

    return BoardState(
        is_playing=False,
        tick_count=0,
        grid=grid,
        snake=initial_snake(initial_length, cell_size, cell_size, Direction.RIGHT, cell_size),
    )


DEFAULT_BOARD = initialize_board(
    DEFAULT_CELL_SIZE, DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_SNAKE_LENGTH
)
