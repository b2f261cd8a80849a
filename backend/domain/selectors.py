"""
Read-only projections of a BoardState.

Every selector is a plain function of the snapshot (or of another selector),
so re-deriving on each render is always correct.
"""

from functools import lru_cache

from .board_state import BoardState, Grid
from .constants import Direction
from .geometry import Vector, displacement
from .snake import Snake


def is_playing(state: BoardState) -> bool:
    return state.is_playing


def get_snake(state: BoardState) -> Snake:
    return state.snake


def get_grid(state: BoardState) -> Grid:
    return state.grid


def get_snake_direction(state: BoardState) -> Direction:
    return get_snake(state).direction


@lru_cache(maxsize=64)
def _velocity(direction: Direction, cell_size: int) -> Vector:
    return displacement(direction, cell_size)


def get_snake_velocity(state: BoardState) -> Vector:
    """
    The displacement for one Move: one cell in the current heading.

    This is what external schedulers should pass to ``Move``.
    """
    return _velocity(get_snake_direction(state), get_grid(state).cell_size)
