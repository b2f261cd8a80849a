"""
Grid geometry: direction -> displacement vector.
"""

from typing import NamedTuple

from .constants import Direction
from .errors import InvalidDirectionError


class Vector(NamedTuple):
    """A displacement in grid units. For a heading exactly one axis is non-zero."""

    dx: int
    dy: int

    def to_dict(self) -> dict:
        return {"dx": self.dx, "dy": self.dy}


def displacement(direction: Direction, magnitude: int) -> Vector:
    """
    Return the displacement for one step of ``magnitude`` along ``direction``.

    Screen coordinates are used, so UP decreases y.

    Raises:
        InvalidDirectionError: ``direction`` is not a Direction member. Plain
            strings are rejected too; decode them with ``Direction(value)`` first.
    """
    if not isinstance(direction, Direction):
        raise InvalidDirectionError(direction)

    match direction:
        case Direction.UP:
            return Vector(0, -magnitude)
        case Direction.RIGHT:
            return Vector(magnitude, 0)
        case Direction.DOWN:
            return Vector(0, magnitude)
        case Direction.LEFT:
            return Vector(-magnitude, 0)
        case _:
            raise InvalidDirectionError(direction)
