"""
Board constants for the snake board core.
"""

from enum import Enum


class Direction(str, Enum):
    """Heading of the snake. Values double as the wire format."""

    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    LEFT = "LEFT"


VALID_DIRECTIONS = frozenset(Direction)

# Board settings used when no configuration is supplied
DEFAULT_CELL_SIZE = 10
DEFAULT_WIDTH = 500
DEFAULT_HEIGHT = 500
DEFAULT_SNAKE_LENGTH = 3
