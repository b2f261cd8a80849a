"""
Snake entity for the board core.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import Direction
from .errors import InvalidDirectionError, InvalidSnapshotError


@dataclass(frozen=True)
class Block:
    """
    A single body segment.

    Only positional today; extra attributes (e.g. colour) may be added and
    are carried along when the snake moves.
    """

    x: int
    y: int

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Snake:
    """
    Represents the snake on the board.

    Attributes:
        blocks: tuple of Block from tail at index 0 to head at the end
        direction: current heading
    """

    blocks: Tuple[Block, ...]
    direction: Direction

    def __post_init__(self):
        if not isinstance(self.direction, Direction):
            raise InvalidDirectionError(self.direction)
        if not self.blocks:
            raise InvalidSnapshotError("A snake needs at least one block")

    @property
    def head(self) -> Block:
        """Return the head block (last element)."""
        return self.blocks[-1]

    @property
    def tail(self) -> Block:
        """Return the tail block (first element)."""
        return self.blocks[0]

    def __len__(self) -> int:
        return len(self.blocks)

    def to_dict(self) -> dict:
        return {
            "blocks": [block.to_dict() for block in self.blocks],
            "direction": self.direction.value,
        }
