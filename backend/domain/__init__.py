"""
Domain entities for the snake board core.

This module contains the board state, the actions and the pure reducer that
maps one onto the other. Nothing here touches I/O, timers or rendering.
"""

from .constants import Direction, VALID_DIRECTIONS
from .errors import (
    SnakeBoardError,
    ConfigurationError,
    InvalidDirectionError,
    InvalidActionError,
    InvalidSnapshotError,
)
from .geometry import Vector, displacement
from .snake import Block, Snake
from .board_state import Grid, BoardState, DEFAULT_BOARD, initial_snake, initialize_board
from .actions import (
    Action,
    Play,
    Pause,
    Tick,
    Move,
    ChangeDirection,
    ForeignAction,
    action_from_dict,
    action_to_dict,
)
from .reducer import snake_board_reducer
from .selectors import (
    is_playing,
    get_snake,
    get_grid,
    get_snake_direction,
    get_snake_velocity,
)

__all__ = [
    'Direction', 'VALID_DIRECTIONS',
    'SnakeBoardError', 'ConfigurationError', 'InvalidDirectionError',
    'InvalidActionError', 'InvalidSnapshotError',
    'Vector', 'displacement',
    'Block', 'Snake',
    'Grid', 'BoardState', 'DEFAULT_BOARD', 'initial_snake', 'initialize_board',
    'Action', 'Play', 'Pause', 'Tick', 'Move', 'ChangeDirection', 'ForeignAction',
    'action_from_dict', 'action_to_dict',
    'snake_board_reducer',
    'is_playing', 'get_snake', 'get_grid', 'get_snake_direction', 'get_snake_velocity',
]
