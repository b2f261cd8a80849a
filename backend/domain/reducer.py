"""
The snake board reducer: (state, action) -> next state.

The reducer is pure. It never mutates the incoming snapshot and returns the
same object for actions it does not handle.
"""

from dataclasses import replace
from typing import Optional, Tuple

from .actions import Action, ChangeDirection, Move, Pause, Play, Tick
from .board_state import DEFAULT_BOARD, BoardState
from .geometry import Vector
from .snake import Block


def move_blocks(blocks: Tuple[Block, ...], vector: Vector) -> Tuple[Block, ...]:
    """
    Advance the body one step: every block takes the position of the block
    ahead of it and the head (last block) moves by ``vector``.

    Blocks are copied with ``replace`` so any non-positional attributes stay
    with their segment.
    """
    last = len(blocks) - 1
    moved = []
    for index, block in enumerate(blocks):
        if index < last:
            ahead = blocks[index + 1]
            moved.append(replace(block, x=ahead.x, y=ahead.y))
        else:
            moved.append(replace(block, x=block.x + vector.dx, y=block.y + vector.dy))
    return tuple(moved)


def snake_board_reducer(state: Optional[BoardState], action: Action) -> BoardState:
    """
    Return the board state that results from applying ``action`` to ``state``.

    Args:
        state: current snapshot; None starts from DEFAULT_BOARD
        action: any action; unknown ones leave the state untouched

    Returns:
        A new BoardState, or ``state`` itself when the action is not handled.
    """
    if state is None:
        state = DEFAULT_BOARD

    match action:
        case Play(tick_interval=interval):
            return replace(state, is_playing=True, tick_interval=interval)

        case Pause():
            return replace(state, is_playing=False, tick_interval=None)

        case Tick():
            return replace(state, tick_count=state.tick_count + 1)

        case Move(payload=vector):
            snake = state.snake
            return replace(state, snake=replace(snake, blocks=move_blocks(snake.blocks, vector)))

        case ChangeDirection(payload=direction):
            return replace(state, snake=replace(state.snake, direction=direction))

        case _:
            # e.g. actions of other features sharing the channel
            return state
