"""
BoardStore - the single owner of the current board snapshot.

Input handlers, schedulers and renderers talk to the board through one
store instance instead of a process-wide singleton. The store is
synchronous and not thread-safe: dispatches must be serialized by the caller.
"""

import logging
from collections import deque
from typing import Callable, Deque, List, Optional, Tuple

from config import DEFAULT_HISTORY_LIMIT
from domain.actions import Action, ChangeDirection, Move, Pause, Play, Tick
from domain.board_state import DEFAULT_BOARD, BoardState
from domain.constants import Direction
from domain.reducer import snake_board_reducer
from domain.selectors import get_snake_velocity, is_playing

logger = logging.getLogger(__name__)

Reducer = Callable[[Optional[BoardState], Action], BoardState]
Listener = Callable[[Action, BoardState], None]


class BoardStore:
    """
    Holds the latest BoardState and a bounded log of previous snapshots.

    Attributes:
        initial_state: snapshot the store starts from and resets to
        history_limit: how many previous snapshots are kept for undo (0 = none)
    """

    def __init__(
        self,
        initial_state: Optional[BoardState] = None,
        reducer: Reducer = snake_board_reducer,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        if history_limit < 0:
            raise ValueError(f"history_limit must not be negative, got {history_limit}")
        self.initial_state = initial_state if initial_state is not None else DEFAULT_BOARD
        self.history_limit = history_limit
        self._reducer = reducer
        self._state = self.initial_state
        self._history: Deque[BoardState] = deque(maxlen=history_limit)
        self._listeners: List[Listener] = []

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def history(self) -> Tuple[BoardState, ...]:
        """Previous snapshots, oldest first."""
        return tuple(self._history)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register ``listener(action, new_state)``; it runs after every dispatch.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> BoardState:
        """Run ``action`` through the reducer and publish the resulting snapshot."""
        previous = self._state
        new_state = self._reducer(previous, action)

        if new_state is not previous:
            if self.history_limit:
                self._history.append(previous)
            self._state = new_state
            logger.debug(f"Dispatched {action!r} -> {new_state!r}")
        else:
            logger.debug(f"Ignored {action!r}")

        for listener in list(self._listeners):
            listener(action, self._state)
        return self._state

    def undo(self) -> BoardState:
        """
        Restore the snapshot that preceded the last state change.

        Raises:
            IndexError: there is nothing to undo.
        """
        if not self._history:
            raise IndexError("undo from empty history")
        self._state = self._history.pop()
        logger.info(f"Undo -> {self._state!r} ({len(self._history)} snapshots left)")
        return self._state

    def reset(self, state: Optional[BoardState] = None) -> BoardState:
        """Drop all history and start again from ``state`` (or the initial snapshot)."""
        if state is not None:
            self.initial_state = state
        self._state = self.initial_state
        self._history.clear()
        logger.info(f"Board reset to {self._state!r}")
        return self._state

    # Thin helpers for the input and scheduling layers

    def play(self, tick_interval: float) -> BoardState:
        return self.dispatch(Play(tick_interval=tick_interval))

    def pause(self) -> BoardState:
        return self.dispatch(Pause())

    def turn(self, direction: Direction) -> BoardState:
        return self.dispatch(ChangeDirection(payload=direction))

    def step(self) -> BoardState:
        """
        One scheduler beat: Tick, then Move by the current velocity.

        Does nothing while paused.
        """
        if not is_playing(self._state):
            logger.debug("Step skipped: board is paused")
            return self._state
        self.dispatch(Tick())
        return self.dispatch(Move(payload=get_snake_velocity(self._state)))
