"""
Replay persistence for the snake board.

A replay is a JSON document holding the initial snapshot and, for every
dispatched action, the action record and the snapshot it produced:

    {
        "version": 1,
        "initial_state": {...},
        "frames": [
            {"index": 0, "action": {"type": "PLAY", "tickInterval": 100}, "state": {...}},
            ...
        ]
    }

Because the reducer is deterministic, the stored states can always be
recomputed from the initial state and the actions alone.
"""

import json
import logging
import os
from typing import Any, Dict, Iterable, List

from domain.actions import Action, action_from_dict, action_to_dict
from domain.board_state import BoardState
from domain.errors import InvalidSnapshotError
from domain.reducer import snake_board_reducer
from services.board_store import Reducer

logger = logging.getLogger(__name__)

REPLAY_VERSION = 1


def record_replay(
    initial_state: BoardState,
    actions: Iterable[Action],
    reducer: Reducer = snake_board_reducer,
) -> Dict[str, Any]:
    """
    Run ``actions`` from ``initial_state`` and capture every frame.

    Returns:
        A JSON-friendly replay document.
    """
    frames = []
    state = initial_state
    for index, action in enumerate(actions):
        state = reducer(state, action)
        frames.append({
            "index": index,
            "action": action_to_dict(action),
            "state": state.to_dict(),
        })

    return {
        "version": REPLAY_VERSION,
        "initial_state": initial_state.to_dict(),
        "frames": frames,
    }


def _frames(replay: Dict[str, Any]) -> List[Dict[str, Any]]:
    if not isinstance(replay, dict):
        raise InvalidSnapshotError(f"Replay must be a JSON object, got {type(replay).__name__}")
    if replay.get("version") != REPLAY_VERSION:
        raise InvalidSnapshotError(f"Unsupported replay version: {replay.get('version')!r}")
    if "initial_state" not in replay:
        raise InvalidSnapshotError("Replay has no initial_state")
    frames = replay.get("frames", [])
    if not isinstance(frames, list):
        raise InvalidSnapshotError("Replay frames must be a list")
    for frame in frames:
        if not isinstance(frame, dict) or "action" not in frame:
            raise InvalidSnapshotError(f"Replay frame has no action: {frame!r}")
    return frames


def run_replay(
    replay: Dict[str, Any],
    reducer: Reducer = snake_board_reducer,
) -> List[BoardState]:
    """
    Recompute every snapshot of a replay.

    Returns:
        The initial snapshot followed by one snapshot per frame.

    Raises:
        InvalidSnapshotError: the document does not look like a replay.
        InvalidActionError: a stored action record is malformed.
    """
    frames = _frames(replay)
    state = BoardState.from_dict(replay["initial_state"])
    states = [state]
    for frame in frames:
        state = reducer(state, action_from_dict(frame["action"]))
        states.append(state)
    return states


def verify_replay(replay: Dict[str, Any], reducer: Reducer = snake_board_reducer) -> bool:
    """Check that the stored frame states match what the reducer produces."""
    states = run_replay(replay, reducer)
    for frame, state in zip(replay["frames"], states[1:]):
        stored = frame.get("state")
        if stored is None:
            continue
        if stored != state.to_dict():
            logger.warning(f"Replay diverges at frame {frame.get('index')}")
            return False
    return True


def save_replay(replay: Dict[str, Any], path: str) -> str:
    """Write a replay document to ``path`` as JSON and return the path."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(replay, f, indent=2)
    logger.info(f"Saved replay with {len(replay.get('frames', []))} frames to {path}")
    return path


def load_replay(path: str) -> Dict[str, Any]:
    """
    Load a replay document from a JSON file.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        InvalidSnapshotError: the file is not valid JSON or not a replay.
    """
    logger.info(f"Loading replay from local file: {path}")

    if not os.path.exists(path):
        raise FileNotFoundError(f"Replay file not found: {path}")

    with open(path, 'r') as f:
        try:
            replay = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidSnapshotError(f"Replay file is not valid JSON: {path}") from exc

    frames = _frames(replay)
    logger.info(f"Loaded replay with {len(frames)} frames")
    return replay
