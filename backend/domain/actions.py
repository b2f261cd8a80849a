"""
Actions understood by the snake board reducer.

Each action is a frozen dataclass carrying a ``type`` tag that doubles as its
wire name. Records whose tag is not recognised decode into ForeignAction,
which the reducer passes through untouched.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Union

from .constants import Direction
from .errors import InvalidActionError, InvalidDirectionError
from .geometry import Vector

PLAY = "PLAY"
PAUSE = "PAUSE"
TICK = "TICK"
SNAKE_MOVE = "SNAKE_MOVE"
SNAKE_CHANGE_DIRECTION = "SNAKE_CHANGE_DIRECTION"


def _is_finite_number(value: Any) -> bool:
    return (
        not isinstance(value, bool)
        and isinstance(value, (int, float))
        and math.isfinite(value)
    )


def _to_vector(payload: Any) -> Vector:
    """
    Normalise a Move payload: a Vector, a ``{"dx": .., "dy": ..}`` mapping or
    a plain ``(dx, dy)`` pair. Both components must be finite numbers.
    """
    if isinstance(payload, Mapping):
        try:
            dx, dy = payload["dx"], payload["dy"]
        except KeyError as exc:
            raise InvalidActionError(
                f"{SNAKE_MOVE} payload must look like {{'dx': int, 'dy': int}}, got {payload!r}"
            ) from exc
    else:
        try:
            dx, dy = payload
        except (TypeError, ValueError) as exc:
            raise InvalidActionError(
                f"{SNAKE_MOVE} payload must be a (dx, dy) pair, got {payload!r}"
            ) from exc

    if not (_is_finite_number(dx) and _is_finite_number(dy)):
        raise InvalidActionError(
            f"{SNAKE_MOVE} payload values must be finite numbers, got {payload!r}"
        )
    return Vector(dx, dy)


@dataclass(frozen=True)
class Play:
    """Start (or keep) playing with the given interval in milliseconds."""

    type: ClassVar[str] = PLAY
    tick_interval: float

    def __post_init__(self):
        interval = self.tick_interval
        if not _is_finite_number(interval) or interval <= 0:
            raise InvalidActionError(
                f"Play.tick_interval must be a positive number, got {interval!r}"
            )


@dataclass(frozen=True)
class Pause:
    type: ClassVar[str] = PAUSE


@dataclass(frozen=True)
class Tick:
    type: ClassVar[str] = TICK


@dataclass(frozen=True)
class Move:
    """
    Shift the snake one step. The head moves by ``payload``; callers normally
    pass ``get_snake_velocity(state)``.
    """

    type: ClassVar[str] = SNAKE_MOVE
    payload: Vector

    def __post_init__(self):
        object.__setattr__(self, "payload", _to_vector(self.payload))


@dataclass(frozen=True)
class ChangeDirection:
    type: ClassVar[str] = SNAKE_CHANGE_DIRECTION
    payload: Direction

    def __post_init__(self):
        if not isinstance(self.payload, Direction):
            raise InvalidDirectionError(self.payload)


@dataclass(frozen=True)
class ForeignAction:
    """An action that belongs to another feature sharing the dispatch channel."""

    type: str
    payload: Any = None


Action = Union[Play, Pause, Tick, Move, ChangeDirection, ForeignAction]


def _decode_vector(payload: Any) -> Vector:
    # The wire format only carries the mapping form.
    if not isinstance(payload, Mapping):
        raise InvalidActionError(
            f"{SNAKE_MOVE} payload must look like {{'dx': int, 'dy': int}}, got {payload!r}"
        )
    return _to_vector(payload)


def _decode_direction(raw: Any) -> Direction:
    try:
        return Direction(raw)
    except ValueError as exc:
        raise InvalidDirectionError(raw) from exc


def action_from_dict(record: Dict[str, Any]) -> Action:
    """
    Decode a tagged action record.

    Args:
        record: mapping with a ``type`` key plus the variant's fields

    Returns:
        The matching action variant, or ForeignAction for unknown tags.

    Raises:
        InvalidActionError: the record has no tag or a known variant is malformed.
        InvalidDirectionError: a direction change names an unknown direction.
    """
    try:
        action_type = record["type"]
    except (KeyError, TypeError) as exc:
        raise InvalidActionError(f"Action record has no 'type': {record!r}") from exc

    if action_type == PLAY:
        if "tickInterval" not in record:
            raise InvalidActionError(f"{PLAY} requires a tickInterval")
        return Play(tick_interval=record["tickInterval"])
    if action_type == PAUSE:
        return Pause()
    if action_type == TICK:
        return Tick()
    if action_type == SNAKE_MOVE:
        return Move(payload=_decode_vector(record.get("payload")))
    if action_type == SNAKE_CHANGE_DIRECTION:
        return ChangeDirection(payload=_decode_direction(record.get("payload")))
    return ForeignAction(type=action_type, payload=record.get("payload"))


def action_to_dict(action: Action) -> Dict[str, Any]:
    """Encode an action variant as a tagged record (inverse of action_from_dict)."""
    match action:
        case Play(tick_interval=interval):
            return {"type": PLAY, "tickInterval": interval}
        case Pause() | Tick():
            return {"type": action.type}
        case Move(payload=vector):
            return {"type": SNAKE_MOVE, "payload": vector.to_dict()}
        case ChangeDirection(payload=direction):
            return {"type": SNAKE_CHANGE_DIRECTION, "payload": direction.value}
        case ForeignAction(type=action_type, payload=payload):
            record: Dict[str, Any] = {"type": action_type}
            if payload is not None:
                record["payload"] = payload
            return record
        case _:
            raise InvalidActionError(f"Cannot encode {action!r}")
