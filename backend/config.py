"""
Runtime configuration for the snake board.

Values come from the environment (a local .env file is honoured) and fall
back to the classic 500x500 board with 10px cells and a 3-block snake.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from domain.board_state import BoardState, initialize_board
from domain.constants import (
    DEFAULT_CELL_SIZE,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_SNAKE_LENGTH,
)
from domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 100
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class BoardConfig:
    cell_size: int = DEFAULT_CELL_SIZE
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    initial_length: int = DEFAULT_SNAKE_LENGTH
    history_limit: int = DEFAULT_HISTORY_LIMIT
    log_level: str = DEFAULT_LOG_LEVEL

    def initial_board(self) -> BoardState:
        """Build the starting snapshot for this configuration."""
        return initialize_board(self.cell_size, self.width, self.height, self.initial_length)


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def load_config(env: Optional[Mapping[str, str]] = None) -> BoardConfig:
    """
    Read the board configuration.

    Args:
        env: mapping to read from. Defaults to ``os.environ`` after loading .env.

    Raises:
        ConfigurationError: a value is not an integer, the history limit is
            negative, or the log level is unknown.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    history_limit = _int_setting(env, "SNAKE_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)
    if history_limit < 0:
        raise ConfigurationError(f"SNAKE_HISTORY_LIMIT must not be negative, got {history_limit}")

    log_level = (env.get("SNAKE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"SNAKE_LOG_LEVEL is not a logging level: {log_level!r}")

    config = BoardConfig(
        cell_size=_int_setting(env, "SNAKE_CELL_SIZE", DEFAULT_CELL_SIZE),
        width=_int_setting(env, "SNAKE_BOARD_WIDTH", DEFAULT_WIDTH),
        height=_int_setting(env, "SNAKE_BOARD_HEIGHT", DEFAULT_HEIGHT),
        initial_length=_int_setting(env, "SNAKE_INITIAL_LENGTH", DEFAULT_SNAKE_LENGTH),
        history_limit=history_limit,
        log_level=log_level,
    )
    logger.debug(f"Loaded board config: {config}")
    return config
