import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
from config import BoardConfig, load_config  # noqa: E402
from domain import Block, ConfigurationError  # noqa: E402


def test_defaults_from_empty_env():
    cfg = load_config({})
    assert cfg == BoardConfig()
    assert (cfg.cell_size, cfg.width, cfg.height, cfg.initial_length) == (10, 500, 500, 3)
    assert cfg.history_limit == 100
    assert cfg.log_level == "INFO"


def test_reads_overrides():
    cfg = load_config({
        "SNAKE_CELL_SIZE": "20",
        "SNAKE_BOARD_WIDTH": " 400 ",
        "SNAKE_BOARD_HEIGHT": "300",
        "SNAKE_INITIAL_LENGTH": "5",
        "SNAKE_HISTORY_LIMIT": "0",
        "SNAKE_LOG_LEVEL": "debug",
    })
    assert cfg == BoardConfig(
        cell_size=20, width=400, height=300, initial_length=5, history_limit=0, log_level="DEBUG"
    )


def test_blank_values_fall_back_to_defaults():
    assert load_config({"SNAKE_CELL_SIZE": "  "}).cell_size == 10


@pytest.mark.parametrize("env", [
    {"SNAKE_CELL_SIZE": "ten"},
    {"SNAKE_BOARD_WIDTH": "1.5"},
    {"SNAKE_HISTORY_LIMIT": "-1"},
    {"SNAKE_LOG_LEVEL": "LOUD"},
])
def test_rejects_bad_values(env):
    with pytest.raises(ConfigurationError):
        load_config(env)


def test_initial_board_uses_config():
    state = BoardConfig(cell_size=5, width=50, height=50, initial_length=2).initial_board()
    assert state.snake.blocks == (Block(5, 5), Block(10, 5))
    assert state.grid.cell_size == 5


def test_initial_board_validates_dimensions():
    with pytest.raises(ConfigurationError):
        BoardConfig(cell_size=0).initial_board()


def test_load_config_reads_process_env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    monkeypatch.setenv("SNAKE_INITIAL_LENGTH", "7")
    monkeypatch.delenv("SNAKE_CELL_SIZE", raising=False)
    cfg = load_config()
    assert cfg.initial_length == 7
    assert cfg.cell_size == 10
