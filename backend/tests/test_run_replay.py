"""
Tests for the run_replay CLI.

Configuration loading is stubbed so the tests do not depend on a local .env.
"""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import cli.run_replay as run_replay  # noqa: E402
from config import BoardConfig  # noqa: E402
from domain import ConfigurationError, Play, Tick, Move, Vector, initialize_board  # noqa: E402
from services.replay import record_replay, save_replay  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_config(monkeypatch):
    monkeypatch.setattr(
        run_replay, "load_config", lambda: BoardConfig(cell_size=10, initial_length=2)
    )


@pytest.fixture
def replay_path(tmp_path):
    replay = record_replay(
        initialize_board(10, 500, 500, 3),
        [Play(tick_interval=100), Tick(), Move(payload=Vector(10, 0))],
    )
    return save_replay(replay, str(tmp_path / "session.json"))


def test_prints_final_snapshot(replay_path, capsys):
    assert run_replay.main([replay_path]) == 0

    final = json.loads(capsys.readouterr().out)
    assert final["tickCount"] == 1
    assert final["tickInterval"] == 100
    assert final["snake"]["blocks"][-1] == {"x": 40, "y": 10}


def test_all_frames_to_file(replay_path, tmp_path):
    output = str(tmp_path / "out" / "frames.json")
    assert run_replay.main([replay_path, "--all-frames", "--output", output]) == 0

    with open(output) as f:
        frames = json.load(f)
    assert [frame["tickCount"] for frame in frames] == [0, 0, 1, 1]


def test_verify_passes(replay_path):
    assert run_replay.main([replay_path, "--verify"]) == 0


def test_verify_fails_on_tampered_replay(replay_path):
    with open(replay_path) as f:
        replay = json.load(f)
    replay["frames"][-1]["state"]["snake"]["blocks"][0]["x"] = -1
    with open(replay_path, "w") as f:
        json.dump(replay, f)

    assert run_replay.main([replay_path, "--verify"]) == 1


def test_missing_replay_file(tmp_path):
    assert run_replay.main([str(tmp_path / "missing.json")]) == 2


def test_record_from_actions(tmp_path):
    actions_path = tmp_path / "actions.json"
    actions_path.write_text(json.dumps([
        {"type": "PLAY", "tickInterval": 50},
        {"type": "SNAKE_CHANGE_DIRECTION", "payload": "UP"},
        {"type": "SNAKE_MOVE", "payload": {"dx": 0, "dy": -10}},
        {"type": "SOMETHING_ELSE"},
    ]))
    output = str(tmp_path / "recorded.json")

    assert run_replay.main(["--actions", str(actions_path), "--output", output]) == 0

    with open(output) as f:
        replay = json.load(f)
    # The starting board comes from the (stubbed) configuration.
    assert replay["initial_state"]["snake"]["blocks"] == [{"x": 10, "y": 10}, {"x": 20, "y": 10}]
    assert replay["frames"][-1]["state"]["snake"]["blocks"] == [{"x": 20, "y": 10}, {"x": 20, "y": 0}]


def test_bad_action_record(tmp_path):
    actions_path = tmp_path / "actions.json"
    actions_path.write_text(json.dumps([{"type": "SNAKE_CHANGE_DIRECTION", "payload": "NORTH"}]))
    assert run_replay.main(["--actions", str(actions_path)]) == 2


def test_configuration_error(monkeypatch, replay_path, capsys):
    def broken():
        raise ConfigurationError("SNAKE_CELL_SIZE must be an integer")

    monkeypatch.setattr(run_replay, "load_config", broken)
    assert run_replay.main([replay_path]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_requires_an_input():
    with pytest.raises(SystemExit):
        run_replay.main([])


@pytest.mark.parametrize("flag", ["--verify", "--all-frames"])
def test_replay_only_flags_rejected_with_actions(tmp_path, flag):
    actions_path = tmp_path / "actions.json"
    actions_path.write_text("[]")
    with pytest.raises(SystemExit) as excinfo:
        run_replay.main(["--actions", str(actions_path), flag])
    assert excinfo.value.code == 2
