#!/usr/bin/env python3
"""
CLI tool to run snake board replays

Usage:
    python run_replay.py <replay.json>
    python run_replay.py --actions <actions.json> --output <replay.json>

--all-frames and --verify only apply to a replay file, not to --actions.

Examples:
    # Print the final snapshot of a stored replay
    python run_replay.py ./replays/session.json

    # Print every snapshot and check them against the stored frames
    python run_replay.py ./replays/session.json --all-frames --verify

    # Record a new replay from a list of action records, starting from the
    # board described by SNAKE_* environment variables
    python run_replay.py --actions ./actions.json --output ./replays/session.json
"""

import argparse
import json
import logging
import os
import sys

# Add backend to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import load_config  # noqa: E402
from domain.actions import action_from_dict  # noqa: E402
from domain.errors import SnakeBoardError  # noqa: E402
from services.replay import (  # noqa: E402
    load_replay,
    record_replay,
    run_replay,
    save_replay,
    verify_replay,
)

logger = logging.getLogger(__name__)


def load_actions(path: str) -> list:
    """Load a JSON list of action records."""
    logger.info(f"Loading actions from {path}")

    if not os.path.exists(path):
        raise FileNotFoundError(f"Actions file not found: {path}")

    with open(path, 'r') as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"Actions file must contain a JSON list: {path}")
    return [action_from_dict(record) for record in records]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Run or record snake board replays',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        'replay',
        nargs='?',
        help='Path to a replay JSON file'
    )
    input_group.add_argument(
        '--actions',
        type=str,
        help='Path to a JSON list of action records to record as a new replay'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Write the result here instead of printing it'
    )
    parser.add_argument(
        '--all-frames',
        action='store_true',
        help="Output every snapshot instead of only the final one (replay files only)"
    )
    parser.add_argument(
        '--verify',
        action='store_true',
        help="Check stored frame states against the reducer (replay files only)"
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='Logging level (default: SNAKE_LOG_LEVEL or INFO)'
    )
    return parser


def _emit(payload, output):
    if output:
        directory = os.path.dirname(output)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output, 'w') as f:
            json.dump(payload, f, indent=2)
        logger.info(f"Wrote {output}")
    else:
        print(json.dumps(payload, indent=2))


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.actions and (args.all_frames or args.verify):
        parser.error("--all-frames and --verify only apply when running a replay file")

    try:
        config = load_config()
    except SnakeBoardError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=args.log_level or config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if args.actions:
            actions = load_actions(args.actions)
            replay = record_replay(config.initial_board(), actions)
            if args.output:
                save_replay(replay, args.output)
            else:
                print(json.dumps(replay, indent=2))
            logger.info(f"[OK] Recorded {len(actions)} actions")
            return 0

        replay = load_replay(args.replay)
        if args.verify and not verify_replay(replay):
            logger.error("Replay verification failed")
            return 1

        states = run_replay(replay)
        if args.all_frames:
            _emit([state.to_dict() for state in states], args.output)
        else:
            _emit(states[-1].to_dict(), args.output)
        logger.info(f"[OK] Replayed {len(states) - 1} actions")
        return 0

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 2


if __name__ == '__main__':
    sys.exit(main())
