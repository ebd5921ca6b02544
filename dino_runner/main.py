"""
main.py
-------
Command-line entry point: parses flags, loads config and runs the window.

Usage:
    dino-runner
    dino-runner --fps 30 --time-scaled-physics
    python -m dino_runner --config my_game.json --seed 7 --log-level VERBOSE
"""

import argparse
import os
import random
import sys

from dino_runner.core.debug.debug_logger import DebugLogger
from dino_runner.core.runtime.game_config import load_game_config
from dino_runner.core.runtime.game_settings import Debug, Display


def build_parser():
    parser = argparse.ArgumentParser(description="Single-lane runner: jump over the obstacles.")
    parser.add_argument("--config", default=None,
                        help="Game config file (default: bundled game.json)")
    parser.add_argument("--fps", type=int, default=Display.FPS,
                        help="Frame rate cap")
    parser.add_argument("--time-scaled-physics", action="store_true",
                        help="Scale gravity and jump steps by frame time")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for obstacle sizes")
    parser.add_argument("--log-level", default="INFO",
                        choices=sorted(DebugLogger.LEVEL_VALUES, key=DebugLogger.LEVEL_VALUES.get),
                        help="Console log verbosity")
    parser.add_argument("--show-hitboxes", action="store_true",
                        help="Outline collision boxes")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.fps <= 0:
        print("--fps must be positive", file=sys.stderr)
        return 2

    DebugLogger.set_level(args.log_level)
    Debug.HITBOX_VISIBLE = args.show_hitboxes

    overrides = {}
    if args.time_scaled_physics:
        overrides["physics"] = {"time_scaled": True}
    config_path = os.path.abspath(args.config) if args.config else "game.json"
    config = load_game_config(config_path, overrides)

    # Imported here so --help works without opening a window
    from dino_runner.core.runtime.game_loop import GameLoop

    rng = random.Random(args.seed) if args.seed is not None else None
    GameLoop(config, fps=args.fps, rng=rng).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
