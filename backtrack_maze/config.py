import argparse
import logging
from dataclasses import dataclass
from typing import Optional

# --- Maze ---
DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 20
DEFAULT_FAST_BUILD = True
DEFAULT_FAST_SOLVE = False

# --- Solved fade-out ---
FADE_INTERVAL = 0.05   # seconds between fade increments
FADE_STEP = 20
FADE_LIMIT = 255

# --- Window ---
VIEWPORT_W = 1200
VIEWPORT_H = 600
CONTROL_PANEL_WIDTH = 220
FPS = 60

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


@dataclass
class MazeConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    fast_build: bool = DEFAULT_FAST_BUILD
    fast_solve: bool = DEFAULT_FAST_SOLVE
    seed: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Maze dimensions must be positive, got {self.width}x{self.height}.")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")


def parse_args(argv=None) -> MazeConfig:
    parser = argparse.ArgumentParser(description="Build a random maze, then watch it get solved.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Maze width in cells.")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Maze height in cells.")
    parser.add_argument("--fast-build", action=argparse.BooleanOptionalAction, default=DEFAULT_FAST_BUILD,
                        help="Finish generation in a single frame.")
    parser.add_argument("--fast-solve", action=argparse.BooleanOptionalAction, default=DEFAULT_FAST_SOLVE,
                        help="Finish solving in a single frame.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible mazes (default: system entropy).")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    try:
        return MazeConfig(args.width, args.height, args.fast_build, args.fast_solve, args.seed, args.log_level)
    except ValueError as e:
        parser.error(str(e))
