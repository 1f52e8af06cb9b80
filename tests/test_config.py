import pytest

from backtrack_maze import config
from backtrack_maze.config import MazeConfig, parse_args


def test_defaults():
    cfg = parse_args([])
    assert cfg == MazeConfig()
    assert (cfg.width, cfg.height) == (config.DEFAULT_WIDTH, config.DEFAULT_HEIGHT)
    assert cfg.fast_build is True
    assert cfg.fast_solve is False
    assert cfg.seed is None


def test_overrides():
    cfg = parse_args(["--width", "10", "--height", "3", "--no-fast-build", "--fast-solve",
                      "--seed", "7", "--log-level", "DEBUG"])
    assert cfg == MazeConfig(10, 3, False, True, 7, "DEBUG")


def test_bad_size_exits():
    with pytest.raises(SystemExit):
        parse_args(["--width", "0"])


def test_config_validation():
    with pytest.raises(ValueError):
        MazeConfig(height=0)
    with pytest.raises(ValueError):
        MazeConfig(log_level="LOUD")
