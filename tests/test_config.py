import pytest

from pathfinder.app.config import VisualizerConfig, clamp_speed, parse_args
from pathfinder.domain.types import Algorithm


def test_defaults():
    config = parse_args([])
    assert config.grid_size == 15
    assert config.speed == 50
    assert config.algorithm is Algorithm.ASTAR
    assert config.algo.update_open_on_improvement is False


def test_parse_args_overrides():
    config = parse_args([
        "--grid-size", "20", "--speed", "500", "--algorithm", "dijkstra",
        "--update-open-on-improvement", "--log-level", "debug",
    ])
    assert config.grid_size == 20
    assert config.speed == 200
    assert config.algorithm is Algorithm.DIJKSTRA
    assert config.algo.update_open_on_improvement is True
    assert config.log_level == "debug"


def test_parse_args_rejects_tiny_grid():
    with pytest.raises(SystemExit):
        parse_args(["--grid-size", "1"])


def test_clamp_speed():
    assert clamp_speed(0) == 10
    assert clamp_speed(120) == 120
    assert clamp_speed(999) == 200


def test_config_rejects_tiny_grid():
    with pytest.raises(ValueError):
        VisualizerConfig(grid_size=1)
