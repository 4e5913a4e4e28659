"""Launch configuration for the visualizer."""

import argparse
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..domain.grid import DEFAULT_GRID_SIZE
from ..domain.types import Algorithm, AlgoConfig
from .scheduler import DEFAULT_INTERVAL_MS, MAX_INTERVAL_MS, MIN_INTERVAL_MS


def clamp_speed(interval_ms: int) -> int:
    """Clamp a reveal interval to the supported range."""
    return max(MIN_INTERVAL_MS, min(MAX_INTERVAL_MS, int(interval_ms)))


@dataclass
class VisualizerConfig:
    """Settings the controller is created with."""
    grid_size: int = DEFAULT_GRID_SIZE
    speed: int = DEFAULT_INTERVAL_MS  # milliseconds between reveal steps
    algorithm: Algorithm = Algorithm.ASTAR
    log_level: str = "WARNING"
    algo: AlgoConfig = field(default_factory=AlgoConfig)

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"Grid size must be at least 2, got {self.grid_size}")
        self.speed = clamp_speed(self.speed)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathfinder",
        description="Interactive A* / Dijkstra pathfinding visualizer",
    )
    parser.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE,
                        help=f"Side length of the square grid (default: {DEFAULT_GRID_SIZE})")
    parser.add_argument("--speed", type=int, default=DEFAULT_INTERVAL_MS,
                        help=f"Milliseconds between reveal steps, {MIN_INTERVAL_MS}-{MAX_INTERVAL_MS} "
                             f"(default: {DEFAULT_INTERVAL_MS})")
    parser.add_argument("--algorithm", choices=["astar", "dijkstra"], default="astar",
                        help="Initially selected algorithm")
    parser.add_argument("--update-open-on-improvement", action="store_true",
                        help="Let A* replace a queued node when a cheaper route to it is found")
    parser.add_argument("--log-level", default="WARNING",
                        help="Python logging level")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> VisualizerConfig:
    """Parse command-line arguments into a VisualizerConfig."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.grid_size < 2:
        parser.error("--grid-size must be at least 2")

    return VisualizerConfig(
        grid_size=args.grid_size,
        speed=args.speed,
        algorithm=Algorithm.from_name(args.algorithm),
        log_level=args.log_level,
        algo=AlgoConfig(update_open_on_improvement=args.update_open_on_improvement),
    )


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
