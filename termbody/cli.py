"""
Command-line entry point: simulate the two-galaxy collision in the terminal.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .diagnostics import Diagnostics
from .errors import ConfigurationError
from .galaxy import two_galaxy_scene
from .renderer import TerminalSink
from .runner import run
from .sim_config import SimConfig
from .simulation import NBodySimulation
from .simulation_clock import SimulationClock


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="termbody",
		description="N-body gravity rendered as ASCII art in the terminal.",
	)
	parser.add_argument("--frames", type=int, default=None,
						help="stop after this many frames (default: run until interrupted)")
	parser.add_argument("--seed", type=int, default=None,
						help="seed for the galaxy generator")
	parser.add_argument("--all-forces", action="store_true",
						help="let every body attract every other (disable the mass cutoff)")
	parser.add_argument("--float32", action="store_true",
						help="run the physics in single precision")
	parser.add_argument("--time-speed", type=float, default=1.0,
						help="wall-clock pacing multiplier")
	parser.add_argument("--width", type=int, default=SimConfig.screen_w,
						help="frame width in characters")
	parser.add_argument("--height", type=int, default=SimConfig.screen_h,
						help="frame height in characters")
	parser.add_argument("--log-level", default="WARNING",
						choices=["DEBUG", "INFO", "WARNING", "ERROR"],
						help="logging level (log output goes to stderr)")
	return parser


def config_from_args(args: argparse.Namespace) -> SimConfig:
	cfg = SimConfig(
		time_speed=args.time_speed,
		screen_w=args.width,
		screen_h=args.height,
		fast_float32=args.float32,
	)
	if args.all_forces:
		cfg.mass_cutoff = None
	return cfg.validate()


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=getattr(logging, args.log_level),
		stream=sys.stderr,
		format="%(asctime)s %(name)s %(levelname)s %(message)s",
	)

	try:
		cfg = config_from_args(args)
		sim = NBodySimulation(cfg, two_galaxy_scene(G=cfg.G, seed=args.seed))
	except ConfigurationError as exc:
		print(f"termbody: {exc}", file=sys.stderr)
		return 2

	clock = SimulationClock.from_config(cfg)
	try:
		run(sim, TerminalSink(), clock, frames=args.frames, time_speed=cfg.time_speed)
	except KeyboardInterrupt:
		logger.info("interrupted")
	logger.info("%s", Diagnostics(sim).summary())
	return 0
