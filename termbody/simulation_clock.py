"""
This module implements the fixed-step simulation clock.

SimulationClock advances a logical current_time by a constant delta on every tick. The
delta is configuration, never measured wall-clock time, so the physics is decoupled
from how fast frames are actually produced; pacing belongs to the run loop.
"""

from __future__ import annotations
import math

from .errors import ConfigurationError




class SimulationClock:
	def __init__(self, delta_time: float = 1.0 / 60.0, current_time: float = 0.0) -> None:
		delta_time = float(delta_time)
		if not math.isfinite(delta_time) or delta_time <= 0.0:
			raise ConfigurationError(f"delta_time must be a positive finite number, got {delta_time!r}")
		self._delta_time = delta_time
		self.current_time = float(current_time)
		self.steps = 0

	@classmethod
	def from_config(cls, cfg) -> "SimulationClock":
		return cls(cfg.delta_time)

	@property
	def delta_time(self) -> float:
		return self._delta_time

	def tick(self) -> float:
		self.current_time += self._delta_time
		self.steps += 1
		return self.current_time

	def __repr__(self) -> str:
		return f"SimulationClock(current_time={self.current_time}, delta_time={self._delta_time})"
