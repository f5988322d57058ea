from __future__ import annotations
import math
from typing import TYPE_CHECKING

from .errors import ConfigurationError

if TYPE_CHECKING:
	from .simulation_state import SimulationState

"""
This module implements the semi-implicit (symplectic) Euler integrator that turns each body's accumulated force into motion. A step is a kick, velocity += force / mass * dt, followed by a drift that moves the position with the freshly updated velocity, position += velocity * dt, and finally a reset of the force accumulator so the next step starts from zero. The kick-then-drift order is what keeps long-running orbits bounded; the explicit Euler order (drift with the old velocity) spirals outward and must not be substituted. Every body touches only its own row of the state arrays, so the update is a pair of whole-array numpy operations. The integrator assumes the force pass for the step has already finished.

"""

def check_delta(dt: float) -> float:
	dt = float(dt)
	if not math.isfinite(dt) or dt <= 0.0:
		raise ConfigurationError(f"time delta must be a positive finite number, got {dt!r}")
	return dt


class Integrator:

	def __init__(self, state: "SimulationState") -> None:
		self.state = state
		self._steps = 0

	@property
	def steps(self) -> int:
		return self._steps

	def kick(self, dt: float) -> None:
		st = self.state
		st._vel += st._force / st._mass[:, None] * dt

	def drift(self, dt: float) -> None:
		st = self.state
		st._pos += st._vel * dt

	def step(self, dt: float) -> None:
		dt = check_delta(dt)
		if self.state.n_bodies == 0:
			self._steps += 1
			return

		self.kick(dt)
		self.drift(dt)
		self.state.reset_forces()
		self._steps += 1
