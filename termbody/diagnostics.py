from __future__ import annotations
import itertools, math
import numpy as np
from typing import Tuple, TYPE_CHECKING
if TYPE_CHECKING:
    from .simulation import NBodySimulation

"""
This module computes read-only observables of a running simulation. The Diagnostics class provides kinetic energy, pairwise Newtonian potential energy, total linear momentum and the centre of mass. The potential is the plain -G m_i m_j / r sum over unordered pairs; the proximity skip and mass cutoff used by the force pass are deliberately not applied, so the energy reported is the physical one and drifts when those filters bite. Nothing here mutates the simulation. It assumes positive masses.

"""




class Diagnostics:

	def __init__(self, simulation: "NBodySimulation"):
		self.sim = simulation

	def kinetic_energy(self) -> float:
		st = self.sim.state
		v2 = np.einsum("ij,ij->i", st.vel, st.vel)
		return float(0.5 * np.sum(st.mass * v2))

	def potential_energy(self) -> float:
		s = 0.0
		G = self.sim.G
		for a, b in itertools.combinations(self.sim.bodies, 2):
			dx = b.x - a.x
			dy = b.y - a.y
			r = math.hypot(dx, dy)
			if r > 0.0:
				s -= G * a.mass * b.mass / r
		return s

	def total_energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def linear_momentum(self) -> Tuple[float, float]:
		st = self.sim.state
		p = np.sum(st.mass[:, None] * st.vel, axis=0)
		return float(p[0]), float(p[1])

	def center_of_mass(self) -> Tuple[float, float]:
		st = self.sim.state
		total_mass = float(np.sum(st.mass))
		if total_mass == 0.0:
			return 0.0, 0.0
		com = np.sum(st.mass[:, None] * st.pos, axis=0) / total_mass
		return float(com[0]), float(com[1])

	def summary(self) -> str:
		x, y = self.center_of_mass()
		return (f"t={self.sim.steps_taken} n={self.sim.n_bodies} "
				f"KE={self.kinetic_energy():.4g} com=({x:.2f}, {y:.2f})")
